"""Game session: turn order, phases, move handling, and the automated opponent."""

import random
import threading

try:
    from Board import Board, Position
    from Player import AutomatedPlayer, Color
    from engine import referee, rules
    from engine.errors import IllegalPhase
    from engine.events import (
        AutomatedMoveScheduled,
        BoardChanged,
        EventBus,
        GameConcluded,
        PhaseChanged,
        TurnChanged,
    )
    from engine.state import Difficulty, GameMode, Outcome, Phase
    from utils import timer
    from utils.logger import log_event
except ImportError:
    from Gomoku_Engine.Board import Board, Position
    from Gomoku_Engine.Player import AutomatedPlayer, Color
    from Gomoku_Engine.engine import referee, rules
    from Gomoku_Engine.engine.errors import IllegalPhase
    from Gomoku_Engine.engine.events import (
        AutomatedMoveScheduled,
        BoardChanged,
        EventBus,
        GameConcluded,
        PhaseChanged,
        TurnChanged,
    )
    from Gomoku_Engine.engine.state import Difficulty, GameMode, Outcome, Phase
    from Gomoku_Engine.utils import timer
    from Gomoku_Engine.utils.logger import log_event


STARTING_PLAYER = Color.BLACK


class GameSession:
    """
    One game session. The session is the only writer of its board; callers drive it
    with select_mode / submit_move / reset_* and observe it through `events`.

    With ai_delay > 0 the automated reply is handed to `scheduler(delay, fn, *args)`,
    which must return an object with cancel(). A reply that fires after a reset or
    after the game ended is rejected as IllegalPhase and discarded.
    """

    def __init__(
        self,
        board_size=15,
        automated_player=Color.WHITE,
        difficulty=Difficulty.EASY,
        ai_delay=0.0,
        seed=None,
        logger=log_event,
        scheduler=timer.schedule,
        patterns=None,
        events=None,
    ):
        # Raises InvalidDimension here instead of at mode selection
        Board(board_size)
        self.board_size = board_size
        if not isinstance(automated_player, Color):
            automated_player = Color[str(automated_player).upper()]
        self.automated_color = automated_player
        self.difficulty = Difficulty(difficulty)
        self.ai_delay = ai_delay
        self.rng = random.Random(seed)
        self.logger = logger
        self.scheduler = scheduler
        self.patterns = patterns
        self.events = events or EventBus()

        self.board = None
        self.mode = None
        self.phase = Phase.AWAITING_MODE_SELECTION
        self.current_player = None
        self._outcome = Outcome.NONE
        self.automated = None
        self.move_history = []
        self._generation = 0
        self._pending = None
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, config, **kwargs):
        return cls(
            board_size=config.board_size,
            automated_player=config.automated_player,
            difficulty=config.difficulty,
            ai_delay=config.ai_delay_seconds,
            seed=config.seed,
            **kwargs,
        )

    # --- read-only accessors ------------------------------------------------

    @property
    def outcome(self):
        return self._outcome if self.phase is Phase.CONCLUDED else Outcome.NONE

    @property
    def automated_player(self):
        return self.automated.color if self.automated else None

    @property
    def is_automated_turn(self):
        return (
            self.phase is Phase.IN_PROGRESS
            and self.automated is not None
            and self.current_player is self.automated.color
        )

    @property
    def has_pending_automated_move(self):
        return self._pending is not None

    @property
    def last_move(self):
        return self.move_history[-1] if self.move_history else None

    def cell_at(self, position):
        referee.check_phase(self.phase, (Phase.IN_PROGRESS, Phase.CONCLUDED), action="read the board")
        return self.board.get(Position(*position))

    def cells(self):
        """Snapshot of the whole grid for a full redraw."""
        referee.check_phase(self.phase, (Phase.IN_PROGRESS, Phase.CONCLUDED), action="read the board")
        return self.board.snapshot()

    # --- input adapter operations ---------------------------------------------

    def select_mode(self, mode, difficulty=None):
        with self._lock:
            referee.check_phase(self.phase, Phase.AWAITING_MODE_SELECTION, action="select a mode")
            self._start(GameMode(mode), Difficulty(difficulty) if difficulty else self.difficulty)

    def submit_move(self, position):
        with self._lock:
            referee.check_move(position, self.board, self.phase, automated_turn=self.is_automated_turn)
            self._apply(Position(*position))

    def reset_keep_mode(self):
        """Start a fresh game with the same mode and difficulty."""
        with self._lock:
            referee.check_phase(self.phase, (Phase.IN_PROGRESS, Phase.CONCLUDED), action="reset")
            self.logger("Reset: new game, same mode")
            self._cancel_pending()
            self._start(self.mode, self.difficulty)

    def reset_to_mode_selection(self):
        with self._lock:
            referee.check_phase(self.phase, (Phase.IN_PROGRESS, Phase.CONCLUDED), action="reset")
            self.logger("Reset: back to mode selection")
            self._cancel_pending()
            self._generation += 1
            self.board = None
            self.mode = None
            self.automated = None
            self.current_player = None
            self.move_history = []
            self._outcome = Outcome.NONE
            self._set_phase(Phase.AWAITING_MODE_SELECTION)

    # --- automated player ---------------------------------------------------

    def play_automated_move(self, token=None):
        """
        Let the automated player move now. `token` is the (game, move number) pair the
        call was scheduled for; a mismatch means that turn is already over.
        """
        with self._lock:
            if token is not None and token != self._turn_token():
                raise IllegalPhase("stale automated move for a turn that is already over")
            referee.check_phase(self.phase, action="play the automated move")
            if not self.is_automated_turn:
                raise IllegalPhase("it is not the automated player's turn")
            self._cancel_pending()
            move = self.automated.next_move(self.board)
            self.logger(f"AI ({self.difficulty.value}) chose {tuple(move)} via {self.automated.last_tier}")
            self._apply(move)

    def _run_scheduled(self, token):
        try:
            self.play_automated_move(token)
        except IllegalPhase as exc:
            self.logger(f"Automated move discarded: {exc}")

    def _trigger_automated(self):
        if self.ai_delay <= 0:
            self.play_automated_move(self._turn_token())
            return
        self.events.publish(AutomatedMoveScheduled(self.current_player, self.ai_delay))
        self.logger(f"Computer ({self.difficulty.value}) thinking...")
        self._pending = self.scheduler(self.ai_delay, self._run_scheduled, self._turn_token())

    def _turn_token(self):
        return (self._generation, len(self.move_history))

    def _cancel_pending(self):
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    # --- state transitions ----------------------------------------------------

    def _start(self, mode, difficulty):
        self._generation += 1
        self.board = Board(self.board_size)
        self.mode = mode
        self.difficulty = Difficulty(difficulty)
        self.current_player = STARTING_PLAYER
        self.move_history = []
        self._outcome = Outcome.NONE
        if mode is GameMode.HUMAN_VS_AUTOMATED:
            self.automated = AutomatedPlayer(self.automated_color, difficulty, rng=self.rng, patterns=self.patterns)
        else:
            self.automated = None
        self.logger(f"New game: {mode.value}" + (f" ({difficulty.value})" if self.automated else ""))
        self._set_phase(Phase.IN_PROGRESS)
        self.events.publish(TurnChanged(self.current_player))
        if self.is_automated_turn:
            self._trigger_automated()

    def _apply(self, position):
        color = self.current_player
        self.board.set(position, color.cell)
        self.move_history.append(position)
        self.events.publish(BoardChanged(position, color.cell))
        self.logger(f"Move {len(self.move_history)}: {color.label[0]} {tuple(position)}")

        won = rules.is_win_after_move(self.board, position, color.cell)
        if won:
            self.logger(f"Winner: {color.label}")
            self._conclude(Outcome.win(color))
        elif rules.is_draw_after_move(self.board, won):
            self.logger("Result: Draw (board full)")
            self._conclude(Outcome.DRAW)
        else:
            self.current_player = color.opponent
            self.events.publish(TurnChanged(self.current_player))
            if self.is_automated_turn:
                self._trigger_automated()

    def _conclude(self, outcome):
        self._cancel_pending()
        self._outcome = outcome
        self._set_phase(Phase.CONCLUDED)
        self.events.publish(GameConcluded(outcome))

    def _set_phase(self, phase):
        self.phase = phase
        self.events.publish(PhaseChanged(phase))
