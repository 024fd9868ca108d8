"""Terminal entry point: load settings, wire a text renderer to a GameSession, read moves."""

import time

try:
    from utils.cli import parse_args
    from utils.config import GameConfig, load_settings, resolve_project_path
    from utils.logger import log_event
    from Gomokugame import GameSession
    from Player import HumanPlayer
    from ai import heuristic
    from engine.events import BoardChanged, GameConcluded, TurnChanged
    from engine.state import GameMode, Phase
except ImportError:
    from Gomoku_Engine.utils.cli import parse_args
    from Gomoku_Engine.utils.config import GameConfig, load_settings, resolve_project_path
    from Gomoku_Engine.utils.logger import log_event
    from Gomoku_Engine.Gomokugame import GameSession
    from Gomoku_Engine.Player import HumanPlayer
    from Gomoku_Engine.ai import heuristic
    from Gomoku_Engine.engine.events import BoardChanged, GameConcluded, TurnChanged
    from Gomoku_Engine.engine.state import GameMode, Phase


COMMANDS = "commands: 'row col' to move, 'reset' (same mode), 'menu' (choose mode), 'quit'"


class TextRenderer:
    """Redraws the board on the terminal from session events."""

    def __init__(self, session, out=print):
        self.session = session
        self.out = out
        session.events.subscribe(self.on_board_changed, BoardChanged)
        session.events.subscribe(self.on_turn_changed, TurnChanged)
        session.events.subscribe(self.on_concluded, GameConcluded)

    def on_board_changed(self, event):
        self.out(str(self.session.board))

    def on_turn_changed(self, event):
        who = "Computer" if event.player is self.session.automated_player else event.player.label
        self.out(f"{who}'s turn ({event.player.label})")

    def on_concluded(self, event):
        self.out(f"Game over: {event.outcome}")


def ask_mode(reader=None):
    reader = reader or input
    while True:
        raw = reader("Mode? [1] human vs human  [2] human vs computer: ").strip().lower()
        if raw in ("1", "human-vs-human"):
            return GameMode.HUMAN_VS_HUMAN
        if raw in ("2", "human-vs-ai"):
            return GameMode.HUMAN_VS_AUTOMATED
        print("Please answer 1 or 2.")


def wait_for_automated(session, poll=0.05):
    while session.is_automated_turn:
        time.sleep(poll)


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)
    config = GameConfig.from_settings(
        settings,
        board_size=args.board_size,
        mode=args.mode,
        difficulty=args.difficulty,
        automated_player=args.automated_player,
        ai_delay_seconds=args.ai_delay,
        seed=args.seed,
    )
    patterns = heuristic.load_patterns(resolve_project_path("config/patterns.yaml"))
    session = GameSession.from_config(config, logger=log_event, patterns=patterns)
    TextRenderer(session)

    next_mode = config.mode
    print(COMMANDS)
    try:
        while True:
            if session.phase is Phase.AWAITING_MODE_SELECTION:
                session.select_mode(next_mode or ask_mode())
                next_mode = None
                print(str(session.board))
            wait_for_automated(session)

            raw = input("> ").strip().lower()
            if raw in ("quit", "exit", "q"):
                break
            if raw == "reset":
                session.reset_keep_mode()
                print(str(session.board))
                continue
            if raw == "menu":
                session.reset_to_mode_selection()
                continue
            if session.phase is Phase.CONCLUDED:
                print("Game is over; type 'reset', 'menu' or 'quit'.")
                continue
            try:
                session.submit_move(HumanPlayer.parse_move(raw))
            except ValueError as exc:
                print(f"Invalid move: {exc}")
    except (EOFError, KeyboardInterrupt):
        print()
    finally:
        if session.phase is not Phase.AWAITING_MODE_SELECTION:
            session.reset_to_mode_selection()


if __name__ == "__main__":
    main()
