"""Delayed automated moves: scheduling, cancellation, and stale-move rejection."""

import threading

import pytest

from Gomoku_Engine.Board import Board, Cell, Position
from Gomoku_Engine.Gomokugame import GameSession
from Gomoku_Engine.Player import Color
from Gomoku_Engine.engine.errors import IllegalPhase, NotYourTurn
from Gomoku_Engine.engine.events import AutomatedMoveScheduled
from Gomoku_Engine.engine.state import GameMode, Phase
from Gomoku_Engine.utils.logger import silent
from Gomoku_Engine.utils import timer


class ManualHandle:
    def __init__(self, fn, args):
        self.fn = fn
        self.args = args
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.fn(*self.args)


class ManualScheduler:
    """Collects scheduled calls so tests decide when (and whether) they run."""

    def __init__(self):
        self.handles = []

    def __call__(self, delay, fn, *args):
        handle = ManualHandle(fn, args)
        self.handles.append(handle)
        return handle


def _delayed_session(automated=Color.WHITE):
    scheduler = ManualScheduler()
    lines = []
    s = GameSession(
        board_size=15,
        automated_player=automated,
        ai_delay=0.75,
        seed=7,
        logger=lines.append,
        scheduler=scheduler,
    )
    return s, scheduler, lines


def test_synchronous_reply_without_delay():
    s = GameSession(board_size=15, seed=1, logger=silent)
    s.select_mode(GameMode.HUMAN_VS_AUTOMATED)
    assert s.automated_player is Color.WHITE
    s.submit_move((7, 7))
    assert len(s.move_history) == 2
    reply = s.move_history[1]
    assert max(abs(reply.row - 7), abs(reply.col - 7)) == 1
    assert s.current_player is Color.BLACK


def test_automated_black_opens_the_game():
    s = GameSession(board_size=15, automated_player=Color.BLACK, seed=1, logger=silent)
    s.select_mode(GameMode.HUMAN_VS_AUTOMATED)
    assert len(s.move_history) == 1
    assert s.current_player is Color.WHITE


def test_human_cannot_move_for_the_automated_player():
    s, scheduler, _ = _delayed_session()
    s.select_mode(GameMode.HUMAN_VS_AUTOMATED)
    s.submit_move((7, 7))
    assert s.has_pending_automated_move
    before = s.cells()
    with pytest.raises(NotYourTurn):
        s.submit_move((7, 8))
    assert s.cells() == before

    scheduler.handles[-1].fire()
    assert len(s.move_history) == 2
    assert s.current_player is Color.BLACK
    assert not s.has_pending_automated_move


def test_scheduled_event_announces_thinking():
    s, _, _ = _delayed_session()
    seen = []
    s.events.subscribe(seen.append, AutomatedMoveScheduled)
    s.select_mode(GameMode.HUMAN_VS_AUTOMATED)
    s.submit_move((0, 0))
    assert seen == [AutomatedMoveScheduled(Color.WHITE, 0.75)]


def test_reset_cancels_pending_move_and_stale_call_is_discarded():
    s, scheduler, lines = _delayed_session()
    s.select_mode(GameMode.HUMAN_VS_AUTOMATED)
    s.submit_move((7, 7))
    pending = scheduler.handles[-1]

    s.reset_keep_mode()
    assert pending.cancelled
    assert not s.has_pending_automated_move

    # The timer fired anyway (cancel raced with it); nothing may change.
    pending.fire()
    assert s.board == Board(15)
    assert s.phase is Phase.IN_PROGRESS
    assert any("discarded" in line for line in lines)

    with pytest.raises(IllegalPhase):
        s.play_automated_move(*pending.args)


def test_stale_call_after_return_to_menu():
    s, scheduler, _ = _delayed_session()
    s.select_mode(GameMode.HUMAN_VS_AUTOMATED)
    s.submit_move((7, 7))
    pending = scheduler.handles[-1]
    s.reset_to_mode_selection()
    assert pending.cancelled
    with pytest.raises(IllegalPhase):
        s.play_automated_move(*pending.args)
    assert s.phase is Phase.AWAITING_MODE_SELECTION


def test_automated_move_out_of_turn_is_illegal():
    s, _, _ = _delayed_session()
    s.select_mode(GameMode.HUMAN_VS_AUTOMATED)
    with pytest.raises(IllegalPhase):
        s.play_automated_move()
    hvh = GameSession(board_size=15, logger=silent)
    hvh.select_mode(GameMode.HUMAN_VS_HUMAN)
    with pytest.raises(IllegalPhase):
        hvh.play_automated_move()


def test_automated_player_takes_its_win():
    s, scheduler, _ = _delayed_session()
    s.select_mode(GameMode.HUMAN_VS_AUTOMATED)
    for col in range(4):
        s.board.set((5, col), Cell.WHITE)
    s.submit_move((10, 10))
    scheduler.handles[-1].fire()
    assert s.phase is Phase.CONCLUDED
    assert s.outcome.winner is Color.WHITE
    assert s.last_move == Position(5, 4)


def test_delayed_call_runs_and_can_be_cancelled():
    fired = threading.Event()
    call = timer.schedule(0.01, fired.set)
    assert fired.wait(2.0)

    skipped = threading.Event()
    call = timer.schedule(0.5, skipped.set)
    call.cancel()
    assert not skipped.wait(0.7)
    assert not call.active


def test_direct_automated_move_cancels_the_scheduled_one():
    s, scheduler, lines = _delayed_session()
    s.select_mode(GameMode.HUMAN_VS_AUTOMATED)
    s.submit_move((7, 7))
    first = scheduler.handles[-1]

    s.play_automated_move()
    assert first.cancelled
    assert len(s.move_history) == 2

    s.submit_move((0, 0))
    second = scheduler.handles[-1]
    assert second is not first

    # The first timer belongs to a finished turn and must not play this one.
    first.fire()
    assert len(s.move_history) == 3
    assert s.is_automated_turn
    assert s.has_pending_automated_move
    assert any("discarded" in line for line in lines)

    s.reset_keep_mode()
    assert second.cancelled


def test_scheduled_token_is_bound_to_the_turn():
    s, scheduler, _ = _delayed_session()
    s.select_mode(GameMode.HUMAN_VS_AUTOMATED)
    s.submit_move((7, 7))
    token = scheduler.handles[-1].args[0]
    s.play_automated_move(token)
    s.submit_move((0, 0))
    with pytest.raises(IllegalPhase):
        s.play_automated_move(token)
    scheduler.handles[-1].fire()
    assert len(s.move_history) == 4
