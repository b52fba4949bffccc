import random

import pytest

from emojiquest.config import Settings
from emojiquest.engine.session import CONFIRM_STATUS, WELCOME_STATUS, GameSession
from emojiquest.errors import SessionTerminatedError
from emojiquest.events import SessionEvent
from emojiquest.models.common import (
    ConfirmInput,
    Direction,
    IdleInput,
    ItemType,
    MoveInput,
    QuitInput,
    SessionState,
)

RIGHT = MoveInput(direction=Direction.RIGHT)


def test_new_session_starts_running():
    s = GameSession.new(random.Random(1), Settings(spiders=0))
    assert s.state == SessionState.RUNNING
    assert s.status == WELCOME_STATUS
    snap = s.snapshot()
    assert len(snap.grid) == 50 and len(snap.grid[0]) == 100
    assert snap.status == WELCOME_STATUS
    assert not s.won


def test_quit_terminates_and_further_input_fails(layout, rng):
    s = GameSession(layout(["@."]), rng)
    assert s.handle(QuitInput()) == SessionState.TERMINATED
    assert s.finished
    with pytest.raises(SessionTerminatedError):
        s.handle(IdleInput())


def test_move_updates_status(layout, rng):
    s = GameSession(layout(["@~"]), rng)
    s.handle(RIGHT)
    assert "can't enter the water" in s.status
    assert s.world.turn == 1


def test_confirm_does_nothing_while_alive(layout, rng):
    s = GameSession(layout(["@."]), rng)
    assert s.handle(ConfirmInput()) == SessionState.RUNNING
    assert s.world.turn == 0
    assert s.status == WELCOME_STATUS


def test_death_needs_confirmation(layout, rng, captured_events):
    s = GameSession(layout(["@#"]), rng)
    assert s.handle(RIGHT) == SessionState.DEAD
    assert s.world.player.dead

    # the first key after death only shows the prompt, quitting included
    assert s.handle(QuitInput()) == SessionState.AWAITING_CONFIRMATION
    assert s.status == CONFIRM_STATUS
    assert s.handle(RIGHT) == SessionState.AWAITING_CONFIRMATION
    assert s.world.turn == 1

    assert s.handle(ConfirmInput()) == SessionState.TERMINATED
    transitions = [
        (e.previous, e.state) for e in captured_events if isinstance(e, SessionEvent)
    ]
    assert transitions == [
        (SessionState.RUNNING, SessionState.DEAD),
        (SessionState.DEAD, SessionState.AWAITING_CONFIRMATION),
        (SessionState.AWAITING_CONFIRMATION, SessionState.TERMINATED),
    ]


def test_confirm_right_after_death_ends_the_game(layout, rng):
    s = GameSession(layout(["@#"]), rng)
    s.handle(RIGHT)
    assert s.handle(ConfirmInput()) == SessionState.TERMINATED


def test_unlocking_the_castle_wins_but_keeps_playing(layout, rng):
    s = GameSession(layout(["@C"], inventory=[ItemType.KEY]), rng)
    assert s.handle(RIGHT) == SessionState.RUNNING
    assert s.won
    assert "quit" in s.status
    s.handle(IdleInput())
    assert s.handle(QuitInput()) == SessionState.TERMINATED
