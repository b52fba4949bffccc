from __future__ import annotations

import logging

from .events import SessionEvent, TurnEvent, event_bus
from .models.enums import OutcomeKind

turn_logger = logging.getLogger("emojiquest.turns")
session_logger = logging.getLogger("emojiquest.session")


def _on_turn_event(ev: TurnEvent) -> None:
    level = logging.DEBUG if ev.result == OutcomeKind.IDLE else logging.INFO
    turn_logger.log(
        level,
        "turn=%d dir=%s tile=%s result=%s pos=%s: %s",
        ev.turn,
        ev.direction.value if ev.direction else "-",
        ev.tile.value if ev.tile else "-",
        ev.result.value,
        ev.player_pos,
        ev.status,
    )


def _on_session_event(ev: SessionEvent) -> None:
    session_logger.info(
        "turn=%d session %s -> %s", ev.turn, ev.previous.value, ev.state.value
    )


_registered = False


def register_listeners() -> None:
    global _registered
    if _registered:
        return
    event_bus.subscribe(TurnEvent, _on_turn_event)
    event_bus.subscribe(SessionEvent, _on_session_event)
    _registered = True
