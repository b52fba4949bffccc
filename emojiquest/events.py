from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar, cast

if TYPE_CHECKING:
    from collections.abc import Callable

    from emojiquest.models.enums import (
        Coord,
        Direction,
        OutcomeKind,
        SessionState,
        TileType,
    )


@dataclass
class TurnEvent:
    turn: int
    direction: Direction | None
    tile: TileType | None
    result: OutcomeKind
    status: str
    player_pos: Coord


@dataclass
class SessionEvent:
    turn: int
    previous: SessionState
    state: SessionState


T = TypeVar("T")


class EventBus:
    def __init__(self) -> None:
        self._subs: dict[type[Any], list[object]] = {}

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        self._subs.setdefault(event_type, []).append(cast("object", handler))

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        handlers = self._subs.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: Any) -> None:
        # handlers may unsubscribe while being called
        for h in list(self._subs.get(type(event), [])):
            cast("Callable[[Any], None]", h)(event)


event_bus = EventBus()
