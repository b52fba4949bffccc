from __future__ import annotations

import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ..core.primitives import RenderSink
    from ..engine.session import GameSession
    from ..models.api import InputEvent
    from ..models.enums import SessionState


def run(
    session: GameSession,
    events: Iterable[InputEvent],
    sink: RenderSink,
    frame_delay: float = 0.0,
    sleep: Callable[[float], None] = time.sleep,
) -> SessionState:
    """Draw, wait for one input, resolve the whole turn, repeat until the session ends.

    Returns the last session state; it is not TERMINATED only if `events` ran out.
    """
    sink.draw(session.snapshot())
    for event in events:
        session.handle(event)
        if session.finished:
            break
        sink.draw(session.snapshot())
        if frame_delay:
            sleep(frame_delay)
    return session.state
