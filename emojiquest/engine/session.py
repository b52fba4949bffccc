from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import SessionTerminatedError
from ..models.api import ConfirmInput, IdleInput, MoveInput, QuitInput
from ..models.enums import SessionState, TileType
from .core import TurnEngine
from .logging.logger import log_transition
from .systems.render import render_snapshot
from .systems.spawn import new_world

if TYPE_CHECKING:
    from ..config import Settings
    from ..core.primitives import RandomSource
    from ..models.api import InputEvent, Snapshot
    from ..models.world import World

WELCOME_STATUS = "You are in a forest. Watch out for the trees!"
CONFIRM_STATUS = "You are dead. Press Enter to leave the game."


class GameSession:
    """Session lifecycle around the turn engine.

    RUNNING -> TERMINATED on quit. RUNNING -> DEAD when the player dies;
    from DEAD the next input moves to AWAITING_CONFIRMATION, and only a
    confirmation ends the session from there.
    """

    def __init__(
        self,
        world: World,
        rng: RandomSource,
        engine: TurnEngine | None = None,
    ):
        self.world = world
        self.rng = rng
        self.engine = engine or TurnEngine()
        self.state = SessionState.RUNNING
        self.status = WELCOME_STATUS

    @classmethod
    def new(cls, rng: RandomSource, settings: Settings | None = None) -> GameSession:
        return cls(new_world(rng, settings), rng)

    @property
    def finished(self) -> bool:
        return self.state == SessionState.TERMINATED

    @property
    def won(self) -> bool:
        return TileType.HEART in self.world.terrain.tiles

    def snapshot(self) -> Snapshot:
        return render_snapshot(self.world, self.status)

    def handle(self, event: InputEvent) -> SessionState:
        if self.state == SessionState.TERMINATED:
            raise SessionTerminatedError("session already terminated")
        if self.state == SessionState.DEAD:
            self._enter(SessionState.AWAITING_CONFIRMATION)
        if self.state == SessionState.AWAITING_CONFIRMATION:
            if isinstance(event, ConfirmInput):
                self._enter(SessionState.TERMINATED)
            else:
                self.status = CONFIRM_STATUS
            return self.state

        if isinstance(event, QuitInput):
            self._enter(SessionState.TERMINATED)
        elif isinstance(event, (MoveInput, IdleInput)):
            outcome = self.engine.take_turn(self.world, event, self.rng)
            self.status = outcome.status
            if self.world.player.dead:
                self._enter(SessionState.DEAD)
        # confirmations mean nothing while the player is alive
        return self.state

    def _enter(self, state: SessionState) -> None:
        previous, self.state = self.state, state
        log_transition(self.world, previous, state)
