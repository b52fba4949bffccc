class EmojiQuestError(Exception):
    """Base class for errors raised by the game core."""


class TerrainGenerationError(EmojiQuestError):
    """Pond placement gave up after its attempt cap."""


class SpawnError(EmojiQuestError):
    """No free tile of the requested type was found for a spawn."""


class SessionTerminatedError(EmojiQuestError):
    """Input was fed to a session that already ended."""
