"""Exceptions raised by the battle engine."""


class BrawlEngineError(Exception):
    """Base class for engine errors."""


class UnknownCharacterKind(BrawlEngineError, KeyError):
    """Raised when a character kind is not part of the roster."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"Unknown character kind: {kind!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class ModeMismatchError(BrawlEngineError, ValueError):
    """Raised when an action belongs to a different battle mode than the session."""
