"""Errors raised by the game engine."""


class GameError(Exception):
    """Base class for all game engine errors."""


class InvalidLevelError(GameError):
    """Raised when an unknown level is requested."""


class InvalidStateError(GameError):
    """Raised when an operation is illegal in the current state."""


class ShapeMismatchError(GameError):
    """Raised when a submitted answer does not match the challenge's input shape."""


class GenerationExhaustedError(GameError):
    """Raised when no valid challenge can be generated for a level."""
