"""
Custom exceptions shared by all layers.

Every exception derives from GameError, so the layers above the domain can catch a single type.
"""


class GameError(Exception):
    """Root of all errors raised by this application."""


class IllegalMoveError(GameError):
    """The requested move violates the rules. The game state is left untouched."""


class GameStateError(GameError):
    """The game (or board) cannot be put into the requested state."""


class InvalidLayoutError(GameError):
    """A layout / position string cannot be interpreted."""


class InvalidRequestError(GameError):
    """A request coming from outside does not have the expected shape."""


class RepositoryError(GameError):
    """Persistence layer could not find or store a record."""
