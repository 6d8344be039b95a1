"""
Custom exceptions shared by all layers.

Every error raised on purpose by this package derives from GameError, so the service (or whatever calls it)
can catch one type and decide how to present it.
"""


class GameError(Exception):
    """Top-level exception of the 2048 engine."""


class InvalidDirectionError(GameError):
    """Direction is not one of up/down/left/right."""


class MalformedBoardError(GameError):
    """Board handed in from the outside breaks the grid invariants (shape, tile values)."""


class SpawnError(GameError):
    """Asked to spawn a tile on a board without empty cells. Should never happen when the rules are followed."""


class GameStateError(GameError):
    """Stored session information cannot be turned into a valid game."""


class InvalidRequestError(GameError):
    """Request at the boundary could not be interpreted."""


class RepositoryError(GameError):
    """Session could not be found / stored."""
