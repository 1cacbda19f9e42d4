"""
Custom exceptions shared across layers.

NOTE: The rules engine and the selection controller never raise. Anything in here is raised by the layers around them
(building a board, looking up a session, validating a request, loading config).
NOTE: Deliberately NOT derived from ValueError, so pydantic validators let them propagate as-is.
"""


class GameError(Exception):
    """Top-level exception. Catch this one if you do not care which layer complained."""


class BoardError(GameError):
    """Inconsistent board construction: two pieces on one square, or a piece placed off the board."""


class RepositoryError(GameError):
    """Something went wrong while storing / fetching a session."""


class SessionNotFoundError(RepositoryError):
    """No session recorded under the requested ID."""


class InvalidRequestError(GameError):
    """Request could not be interpreted (raised from the boundary models)."""


class ConfigError(GameError):
    """Configuration file missing or holding invalid values."""
