"""Error taxonomy shared by the store, scoring pipeline and HTTP layer."""

from typing import Optional


class WordGridError(Exception):
    """Base class for errors that map onto a structured error response."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WordGridError):
    """Missing or malformed required fields."""
    status_code = 400


class NotFoundError(WordGridError):
    """No puzzle with the requested title."""
    status_code = 404


class ConflictError(WordGridError):
    """A puzzle with the same title already exists."""
    status_code = 400


class StorageError(WordGridError):
    """Read, parse or write failure on the puzzle collection."""
    status_code = 500


class UpstreamError(WordGridError):
    """
    The completion provider was unreachable or answered with an error.

    Carries the upstream status code and body so they can be forwarded.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code or 500
        self.body = body if body is not None else message


class ParseError(WordGridError):
    """A grading response held no usable number. Recovered to a score of 0."""
    status_code = 500
