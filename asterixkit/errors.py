"""Exceptions raised while decoding ASTERIX data."""

from typing import Any, Optional

__all__ = [
    "AsterixError",
    "TruncatedDataError",
    "EndOfDataError",
    "UnexpectedEndError",
    "UndersizedError",
    "CategoryUnknownError",
    "DataFieldUnknownError",
]


class AsterixError(Exception):
    """Base class of every decoding error.

    ``unread`` is the number of bytes left unread when decoding stopped and
    ``partial`` holds whatever part of the value had been decoded by then.
    """

    default_message = "ASTERIX decoding error"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        unread: Optional[int] = None,
        partial: Any = None,
    ) -> None:
        super().__init__(message if message is not None else self.default_message)
        self.unread = unread
        self.partial = partial


class TruncatedDataError(AsterixError, EOFError):
    """The data ended before a field could be read completely."""

    default_message = "data truncated"


class EndOfDataError(TruncatedDataError):
    """No byte at all was left where a field was expected."""

    default_message = "EOF"


class UnexpectedEndError(TruncatedDataError):
    """A field was started but the data ended in its middle."""

    default_message = "unexpected EOF"


class UndersizedError(AsterixError):
    """The data is shorter than the length announced by the data block."""

    default_message = "[ASTERIX] undersized packet"


class CategoryUnknownError(AsterixError):
    """No profile is known for the category of a data block."""

    default_message = "[ASTERIX] category unknown or not processed"


class DataFieldUnknownError(AsterixError):
    """A field type cannot be decoded at this place."""

    default_message = "type of datafield not found"