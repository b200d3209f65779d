import pytest

from asterixkit.errors import (
    AsterixError,
    CategoryUnknownError,
    DataFieldUnknownError,
    EndOfDataError,
    TruncatedDataError,
    UndersizedError,
    UnexpectedEndError,
)


def test_undersized_default_message():
    assert str(UndersizedError()) == "[ASTERIX] undersized packet"


def test_category_unknown_default_message():
    assert str(CategoryUnknownError()) == "[ASTERIX] category unknown or not processed"


def test_data_field_unknown_default_message():
    assert str(DataFieldUnknownError()) == "type of datafield not found"


def test_explicit_message_overrides_default():
    assert str(UndersizedError("custom")) == "custom"


@pytest.mark.parametrize(
    "cls",
    [
        TruncatedDataError,
        EndOfDataError,
        UnexpectedEndError,
        UndersizedError,
        CategoryUnknownError,
        DataFieldUnknownError,
    ],
)
def test_all_errors_derive_from_base(cls):
    err = cls(unread=3)
    assert isinstance(err, AsterixError)
    assert err.unread == 3


@pytest.mark.parametrize("cls", [EndOfDataError, UnexpectedEndError])
def test_truncation_errors_are_eof_errors(cls):
    err = cls(unread=5)
    assert isinstance(err, EOFError)
    assert isinstance(err, TruncatedDataError)
    assert err.unread == 5


def _caught_as(raised, handler):
    try:
        raise raised
    except handler:
        return "caught"
    except AsterixError:
        return "missed"


def test_end_kinds_are_distinct():
    assert _caught_as(EndOfDataError(unread=1), UnexpectedEndError) == "missed"
    assert _caught_as(UnexpectedEndError(unread=1), EndOfDataError) == "missed"
    assert _caught_as(EndOfDataError(unread=1), EndOfDataError) == "caught"
    assert _caught_as(UnexpectedEndError(unread=1), UnexpectedEndError) == "caught"


def test_unread_and_partial_are_kept():
    err = UnexpectedEndError(unread=0, partial=b"\x01")
    assert err.unread == 0
    assert err.partial == b"\x01"


def test_unread_and_partial_default_to_none():
    err = DataFieldUnknownError()
    assert err.unread is None
    assert err.partial is None