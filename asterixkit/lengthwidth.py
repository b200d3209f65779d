"""Length and width classes of an aircraft, as coded on four bits."""

from dataclasses import dataclass
from typing import Dict

__all__ = ["LengthWidth", "TABLE_LW_V1", "TABLE_LW_V2", "lookup_length_width"]


@dataclass(frozen=True)
class LengthWidth:
    """Upper bounds of length and width, in metres, as text."""

    length: str
    width: str


_COMMON = [
    ("L < 15", "W < 11.5"),
    ("L < 15", "W < 23"),
    ("L < 25", "W < 28.5"),
    ("L < 25", "W < 34"),
    ("L < 35", "W < 33"),
    ("L < 35", "W < 38"),
    ("L < 45", "W < 39.5"),
    ("L < 45", "W < 45"),
    ("L < 55", "W < 45"),
    ("L < 55", "W < 52"),
    ("L < 65", "W < 59.5"),
    ("L < 65", "W < 67"),
    ("L < 75", "W < 72.5"),
    ("L < 75", "W < 80"),
    ("L < 85", "W < 80"),
]

TABLE_LW_V1: Dict[int, LengthWidth] = {
    code: LengthWidth(length, width) for code, (length, width) in enumerate(_COMMON)
}
TABLE_LW_V1[15] = LengthWidth("L < 85", "W > 80")

TABLE_LW_V2: Dict[int, LengthWidth] = {
    code: LengthWidth(length, width) for code, (length, width) in enumerate(_COMMON)
}
TABLE_LW_V2[15] = LengthWidth("L > 85", "W > 80")

_TABLES = {1: TABLE_LW_V1, 2: TABLE_LW_V2}


def lookup_length_width(code: int, version: int = 2) -> LengthWidth:
    """Return the length and width class of ``code`` (0 to 15) in table ``version`` (1 or 2)."""
    table = _TABLES.get(version)
    if table is None:
        raise ValueError(f"unknown length/width table version {version}")
    try:
        return table[code]
    except KeyError:
        raise ValueError(f"length/width code out of range: {code}") from None