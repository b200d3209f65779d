"""User Application Profile definitions: how each field of a category is laid out."""

import enum
from dataclasses import dataclass, field
from typing import Mapping, Tuple

from .errors import DataFieldUnknownError

__all__ = ["FieldType", "DataField", "StandardUAP"]


class FieldType(enum.Enum):
    """The encoding of a data field."""

    SPARE = "spare"
    FIXED = "fixed"
    EXTENDED = "extended"
    EXPLICIT = "explicit"
    REPETITIVE = "repetitive"
    COMPOUND = "compound"
    RFS = "rfs"
    SP = "sp"
    RE = "re"


@dataclass(frozen=True)
class DataField:
    """Description of one data item of a profile.

    ``size`` is the length of a fixed field; ``primary_size`` and
    ``secondary_size`` describe an extended field; ``sub_item_size`` is the
    length of one repetition; ``compound`` lists the subfields of a compound
    field.  A ``conditional`` field selects the rest of the profile.
    """

    frn: int
    data_item: str = ""
    description: str = ""
    type: FieldType = FieldType.SPARE
    size: int = 0
    primary_size: int = 0
    secondary_size: int = 0
    sub_item_size: int = 0
    compound: Tuple["DataField", ...] = ()
    conditional: bool = False


@dataclass(frozen=True)
class StandardUAP:
    """A named profile for one category.

    ``variants`` maps the most significant bit of a conditional field's first
    octet (0 or 1) to the items that replace the profile after that field.
    """

    name: str
    category: int
    items: Tuple[DataField, ...]
    variants: Mapping[int, Tuple[DataField, ...]] = field(default_factory=dict)

    def field_for(self, frn: int) -> DataField:
        """Return the field at FSPEC position ``frn`` (counted from 1)."""
        if not 1 <= frn <= len(self.items):
            raise DataFieldUnknownError(f"no field at FRN {frn} in profile {self.name}")
        return self.items[frn - 1]