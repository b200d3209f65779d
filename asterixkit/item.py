"""Decoded data items and their wire representation."""

from dataclasses import dataclass, field
from typing import List, Optional

from .uap import DataField, FieldType

__all__ = [
    "MetaItem",
    "Fixed",
    "Extended",
    "Explicit",
    "Repetitive",
    "Compound",
    "RandomField",
    "RandomFieldSequencing",
    "SPandREField",
    "Item",
    "new_item",
]


@dataclass
class MetaItem:
    """What the profile says about an item."""

    frn: int = 0
    data_item: str = ""
    description: str = ""
    type: FieldType = FieldType.SPARE


@dataclass
class Fixed:
    """A fixed length data field."""

    data: bytes = b""

    def payload(self) -> bytes:
        return bytes(self.data)

    def __str__(self) -> str:
        return self.data.hex()


@dataclass
class Extended:
    """An extended length data field: a primary part and its extensions."""

    primary: bytes = b""
    secondary: bytes = b""

    def payload(self) -> bytes:
        return bytes(self.primary) + bytes(self.secondary)

    def __str__(self) -> str:
        return self.primary.hex() + self.secondary.hex()


@dataclass
class Explicit:
    """An explicit length data field; ``length`` counts itself."""

    length: int = 0
    data: bytes = b""

    def payload(self) -> bytes:
        return bytes([self.length]) + bytes(self.data)

    def __str__(self) -> str:
        return bytes([self.length]).hex() + self.data.hex()


@dataclass
class Repetitive:
    """A repetitive data field: a repetition factor then the sub-fields."""

    rep: int = 0
    data: bytes = b""

    def payload(self) -> bytes:
        return bytes([self.rep]) + bytes(self.data)

    def __str__(self) -> str:
        return bytes([self.rep]).hex() + self.data.hex()


@dataclass
class Compound:
    """A compound data field: a primary presence map then its subfields."""

    primary: bytes = b""
    secondary: List["Item"] = field(default_factory=list)

    def payload(self) -> bytes:
        return bytes(self.primary) + b"".join(item.payload() for item in self.secondary)

    def __str__(self) -> str:
        parts = [f"[primary: {self.primary.hex()}]"]
        parts.extend(f"[{item}]" for item in self.secondary)
        return "".join(parts)


@dataclass
class RandomField:
    """One field of a random field sequence, tagged with its FRN."""

    frn: int
    field: "Item"


@dataclass
class RandomFieldSequencing:
    """A random field sequencing field: N fields in any order."""

    n: int = 0
    sequence: List[RandomField] = field(default_factory=list)


@dataclass
class SPandREField:
    """A special purpose or reserved expansion field; ``length`` counts itself."""

    length: int = 0
    data: bytes = b""


_CONTENT_ATTRIBUTE = {
    FieldType.FIXED: "fixed",
    FieldType.EXTENDED: "extended",
    FieldType.EXPLICIT: "explicit",
    FieldType.REPETITIVE: "repetitive",
    FieldType.COMPOUND: "compound",
}


@dataclass
class Item:
    """A decoded data item; the attribute matching its type holds the content."""

    meta: MetaItem = field(default_factory=MetaItem)
    fixed: Optional[Fixed] = None
    extended: Optional[Extended] = None
    explicit: Optional[Explicit] = None
    repetitive: Optional[Repetitive] = None
    compound: Optional[Compound] = None
    rfs: Optional[RandomFieldSequencing] = None
    sp: Optional[SPandREField] = None
    re: Optional[SPandREField] = None

    def _content(self):
        name = _CONTENT_ATTRIBUTE.get(self.meta.type)
        return getattr(self, name) if name else None

    def payload(self) -> bytes:
        """Return the wire bytes of the item; empty for SP, RE and RFS items."""
        content = self._content()
        return content.payload() if content is not None else b""

    def __str__(self) -> str:
        content = self._content()
        if content is None:
            return self.meta.data_item
        return f"{self.meta.data_item}: {content}"


def new_item(field: DataField) -> Item:
    """Create an empty item carrying the profile description of ``field``."""
    return Item(
        meta=MetaItem(
            frn=field.frn,
            data_item=field.data_item,
            description=field.description,
            type=field.type,
        )
    )