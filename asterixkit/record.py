"""Decoding of one ASTERIX record: the FSPEC and the data fields it announces."""

import io
from dataclasses import dataclass, field
from typing import BinaryIO, List, Optional, Sequence, Tuple

from .errors import (
    AsterixError,
    DataFieldUnknownError,
    EndOfDataError,
    TruncatedDataError,
    UnexpectedEndError,
)
from .item import (
    Compound,
    Explicit,
    Extended,
    Fixed,
    Item,
    RandomField,
    RandomFieldSequencing,
    Repetitive,
    SPandREField,
    new_item,
)
from .uap import DataField, FieldType, StandardUAP

__all__ = [
    "Record",
    "fspec_reader",
    "fspec_index",
    "fixed_data_field_reader",
    "extended_data_field_reader",
    "explicit_data_field_reader",
    "repetitive_data_field_reader",
    "compound_data_field_reader",
    "rfs_data_field_reader",
    "sp_and_re_data_field_reader",
]

_FX = 0x01


def _read_exact(reader: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes or raise the matching truncation error."""
    if size <= 0:
        return b""
    chunk = reader.read(size)
    if len(chunk) == size:
        return chunk
    if not chunk:
        raise EndOfDataError()
    raise UnexpectedEndError()


def _read_octet(reader: BinaryIO) -> int:
    return _read_exact(reader, 1)[0]


def fspec_reader(reader: BinaryIO) -> bytes:
    """Read an FSPEC: octets up to and including the first one whose FX bit is clear."""
    fspec = bytearray()
    while True:
        octet = _read_octet(reader)
        fspec.append(octet)
        if not octet & _FX:
            return bytes(fspec)


def fspec_index(fspec: bytes) -> List[int]:
    """Return the FRNs whose presence bit is set in ``fspec``.

    For example ``0b10101010`` gives ``[1, 3, 5, 7]``; FX bits are not FRNs.
    """
    return [
        7 * j + i + 1
        for j, octet in enumerate(fspec)
        for i in range(7)
        if octet & (0x80 >> i)
    ]


def fixed_data_field_reader(reader: BinaryIO, size: int) -> Fixed:
    """Read a fixed length field of ``size`` octets."""
    try:
        return Fixed(_read_exact(reader, size))
    except TruncatedDataError as exc:
        exc.partial = Fixed()
        raise


def extended_data_field_reader(
    reader: BinaryIO, primary_size: int, secondary_size: int
) -> Extended:
    """Read an extended field: a primary part then secondary parts while FX is set."""
    item = Extended()
    try:
        item.primary = _read_exact(reader, primary_size)
        if item.primary and item.primary[-1] & _FX:
            while True:
                part = _read_exact(reader, secondary_size)
                item.secondary += part
                if not part or not part[-1] & _FX:
                    break
    except TruncatedDataError as exc:
        exc.partial = item
        raise
    return item


def explicit_data_field_reader(reader: BinaryIO) -> Explicit:
    """Read an explicit field whose first octet gives the total length."""
    item = Explicit()
    try:
        item.length = _read_octet(reader)
        item.data = _read_exact(reader, (item.length - 1) & 0xFF)
    except TruncatedDataError as exc:
        exc.partial = item
        raise
    return item


def repetitive_data_field_reader(reader: BinaryIO, sub_item_size: int) -> Repetitive:
    """Read a repetitive field: a REP octet then REP sub-fields of ``sub_item_size``."""
    item = Repetitive()
    try:
        item.rep = _read_octet(reader)
        item.data = _read_exact(reader, item.rep * sub_item_size)
    except TruncatedDataError as exc:
        exc.partial = item
        raise
    return item


def _read_simple(reader: BinaryIO, spec: DataField) -> Optional[Tuple[str, object]]:
    """Read a fixed, extended, explicit or repetitive field; None for other types."""
    kind = spec.type
    if kind is FieldType.FIXED:
        return "fixed", fixed_data_field_reader(reader, spec.size)
    if kind is FieldType.EXTENDED:
        return "extended", extended_data_field_reader(
            reader, spec.primary_size, spec.secondary_size
        )
    if kind is FieldType.EXPLICIT:
        return "explicit", explicit_data_field_reader(reader)
    if kind is FieldType.REPETITIVE:
        return "repetitive", repetitive_data_field_reader(reader, spec.sub_item_size)
    return None


def compound_data_field_reader(reader: BinaryIO, fields: Sequence[DataField]) -> Compound:
    """Read a compound field: a primary presence map then the subfields it announces.

    Subfields may be fixed, extended, explicit or repetitive, but not compound.
    """
    item = Compound()
    try:
        item.primary = fspec_reader(reader)
        for frn in fspec_index(item.primary):
            if frn > len(fields):
                raise DataFieldUnknownError(f"no compound subfield at FRN {frn}")
            spec = fields[frn - 1]
            content = _read_simple(reader, spec)
            if content is None:
                raise DataFieldUnknownError()
            sub = new_item(spec)
            setattr(sub, content[0], content[1])
            item.secondary.append(sub)
    except AsterixError as exc:
        exc.partial = item
        raise
    return item


def rfs_data_field_reader(
    reader: BinaryIO, fields: Sequence[DataField]
) -> RandomFieldSequencing:
    """Read a random field sequence: N, then N pairs of an FRN and its field.

    Only fixed length fields can be carried; an FRN not in ``fields`` is skipped.
    """
    rfs = RandomFieldSequencing()
    try:
        rfs.n = _read_octet(reader)
        for _ in range(rfs.n):
            frn = _read_octet(reader)
            for spec in fields:
                if spec.frn != frn:
                    continue
                item = new_item(spec)
                item.fixed = Fixed(_read_exact(reader, spec.size))
                rfs.sequence.append(RandomField(frn=frn, field=item))
    except TruncatedDataError as exc:
        exc.partial = rfs
        raise
    return rfs


def sp_and_re_data_field_reader(reader: BinaryIO) -> SPandREField:
    """Read a special purpose or reserved expansion field (length octet first)."""
    item = SPandREField()
    try:
        item.length = _read_octet(reader)
        item.data = _read_exact(reader, (item.length - 1) & 0xFF)
    except TruncatedDataError as exc:
        exc.partial = item
        raise
    return item


@dataclass
class Record:
    """One record of a data block: its FSPEC and the items it carries."""

    cat: int = 0
    fspec: bytes = b""
    items: List[Item] = field(default_factory=list)

    def decode(self, data: bytes, std_uap: StandardUAP) -> int:
        """Decode one record from the start of ``data`` using ``std_uap``.

        Returns the number of bytes left after the record.  On failure an
        :class:`AsterixError` is raised whose ``unread`` gives the bytes left;
        the items decoded before the failure stay in :attr:`items`.
        """
        self.cat = std_uap.category
        self.fspec = b""
        self.items = []
        payload = bytes(data)
        stream = io.BytesIO(payload)
        try:
            self.fspec = fspec_reader(stream)
            items = tuple(std_uap.items)
            offset = 0
            for frn in fspec_index(self.fspec):
                index = frn - 1 - offset
                if not 0 <= index < len(items):
                    raise DataFieldUnknownError(
                        f"no field at FRN {frn} in profile {std_uap.name}"
                    )
                spec = items[index]
                item = new_item(spec)
                name, content = self._read_field(stream, spec, items)
                setattr(item, name, content)
                self.items.append(item)

                if spec.conditional:
                    selector = self._selector(item)
                    if selector is not None:
                        items = tuple(std_uap.variants.get(selector, ()))
                    offset = frn
        except AsterixError as exc:
            exc.unread = len(payload) - stream.tell()
            raise
        return len(payload) - stream.tell()

    @staticmethod
    def _selector(item: Item) -> Optional[int]:
        if item.meta.type is FieldType.FIXED:
            octets = item.fixed.data
        elif item.meta.type is FieldType.EXTENDED:
            octets = item.extended.primary
        else:
            return None
        return (octets[0] >> 7) & 1 if octets else None

    @staticmethod
    def _read_field(
        stream: BinaryIO, spec: DataField, items: Sequence[DataField]
    ) -> Tuple[str, object]:
        content = _read_simple(stream, spec)
        if content is not None:
            return content
        kind = spec.type
        if kind is FieldType.COMPOUND:
            return "compound", compound_data_field_reader(stream, spec.compound)
        if kind is FieldType.SP:
            return "sp", sp_and_re_data_field_reader(stream)
        if kind is FieldType.RE:
            return "re", sp_and_re_data_field_reader(stream)
        if kind is FieldType.RFS:
            return "rfs", rfs_data_field_reader(stream, items)
        raise DataFieldUnknownError()

    def strings(self) -> List[str]:
        """Return the FSPEC and each item as hexadecimal text, one line each."""
        return [f"FSPEC: {self.fspec.hex()}"] + [str(item) for item in self.items]

    def payload(self) -> bytes:
        """Return the FSPEC followed by the payload of every item."""
        return bytes(self.fspec) + b"".join(item.payload() for item in self.items)