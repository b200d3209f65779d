"""Decoding of ASTERIX data blocks: CAT + LEN + one or more records."""

import io
from dataclasses import dataclass, field
from typing import List, Mapping

from .errors import (
    CategoryUnknownError,
    EndOfDataError,
    UndersizedError,
    UnexpectedEndError,
)
from .record import Record
from .uap import StandardUAP

__all__ = ["DataBlock", "WrapperDataBlock"]

_HEADER_SIZE = 3


def _read_header_part(stream: io.BytesIO, size: int) -> bytes:
    chunk = stream.read(size)
    if len(chunk) == size:
        return chunk
    if not chunk:
        raise EndOfDataError(unread=0)
    raise UnexpectedEndError(unread=0)


@dataclass
class DataBlock:
    """One data block: a single category and the records it carries."""

    category: int = 0
    length: int = 0
    records: List[Record] = field(default_factory=list)

    def decode(self, data: bytes, profiles: Mapping[int, StandardUAP]) -> int:
        """Decode the data block at the start of ``data``.

        ``profiles`` maps a category number to the profile used to decode its
        records.  Returns the number of bytes that follow the block.  On
        failure an :class:`~asterixkit.errors.AsterixError` is raised whose
        ``unread`` gives the bytes left; records decoded before the failure,
        including the one that failed, stay in :attr:`records`.
        """
        payload = bytes(data)
        stream = io.BytesIO(payload)
        self.records = []

        self.category = _read_header_part(stream, 1)[0]
        self.length = int.from_bytes(_read_header_part(stream, 2), "big")

        if len(payload) < self.length:
            raise UndersizedError(unread=len(payload) - stream.tell())
        if self.length < _HEADER_SIZE:
            raise UndersizedError(
                f"length field {self.length} is smaller than the block header",
                unread=len(payload) - stream.tell(),
            )

        body = stream.read(self.length - _HEADER_SIZE)
        unread = len(payload) - stream.tell()

        profile = profiles.get(self.category)
        if profile is None:
            raise CategoryUnknownError(unread=unread)

        offset = 0
        while True:
            record = Record()
            self.records.append(record)
            remaining = record.decode(body[offset:], profile)
            offset = len(body) - remaining
            if remaining == 0:
                break
        return unread

    def strings(self) -> List[List[str]]:
        """Return the hexadecimal text lines of every record."""
        return [record.strings() for record in self.records]

    def payload(self) -> List[bytes]:
        """Return the category octet, the two length octets and each record's bytes."""
        parts = [bytes([self.category]), self.length.to_bytes(2, "big")]
        parts.extend(record.payload() for record in self.records)
        return parts


@dataclass
class WrapperDataBlock:
    """A sequence of data blocks read one after another from the same data."""

    data_blocks: List[DataBlock] = field(default_factory=list)

    def decode(self, data: bytes, profiles: Mapping[int, StandardUAP]) -> int:
        """Decode every data block in ``data`` and return the bytes left unread (0).

        A failing block raises its error; the blocks decoded before it stay
        in :attr:`data_blocks`.
        """
        payload = bytes(data)
        offset = 0
        while True:
            block = DataBlock()
            try:
                unread = block.decode(payload[offset:], profiles)
            finally:
                offset += block.length
            self.data_blocks.append(block)
            if unread == 0:
                return 0