"""Comm-B Data Selector: picks the transponder register carried in an MB field."""

from dataclasses import dataclass
from typing import Optional

from .bdscode import Code40, Code50, Code60, decode_code40, decode_code50, decode_code60

__all__ = ["Bds", "decode_bds"]

_BDS_SIZE = 8


@dataclass(frozen=True)
class Bds:
    """A decoded Comm-B reply.

    ``transponder_register_number`` is the BDS code in lower-case hexadecimal
    without padding.  Exactly one of the other attributes is set: a message
    for code 0, the decoded register for codes 40, 50 and 60, or the MB field
    in upper-case hexadecimal for any other code.
    """

    transponder_register_number: str
    code00: Optional[str] = None
    code40: Optional[Code40] = None
    code50: Optional[Code50] = None
    code60: Optional[Code60] = None
    code_not_processed: Optional[str] = None


def decode_bds(data) -> Bds:
    """Decode 8 octets: the 7-octet MB field followed by the BDS code octet."""
    octets = bytes(data)
    if len(octets) != _BDS_SIZE:
        raise ValueError(f"a BDS field is {_BDS_SIZE} octets, got {len(octets)}")
    code = octets[7]
    mb = octets[:7]
    number = format(code, "x")

    if code == 0x00:
        return Bds(number, code00="Not valid")
    if code == 0x60:
        return Bds(number, code60=decode_code60(mb))
    if code == 0x50:
        return Bds(number, code50=decode_code50(mb))
    if code == 0x40:
        return Bds(number, code40=decode_code40(mb))
    return Bds(number, code_not_processed=mb.hex().upper())