"""Two's complement conversion for fields of arbitrary bit width."""

__all__ = ["two_complement16", "two_complement32"]


def _to_signed(value: int, width: int) -> int:
    """Interpret the low ``width`` bits of ``value`` as a signed integer."""
    value &= (1 << width) - 1
    if value & (1 << (width - 1)):
        return value - (1 << width)
    return value


def _two_complement(size_bits: int, data: int, width: int) -> int:
    if not 1 <= size_bits <= width:
        raise ValueError(f"size_bits must be between 1 and {width}, got {size_bits}")
    data &= (1 << width) - 1
    mask = 1 << (size_bits - 1)
    negative = _to_signed(-_to_signed(data & mask, width), width)
    positive = _to_signed(data & ~mask, width)
    return _to_signed(negative + positive, width)


def two_complement16(size_bits: int, data: int) -> int:
    """Return the signed 16-bit value of ``data`` read as a ``size_bits``-bit two's complement."""
    return _two_complement(size_bits, data, 16)


def two_complement32(size_bits: int, data: int) -> int:
    """Return the signed 32-bit value of ``data`` read as a ``size_bits``-bit two's complement."""
    return _two_complement(size_bits, data, 32)