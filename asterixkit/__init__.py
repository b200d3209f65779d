"""Decoding of ASTERIX data blocks, records and data items with caller-defined profiles."""

__version__ = "0.1.0"