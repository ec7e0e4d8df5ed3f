"""Decode the identification, header and section headers of 32-bit little-endian ELF files."""

__version__ = "0.1.0"