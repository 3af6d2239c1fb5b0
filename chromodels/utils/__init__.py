"""Shared helpers: validation, interpolation, hex and ARGB codecs."""
