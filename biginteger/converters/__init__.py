"""Converters for stored big integer values."""

from .big_integer_converter import BigIntegerConverter

__all__ = ["BigIntegerConverter"]
