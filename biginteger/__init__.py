"""Arbitrary-precision signed integers over gmpy2."""

from .exceptions import (
    BigIntegerError,
    DivisionByZeroError,
    DomainError,
    IntegerOverflowError,
    ParseError,
    RandomSourceError,
)
from .helpers import Utils
from .number import BigInteger, RoundingMode
from .utils import LogConfig

LogConfig.configure()

__all__ = [
    "BigInteger",
    "RoundingMode",
    "Utils",
    "BigIntegerError",
    "DivisionByZeroError",
    "DomainError",
    "IntegerOverflowError",
    "ParseError",
    "RandomSourceError",
]
