"""Big integer value type module."""

from .BigInteger import BigInteger
from .RoundingMode import RoundingMode
from .abstract.IBigInteger import IBigInteger, Coercible
from .coercion import parse, to_mpz

__all__ = ["BigInteger", "RoundingMode", "IBigInteger", "Coercible", "parse", "to_mpz"]
