"""Errors raised by big integer construction, conversion and arithmetic.

Each error also derives from the closest built-in exception, so callers that
already handle ``ValueError`` or ``ZeroDivisionError`` keep working.
"""


class BigIntegerError(Exception):
    """Base class for every error raised by this package."""


class ParseError(BigIntegerError, ValueError):
    """A string does not represent a number in the requested base."""


class IntegerOverflowError(BigIntegerError, OverflowError):
    """A value does not fit the native integer range on narrowing conversion."""


class DivisionByZeroError(BigIntegerError, ZeroDivisionError):
    """A division, remainder or modulo operation received a zero divisor."""


class DomainError(BigIntegerError, ValueError):
    """An operand lies outside the domain of the operation."""


class RandomSourceError(BigIntegerError, RuntimeError):
    """The secure random byte source failed or is unavailable."""
