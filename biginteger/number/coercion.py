"""Conversion of heterogeneous operands to engine values.

``to_mpz`` is a single-dispatch registry: every type that can stand in for a
big integer registers a converter, and arithmetic methods call ``to_mpz`` on
their operands. Any ``IBigInteger`` implementation converts through ``to_mpz()``.
"""

from functools import singledispatch
from typing import Any, Optional, Tuple

import gmpy2

from ..exceptions import ParseError
from ..mpc import MPC, MPZ
from ..protocol_constants import AUTO_BASE, DECIMAL_BASE, MAX_BASE, MIN_BASE
from .abstract.IBigInteger import IBigInteger

# Radix prefixes recognised in base 0 or in their own base
_PREFIXES = {"0b": 2, "0o": 8, "0x": 16}

# Up to base 36 letters are case-insensitive; above it upper case comes first
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_DIGITS_62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def _split_numeric(value: str, base: int) -> Optional[Tuple[str, int]]:
    """Split one optional sign, an optional radix prefix and the digits of a number.

    Returns:
        The signed digits without prefix and the radix they are written in,
        or None if value is not a number in base
    """
    sign = value[:1] if value[:1] in ("+", "-") else ""
    body = value[len(sign):]
    radix = DECIMAL_BASE if base == AUTO_BASE else base

    prefix = body[:2].lower()
    if prefix in _PREFIXES and base in (AUTO_BASE, _PREFIXES[prefix]):
        radix = _PREFIXES[prefix]
        body = body[2:]

    if not body:
        return None
    if radix <= 36:
        valid = all(char in _DIGITS[:radix] for char in body.lower())
    else:
        valid = all(char in _DIGITS_62[:radix] for char in body)
    if not valid:
        return None
    return ("-" if sign == "-" else "") + body, radix


def parse(value: str, base: int = DECIMAL_BASE) -> MPZ:
    """Parse a numeric string in the given base.

    Surrounding whitespace is ignored. Inner whitespace, underscores and
    repeated signs are rejected even where the engine would accept them.
    Unprefixed strings in base 0 are decimal.

    Args:
        value (str): Digits, optionally signed and, for base 0 or a matching
            base, prefixed with 0b, 0o or 0x
        base (int): Radix in 2..62, or 0 to detect it from the prefix

    Returns:
        MPZ: The parsed value

    Raises:
        ParseError: If the base is invalid or the string is not a number in it
    """
    if base != AUTO_BASE and not MIN_BASE <= base <= MAX_BASE:
        raise ParseError(f"Base must be 0 or between {MIN_BASE} and {MAX_BASE}, base={base}")
    numeric = _split_numeric(value.strip(), base)
    if numeric is None:
        raise ParseError(
            f"String value does not represent a number in base {base}, value={value!r}"
        )
    digits, radix = numeric
    try:
        return MPC.parse(digits, radix)
    except ValueError as e:
        raise ParseError(
            f"String value does not represent a number in base {base}, value={value!r}"
        ) from e


@singledispatch
def to_mpz(value: Any) -> MPZ:
    """Convert a BigInteger, int, mpz or decimal string to an engine value."""
    raise TypeError(f"Cannot convert {type(value).__name__} to a big integer")


@to_mpz.register
def _(value: int) -> MPZ:
    return MPC.mpz(value)


@to_mpz.register(gmpy2.mpz)
def _(value) -> MPZ:
    return value


@to_mpz.register
def _(value: str) -> MPZ:
    return parse(value)


@to_mpz.register
def _(value: IBigInteger) -> MPZ:
    return value.to_mpz()
