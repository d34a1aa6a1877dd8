import logging
import operator
import threading
from typing import Optional, Union

import gmpy2

from ..exceptions import DivisionByZeroError, DomainError, IntegerOverflowError
from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import DECIMAL_BASE, HEX_BASE
from ..utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables
from .RoundingMode import RoundingMode
from .abstract.IBigInteger import Coercible, IBigInteger
from .coercion import parse, to_mpz

logger = logging.getLogger(__name__)


class BigInteger(IBigInteger):
    """Immutable arbitrary-precision signed integer backed by a gmpy2 mpz."""

    __slots__ = ("_mpz",)

    _zero: Optional["BigInteger"] = None
    _one: Optional["BigInteger"] = None
    _singleton_lock = threading.Lock()

    def __init__(self, value: Union[MPZ, int]) -> None:
        """Wrap an engine value. Use the static factories for strings and buffers.

        Args:
            value (MPZ): The multi-precision integer to wrap
        """
        object.__setattr__(self, "_mpz", MPC.mpz(value))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return BigInteger, (self._mpz,)

    # Construction
    # --------------

    @staticmethod
    def from_value(value: Coercible, base: int = DECIMAL_BASE) -> "BigInteger":
        """Create a BigInteger from a string in the given base or from an integer.

        Args:
            value: Numeric string, int, mpz or BigInteger
            base (int): Radix for string values; 0 detects it from the prefix.
                Ignored for integer values.

        Returns:
            BigInteger: The parsed value

        Raises:
            ParseError: If value is a string that is not a number in base
            TypeError: If value has no registered conversion
        """
        if isinstance(value, str):
            return BigInteger(parse(value, base))
        return BigInteger(to_mpz(value))

    @staticmethod
    def of(value: Coercible) -> "BigInteger":
        """Coerce an operand (BigInteger, int, mpz or decimal string) to a BigInteger."""
        if isinstance(value, BigInteger):
            return value
        return BigInteger(to_mpz(value))

    @staticmethod
    def from_buffer(buffer: Union[bytes, bytearray, memoryview], reverse: bool = True) -> "BigInteger":
        """Decode an unsigned magnitude from bytes.

        Args:
            buffer: Bytes holding the magnitude
            reverse (bool): The buffer is little-endian and is reversed before
                being read big-endian

        Returns:
            BigInteger: The non-negative value; an empty buffer yields zero
        """
        buffer = bytes(buffer)
        if reverse:
            buffer = buffer[::-1]
        if not buffer:
            return BigInteger.zero()
        return BigInteger(MPC.parse(buffer.hex(), HEX_BASE))

    @staticmethod
    def zero() -> "BigInteger":
        """Get the cached value 0."""
        if BigInteger._zero is None:
            with BigInteger._singleton_lock:
                if BigInteger._zero is None:
                    logger.debug("Initializing cached ZERO")
                    BigInteger._zero = BigInteger(0)
        return BigInteger._zero

    @staticmethod
    def one() -> "BigInteger":
        """Get the cached value 1."""
        if BigInteger._one is None:
            with BigInteger._singleton_lock:
                if BigInteger._one is None:
                    logger.debug("Initializing cached ONE")
                    BigInteger._one = BigInteger(1)
        return BigInteger._one

    @staticmethod
    def factorial(n: int) -> "BigInteger":
        """Calculate n! without caching.

        Args:
            n (int): Non-negative integer

        Returns:
            BigInteger: n!

        Raises:
            DomainError: If n is negative
        """
        n = operator.index(n)
        if n < 0:
            raise DomainError(f"Factorial of a negative number, n={n}")
        return BigInteger(MPC.fac(n))

    # Conversion
    # --------------

    def to_int(self) -> int:
        bits = self._machine_int_bits()
        max_value = (1 << (bits - 1)) - 1
        min_value = -max_value - 1
        if self._mpz > max_value:
            raise IntegerOverflowError(f"The number is greater than {max_value}, value={self}")
        if self._mpz < min_value:
            raise IntegerOverflowError(f"The number is less than {min_value}, value={self}")
        return int(self._mpz)

    def to_string(self) -> str:
        return MPC.digits(self._mpz, DECIMAL_BASE)

    def to_hex(self) -> str:
        """Signed lowercase hex digits without the 0x prefix."""
        return MPC.digits(self._mpz, HEX_BASE)

    def to_buffer(self, reverse: bool = True) -> bytes:
        bytes_hex = MPC.digits(abs(self._mpz), HEX_BASE)

        # whole bytes only
        if len(bytes_hex) & 1:
            bytes_hex = "0" + bytes_hex

        buffer = bytes.fromhex(bytes_hex).lstrip(b"\x00")

        if reverse:
            return buffer[::-1]
        return buffer

    def to_mpz(self) -> MPZ:
        return self._mpz

    # Comparison
    # --------------

    def compare(self, rhs: Coercible) -> int:
        return MPC.cmp(self._mpz, to_mpz(rhs))

    def less_than(self, rhs: Coercible) -> bool:
        return self.compare(rhs) < 0

    def less_than_equal(self, rhs: Coercible) -> bool:
        return self.compare(rhs) <= 0

    def equal(self, rhs: Coercible) -> bool:
        return self.compare(rhs) == 0

    def greater_than(self, rhs: Coercible) -> bool:
        return self.compare(rhs) > 0

    def greater_than_equal(self, rhs: Coercible) -> bool:
        return self.compare(rhs) >= 0

    def between(self, left: Coercible, right: Coercible, exclusive: bool = False) -> bool:
        if exclusive:
            return not (self.less_than_equal(left) or self.greater_than_equal(right))
        return not (self.less_than(left) or self.greater_than(right))

    # Arithmetic
    # --------------

    def add(self, rhs: Coercible) -> "BigInteger":
        return BigInteger(self._mpz + to_mpz(rhs))

    def sub(self, rhs: Coercible) -> "BigInteger":
        return BigInteger(self._mpz - to_mpz(rhs))

    def mul(self, rhs: Coercible) -> "BigInteger":
        return BigInteger(self._mpz * to_mpz(rhs))

    def div(self, rhs: Coercible, rounding: RoundingMode = RoundingMode.TRUNCATE) -> "BigInteger":
        """Alias of div_q."""
        return self.div_q(rhs, rounding)

    def div_q(self, rhs: Coercible, rounding: RoundingMode = RoundingMode.TRUNCATE) -> "BigInteger":
        divisor = self._divisor(rhs)
        return BigInteger(MPC.div(self._mpz, divisor, self._rounding_mode(rounding)))

    def div_r(self, rhs: Coercible, rounding: RoundingMode = RoundingMode.TRUNCATE) -> "BigInteger":
        divisor = self._divisor(rhs)
        return BigInteger(MPC.rem(self._mpz, divisor, self._rounding_mode(rounding)))

    def mod(self, rhs: Coercible) -> "BigInteger":
        modulus = to_mpz(rhs)
        if modulus == 0:
            raise DivisionByZeroError("Modulo by zero")
        return BigInteger(MPC.mod(self._mpz, abs(modulus)))

    def pow(self, exponent: Coercible) -> "BigInteger":
        exp = to_mpz(exponent)
        if exp < 0:
            raise DomainError(f"Negative exponent is not supported, exponent={exp}")
        return BigInteger(MPC.pow(self._mpz, exp))

    def pow_mod(self, exponent: Coercible, modulus: Coercible) -> "BigInteger":
        exp = to_mpz(exponent)
        mod = to_mpz(modulus)
        if mod <= 0:
            raise DomainError(f"Modulus must be positive, modulus={mod}")
        if exp < 0:
            raise DomainError(f"Negative exponent is not supported, exponent={exp}")
        return BigInteger(MPC.powmod(self._mpz, exp, mod))

    def sqrt(self) -> "BigInteger":
        if self._mpz < 0:
            raise DomainError(f"Square root of a negative number, value={self}")
        return BigInteger(MPC.isqrt(self._mpz))

    def abs(self) -> "BigInteger":
        return BigInteger(abs(self._mpz))

    def negate(self) -> "BigInteger":
        return BigInteger(-self._mpz)

    def gcd(self, rhs: Coercible) -> "BigInteger":
        return BigInteger(MPC.gcd(self._mpz, to_mpz(rhs)))

    # Python protocol
    # --------------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"

    def __int__(self) -> int:
        return int(self._mpz)

    def __index__(self) -> int:
        return int(self._mpz)

    def __bool__(self) -> bool:
        return self._mpz != 0

    def __hash__(self) -> int:
        return hash(self._mpz)

    def __eq__(self, other) -> bool:
        rhs = _operand(other)
        if rhs is None:
            return NotImplemented
        return self._mpz == rhs

    def __lt__(self, other) -> bool:
        rhs = _operand(other)
        if rhs is None:
            return NotImplemented
        return self._mpz < rhs

    def __le__(self, other) -> bool:
        rhs = _operand(other)
        if rhs is None:
            return NotImplemented
        return self._mpz <= rhs

    def __gt__(self, other) -> bool:
        rhs = _operand(other)
        if rhs is None:
            return NotImplemented
        return self._mpz > rhs

    def __ge__(self, other) -> bool:
        rhs = _operand(other)
        if rhs is None:
            return NotImplemented
        return self._mpz >= rhs

    def __add__(self, other):
        rhs = _operand(other)
        return NotImplemented if rhs is None else self.add(rhs)

    __radd__ = __add__

    def __sub__(self, other):
        rhs = _operand(other)
        return NotImplemented if rhs is None else self.sub(rhs)

    def __rsub__(self, other):
        lhs = _operand(other)
        return NotImplemented if lhs is None else BigInteger(lhs).sub(self)

    def __mul__(self, other):
        rhs = _operand(other)
        return NotImplemented if rhs is None else self.mul(rhs)

    __rmul__ = __mul__

    # // and % follow Python's floor semantics
    def __floordiv__(self, other):
        rhs = _operand(other)
        return NotImplemented if rhs is None else self.div_q(rhs, RoundingMode.FLOOR)

    def __rfloordiv__(self, other):
        lhs = _operand(other)
        return NotImplemented if lhs is None else BigInteger(lhs).div_q(self, RoundingMode.FLOOR)

    def __mod__(self, other):
        rhs = _operand(other)
        return NotImplemented if rhs is None else self.div_r(rhs, RoundingMode.FLOOR)

    def __rmod__(self, other):
        lhs = _operand(other)
        return NotImplemented if lhs is None else BigInteger(lhs).div_r(self, RoundingMode.FLOOR)

    def __divmod__(self, other):
        rhs = _operand(other)
        if rhs is None:
            return NotImplemented
        return self.div_q(rhs, RoundingMode.FLOOR), self.div_r(rhs, RoundingMode.FLOOR)

    def __pow__(self, other, modulo=None):
        exp = _operand(other)
        if exp is None:
            return NotImplemented
        if modulo is None:
            return self.pow(exp)
        mod = _operand(modulo)
        return NotImplemented if mod is None else self.pow_mod(exp, mod)

    def __rpow__(self, other):
        base = _operand(other)
        return NotImplemented if base is None else BigInteger(base).pow(self)

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __pos__(self) -> "BigInteger":
        return self

    def __abs__(self) -> "BigInteger":
        return self.abs()

    # Private Methods
    # --------------

    @staticmethod
    def _divisor(rhs: Coercible) -> MPZ:
        divisor = to_mpz(rhs)
        if divisor == 0:
            raise DivisionByZeroError("Division by zero")
        return divisor

    @staticmethod
    def _rounding_mode(rounding: Union[RoundingMode, int]) -> RoundingMode:
        try:
            return RoundingMode(rounding)
        except ValueError as e:
            raise DomainError(f"Unknown rounding mode, rounding={rounding!r}") from e

    @staticmethod
    def _machine_int_bits() -> int:
        bits = EnvironmentManager.get_int(EnvironmentVariables.MACHINE_INT_BITS)
        if bits < 1:
            default = EnvironmentVariables.MACHINE_INT_BITS.default_value
            logger.warning(f"Ignoring non-positive integer width {bits}, using {default}")
            return default
        return bits


def _operand(value) -> Optional[MPZ]:
    """Engine value for operator overloads; None for types Python should try elsewhere."""
    if isinstance(value, IBigInteger):
        return value.to_mpz()
    if isinstance(value, (int, gmpy2.mpz)):
        return MPC.mpz(value)
    return None
