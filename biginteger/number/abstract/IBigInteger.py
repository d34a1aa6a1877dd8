from abc import ABC, abstractmethod
from typing import Union

from ...mpc.types import MPZ
from ..RoundingMode import RoundingMode

Coercible = Union["IBigInteger", int, str, MPZ]


class IBigInteger(ABC):
    """Abstract base class defining the interface for an immutable big integer value."""

    __slots__ = ()

    # Conversion
    # --------------

    @abstractmethod
    def to_int(self) -> int:
        """Narrow the value to a native machine integer.

        Returns:
            int: The value

        Raises:
            IntegerOverflowError: If the value is outside the signed range of
                BIGINT_MACHINE_INT_BITS bits
        """

    @abstractmethod
    def to_string(self) -> str:
        """Get the canonical decimal representation.

        Returns:
            str: Decimal digits with a leading '-' for negative values
        """

    @abstractmethod
    def to_buffer(self, reverse: bool = True) -> bytes:
        """Encode the magnitude as bytes. The sign is dropped.

        Args:
            reverse (bool): Return the bytes little-endian instead of big-endian

        Returns:
            bytes: Magnitude without leading zero bytes; zero encodes to b""
        """

    @abstractmethod
    def to_mpz(self) -> MPZ:
        """Get the engine value.

        Returns:
            MPZ: The wrapped multi-precision integer
        """

    # Comparison
    # --------------

    @abstractmethod
    def compare(self, rhs: Coercible) -> int:
        """Compare with another value.

        Args:
            rhs: BigInteger, int, mpz or decimal string

        Returns:
            int: 1 if self > rhs, 0 if equal, -1 if self < rhs
        """

    @abstractmethod
    def between(self, left: Coercible, right: Coercible, exclusive: bool = False) -> bool:
        """Test interval membership.

        Args:
            left: Lower endpoint
            right: Upper endpoint
            exclusive (bool): Exclude both endpoints

        Returns:
            bool: True if the value lies in [left, right], or (left, right) when exclusive
        """

    # Arithmetic
    # --------------

    @abstractmethod
    def add(self, rhs: Coercible) -> "IBigInteger":
        """Return self + rhs."""

    @abstractmethod
    def sub(self, rhs: Coercible) -> "IBigInteger":
        """Return self - rhs."""

    @abstractmethod
    def mul(self, rhs: Coercible) -> "IBigInteger":
        """Return self * rhs."""

    @abstractmethod
    def div_q(self, rhs: Coercible, rounding: RoundingMode = RoundingMode.TRUNCATE) -> "IBigInteger":
        """Divide and round the quotient.

        Args:
            rhs: Divisor
            rounding (RoundingMode): Rounding applied to the quotient

        Returns:
            IBigInteger: The quotient

        Raises:
            DivisionByZeroError: If rhs is zero
            DomainError: If rounding is not a known rounding mode
        """

    @abstractmethod
    def div_r(self, rhs: Coercible, rounding: RoundingMode = RoundingMode.TRUNCATE) -> "IBigInteger":
        """Divide and return the remainder left by div_q with the same rounding.

        Args:
            rhs: Divisor
            rounding (RoundingMode): Rounding applied to the quotient

        Returns:
            IBigInteger: self - rhs * self.div_q(rhs, rounding)

        Raises:
            DivisionByZeroError: If rhs is zero
            DomainError: If rounding is not a known rounding mode
        """

    @abstractmethod
    def mod(self, rhs: Coercible) -> "IBigInteger":
        """Reduce modulo |rhs|.

        Returns:
            IBigInteger: A value in [0, |rhs|)

        Raises:
            DivisionByZeroError: If rhs is zero
        """

    @abstractmethod
    def pow(self, exponent: Coercible) -> "IBigInteger":
        """Raise to a non-negative power.

        Raises:
            DomainError: If the exponent is negative
        """

    @abstractmethod
    def pow_mod(self, exponent: Coercible, modulus: Coercible) -> "IBigInteger":
        """Compute (self ** exponent) mod modulus.

        Raises:
            DomainError: If the modulus is not positive or the exponent is negative
        """

    @abstractmethod
    def sqrt(self) -> "IBigInteger":
        """Integer square root, rounded down.

        Raises:
            DomainError: If the value is negative
        """

    @abstractmethod
    def abs(self) -> "IBigInteger":
        """Return the magnitude."""

    @abstractmethod
    def negate(self) -> "IBigInteger":
        """Return -self."""

    @abstractmethod
    def gcd(self, rhs: Coercible) -> "IBigInteger":
        """Greatest common divisor, always non-negative; gcd(0, 0) is 0."""
