from abc import ABC, abstractmethod
from typing import Union

from ..types import MPZ


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations."""

    @staticmethod
    @abstractmethod
    def mpz(value: Union[int, MPZ]) -> MPZ:
        """Convert a Python integer to an mpz.

        Args:
            value (int): Integer value to convert

        Returns:
            mpz: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def parse(value: str, base: int) -> MPZ:
        """Parse a string in the given base.

        Args:
            value (str): Digits, optionally signed and prefixed
            base (int): Radix in 2..62, or 0 to detect it from the prefix

        Returns:
            mpz: Parsed value

        Raises:
            ValueError: If the string is not a number in the given base
        """

    @staticmethod
    @abstractmethod
    def digits(value: MPZ, base: int) -> str:
        """Render a value in the given base, without prefix.

        Args:
            value (mpz): Value to render
            base (int): Radix of the output

        Returns:
            str: Signed digit string
        """

    @staticmethod
    @abstractmethod
    def cmp(lhs: MPZ, rhs: MPZ) -> int:
        """Compare two values.

        Returns:
            int: -1, 0 or 1
        """

    @staticmethod
    @abstractmethod
    def div(value: MPZ, divisor: MPZ, mode: int) -> MPZ:
        """Integer quotient rounded according to mode.

        Args:
            value (mpz): Dividend
            divisor (mpz): Non-zero divisor
            mode (int): 0 truncates, 1 rounds toward +inf, 2 toward -inf

        Returns:
            mpz: Quotient
        """

    @staticmethod
    @abstractmethod
    def rem(value: MPZ, divisor: MPZ, mode: int) -> MPZ:
        """Remainder matching the quotient of div() for the same mode.

        Args:
            value (mpz): Dividend
            divisor (mpz): Non-zero divisor
            mode (int): 0 truncates, 1 rounds toward +inf, 2 toward -inf

        Returns:
            mpz: value - divisor * div(value, divisor, mode)
        """

    @staticmethod
    @abstractmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        """Compute (base ** exp) % mod efficiently.

        Args:
            base (mpz): Base value
            exp (mpz): Exponent value
            mod (mpz): Modulus value

        Returns:
            mpz: Result of modular exponentiation
        """

    @staticmethod
    @abstractmethod
    def pow(base: MPZ, exp: MPZ) -> MPZ:
        """Compute base ** exp.

        Args:
            base (mpz): Base value
            exp (mpz): Exponent value

        Returns:
            mpz: Result of exponentiation
        """

    @staticmethod
    @abstractmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        """Compute value % modulus.

        Args:
            value (mpz): Value to reduce
            modulus (mpz): Modulus to reduce by

        Returns:
            mpz: Result of modular reduction
        """

    @staticmethod
    @abstractmethod
    def fac(n: int) -> MPZ:
        """Compute n!."""

    @staticmethod
    @abstractmethod
    def isqrt(value: MPZ) -> MPZ:
        """Integer square root, rounded down."""

    @staticmethod
    @abstractmethod
    def gcd(lhs: MPZ, rhs: MPZ) -> MPZ:
        """Non-negative greatest common divisor."""
