from abc import ABC, abstractmethod

from ...number import BigInteger, Coercible


class IUtils(ABC):
    """Abstract base class defining the interface for big integer helpers."""

    @staticmethod
    @abstractmethod
    def cached_factorial(n: int) -> BigInteger:
        """Calculate or retrieve a cached factorial.

        Args:
            n (int): Non-negative integer

        Returns:
            BigInteger: n!, computed at most once per process for each n
        """

    @staticmethod
    @abstractmethod
    def gcd(a: Coercible, b: Coercible) -> BigInteger:
        """Greatest common divisor of two operands.

        Args:
            a: BigInteger, int or decimal string
            b: BigInteger, int or decimal string

        Returns:
            BigInteger: GCD of a and b
        """

    @staticmethod
    @abstractmethod
    def random(size: int) -> BigInteger:
        """Cryptographically secure random number of the given size.

        Args:
            size (int): Size in bytes

        Returns:
            BigInteger: Non-negative value below 256 ** size
        """
