"""Converter for big integer values."""

from biginteger.number import BigInteger, Coercible
from biginteger.protocol_constants import HEX_BASE


class BigIntegerConverter:
    """Converter between BigInteger values and their stored hex strings."""

    @staticmethod
    def to_hex(value: Coercible) -> str:
        """Convert a value to a storage hex string.

        Args:
            value: BigInteger, int, mpz or decimal string

        Returns:
            str: Signed lowercase hex digits without the 0x prefix
        """
        return BigInteger.of(value).to_hex()

    @staticmethod
    def from_hex(value: str) -> BigInteger:
        """Convert a storage hex string back to a BigInteger.

        Args:
            value (str): Hex digits as produced by to_hex

        Returns:
            BigInteger: The stored value

        Raises:
            ParseError: If the string is not hexadecimal
        """
        return BigInteger.from_value(value, HEX_BASE)
