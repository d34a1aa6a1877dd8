from typing import Optional

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

from biginteger.converters import BigIntegerConverter
from biginteger.number import BigInteger, Coercible


class BigIntegerType(TypeDecorator):
    """Column type storing a BigInteger as a signed hex string."""

    impl = String
    cache_ok = True

    def process_bind_param(self, value: Optional[Coercible], dialect) -> Optional[str]:
        if value is None:
            return None
        return BigIntegerConverter.to_hex(value)

    def process_result_value(self, value: Optional[str], dialect) -> Optional[BigInteger]:
        if value is None:
            return None
        return BigIntegerConverter.from_hex(value)

    @property
    def python_type(self):
        return BigInteger
