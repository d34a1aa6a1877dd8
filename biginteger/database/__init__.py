"""SQLAlchemy integration for big integer columns."""

from .BigIntegerType import BigIntegerType
from .database import get_orm_base

__all__ = ["BigIntegerType", "get_orm_base"]
