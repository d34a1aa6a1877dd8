"""Type definitions for multi-precision computing operations."""

from typing import NewType
from gmpy2 import mpz as _mpz

# Define base types from gmpy2
MPZ = NewType("MPZ", _mpz)
