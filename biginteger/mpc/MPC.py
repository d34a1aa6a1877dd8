from typing import Union

import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ

# Quotient and remainder primitives indexed by GMP rounding constant
_DIVIDERS = {
    0: (gmpy2.t_div, gmpy2.t_mod),  # toward zero
    1: (gmpy2.c_div, gmpy2.c_mod),  # toward +inf
    2: (gmpy2.f_div, gmpy2.f_mod),  # toward -inf
}


class MPC(IMPC):
    """Implementation of multi-precision computing operations."""

    @staticmethod
    def mpz(value: Union[int, MPZ]) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def parse(value: str, base: int) -> MPZ:
        return gmpy2.mpz(value, base)

    @staticmethod
    def digits(value: MPZ, base: int) -> str:
        return value.digits(base)

    @staticmethod
    def cmp(lhs: MPZ, rhs: MPZ) -> int:
        return (lhs > rhs) - (lhs < rhs)

    @staticmethod
    def div(value: MPZ, divisor: MPZ, mode: int) -> MPZ:
        return _DIVIDERS[mode][0](value, divisor)

    @staticmethod
    def rem(value: MPZ, divisor: MPZ, mode: int) -> MPZ:
        return _DIVIDERS[mode][1](value, divisor)

    @staticmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        return gmpy2.powmod(base, exp, mod)

    @staticmethod
    def pow(base: MPZ, exp: MPZ) -> MPZ:
        return base**exp

    @staticmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        return gmpy2.f_mod(value, modulus)

    @staticmethod
    def fac(n: int) -> MPZ:
        return gmpy2.fac(n)

    @staticmethod
    def isqrt(value: MPZ) -> MPZ:
        return gmpy2.isqrt(value)

    @staticmethod
    def gcd(lhs: MPZ, rhs: MPZ) -> MPZ:
        return gmpy2.gcd(lhs, rhs)
