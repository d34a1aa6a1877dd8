import logging
import threading
from typing import Dict

from ..number import BigInteger, Coercible
from ..random import Random
from .abstract.IUtils import IUtils

logger = logging.getLogger(__name__)


class Utils(IUtils):
    """Implementation of stateless big integer helpers."""

    # Table of already calculated factorials
    _factorials_cache: Dict[int, BigInteger] = {}
    _factorials_lock = threading.Lock()

    @staticmethod
    def cached_factorial(n: int) -> BigInteger:
        # Entries are published fully built; only misses take the lock
        cached = Utils._factorials_cache.get(n)
        if cached is not None:
            logger.debug(f"Factorial cache hit for n={n}")
            return cached

        with Utils._factorials_lock:
            cached = Utils._factorials_cache.get(n)
            if cached is None:
                logger.debug(f"Factorial cache miss for n={n}")
                cached = BigInteger.factorial(n)
                Utils._factorials_cache[n] = cached
            return cached

    @staticmethod
    def gcd(a: Coercible, b: Coercible) -> BigInteger:
        return BigInteger.of(a).gcd(b)

    @staticmethod
    def random(size: int) -> BigInteger:
        return BigInteger.from_buffer(Random.get_bytes(size), False)
