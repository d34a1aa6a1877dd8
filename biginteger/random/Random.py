import logging
import secrets

from ..exceptions import DomainError, RandomSourceError
from .abstract.IRandom import IRandom

logger = logging.getLogger(__name__)


class Random(IRandom):
    """Implementation of secure random byte generation."""

    @staticmethod
    def get_bytes(size: int) -> bytes:
        if size < 1:
            raise DomainError(f"Random size must be greater than 0, size={size}")

        logger.debug(f"Drawing {size} secure random bytes")
        try:
            return secrets.token_bytes(size)
        except (OSError, NotImplementedError) as e:
            logger.error(f"Secure random source failed: {e}")
            raise RandomSourceError(f"Could not gather {size} random bytes") from e
