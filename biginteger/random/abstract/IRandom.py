from abc import ABC, abstractmethod


class IRandom(ABC):
    """Abstract base class defining the interface for random byte generation."""

    @staticmethod
    @abstractmethod
    def get_bytes(size: int) -> bytes:
        """Draw bytes from a cryptographically secure source.

        Args:
            size (int): Number of bytes, at least 1

        Returns:
            bytes: size random bytes

        Raises:
            DomainError: If size is not positive
            RandomSourceError: If the secure source fails or is unavailable
        """
