"""Helpers built on the BigInteger public interface."""

from .Utils import Utils
from .abstract.IUtils import IUtils

__all__ = ["Utils", "IUtils"]
