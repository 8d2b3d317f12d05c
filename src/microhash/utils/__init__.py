"""Utilities module for microhash."""

from microhash.utils.log import get_logger
from microhash.utils.timing import Timer

__all__ = [
    "get_logger",
    "Timer",
]
