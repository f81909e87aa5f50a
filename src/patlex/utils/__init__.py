"""Utility modules for patlex.

Provides:
- logger: get_logger for logging
"""

from patlex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
