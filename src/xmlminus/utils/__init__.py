"""Utility modules for xmlminus.

Provides:
- logger: get_logger for logging
"""

from xmlminus.utils.logger import get_logger

__all__ = [
    "get_logger",
]
