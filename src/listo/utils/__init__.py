"""Utility modules for Listo.

Provides:
- logger: get_logger for logging
"""

from listo.utils.logger import get_logger

__all__ = [
    "get_logger",
]
