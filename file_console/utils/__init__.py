"""
Utility modules for File Console
"""

from .paths import PathResolver
from .logging import setup_logging

__all__ = [
    "PathResolver",
    "setup_logging",
]
