"""
Core modules for File Console
"""

from .menu import (
    MenuChoice,
    ModifyChoice,
    MAIN_MENU,
    MODIFY_MENU,
)

from .prompts import LineReader

from .console import FileConsole

__all__ = [
    # Menu
    "MenuChoice",
    "ModifyChoice",
    "MAIN_MENU",
    "MODIFY_MENU",
    # Input
    "LineReader",
    # Console
    "FileConsole",
]
