"""
Menu choices for the main loop and the modification sub-menu
"""

from enum import IntEnum
from typing import Optional, List, Tuple


class _Choice(IntEnum):
    """Base for numbered menu entries"""

    @classmethod
    def parse(cls, raw: str) -> Optional["_Choice"]:
        """Parse user input; None for non-numeric or unknown values"""
        try:
            return cls(int(raw.strip()))
        except ValueError:
            return None


class MenuChoice(_Choice):
    CREATE = 1
    READ = 2
    MODIFY = 3
    APPEND = 4
    LIST = 5
    DELETE = 6
    EXIT = 7


class ModifyChoice(_Choice):
    REPLACE_LINE = 1
    FIND_REPLACE = 2
    INSERT_LINE = 3
    DELETE_LINE = 4


MAIN_MENU: List[Tuple[MenuChoice, str]] = [
    (MenuChoice.CREATE, "Create and Write to File"),
    (MenuChoice.READ, "Read File Contents"),
    (MenuChoice.MODIFY, "Modify File Contents"),
    (MenuChoice.APPEND, "Append to File"),
    (MenuChoice.LIST, "List All Files"),
    (MenuChoice.DELETE, "Delete File"),
    (MenuChoice.EXIT, "Exit"),
]

MODIFY_MENU: List[Tuple[ModifyChoice, str]] = [
    (ModifyChoice.REPLACE_LINE, "Replace specific line"),
    (ModifyChoice.FIND_REPLACE, "Find and replace text"),
    (ModifyChoice.INSERT_LINE, "Insert line at position"),
    (ModifyChoice.DELETE_LINE, "Delete line"),
]
