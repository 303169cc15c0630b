"""
Menu-driven file console.

The loop prints the main menu, reads a choice and runs one action. Every
action reads what it needs through the LineReader, calls a tool, and prints
the outcome. Input mistakes are reported inline; filesystem errors go to the
error console. Neither ends the loop.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Optional

from loguru import logger
from rich.console import Console

from file_console.core.menu import MAIN_MENU, MODIFY_MENU, MenuChoice, ModifyChoice
from file_console.core.prompts import LineReader
from file_console.tools.file_tools import FileTools
from file_console.tools.folder_tools import FolderTools
from file_console.tools.line_tools import (
    INVALID_LINE_NUMBER,
    INVALID_POSITION,
    LineTools,
)


CONFIRM_ANSWERS = ("y", "yes")


class FileConsole:
    """Interactive front end over the file, line and folder tools."""

    def __init__(
        self,
        working_path: Path,
        reader: LineReader,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        end_sentinel: str = "END",
        encoding: str = "utf-8",
    ):
        self.working_path = Path(working_path)
        self.console = console or reader.console
        self.err_console = err_console or Console(stderr=True)
        self.reader = reader
        self.end_sentinel = end_sentinel

        self.files = FileTools(self.working_path, encoding)
        self.lines = LineTools(self.working_path, encoding)
        self.folders = FolderTools(self.working_path)

        self.actions: Dict[MenuChoice, Callable[[], None]] = {
            MenuChoice.CREATE: self.create_file,
            MenuChoice.READ: self.read_file,
            MenuChoice.MODIFY: self.modify_file,
            MenuChoice.APPEND: self.append_file,
            MenuChoice.LIST: self.list_files,
            MenuChoice.DELETE: self.delete_file,
        }
        self.modifications: Dict[ModifyChoice, Callable[[str], None]] = {
            ModifyChoice.REPLACE_LINE: self.replace_line,
            ModifyChoice.FIND_REPLACE: self.find_and_replace,
            ModifyChoice.INSERT_LINE: self.insert_line,
            ModifyChoice.DELETE_LINE: self.delete_line,
        }

    # ------------------------------------------------------------------
    # Output helpers. Markup is off: file text and names print literally.
    # ------------------------------------------------------------------

    def echo(self, text: str = "", style: Optional[str] = None):
        self.console.print(
            text, style=style, markup=False, emoji=False, highlight=False, soft_wrap=True
        )

    def echo_raw(self, text: str):
        """Write file text verbatim; tabs and control characters are not rendered"""
        self.console.file.write(text + "\n")
        self.console.file.flush()

    def success(self, text: str):
        self.echo(text, style="green")

    def notice(self, text: str):
        self.echo(text, style="yellow")

    def error(self, text: str):
        self.err_console.print(
            text, style="red", markup=False, emoji=False, highlight=False, soft_wrap=True
        )

    def report(self, result: Dict[str, Any]) -> bool:
        """Print a failed result; True when the result succeeded"""
        if "error" not in result:
            return True
        if result.get("invalid_input") or result.get("not_found"):
            self.notice(result["error"])
        else:
            self.error(result["error"])
        return False

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def display_menu(self):
        self.echo("\n=== MENU ===")
        for choice, label in MAIN_MENU:
            self.echo(f"{choice.value}. {label}")

    def run(self) -> int:
        """Run until the user exits; returns the process exit status"""
        while True:
            try:
                self.display_menu()
                choice = MenuChoice.parse(self.reader.read_line("Enter your choice (1-7): "))

                if choice is MenuChoice.EXIT:
                    self.echo("Goodbye!")
                    return 0

                action = self.actions.get(choice)
                if action is None:
                    self.notice("Invalid choice. Please try again.")
                else:
                    logger.debug(f"Menu action: {choice.name}")
                    action()

                self.echo("\nPress Enter to continue...")
                self.reader.read_line()

            except (EOFError, KeyboardInterrupt):
                self.echo("\nGoodbye!")
                return 0

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _read_content(self, prompt: str):
        self.echo(f"{prompt} (type '{self.end_sentinel}' on a new line to finish):")
        return self.reader.read_block(self.end_sentinel)

    def create_file(self):
        self.echo("\n=== FILE CREATION ===")
        filename = self.reader.read_line("Enter filename: ")

        valid, message = self.files.resolver.validate_filename(filename)
        if not valid:
            self.notice(message)
            return

        lines = self._read_content("Enter content")
        result = self.files.write_lines(filename, lines)
        if self.report(result):
            self.success(f"Successfully created/updated file: {result['filepath']}")

    def append_file(self):
        self.echo("\n=== FILE APPENDING ===")
        filename = self.reader.read_line("Enter filename to append to: ")

        valid, message = self.files.resolver.validate_filename(filename)
        if not valid:
            self.notice(message)
            return

        if self.files.locate(filename).get("not_found"):
            self.notice("File not found. Creating new file.")

        lines = self._read_content("Enter content to append")
        result = self.files.append_lines(filename, lines)
        if self.report(result):
            self.success(f"Successfully appended to file: {result['filepath']}")

    def read_file(self):
        self.echo("\n=== FILE READING ===")
        filename = self.reader.read_line("Enter filename to read: ")
        self.show_file(filename)

    def show_file(self, filename: str) -> bool:
        """Print a file with 1-based, right-aligned line numbers"""
        result = self.files.read_lines(filename)
        if not self.report(result):
            return False

        self.echo("\n--- FILE CONTENTS ---")
        self.echo(f"File: {result['filepath']}")
        self.echo(f"Lines: {result['line_count']}")
        self.echo("--- START ---")
        for number, line in enumerate(result["lines"], 1):
            self.echo_raw(f"{number:3d}: {line}")
        self.echo("--- END ---")
        return True

    def modify_file(self):
        self.echo("\n=== FILE MODIFICATION ===")
        filename = self.reader.read_line("Enter filename to modify: ")

        if not self.report(self.files.locate(filename, "Error modifying file")):
            return

        self.echo("\nCurrent file contents:")
        if not self.show_file(filename):
            return

        self.echo("\nModification options:")
        for choice, label in MODIFY_MENU:
            self.echo(f"{choice.value}. {label}")

        choice = ModifyChoice.parse(self.reader.read_line("Choose option (1-4): "))
        modification = self.modifications.get(choice)
        if modification is None:
            self.notice("Invalid choice.")
            return
        modification(filename)

    def _current_lines(self, filename: str):
        result = self.files.read_lines(filename)
        if not self.report(result):
            return None
        return result["lines"]

    def replace_line(self, filename: str):
        lines = self._current_lines(filename)
        if lines is None:
            return

        number = self.reader.read_int(f"Enter line number to replace (1-{len(lines)}): ")
        if number is None or not 1 <= number <= len(lines):
            self.notice(INVALID_LINE_NUMBER)
            return

        self.echo_raw(f"Current line: {lines[number - 1]}")
        content = self.reader.read_line("Enter new content: ")

        if self.report(self.lines.replace_line(filename, number, content)):
            self.success("Line replaced successfully!")

    def find_and_replace(self, filename: str):
        find = self.reader.read_line("Enter text to find: ")
        replace = self.reader.read_line("Enter replacement text: ")

        result = self.lines.find_and_replace(filename, find, replace)
        if self.report(result):
            self.success(f"Find and replace completed! ({result['replacements']} replacement(s))")

    def insert_line(self, filename: str):
        lines = self._current_lines(filename)
        if lines is None:
            return

        position = self.reader.read_int(f"Enter position to insert (1-{len(lines) + 1}): ")
        if position is None or not 1 <= position <= len(lines) + 1:
            self.notice(INVALID_POSITION)
            return

        content = self.reader.read_line("Enter text to insert: ")

        if self.report(self.lines.insert_line(filename, position, content)):
            self.success("Line inserted successfully!")

    def delete_line(self, filename: str):
        lines = self._current_lines(filename)
        if lines is None:
            return

        number = self.reader.read_int(f"Enter line number to delete (1-{len(lines)}): ")
        if number is None or not 1 <= number <= len(lines):
            self.notice(INVALID_LINE_NUMBER)
            return

        self.echo_raw(f"Deleting line: {lines[number - 1]}")

        if self.report(self.lines.delete_line(filename, number)):
            self.success("Line deleted successfully!")

    def list_files(self):
        self.echo("\n=== FILE LIST ===")
        result = self.folders.list_files()
        if not self.report(result):
            return

        if not result["files"]:
            self.notice(f"No files found in {result['path']}")
            return

        self.echo(f"Files in {result['path']}:")
        for index, info in enumerate(result["files"], 1):
            self.echo(
                f"{index:3d}. {info['name']:<20} "
                f"(Size: {info['size_bytes']} bytes, Modified: {info['modified']})"
            )

    def delete_file(self):
        self.echo("\n=== FILE DELETION ===")
        filename = self.reader.read_line("Enter filename to delete: ")

        if not self.report(self.files.locate(filename, "Error deleting file")):
            return

        answer = self.reader.read_line(f"Are you sure you want to delete '{filename}'? (y/N): ")
        if answer.lower() not in CONFIRM_ANSWERS:
            self.notice("File deletion cancelled.")
            return

        result = self.files.delete_file(filename)
        if self.report(result):
            self.success(f"File deleted successfully: {result['deleted']}")
