"""
Line Tools - line-level editing with 1-indexed positions
Each edit re-reads the file, validates the position and rewrites the whole file
"""

from pathlib import Path
from typing import Dict, List, Any, Callable

from loguru import logger

from file_console.tools.file_tools import FileTools, join_lines


INVALID_LINE_NUMBER = "Invalid line number."
INVALID_POSITION = "Invalid position."
EMPTY_SEARCH = "Search text cannot be empty."


class LineTools:
    """
    Provides replace, insert and delete of single lines, and literal
    find-and-replace over the whole file.
    """

    def __init__(self, working_path: Path, encoding: str = "utf-8"):
        self.files = FileTools(working_path, encoding)

    def _rewrite(
        self,
        filename: str,
        edit: Callable[[List[str]], Dict[str, Any]],
    ) -> Dict[str, Any]:
        """Read lines, apply an in-place edit, write lines back"""
        result = self.files.read_lines(filename)
        if "error" in result:
            return result

        lines = result["lines"]
        outcome = edit(lines)
        if "error" in outcome:
            return outcome

        written = self.files.write_text(filename, join_lines(lines))
        if "error" in written:
            return written

        outcome.update({
            "success": True,
            "filepath": result["filepath"],
            "new_total_lines": len(lines),
        })
        return outcome

    def replace_line(self, filename: str, line_number: int, content: str) -> Dict[str, Any]:
        """
        Replace a single line.

        Args:
            filename: Name relative to the working directory
            line_number: Line to replace (1-indexed, 1..line count)
            content: New text for the line

        Returns:
            Dict with replacement result, including the old text
        """
        def edit(lines: List[str]) -> Dict[str, Any]:
            if not 1 <= line_number <= len(lines):
                return {"error": INVALID_LINE_NUMBER, "invalid_input": True}
            old = lines[line_number - 1]
            lines[line_number - 1] = content
            return {"line_number": line_number, "old_content": old}

        result = self._rewrite(filename, edit)
        if result.get("success"):
            logger.debug(f"Replaced line {line_number} in {result['filepath']}")
        return result

    def insert_line(self, filename: str, position: int, content: str) -> Dict[str, Any]:
        """
        Insert a line so that it becomes line ``position``.

        Args:
            filename: Name relative to the working directory
            position: 1-indexed target, 1..line count + 1 (the last appends)
            content: Text of the new line
        """
        def edit(lines: List[str]) -> Dict[str, Any]:
            if not 1 <= position <= len(lines) + 1:
                return {"error": INVALID_POSITION, "invalid_input": True}
            lines.insert(position - 1, content)
            return {"inserted_at_line": position}

        result = self._rewrite(filename, edit)
        if result.get("success"):
            logger.debug(f"Inserted line at {position} in {result['filepath']}")
        return result

    def delete_line(self, filename: str, line_number: int) -> Dict[str, Any]:
        """
        Delete a single line.

        Args:
            filename: Name relative to the working directory
            line_number: Line to delete (1-indexed, 1..line count)
        """
        def edit(lines: List[str]) -> Dict[str, Any]:
            if not 1 <= line_number <= len(lines):
                return {"error": INVALID_LINE_NUMBER, "invalid_input": True}
            deleted = lines.pop(line_number - 1)
            return {"line_number": line_number, "deleted_content": deleted}

        result = self._rewrite(filename, edit)
        if result.get("success"):
            logger.debug(f"Deleted line {line_number} in {result['filepath']}")
        return result

    def find_and_replace(self, filename: str, find: str, replace: str) -> Dict[str, Any]:
        """
        Replace every non-overlapping literal occurrence of ``find``.

        The file is treated as raw text, so line terminators are kept as
        they are. With no matches the file is not rewritten.

        Returns:
            Dict with the replacement count
        """
        if not find:
            return {"error": EMPTY_SEARCH, "invalid_input": True}

        result = self.files.read_text(filename)
        if "error" in result:
            return result

        existing = result["content"]
        count = existing.count(find)

        if count == 0:
            return {
                "success": True,
                "filepath": result["filepath"],
                "replacements": 0,
            }

        written = self.files.write_text(filename, existing.replace(find, replace))
        if "error" in written:
            return written

        logger.debug(f"Replaced {count} occurrence(s) in {result['filepath']}")
        return {
            "success": True,
            "filepath": result["filepath"],
            "replacements": count,
        }
