"""
File Tools - whole-file operations
All filenames are resolved inside the working directory
"""

from pathlib import Path
from typing import Dict, List, Any

from loguru import logger

from file_console.utils.paths import PathResolver


def split_lines(text: str) -> List[str]:
    """Split text into lines; a trailing newline does not add an empty line"""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def join_lines(lines: List[str]) -> str:
    """Join lines back into text, terminating every line with a newline"""
    return "".join(line + "\n" for line in lines)


class FileTools:
    """
    Provides whole-file create, append, read and delete operations.
    Every method returns a result dict; failures carry an "error" key.
    """

    def __init__(self, working_path: Path, encoding: str = "utf-8"):
        self.working_path = Path(working_path)
        self.resolver = PathResolver(self.working_path)
        self.encoding = encoding

    def resolve(self, filename: str) -> Path:
        return self.resolver.resolve_path(filename)

    def locate(self, filename: str, context: str = "Error reading file") -> Dict[str, Any]:
        """
        Check that a name refers to an existing regular file.

        Args:
            filename: Name relative to the working directory
            context: Prefix for the message when the lookup itself fails

        Returns:
            Dict with "path" and "filepath", or an "error". A missing
            file also sets "not_found".
        """
        resolved = self.resolve(filename)
        try:
            exists = resolved.exists()
            is_file = exists and resolved.is_file()
        except OSError as e:
            logger.warning(f"Lookup failed for {resolved}: {e}")
            return {"error": f"{context}: {e}"}

        if not exists:
            return {"error": f"File not found: {resolved}", "not_found": True}

        if not is_file:
            return {"error": f"Not a file: {resolved}"}

        return {"path": resolved, "filepath": str(resolved)}

    def write_lines(self, filename: str, lines: List[str]) -> Dict[str, Any]:
        """
        Create a file, or truncate an existing one, and write lines to it.

        Args:
            filename: Name relative to the working directory
            lines: Lines to write, each is followed by a newline

        Returns:
            Dict with write result
        """
        valid, message = self.resolver.validate_filename(filename)
        if not valid:
            return {"error": message, "invalid_input": True}

        resolved = self.resolve(filename)
        try:
            was_existing = resolved.exists()
            with open(resolved, "w", encoding=self.encoding, newline="") as f:
                f.write(join_lines(lines))
        except OSError as e:
            logger.warning(f"Write failed for {resolved}: {e}")
            return {"error": f"Error writing to file: {e}"}

        logger.debug(f"Wrote {len(lines)} lines to {resolved}")
        return {
            "success": True,
            "filepath": str(resolved),
            "line_count": len(lines),
            "created": not was_existing,
        }

    def append_lines(self, filename: str, lines: List[str]) -> Dict[str, Any]:
        """
        Append lines to a file, creating it if absent.

        Args:
            filename: Name relative to the working directory
            lines: Lines to append, each is followed by a newline

        Returns:
            Dict with append result
        """
        valid, message = self.resolver.validate_filename(filename)
        if not valid:
            return {"error": message, "invalid_input": True}

        resolved = self.resolve(filename)
        try:
            was_existing = resolved.exists()
            with open(resolved, "a", encoding=self.encoding, newline="") as f:
                f.write(join_lines(lines))
        except OSError as e:
            logger.warning(f"Append failed for {resolved}: {e}")
            return {"error": f"Error writing to file: {e}"}

        logger.debug(f"Appended {len(lines)} lines to {resolved}")
        return {
            "success": True,
            "filepath": str(resolved),
            "lines_appended": len(lines),
            "created": not was_existing,
        }

    def read_lines(self, filename: str) -> Dict[str, Any]:
        """
        Read a file as an ordered list of lines.

        Returns:
            Dict with "lines" and "line_count", or an "error". A missing
            file also sets "not_found".
        """
        located = self.locate(filename)
        if "error" in located:
            return located
        resolved = located["path"]

        try:
            # Universal newlines: \r\n and \r both end a line
            with open(resolved, "r", encoding=self.encoding) as f:
                lines = split_lines(f.read())
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Read failed for {resolved}: {e}")
            return {"error": f"Error reading file: {e}"}

        return {
            "filepath": located["filepath"],
            "lines": lines,
            "line_count": len(lines),
        }

    def read_text(self, filename: str) -> Dict[str, Any]:
        """Read a file as raw text, line terminators untouched"""
        located = self.locate(filename)
        if "error" in located:
            return located
        resolved = located["path"]

        try:
            with open(resolved, "r", encoding=self.encoding, newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Read failed for {resolved}: {e}")
            return {"error": f"Error reading file: {e}"}

        return {"filepath": located["filepath"], "content": content}

    def write_text(self, filename: str, content: str) -> Dict[str, Any]:
        """Overwrite a file with raw text, line terminators untouched"""
        resolved = self.resolve(filename)
        try:
            with open(resolved, "w", encoding=self.encoding, newline="") as f:
                f.write(content)
        except OSError as e:
            logger.warning(f"Write failed for {resolved}: {e}")
            return {"error": f"Error modifying file: {e}"}

        return {"success": True, "filepath": str(resolved)}

    def delete_file(self, filename: str) -> Dict[str, Any]:
        """
        Delete a file.

        Returns:
            Dict with deletion result
        """
        located = self.locate(filename, "Error deleting file")
        if "error" in located:
            return located
        resolved = located["path"]

        try:
            size = resolved.stat().st_size
            resolved.unlink()
        except OSError as e:
            logger.warning(f"Delete failed for {resolved}: {e}")
            return {"error": f"Error deleting file: {e}"}

        logger.debug(f"Deleted {resolved} ({size} bytes)")
        return {
            "success": True,
            "deleted": located["filepath"],
            "size_bytes": size,
        }
