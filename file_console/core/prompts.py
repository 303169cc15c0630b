"""
Line-oriented input for the console.

Reads go through the rich console so prompts and echoed output share one
stream. Passing an explicit text stream makes every prompt scriptable.
"""

from typing import List, Optional, TextIO

from rich.console import Console


class LineReader:
    """Reads single lines, numbers and sentinel-terminated blocks"""

    def __init__(self, console: Console, stream: Optional[TextIO] = None):
        self.console = console
        self.stream = stream

    def read_line(self, prompt: str = "") -> str:
        """
        Read one line without its terminator.

        Raises:
            EOFError: when the input is exhausted
        """
        raw = self.console.input(prompt, markup=False, emoji=False, stream=self.stream)
        if self.stream is None:
            # builtin input() already stripped the newline and raises EOFError
            return raw
        if raw == "":
            raise EOFError
        if raw.endswith("\n"):
            raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
        return raw

    def read_int(self, prompt: str = "") -> Optional[int]:
        """Read a line as an integer; None when it is not a number"""
        try:
            return int(self.read_line(prompt).strip())
        except ValueError:
            return None

    def read_block(self, sentinel: str = "END") -> List[str]:
        """Collect lines until one equals the sentinel exactly"""
        lines = []
        while True:
            line = self.read_line()
            if line == sentinel:
                return lines
            lines.append(line)
