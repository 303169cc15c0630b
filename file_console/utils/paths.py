"""
Path utilities for resolving filenames against the working directory
"""

from pathlib import Path
from typing import Tuple


class PathResolver:
    """Resolves user-supplied filenames inside the working directory"""

    def __init__(self, working_path: Path):
        self.working_path = Path(working_path)

    def resolve_path(self, filename: str) -> Path:
        """
        Resolve a filename relative to the working directory.

        Names are joined as given; nothing stops a name like ``../x``
        from reaching outside the directory.
        """
        return self.working_path / filename

    def validate_filename(self, filename: str) -> Tuple[bool, str]:
        """
        Validate a filename before writing.

        Returns:
            Tuple of (is_valid, message)
        """
        if not filename or not filename.strip():
            return False, "Invalid filename."

        if "\x00" in filename:
            return False, "Invalid filename."

        return True, "Valid filename"
