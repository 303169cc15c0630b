"""
Tools modules for File Console
"""

from .file_tools import (
    FileTools,
    split_lines,
    join_lines,
)

from .line_tools import LineTools

from .folder_tools import FolderTools

__all__ = [
    # File Tools
    "FileTools",
    "split_lines",
    "join_lines",
    # Line Tools
    "LineTools",
    # Folder Tools
    "FolderTools",
]
