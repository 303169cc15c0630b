"""
Folder Tools - listing the working directory
"""

from pathlib import Path
from typing import Dict, Any
from datetime import datetime

from loguru import logger


class FolderTools:
    """Lists regular files directly inside the working directory."""

    def __init__(self, working_path: Path):
        self.working_path = Path(working_path)

    def list_files(self) -> Dict[str, Any]:
        """
        List regular files (no subdirectories), sorted by name.

        Returns:
            Dict with "files" (name, size_bytes, modified), or an "error".
            A missing directory also sets "not_found".
        """
        if not self.working_path.is_dir():
            return {
                "error": f"Directory not found: {self.working_path}",
                "not_found": True,
            }

        try:
            files = []
            for item in sorted(self.working_path.iterdir(), key=lambda p: p.name):
                if not item.is_file():
                    continue
                stat = item.stat()
                files.append({
                    "name": item.name,
                    "size_bytes": stat.st_size,
                    "modified": datetime.fromtimestamp(stat.st_mtime).isoformat(),
                })
        except OSError as e:
            logger.warning(f"Listing failed for {self.working_path}: {e}")
            return {"error": f"Error listing files: {e}"}

        return {
            "path": str(self.working_path),
            "files": files,
            "file_count": len(files),
        }
