#!/usr/bin/env python3
"""
File Console - Menu-driven text file utility
Main entry point with Rich UI
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from dotenv import load_dotenv
from loguru import logger

from file_console.config import (
    APP_DESCRIPTION,
    APP_NAME,
    APP_VERSION,
    ensure_working_path,
    get_settings,
    get_working_path,
)
from file_console.core.console import FileConsole
from file_console.core.prompts import LineReader
from file_console.utils.logging import setup_logging

# Load environment variables
load_dotenv()

# Initialize consoles
console = Console()
err_console = Console(stderr=True)


def print_banner():
    """Print the application banner"""
    banner_text = Text()
    banner_text.append("=== FILE HANDLING UTILITY ===\n", style="bold cyan")
    banner_text.append(f"{APP_NAME} v{APP_VERSION} - {APP_DESCRIPTION}", style="dim white")
    console.print(banner_text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="file-console",
        description=f"{APP_NAME} - {APP_DESCRIPTION}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  file-console                      # Work in ./files
  file-console --dir notes          # Work in ./notes
  file-console --log-level DEBUG    # Show diagnostics on stderr
        """
    )
    parser.add_argument("--dir", dest="directory", help="Working directory (default: FILES_DIR or 'files')")
    parser.add_argument("--log-level", help="Enable logging to stderr at this level")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    setup_logging(args.log_level or settings.log_level, settings.log_file)

    working_path = Path(args.directory) if args.directory else get_working_path(settings)

    print_banner()

    try:
        if ensure_working_path(working_path):
            console.print(f"Created directory: {working_path}", markup=False, highlight=False)
    except OSError as e:
        err_console.print(f"Error creating directory: {e}", style="red", markup=False, highlight=False)
        sys.exit(1)

    logger.debug(f"Working directory: {working_path.resolve()}")

    file_console = FileConsole(
        working_path,
        LineReader(console),
        console=console,
        err_console=err_console,
        end_sentinel=settings.end_sentinel,
        encoding=settings.encoding,
    )
    sys.exit(file_console.run())


if __name__ == "__main__":
    main()
