#!/usr/bin/env python3
"""
File Console - Entry Point
Run this file to start the menu-driven file utility.

Usage:
    python run.py              # Start interactive mode in ./files
    python run.py --help       # Show help
"""

if __name__ == "__main__":
    from file_console.main import main
    main()
