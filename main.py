#!/usr/bin/env python3
"""
Random Table Formatter - Main Entry Point

Reformat pasted random tables and manage saved tables.

Usage:
    python main.py format <input_file> [--output-format tab|csv|markdown|aligned|none]
    python main.py save <name> <input_file>
    python main.py list
    python main.py restore <id_or_name>
    python main.py delete <id_or_name>
"""

from table_formatter.cli import main


if __name__ == "__main__":
    main()
