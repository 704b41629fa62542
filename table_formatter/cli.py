#!/usr/bin/env python3
"""
Command-line interface for the random table formatter.

Usage:
    table-format format [input_file] [--output-format markdown] [--no-line-numbers]
    table-format save <name> [input_file]
    table-format list
    table-format restore <id_or_name> [--saved-config]
    table-format delete <id_or_name> [--confirm]
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional

from .exceptions import TableFormatterError
from .formatting.data_models import ColumnDelimiter, FormatConfig, OutputFormat, SavedSnapshot
from .formatting.table_formatter import TableFormatter
from .session.formatter_session import FormatterSession
from .session.notifications import ERROR, Notification
from .storage.snapshot_store import JsonFileSnapshotStore
from .utils.config import get_default_format_config, get_snapshot_file

logger = logging.getLogger(__name__)

DELIMITER_CHOICES = [delimiter.label for delimiter in ColumnDelimiter]
FORMAT_CHOICES = [output_format.value for output_format in OutputFormat]


def configure_logging(debug: bool = False) -> None:
    """Send log records to stderr so formatted output on stdout stays clean."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def build_format_config(args) -> FormatConfig:
    """Overlay command-line format options on the configured defaults."""
    changes = {}
    if args.detect_columns:
        changes['detect_columns'] = True
    if args.columns is not None:
        changes['column_count'] = args.columns
    if args.delimiter is not None:
        changes['column_delimiter'] = args.delimiter
    if args.output_format is not None:
        changes['output_format'] = args.output_format
    if args.no_line_numbers:
        changes['show_line_numbers'] = False
    return dataclasses.replace(get_default_format_config(), **changes)


def read_input(input_file: Optional[str]) -> str:
    """Read raw text from a file, or from stdin when no file (or '-') is given."""
    if input_file in (None, '-'):
        return sys.stdin.read()

    path = Path(input_file)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return path.read_text(encoding='utf-8')


def print_notification(notification: Notification) -> None:
    """Show session events on stderr."""
    icon = {'success': '✅', 'error': '❌'}.get(notification.level, 'ℹ️ ')
    text = f"{icon} {notification.message}"
    if notification.description:
        text += f" {notification.description}"
    print(text, file=sys.stderr)


def open_session(args, config: Optional[FormatConfig] = None) -> FormatterSession:
    store = JsonFileSnapshotStore(args.store or get_snapshot_file())
    session = FormatterSession(store=store, config=config)
    session.notifications.subscribe(print_notification)
    return session


def find_snapshot(session: FormatterSession, id_or_name: str) -> Optional[SavedSnapshot]:
    """Look a saved table up by id first, then by name (ignoring case)."""
    for snapshot in session.list_snapshots():
        if snapshot.id == id_or_name:
            return snapshot
    return session.store.find_by_name(id_or_name)


def cmd_format(args):
    """Format input text and write it to stdout or a file."""
    config = build_format_config(args)
    raw_text = read_input(args.input_file)
    logger.debug(f"Formatting {len(raw_text)} characters with {config}")

    output = TableFormatter().format(raw_text, config)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output + '\n' if output else '', encoding='utf-8')
        print(f"✅ Wrote formatted table: {output_path}", file=sys.stderr)
    elif output:
        print(output)


def cmd_save(args):
    """Format input text and save it as a named table."""
    session = open_session(args, build_format_config(args))

    if not session.set_input(read_input(args.input_file)):
        print(f"❌ Error: {session.input_error}", file=sys.stderr)
        sys.exit(1)

    snapshot = session.save_snapshot(args.name)
    if snapshot is None:
        sys.exit(1)
    print(snapshot.id)


def cmd_list(args):
    """List saved tables."""
    session = open_session(args)
    snapshots = session.list_snapshots()

    if session.notifications.latest and session.notifications.latest.level == ERROR:
        sys.exit(1)

    if not snapshots:
        print("No saved tables found.")
        return

    print(f"\nFound {len(snapshots)} saved table(s):\n")
    print(f"{'Name':<30} {'Created':<12} {'ID':<34} {'Preview'}")
    print("=" * 100)

    for snapshot in snapshots:
        preview = snapshot.preview().replace('\n', ' ')
        print(f"{snapshot.name:<30} {snapshot.created_at[:10]:<12} {snapshot.id:<34} {preview}")


def cmd_restore(args):
    """Print a saved table re-rendered with the current (or saved) settings."""
    session = open_session(args, build_format_config(args))

    snapshot = find_snapshot(session, args.id_or_name)
    if snapshot is None:
        print(f"❌ Error: Saved table not found: {args.id_or_name}", file=sys.stderr)
        sys.exit(1)

    if not session.restore_snapshot(snapshot.id, apply_saved_config=args.saved_config):
        sys.exit(1)

    if session.output:
        print(session.output)


def cmd_delete(args):
    """Delete a saved table."""
    session = open_session(args)

    snapshot = find_snapshot(session, args.id_or_name)
    if snapshot is None:
        print(f"❌ Error: Saved table not found: {args.id_or_name}", file=sys.stderr)
        sys.exit(1)

    # Undo does not outlive the process, so confirm first
    if not args.confirm:
        response = input(
            f"\n⚠️  WARNING: This will delete the saved table '{snapshot.name}'.\n"
            f"Continue? (yes/no): "
        ).strip().lower()

        if response not in ['yes', 'y']:
            print("Deletion cancelled.")
            sys.exit(0)

    if session.delete_snapshot(snapshot.id) is None:
        sys.exit(1)


def add_format_options(parser: argparse.ArgumentParser) -> None:
    """Options shared by every command that renders output."""
    parser.add_argument('--detect-columns', action='store_true',
                        help='Split lines into columns on delimiters')
    parser.add_argument('--columns', type=int, default=None,
                        help='Fixed number of columns when not detecting (default: 1)')
    parser.add_argument('--delimiter', choices=DELIMITER_CHOICES, default=None,
                        help='Column delimiter checked first when detecting (default: tab)')
    parser.add_argument('--output-format', choices=FORMAT_CHOICES, default=None,
                        help='Output format (default: tab)')
    parser.add_argument('--no-line-numbers', action='store_true',
                        help='Do not prefix rows with line numbers')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='table-format',
        description="Random Table Formatter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  table-format format treasure.txt
  table-format format treasure.txt --output-format markdown --detect-columns
  pbpaste | table-format format --no-line-numbers --output-format csv
  table-format save "Dungeon Dressing" dressing.txt
  table-format list
  table-format restore "dungeon dressing" --output-format aligned
  table-format delete "Dungeon Dressing" --confirm
        """
    )
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Format command
    format_parser = subparsers.add_parser('format', help='Format a random table')
    format_parser.add_argument('input_file', nargs='?', default=None,
                               help='Input file (reads stdin if omitted or -)')
    format_parser.add_argument('--output', default=None, help='Write output to this file')
    add_format_options(format_parser)

    # Save command
    save_parser = subparsers.add_parser('save', help='Format and save a named table')
    save_parser.add_argument('name', help='Name for the saved table')
    save_parser.add_argument('input_file', nargs='?', default=None,
                             help='Input file (reads stdin if omitted or -)')
    save_parser.add_argument('--store', default=None, help='Saved tables file')
    add_format_options(save_parser)

    # List command
    list_parser = subparsers.add_parser('list', help='List saved tables')
    list_parser.add_argument('--store', default=None, help='Saved tables file')

    # Restore command
    restore_parser = subparsers.add_parser('restore', help='Re-render a saved table')
    restore_parser.add_argument('id_or_name', help='Saved table id or name')
    restore_parser.add_argument('--saved-config', action='store_true',
                                help='Use the settings stored with the table')
    restore_parser.add_argument('--store', default=None, help='Saved tables file')
    add_format_options(restore_parser)

    # Delete command
    delete_parser = subparsers.add_parser('delete', help='Delete a saved table')
    delete_parser.add_argument('id_or_name', help='Saved table id or name')
    delete_parser.add_argument('--confirm', action='store_true',
                               help='Delete without prompting')
    delete_parser.add_argument('--store', default=None, help='Saved tables file')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.debug)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Route to appropriate command handler
    command_handlers = {
        'format': cmd_format,
        'save': cmd_save,
        'list': cmd_list,
        'restore': cmd_restore,
        'delete': cmd_delete,
    }

    try:
        command_handlers[args.command](args)
    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        sys.exit(130)
    except (TableFormatterError, FileNotFoundError, ValueError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
