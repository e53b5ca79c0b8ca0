"""Command-line interface for mailsift."""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from mailsift import __version__
from mailsift.config import ConfigManager, resolve_config_path
from mailsift.filter import (
    DRAFT, SENT, STAR, TRASH,
    FlagTypePredicate, FolderPredicate, SubstringSearchPredicate,
    apply_filter, apply_filters,
)
from mailsift.models import Email, LoggingConfig
from mailsift.views import apply_named_view

logger = logging.getLogger(__name__)


def setup_logging(log_dir: Optional[str] = None, level: int = logging.INFO):
    """Set up logging configuration.

    Args:
        log_dir: Optional path to log directory. If None, defaults to ~/.mailsift/logs
        level: Level for the root logger; the handlers follow it so a
            configured level can change it later
    """
    if log_dir is None:
        log_dir = os.path.expanduser("~/.mailsift/logs")
    os.makedirs(log_dir, exist_ok=True)

    # Set up file handler
    log_file = os.path.join(log_dir, "mailsift.log")
    file_handler = logging.FileHandler(log_file)
    file_formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    file_handler.setFormatter(file_formatter)

    # Console goes to stderr, stdout carries the filtered JSON
    console_handler = logging.StreamHandler(sys.stderr)
    console_formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    console_handler.setFormatter(console_formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.debug(f"Logging to {log_file}")


def apply_logging_config(logging_config: LoggingConfig, verbose: bool = False) -> None:
    """Apply the logging section of the configuration on top of setup_logging.

    --verbose keeps DEBUG regardless of the configured level.
    """
    root_logger = logging.getLogger()
    if not verbose:
        root_logger.setLevel(logging_config.level.upper())

    if logging_config.file:
        file_handler = logging.FileHandler(os.path.expanduser(logging_config.file))
        file_handler.setFormatter(logging.Formatter(logging_config.format))
        root_logger.addHandler(file_handler)
        logger.debug(f"Also logging to {logging_config.file}")


def load_emails(path: str) -> List[Email]:
    """Load a JSON array of email records."""
    with open(path, "r") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of emails")

    return [Email.from_dict(item) for item in data]


def write_emails(emails: List[Email], path: Optional[str] = None) -> None:
    """Write emails as a JSON array to a file, or to stdout if no path is given."""
    payload = [email.to_dict() for email in emails]
    if path:
        with open(path, "w") as f:
            json.dump(payload, f, indent=2)
    else:
        json.dump(payload, sys.stdout, indent=2)
        sys.stdout.write("\n")


def handle_version_command(args):
    """Handle the version command."""
    print(f"mailsift version {__version__}")


def handle_folder_command(args):
    """Handle the folder command."""
    emails = load_emails(args.input)
    filtered = apply_filter(emails, FolderPredicate(args.name))
    logger.info(f"Found {len(filtered)} emails in folder {args.name}")
    write_emails(filtered, args.output)


def handle_type_command(args):
    """Handle the type command and its star/trash/sent/draft shortcuts."""
    emails = load_emails(args.input)
    filtered = apply_filter(emails, FlagTypePredicate(args.flag))
    logger.info(f"Found {len(filtered)} emails of type {args.flag}")
    write_emails(filtered, args.output)


def handle_search_command(args):
    """Handle the search command."""
    emails = load_emails(args.input)
    filtered = apply_filter(emails, SubstringSearchPredicate(args.query))
    logger.info(f"Found {len(filtered)} emails addressed to '{args.query}'")
    write_emails(filtered, args.output)


def handle_filter_command(args):
    """Handle the filter command."""
    emails = load_emails(args.input)

    predicates = (
        [FolderPredicate(folder) for folder in args.folder or []]
        + [FlagTypePredicate(flag) for flag in args.type or []]
        + [SubstringSearchPredicate(query) for query in args.search or []]
    )
    if not predicates:
        logger.warning("No filters given, passing all emails through")

    filtered = apply_filters(emails, predicates)
    logger.info(f"{len(filtered)} of {len(emails)} emails matched all filters")
    write_emails(filtered, args.output)


def handle_view_command(args):
    """Handle the view command."""
    config_path = resolve_config_path(args.config)
    if not config_path:
        raise ValueError("No configuration file given; use --config or set MAILSIFT_CONFIG")

    config_manager = ConfigManager(config_path)
    apply_logging_config(config_manager.logging, args.verbose)

    emails = load_emails(args.input)
    filtered = apply_named_view(emails, config_manager, args.name)
    write_emails(filtered, args.output)


def _add_io_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--input", "-i",
        type=str,
        required=True,
        help="Path to input JSON file containing emails"
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        help="Path to output JSON file (default: stdout)"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Email filtering and search tool")

    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version information"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        help="Directory for the log file (default: ~/.mailsift/logs)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Folder command
    folder_parser = subparsers.add_parser("folder", help="Emails filed under a folder")
    folder_parser.add_argument("name", type=str, help="Folder name (case-sensitive)")
    _add_io_arguments(folder_parser)
    folder_parser.set_defaults(func=handle_folder_command)

    # Type command
    type_parser = subparsers.add_parser("type", help="Emails of a given type")
    type_parser.add_argument("flag", type=str, help="Type to match, e.g. star or trash")
    _add_io_arguments(type_parser)
    type_parser.set_defaults(func=handle_type_command)

    # Type shortcuts
    for flag in (STAR, TRASH, SENT, DRAFT):
        flag_parser = subparsers.add_parser(flag, help=f"Emails of type {flag}")
        _add_io_arguments(flag_parser)
        flag_parser.set_defaults(func=handle_type_command, flag=flag)

    # Search command
    search_parser = subparsers.add_parser("search", help="Search recipient addresses")
    search_parser.add_argument("query", type=str, help="Substring to look for (case-insensitive)")
    _add_io_arguments(search_parser)
    search_parser.set_defaults(func=handle_search_command)

    # Filter command
    filter_parser = subparsers.add_parser("filter", help="Combine several filters")
    filter_parser.add_argument(
        "--folder",
        action="append",
        help="Folder the email must be in (repeatable)"
    )
    filter_parser.add_argument(
        "--type",
        action="append",
        help="Type the email must have (repeatable)"
    )
    filter_parser.add_argument(
        "--search",
        action="append",
        help="Substring the recipient must contain (repeatable)"
    )
    _add_io_arguments(filter_parser)
    filter_parser.set_defaults(func=handle_filter_command)

    # View command
    view_parser = subparsers.add_parser("view", help="Apply a saved view from the configuration")
    view_parser.add_argument("name", type=str, help="Name of the view")
    view_parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to YAML configuration file (default: $MAILSIFT_CONFIG)"
    )
    _add_io_arguments(view_parser)
    view_parser.set_defaults(func=handle_view_command)

    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        handle_version_command(args)
        return

    if not hasattr(args, "func"):
        parser.print_help()
        return

    setup_logging(args.log_dir, logging.DEBUG if args.verbose else logging.INFO)

    try:
        args.func(args)
    except Exception as e:
        logger.error(f"Error running {args.command}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
