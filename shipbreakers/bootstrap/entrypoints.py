"""
bootstrap/entrypoints.py - Application entry points

Provides logging setup and the `shipbreakers` CLI entry point.
"""

from __future__ import annotations
from typing import List, Optional
import argparse
import json
import logging
import sys

from .config import DEFAULT_LOG_FORMAT, load_config

logger = logging.getLogger("bootstrap.entrypoints")

_installed_handlers: List[logging.Handler] = []


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record):
        return json.dumps({
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    fmt: str = DEFAULT_LOG_FORMAT,
) -> None:
    """
    Configure application logging.

    Logs go to stderr so that command output on stdout stays parseable.
    Calling again replaces the handlers installed by the previous call.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        json_format: Use JSON format for logs
        fmt: Format string for plain-text logs
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = JSONFormatter() if json_format else logging.Formatter(fmt)

    reset_logging()
    root_logger = logging.getLogger()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    root_logger.setLevel(log_level)


def reset_logging() -> None:
    """Remove and close the handlers installed by setup_logging."""
    root_logger = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()


def build_parser(registry) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Shipbreakers wreck layout generator",
        prog="shipbreakers",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to JSON configuration file",
        default=None,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--log-file",
        help="Log file path",
        default=None,
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )

    subparsers = parser.add_subparsers(dest="command")
    for name, command in registry.get_all().items():
        sub = subparsers.add_parser(name, help=command.description, aliases=command.aliases)
        command.configure_parser(sub)
    return parser


def cli_main(args: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    from shipbreakers.cli.commands import build_registry
    from shipbreakers.cli.core import CLIContext, OutputFormat, format_output

    registry = build_registry()
    parser = build_parser(registry)
    parsed = parser.parse_args(args)

    config = load_config(parsed.config)
    if parsed.verbose:
        log_level = "DEBUG"
    else:
        log_level = parsed.log_level or config.logging.level
    setup_logging(
        level=log_level,
        log_file=parsed.log_file or config.logging.log_file,
        json_format=config.logging.json_logs,
        fmt=config.logging.format,
    )

    if not parsed.command:
        parser.print_help()
        return 1

    ctx = CLIContext(
        config=config,
        output_format=OutputFormat.JSON if parsed.json else OutputFormat.TEXT,
    )
    command = registry.get(parsed.command)

    try:
        result = command.run(ctx, parsed)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1

    print(format_output(result, ctx.output_format, indent=config.layout.json_indent))
    return result.exit_code


def main() -> None:
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
