"""
cli/core.py - Core CLI infrastructure
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence
from dataclasses import dataclass, field
from enum import Enum
from abc import ABC, abstractmethod
import argparse
import json
import logging

from shipbreakers.bootstrap.config import ShipbreakersConfig
from shipbreakers.layout.errors import LayoutError

logger = logging.getLogger("cli")


class OutputFormat(Enum):
    """Output format options."""
    TEXT = "text"
    JSON = "json"


@dataclass
class CLIContext:
    """Context for CLI operations."""

    config: ShipbreakersConfig = field(default_factory=ShipbreakersConfig)
    output_format: OutputFormat = OutputFormat.TEXT


@dataclass
class CommandResult:
    """Result of a CLI command execution."""

    success: bool = True
    message: str = ""
    data: Any = None
    error: Optional[str] = None
    exit_code: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "data": self.data,
            "error": self.error,
        }


class CLICommand(ABC):
    """A subcommand. Subclasses set name/aliases and implement execute."""

    name: str = "command"
    description: str = ""
    aliases: Sequence[str] = ()

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        pass

    @abstractmethod
    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        ...

    def run(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        """Execute, turning layout errors into a failed result."""
        try:
            return self.execute(ctx, args)
        except LayoutError as e:
            logger.debug(f"{self.name} failed: {e.code}")
            return CommandResult(success=False, error=str(e), data=e.to_dict(), exit_code=1)


class CommandRegistry:
    """Commands keyed by name; aliases resolve to the same instance."""

    def __init__(self):
        self._commands: Dict[str, CLICommand] = {}
        self._lookup: Dict[str, CLICommand] = {}

    def register(self, command: CLICommand) -> None:
        keys = [command.name, *command.aliases]
        taken = [k for k in keys if k in self._lookup]
        if taken:
            raise ValueError(f"Command name already registered: {', '.join(taken)}")
        self._commands[command.name] = command
        for key in keys:
            self._lookup[key] = command

    def get(self, name: str) -> Optional[CLICommand]:
        return self._lookup.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._lookup

    def list_commands(self) -> List[str]:
        """Command names in registration order, aliases excluded."""
        return list(self._commands)

    def get_all(self) -> Dict[str, CLICommand]:
        return dict(self._commands)


def format_output(result: CommandResult, format: OutputFormat, indent: int = 2) -> str:
    """Format command result for display."""
    if format == OutputFormat.JSON:
        return json.dumps(result.to_dict(), indent=indent, default=str)

    # TEXT
    if not result.success:
        return f"Error: {result.error}"

    output = result.message
    if isinstance(result.data, dict):
        for k, v in result.data.items():
            if isinstance(v, list):
                output += f"\n  {k}:"
                for item in v:
                    output += f"\n    {item}"
            else:
                output += f"\n  {k}: {v}"
    elif isinstance(result.data, list):
        for item in result.data:
            output += f"\n  {item}"
    elif result.data is not None:
        output += f"\n{result.data}"
    return output
