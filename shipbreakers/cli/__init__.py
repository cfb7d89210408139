"""
cli/ - Command Line Interface

Commands:
- generate: build a layout from a template and seed
- templates: list the template catalog
- validate: check a stored JSON layout
"""

from .core import (
    CLIContext,
    OutputFormat,
    CommandResult,
    CommandRegistry,
    CLICommand,
    format_output,
)

from .commands import (
    GenerateCommand,
    TemplatesCommand,
    ValidateCommand,
    build_registry,
)


__all__ = [
    # Core
    "CLIContext",
    "OutputFormat",
    "CommandResult",
    "CommandRegistry",
    "CLICommand",
    "format_output",
    # Commands
    "GenerateCommand",
    "TemplatesCommand",
    "ValidateCommand",
    "build_registry",
]
