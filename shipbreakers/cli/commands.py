"""
cli/commands.py - CLI command implementations
"""

from __future__ import annotations
from pathlib import Path
import argparse
import logging

from pydantic import ValidationError

from .core import CLICommand, CLIContext, CommandResult, CommandRegistry
from shipbreakers.layout.generator import LayoutGenerator
from shipbreakers.layout.hull import HullMass, minimum_hull_mass
from shipbreakers.layout.schema import GenerateLayoutRequest, load_layout_json
from shipbreakers.layout.templates import TemplateCatalog
from shipbreakers.layout.validators import LayoutValidator, matches_seed

logger = logging.getLogger("cli.commands")

HULL_MASS_CHOICES = [m.value for m in HullMass]


def _seed(value: str) -> int:
    """argparse type: accepts decimal or 0x-prefixed seeds."""
    return int(value, 0)


class GenerateCommand(CLICommand):
    """Generate a layout from a template and seed."""

    name = "generate"
    description = "Generate a wreck layout"
    aliases = ["gen"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--seed", "-s", type=_seed, required=True, help="Unsigned 64-bit seed")
        parser.add_argument("--template", "-t", required=True, help="Template name")
        parser.add_argument("--strict", action="store_true", help="Reject unknown templates")
        parser.add_argument("--hull-mass", choices=HULL_MASS_CHOICES, default=None,
                            help="Also check the layout against this hull grid")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        try:
            request = GenerateLayoutRequest(seed=args.seed, template=args.template)
        except ValidationError as e:
            return CommandResult(
                success=False,
                error=f"Invalid generate request: {e}",
                data={"errors": e.errors(include_url=False)},
                exit_code=1,
            )

        generator = LayoutGenerator.from_config(ctx.config)
        if args.strict:
            generator.strict_templates = True
        layout = generator.generate(request.seed, request.template)

        data = layout.to_dict()
        if args.hull_mass:
            validation = LayoutValidator().validate(layout, hull_mass=args.hull_mass)
            data["validation"] = validation.to_dict()

        return CommandResult(
            success=True,
            message=f"Generated {layout.template} (seed {request.seed}): {layout.room_count} rooms",
            data=data,
        )


class TemplatesCommand(CLICommand):
    """List catalog templates."""

    name = "templates"
    description = "List layout templates"
    aliases = ["ls"]

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        rows = [
            {
                "template": name,
                "rooms": TemplateCatalog.room_count(name),
                "min_hull_mass": minimum_hull_mass(name).value,
            }
            for name in TemplateCatalog.list_all()
        ]
        return CommandResult(
            success=True,
            message=f"{len(rows)} templates",
            data=rows,
        )


class ValidateCommand(CLICommand):
    """Validate a stored JSON layout."""

    name = "validate"
    description = "Validate a JSON layout file"
    aliases = ["check"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("path", help="Path to a JSON layout")
        parser.add_argument("--seed", "-s", type=_seed, default=None,
                            help="Seed the layout was generated with")
        parser.add_argument("--hull-mass", choices=HULL_MASS_CHOICES, default=None,
                            help="Hull mass the layout is placed on")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        path = Path(args.path)
        try:
            layout = load_layout_json(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            return CommandResult(success=False, error=f"Cannot read {path}: {e}", exit_code=1)
        except ValidationError as e:
            return CommandResult(success=False, error=f"Malformed layout in {path}: {e}", exit_code=1)

        result = LayoutValidator().validate(layout, hull_mass=args.hull_mass)
        data = result.to_dict()
        success = result.is_valid

        if args.seed is not None:
            reproducible = matches_seed(layout, args.seed)
            data["reproducible"] = reproducible
            success = success and reproducible

        if not success:
            return CommandResult(
                success=False,
                error=f"{path} failed validation ({result.errors_count} errors)",
                data=data,
                exit_code=1,
            )
        return CommandResult(
            success=True,
            message=f"{path} is valid ({result.warnings_count} warnings)",
            data=data,
        )


def build_registry() -> CommandRegistry:
    """Registry with every shipbreakers command."""
    registry = CommandRegistry()
    registry.register(GenerateCommand())
    registry.register(TemplatesCommand())
    registry.register(ValidateCommand())
    return registry
