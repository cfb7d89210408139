"""
validators.py - Caller-side layout checks.

Generation itself never validates. These checks are for callers that load
a layout from storage or the network, or want to reject unknown templates.
Defects are reported as issues; nothing here modifies a layout.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
from enum import Enum
import logging

from .models import Layout
from .templates import TemplateCatalog
from .generator import POSITION_JITTER, EXTENT_GROWTH, generate_layout_from_template
from .hull import HullMass, hull_grid_size, as_hull_mass
from .errors import UnknownTemplateError

__all__ = [
    'ValidationSeverity',
    'ValidationIssue',
    'ValidationResult',
    'LayoutValidator',
    'require_known_template',
    'matches_seed',
]

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================

class ValidationSeverity(Enum):
    """Severity levels for validation issues."""

    ERROR = "error"       # Layout cannot have come from its template
    WARNING = "warning"   # Usable, but not what a strict caller expects
    INFO = "info"


# =============================================================================
# VALIDATION ISSUE
# =============================================================================

@dataclass
class ValidationIssue:
    """
    A single validation issue found in a layout.

    Attributes:
        issue_id: Rule identifier, e.g. "room-outside-envelope"
        severity: Severity level
        message: Human-readable description
        room_index: Index of the affected room, if any
    """

    issue_id: str
    severity: ValidationSeverity
    message: str
    room_index: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "issue_id": self.issue_id,
            "severity": self.severity.value,
            "message": self.message,
            "room_index": self.room_index,
        }


# =============================================================================
# VALIDATION RESULT
# =============================================================================

@dataclass
class ValidationResult:
    """Outcome of validating one layout."""

    is_valid: bool = True
    issues: List[ValidationIssue] = field(default_factory=list)
    errors_count: int = 0
    warnings_count: int = 0
    checked_rules: List[str] = field(default_factory=list)

    def add_issue(self, issue: ValidationIssue) -> None:
        """Add an issue and update counts."""
        self.issues.append(issue)

        if issue.severity == ValidationSeverity.ERROR:
            self.errors_count += 1
            self.is_valid = False
        elif issue.severity == ValidationSeverity.WARNING:
            self.warnings_count += 1

    def add_error(self, issue_id: str, message: str, **kwargs) -> None:
        self.add_issue(ValidationIssue(issue_id, ValidationSeverity.ERROR, message, **kwargs))

    def add_warning(self, issue_id: str, message: str, **kwargs) -> None:
        self.add_issue(ValidationIssue(issue_id, ValidationSeverity.WARNING, message, **kwargs))

    def get_issues(self, issue_id: str) -> List[ValidationIssue]:
        return [i for i in self.issues if i.issue_id == issue_id]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors_count": self.errors_count,
            "warnings_count": self.warnings_count,
            "issues": [i.to_dict() for i in self.issues],
            "checked_rules": list(self.checked_rules),
        }


# =============================================================================
# CHECKS
# =============================================================================

def require_known_template(name: str) -> str:
    """Return name if the catalog knows it, else raise UnknownTemplateError."""
    if not TemplateCatalog.contains(name):
        raise UnknownTemplateError(name, known=TemplateCatalog.list_all())
    return name


def matches_seed(layout: Layout, seed: int) -> bool:
    """True if regenerating layout.template from seed gives the same rooms."""
    return generate_layout_from_template(seed, layout.template).rooms == layout.rooms


class LayoutValidator:
    """
    Checks a layout against its catalog template.

    Rules:
        layout-template-unknown   template not in catalog (fallback used)
        layout-room-count         room count differs from the catalog
        room-kind-mismatch        kind differs from the base room
        room-outside-envelope     offsets exceed the perturbation bounds
        room-extent-nonpositive   w or h <= 0
        room-origin-outside-hull  origin cell off the hull grid (hull_mass only)
    """

    def validate(
        self,
        layout: Layout,
        hull_mass: Optional[Union[HullMass, str]] = None,
    ) -> ValidationResult:
        result = ValidationResult()
        base_rooms = TemplateCatalog.resolve(layout.template)

        result.checked_rules.append("layout-template-unknown")
        if not TemplateCatalog.contains(layout.template):
            result.add_warning(
                "layout-template-unknown",
                f"Template {layout.template!r} is not in the catalog; fallback rooms apply",
            )

        result.checked_rules.append("layout-room-count")
        if len(layout.rooms) != len(base_rooms):
            result.add_error(
                "layout-room-count",
                f"Layout has {len(layout.rooms)} rooms, template expects {len(base_rooms)}",
            )

        result.checked_rules.extend(["room-kind-mismatch", "room-outside-envelope"])
        for index, (room, base) in enumerate(zip(layout.rooms, base_rooms)):
            if room.kind != base.kind:
                result.add_error(
                    "room-kind-mismatch",
                    f"Room {index} is {room.kind!r}, template has {base.kind!r}",
                    room_index=index,
                )
            if not _within_envelope(room.x - base.x, room.y - base.y,
                                    room.w - base.w, room.h - base.h):
                result.add_error(
                    "room-outside-envelope",
                    f"Room {index} offsets exceed perturbation bounds",
                    room_index=index,
                )

        result.checked_rules.append("room-extent-nonpositive")
        for index, room in enumerate(layout.rooms):
            if room.w <= 0 or room.h <= 0:
                result.add_error(
                    "room-extent-nonpositive",
                    f"Room {index} has extent {room.w}x{room.h}",
                    room_index=index,
                )

        if hull_mass is not None:
            self._check_hull_fit(layout, as_hull_mass(hull_mass), result)

        logger.debug(
            f"Validated layout {layout.template!r}: "
            f"{result.errors_count} errors, {result.warnings_count} warnings"
        )
        return result

    def _check_hull_fit(self, layout: Layout, mass: HullMass, result: ValidationResult) -> None:
        width, height = hull_grid_size(mass)
        result.checked_rules.append("room-origin-outside-hull")
        for index, room in enumerate(layout.rooms):
            if not (0 <= room.x < width and 0 <= room.y < height):
                result.add_warning(
                    "room-origin-outside-hull",
                    f"Room {index} origin ({room.x},{room.y}) is outside "
                    f"{mass.value} hull grid {width}x{height}",
                    room_index=index,
                )


def _within_envelope(dx: int, dy: int, dw: int, dh: int) -> bool:
    lo_pos, hi_pos = POSITION_JITTER
    lo_ext, hi_ext = EXTENT_GROWTH
    return (
        lo_pos <= dx <= hi_pos
        and lo_pos <= dy <= hi_pos
        and lo_ext <= dw <= hi_ext
        and lo_ext <= dh <= hi_ext
    )
