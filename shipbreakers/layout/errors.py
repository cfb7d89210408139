"""
layout/errors.py - Layout error taxonomy

Structured error types for wreck layout generation. Core generation never
raises for an unknown template; these errors come from caller-side checks
(strict template mode, seed and range preconditions).
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
from enum import Enum
import logging

logger = logging.getLogger("layout.errors")


# =============================================================================
# ERROR CATEGORIES
# =============================================================================

class LayoutErrorCategory(Enum):
    """Categories of layout errors."""
    TEMPLATE = "layout_template"    # Template name not in catalog
    SEED = "layout_seed"            # Seed outside the unsigned 64-bit range
    RANGE = "layout_range"          # Bad bounds passed to the RNG
    VALIDATION = "layout_validation"


# =============================================================================
# BASE ERROR CLASS
# =============================================================================

class LayoutError(Exception):
    """
    Base class for layout errors.

    Carries an error code, a recovery hint and a details mapping so callers
    can surface the failure without parsing the message.
    """

    code: str = "LAYOUT_000"
    category: LayoutErrorCategory = LayoutErrorCategory.VALIDATION

    def __init__(
        self,
        message: str = "",
        *,
        recovery_hint: str = "",
        details: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.message = message or self.__class__.__doc__ or "Layout error"
        self.recovery_hint = recovery_hint
        self.details = details or {}
        self.details.update(kwargs)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for CLI/JSON output."""
        return {
            "code": self.code,
            "category": self.category.value,
            "message": self.message,
            "recovery_hint": self.recovery_hint,
            "details": self.details,
        }

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.recovery_hint:
            parts.append(f"Hint: {self.recovery_hint}")
        return " ".join(parts)


# =============================================================================
# SPECIFIC ERROR TYPES
# =============================================================================

class UnknownTemplateError(LayoutError):
    """Template name is not in the catalog."""

    code = "LAYOUT_001"
    category = LayoutErrorCategory.TEMPLATE

    def __init__(self, template: str, known: Optional[List[str]] = None, **kwargs):
        known = list(known or [])
        super().__init__(
            message=f"Unknown layout template {template!r}",
            recovery_hint=(
                f"Use one of: {', '.join(known)}." if known
                else "Disable strict template mode to use the fallback layout."
            ),
            template=template,
            known_templates=known,
            **kwargs,
        )
        self.template = template


class InvalidSeedError(LayoutError, ValueError):
    """Seed is not an unsigned 64-bit integer."""

    code = "LAYOUT_002"
    category = LayoutErrorCategory.SEED

    def __init__(self, seed: Any, **kwargs):
        super().__init__(
            message=f"Seed {seed!r} is not an integer in [0, 2**64)",
            recovery_hint="Pass a non-negative integer below 2**64.",
            seed=repr(seed),
            **kwargs,
        )
        self.seed = seed


class InvalidRangeError(LayoutError, ValueError):
    """Inclusive RNG range is empty or exceeds 32-bit bounds."""

    code = "LAYOUT_003"
    category = LayoutErrorCategory.RANGE

    def __init__(self, low: int, high: int, **kwargs):
        super().__init__(
            message=f"Invalid inclusive range [{low}, {high}]",
            recovery_hint="Require high >= low with both bounds in signed 32-bit range.",
            low=low,
            high=high,
            **kwargs,
        )
        self.low = low
        self.high = high
