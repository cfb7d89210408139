"""
Shipbreakers Layout Module

Deterministic wreck layouts: a fixed template catalog plus seeded room
perturbation. Same (seed, template) always gives the same layout.
"""

from .models import (
    RoomDescriptor,
    Layout,
    determinize_dict,
)

from .templates import (
    BASE_TEMPLATES,
    FALLBACK_TEMPLATE,
    TemplateCatalog,
    resolve_template,
)

from .rng import (
    LayoutRng,
    MASK_64,
)

from .generator import (
    LayoutGenerator,
    generate_layout_from_template,
    perturb_room,
)

from .hull import (
    HullMass,
    HULL_GRID_SIZES,
    SALVAGE_TEMPLATES,
    fit_hull_mass,
    hull_grid_size,
    minimum_hull_mass,
)

from .validators import (
    LayoutValidator,
    ValidationResult,
    ValidationIssue,
    ValidationSeverity,
    matches_seed,
    require_known_template,
)

from .errors import (
    LayoutError,
    UnknownTemplateError,
    InvalidSeedError,
    InvalidRangeError,
)

__all__ = [
    # Models
    "RoomDescriptor",
    "Layout",
    "determinize_dict",

    # Catalog
    "BASE_TEMPLATES",
    "FALLBACK_TEMPLATE",
    "TemplateCatalog",
    "resolve_template",

    # Generation
    "LayoutRng",
    "MASK_64",
    "LayoutGenerator",
    "generate_layout_from_template",
    "perturb_room",

    # Hull sizing
    "HullMass",
    "HULL_GRID_SIZES",
    "SALVAGE_TEMPLATES",
    "fit_hull_mass",
    "hull_grid_size",
    "minimum_hull_mass",

    # Validation
    "LayoutValidator",
    "ValidationResult",
    "ValidationIssue",
    "ValidationSeverity",
    "matches_seed",
    "require_known_template",

    # Errors
    "LayoutError",
    "UnknownTemplateError",
    "InvalidSeedError",
    "InvalidRangeError",
]
