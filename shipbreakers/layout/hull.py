"""
layout/hull.py - Hull mass classes and their grid sizes.

A wreck's hull mass fixes the cell grid its layout is drawn on. Larger
templates need a minimum hull mass so that their rooms land on the grid.
"""

from enum import Enum
from typing import Dict, Tuple, Union
import logging

logger = logging.getLogger(__name__)


class HullMass(Enum):
    """Hull mass classes, smallest first."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    MASSIVE = "massive"

    @property
    def rank(self) -> int:
        return list(HullMass).index(self)


# (width, height) in grid cells
HULL_GRID_SIZES: Dict[HullMass, Tuple[int, int]] = {
    HullMass.SMALL: (2, 2),
    HullMass.MEDIUM: (3, 2),
    HullMass.LARGE: (3, 3),
    HullMass.MASSIVE: (4, 3),
}

TEMPLATE_MIN_HULL_MASS: Dict[str, HullMass] = {
    "T-freighter": HullMass.MEDIUM,
    "Cross-science": HullMass.LARGE,
    "U-industrial": HullMass.LARGE,
    "H-luxury": HullMass.LARGE,
}

# Templates the wreck generator draws salvage layouts from
SALVAGE_TEMPLATES: Tuple[str, ...] = (
    "L-military",
    "Cross-science",
    "U-industrial",
    "H-luxury",
    "T-freighter",
)


def as_hull_mass(value: Union[HullMass, str]) -> HullMass:
    """Coerce a mass name ("large") or HullMass to HullMass."""
    if isinstance(value, HullMass):
        return value
    return HullMass(str(value).lower())


def minimum_hull_mass(template: str) -> HullMass:
    return TEMPLATE_MIN_HULL_MASS.get(template, HullMass.SMALL)


def fit_hull_mass(template: str, estimated: Union[HullMass, str]) -> HullMass:
    """
    Hull mass for a wreck using this template.

    Keeps the estimate unless the template needs something bigger.
    """
    estimated = as_hull_mass(estimated)
    required = minimum_hull_mass(template)
    if estimated.rank >= required.rank:
        return estimated
    logger.debug(f"Raising hull mass {estimated.value} -> {required.value} for {template!r}")
    return required


def hull_grid_size(mass: Union[HullMass, str]) -> Tuple[int, int]:
    """Grid (width, height) for a hull mass."""
    return HULL_GRID_SIZES[as_hull_mass(mass)]
