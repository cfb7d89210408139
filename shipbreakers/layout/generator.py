"""
Wreck Layout Generator

Applies seeded perturbation to catalog base rooms. One fresh LayoutRng per
call, four draws per room in x, y, w, h order.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional
import logging

from .models import Layout, RoomDescriptor
from .rng import LayoutRng
from .templates import TemplateCatalog
from .errors import UnknownTemplateError

if TYPE_CHECKING:
    from ..bootstrap.config import ShipbreakersConfig

logger = logging.getLogger(__name__)

# Inclusive offset bounds per draw
POSITION_JITTER = (-1, 1)
EXTENT_GROWTH = (0, 1)


def perturb_room(base: RoomDescriptor, rng: LayoutRng) -> RoomDescriptor:
    """Offset one base room. Consumes exactly four draws from rng."""
    dx = rng.range_inclusive(*POSITION_JITTER)
    dy = rng.range_inclusive(*POSITION_JITTER)
    dw = rng.range_inclusive(*EXTENT_GROWTH)
    dh = rng.range_inclusive(*EXTENT_GROWTH)
    return RoomDescriptor(
        x=base.x + dx,
        y=base.y + dy,
        w=base.w + dw,
        h=base.h + dh,
        kind=base.kind,
    )


def generate_layout_from_template(seed: int, template: str) -> Layout:
    """
    Generate a layout for a template name and seed.

    Total for any unsigned 64-bit seed: unknown template names use the
    single-room fallback and are still recorded on the returned layout.

    Args:
        seed: Unsigned 64-bit seed
        template: Template name, echoed verbatim on the result

    Returns:
        Layout with one perturbed room per base room, in catalog order
    """
    base_rooms = TemplateCatalog.resolve(template)
    rng = LayoutRng(seed)

    rooms = []
    for base in base_rooms:
        rooms.append(perturb_room(base, rng))

    logger.debug(f"Generated layout {template!r} seed={seed}: {len(rooms)} rooms")
    return Layout(template=template, rooms=tuple(rooms))


class LayoutGenerator:
    """
    Layout generation with an optional strict template mode.

    In strict mode an unknown template raises UnknownTemplateError instead
    of silently using the fallback room.
    """

    def __init__(self, strict_templates: bool = False):
        self.strict_templates = strict_templates

    @classmethod
    def from_config(cls, config: Optional["ShipbreakersConfig"] = None) -> "LayoutGenerator":
        if config is None:
            return cls()
        return cls(strict_templates=config.layout.strict_templates)

    def generate(self, seed: int, template: str) -> Layout:
        if self.strict_templates and not TemplateCatalog.contains(template):
            raise UnknownTemplateError(template, known=TemplateCatalog.list_all())
        return generate_layout_from_template(seed, template)
