"""
layout/templates.py - Base wreck template catalog.

Each template is a short, ordered list of rectangular base rooms. The
catalog is read-only and built once at import; lookups never fail.
"""

from types import MappingProxyType
from typing import List, Mapping, Tuple
import logging

from .models import RoomDescriptor

logger = logging.getLogger(__name__)

RoomSpec = Tuple[int, int, int, int, str]


def _rooms(*specs: RoomSpec) -> Tuple[RoomDescriptor, ...]:
    return tuple(RoomDescriptor(x, y, w, h, kind) for x, y, w, h, kind in specs)


BASE_TEMPLATES: Mapping[str, Tuple[RoomDescriptor, ...]] = MappingProxyType({
    "T-freighter": _rooms(
        (0, 0, 4, 2, "cargo"), (-1, 2, 2, 2, "engine"), (3, 2, 2, 2, "bridge"),
    ),
    "L-military": _rooms(
        (0, 0, 3, 2, "corridor"), (3, 0, 2, 2, "armory"), (0, 2, 3, 2, "bridge"),
    ),
    "Cross-science": _rooms(
        (1, 0, 2, 1, "labs"), (0, 1, 4, 2, "reactor"), (1, 3, 2, 1, "bridge"),
    ),
    "I-hauler": _rooms(
        (0, 0, 6, 1, "cargo"), (0, 1, 6, 1, "crew"),
    ),
    "Square-civilian": _rooms(
        (0, 0, 3, 3, "quarters"), (3, 0, 2, 2, "galley"),
    ),
    "H-luxury": _rooms(
        (0, 0, 2, 2, "salon"), (3, 0, 2, 2, "casino"), (1, 3, 3, 1, "bridge"),
    ),
    "U-industrial": _rooms(
        (0, 0, 4, 2, "forge"), (0, 2, 1, 2, "tank"), (3, 2, 1, 2, "dock"),
    ),
    "Scattered-derelict": _rooms(
        (0, 0, 1, 1, "shard"), (2, 0, 1, 1, "shard"), (1, 2, 2, 1, "core"),
    ),
})

# Used for any name not in BASE_TEMPLATES
FALLBACK_TEMPLATE: Tuple[RoomDescriptor, ...] = _rooms((0, 0, 3, 2, "cargo"))


class TemplateCatalog:
    """
    Lookup of base rooms by template name.

    Names are matched exactly (case-sensitive). Unknown names resolve to
    FALLBACK_TEMPLATE.
    """

    TEMPLATES: Mapping[str, Tuple[RoomDescriptor, ...]] = BASE_TEMPLATES

    @classmethod
    def resolve(cls, name: str) -> Tuple[RoomDescriptor, ...]:
        """Get base rooms for a template, falling back for unknown names."""
        rooms = cls.TEMPLATES.get(name)
        if rooms is None:
            logger.debug(f"Template {name!r} not in catalog, using fallback")
            return FALLBACK_TEMPLATE
        return rooms

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls.TEMPLATES

    @classmethod
    def list_all(cls) -> List[str]:
        """List template names in catalog order."""
        return list(cls.TEMPLATES.keys())

    @classmethod
    def room_count(cls, name: str) -> int:
        return len(cls.resolve(name))


def resolve_template(name: str) -> Tuple[RoomDescriptor, ...]:
    """Module-level shortcut for TemplateCatalog.resolve."""
    return TemplateCatalog.resolve(name)
