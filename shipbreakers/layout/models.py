"""
Wreck Layout Models

Room and layout data structures shared by the template catalog, the
generator and the wire schema. Both types are frozen: a layout is built in
one call and never mutated afterwards.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple
import json
import logging

logger = logging.getLogger(__name__)


# =============================================================================
# DETERMINIZATION UTILITY
# =============================================================================

def determinize_dict(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Make a dictionary deterministic for hashing and storage.

    - Sorts all keys recursively
    - Converts enums to their values
    - Leaves list order untouched (room order is significant)
    """
    def _process(obj):
        if isinstance(obj, dict):
            return {k: _process(v) for k, v in sorted(obj.items())}
        elif isinstance(obj, (list, tuple)):
            return [_process(item) for item in obj]
        elif isinstance(obj, Enum):
            return obj.value
        return obj

    processed = _process(data)
    return json.loads(json.dumps(processed, sort_keys=True))


# =============================================================================
# ROOM DESCRIPTOR
# =============================================================================

@dataclass(frozen=True)
class RoomDescriptor:
    """
    Rectangular room on the wreck grid.

    Used both for catalog base rooms and for perturbed rooms. Extents are
    not checked for sign; a perturbed room keeps whatever the generator
    produced.
    """
    x: int
    y: int
    w: int
    h: int
    kind: str

    def __post_init__(self):
        if not self.kind:
            raise ValueError("Room kind must be a non-empty string")

    @property
    def area(self) -> int:
        """Grid cells covered by the room."""
        return self.w * self.h

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        """(x0, y0, x1, y1) with the far edge exclusive."""
        return self.x, self.y, self.x + self.w, self.y + self.h

    def as_tuple(self) -> Tuple[int, int, int, int, str]:
        return self.x, self.y, self.w, self.h, self.kind

    def to_dict(self) -> Dict[str, Any]:
        """Serialize room."""
        return {
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "kind": self.kind,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoomDescriptor":
        """Deserialize room."""
        return cls(
            x=int(data["x"]),
            y=int(data["y"]),
            w=int(data["w"]),
            h=int(data["h"]),
            kind=str(data["kind"]),
        )


# =============================================================================
# LAYOUT
# =============================================================================

@dataclass(frozen=True)
class Layout:
    """
    Generated wreck layout.

    `template` echoes the requested name verbatim, including names the
    catalog did not recognise. `rooms` keeps catalog order.
    """
    template: str
    rooms: Tuple[RoomDescriptor, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.rooms, tuple):
            object.__setattr__(self, "rooms", tuple(self.rooms))

    @property
    def room_count(self) -> int:
        return len(self.rooms)

    @property
    def kinds(self) -> List[str]:
        """Room kinds in layout order."""
        return [room.kind for room in self.rooms]

    def get_rooms_by_kind(self, kind: str) -> List[RoomDescriptor]:
        """Get all rooms of a specific kind."""
        return [r for r in self.rooms if r.kind == kind]

    def bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """
        Smallest (x0, y0, x1, y1) box containing every room.

        Returns None for a layout without rooms.
        """
        if not self.rooms:
            return None
        x0 = min(r.x for r in self.rooms)
        y0 = min(r.y for r in self.rooms)
        x1 = max(r.x + r.w for r in self.rooms)
        y1 = max(r.y + r.h for r in self.rooms)
        return x0, y0, x1, y1

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with determinization."""
        data = {
            "template": self.template,
            "rooms": [r.to_dict() for r in self.rooms],
        }
        return determinize_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Layout":
        """Deserialize layout."""
        return cls(
            template=str(data["template"]),
            rooms=_rooms_from_dicts(data.get("rooms", [])),
        )

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, sort_keys=True)

    @classmethod
    def from_json(cls, text: str) -> "Layout":
        return cls.from_dict(json.loads(text))


def _rooms_from_dicts(items: Iterable[Dict[str, Any]]) -> Tuple[RoomDescriptor, ...]:
    return tuple(RoomDescriptor.from_dict(item) for item in items)
