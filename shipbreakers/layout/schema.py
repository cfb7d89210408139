"""
layout/schema.py - Pydantic wire models for layouts.

Validates layouts and generation requests that cross a transport boundary
(save files, network payloads). Field names match RoomDescriptor and Layout.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from .models import Layout, RoomDescriptor
from .rng import MASK_64


class RoomModel(BaseModel):
    """Wire form of a single room."""

    x: int = Field(..., description="Grid column of the room origin")
    y: int = Field(..., description="Grid row of the room origin")
    w: int = Field(..., description="Width in cells")
    h: int = Field(..., description="Height in cells")
    kind: str = Field(..., min_length=1, description="Room kind label")

    @classmethod
    def from_room(cls, room: RoomDescriptor) -> "RoomModel":
        return cls(x=room.x, y=room.y, w=room.w, h=room.h, kind=room.kind)

    def to_room(self) -> RoomDescriptor:
        return RoomDescriptor(x=self.x, y=self.y, w=self.w, h=self.h, kind=self.kind)


class LayoutModel(BaseModel):
    """Wire form of a generated layout."""

    template: str = Field(..., description="Template name used for generation")
    rooms: List[RoomModel] = Field(default_factory=list, description="Rooms in catalog order")

    @classmethod
    def from_layout(cls, layout: Layout) -> "LayoutModel":
        return cls(
            template=layout.template,
            rooms=[RoomModel.from_room(r) for r in layout.rooms],
        )

    def to_layout(self) -> Layout:
        return Layout(template=self.template, rooms=tuple(r.to_room() for r in self.rooms))


class GenerateLayoutRequest(BaseModel):
    """Request to generate a layout."""

    seed: int = Field(..., ge=0, le=MASK_64, description="Unsigned 64-bit seed")
    template: str = Field(..., description="Template name; unknown names use the fallback")


def dump_layout_json(layout: Layout) -> str:
    """Serialize a layout through LayoutModel."""
    return LayoutModel.from_layout(layout).model_dump_json()


def load_layout_json(text: str) -> Layout:
    """Parse and validate a JSON layout. Raises pydantic.ValidationError."""
    return LayoutModel.model_validate_json(text).to_layout()
