"""Plain geometry value types used throughout the sheet model."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import pygame

from asesheet.fields import expect_object, require_uint


@dataclass(frozen=True, slots=True)
class Rect:
    """Pixel bounds inside a spritesheet."""

    x: int
    y: int
    w: int
    h: int

    @classmethod
    def from_mapping(cls, data: object, path: str = "rect") -> "Rect":
        data = expect_object(data, path)
        return cls(
            x=require_uint(data, "x", path),
            y=require_uint(data, "y", path),
            w=require_uint(data, "w", path),
            h=require_uint(data, "h", path),
        )

    def to_mapping(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y, "w": self.w, "h": self.h}

    def to_rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.w, self.h)

    def scaled(self, scale: int) -> "Rect":
        if scale == 1:
            return self
        return Rect(self.x * scale, self.y * scale, self.w * scale, self.h * scale)


@dataclass(frozen=True, slots=True)
class Point:
    x: int
    y: int

    @classmethod
    def from_mapping(cls, data: object, path: str = "point") -> "Point":
        data = expect_object(data, path)
        return cls(x=require_uint(data, "x", path), y=require_uint(data, "y", path))

    def to_mapping(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True, slots=True)
class Dimensions:
    w: int
    h: int

    @classmethod
    def from_mapping(cls, data: object, path: str = "size") -> "Dimensions":
        data = expect_object(data, path)
        return cls(w=require_uint(data, "w", path), h=require_uint(data, "h", path))

    def to_mapping(self) -> Dict[str, int]:
        return {"w": self.w, "h": self.h}
