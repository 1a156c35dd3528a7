"""Per-frame geometry and the reader for the ``frames`` collection.

The exporter can write frames in two shapes, selected in its UI as
"Array" or "Hash":

.. code-block:: json

   {"frames": [{"filename": "boonga 0.ase", "frame": {...}, ...}]}

   {"frames": {"boonga 0.ase": {"frame": {...}, ...}}}

Both decode to the same ordered tuple of :class:`Frame`.  Array input keeps
array order.  Object input follows the key order handed over by the JSON
parser; Python's :mod:`json` keeps document order and lets a duplicated key
overwrite the earlier one, but JSON itself makes no ordering promise, so
callers should not rely on the order of hash-shaped exports for anything
beyond stable iteration.  Encoding always writes the array shape.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, MutableMapping, Tuple

from asesheet.errors import MalformedShape
from asesheet.fields import expect_object, join, require, require_bool, require_str, require_uint
from asesheet.geometry import Dimensions, Rect


@dataclass(frozen=True, slots=True)
class FrameData:
    """Placement and timing of one frame."""

    frame: Rect
    rotated: bool
    trimmed: bool
    sprite_source_size: Rect
    source_size: Dimensions
    duration: int

    @classmethod
    def from_mapping(cls, data: object, path: str = "frame") -> "FrameData":
        data = expect_object(data, path)
        return cls(
            frame=Rect.from_mapping(require(data, "frame", path), join(path, "frame")),
            rotated=require_bool(data, "rotated", path),
            trimmed=require_bool(data, "trimmed", path),
            sprite_source_size=Rect.from_mapping(
                require(data, "spriteSourceSize", path), join(path, "spriteSourceSize")
            ),
            source_size=Dimensions.from_mapping(
                require(data, "sourceSize", path), join(path, "sourceSize")
            ),
            duration=require_uint(data, "duration", path),
        )

    def to_mapping(self) -> Dict[str, object]:
        return {
            "frame": self.frame.to_mapping(),
            "rotated": self.rotated,
            "trimmed": self.trimmed,
            "spriteSourceSize": self.sprite_source_size.to_mapping(),
            "sourceSize": self.source_size.to_mapping(),
            "duration": self.duration,
        }


@dataclass(frozen=True, slots=True)
class Frame:
    filename: str
    data: FrameData

    @classmethod
    def from_mapping(cls, data: object, path: str = "frame") -> "Frame":
        data = expect_object(data, path)
        return cls(filename=require_str(data, "filename", path), data=FrameData.from_mapping(data, path))

    def to_mapping(self) -> MutableMapping[str, object]:
        mapping: Dict[str, object] = {"filename": self.filename}
        mapping.update(self.data.to_mapping())
        return mapping


def decode_frame_list(value: object, path: str = "frames") -> Tuple[Frame, ...]:
    """Decode either shape of the ``frames`` value."""
    if isinstance(value, list):
        return tuple(Frame.from_mapping(item, join(path, idx)) for idx, item in enumerate(value))
    if isinstance(value, Mapping):
        return tuple(
            Frame(filename=filename, data=FrameData.from_mapping(item, join(path, filename)))
            for filename, item in value.items()
        )
    raise MalformedShape(
        path, f"expected array or object of frames, got {type(value).__name__}", value
    )


def encode_frame_list(frames: Tuple[Frame, ...]) -> list:
    return [frame.to_mapping() for frame in frames]
