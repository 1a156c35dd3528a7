"""Structured view of an Aseprite sprite-sheet JSON export.

Aseprite writes one JSON document next to each exported sheet image.  The
document lists every frame's placement and duration and, depending on the
export options and the Aseprite version, the animation tags, the layer
tree and the slices defined in the sprite:

.. code-block:: json

   {
     "frames": [
       {
         "filename": "boonga 0.ase",
         "frame": {"x": 1, "y": 1, "w": 18, "h": 18},
         "rotated": false,
         "trimmed": false,
         "spriteSourceSize": {"x": 0, "y": 0, "w": 16, "h": 16},
         "sourceSize": {"w": 16, "h": 16},
         "duration": 250
       }
     ],
     "meta": {
       "app": "http://www.aseprite.org/",
       "version": "1.1.6-dev",
       "image": "boonga.png",
       "format": "RGBA8888",
       "size": {"w": 39, "h": 20},
       "scale": "1",
       "frameTags": [{"name": "walk", "from": 0, "to": 1, "direction": "forward"}],
       "layers": [{"name": "Layer 1", "opacity": 255, "blendMode": "normal"}],
       "slices": []
     }
   }

``frameTags``, ``layers``, ``slices`` and ``image`` are optional; older
exporters leave them out.  The lists always come back as (possibly empty)
tuples and are always written back, so a decoded sheet has one canonical
encoding no matter which variant it was read from.  Keys the model does not
know about are ignored.

Everything here is an immutable value.  Use :func:`dataclasses.replace` to
derive a modified copy.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, MutableMapping, Tuple
import json
import logging

import pygame

from asesheet.color import Color
from asesheet.errors import TypeMismatch, UnknownEnumVariant
from asesheet.fields import (
    expect_array,
    expect_object,
    expect_str,
    join,
    optional,
    optional_list,
    optional_str,
    optional_uint,
    require,
    require_str,
    require_uint,
)
from asesheet.frames import Frame, FrameData, decode_frame_list, encode_frame_list
from asesheet.geometry import Dimensions, Point, Rect
from asesheet.settings import (
    COLS,
    DEFAULT_APP,
    DEFAULT_DURATION,
    DEFAULT_FORMAT,
    DEFAULT_SCALE,
    DEFAULT_VERSION,
    JSON_INDENT,
    PADDING,
    TILE,
)


class _WireEnum(Enum):
    """Enum whose values are the strings written in the export."""

    @classmethod
    def from_mapping(cls, data: object, path: str):
        text = expect_str(data, path)
        try:
            return cls(text)
        except ValueError:
            known = ", ".join(member.value for member in cls)
            raise UnknownEnumVariant(
                path, f"unknown {cls.__name__} {text!r} (expected one of: {known})", text
            ) from None

    def to_mapping(self) -> str:
        return self.value


class Direction(_WireEnum):
    FORWARD = "forward"
    REVERSE = "reverse"
    PINGPONG = "pingpong"


class BlendMode(_WireEnum):
    # https://github.com/aseprite/aseprite/blob/main/src/doc/blend_mode.cpp
    NORMAL = "normal"
    MULTIPLY = "multiply"
    SCREEN = "screen"
    OVERLAY = "overlay"
    DARKEN = "darken"
    LIGHTEN = "lighten"
    COLOR_DODGE = "color_dodge"
    COLOR_BURN = "color_burn"
    HARD_LIGHT = "hard_light"
    SOFT_LIGHT = "soft_light"
    DIFFERENCE = "difference"
    EXCLUSION = "exclusion"
    HSL_HUE = "hsl_hue"
    HSL_SATURATION = "hsl_saturation"
    HSL_COLOR = "hsl_color"
    HSL_LUMINOSITY = "hsl_luminosity"
    ADDITION = "addition"
    SUBTRACT = "subtract"
    DIVIDE = "divide"

    @classmethod
    def default(cls) -> "BlendMode":
        return cls.NORMAL

    @classmethod
    def from_mapping(cls, data: object, path: str) -> "BlendMode":
        # Numeric 0 is the zero value of Aseprite's blend mode enum
        if isinstance(data, int) and not isinstance(data, bool):
            if data == 0:
                return cls.default()
            raise TypeMismatch(path, f"numeric blend mode {data} is not supported", data)
        return super().from_mapping(data, path)


@dataclass(frozen=True, slots=True)
class Frametag:
    """A named, inclusive range of frame indices played as one animation."""

    name: str
    from_: int
    to: int
    direction: Direction

    @classmethod
    def from_mapping(cls, data: object, path: str = "frameTag") -> "Frametag":
        data = expect_object(data, path)
        return cls(
            name=require_str(data, "name", path),
            from_=require_uint(data, "from", path),
            to=require_uint(data, "to", path),
            direction=Direction.from_mapping(require(data, "direction", path), join(path, "direction")),
        )

    def to_mapping(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "from": self.from_,
            "to": self.to,
            "direction": self.direction.to_mapping(),
        }

    def frame_indices(self) -> List[int]:
        """Frame indices in the order one playback cycle visits them."""
        forward = list(range(self.from_, self.to + 1))
        if self.direction is Direction.REVERSE:
            return forward[::-1]
        if self.direction is Direction.PINGPONG:
            return forward + forward[-2:0:-1]
        return forward


@dataclass(frozen=True, slots=True)
class Layer:
    """A paint layer, or a group when ``opacity`` and ``blend_mode`` are None."""

    name: str
    group: str | None = None
    opacity: int | None = None
    blend_mode: BlendMode | None = None
    color: Color | None = None
    data: str | None = None

    @classmethod
    def from_mapping(cls, data: object, path: str = "layer") -> "Layer":
        data = expect_object(data, path)
        return cls(
            name=require_str(data, "name", path),
            group=optional_str(data, "group", path),
            opacity=optional_uint(data, "opacity", path),
            blend_mode=optional(data, "blendMode", BlendMode.from_mapping, path),
            color=optional(data, "color", Color.from_mapping, path),
            data=optional_str(data, "data", path),
        )

    def to_mapping(self) -> MutableMapping[str, object]:
        mapping: Dict[str, object] = {"name": self.name}
        if self.group is not None:
            mapping["group"] = self.group
        if self.opacity is not None:
            mapping["opacity"] = self.opacity
        if self.blend_mode is not None:
            mapping["blendMode"] = self.blend_mode.to_mapping()
        if self.color is not None:
            mapping["color"] = self.color.to_mapping()
        if self.data is not None:
            mapping["data"] = self.data
        return mapping

    @property
    def is_group(self) -> bool:
        return self.opacity is None and self.blend_mode is None


@dataclass(frozen=True, slots=True)
class SliceKey:
    """Slice geometry starting at ``frame``; ``center`` marks a nine-patch."""

    frame: int
    bounds: Rect
    pivot: Point | None = None
    center: Rect | None = None

    @classmethod
    def from_mapping(cls, data: object, path: str = "key") -> "SliceKey":
        data = expect_object(data, path)
        return cls(
            frame=require_uint(data, "frame", path),
            bounds=Rect.from_mapping(require(data, "bounds", path), join(path, "bounds")),
            pivot=optional(data, "pivot", Point.from_mapping, path),
            center=optional(data, "center", Rect.from_mapping, path),
        )

    def to_mapping(self) -> MutableMapping[str, object]:
        mapping: Dict[str, object] = {"frame": self.frame, "bounds": self.bounds.to_mapping()}
        if self.center is not None:
            mapping["center"] = self.center.to_mapping()
        if self.pivot is not None:
            mapping["pivot"] = self.pivot.to_mapping()
        return mapping


@dataclass(frozen=True, slots=True)
class Slice:
    name: str
    color: Color
    keys: Tuple[SliceKey, ...] = ()
    data: str | None = None

    @classmethod
    def from_mapping(cls, data: object, path: str = "slice") -> "Slice":
        data = expect_object(data, path)
        keys_path = join(path, "keys")
        keys_raw = expect_array(require(data, "keys", path), keys_path)
        return cls(
            name=require_str(data, "name", path),
            color=Color.from_mapping(require(data, "color", path), join(path, "color")),
            keys=tuple(SliceKey.from_mapping(key, join(keys_path, idx)) for idx, key in enumerate(keys_raw)),
            data=optional_str(data, "data", path),
        )

    def to_mapping(self) -> MutableMapping[str, object]:
        mapping: Dict[str, object] = {"name": self.name, "color": self.color.to_mapping()}
        if self.data is not None:
            mapping["data"] = self.data
        mapping["keys"] = [key.to_mapping() for key in self.keys]
        return mapping

    def key_for_frame(self, frame: int) -> SliceKey | None:
        """Return the key in effect at ``frame``, or None before the first key."""
        current = None
        for key in sorted(self.keys, key=lambda k: k.frame):
            if key.frame > frame:
                break
            current = key
        return current


@dataclass(frozen=True, slots=True)
class Metadata:
    app: str
    version: str
    format: str
    size: Dimensions
    scale: str
    image: str | None = None
    frame_tags: Tuple[Frametag, ...] = ()
    layers: Tuple[Layer, ...] = ()
    slices: Tuple[Slice, ...] = ()

    @classmethod
    def from_mapping(cls, data: object, path: str = "meta") -> "Metadata":
        data = expect_object(data, path)
        return cls(
            app=require_str(data, "app", path),
            version=require_str(data, "version", path),
            format=require_str(data, "format", path),
            size=Dimensions.from_mapping(require(data, "size", path), join(path, "size")),
            # Kept as text; the exporter writes it as a string
            scale=require_str(data, "scale", path),
            image=optional_str(data, "image", path),
            frame_tags=optional_list(data, "frameTags", Frametag.from_mapping, path),
            layers=optional_list(data, "layers", Layer.from_mapping, path),
            slices=optional_list(data, "slices", Slice.from_mapping, path),
        )

    def to_mapping(self) -> MutableMapping[str, object]:
        mapping: Dict[str, object] = {"app": self.app, "version": self.version}
        if self.image is not None:
            mapping["image"] = self.image
        mapping.update({
            "format": self.format,
            "size": self.size.to_mapping(),
            "scale": self.scale,
            "frameTags": [tag.to_mapping() for tag in self.frame_tags],
            "layers": [layer.to_mapping() for layer in self.layers],
            "slices": [slice_.to_mapping() for slice_ in self.slices],
        })
        return mapping

    def layer_children(self, group: str | None = None) -> List[Layer]:
        """Layers whose parent is ``group`` (None selects the root)."""
        return [layer for layer in self.layers if layer.group == group]


@dataclass(frozen=True, slots=True)
class SpritesheetData:
    """Root of a decoded export: the frames plus the sheet metadata."""

    frames: Tuple[Frame, ...]
    meta: Metadata

    @classmethod
    def from_mapping(cls, data: object, path: str = "") -> "SpritesheetData":
        data = expect_object(data, path or "document")
        frames = decode_frame_list(require(data, "frames", path), join(path, "frames"))
        meta = Metadata.from_mapping(require(data, "meta", path), join(path, "meta"))
        logging.debug(
            "[sheetmeta] decoded %d frames, %d tags, %d layers, %d slices",
            len(frames), len(meta.frame_tags), len(meta.layers), len(meta.slices),
        )
        return cls(frames=frames, meta=meta)

    def to_mapping(self) -> MutableMapping[str, object]:
        return {"frames": encode_frame_list(self.frames), "meta": self.meta.to_mapping()}

    @classmethod
    def load(cls, path: Path | str) -> "SpritesheetData":
        logging.info("[sheetmeta] loading %s", path)
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_mapping(data)

    def dump(self, path: Path | str, *, indent: int = JSON_INDENT) -> None:
        # Encode before opening so a failure leaves the existing file intact
        payload = encode(self, indent=indent).encode("utf-8")
        with open(path, "wb") as f:
            f.write(payload)

    # Convenience helpers -------------------------------------------------

    def frame_rect(self, index: int) -> pygame.Rect:
        return self.frames[index].data.frame.to_rect()

    def frame_by_filename(self, filename: str) -> Frame:
        for frame in self.frames:
            if frame.filename == filename:
                return frame
        raise KeyError(f"No frame named {filename!r}")

    def frametag(self, name: str) -> Frametag:
        for tag in self.meta.frame_tags:
            if tag.name == name:
                return tag
        raise KeyError(f"No frame tag named {name!r}")

    def tag_frames(self, name: str) -> List[Frame]:
        """Frames of the tag ``name`` in playback order for one cycle."""
        tag = self.frametag(name)
        if tag.to >= len(self.frames):
            raise IndexError(
                f"Frame tag {name!r} ends at frame {tag.to} but the sheet has {len(self.frames)} frames"
            )
        return [self.frames[idx] for idx in tag.frame_indices()]

    def tag_duration(self, name: str) -> int:
        return sum(frame.data.duration for frame in self.tag_frames(name))


def decode(text: str | bytes) -> SpritesheetData:
    """Decode exported JSON text.

    Raises:
        json.JSONDecodeError: if ``text`` is not JSON at all.
        SheetDecodeError: if the document does not match the export schema.
    """
    return SpritesheetData.from_mapping(json.loads(text))


def encode(sheet: SpritesheetData, *, indent: int | None = JSON_INDENT) -> str:
    """Encode ``sheet`` as canonical JSON text.

    Key order is fixed by the ``to_mapping`` methods, so equal sheets always
    produce identical text.
    """
    return json.dumps(sheet.to_mapping(), indent=indent, ensure_ascii=False)


class SpritesheetDataBuilder:
    """Helper for constructing ``SpritesheetData`` objects programmatically.

    Frames are packed left to right on a fixed grid of ``tile`` sized cells
    separated by ``padding`` pixels, wrapping after ``cols`` cells.
    """

    def __init__(
        self,
        *,
        stem: str = "sprite",
        tile: int = TILE,
        padding: int = PADDING,
        cols: int = COLS,
        duration: int = DEFAULT_DURATION,
    ):
        self.stem = stem
        self.tile = tile
        self.padding = padding
        self.cols = cols
        self.duration = duration
        self.frames: List[Frame] = []
        self.frame_tags: List[Frametag] = []
        self.layers: List[Layer] = []
        self.slices: List[Slice] = []
        self.image_path: str | None = None
        self.image_size: Dimensions | None = None

    def set_image_info(self, *, path: Path | str | None = None, size: Tuple[int, int] | None = None) -> None:
        if path is not None:
            self.image_path = str(path)
        if size is not None:
            self.image_size = Dimensions(int(size[0]), int(size[1]))

    def grid_box(self, row: int, col: int) -> Rect:
        x = self.padding + col * (self.tile + self.padding)
        y = self.padding + row * (self.tile + self.padding)
        return Rect(x, y, self.tile, self.tile)

    def next_box(self) -> Rect:
        row, col = divmod(len(self.frames), self.cols)
        return self.grid_box(row, col)

    def add_frame(
        self,
        rect: Rect | None = None,
        *,
        filename: str | None = None,
        duration: int | None = None,
    ) -> Frame:
        if rect is None:
            rect = self.next_box()
        if filename is None:
            filename = f"{self.stem} {len(self.frames)}.ase"
        data = FrameData(
            frame=rect,
            rotated=False,
            trimmed=False,
            sprite_source_size=Rect(0, 0, rect.w, rect.h),
            source_size=Dimensions(rect.w, rect.h),
            duration=self.duration if duration is None else duration,
        )
        frame = Frame(filename=filename, data=data)
        self.frames.append(frame)
        return frame

    def add_animation(
        self,
        name: str,
        rects: Iterable[Rect | None],
        *,
        direction: Direction = Direction.FORWARD,
        duration: int | None = None,
    ) -> Frametag:
        start = len(self.frames)
        for rect in rects:
            self.add_frame(rect, duration=duration)
        if len(self.frames) == start:
            raise ValueError(f"Animation {name!r} needs at least one frame")
        tag = Frametag(name=name, from_=start, to=len(self.frames) - 1, direction=direction)
        self.frame_tags.append(tag)
        return tag

    def add_layer(
        self,
        name: str,
        *,
        group: str | None = None,
        opacity: int | None = 255,
        blend_mode: BlendMode | None = BlendMode.NORMAL,
        color: Color | None = None,
        data: str | None = None,
    ) -> Layer:
        layer = Layer(name=name, group=group, opacity=opacity, blend_mode=blend_mode, color=color, data=data)
        self.layers.append(layer)
        return layer

    def add_slice(self, slice_: Slice) -> Slice:
        self.slices.append(slice_)
        return slice_

    def _sheet_size(self) -> Dimensions:
        if self.image_size is not None:
            return self.image_size
        w = h = 0
        for frame in self.frames:
            rect = frame.data.frame
            w = max(w, rect.x + rect.w + self.padding)
            h = max(h, rect.y + rect.h + self.padding)
        return Dimensions(w, h)

    def build(self) -> SpritesheetData:
        meta = Metadata(
            app=DEFAULT_APP,
            version=DEFAULT_VERSION,
            format=DEFAULT_FORMAT,
            size=self._sheet_size(),
            scale=DEFAULT_SCALE,
            image=self.image_path,
            frame_tags=tuple(self.frame_tags),
            layers=tuple(self.layers),
            slices=tuple(self.slices),
        )
        return SpritesheetData(frames=tuple(self.frames), meta=meta)
