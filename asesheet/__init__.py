"""
asesheet - decode and encode Aseprite sprite-sheet JSON exports.

Only the metadata is handled; the sheet image itself is left to the caller.
The easy way to produce an export is::

    aseprite -b boonga.ase --sheet boonga.png --format json-array --data boonga.json

Both ``json-array`` and ``json-hash`` exports are read; encoding always
writes the array form.
"""

__version__ = "0.1.0"

from asesheet.color import Color, decode_color, encode_color
from asesheet.errors import (
    InvalidColor,
    MalformedShape,
    MissingHashPrefix,
    MissingRequiredField,
    NonHexDigit,
    SheetDecodeError,
    TypeMismatch,
    UnknownEnumVariant,
    WrongLength,
)
from asesheet.frames import Frame, FrameData, decode_frame_list
from asesheet.geometry import Dimensions, Point, Rect
from asesheet.sheetmeta import (
    BlendMode,
    Direction,
    Frametag,
    Layer,
    Metadata,
    Slice,
    SliceKey,
    SpritesheetData,
    SpritesheetDataBuilder,
    decode,
    encode,
)

__all__ = [
    "BlendMode",
    "Color",
    "Dimensions",
    "Direction",
    "Frame",
    "FrameData",
    "Frametag",
    "InvalidColor",
    "Layer",
    "MalformedShape",
    "Metadata",
    "MissingHashPrefix",
    "MissingRequiredField",
    "NonHexDigit",
    "Point",
    "Rect",
    "SheetDecodeError",
    "Slice",
    "SliceKey",
    "SpritesheetData",
    "SpritesheetDataBuilder",
    "TypeMismatch",
    "UnknownEnumVariant",
    "WrongLength",
    "decode",
    "decode_color",
    "decode_frame_list",
    "encode",
    "encode_color",
]
