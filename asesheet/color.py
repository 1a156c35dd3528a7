"""Codec for the ``#rrggbbaa`` color strings used by layers and slices.

Decoding accepts either case for the hex digits; encoding always emits the
lowercase form, so ``encode_color`` is the single canonical spelling.
"""
from __future__ import annotations

from dataclasses import dataclass
import string

import pygame

from asesheet.errors import MissingHashPrefix, NonHexDigit, WrongLength
from asesheet.fields import expect_str
from asesheet.settings import COLOR_CHANNELS, COLOR_PREFIX, COLOR_TEXT_LENGTH

_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA color with one byte per channel."""

    r: int
    g: int
    b: int
    a: int

    def __post_init__(self):
        for name in COLOR_CHANNELS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"color channel {name}={value!r} is not a byte")

    @classmethod
    def from_mapping(cls, data: object, path: str = "color") -> "Color":
        """Decode a JSON color slot, which holds text rather than an object."""
        return decode_color(expect_str(data, path), path)

    def to_mapping(self) -> str:
        return encode_color(self)

    def to_pygame(self) -> pygame.Color:
        return pygame.Color(self.r, self.g, self.b, self.a)

    def __str__(self):
        return encode_color(self)


def decode_color(text: str, path: str = "color") -> Color:
    """Parse ``#rrggbbaa`` text into a :class:`Color`.

    Example:
        >>> decode_color("#6ACD5Bff")
        Color(r=106, g=205, b=91, a=255)
    """
    if not text.startswith(COLOR_PREFIX):
        raise MissingHashPrefix(path, f"color {text!r} must start with {COLOR_PREFIX!r}", text)
    if len(text) != COLOR_TEXT_LENGTH:
        raise WrongLength(
            path,
            f"color {text!r} has {len(text)} characters, expected {COLOR_TEXT_LENGTH}",
            text,
        )
    channels = []
    for idx, name in enumerate(COLOR_CHANNELS):
        pair = text[1 + 2 * idx:3 + 2 * idx]
        # int(..., 16) would also take signs and underscores
        if not all(c in _HEX_DIGITS for c in pair):
            raise NonHexDigit(
                path, f"channel {name} of {text!r} is not hex: {pair!r}", text, channel=name
            )
        channels.append(int(pair, 16))
    return Color(*channels)


def encode_color(color: Color) -> str:
    return f"{COLOR_PREFIX}{color.r:02x}{color.g:02x}{color.b:02x}{color.a:02x}"
