"""Exceptions raised while decoding a sprite-sheet export.

Every failure carries the dotted ``path`` of the offending field (for
example ``meta.layers[2].blendMode``) and the ``value`` found there, so the
message alone is enough to locate the problem in the source document.
"""
from __future__ import annotations


class SheetDecodeError(ValueError):
    """Base class for all decode failures."""

    def __init__(self, path: str, message: str, value: object = None):
        self.path = path
        self.value = value
        super().__init__(f"{path}: {message}")


class MalformedShape(SheetDecodeError):
    """The ``frames`` value is neither an array nor an object."""


class TypeMismatch(SheetDecodeError):
    """A JSON value has the wrong type (or range) for its slot."""


class MissingRequiredField(SheetDecodeError):
    """A required key is absent."""

    def __init__(self, path: str):
        super().__init__(path, "missing required field")


class UnknownEnumVariant(SheetDecodeError):
    """A Direction or BlendMode string is not one of the known cases."""


class InvalidColor(SheetDecodeError):
    """Color text failed validation."""


class MissingHashPrefix(InvalidColor):
    """Color text does not start with ``#``."""


class WrongLength(InvalidColor):
    """Color text is not exactly 9 characters long."""


class NonHexDigit(InvalidColor):
    """A channel pair is not base-16; ``channel`` is one of ``"r"``, ``"g"``, ``"b"``, ``"a"``."""

    def __init__(self, path: str, message: str, value: object = None, *, channel: str):
        self.channel = channel
        super().__init__(path, message, value)
