"""Field-level helpers shared by every ``from_mapping`` in the package.

Required fields go through :func:`require` plus one of the ``expect_*``
checks.  Optional blocks go through :func:`optional_list` and
:func:`optional_str`, which apply the defaulting rules at the decode
boundary: an absent key and an explicit ``null`` mean the same thing, and
optional lists come back as an empty tuple rather than ``None``.

JSON ``true``/``false`` are Python ``bool``, which is a subclass of ``int``;
the integer checks reject them explicitly.
"""
from __future__ import annotations

from typing import Callable, Mapping, Tuple, TypeVar

from asesheet.errors import MissingRequiredField, TypeMismatch
from asesheet.settings import U32_MAX

T = TypeVar("T")


def join(path: str, key: str | int) -> str:
    if isinstance(key, int):
        return f"{path}[{key}]"
    if not path:
        return key
    return f"{path}.{key}"


def _type_name(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def require(data: Mapping[str, object], key: str, path: str) -> object:
    try:
        return data[key]
    except KeyError:
        raise MissingRequiredField(join(path, key)) from None


def expect_object(value: object, path: str) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise TypeMismatch(path, f"expected object, got {_type_name(value)}", value)
    return value


def expect_array(value: object, path: str) -> list:
    if not isinstance(value, list):
        raise TypeMismatch(path, f"expected array, got {_type_name(value)}", value)
    return value


def expect_str(value: object, path: str) -> str:
    if not isinstance(value, str):
        raise TypeMismatch(path, f"expected string, got {_type_name(value)}", value)
    return value


def expect_bool(value: object, path: str) -> bool:
    if not isinstance(value, bool):
        raise TypeMismatch(path, f"expected bool, got {_type_name(value)}", value)
    return value


def expect_uint(value: object, path: str) -> int:
    """Accept an unsigned 32 bit integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatch(path, f"expected unsigned integer, got {_type_name(value)}", value)
    if value < 0 or value > U32_MAX:
        raise TypeMismatch(path, f"integer {value} out of range 0..{U32_MAX}", value)
    return value


def require_str(data: Mapping[str, object], key: str, path: str) -> str:
    return expect_str(require(data, key, path), join(path, key))


def require_bool(data: Mapping[str, object], key: str, path: str) -> bool:
    return expect_bool(require(data, key, path), join(path, key))


def require_uint(data: Mapping[str, object], key: str, path: str) -> int:
    return expect_uint(require(data, key, path), join(path, key))


def optional(
    data: Mapping[str, object],
    key: str,
    decode: Callable[[object, str], T],
    path: str,
) -> T | None:
    """Decode ``data[key]`` when present and not null, else return None."""
    value = data.get(key)
    if value is None:
        return None
    return decode(value, join(path, key))


def optional_str(data: Mapping[str, object], key: str, path: str) -> str | None:
    return optional(data, key, expect_str, path)


def optional_uint(data: Mapping[str, object], key: str, path: str) -> int | None:
    return optional(data, key, expect_uint, path)


def optional_list(
    data: Mapping[str, object],
    key: str,
    decode_item: Callable[[object, str], T],
    path: str,
) -> Tuple[T, ...]:
    """Decode an optional array into a tuple, defaulting to empty.

    Every element must decode; the first failing element aborts the whole
    list.
    """
    value = data.get(key)
    if value is None:
        return ()
    list_path = join(path, key)
    items = expect_array(value, list_path)
    return tuple(decode_item(item, join(list_path, idx)) for idx, item in enumerate(items))
