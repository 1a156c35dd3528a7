"""
Unit tests for the field helpers and optional-block defaulting.
"""

import pytest

from asesheet.errors import MissingRequiredField, TypeMismatch
from asesheet.fields import (
    expect_uint,
    join,
    optional_list,
    optional_str,
    require,
)


def _decode_int(value, path):
    return expect_uint(value, path)


class TestJoin:

    def test_join_key(self):
        assert join("meta", "layers") == "meta.layers"

    def test_join_index(self):
        assert join("meta.layers", 2) == "meta.layers[2]"

    def test_join_root(self):
        assert join("", "frames") == "frames"


class TestRequire:

    def test_present(self):
        assert require({"a": 0}, "a", "x") == 0

    def test_null_is_present(self):
        assert require({"a": None}, "a", "x") is None

    def test_absent(self):
        with pytest.raises(MissingRequiredField) as excinfo:
            require({}, "a", "x")
        assert excinfo.value.path == "x.a"


class TestOptionalList:
    """Absent, null and empty all normalize to an empty tuple."""

    @pytest.mark.parametrize("data", [{}, {"items": None}, {"items": []}])
    def test_defaults_to_empty(self, data):
        assert optional_list(data, "items", _decode_int, "meta") == ()

    def test_decodes_each_element(self):
        assert optional_list({"items": [1, 2, 3]}, "items", _decode_int, "meta") == (1, 2, 3)

    def test_one_bad_element_fails_whole_list(self):
        with pytest.raises(TypeMismatch) as excinfo:
            optional_list({"items": [1, "two", 3]}, "items", _decode_int, "meta")
        assert excinfo.value.path == "meta.items[1]"

    def test_non_array(self):
        with pytest.raises(TypeMismatch):
            optional_list({"items": {"a": 1}}, "items", _decode_int, "meta")


class TestOptionalStr:

    def test_absent_is_none(self):
        assert optional_str({}, "image", "meta") is None

    def test_kept_verbatim(self):
        assert optional_str({"image": " ./a b.png "}, "image", "meta") == " ./a b.png "

    def test_wrong_type(self):
        with pytest.raises(TypeMismatch):
            optional_str({"image": 3}, "image", "meta")
