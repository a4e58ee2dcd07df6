"""Tests for the built-in rules and their argument helpers."""

import pytest

from infivalidator.validators import ValidatorOptions, cast_correct_type, detect_op
from infivalidator.validators.rules import (
    has_array_item,
    has_length,
    has_object_key,
    is_array,
    is_boolean,
    is_exists,
    is_firebase_id,
    is_mongo_id,
    is_not_empty,
    is_number,
    is_object,
    is_string,
    is_uuid_v1,
    is_uuid_v4,
)


def _opts(arg):
    return ValidatorOptions().with_arg(arg)


class TestCastCorrectType:
    """Rule arguments arrive as strings and are coerced."""

    def test_numbers(self):
        assert cast_correct_type("24") == 24
        assert isinstance(cast_correct_type("24"), int)
        assert cast_correct_type("-3") == -3
        assert cast_correct_type("2.5") == 2.5

    def test_literals(self):
        assert cast_correct_type("true") is True
        assert cast_correct_type("false") is False
        assert cast_correct_type("null") is None
        assert cast_correct_type("undefined") is None

    def test_other_strings_unchanged(self):
        assert cast_correct_type("abc") == "abc"
        assert cast_correct_type("1_000") == "1_000"
        assert cast_correct_type("nan") == "nan"
        assert cast_correct_type("") == ""

    def test_non_strings_unchanged(self):
        assert cast_correct_type(7) == 7
        assert cast_correct_type(None) is None


class TestDetectOp:
    """Splitting 'name:argument' rule strings."""

    def test_rule_with_argument(self):
        assert detect_op("hasLength:4") == ("hasLength", "4")

    def test_rule_without_argument(self):
        assert detect_op("isString") == ("isString", None)

    def test_split_on_first_colon_only(self):
        assert detect_op("hasObjectKey:a:b") == ("hasObjectKey", "a:b")

    def test_empty_argument(self):
        assert detect_op("hasObjectKey:") == ("hasObjectKey", "")


class TestTypePredicates:
    """Presence and type rules."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, False),
            ({}, False),
            ([], False),
            ("", False),
            ("   ", False),
            ("a", True),
            (0, True),
            (False, True),
            ({"a": 1}, True),
            ([0], True),
        ],
    )
    def test_is_not_empty(self, value, expected):
        assert is_not_empty(value) is expected

    def test_is_exists(self):
        assert is_exists(None) is False
        assert is_exists(0) is True
        assert is_exists("") is True

    def test_is_string(self):
        assert is_string("x")
        assert not is_string(1)

    def test_is_number_excludes_booleans(self):
        assert is_number(1)
        assert is_number(1.5)
        assert not is_number(True)
        assert not is_number("1")

    def test_is_boolean(self):
        assert is_boolean(False)
        assert not is_boolean(0)

    def test_is_object_accepts_containers(self):
        assert is_object({})
        assert is_object([])
        assert not is_object("{}")

    def test_is_array(self):
        assert is_array([1])
        assert not is_array({"0": 1})


class TestIdentifierPredicates:
    """Id shapes."""

    def test_mongo_id(self):
        assert is_mongo_id("5e8703d290165868e8c2cd50")
        assert is_mongo_id("5E8703D290165868E8C2CD50")
        assert not is_mongo_id("5e8703d290165868e8c2cd50xxx")
        assert not is_mongo_id("5e8703d290165868e8c2cd5g")
        assert not is_mongo_id(12345)

    def test_firebase_id(self):
        assert is_firebase_id("A1pE4Up36ORa3QcWBMxrrnKjIK72")
        assert not is_firebase_id("JUA84jfA73Dp")
        assert not is_firebase_id("A1pE4Up36ORa3QcWBMxr|nKjIK72")
        assert not is_firebase_id("A" * 33)

    def test_uuid_versions(self):
        v1 = "307d2376-91f9-11ea-bb37-0242ac130002"
        v4 = "3d1e0dc9-3c5a-43fa-a3ea-5e758e92c6fe"

        assert is_uuid_v1(v1)
        assert not is_uuid_v1(v4)
        assert is_uuid_v4(v4)
        assert is_uuid_v4(v4.upper())
        assert not is_uuid_v4(v1)
        assert not is_uuid_v4(None)


class TestArgumentPredicates:
    """Rules that compare against their ':argument'."""

    def test_has_length_on_arrays(self):
        assert has_length([1, 2, 3], _opts("3"))
        assert not has_length([1, 2], _opts("3"))

    def test_has_length_on_strings_and_mappings(self):
        assert has_length("abcd", _opts("4"))
        assert has_length({"a": 1}, _opts("1"))

    def test_has_length_needs_numeric_argument(self):
        assert not has_length([1, 2, 3], _opts(None))
        assert not has_length([1, 2, 3], _opts("three"))
        assert not has_length([1], _opts("true"))

    def test_has_length_of_scalars_is_zero(self):
        assert has_length(None, _opts("0"))
        assert has_length(5, _opts("0"))

    def test_has_array_item(self):
        assert has_array_item([1, 2, 3], _opts("2"))
        assert has_array_item(["a", "b"], _opts("b"))
        assert not has_array_item([1, 2, 3], _opts("4"))
        assert not has_array_item({"2": 2}, _opts("2"))

    def test_has_array_item_does_not_confuse_booleans_and_numbers(self):
        assert not has_array_item([1, 2, 3], _opts("true"))
        assert has_array_item([True], _opts("true"))

    def test_has_object_key(self):
        assert has_object_key({"token": "x"}, _opts("token"))
        assert not has_object_key({"token": "x"}, _opts("other"))
        assert not has_object_key({"token": "x"}, _opts(None))
        assert not has_object_key(["token"], _opts("token"))
