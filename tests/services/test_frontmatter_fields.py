import math

from mdblog.services.frontmatter_fields import (
    get_number_field,
    get_string_list_field,
    is_author_object,
    is_finite_number,
    is_non_empty_string,
    is_string_array,
    resolve_field,
    resolve_string,
)


def test_resolve_field_returns_first_present_value_in_order():
    assert resolve_field(["a", "b"], {"b": "x"}) == "x"
    assert resolve_field(["a", "b"], {"a": "first", "b": "second"}) == "first"


def test_resolve_field_treats_empty_string_and_none_as_absent():
    assert resolve_field(["a", "b"], {"a": "", "b": "y"}) == "y"
    assert resolve_field(["a", "b"], {"a": None, "b": "y"}) == "y"


def test_resolve_field_keeps_falsy_non_empty_values():
    assert resolve_field(["a"], {"a": 0}) == 0
    assert resolve_field(["a"], {"a": False}, True) is False


def test_resolve_field_fallback():
    assert resolve_field([], {}, "fallback") == "fallback"
    assert resolve_field(["missing"], {"other": 1}) is None
    assert resolve_field(["a"], None, "fb") == "fb"
    assert resolve_field(["a"], ["not", "a", "mapping"], "fb") == "fb"


def test_resolve_string_skips_non_string_values():
    assert resolve_string(["title", "name"], {"title": 42, "name": "Named"}) == "Named"
    assert resolve_string(["title"], {"title": ["x"]}, "slug") == "slug"


def test_type_guards():
    assert is_non_empty_string("x")
    assert not is_non_empty_string("")
    assert not is_non_empty_string(None)

    assert is_string_array(["a", "b"])
    assert is_string_array([])
    assert not is_string_array(["a", 1])
    assert not is_string_array("ab")

    assert is_finite_number(3)
    assert is_finite_number(2.5)
    assert not is_finite_number(math.nan)
    assert not is_finite_number(math.inf)
    assert not is_finite_number(True)
    assert not is_finite_number("3")

    assert is_author_object({"name": "John", "affiliation": "ACME"})
    assert not is_author_object({"name": 3})
    assert not is_author_object("John")


def test_typed_accessors_fall_back_on_wrong_types():
    fm = {"title": "Hi", "readingTime": "5", "count": 4, "tags": ["a", 2], "cats": ["x"]}
    assert get_number_field(fm, "readingTime") is None
    assert get_number_field(fm, "count") == 4
    assert get_string_list_field(fm, "tags") == []
    assert get_string_list_field(fm, "cats") == ["x"]
