import datetime
import logging

import pytest

from mdblog.exceptions import ErrorKind, InvalidInputError
from mdblog.validation import (
    validate_content,
    validate_frontmatter,
    validate_locale,
    validate_path,
    validate_slug,
)


@pytest.mark.parametrize("slug", ["hello", "my-first-post", "post_2024", "a.b"])
def test_validate_slug_accepts_plain_slugs(slug):
    assert validate_slug(slug) is True


@pytest.mark.parametrize(
    "slug, message",
    [
        ("", "Slug must be a non-empty string"),
        (None, "Slug must be a non-empty string"),
        ("   ", "Slug cannot be empty or whitespace"),
        ("../etc/passwd", "Slug cannot contain path separators"),
        ("a/b", "Slug cannot contain path separators"),
        ("a\\b", "Slug cannot contain path separators"),
        ("a\0b", "Slug cannot contain null bytes"),
    ],
)
def test_validate_slug_rejects_unsafe_slugs(slug, message):
    with pytest.raises(InvalidInputError) as exc_info:
        validate_slug(slug)
    assert exc_info.value.message.startswith(message)
    assert exc_info.value.kind == ErrorKind.INVALID_INPUT


def test_invalid_input_error_is_a_value_error():
    with pytest.raises(ValueError):
        validate_slug("")


def test_validate_locale_lowercases():
    assert validate_locale("en-US") == "en-us"
    assert validate_locale(" fr ") == "fr"


@pytest.mark.parametrize("locale", ["", "../en", "en/us", "en\\us", "e\0n", "en\n", "   "])
def test_validate_locale_rejects_unsafe_values(locale):
    with pytest.raises(InvalidInputError):
        validate_locale(locale)


def test_validate_locale_warns_on_unusual_format(caplog):
    with caplog.at_level(logging.WARNING):
        assert validate_locale("english") == "english"
    assert "BCP 47" in caplog.text


def test_validate_path():
    assert validate_path(" content/posts ") == "content/posts"
    assert validate_path("/srv/blog/posts") == "/srv/blog/posts"
    for bad in ["", "   ", "po\0sts", "po\x07sts"]:
        with pytest.raises(InvalidInputError):
            validate_path(bad)


def test_validate_frontmatter_replaces_non_mappings():
    assert validate_frontmatter(None) == {}
    assert validate_frontmatter(["a", "b"]) == {}
    assert validate_frontmatter("title: x") == {}


def test_validate_frontmatter_converts_dates_to_iso_strings():
    result = validate_frontmatter(
        {
            "title": "Hi",
            "date": datetime.date(2024, 1, 2),
            "modifiedDate": datetime.datetime(2024, 1, 3, 10, 30),
        }
    )
    assert result == {
        "title": "Hi",
        "date": "2024-01-02",
        "modifiedDate": "2024-01-03T10:30:00+00:00",
    }


def test_validate_content():
    assert validate_content("") is True
    with pytest.raises(InvalidInputError):
        validate_content(None)


def test_validate_frontmatter_keeps_explicit_timezones():
    tz = datetime.timezone(datetime.timedelta(hours=2))
    result = validate_frontmatter({"date": datetime.datetime(2024, 1, 3, 10, 30, tzinfo=tz)})
    assert result == {"date": "2024-01-03T10:30:00+02:00"}
