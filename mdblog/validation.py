import datetime
import logging
import re
from typing import Any, Dict

from mdblog.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

_CONTROL_CHARS = re.compile(r"[\x01-\x1f\x7f]")
# language[-Script][-REGION]: en, en-US, zh-Hans, es-419
_LOCALE_PATTERN = re.compile(
    r"^[a-z]{2,3}(-[A-Z][a-z]{3})?(-[A-Z]{2,3}|-[0-9]{3})?$", re.IGNORECASE
)


def validate_slug(slug: str) -> bool:
    """Reject slugs that are empty or could escape the posts directory."""
    if not slug or not isinstance(slug, str):
        raise InvalidInputError("Slug must be a non-empty string", {"slug": slug})

    if not slug.strip():
        raise InvalidInputError("Slug cannot be empty or whitespace", {"slug": slug})

    if ".." in slug or "/" in slug or "\\" in slug:
        raise InvalidInputError(
            "Slug cannot contain path separators or directory traversal sequences",
            {"slug": slug},
        )

    if "\0" in slug:
        raise InvalidInputError("Slug cannot contain null bytes", {"slug": slug})

    return True


def validate_locale(locale: str) -> str:
    """Validate a locale directory name and return it lowercased."""
    if not locale or not isinstance(locale, str):
        raise InvalidInputError("Locale must be a non-empty string", {"locale": locale})

    if "\0" in locale:
        raise InvalidInputError("Locale cannot contain null bytes", {"locale": locale})

    if _CONTROL_CHARS.search(locale):
        raise InvalidInputError(
            "Locale cannot contain control characters", {"locale": locale}
        )

    trimmed = locale.strip()
    if not trimmed:
        raise InvalidInputError(
            "Locale cannot be empty or whitespace", {"locale": locale}
        )

    if ".." in trimmed:
        raise InvalidInputError(
            "Locale cannot contain directory traversal sequences", {"locale": locale}
        )

    if "/" in trimmed or "\\" in trimmed:
        raise InvalidInputError(
            "Locale cannot contain path separators", {"locale": locale}
        )

    if not _LOCALE_PATTERN.match(trimmed):
        logger.warning(
            f'Locale "{trimmed}" may not follow BCP 47 format. '
            "Use a format like 'en', 'en-US', or 'fr-CA'"
        )

    return trimmed.lower()


def validate_path(path_value: str) -> str:
    """Validate a posts directory path; absolute paths are allowed."""
    if not path_value or not isinstance(path_value, str):
        raise InvalidInputError("Path must be a non-empty string", {"path": path_value})

    if "\0" in path_value:
        raise InvalidInputError("Path cannot contain null bytes", {"path": path_value})

    if _CONTROL_CHARS.search(path_value):
        raise InvalidInputError(
            "Path cannot contain control characters", {"path": path_value}
        )

    trimmed = path_value.strip()
    if not trimmed:
        raise InvalidInputError(
            "Path cannot be empty or whitespace", {"path": path_value}
        )

    return trimmed


def validate_frontmatter(frontmatter: Any) -> Dict[str, Any]:
    """
    Collapse anything that is not a mapping to an empty dict.

    YAML date scalars are converted to ISO-8601 strings so dates compare
    as strings everywhere else.
    """
    if not isinstance(frontmatter, dict):
        return {}
    return {str(key): _convert_date(value) for key, value in frontmatter.items()}


def validate_content(content: Any) -> bool:
    if not isinstance(content, str):
        raise InvalidInputError("Content must be a string")
    return True


def _convert_date(value):
    if isinstance(value, datetime.datetime):
        # sitemaps need a zone once a time is present; naive means UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=datetime.timezone.utc)
        return value.isoformat()
    if isinstance(value, datetime.date):
        return value.isoformat()
    return value
