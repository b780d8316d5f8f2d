from typing import Any, List, Mapping, Optional
from xml.sax.saxutils import escape

from mdblog.services.frontmatter_fields import (
    get_string_list_field,
    is_non_empty_string,
    resolve_string,
)

XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_xml(unsafe: Any) -> str:
    """Escape ``& < > " '`` for XML text and attribute positions."""
    return escape("" if unsafe is None else str(unsafe), XML_ENTITIES)


def normalize_keywords(keywords: Any) -> List[str]:
    """Accept a comma-separated string or a list of strings."""
    if not keywords:
        return []
    if isinstance(keywords, (list, tuple)):
        return [k for k in keywords if is_non_empty_string(k)]
    if isinstance(keywords, str):
        return [k.strip() for k in keywords.split(",") if k.strip()]
    return []


def merge_keywords(frontmatter: Mapping[str, Any]) -> List[str]:
    merged: List[str] = []
    for keyword in get_string_list_field(frontmatter, "tags") + normalize_keywords(
        frontmatter.get("keywords")
    ):
        if keyword not in merged:
            merged.append(keyword)
    return merged


def build_robots_meta(frontmatter: Mapping[str, Any]) -> Optional[str]:
    """
    Robots directive for a post.

    True ``noindex``/``nofollow`` flags replace the ``robots`` string
    entirely; otherwise the string passes through unchanged.
    """
    noindex = frontmatter.get("noindex") is True
    nofollow = frontmatter.get("nofollow") is True

    if noindex or nofollow:
        directives = []
        if noindex:
            directives.append("noindex")
        if nofollow:
            directives.append("nofollow")
        return ", ".join(directives)

    robots = frontmatter.get("robots")
    return robots if is_non_empty_string(robots) else None


def resolve_canonical_url(url: str, site_url: str) -> str:
    if url.startswith(("http://", "https://")):
        return url
    base = site_url.rstrip("/")
    if url.startswith("/"):
        return f"{base}{url}"
    return f"{base}/{url}"


def resolve_post_url(canonical_url: Optional[str], slug: str, site_url: str) -> str:
    url = canonical_url or f"{site_url}/blog/{slug}"
    return resolve_canonical_url(url, site_url) if site_url else url


def resolve_title(frontmatter: Mapping[str, Any], slug: str) -> str:
    return resolve_string(["seoTitle", "title"], frontmatter, slug)


def resolve_description(frontmatter: Mapping[str, Any]) -> str:
    return resolve_string(["seoDescription", "description", "excerpt"], frontmatter, "")


def resolve_post_url_for(frontmatter: Mapping[str, Any], slug: str, site_url: str) -> str:
    return resolve_post_url(resolve_string(["canonicalUrl"], frontmatter), slug, site_url)
