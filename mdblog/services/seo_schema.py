import json
import math
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from mdblog.config import resolve_config
from mdblog.schemas.blog import AuthorRef, BlogConfig, Breadcrumb, Post
from mdblog.services.authors import authors_for_post
from mdblog.services.frontmatter_fields import (
    get_number_field,
    get_string_list_field,
    resolve_string,
)
from mdblog.services.seo_utils import (
    resolve_description,
    resolve_post_url_for,
    resolve_title,
)
from mdblog.utils import calculate_reading_time, calculate_word_count

SCHEMA_CONTEXT = "https://schema.org"

BreadcrumbInput = Union[Breadcrumb, Mapping[str, str]]


def _person(author: AuthorRef) -> Dict[str, Any]:
    if isinstance(author, str):
        return {"@type": "Person", "name": author}
    person: Dict[str, Any] = {"@type": "Person", "name": author.name}
    if author.email:
        person["email"] = author.email
    if author.url:
        person["url"] = author.url
    if author.avatar:
        person["image"] = author.avatar
    return person


def _metrics(post: Post) -> tuple:
    content = getattr(post, "content", "")
    explicit = get_number_field(post.frontmatter, "readingTime")
    if explicit is not None and explicit > 0:
        reading_time = math.ceil(explicit)
    else:
        reading_time = getattr(post, "readingTime", 0) or calculate_reading_time(content)
    word_count = getattr(post, "wordCount", 0) or calculate_word_count(content)
    return reading_time, word_count


def generate_post_schema(post: Post, config: Optional[BlogConfig] = None) -> Dict[str, Any]:
    """
    Schema.org Article JSON-LD for a post.

    ``author`` is a single Person for one author and a list for several. A
    mapping under the frontmatter ``schema`` key overrides computed fields.
    """
    cfg = resolve_config(config)
    fm = post.frontmatter
    url = resolve_post_url_for(fm, post.slug, cfg.siteUrl)
    authors = authors_for_post(post.authors, cfg.defaultAuthor, cfg.authors)
    published = resolve_string(["publishedDate", "date"], fm)
    modified = resolve_string(["modifiedDate"], fm, published)
    image_url = resolve_string(["ogImage", "image"], fm)
    image_alt = resolve_string(["imageAlt"], fm)
    category = resolve_string(["category"], fm)
    lang = resolve_string(["lang"], fm)
    tags = get_string_list_field(fm, "tags")
    reading_time, word_count = _metrics(post)

    schema: Dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": resolve_string(["type"], fm, "BlogPosting"),
        "headline": resolve_title(fm, post.slug),
        "description": resolve_description(fm),
        "url": url,
        "mainEntityOfPage": {"@type": "WebPage", "@id": url},
    }
    if published:
        schema["datePublished"] = published
    if modified:
        schema["dateModified"] = modified
    if authors:
        people = [_person(a) for a in authors]
        schema["author"] = people[0] if len(people) == 1 else people
    if cfg.siteName:
        publisher: Dict[str, Any] = {"@type": "Organization", "name": cfg.siteName}
        if cfg.siteUrl:
            publisher["url"] = cfg.siteUrl
        schema["publisher"] = publisher
    if image_url:
        image: Dict[str, Any] = {"@type": "ImageObject", "url": image_url}
        if image_alt:
            image["caption"] = image_alt
        schema["image"] = image
    if category:
        schema["articleSection"] = category
    if tags:
        schema["keywords"] = ", ".join(tags)
    if lang:
        schema["inLanguage"] = lang
    if word_count > 0:
        schema["wordCount"] = word_count
    if reading_time > 0:
        schema["timeRequired"] = f"PT{reading_time}M"

    custom = fm.get("schema")
    if isinstance(custom, Mapping):
        schema.update(custom)
    return schema


def _crumb(item: BreadcrumbInput) -> Breadcrumb:
    return item if isinstance(item, Breadcrumb) else Breadcrumb(**item)


def generate_breadcrumbs_schema(
    post: Post,
    config: Optional[BlogConfig] = None,
    breadcrumbs: Optional[Sequence[BreadcrumbInput]] = None,
) -> Dict[str, Any]:
    """BreadcrumbList JSON-LD; defaults to Home > Blog > post."""
    cfg = resolve_config(config)
    site_url = cfg.siteUrl

    if breadcrumbs is not None:
        items: List[Breadcrumb] = [_crumb(item) for item in breadcrumbs]
    else:
        items = [
            Breadcrumb(name="Home", url=site_url or "/"),
            Breadcrumb(name="Blog", url=f"{site_url}/blogs"),
            Breadcrumb(
                name=resolve_title(post.frontmatter, post.slug),
                url=resolve_post_url_for(post.frontmatter, post.slug, site_url),
            ),
        ]

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {"@type": "ListItem", "position": i, "name": item.name, "item": item.url}
            for i, item in enumerate(items, start=1)
        ],
    }


def _json_for_script(data: Dict[str, Any]) -> str:
    # keep "</script>" and friends out of the inline payload
    return (
        json.dumps(data, ensure_ascii=False, default=str)
        .replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
    )


def render_json_ld_scripts(
    post: Post,
    config: Optional[BlogConfig] = None,
    breadcrumbs: Optional[Sequence[BreadcrumbInput]] = None,
    include_breadcrumbs: bool = True,
) -> str:
    """``<script type="application/ld+json">`` tags for embedding in a page head."""
    cfg = resolve_config(config)
    payloads = [generate_post_schema(post, cfg)]
    if include_breadcrumbs:
        payloads.append(generate_breadcrumbs_schema(post, cfg, breadcrumbs))
    return "\n".join(
        f'<script type="application/ld+json">{_json_for_script(p)}</script>'
        for p in payloads
    )
