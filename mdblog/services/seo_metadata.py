from typing import Dict, List, Optional, Sequence, Union

from mdblog.config import resolve_config
from mdblog.schemas.blog import Author, AuthorRef, BlogConfig, Post, PostMetadata
from mdblog.schemas.seo import (
    Alternates,
    Metadata,
    MetadataAuthor,
    OpenGraph,
    OpenGraphImage,
    TwitterCard,
)
from mdblog.services.authors import (
    authors_for_post,
    get_author_names,
    select_twitter_creator,
)
from mdblog.services.frontmatter_fields import get_string_list_field, resolve_string
from mdblog.services.seo_utils import (
    build_robots_meta,
    merge_keywords,
    resolve_description,
    resolve_post_url_for,
    resolve_title,
)

OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630


def _indexed(key: str, index: int) -> str:
    # first entry uses the bare key, then key2, key3, ...
    return key if index == 0 else f"{key}{index + 1}"


def _article_meta(
    fm: dict, tags: List[str], authors: Sequence[AuthorRef]
) -> Dict[str, str]:
    meta: Dict[str, str] = {}
    published = resolve_string(["publishedDate", "date"], fm)
    modified = resolve_string(["modifiedDate"], fm)
    category = resolve_string(["category"], fm)
    if published:
        meta["article:published_time"] = published
    if modified:
        meta["article:modified_time"] = modified
    if category:
        meta["article:section"] = category
    for i, tag in enumerate(tags):
        meta[_indexed("article:tag", i)] = tag
    for i, name in enumerate(get_author_names(authors)):
        meta[_indexed("article:author", i)] = name
    for i, author in enumerate(authors):
        if isinstance(author, Author):
            if author.email:
                meta[_indexed("author:email", i)] = author.email
            if author.url:
                meta[_indexed("author:url", i)] = author.url
    return meta


def _metadata_author(author: AuthorRef) -> MetadataAuthor:
    if isinstance(author, str):
        return MetadataAuthor(name=author)
    return MetadataAuthor(name=author.name, email=author.email, url=author.url)


def generate_post_metadata(post: Post, config: Optional[BlogConfig] = None) -> Metadata:
    """Page metadata (title, OpenGraph, Twitter card, robots, ...) for one post."""
    cfg = resolve_config(config)
    fm = post.frontmatter
    site_url = cfg.siteUrl

    title = resolve_title(fm, post.slug)
    description = resolve_description(fm)
    og_title = resolve_string(["ogTitle"], fm, title)
    og_description = resolve_string(["ogDescription"], fm, description)
    twitter_title = resolve_string(["twitterTitle"], fm, og_title)
    twitter_description = resolve_string(["twitterDescription"], fm, og_description)

    authors = authors_for_post(post.authors, cfg.defaultAuthor, cfg.authors)
    author_names = get_author_names(authors)

    published = resolve_string(["publishedDate", "date"], fm)
    modified = resolve_string(["modifiedDate"], fm)
    tags = get_string_list_field(fm, "tags")
    keywords = merge_keywords(fm)

    image_url = resolve_string(["ogImage", "image"], fm, cfg.defaultOgImage)
    image_alt = resolve_string(["imageAlt"], fm, title)
    lang = resolve_string(["lang"], fm, cfg.defaultLang)

    canonical = resolve_post_url_for(fm, post.slug, site_url)
    other: Dict[str, str] = {}
    if lang:
        other["lang"] = lang
    other.update(_article_meta(fm, tags, authors))

    return Metadata(
        title=f"{title} | {cfg.siteName}",
        description=description,
        alternates=Alternates(
            canonical=canonical,
            languages=dict(cfg.alternateLanguages) or None,
        ),
        robots=build_robots_meta(fm),
        other=other or None,
        openGraph=OpenGraph(
            title=og_title,
            description=og_description,
            type="article",
            url=f"{site_url}/blog/{post.slug}",
            siteName=cfg.siteName,
            images=[
                OpenGraphImage(
                    url=image_url,
                    width=OG_IMAGE_WIDTH,
                    height=OG_IMAGE_HEIGHT,
                    alt=image_alt,
                )
            ]
            if image_url
            else None,
            publishedTime=published,
            modifiedTime=modified,
            authors=author_names or None,
            tags=tags or None,
            locale=lang,
        ),
        twitter=TwitterCard(
            card="summary_large_image",
            title=twitter_title,
            description=twitter_description,
            images=[image_url] if image_url else None,
            creator=select_twitter_creator(authors, cfg.twitterHandle),
        ),
        keywords=keywords or None,
        authors=[_metadata_author(a) for a in authors] or None,
    )


def generate_list_metadata(
    posts: Sequence[Union[Post, PostMetadata]], config: Optional[BlogConfig] = None
) -> Metadata:
    cfg = resolve_config(config)
    title = "Blog Posts"
    description = f"Browse all {len(posts)} blog posts"
    return Metadata(
        title=f"{title} | {cfg.siteName}",
        description=description,
        openGraph=OpenGraph(
            title=title,
            description=description,
            type="website",
            url=f"{cfg.siteUrl}/blogs",
            siteName=cfg.siteName,
        ),
        twitter=TwitterCard(card="summary", title=title, description=description),
    )
