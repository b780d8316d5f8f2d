import datetime
import logging
from email.utils import format_datetime, parsedate_to_datetime
from typing import Optional, Sequence, Union

from mdblog.config import resolve_config
from mdblog.schemas.blog import BlogConfig, Post, PostMetadata
from mdblog.services.authors import get_author_name
from mdblog.services.frontmatter_fields import resolve_field, resolve_string
from mdblog.services.seo_utils import escape_xml, resolve_post_url_for

logger = logging.getLogger(__name__)

RSS_POST_LIMIT = 20
SITEMAP_CHANGEFREQ = "monthly"
SITEMAP_PRIORITY = "0.8"


def _now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def _to_datetime(value) -> Optional[datetime.datetime]:
    if isinstance(value, datetime.datetime):
        parsed = value
    elif isinstance(value, datetime.date):
        parsed = datetime.datetime.combine(value, datetime.time())
    elif isinstance(value, str):
        try:
            parsed = datetime.datetime.fromisoformat(value.strip())
        except ValueError:
            try:
                parsed = parsedate_to_datetime(value)
            except (TypeError, ValueError):
                return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed.astimezone(datetime.timezone.utc)


def format_rfc822(value=None) -> str:
    """RFC-822 date in GMT, e.g. ``Mon, 01 Jan 2024 00:00:00 GMT``."""
    parsed = _to_datetime(value) if value is not None else None
    if parsed is None:
        if value is not None:
            logger.warning(f"Unparsable feed date {value!r}, using current time")
        parsed = _now()
    return format_datetime(parsed, usegmt=True)


def generate_sitemap(
    posts: Sequence[Union[Post, PostMetadata]], config: Optional[BlogConfig] = None
) -> str:
    cfg = resolve_config(config)
    today = _now().date().isoformat()

    entries = []
    for post in posts:
        lastmod = resolve_string(["modifiedDate", "date"], post.frontmatter, today)
        url = f"{cfg.siteUrl}/blog/{post.slug}"
        entries.append(
            f"""  <url>
    <loc>{escape_xml(url)}</loc>
    <lastmod>{escape_xml(lastmod)}</lastmod>
    <changefreq>{SITEMAP_CHANGEFREQ}</changefreq>
    <priority>{SITEMAP_PRIORITY}</priority>
  </url>"""
        )

    urls = "\n".join(entries)
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
{urls}
</urlset>"""


def _rss_item(post: Post, cfg: BlogConfig) -> str:
    fm = post.frontmatter
    title = resolve_string(["title"], fm, post.slug)
    description = resolve_string(["description", "excerpt"], fm, "")
    author = get_author_name(post.authors[0]) if post.authors else (cfg.defaultAuthor or "")
    url = resolve_post_url_for(fm, post.slug, cfg.siteUrl)
    pub_date = format_rfc822(resolve_field(["publishedDate", "date"], fm))

    return f"""    <item>
      <title>{escape_xml(title)}</title>
      <link>{escape_xml(url)}</link>
      <guid isPermaLink="true">{escape_xml(url)}</guid>
      <description>{escape_xml(description)}</description>
      <author>{escape_xml(author)}</author>
      <pubDate>{pub_date}</pubDate>
    </item>"""


def generate_rss_feed(
    posts: Sequence[Union[Post, PostMetadata]], config: Optional[BlogConfig] = None
) -> str:
    """
    RSS 2.0 feed of the first 20 posts.

    Posts are taken in the order given; callers pass them newest first.
    """
    cfg = resolve_config(config)
    site_name = escape_xml(cfg.siteName)
    site_url = escape_xml(cfg.siteUrl)
    items = "\n".join(_rss_item(post, cfg) for post in list(posts)[:RSS_POST_LIMIT])

    return f"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">
  <channel>
    <title>{site_name}</title>
    <link>{site_url}</link>
    <description>Latest blog posts from {site_name}</description>
    <language>en</language>
    <lastBuildDate>{format_rfc822()}</lastBuildDate>
    <atom:link href="{site_url}/feed.xml" rel="self" type="application/rss+xml"/>
{items}
  </channel>
</rss>"""
