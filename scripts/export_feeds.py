import argparse
import logging
from pathlib import Path

from mdblog.config import get_default_config
from mdblog.services.posts_service import get_post, list_posts
from mdblog.services.seo_feeds import RSS_POST_LIMIT, generate_rss_feed, generate_sitemap

logger = logging.getLogger(__name__)


def export_feeds(output_dir: Path, posts_dir=None, locale=None) -> None:
    config = get_default_config()
    listed = list_posts(posts_dir=posts_dir, locale=locale, config=config)
    full_posts = [
        get_post(meta.slug, posts_dir=posts_dir, locale=locale, config=config)
        for meta in listed[:RSS_POST_LIMIT]
    ]

    output_dir.mkdir(parents=True, exist_ok=True)
    (output_dir / "sitemap.xml").write_text(generate_sitemap(listed, config), encoding="utf-8")
    (output_dir / "feed.xml").write_text(
        generate_rss_feed([p for p in full_posts if p is not None], config),
        encoding="utf-8",
    )
    logger.info(f"Wrote sitemap and feed for {len(listed)} posts to {output_dir}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description="Write sitemap.xml and feed.xml")
    parser.add_argument("output_dir", type=Path)
    parser.add_argument("--posts-dir", default=None)
    parser.add_argument("--locale", default=None)
    args = parser.parse_args()
    try:
        export_feeds(args.output_dir, args.posts_dir, args.locale)
    except Exception as e:
        logger.error(f"Export failed: {e}", exc_info=True)
        raise SystemExit(1)
