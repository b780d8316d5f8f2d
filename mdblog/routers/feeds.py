import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from mdblog import dependencies as deps
from mdblog.schemas.blog import BlogConfig
from mdblog.services.posts_service import PostsService
from mdblog.services.seo_feeds import RSS_POST_LIMIT, generate_rss_feed, generate_sitemap

logger = logging.getLogger(__name__)

router = APIRouter()
CACHE_CONTROL = "public, s-maxage=3600, stale-while-revalidate"


@router.get("/sitemap.xml")
def sitemap(
    service: PostsService = Depends(deps.get_posts_service),
    config: BlogConfig = Depends(deps.get_blog_config),
):
    try:
        xml = generate_sitemap(service.list_posts(), config)
    except Exception as e:
        logger.error(f"Failed to build sitemap: {e}")
        raise HTTPException(status_code=500, detail="Failed to build sitemap")
    return Response(
        content=xml,
        media_type="application/xml",
        headers={"Cache-Control": CACHE_CONTROL},
    )


@router.get("/feed.xml")
def feed(
    service: PostsService = Depends(deps.get_posts_service),
    config: BlogConfig = Depends(deps.get_blog_config),
):
    try:
        listed = service.list_posts()[:RSS_POST_LIMIT]
        posts = [service.get_post(meta.slug) for meta in listed]
        xml = generate_rss_feed([p for p in posts if p is not None], config)
    except Exception as e:
        logger.error(f"Failed to build RSS feed: {e}")
        raise HTTPException(status_code=500, detail="Failed to build feed")
    return Response(
        content=xml,
        media_type="application/rss+xml",
        headers={"Cache-Control": CACHE_CONTROL},
    )
