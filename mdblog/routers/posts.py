import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException

from mdblog import dependencies as deps
from mdblog.exceptions import FileReadError, InvalidInputError
from mdblog.schemas.blog import BlogConfig, Post, PostMetadata
from mdblog.services.posts_service import PostsService
from mdblog.services.seo_metadata import generate_list_metadata, generate_post_metadata
from mdblog.services.seo_schema import generate_breadcrumbs_schema, generate_post_schema

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostMetadata])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts metadata, newest first."""
    try:
        return service.list_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/slugs", response_model=List[str])
def list_slugs(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return service.list_slugs()
    except Exception as e:
        logger.error(f"Unexpected error listing slugs: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=Post)
def get_post(slug: str, service: PostsService = Depends(deps.get_posts_service)):
    """Get a single post by slug."""
    return _load_post(service, slug)


@router.get("/posts/{slug}/metadata")
def get_post_metadata(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
    config: BlogConfig = Depends(deps.get_blog_config),
) -> Dict[str, Any]:
    post = _load_post(service, slug)
    return generate_post_metadata(post, config).to_dict()


@router.get("/posts/{slug}/schema")
def get_post_schema(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
    config: BlogConfig = Depends(deps.get_blog_config),
) -> Dict[str, Any]:
    post = _load_post(service, slug)
    return {
        "article": generate_post_schema(post, config),
        "breadcrumbs": generate_breadcrumbs_schema(post, config),
    }


@router.get("/blogs/metadata")
def get_list_metadata(
    service: PostsService = Depends(deps.get_posts_service),
    config: BlogConfig = Depends(deps.get_blog_config),
) -> Dict[str, Any]:
    return generate_list_metadata(service.list_posts(), config).to_dict()


def _load_post(service: PostsService, slug: str) -> Post:
    try:
        post = service.get_post(slug)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except FileReadError as e:
        logger.error(f"Failed to read post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to read post")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return post
