from typing import Optional

from fastapi import Depends, HTTPException

from mdblog.config import get_default_config
from mdblog.exceptions import InvalidInputError
from mdblog.schemas.blog import BlogConfig
from mdblog.services.posts_service import PostsService, build_posts_service


def get_blog_config() -> BlogConfig:
    return get_default_config()


def get_posts_service(
    locale: Optional[str] = None,
    config: BlogConfig = Depends(get_blog_config),
) -> PostsService:
    try:
        return build_posts_service(locale=locale, config=config)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.message)
