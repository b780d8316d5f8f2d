import pytest
from fastapi import HTTPException

from mdblog.dependencies import get_blog_config, get_posts_service
from mdblog.repos.posts_repo import FilesystemPostsRepo
from mdblog.schemas.blog import BlogConfig
from mdblog.services.posts_service import PostsService


def test_get_blog_config_builds_config():
    assert isinstance(get_blog_config(), BlogConfig)


def test_get_posts_service_constructs_service(config):
    svc = get_posts_service(locale=None, config=config)

    assert isinstance(svc, PostsService)
    assert isinstance(svc.repo, FilesystemPostsRepo)
    assert svc.config is config


def test_get_posts_service_uses_locale_folder(config):
    svc = get_posts_service(locale="FR", config=config)
    assert svc.repo.posts_dir.name == "fr"


def test_get_posts_service_rejects_bad_locale(config):
    with pytest.raises(HTTPException) as exc_info:
        get_posts_service(locale="../etc", config=config)
    assert exc_info.value.status_code == 400
