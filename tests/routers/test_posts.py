from fastapi import FastAPI
from fastapi.testclient import TestClient

from mdblog import dependencies as deps
from mdblog.exceptions import FileReadError, InvalidInputError
from mdblog.routers import posts
from tests.conftest import JOHN, FakePostsService, make_post


def make_app(fake_service, config):
    app = FastAPI()
    app.dependency_overrides[deps.get_posts_service] = lambda: fake_service
    app.dependency_overrides[deps.get_blog_config] = lambda: config
    app.include_router(posts.router)
    return app


class RaisingPostsService(FakePostsService):
    def __init__(self, error):
        super().__init__()
        self.error = error

    def list_posts(self):
        raise self.error

    def get_post(self, slug: str):
        raise self.error


def test_list_posts_returns_metadata(config):
    listed = [
        make_post(slug="newer", title="Newer", date="2024-01-02"),
        make_post(slug="older", title="Older", date="2024-01-01"),
    ]
    client = TestClient(make_app(FakePostsService(list_posts_return=listed), config))

    res = client.get("/posts")

    assert res.status_code == 200
    body = res.json()
    assert [p["slug"] for p in body] == ["newer", "older"]
    assert body[0]["frontmatter"] == {"title": "Newer", "date": "2024-01-02"}


def test_list_slugs(config):
    listed = [make_post(slug="a"), make_post(slug="b")]
    client = TestClient(make_app(FakePostsService(list_posts_return=listed), config))

    res = client.get("/posts/slugs")

    assert res.status_code == 200
    assert res.json() == ["a", "b"]


def test_list_posts_unexpected_error_returns_500(config):
    client = TestClient(make_app(RaisingPostsService(RuntimeError("boom")), config))

    res = client.get("/posts")

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to retrieve posts"


def test_get_post_returns_post(config):
    post = make_post(slug="hello", title="Hello", content="Body text", authors=[JOHN])
    fake = FakePostsService(get_post_return={"hello": post})
    client = TestClient(make_app(fake, config))

    res = client.get("/posts/hello")

    assert res.status_code == 200
    body = res.json()
    assert body["slug"] == "hello"
    assert body["content"] == "Body text"
    assert body["wordCount"] == 2
    assert body["authors"][0]["name"] == "John Doe"
    assert fake.requested == ["hello"]


def test_get_post_missing_returns_404(config):
    client = TestClient(make_app(FakePostsService(get_post_return={}), config))

    res = client.get("/posts/missing")

    assert res.status_code == 404
    assert res.json()["detail"] == "Post not found"


def test_get_post_invalid_slug_returns_400(config):
    error = InvalidInputError("Slug cannot contain null bytes")
    client = TestClient(make_app(RaisingPostsService(error), config))

    res = client.get("/posts/bad")

    assert res.status_code == 400
    assert res.json()["detail"] == "Slug cannot contain null bytes"


def test_get_post_read_error_returns_500(config):
    error = FileReadError("posts/bad.md", OSError("denied"), operation="read_file")
    client = TestClient(make_app(RaisingPostsService(error), config))

    res = client.get("/posts/bad")

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to read post"


def test_get_post_unexpected_error_returns_500(config):
    client = TestClient(make_app(RaisingPostsService(RuntimeError("boom")), config))

    res = client.get("/posts/bad")

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to retrieve post"


def test_get_post_metadata(config):
    post = make_post(slug="hello", title="Hello", description="Desc")
    client = TestClient(make_app(FakePostsService(get_post_return=post), config))

    res = client.get("/posts/hello/metadata")

    assert res.status_code == 200
    body = res.json()
    assert body["title"] == "Hello | Test Blog"
    assert body["openGraph"]["url"] == "https://example.com/blog/hello"
    assert "robots" not in body


def test_get_post_metadata_missing_returns_404(config):
    client = TestClient(make_app(FakePostsService(), config))

    assert client.get("/posts/nope/metadata").status_code == 404


def test_get_post_schema(config):
    post = make_post(slug="hello", title="Hello")
    client = TestClient(make_app(FakePostsService(get_post_return=post), config))

    res = client.get("/posts/hello/schema")

    assert res.status_code == 200
    body = res.json()
    assert body["article"]["headline"] == "Hello"
    assert body["breadcrumbs"]["itemListElement"][2]["item"] == "https://example.com/blog/hello"


def test_list_metadata(config):
    listed = [make_post(slug="a"), make_post(slug="b"), make_post(slug="c")]
    client = TestClient(make_app(FakePostsService(list_posts_return=listed), config))

    res = client.get("/blogs/metadata")

    assert res.status_code == 200
    assert res.json()["description"] == "Browse all 3 blog posts"
