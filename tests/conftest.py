import textwrap

import pytest

from mdblog.schemas.blog import Author, BlogConfig, Post


def write_post(directory, filename: str, raw: str):
    """Write a dedented markdown file, creating ``directory`` if needed."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


def make_post(slug="test-post", content="Hello world", authors=None, **frontmatter):
    return Post(
        slug=slug,
        content=content,
        frontmatter=frontmatter,
        readingTime=1,
        wordCount=len(content.split()),
        authors=authors or [],
    )


JOHN = Author(
    name="John Doe",
    email="john@example.com",
    bio="Software developer and blogger",
    avatar="/john.jpg",
    twitter="@johndoe",
    github="johndoe",
    url="https://johndoe.example.com",
)
JANE = Author(name="Jane Smith", email="jane@example.com", twitter="janesmith")


@pytest.fixture
def roster():
    return [JOHN, JANE]


@pytest.fixture
def config(roster):
    return BlogConfig(
        siteName="Test Blog",
        siteUrl="https://example.com",
        defaultAuthor="Blog Author",
        authors=roster,
        twitterHandle="@example",
        defaultLang="en",
    )


@pytest.fixture
def posts_dir(tmp_path):
    return tmp_path / "posts"


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self.requested = []

    def list_posts(self):
        return self._list_posts_return

    def list_slugs(self):
        return [p.slug for p in self._list_posts_return]

    def get_post(self, slug: str):
        self.requested.append(slug)
        if isinstance(self._get_post_return, dict):
            return self._get_post_return.get(slug)
        return self._get_post_return
