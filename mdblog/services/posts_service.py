import logging
import math
from typing import Callable, List, Optional

import frontmatter

from mdblog.config import resolve_config
from mdblog.exceptions import BlogPostNotFoundError, DirectoryError, FileReadError
from mdblog.repos.posts_repo import (
    FilesystemPostsRepo,
    get_posts_directory,
    slug_from_filename,
)
from mdblog.schemas.blog import BlogConfig, Post, PostMetadata, SkippedFile
from mdblog.services.authors import normalize_authors
from mdblog.services.frontmatter_fields import get_number_field
from mdblog.utils import calculate_reading_time, calculate_word_count
from mdblog.validation import (
    validate_content,
    validate_frontmatter,
    validate_locale,
    validate_path,
    validate_slug,
)

logger = logging.getLogger(__name__)

SkipHandler = Callable[[SkippedFile], None]


class PostsService:
    def __init__(
        self,
        repo: FilesystemPostsRepo,
        config: BlogConfig,
        on_skip: Optional[SkipHandler] = None,
    ):
        self.repo = repo
        self.config = config
        self.on_skip = on_skip

    def list_posts(self) -> List[PostMetadata]:
        """Frontmatter of every post, newest ``date`` first."""
        try:
            filenames = self.repo.list_post_files()
        except DirectoryError as e:
            # A broken posts folder should not take the whole site down
            logger.warning(f"Returning no posts: {e}")
            return []

        posts = []
        for filename in filenames:
            path = self.repo.posts_dir / filename
            try:
                slug = slug_from_filename(filename)
                validate_slug(slug)
                markdown = self.repo.read_file(path)
                if markdown is None:
                    continue
                posts.append(parse_post_metadata(markdown, slug, self.config))
            except Exception as e:
                self._skip(filename, str(path), e)

        posts.sort(key=lambda p: _date_key(p.frontmatter), reverse=True)
        return posts

    def list_slugs(self) -> List[str]:
        return [post.slug for post in self.list_posts()]

    def load_post(self, slug: str) -> Post:
        """Read one post; raises ``BlogPostNotFoundError`` when no file matches."""
        validate_slug(slug)
        path = self.repo.find_post_file(slug)
        if path is None:
            raise BlogPostNotFoundError(slug)

        markdown = self.repo.read_file(path, slug=slug)
        if markdown is None:
            raise BlogPostNotFoundError(slug)

        try:
            return parse_post(markdown, slug, self.config)
        except Exception as e:
            raise FileReadError(str(path), e, operation="parse_post", slug=slug) from e

    def get_post(self, slug: str) -> Optional[Post]:
        try:
            return self.load_post(slug)
        except BlogPostNotFoundError:
            return None

    def _skip(self, filename: str, path: str, error: Exception) -> None:
        logger.warning(f"Skipping file {filename}: {error}")
        if self.on_skip is not None:
            self.on_skip(SkippedFile(filename=filename, path=path, reason=str(error)))


def parse_post(markdown: str, slug: str, config: BlogConfig) -> Post:
    parsed = frontmatter.loads(markdown)
    validate_content(parsed.content)
    metadata = validate_frontmatter(parsed.metadata)
    content = parsed.content.strip()

    # An explicit readingTime wins; word count is always measured
    explicit = get_number_field(metadata, "readingTime")
    if explicit is not None and explicit > 0:
        reading_time = math.ceil(explicit)
    else:
        reading_time = calculate_reading_time(content)

    return Post(
        slug=slug,
        content=content,
        frontmatter=metadata,
        readingTime=reading_time,
        wordCount=calculate_word_count(content),
        authors=_authors(metadata, config),
    )


def parse_post_metadata(markdown: str, slug: str, config: BlogConfig) -> PostMetadata:
    parsed = frontmatter.loads(markdown)
    metadata = validate_frontmatter(parsed.metadata)
    return PostMetadata(slug=slug, frontmatter=metadata, authors=_authors(metadata, config))


def _authors(metadata: dict, config: BlogConfig):
    return normalize_authors(
        metadata.get("author"), metadata.get("authors"), config.authors
    )


def _date_key(metadata: dict) -> str:
    value = metadata.get("date")
    return "" if value is None else str(value)


def build_posts_service(
    posts_dir: Optional[str] = None,
    locale: Optional[str] = None,
    config: Optional[BlogConfig] = None,
    on_skip: Optional[SkipHandler] = None,
) -> PostsService:
    if posts_dir is not None:
        posts_dir = validate_path(posts_dir)
    if locale is not None:
        locale = validate_locale(locale)
    repo = FilesystemPostsRepo(get_posts_directory(posts_dir, locale))
    return PostsService(repo=repo, config=resolve_config(config), on_skip=on_skip)


def get_post(
    slug: str,
    posts_dir: Optional[str] = None,
    locale: Optional[str] = None,
    config: Optional[BlogConfig] = None,
) -> Optional[Post]:
    """
    Load the post stored as ``{slug}.md`` or ``{slug}.mdx``.

    Returns None when neither file exists. Raises ``InvalidInputError`` for
    an unsafe slug or locale and ``FileReadError`` when the file exists but
    cannot be read or parsed.
    """
    validate_slug(slug)
    return build_posts_service(posts_dir, locale, config).get_post(slug)


def list_posts(
    posts_dir: Optional[str] = None,
    locale: Optional[str] = None,
    config: Optional[BlogConfig] = None,
    on_skip: Optional[SkipHandler] = None,
) -> List[PostMetadata]:
    return build_posts_service(posts_dir, locale, config, on_skip).list_posts()


def list_slugs(
    posts_dir: Optional[str] = None,
    locale: Optional[str] = None,
    config: Optional[BlogConfig] = None,
) -> List[str]:
    return build_posts_service(posts_dir, locale, config).list_slugs()
