import re
from pathlib import Path
from typing import List, Optional

from mdblog.exceptions import DirectoryError, FileReadError
from mdblog.settings import settings

MARKDOWN_EXTENSION = ".md"
MDX_EXTENSION = ".mdx"
SUPPORTED_EXTENSIONS = (MARKDOWN_EXTENSION, MDX_EXTENSION)
MARKDOWN_FILE_PATTERN = re.compile(r"\.(md|mdx)$")


def get_posts_directory(posts_dir: Optional[str] = None, locale: Optional[str] = None) -> Path:
    """Resolve the posts folder against the CWD, with an optional locale segment."""
    base = Path.cwd() / (posts_dir or settings.POSTS_DIR)
    return base / locale if locale else base


def slug_from_filename(filename: str) -> str:
    return MARKDOWN_FILE_PATTERN.sub("", filename)


class FilesystemPostsRepo:
    def __init__(self, posts_dir: Path):
        self.posts_dir = Path(posts_dir)

    def list_post_files(self) -> List[str]:
        """Markdown/MDX filenames in the posts folder; a missing folder is empty."""
        try:
            if not self.posts_dir.is_dir():
                return []
            names = [entry.name for entry in self.posts_dir.iterdir()]
        except OSError as e:
            raise DirectoryError(str(self.posts_dir), e, operation="list_post_files")
        return sorted(name for name in names if MARKDOWN_FILE_PATTERN.search(name))

    def find_post_file(self, slug: str) -> Optional[Path]:
        for ext in SUPPORTED_EXTENSIONS:
            path = self.posts_dir / f"{slug}{ext}"
            try:
                if path.is_file():
                    return path
            except OSError as e:
                raise FileReadError(str(path), e, operation="find_post_file", slug=slug)
        return None

    def read_file(self, path: Path, slug: Optional[str] = None) -> Optional[str]:
        """File text, or None when nothing readable exists at ``path``."""
        try:
            if not path.is_file():
                return None
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(str(path), e, operation="read_file", slug=slug)
