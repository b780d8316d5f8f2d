"""Error taxonomy for the blog content engine.

Every error carries a machine-readable ``kind`` so callers can branch on it
without inspecting the class hierarchy, plus a ``context`` dict describing
the operation that failed.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "BLOG_POST_NOT_FOUND"
    READ_ERROR = "FILE_READ_ERROR"
    DIRECTORY_ERROR = "DIRECTORY_ERROR"


class MdBlogError(Exception):
    """Base exception for all mdblog errors."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.context = context or {}
        self.cause = cause

    @property
    def code(self) -> str:
        return self.kind.value


class InvalidInputError(MdBlogError, ValueError):
    """Raised for a bad slug, path or locale, before any I/O happens."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorKind.INVALID_INPUT, context)


class BlogPostNotFoundError(MdBlogError):
    def __init__(self, slug: str):
        super().__init__(
            f'Blog post with slug "{slug}" not found',
            ErrorKind.NOT_FOUND,
            {"slug": slug},
        )
        self.slug = slug


def _describe(operation: Optional[str], cause: Optional[BaseException]) -> str:
    during = f" during {operation}" if operation else ""
    reason = str(cause) if cause is not None and str(cause) else "Unknown error"
    return f"{during}: {reason}"


class FileReadError(MdBlogError):
    """Raised when a file exists but cannot be read or parsed."""

    def __init__(
        self,
        file_path: str,
        cause: Optional[BaseException] = None,
        operation: Optional[str] = None,
        slug: Optional[str] = None,
    ):
        context: Dict[str, Any] = {"path": file_path}
        if operation:
            context["operation"] = operation
        if slug:
            context["slug"] = slug
        super().__init__(
            f'Failed to read file at "{file_path}"{_describe(operation, cause)}',
            ErrorKind.READ_ERROR,
            context,
            cause,
        )
        self.file_path = file_path


class DirectoryError(MdBlogError):
    """Raised when a directory exists but cannot be listed."""

    def __init__(
        self,
        directory_path: str,
        cause: Optional[BaseException] = None,
        operation: Optional[str] = None,
    ):
        context: Dict[str, Any] = {"path": directory_path}
        if operation:
            context["operation"] = operation
        super().__init__(
            f'Directory operation failed for "{directory_path}"'
            f"{_describe(operation, cause)}",
            ErrorKind.DIRECTORY_ERROR,
            context,
            cause,
        )
        self.directory_path = directory_path
