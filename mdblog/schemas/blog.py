from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Author(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    email: Optional[str] = None
    bio: Optional[str] = None
    avatar: Optional[str] = None
    twitter: Optional[str] = None
    github: Optional[str] = None
    url: Optional[str] = None
    id: Optional[str] = None


# A bare author name, or a detailed entry promoted from the roster.
AuthorRef = Union[str, Author]


class BlogConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    siteName: str = "My Blog"
    siteUrl: str = ""
    defaultAuthor: Optional[str] = None
    authors: List[Author] = Field(default_factory=list)
    twitterHandle: Optional[str] = None
    defaultOgImage: Optional[str] = None
    defaultLang: str = "en"
    alternateLanguages: Dict[str, str] = Field(default_factory=dict)


class PostMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    frontmatter: Dict[str, Any] = Field(default_factory=dict)
    authors: List[AuthorRef] = Field(default_factory=list)


class Post(PostMetadata):
    content: str = ""
    readingTime: int = 0
    wordCount: int = 0


class Breadcrumb(BaseModel):
    name: str
    url: str


class SkippedFile(BaseModel):
    """Diagnostic emitted when a listing drops a file it could not parse."""

    filename: str
    path: str
    reason: str
