from typing import Dict, List, Optional

from pydantic import BaseModel


class OpenGraphImage(BaseModel):
    url: str
    width: int = 1200
    height: int = 630
    alt: Optional[str] = None


class OpenGraph(BaseModel):
    title: str
    description: str
    type: str
    url: str
    siteName: str
    images: Optional[List[OpenGraphImage]] = None
    publishedTime: Optional[str] = None
    modifiedTime: Optional[str] = None
    authors: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    locale: Optional[str] = None


class TwitterCard(BaseModel):
    card: str
    title: str
    description: str
    images: Optional[List[str]] = None
    creator: Optional[str] = None


class Alternates(BaseModel):
    canonical: Optional[str] = None
    languages: Optional[Dict[str, str]] = None


class MetadataAuthor(BaseModel):
    name: str
    email: Optional[str] = None
    url: Optional[str] = None


class Metadata(BaseModel):
    """Page metadata handed to the page-rendering layer."""

    title: str
    description: str
    openGraph: OpenGraph
    twitter: TwitterCard
    robots: Optional[str] = None
    alternates: Optional[Alternates] = None
    other: Optional[Dict[str, str]] = None
    authors: Optional[List[MetadataAuthor]] = None
    keywords: Optional[List[str]] = None

    def to_dict(self) -> dict:
        return self.model_dump(exclude_none=True)
