"""
Result records handed back to the host.

Every record is built fresh for a single request and never mutated afterwards.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class CatalogEntry:
    id: str
    title: str
    cover_url: str
    page_url: str

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class CatalogPage:
    """One page of the catalog, in the order the site lists it."""
    entries: Tuple[CatalogEntry, ...]
    has_more: bool

    def to_dict(self):
        return {
            'entries': [entry.to_dict() for entry in self.entries],
            'has_more': self.has_more,
        }


@dataclass(frozen=True)
class TitleDetail:
    id: str
    page_url: str
    title: str
    author: str
    artist: str
    description: str

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class ChapterRecord:
    id: str
    title: str
    chapter_number: float
    page_url: str

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class PageRecord:
    index: int
    image_url: str

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class DeepLinkResult:
    """Either a title, a chapter, or nothing when the URL could not be resolved."""
    title: Optional[TitleDetail] = None
    chapter: Optional[ChapterRecord] = None

    def __post_init__(self):
        if self.title is not None and self.chapter is not None:
            raise ValueError("DeepLinkResult holds a title or a chapter, not both")

    @property
    def is_empty(self):
        return self.title is None and self.chapter is None

    def to_dict(self):
        return {
            'title': self.title.to_dict() if self.title else None,
            'chapter': self.chapter.to_dict() if self.chapter else None,
        }
