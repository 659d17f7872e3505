"""Data models for LessWrong content."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import pytz

from ..core.validators import FieldValidator


def _parse_datetime(value) -> datetime:
    """Rebuild a UTC datetime from its serialized form."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return pytz.utc.localize(value)
        return value.astimezone(pytz.utc)
    parsed = FieldValidator.parse_timestamp(value)
    if parsed is None:
        raise ValueError(f"Invalid timestamp: {value!r}")
    return parsed


@dataclass(frozen=True)
class Post:
    """Represents a LessWrong post."""
    id: str
    title: str
    author: str
    posted_at: datetime
    content_html: str
    content_markdown: str
    slug: str
    base_score: float
    word_count: int
    page_url: Optional[str] = None
    
    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        return {
            'id': self.id,
            'title': self.title,
            'author': self.author,
            'posted_at': self.posted_at.isoformat(),
            'content_html': self.content_html,
            'content_markdown': self.content_markdown,
            'slug': self.slug,
            'page_url': self.page_url,
            'base_score': self.base_score,
            'word_count': self.word_count
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> 'Post':
        """Create Post from dictionary."""
        return cls(
            id=data['id'],
            title=data['title'],
            author=data['author'],
            posted_at=_parse_datetime(data['posted_at']),
            content_html=data['content_html'],
            content_markdown=data['content_markdown'],
            slug=data['slug'],
            page_url=data.get('page_url'),
            base_score=float(data['base_score']),
            word_count=int(data['word_count'])
        )


@dataclass(frozen=True)
class Comment:
    """Represents a comment in a post's discussion.
    
    Replies point at their parent through ``parent_comment_id``; top-level
    comments have none.
    """
    id: str
    parent_comment_id: Optional[str]
    author: str
    posted_at: datetime
    page_url: str
    base_score: float
    vote_count: float
    content_html: str
    content_markdown: str
    
    @property
    def is_top_level(self) -> bool:
        return self.parent_comment_id is None
    
    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        return {
            'id': self.id,
            'parent_comment_id': self.parent_comment_id,
            'author': self.author,
            'posted_at': self.posted_at.isoformat(),
            'page_url': self.page_url,
            'base_score': self.base_score,
            'vote_count': self.vote_count,
            'content_html': self.content_html,
            'content_markdown': self.content_markdown
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> 'Comment':
        """Create Comment from dictionary."""
        return cls(
            id=data['id'],
            parent_comment_id=data.get('parent_comment_id'),
            author=data['author'],
            posted_at=_parse_datetime(data['posted_at']),
            page_url=data['page_url'],
            base_score=float(data['base_score']),
            vote_count=float(data['vote_count']),
            content_html=data['content_html'],
            content_markdown=data['content_markdown']
        )
