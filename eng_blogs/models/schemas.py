"""Data models for eng_blogs.

This module defines the core data structures for blogs and their posts.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict


@dataclass(frozen=True)
class Blog:
    """Represents a subscribed blog and its feed URL."""

    title: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "url": self.url}


@dataclass(frozen=True)
class BlogPost:
    """Represents one post parsed from a blog's feed.

    ``url`` is the feed entry identifier (guid/id), which is not always a
    dereferenceable link. ``blog`` is a copy of the blog the post came from.
    """

    url: str
    title: str
    content: str
    blog: Blog
    published: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "title": self.title,
            "content": self.content,
            "blog": self.blog.to_dict(),
            "published": self.published.isoformat(),
        }
