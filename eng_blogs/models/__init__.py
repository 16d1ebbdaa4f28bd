"""Data models for eng_blogs."""

from .schemas import Blog, BlogPost

__all__ = [
    "Blog",
    "BlogPost",
]
