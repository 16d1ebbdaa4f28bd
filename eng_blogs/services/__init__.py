"""Services for eng_blogs."""

from .blog_list import get_blogs, parse_opml
from .feed_parser import (
    ContentSource,
    ResolvedContent,
    parse_blog,
    parse_posts,
    resolve_content,
    strip_html,
)
from .fetcher import fetch_text

__all__ = [
    "fetch_text",
    "get_blogs",
    "parse_opml",
    "parse_blog",
    "parse_posts",
    "resolve_content",
    "strip_html",
    "ContentSource",
    "ResolvedContent",
]
