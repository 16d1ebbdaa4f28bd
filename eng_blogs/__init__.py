"""eng_blogs - engineering blog list and feed parsing."""

from eng_blogs.exceptions import (
    BodyDecodeError,
    EngBlogsError,
    FetchError,
    InvalidFeedError,
    InvalidOpmlError,
    MalformedEntryError,
    NetworkError,
    NonSuccessStatusError,
    ParseError,
)
from eng_blogs.models import Blog, BlogPost
from eng_blogs.services import fetch_text, get_blogs, parse_blog

__all__ = [
    "Blog",
    "BlogPost",
    "fetch_text",
    "get_blogs",
    "parse_blog",
    "EngBlogsError",
    "FetchError",
    "NetworkError",
    "NonSuccessStatusError",
    "BodyDecodeError",
    "ParseError",
    "InvalidOpmlError",
    "InvalidFeedError",
    "MalformedEntryError",
]
