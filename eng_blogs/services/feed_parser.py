"""Feed parser service.

This module parses a blog's RSS/Atom/JSON feed and converts its entries into
posts with plain-text content.
"""

import enum
import io
import json
import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

import feedparser
from bs4 import BeautifulSoup

from eng_blogs.exceptions import InvalidFeedError, MalformedEntryError
from eng_blogs.models.schemas import Blog, BlogPost
from eng_blogs.services.fetcher import fetch_text

logger = logging.getLogger(__name__)

XML_CONTENT_TYPE = "application/xml; charset=utf-8"
JSON_FEED_VERSION_PREFIX = "https://jsonfeed.org/version/"


class ContentSource(enum.Enum):
    """Where an entry's content came from."""

    SUMMARY = "summary"
    BODY = "body"
    MISSING = "missing"


@dataclass(frozen=True)
class ResolvedContent:
    """Outcome of content resolution for one entry."""

    source: ContentSource
    text: str = ""


async def parse_blog(blog: Blog) -> List[BlogPost]:
    """Fetch a blog's feed and parse its entries into posts.

    Args:
        blog: Blog whose feed should be parsed

    Returns:
        List of BlogPost objects in feed order
    """
    logger.info(f"Parsing feed: {blog.url}")

    content = await fetch_text(blog.url)
    posts = parse_posts(content, blog)

    logger.info(f"Parsed {len(posts)} posts from {blog.title}")
    return posts


def parse_posts(content: str, blog: Blog) -> List[BlogPost]:
    """Parse feed content into posts.

    Entries without a title are skipped. A titled entry with neither a summary
    nor a content body aborts the whole parse.

    Args:
        content: Feed document text
        blog: Blog the feed belongs to

    Returns:
        List of BlogPost objects in feed order

    Raises:
        InvalidFeedError: If the content is not a recognized feed format
        MalformedEntryError: If a titled entry has no content at all
    """
    entries = _parse_feed_document(content, blog.url)

    posts = []
    for entry in entries:
        post = _convert_entry(entry, blog)
        if post is None:
            continue
        posts.append(post)

    return posts


def resolve_content(entry: Mapping[str, Any]) -> ResolvedContent:
    """Pick an entry's content: summary first, then the full content body.

    Args:
        entry: Feed entry mapping

    Returns:
        ResolvedContent tagged with the source that was used
    """
    summary = entry.get("summary")
    if summary is not None:
        return ResolvedContent(ContentSource.SUMMARY, summary)

    body = _first_content_body(entry)
    if body is not None:
        value = body.get("value")
        return ResolvedContent(ContentSource.BODY, value if value is not None else "")

    return ResolvedContent(ContentSource.MISSING)


def strip_html(markup: str) -> str:
    """Remove all tags from markup and join the remaining text fragments."""
    soup = BeautifulSoup(markup, "lxml")
    return "".join(soup.stripped_strings)


def _parse_feed_document(content: str, url: str) -> List[Mapping[str, Any]]:
    """Parse feed text into its entries, detecting JSON Feed by a leading ``{``."""
    if content.lstrip().startswith("{"):
        return _parse_json_feed(content, url)

    # a file object keeps feedparser from treating the text as a URL or path
    feed = feedparser.parse(
        io.BytesIO(content.encode("utf-8")),
        response_headers={"content-type": XML_CONTENT_TYPE},
    )

    if not feed.get("version"):
        reason = feed.get("bozo_exception", "unrecognized feed format")
        logger.error(f"Feed parsing error for {url}: {reason}")
        raise InvalidFeedError(url, str(reason))

    if feed.get("bozo"):
        logger.warning(f"Feed at {url} parsed with errors: {feed.get('bozo_exception')}")

    return feed.entries


def _parse_json_feed(content: str, url: str) -> List[Mapping[str, Any]]:
    """Map JSON Feed items onto the entry fields feedparser produces."""
    try:
        document = json.loads(content)
    except ValueError as e:
        logger.error(f"Feed parsing error for {url}: {e}")
        raise InvalidFeedError(url, f"invalid JSON: {e}") from e

    if not isinstance(document, dict):
        raise InvalidFeedError(url, "JSON Feed document is not an object")

    version = document.get("version")
    if not isinstance(version, str) or not version.startswith(JSON_FEED_VERSION_PREFIX):
        raise InvalidFeedError(url, f"unsupported JSON Feed version {version!r}")

    items = document.get("items", [])
    if not isinstance(items, list):
        raise InvalidFeedError(url, "JSON Feed 'items' is not a list")

    entries = []
    for item in items:
        if not isinstance(item, dict):
            raise InvalidFeedError(url, "JSON Feed item is not an object")

        entry: Dict[str, Any] = {}
        if item.get("id") is not None:
            entry["id"] = str(item["id"])
        if item.get("url") is not None:
            entry["link"] = item["url"]
        if item.get("title") is not None:
            entry["title"] = item["title"]
        if item.get("summary") is not None:
            entry["summary"] = item["summary"]

        for field in ("content_html", "content_text"):
            if item.get(field) is not None:
                entry["content"] = [{"value": item[field]}]
                break

        published = _parse_iso_date(item.get("date_published"))
        if published is not None:
            entry["published_parsed"] = published.utctimetuple()

        entries.append(entry)

    return entries


def _parse_iso_date(value: Any) -> Optional[datetime]:
    if not isinstance(value, str):
        return None

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _convert_entry(entry: Mapping[str, Any], blog: Blog) -> Optional[BlogPost]:
    """Convert one entry, returning None when the entry should be skipped."""
    title = entry.get("title")
    if title is None or title == "":
        logger.debug(f"Skipping entry without title: {entry.get('id')!r}")
        return None

    resolved = resolve_content(entry)
    if resolved.source is ContentSource.MISSING:
        raise MalformedEntryError(blog.url, entry.get("id"))

    return BlogPost(
        url=_entry_id(entry),
        title=title,
        content=strip_html(resolved.text),
        blog=replace(blog),
        published=_published(entry),
    )


def _first_content_body(entry: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    content = entry.get("content")
    if content is None:
        return None

    if len(content) == 0:
        return None
    return content[0]


def _entry_id(entry: Mapping[str, Any]) -> str:
    for field in ("id", "link"):
        value = entry.get(field)
        if value is not None:
            return value
    return ""


def _published(entry: Mapping[str, Any]) -> datetime:
    published = entry.get("published_parsed")
    if published is not None:
        try:
            return datetime(*published[:6], tzinfo=timezone.utc)
        except (TypeError, ValueError):
            logger.debug(f"Ignoring unusable publish date on entry {entry.get('id')!r}")

    return datetime.now(timezone.utc)
