"""Exceptions raised by eng_blogs.

Fetch and parse failures abort the enclosing operation. Records that are
merely incomplete (an outline without a feed URL, an entry without a title)
are skipped and never raise.
"""

from typing import Optional


class EngBlogsError(Exception):
    """Base class for all eng_blogs errors."""


class FetchError(EngBlogsError):
    """Raised when a document cannot be downloaded."""


class NetworkError(FetchError):
    """Raised on connection, DNS, TLS or other transport failures."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Network error fetching {url}: {reason}")


class NonSuccessStatusError(FetchError):
    """Raised when the server answers with any status other than 200."""

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Status code {status_code} fetching {url}")


class BodyDecodeError(FetchError):
    """Raised when a response body cannot be read as text."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Could not decode response body from {url}: {reason}")


class ParseError(EngBlogsError):
    """Raised when a downloaded document is not in the expected format."""


class InvalidOpmlError(ParseError):
    """Raised when a document is not well-formed OPML."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid OPML document: {reason}")


class InvalidFeedError(ParseError):
    """Raised when a document matches none of the supported feed formats."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid feed at {url}: {reason}")


class MalformedEntryError(EngBlogsError):
    """Raised when a titled feed entry has neither a summary nor a content body."""

    def __init__(self, url: str, entry_id: Optional[str]):
        self.url = url
        self.entry_id = entry_id
        super().__init__(
            f"Feed entry {entry_id or '<no id>'} at {url} has no summary or content"
        )
