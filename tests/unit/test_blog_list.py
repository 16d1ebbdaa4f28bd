"""Unit tests for the blog list resolver."""

import pytest
from unittest.mock import AsyncMock, patch

from eng_blogs.config import ENGINEERING_BLOGS_OPML_URL
from eng_blogs.exceptions import InvalidOpmlError, NetworkError
from eng_blogs.models.schemas import Blog
from eng_blogs.services.blog_list import get_blogs, parse_opml


pytestmark = pytest.mark.anyio


ENGINEERING_OPML = """<?xml version="1.0" encoding="UTF-8"?>
<opml version="1.0">
  <head><title>Engineering Blogs</title></head>
  <body>
    <outline text="Engineering Blogs" title="Engineering Blogs">
      <outline type="rss" text="Airbnb" title="Airbnb"
               xmlUrl="https://medium.com/feed/airbnb-engineering"
               htmlUrl="https://medium.com/airbnb-engineering"/>
      <outline type="rss" text="No Feed Co" title="No Feed Co" htmlUrl="https://nofeed.example.com"/>
      <outline type="rss" text="Dropbox" title="Dropbox"
               xmlUrl="https://dropbox.tech/feed"/>
    </outline>
    <outline text="Individuals">
      <outline type="rss" text="Someone" xmlUrl="https://someone.example.com/feed"/>
    </outline>
  </body>
</opml>
"""


class TestParseOpml:
    """Tests for OPML parsing."""

    def test_extracts_children_with_feed_url(self):
        blogs = parse_opml(ENGINEERING_OPML)

        assert blogs == [
            Blog(title="Airbnb", url="https://medium.com/feed/airbnb-engineering"),
            Blog(title="Dropbox", url="https://dropbox.tech/feed"),
        ]

    def test_single_blog(self):
        opml = """<opml version="2.0"><head/><body>
            <outline text="Blogs">
                <outline text="Example Eng Blog" xmlUrl="https://example.com/feed.xml"/>
            </outline>
        </body></opml>"""

        assert parse_opml(opml) == [
            Blog(title="Example Eng Blog", url="https://example.com/feed.xml"),
        ]

    def test_only_first_group_is_consulted(self):
        blogs = parse_opml(ENGINEERING_OPML)

        assert Blog(title="Someone", url="https://someone.example.com/feed") not in blogs

    def test_nested_outlines_are_not_flattened(self):
        opml = """<opml version="2.0"><body>
            <outline text="Blogs">
                <outline text="Folder">
                    <outline text="Nested" xmlUrl="https://nested.example.com/feed"/>
                </outline>
                <outline text="Direct" xmlUrl="https://direct.example.com/feed"/>
            </outline>
        </body></opml>"""

        assert parse_opml(opml) == [Blog(title="Direct", url="https://direct.example.com/feed")]

    def test_empty_body_returns_empty_list(self):
        assert parse_opml('<opml version="2.0"><head/><body></body></opml>') == []

    def test_group_without_children_returns_empty_list(self):
        opml = '<opml version="2.0"><body><outline text="Blogs"/></body></opml>'

        assert parse_opml(opml) == []

    def test_title_kept_verbatim_and_may_be_empty(self):
        opml = """<opml version="2.0"><body>
            <outline text="Blogs">
                <outline text="  Spaced  Title " xmlUrl="https://a.example.com/feed"/>
                <outline xmlUrl="https://b.example.com/feed"/>
            </outline>
        </body></opml>"""

        blogs = parse_opml(opml)

        assert blogs[0].title == "  Spaced  Title "
        assert blogs[1].title == ""

    def test_duplicate_urls_are_kept(self):
        opml = """<opml version="2.0"><body>
            <outline text="Blogs">
                <outline text="One" xmlUrl="https://same.example.com/feed"/>
                <outline text="Two" xmlUrl="https://same.example.com/feed"/>
            </outline>
        </body></opml>"""

        assert len(parse_opml(opml)) == 2

    def test_malformed_xml_raises(self):
        with pytest.raises(InvalidOpmlError):
            parse_opml("<opml version='2.0'><body><outline></body>")

    def test_non_opml_root_raises(self):
        with pytest.raises(InvalidOpmlError):
            parse_opml("<rss version='2.0'><channel/></rss>")

    def test_unsupported_version_raises(self):
        with pytest.raises(InvalidOpmlError):
            parse_opml("<opml version='9.9'><body/></opml>")

    def test_missing_body_raises(self):
        with pytest.raises(InvalidOpmlError):
            parse_opml("<opml version='2.0'><head/></opml>")


class TestGetBlogs:
    """Tests for get_blogs."""

    async def test_fetches_default_list(self):
        with patch(
            "eng_blogs.services.blog_list.fetch_text",
            AsyncMock(return_value=ENGINEERING_OPML),
        ) as mock_fetch:
            blogs = await get_blogs()

            mock_fetch.assert_awaited_once_with(ENGINEERING_BLOGS_OPML_URL)
            assert [blog.title for blog in blogs] == ["Airbnb", "Dropbox"]

    async def test_custom_url(self):
        with patch(
            "eng_blogs.services.blog_list.fetch_text",
            AsyncMock(return_value=ENGINEERING_OPML),
        ) as mock_fetch:
            await get_blogs("https://example.com/other.opml")

            mock_fetch.assert_awaited_once_with("https://example.com/other.opml")

    async def test_fetch_errors_propagate(self):
        with patch(
            "eng_blogs.services.blog_list.fetch_text",
            AsyncMock(side_effect=NetworkError(ENGINEERING_BLOGS_OPML_URL, "DNS failure")),
        ):
            with pytest.raises(NetworkError):
                await get_blogs()

    async def test_invalid_document_propagates(self):
        with patch(
            "eng_blogs.services.blog_list.fetch_text",
            AsyncMock(return_value="<html><body>Not Found</body></html>"),
        ):
            with pytest.raises(InvalidOpmlError):
                await get_blogs()
