"""Blog list resolver.

This module downloads the engineering blogs OPML subscription list and turns
its first outline group into a list of blogs.
"""

import logging
from typing import List
from xml.etree import ElementTree as ET

from eng_blogs.config import ENGINEERING_BLOGS_OPML_URL
from eng_blogs.exceptions import InvalidOpmlError
from eng_blogs.models.schemas import Blog
from eng_blogs.services.fetcher import fetch_text

logger = logging.getLogger(__name__)

OPML_VERSIONS = ("1.0", "1.1", "2.0")


async def get_blogs(opml_url: str = ENGINEERING_BLOGS_OPML_URL) -> List[Blog]:
    """Fetch the OPML subscription list and extract its blogs.

    Args:
        opml_url: URL of the OPML document (the engineering blogs list by default)

    Returns:
        List of Blog objects in document order
    """
    logger.info(f"Fetching blog list: {opml_url}")

    content = await fetch_text(opml_url)
    blogs = parse_opml(content)

    logger.info(f"Found {len(blogs)} blogs")
    return blogs


def parse_opml(content: str) -> List[Blog]:
    """Parse an OPML document into blogs.

    Only the children of the first outline in ``<body>`` are consulted. A child
    becomes a Blog when it carries an ``xmlUrl`` attribute and is skipped
    otherwise.

    Args:
        content: OPML XML content

    Returns:
        List of Blog objects, empty if the body has no outlines

    Raises:
        InvalidOpmlError: If the document is not well-formed OPML
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise InvalidOpmlError(str(e)) from e

    if root.tag != "opml":
        raise InvalidOpmlError(f"root element is <{root.tag}>, expected <opml>")

    version = root.get("version")
    if version not in OPML_VERSIONS:
        raise InvalidOpmlError(f"unsupported version {version!r}")

    body = root.find("body")
    if body is None:
        raise InvalidOpmlError("missing <body> element")

    group = body.find("outline")
    if group is None:
        return []

    blogs = []
    for outline in group.findall("outline"):
        xml_url = outline.get("xmlUrl")
        if xml_url is None:
            logger.debug(f"Skipping outline without xmlUrl: {outline.get('text')!r}")
            continue

        blogs.append(Blog(title=outline.get("text", ""), url=xml_url))

    return blogs
