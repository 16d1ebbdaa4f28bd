"""eng_blogs command line.

Resolves the engineering blogs list and parses blog feeds, printing the
results as JSON. Blogs are processed one at a time.
"""

import asyncio
import json
import logging
import sys
from dataclasses import replace
from typing import Dict, Optional

import click

from eng_blogs.config import LOG_LEVELS, get_config
from eng_blogs.exceptions import EngBlogsError
from eng_blogs.logging_config import setup_logging
from eng_blogs.models.schemas import Blog
from eng_blogs.services.blog_list import get_blogs
from eng_blogs.services.feed_parser import parse_blog

logger = logging.getLogger(__name__)


def _echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (overrides ENG_BLOGS_LOG_LEVEL)",
)
@click.option(
    "--opml-url",
    default=None,
    help="OPML document listing the blogs (overrides ENG_BLOGS_OPML_URL)",
)
@click.pass_context
def main(ctx: click.Context, log_level: Optional[str], opml_url: Optional[str]) -> None:
    """Fetch engineering blogs and their posts."""
    config = get_config()
    if log_level:
        config = replace(config, log_level=log_level.upper())
    if opml_url:
        config = replace(config, opml_url=opml_url)

    setup_logging(config)
    ctx.obj = config


@main.command()
@click.pass_obj
def blogs(config) -> None:
    """Print the blog list as JSON."""
    try:
        result = asyncio.run(get_blogs(config.opml_url))
    except EngBlogsError as e:
        logger.error(f"Failed to get blogs: {e}")
        sys.exit(1)

    _echo_json([blog.to_dict() for blog in result])


@main.command()
@click.argument("url")
@click.option("--title", default="", help="Blog title recorded on each post")
def posts(url: str, title: str) -> None:
    """Parse the feed at URL and print its posts as JSON."""
    blog = Blog(title=title, url=url)
    try:
        result = asyncio.run(parse_blog(blog))
    except EngBlogsError as e:
        logger.error(f"Failed to parse {url}: {e}")
        sys.exit(1)

    _echo_json([post.to_dict() for post in result])


@main.command()
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Only scan the first N blogs")
@click.pass_obj
def scan(config, limit: Optional[int]) -> None:
    """Parse every blog in the list and print post counts as JSON."""

    async def run_scan() -> Dict[str, int]:
        blog_list = await get_blogs(config.opml_url)
        if limit is not None:
            blog_list = blog_list[:limit]

        counts = {}
        failures = 0
        for blog in blog_list:
            try:
                counts[blog.title] = len(await parse_blog(blog))
            except EngBlogsError as e:
                failures += 1
                logger.warning(f"Skipping {blog.title}: {e}")

        logger.info(f"Scanned {len(blog_list)} blogs, {failures} failed")
        return counts

    try:
        result = asyncio.run(run_scan())
    except EngBlogsError as e:
        logger.error(f"Failed to get blogs: {e}")
        sys.exit(1)

    _echo_json(result)


if __name__ == "__main__":
    main()
