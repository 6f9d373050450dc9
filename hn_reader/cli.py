"""
Command-line interface for HN Reader
"""

import click
from prettytable import PrettyTable

from .client import APIClient
from .comments import visible_comments
from .config import MAX_TITLE_LENGTH
from .exceptions import APIClientError, RequestCancelled
from .logging_config import setup_logging, get_logger
from .models import StoryQueryType
from .store import StoryStore

CATEGORIES = [category.value for category in StoryQueryType]


def _shorten(text, limit=MAX_TITLE_LENGTH):
    if len(text) > limit:
        return text[:limit - 3] + "..."
    return text


def _write_story_table(stories):
    """Write stories as a table using prettytable."""
    table = PrettyTable()
    table.field_names = ["#", "ID", "Type", "Title", "Info"]
    table.align["Title"] = "l"
    table.align["Info"] = "l"

    for i, story in enumerate(stories, 1):
        table.add_row([i, story.id, story.type.value, _shorten(story.title), story.info])

    click.echo(table.get_string())


def _write_story_text(stories):
    """Write stories one block at a time."""
    for i, story in enumerate(stories, 1):
        click.echo(f"\n{i}. {story.title}")
        if story.url:
            click.echo(f"   {story.url}")
        click.echo(f"   {story.info} | {story.descendants} comments | id {story.id}")


def _write_stories(stories, output_format):
    if output_format == "table":
        _write_story_table(stories)
    else:
        _write_story_text(stories)


def _fail(logger, error):
    logger.error(f"Request failed: {error}", exc_info=True)
    click.echo(f"Error: {error}", err=True)
    if error.retryable:
        click.echo("Hint: this looks like a network problem, try again later.", err=True)
    raise click.Abort()


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Set logging level (default: WARNING)",
)
@click.option(
    "--log-file",
    type=click.Path(),
    default=None,
    help="Log to file instead of stderr",
)
def main(log_level: str, log_file: str):
    """Read Hacker News stories and comment threads"""
    setup_logging(level=log_level, log_file=log_file)


@main.command()
@click.option(
    "--category",
    "-c",
    type=click.Choice(CATEGORIES),
    default="top",
    help="Story category (default: top)",
)
@click.option(
    "--pages",
    "-p",
    default=1,
    type=click.IntRange(1, 20),
    help="Number of pages to fetch (default: 1)",
)
@click.option(
    "--output-format",
    type=click.Choice(["text", "table"]),
    default="text",
    help="Output format (default: text)",
)
def stories(category: str, pages: int, output_format: str):
    """List the stories of a category, page by page"""
    logger = get_logger(__name__)
    query_type = StoryQueryType(category)
    store = StoryStore(APIClient())

    collected = []
    try:
        for page in range(pages):
            collected.extend(store.stories(query_type, refresh=(page == 0)))
            if not store.has_more(query_type):
                logger.info(f"No more {category} pages after page {page + 1}")
                break
    except APIClientError as e:
        _fail(logger, e)
    finally:
        store.api.close()

    if not collected:
        click.echo("No stories found.")
        return

    _write_stories(collected, output_format)


@main.command()
@click.argument("text")
@click.option(
    "--output-format",
    type=click.Choice(["text", "table"]),
    default="text",
    help="Output format (default: text)",
)
def search(text: str, output_format: str):
    """Search stories by text"""
    logger = get_logger(__name__)

    with APIClient() as api:
        try:
            results = api.search_stories(text).result()
        except RequestCancelled:
            logger.info(f"Search for {text!r} was superseded")
            return
        except APIClientError as e:
            _fail(logger, e)

    if not results:
        click.echo("No stories found.")
        return

    _write_stories(results, output_format)


@main.command()
@click.argument("story_id", type=int)
def comments(story_id: int):
    """Show the comment thread of a story"""
    logger = get_logger(__name__)

    with APIClient() as api:
        try:
            thread = api.comments(story_id)
        except APIClientError as e:
            _fail(logger, e)

    shown = visible_comments(thread)
    if not shown:
        click.echo("No comments.")
        return

    for comment in shown:
        indent = "  " * comment.tier
        click.echo(f"{indent}{comment.info}")
        click.echo(f"{indent}{comment.text or ''}")
        click.echo("")


if __name__ == "__main__":
    main()
