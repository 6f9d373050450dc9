"""
HTML parsing of the Hacker News story listings.
"""

from datetime import datetime, timezone
from typing import List, Optional, Tuple, Union
from urllib.parse import parse_qsl, urljoin, urlsplit

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from .config import HN_WEB_BASE_URL, WEB_DATE_FORMAT
from .exceptions import ParsingError
from .logging_config import get_logger
from .models import QueryParams, WebStory
from .utils import parse_int, parse_leading_int, utc_now

logger = get_logger(__name__)

CONTAINER_SELECTORS = [".itemlist", "#bigbox table"]
TITLE_SELECTORS = [".storylink", ".titleline > a"]
COMMENT_SUFFIXES = ("comments", "comment")
NBSP = "\u00a0"


def parse_story_page(html: Union[str, bytes]) -> Tuple[List[WebStory], Optional[QueryParams]]:
    """
    Parse a story listing page.

    Returns the stories in document order and the query parameters of the
    "More" link, or None when the page has no further pages.

    Raises:
        ParsingError: the document cannot be parsed as markup at all
    """
    if not isinstance(html, (str, bytes)):
        raise ParsingError(f"Expected markup, got {type(html).__name__}")

    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as e:
        raise ParsingError(f"Failed to parse story page: {e}") from e

    container = _find_container(soup)
    if container is None:
        logger.warning("No story listing found in page")
        return [], None

    next_page = _more_link_params(soup)

    rows = container.select("tr.athing")
    subtexts = container.select("td.subtext")
    if len(rows) != len(subtexts):
        logger.warning(f"Unrecognized listing layout: {len(rows)} rows, {len(subtexts)} subtexts")
        return [], next_page

    stories = []
    for row, subtext in zip(rows, subtexts):
        story = WebStory()
        _parse_item_row(row, story)
        _parse_subtext(subtext, story)
        stories.append(story)

    logger.debug(f"Parsed {len(stories)} stories, more link: {next_page is not None}")
    return stories, next_page


def _find_container(soup: BeautifulSoup) -> Optional[Tag]:
    for selector in CONTAINER_SELECTORS:
        container = soup.select_one(selector)
        if container is not None:
            return container
    return None


def _parse_item_row(row: Tag, story: WebStory) -> None:
    story.id = parse_int(row.get("id"))

    rank = row.select_one(".rank")
    if rank is not None:
        story.rank = rank.get_text(strip=True)

    for selector in TITLE_SELECTORS:
        link = row.select_one(selector)
        if link is not None:
            story.title = link.get_text()
            story.url = link.get("href")
            break

    vote = row.select_one(".votelinks a")
    if vote is not None:
        story.vote_link = vote.get("href")


def _parse_subtext(subtext: Tag, story: WebStory) -> None:
    for element in subtext.find_all(["span", "a"]):
        classes = element.get("class") or []
        if "score" in classes:
            story.score = parse_leading_int(element.get_text())
        elif "age" in classes:
            story.age = element.get_text(strip=True)
            story.date = parse_web_date(element.get("title")) or utc_now()
        elif "hnuser" in classes:
            story.by = element.get_text(strip=True)
        elif element.name == "a" and not classes:
            count = parse_comment_count(element.get_text())
            if count is not None:
                story.descendants = count

    if story.date is None:
        story.date = utc_now()


def parse_web_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse the machine readable timestamp of an age label.

    Newer pages append the unix time after the ISO timestamp, only the
    first token is read.
    """
    if not value:
        return None
    tokens = value.split()
    if not tokens:
        return None
    try:
        return datetime.strptime(tokens[0], WEB_DATE_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        logger.debug(f"Unparseable story timestamp: {value!r}")
        return None


def parse_comment_count(text: str) -> Optional[int]:
    """Read "discussion" or "12 comments" into a comment count."""
    text = text.replace(NBSP, "").strip()
    if text == "discussion":
        return 0
    for suffix in COMMENT_SUFFIXES:
        if text.endswith(suffix):
            return parse_int(text[:-len(suffix)])
    return None


def _more_link_params(soup: BeautifulSoup) -> Optional[QueryParams]:
    more = soup.select_one(".morelink")
    if more is None:
        return None
    if more.name != "a":
        more = more.find("a")
        if more is None:
            return None

    href = more.get("href")
    if not href:
        return None
    query = urlsplit(urljoin(f"{HN_WEB_BASE_URL}/", href)).query
    if not query:
        return None
    return parse_qsl(query, keep_blank_values=True)
