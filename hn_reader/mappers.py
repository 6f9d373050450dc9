"""
Normalization of web and search records into the Story domain type.
"""

from .logging_config import get_logger
from .models import SearchStory, Story, WebStory
from .utils import ensure_utc, parse_int, utc_now

logger = get_logger(__name__)


def parse_id(value) -> int:
    """Numeric story id from an int or string, 0 when it cannot be read."""
    story_id = parse_int(value, default=0)
    if story_id == 0:
        logger.debug(f"Story id {value!r} is not numeric, using 0")
    return story_id


def story_from_web(record: WebStory) -> Story:
    """Build a Story from a scraped listing row."""
    return Story(
        id=parse_id(record.id),
        title=record.title or "",
        date=ensure_utc(record.date or utc_now()),
        by=record.by,
        descendants=record.descendants or 0,
        score=record.score,
        url=record.url or None,
        age=record.age,
        rank=record.rank,
        vote_link=record.vote_link,
    )


def story_from_search(record: SearchStory) -> Story:
    """Build a Story from a search API hit."""
    return Story(
        id=parse_id(record.id),
        title=record.title,
        date=ensure_utc(record.date),
        by=record.by,
        descendants=record.descendants or 0,
        score=record.score,
        url=record.url or None,
        text=record.text,
        created_at=record.created_at,
    )
