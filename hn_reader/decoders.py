"""
Decoding of the search API responses into intermediate records.

Only the envelope of a response is required to be well formed. Single
hits or comment nodes that cannot be decoded are dropped and the rest of
the batch is kept.
"""

import json
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, List, Optional, TypeVar, Union

from .config import SEARCH_DATE_FORMAT
from .exceptions import DecodingError
from .logging_config import get_logger
from .models import SearchComment, SearchStory

logger = get_logger(__name__)

T = TypeVar("T")

DECODE_ERRORS = (KeyError, TypeError, ValueError, OverflowError, OSError)


def load_json(data: Union[str, bytes]) -> Any:
    """Parse a response body, raising DecodingError for invalid JSON."""
    try:
        return json.loads(data)
    except (TypeError, ValueError) as e:
        raise DecodingError(f"Response is not valid JSON: {e}") from e


def decode_each(items: Iterable[Any], decoder: Callable[[Any], T]) -> List[T]:
    """Decode every element independently, keeping only the ones that succeed."""
    decoded = []
    for index, item in enumerate(items):
        try:
            decoded.append(decoder(item))
        except DECODE_ERRORS as e:
            logger.debug(f"Dropping malformed element {index}: {e!r}")
    return decoded


def decode_search_response(data: Union[str, bytes]) -> List[SearchStory]:
    """Decode a search response envelope of the form {"hits": [...]}."""
    payload = load_json(data)
    hits = _envelope(payload, "hits")
    stories = decode_each(hits, decode_search_story)
    logger.debug(f"Decoded {len(stories)} of {len(hits)} search hits")
    return stories


def decode_comment_response(data: Union[str, bytes]) -> List[SearchComment]:
    """Decode an item lookup envelope of the form {"children": [...]}."""
    payload = load_json(data)
    children = _envelope(payload, "children")
    return decode_each(children, decode_comment)


def decode_search_story(hit: Any) -> SearchStory:
    _require_object(hit)
    title = hit["title"]
    if not isinstance(title, str):
        raise TypeError(f"title must be a string, got {title!r}")

    object_id = hit.get("objectID")
    if isinstance(object_id, int) and not isinstance(object_id, bool):
        object_id = str(object_id)
    elif object_id is not None and not isinstance(object_id, str):
        raise TypeError(f"objectID must be a string, got {object_id!r}")

    text = _optional(hit, "story_text", str)
    if text is None:
        text = _optional(hit, "text", str)

    return SearchStory(
        title=title,
        date=_decode_date(hit),
        by=_optional(hit, "author", str),
        score=_optional(hit, "points", int),
        descendants=_optional(hit, "num_comments", int),
        id=object_id,
        url=_optional(hit, "url", str),
        text=text,
        created_at=_optional(hit, "created_at_i", int),
    )


def decode_comment(node: Any) -> SearchComment:
    _require_object(node)
    comment_id = node["id"]
    if isinstance(comment_id, bool) or not isinstance(comment_id, int):
        raise TypeError(f"id must be an integer, got {comment_id!r}")

    children = node.get("children")
    if children is None:
        children = []
    elif not isinstance(children, list):
        raise TypeError(f"children must be a list, got {type(children).__name__}")

    return SearchComment(
        id=comment_id,
        date=_decode_date(node),
        by=_optional(node, "author", str),
        text=_optional(node, "text", str),
        parent=_optional(node, "parent_id", int),
        story_id=_optional(node, "story_id", int),
        children=decode_each(children, decode_comment),
    )


def parse_search_date(value: str) -> datetime:
    """Parse a timestamp like 2020-08-23T10:11:12.000Z."""
    return datetime.strptime(value, SEARCH_DATE_FORMAT).astimezone(timezone.utc)


def _decode_date(record: dict) -> datetime:
    """Prefer the formatted created_at, fall back to created_at_i seconds."""
    value = record.get("created_at")
    if isinstance(value, str):
        try:
            return parse_search_date(value)
        except ValueError:
            logger.debug(f"Unparseable created_at {value!r}")

    seconds = _optional(record, "created_at_i", int)
    if seconds is None:
        raise ValueError(f"No usable creation date in {sorted(record)}")
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def _envelope(payload: Any, key: str) -> list:
    if not isinstance(payload, dict) or not isinstance(payload.get(key), list):
        raise DecodingError(f"Expected an object with a '{key}' list")
    return payload[key]


def _require_object(value: Any) -> None:
    if not isinstance(value, dict):
        raise TypeError(f"Expected an object, got {type(value).__name__}")


def _optional(record: dict, key: str, kind: type) -> Optional[Any]:
    value = record.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, kind):
        raise TypeError(f"{key} must be {kind.__name__}, got {value!r}")
    return value
