"""
Request URL construction for the web listing and the search API.
"""

from typing import Optional
from urllib.parse import quote, urlencode

from .config import (
    DATE_FILTER_KEY,
    DATE_FILTER_TEMPLATE,
    HN_ITEM_ENDPOINT,
    HN_SEARCH_BASE_URL,
    HN_SEARCH_BY_DATE_ENDPOINT,
    HN_SEARCH_ENDPOINT,
    HN_WEB_BASE_URL,
    SEARCH_CATEGORY_TAGS,
    SEARCH_TAG,
    WEB_CATEGORY_PATHS,
)
from .exceptions import InvalidURLError
from .models import QueryParams, StoryQueryType


def _encode_params(params: QueryParams) -> str:
    try:
        return urlencode(list(params))
    except (TypeError, ValueError, UnicodeEncodeError) as e:
        raise InvalidURLError(f"Cannot encode query parameters {params!r}: {e}") from e


def build_url(category: StoryQueryType, cursor: Optional[QueryParams] = None) -> str:
    """
    Build the listing URL for a category.

    Web categories get the cursor appended as-is, it is whatever the
    previous page's "More" link carried. Search categories get the
    content tag first and then the cursor (normally a date filter).
    """
    try:
        category = StoryQueryType(category)
    except ValueError as e:
        raise InvalidURLError(f"Unknown category {category!r}") from e

    if category.is_web:
        url = f"{HN_WEB_BASE_URL}{WEB_CATEGORY_PATHS[category.value]}"
        if cursor:
            url = f"{url}?{_encode_params(cursor)}"
        return url

    if category.is_search:
        params = [("tags", SEARCH_CATEGORY_TAGS[category.value])]
        params.extend(cursor or [])
        return f"{HN_SEARCH_BASE_URL}{HN_SEARCH_BY_DATE_ENDPOINT}?{_encode_params(params)}"

    raise InvalidURLError(f"No listing is known for category {category.value}")


def date_cursor(timestamp: int) -> QueryParams:
    """Cursor selecting search results created strictly before timestamp."""
    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        raise InvalidURLError(f"Date filter needs unix seconds, got {timestamp!r}")
    return [(DATE_FILTER_KEY, DATE_FILTER_TEMPLATE.format(timestamp))]


def search_url(text: str) -> str:
    """Full-text story search URL."""
    try:
        query = quote(text, safe="")
    except (TypeError, UnicodeEncodeError) as e:
        raise InvalidURLError(f"Cannot encode search text {text!r}: {e}") from e
    return f"{HN_SEARCH_BASE_URL}{HN_SEARCH_ENDPOINT}?query={query}&tags={SEARCH_TAG}"


def item_url(item_id: int) -> str:
    """Item lookup URL, which returns the whole comment tree of a story."""
    if isinstance(item_id, bool) or not isinstance(item_id, int):
        raise InvalidURLError(f"Item id must be an integer, got {item_id!r}")
    return f"{HN_SEARCH_BASE_URL}{HN_ITEM_ENDPOINT.format(item_id)}"
