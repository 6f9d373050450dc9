"""
Per-category pagination state on top of the API client.
"""

from typing import Dict, List, Optional

from .client import APIClient
from .logging_config import get_logger
from .models import PageCursor, QueryParams, Story, StoryQueryType


class StoryStore:
    """
    Remembers where the next page of each category starts.

    Pages of one category must be requested one after the other; the
    store does not guard against concurrent fetches of the same category.
    """

    def __init__(self, api: Optional[APIClient] = None):
        self.api = api or APIClient()
        self.logger = get_logger(self.__class__.__name__)
        self._cursors: Dict[StoryQueryType, PageCursor] = {}

    def stories(self, category: StoryQueryType, refresh: bool = False) -> List[Story]:
        """
        Fetch the next page of a category, or the first page when refresh is set.

        Once a category has no more pages this returns an empty list
        without touching the network, until it is refreshed.
        """
        category = StoryQueryType(category)
        state = self._cursors.get(category)

        params: Optional[QueryParams] = None
        if not refresh and state is not None:
            if not state.exists:
                self.logger.debug(f"No more {category.value} stories to fetch")
                return []
            params = state.params

        stories, next_page = self.api.stories(category, params)
        self._cursors[category] = PageCursor(
            params=next_page or [],
            exists=next_page is not None,
        )
        self.logger.debug(f"{category.value} cursor is now {self._cursors[category]}")
        return stories

    def has_more(self, category: StoryQueryType) -> bool:
        """True until a fetch of the category comes back without a next page."""
        state = self._cursors.get(StoryQueryType(category))
        return state is None or state.exists

    def cursor(self, category: StoryQueryType) -> Optional[PageCursor]:
        return self._cursors.get(StoryQueryType(category))

    def reset(self, category: Optional[StoryQueryType] = None) -> None:
        if category is None:
            self._cursors.clear()
        else:
            self._cursors.pop(StoryQueryType(category), None)
