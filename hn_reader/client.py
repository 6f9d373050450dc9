"""
Client for the Hacker News web listings and the search API.
"""

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional, Tuple

from .comments import build_comments
from .config import SEARCH_WORKERS
from .decoders import decode_comment_response, decode_search_response
from .exceptions import APIClientError, RequestCancelled
from .logging_config import get_logger, log_performance
from .mappers import story_from_search, story_from_web
from .models import Comment, QueryParams, SearchStory, Story, StoryQueryType
from .parsers import parse_story_page
from .transport import CancelToken, Transport
from .urls import build_url, date_cursor, item_url, search_url


class APIClient:
    """
    Fetches stories and comments and maps them to the domain model.

    Page and comment fetches run on the calling thread. Searches run on
    the client's own thread pool and only the latest one is live: starting
    a search cancels the previous one, whose future then raises
    RequestCancelled.
    """

    def __init__(self, transport: Optional[Transport] = None,
                 executor: Optional[ThreadPoolExecutor] = None):
        self.transport = transport or Transport()
        self.logger = get_logger(self.__class__.__name__)
        self._executor = executor or ThreadPoolExecutor(
            max_workers=SEARCH_WORKERS, thread_name_prefix="hn-search"
        )
        self._search_lock = threading.Lock()
        self._search_token: Optional[CancelToken] = None
        self.logger.debug("Initialized APIClient")

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self) -> None:
        self._cancel_search()
        self._executor.shutdown(wait=False)
        self.transport.close()

    @log_performance(get_logger("APIClient.stories"), "fetching story page")
    def stories(self, category: StoryQueryType,
                cursor: Optional[QueryParams] = None) -> Tuple[List[Story], Optional[QueryParams]]:
        """
        Fetch one page of a category.

        Returns the stories and the cursor of the following page, or None
        when the listing has no more pages.
        """
        url = build_url(category, cursor)
        category = StoryQueryType(category)
        self.logger.debug(f"Fetching {category.value} stories from: {url}")

        data = self.transport.fetch(url)

        if category.is_search:
            records = decode_search_response(data)
            stories = [story_from_search(record) for record in records]
            next_page = self._next_date_cursor(records)
        else:
            records, next_page = parse_story_page(data.decode("utf-8", errors="replace"))
            stories = [story_from_web(record) for record in records]

        self.logger.info(f"Fetched {len(stories)} {category.value} stories")
        return stories, next_page

    def search_stories(self, text: str) -> "Future[List[Story]]":
        """
        Start a full-text story search.

        Any search still in flight is cancelled first. An empty query
        resolves immediately to an empty list.
        """
        token = CancelToken()
        with self._search_lock:
            if self._search_token is not None:
                self._search_token.cancel()
            self._search_token = token

        if text == "":
            future: Future = Future()
            future.set_result([])
            return future

        self.logger.debug(f"Submitting search for {text!r}")
        return self._executor.submit(self._search, text, token)

    @log_performance(get_logger("APIClient.comments"), "fetching comments")
    def comments(self, story_id: int) -> List[Comment]:
        """Fetch the full comment tree of a story, returning the top-level comments."""
        url = item_url(story_id)
        self.logger.debug(f"Fetching comments for story {story_id} from: {url}")

        data = self.transport.fetch(url)
        comments = build_comments(decode_comment_response(data))

        self.logger.info(f"Fetched {len(comments)} top-level comments for story {story_id}")
        return comments

    def _search(self, text: str, token: CancelToken) -> List[Story]:
        try:
            url = search_url(text)
            data = self.transport.fetch(url, token)
            self._check_search(text, token)
            stories = [story_from_search(record) for record in decode_search_response(data)]
        except RequestCancelled:
            raise
        except APIClientError:
            self._check_search(text, token)
            raise
        self._check_search(text, token)

        self.logger.info(f"Search for {text!r} returned {len(stories)} stories")
        return stories

    @staticmethod
    def _check_search(text: str, token: CancelToken) -> None:
        if token.cancelled:
            raise RequestCancelled(f"Search for {text!r} was superseded")

    def _cancel_search(self) -> None:
        with self._search_lock:
            if self._search_token is not None:
                self._search_token.cancel()
                self._search_token = None

    @staticmethod
    def _next_date_cursor(records: List[SearchStory]) -> Optional[QueryParams]:
        """Page further back in time from the oldest hit, or stop when there were none."""
        if not records:
            return None
        oldest = min(
            record.created_at if record.created_at is not None else int(record.date.timestamp())
            for record in records
        )
        return date_cursor(oldest)
