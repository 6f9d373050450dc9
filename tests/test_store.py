"""
Tests for the per-category pagination store.
"""

from datetime import datetime, timezone

import pytest
from unittest.mock import Mock

from hn_reader.client import APIClient
from hn_reader.exceptions import DomainError
from hn_reader.models import PageCursor, Story, StoryQueryType
from hn_reader.store import StoryStore

POSTED = datetime(2020, 8, 23, 10, 11, 12, tzinfo=timezone.utc)


def _stories(*ids):
    return [Story(id=story_id, title=f"Story {story_id}", date=POSTED) for story_id in ids]


class TestStoryStore:

    def setup_method(self):
        self.api = Mock(spec=APIClient)
        self.store = StoryStore(self.api)

    def test_first_fetch_has_no_cursor(self):
        self.api.stories.return_value = (_stories(1, 2), [("p", "2")])

        stories = self.store.stories(StoryQueryType.TOP)

        assert [story.id for story in stories] == [1, 2]
        self.api.stories.assert_called_once_with(StoryQueryType.TOP, None)
        assert self.store.cursor(StoryQueryType.TOP) == PageCursor(params=[("p", "2")], exists=True)

    def test_next_fetch_continues_from_cursor(self):
        self.api.stories.side_effect = [
            (_stories(1, 2), [("p", "2")]),
            (_stories(3, 4), [("p", "3")]),
        ]

        self.store.stories(StoryQueryType.TOP)
        stories = self.store.stories(StoryQueryType.TOP)

        assert [story.id for story in stories] == [3, 4]
        self.api.stories.assert_called_with(StoryQueryType.TOP, [("p", "2")])
        assert self.store.cursor(StoryQueryType.TOP).params == [("p", "3")]

    @pytest.mark.parametrize("category", list(StoryQueryType))
    def test_exhausted_category_is_a_no_op(self, category):
        self.api.stories.return_value = (_stories(1), None)

        self.store.stories(category)
        stories = self.store.stories(category)

        assert stories == []
        assert self.api.stories.call_count == 1
        assert self.store.cursor(category) == PageCursor(params=[], exists=False)
        assert not self.store.has_more(category)

    @pytest.mark.parametrize("category", list(StoryQueryType))
    def test_refresh_always_starts_over(self, category):
        self.api.stories.side_effect = [
            (_stories(1), [("p", "2")]),
            (_stories(2), None),
            (_stories(1), [("p", "2")]),
        ]

        self.store.stories(category)
        self.store.stories(category)
        stories = self.store.stories(category, refresh=True)

        assert [story.id for story in stories] == [1]
        self.api.stories.assert_called_with(category, None)
        assert self.store.has_more(category)

    @pytest.mark.parametrize("category", list(StoryQueryType))
    def test_refresh_while_holding_cursor(self, category):
        self.api.stories.side_effect = [
            (_stories(1), [("p", "2")]),
            (_stories(1), [("p", "2")]),
        ]

        self.store.stories(category)
        self.store.stories(category, refresh=True)

        assert self.api.stories.call_args_list[1][0] == (category, None)

    def test_categories_are_independent(self):
        self.api.stories.side_effect = [
            (_stories(1), None),
            (_stories(2), [("p", "2")]),
        ]

        self.store.stories(StoryQueryType.TOP)
        stories = self.store.stories(StoryQueryType.SHOW)

        assert [story.id for story in stories] == [2]
        assert not self.store.has_more(StoryQueryType.TOP)
        assert self.store.has_more(StoryQueryType.SHOW)

    def test_failure_keeps_previous_state(self):
        self.api.stories.side_effect = [
            (_stories(1), [("p", "2")]),
            DomainError("Network error"),
        ]

        self.store.stories(StoryQueryType.TOP)
        with pytest.raises(DomainError):
            self.store.stories(StoryQueryType.TOP)

        assert self.store.cursor(StoryQueryType.TOP).params == [("p", "2")]

    def test_has_more_before_first_fetch(self):
        assert self.store.has_more(StoryQueryType.BEST)
        assert self.store.cursor(StoryQueryType.BEST) is None

    def test_accepts_category_value(self):
        self.api.stories.return_value = (_stories(1), None)

        self.store.stories("show")

        self.api.stories.assert_called_once_with(StoryQueryType.SHOW, None)

    def test_reset_one_category(self):
        self.api.stories.return_value = (_stories(1), None)
        self.store.stories(StoryQueryType.TOP)
        self.store.stories(StoryQueryType.NEW)

        self.store.reset(StoryQueryType.TOP)

        assert self.store.cursor(StoryQueryType.TOP) is None
        assert self.store.cursor(StoryQueryType.NEW) is not None

    def test_reset_all(self):
        self.api.stories.return_value = (_stories(1), None)
        self.store.stories(StoryQueryType.TOP)

        self.store.reset()

        assert self.store.cursor(StoryQueryType.TOP) is None
        self.store.stories(StoryQueryType.TOP)
        assert self.api.stories.call_count == 2
