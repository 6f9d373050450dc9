"""
Data models and type definitions for HN Reader.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from .config import SEARCH_CATEGORY_TAGS, WEB_CATEGORY_PATHS
from .utils import classify_title, join_info, time_ago

QueryParams = List[Tuple[str, str]]


class StoryQueryType(Enum):
    """Content categories, each backed by exactly one upstream listing."""
    TOP = "top"
    ASK = "ask"
    SHOW = "show"
    NEW = "new"
    JOB = "job"
    BEST = "best"
    ACTIVE = "active"

    @property
    def is_web(self) -> bool:
        """True for categories scraped from the HTML listing."""
        return self.value in WEB_CATEGORY_PATHS

    @property
    def is_search(self) -> bool:
        """True for categories served by the date-ordered search index."""
        return self.value in SEARCH_CATEGORY_TAGS


class StoryType(Enum):
    """Derived story classification."""
    ASK = "ask"
    SHOW = "show"
    NORMAL = "normal"


@dataclass
class Story:
    """Represents a Hacker News story, whatever source it came from."""
    id: int
    title: str
    date: datetime
    by: Optional[str] = None
    descendants: int = 0
    score: Optional[int] = None
    url: Optional[str] = None
    text: Optional[str] = None
    created_at: Optional[int] = None
    comment_ids: Optional[List[int]] = None
    age: Optional[str] = None
    rank: Optional[str] = None
    vote_link: Optional[str] = None

    @property
    def type(self) -> StoryType:
        return StoryType(classify_title(self.title, self.url))

    @property
    def info(self) -> str:
        """Score, author and age joined by a middle dot."""
        return self.info_at()

    def info_at(self, now: Optional[datetime] = None) -> str:
        score = f"{self.score} points" if self.score is not None else None
        age = self.age or time_ago(self.date, now)
        return join_info([score, self.by, age])


@dataclass
class Comment:
    """
    Represents a comment and the subtree below it.

    A comment without an author has been deleted upstream. Its children
    are still kept.
    """
    id: int
    date: datetime
    by: Optional[str] = None
    deleted: bool = False
    parent: int = 0
    text: Optional[str] = None
    tier: int = 0
    story_id: Optional[int] = None
    comments: List["Comment"] = field(default_factory=list)

    @property
    def comment_ids(self) -> List[int]:
        return [child.id for child in self.comments]

    @property
    def info(self) -> str:
        return self.info_at()

    def info_at(self, now: Optional[datetime] = None) -> str:
        return join_info([self.by, time_ago(self.date, now)])

    def flatten(self) -> List["Comment"]:
        """Return this comment followed by its descendants in pre-order."""
        flattened = [self]
        for child in self.comments:
            flattened.extend(child.flatten())
        return flattened


@dataclass
class PageCursor:
    """Pagination state of one category."""
    params: QueryParams = field(default_factory=list)
    exists: bool = True


@dataclass
class WebStory:
    """A story row scraped from the HTML listing, before normalization."""
    id: Optional[int] = None
    rank: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    vote_link: Optional[str] = None
    score: Optional[int] = None
    by: Optional[str] = None
    age: Optional[str] = None
    date: Optional[datetime] = None
    descendants: Optional[int] = None


@dataclass
class SearchStory:
    """A story hit from the search API, before normalization."""
    title: str
    date: datetime
    by: Optional[str] = None
    score: Optional[int] = None
    descendants: Optional[int] = None
    id: Optional[str] = None
    url: Optional[str] = None
    text: Optional[str] = None
    created_at: Optional[int] = None


@dataclass
class SearchComment:
    """A comment node from the item lookup API, children already decoded."""
    id: int
    date: datetime
    by: Optional[str] = None
    text: Optional[str] = None
    parent: Optional[int] = None
    story_id: Optional[int] = None
    children: List["SearchComment"] = field(default_factory=list)
