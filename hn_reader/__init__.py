"""
Hacker News Reader
Stories and comment threads from the Hacker News listings and search API
"""

from .client import APIClient
from .store import StoryStore
from .models import StoryQueryType, StoryType, Story, Comment, PageCursor
from .comments import build_comments, flatten, visible_comments
from .exceptions import (
    APIClientError,
    InvalidURLError,
    DomainError,
    UnknownError,
    DecodingError,
    ParsingError,
    RequestCancelled,
)

__version__ = "0.1.0"

__all__ = [
    "APIClient",
    "StoryStore",
    "StoryQueryType",
    "StoryType",
    "Story",
    "Comment",
    "PageCursor",
    "build_comments",
    "flatten",
    "visible_comments",
    "APIClientError",
    "InvalidURLError",
    "DomainError",
    "UnknownError",
    "DecodingError",
    "ParsingError",
    "RequestCancelled",
]
