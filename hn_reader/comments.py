"""
Comment tree construction.
"""

from typing import Iterable, List

from .models import Comment, SearchComment


def build_comments(records: Iterable[SearchComment], tier: int = 0) -> List[Comment]:
    """
    Build the comment forest of a story from decoded item records.

    Each level down adds one to tier. A record without an author becomes a
    deleted comment, but its replies are still built and attached.
    No filtering happens here; hiding deleted comments is up to the caller
    (see visible_comments).
    """
    return [_build_comment(record, tier) for record in records]


def _build_comment(record: SearchComment, tier: int) -> Comment:
    return Comment(
        id=record.id,
        date=record.date,
        by=record.by,
        deleted=record.by is None,
        parent=record.parent or 0,
        text=record.text,
        tier=tier,
        story_id=record.story_id,
        comments=build_comments(record.children, tier + 1),
    )


def flatten(comment: Comment) -> List[Comment]:
    """Pre-order listing of a comment and all of its replies."""
    return comment.flatten()


def flatten_all(comments: Iterable[Comment]) -> List[Comment]:
    flattened = []
    for comment in comments:
        flattened.extend(comment.flatten())
    return flattened


def visible_comments(comments: Iterable[Comment]) -> List[Comment]:
    """
    Flattened thread without the authorless (deleted) comments.

    Replies of a deleted comment stay visible at their own tier.
    """
    return [comment for comment in flatten_all(comments) if comment.by is not None]
