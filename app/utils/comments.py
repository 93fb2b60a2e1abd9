"""Comment ordering: threads are shown most recent first."""
from typing import Iterable

from app.errors import FieldValidationError
from app.models.comment import Comment, CommentCreate
from app.utils.dates import parse_timestamp


def sort_thread(comments: Iterable[Comment]) -> list[Comment]:
    """Sort comments by timestamp, newest first."""
    return sorted(comments, key=lambda c: parse_timestamp(c.timestamp), reverse=True)


def prepend(thread: list[Comment], comment: Comment) -> list[Comment]:
    """
    Put a freshly created comment at the front of a sorted thread.

    A new comment's timestamp is the latest by construction, so no
    re-sort is needed.
    """
    return [comment, *thread]


def validate_comment(comment_create: CommentCreate) -> CommentCreate:
    """
    Trim author and body and check both are present.

    Returns:
        Trimmed copy of the input

    Raises:
        FieldValidationError: With one entry per empty field
    """
    author = (comment_create.author or "").strip()
    body = (comment_create.body or "").strip()

    errors = {}
    if not author:
        errors["author"] = "Name is required"
    if not body:
        errors["body"] = "Comment is required"
    if errors:
        raise FieldValidationError(errors)

    return CommentCreate(author=author, body=body)
