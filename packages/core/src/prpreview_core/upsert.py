"""Find-or-create the single status comment a deploy owns on a pull request.

A comment belongs to a deploy when a bot authored it and its body carries the
deploy signature. The thread is scanned newest first, so if several historical
comments match (manual edits, an earlier half-failed run) the latest one wins.

Each network step reports a result object instead of raising:

    list ──► match? ──yes──► Updated ─────────────► done
               │               │
               no          UpdateFailed
               ▼               ▼
            Created / CreateFailed ◄──────────────┘

Two concurrent runs on the same PR can both see "no match" and both create a
comment; nothing here prevents that.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from prpreview_core.errors import CommentError, CreateCommentError, ListCommentsError, UpdateCommentError
from prpreview_core.gh.pull_request import create_comment, list_comments, update_comment

logger = logging.getLogger(__name__)

BOT_USER_TYPE = "Bot"


@dataclass(frozen=True)
class Updated:
    comment_id: int


@dataclass(frozen=True)
class UpdateFailed:
    comment_id: int
    error: UpdateCommentError


@dataclass(frozen=True)
class Created:
    comment_id: int


@dataclass(frozen=True)
class CreateFailed:
    error: CreateCommentError


Step = Union[Updated, UpdateFailed, Created, CreateFailed]


@dataclass
class UpsertResult:
    action: str  # "updated" | "created" | "failed"
    comment_id: int | None = None
    error: CommentError | None = None
    steps: list[Step] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.action != "failed"


def is_comment_by_bot(comment, signature: str) -> bool:
    user = getattr(comment, "user", None)
    return getattr(user, "type", None) == BOT_USER_TYPE and signature in (comment.body or "")


def find_bot_comment(comments: list, signature: str):
    """Return the newest comment owned by ``signature``, or None."""
    for comment in reversed(comments):
        if is_comment_by_bot(comment, signature):
            return comment
    return None


def _try_update(comment, body: str) -> Updated | UpdateFailed:
    try:
        update_comment(comment, body)
    except UpdateCommentError as e:
        logger.warning("Error updating comment %s: %s", comment.id, e)
        return UpdateFailed(comment_id=comment.id, error=e)
    return Updated(comment_id=comment.id)


def _try_create(pr, body: str) -> Created | CreateFailed:
    try:
        created = create_comment(pr, body)
    except CreateCommentError as e:
        logger.warning("Error creating comment: %s", e)
        return CreateFailed(error=e)
    return Created(comment_id=created.id)


def upsert_comment(pr, body: str, signature: str) -> UpsertResult:
    """Update this deploy's existing comment, or create one. Never raises CommentError."""
    steps: list[Step] = []

    try:
        comments = list_comments(pr)
    except ListCommentsError as e:
        logger.warning("Error checking for previous comments: %s", e)
        comments = []

    existing = find_bot_comment(comments, signature)
    if existing is not None:
        step = _try_update(existing, body)
        steps.append(step)
        if isinstance(step, Updated):
            return UpsertResult(action="updated", comment_id=step.comment_id, steps=steps)

    step = _try_create(pr, body)
    steps.append(step)
    if isinstance(step, Created):
        return UpsertResult(action="created", comment_id=step.comment_id, steps=steps)
    return UpsertResult(action="failed", error=step.error, steps=steps)
