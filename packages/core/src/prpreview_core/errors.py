"""Error taxonomy for the preview comment pipeline.

Only ``FetchChangedFilesError`` (and a malformed deploy result) may abort a run.
Every ``CommentError`` is recovered by the upserter: the deploy already
succeeded, so a failed comment post must never fail the job.
"""

from __future__ import annotations


class PreviewError(Exception):
    """Base class for every error raised by prpreview."""


class DeployResultError(PreviewError):
    """The deploy result payload could not be interpreted."""


class FetchChangedFilesError(PreviewError):
    """Listing the pull request's changed files failed."""


class CommentError(PreviewError):
    """A comment-thread interaction failed."""


class ListCommentsError(CommentError):
    pass


class UpdateCommentError(CommentError):
    def __init__(self, comment_id: int, message: str):
        super().__init__(message)
        self.comment_id = comment_id


class CreateCommentError(CommentError):
    pass
