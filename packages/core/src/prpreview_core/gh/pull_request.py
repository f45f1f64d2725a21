from __future__ import annotations

from github import Github, GithubException

from prpreview_core.errors import (
    CreateCommentError,
    FetchChangedFilesError,
    ListCommentsError,
    UpdateCommentError,
)


def get_repo(repo_name: str, token: str):
    return Github(token).get_repo(repo_name)


def get_pull(repo, pr_number: int):
    return repo.get_pull(pr_number)


def get_changed_files(pr) -> list[str]:
    """Return the filenames changed by a PR (first page of the file listing only)."""
    try:
        files = pr.get_files().get_page(0)
    except GithubException as e:
        raise FetchChangedFilesError(f"Could not list files for PR #{pr.number}: {e}") from e
    return [f.filename for f in files]


def list_comments(pr) -> list:
    """Return the PR's conversation comments, oldest first (first page only)."""
    try:
        return list(pr.get_issue_comments().get_page(0))
    except Exception as e:
        raise ListCommentsError(str(e)) from e


def update_comment(comment, body: str) -> None:
    try:
        comment.edit(body)
    except Exception as e:
        raise UpdateCommentError(comment.id, str(e)) from e


def create_comment(pr, body: str):
    try:
        return pr.create_issue_comment(body)
    except Exception as e:
        raise CreateCommentError(str(e)) from e
