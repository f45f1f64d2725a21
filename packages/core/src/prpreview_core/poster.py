"""Core preview-comment orchestration."""

from __future__ import annotations

import logging

from github import GithubException
from rich.console import Console

from prpreview_core.comment import build_body, build_signature_line
from prpreview_core.config import parse_extensions
from prpreview_core.deploy import ChannelSuccessResult
from prpreview_core.errors import FetchChangedFilesError
from prpreview_core.gh.pull_request import get_changed_files, get_pull
from prpreview_core.signature import create_deploy_signature
from prpreview_core.upsert import UpsertResult, upsert_comment
from prpreview_core.utils.paths import map_changed_files

console = Console()
logger = logging.getLogger(__name__)


def fetch_pull_request_files(repo, pr_number: int):
    """Return the PR and the filenames it changed. Any failure here is fatal."""
    try:
        pr = get_pull(repo, pr_number)
    except GithubException as e:
        raise FetchChangedFilesError(f"PR #{pr_number} not found in {repo.full_name}: {e}") from e
    return pr, get_changed_files(pr)


def render_channel_success_comment(
    result: ChannelSuccessResult,
    commit: str,
    changed_files: list[str],
    config: dict,
    pr_number: int,
) -> str:
    """Build the comment body for a successful channel deploy without posting it."""
    served_paths = map_changed_files(
        changed_files,
        parse_extensions(config.get("file_extension")),
        config.get("original_path") or "",
        config.get("replaced_path") or "",
    )
    logger.debug("Mapped %d changed file(s) to %d served path(s)", len(changed_files), len(served_paths))
    return build_body(
        result,
        commit,
        served_paths,
        signature_line=build_signature_line(config, pr_number),
        deploy_sign=create_deploy_signature(result),
    )


def post_channel_success_comment(
    repo,
    pr_number: int,
    result: ChannelSuccessResult,
    commit: str,
    config: dict,
) -> UpsertResult:
    """Post (or refresh) the preview comment on a pull request.

    Raises FetchChangedFilesError when the PR's files cannot be listed: the
    comment would be wrong without them. Every comment-thread failure is
    logged and reported through the returned UpsertResult instead.
    """
    pr, changed_files = fetch_pull_request_files(repo, pr_number)
    console.print(f"[dim]PR #{pr_number}: {len(changed_files)} changed file(s).[/dim]")

    body = render_channel_success_comment(result, commit, changed_files, config, pr_number)
    signature = create_deploy_signature(result)

    console.print("::group::Commenting on PR", markup=False, highlight=False)
    try:
        outcome = upsert_comment(pr, body, signature)
    finally:
        console.print("::endgroup::", markup=False, highlight=False)

    if outcome.action == "updated":
        console.print(f"[green]Updated preview comment {outcome.comment_id}.[/green]")
    elif outcome.action == "created":
        console.print(f"[green]Created preview comment {outcome.comment_id}.[/green]")
    else:
        console.print(f"[yellow]Could not post preview comment: {outcome.error}[/yellow]")
    return outcome
