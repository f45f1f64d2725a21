"""comment command: post the preview deploy comment on a pull request."""

from __future__ import annotations

import json

import click
from github import GithubException
from rich.console import Console

from prpreview_core.deploy import ErrorResult, parse_deploy_result
from prpreview_core.errors import DeployResultError, FetchChangedFilesError
from prpreview_core.gh.pull_request import get_repo
from prpreview_core.poster import (
    fetch_pull_request_files,
    post_channel_success_comment,
    render_channel_success_comment,
)

console = Console()


def _load_deploy_result(stream):
    try:
        data = json.load(stream)
    except ValueError as e:
        raise click.ClickException(f"Deploy result is not valid JSON: {e}")
    try:
        return parse_deploy_result(data)
    except DeployResultError as e:
        raise click.ClickException(str(e))


@click.command("comment")
@click.option("--repo", required=True, envvar="GITHUB_REPOSITORY", help="GitHub repository in owner/name format.")
@click.option(
    "--pr",
    "pr_number",
    type=int,
    default=None,
    help="Pull request number. Defaults to the pull request in GITHUB_EVENT_PATH.",
)
@click.option("--commit", required=True, envvar="GITHUB_SHA", help="Commit the preview was built from.")
@click.option(
    "--deploy-result",
    "deploy_result",
    type=click.File("r"),
    default="-",
    show_default=True,
    help="Path to the hosting CLI's JSON deploy output ('-' for stdin).",
)
@click.option("--show-detailed-urls", default=None, help="Echoed into the comment signature.")
@click.option("--file-extension", default=None, help="Comma-separated extensions to list, e.g. 'md, html'.")
@click.option("--original-path", default=None, help="Build output prefix to strip from changed files.")
@click.option("--replaced-path", default=None, help="Prefix the site is served under.")
@click.option(
    "--shadow",
    "-s",
    is_flag=True,
    help="Dry-run mode: print the comment body without posting to GitHub.",
)
@click.pass_context
def comment_cmd(
    ctx,
    repo: str,
    pr_number: int | None,
    commit: str,
    deploy_result,
    show_detailed_urls: str | None,
    file_extension: str | None,
    original_path: str | None,
    replaced_path: str | None,
    shadow: bool,
):
    """Post or update the preview deploy comment on a pull request.

    Reads the channel deploy result, lists the files the PR changed, and keeps
    a single status comment on the PR up to date. Comment failures are logged
    but never fail the command.

    \b
    Required environment variables:
      GITHUB_TOKEN         GitHub token (or the repoToken workflow input)
    """
    from prpreview_core.config import load_config
    from prpreview_cli.auth import resolve_github_token, resolve_pull_request_number

    config_path = (ctx.obj or {}).get("config_path", ".prpreview.yml")
    config = load_config(
        config_path,
        cli_overrides={
            "show_detailed_urls": show_detailed_urls,
            "file_extension": file_extension,
            "original_path": original_path,
            "replaced_path": replaced_path,
        },
    )

    result = _load_deploy_result(deploy_result)
    if isinstance(result, ErrorResult):
        raise click.ClickException(f"Deploy failed, not commenting: {result.error}")

    if pr_number is None:
        pr_number = resolve_pull_request_number()
    if pr_number is None:
        raise click.UsageError("No pull request number. Pass --pr or run on a pull_request event.")

    token = resolve_github_token()
    if not token:
        raise click.UsageError("No GitHub token found. Set GITHUB_TOKEN or the repoToken input.")

    try:
        this_repo = get_repo(repo, token=token)
    except GithubException as e:
        raise click.ClickException(f"Could not open repository {repo}: {e}")

    try:
        if shadow:
            _, changed_files = fetch_pull_request_files(this_repo, pr_number)
            body = render_channel_success_comment(result, commit, changed_files, config, pr_number)
            console.print(body, markup=False, highlight=False, soft_wrap=True)
            return
        outcome = post_channel_success_comment(this_repo, pr_number, result, commit, config)
    except FetchChangedFilesError as e:
        raise click.ClickException(str(e))

    if not outcome.ok:
        console.print("[yellow]Deploy succeeded; the preview comment could not be posted.[/yellow]")
