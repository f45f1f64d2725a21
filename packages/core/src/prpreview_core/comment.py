"""Markdown body for the preview status comment."""

from __future__ import annotations

from prpreview_core.deploy import ChannelSuccessResult, interpret_channel_deploy_result

NO_FILES_MESSAGE = "_No changed files matched the configured extensions._"

# Order of the configuration echo; must stay fixed so repeated runs render identically.
_SIGNATURE_FIELDS = (
    ("showDetailedUrls", "show_detailed_urls"),
    ("fileExtension", "file_extension"),
    ("originalPath", "original_path"),
    ("replacedPath", "replaced_path"),
)


def _link(url: str) -> str:
    return f"[{url}]({url})"


def join_url(base_url: str, served_path: str) -> str:
    return base_url.rstrip("/") + "/" + served_path.lstrip("/")


def build_urls_markdown(urls: list[str]) -> str:
    if len(urls) == 1:
        return _link(urls[0])
    return "\n".join(f"- {_link(url)}" for url in urls)


def build_changed_files_markdown(urls: list[str], served_paths: list[str]) -> str:
    """One line per served path, linked under every preview URL."""
    if not served_paths:
        return NO_FILES_MESSAGE
    lines = []
    for path in served_paths:
        links = " · ".join(_link(join_url(url, path)) for url in urls)
        lines.append(f"- {links}" if links else f"- `{path}`")
    return "\n".join(lines)


def build_signature_line(config: dict, pr_number: int) -> str:
    """Echo the inputs that shaped this comment."""
    parts = [f"{label}: {config.get(key, '')}" for label, key in _SIGNATURE_FIELDS]
    parts.insert(1, f"pullRequestNumber: {pr_number}")
    return "<br>".join(parts)


def build_body(
    result: ChannelSuccessResult,
    commit_sha: str,
    served_paths: list[str],
    signature_line: str,
    deploy_sign: str,
) -> str:
    info = interpret_channel_deploy_result(result)

    body = f"""
Visit the preview URL for this PR (updated for commit {commit_sha}):

{build_urls_markdown(info.urls)}

### Changed Details:
{build_changed_files_markdown(info.urls, served_paths)}

<sub>(expires {info.expire_time_formatted})</sub>

<sub>{signature_line}</sub>

<sub>Sign: `{deploy_sign}`</sub>
"""
    return body.strip()
