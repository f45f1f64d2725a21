"""GitHub token and pull request resolution for workflow runs.

Resolution order for the token (stops at first success):
  1. GITHUB_TOKEN environment variable
  2. the `repoToken` workflow input (INPUT_REPOTOKEN)
"""

from __future__ import annotations

import json
import logging
import os

from prpreview_core.config import get_action_input

logger = logging.getLogger(__name__)


def resolve_github_token() -> str | None:
    """Return a GitHub token or None if no source is available.

    Never raises; callers should check for None and emit a UsageError.
    """
    token = os.environ.get("GITHUB_TOKEN")
    if token:
        return token

    token = get_action_input("repoToken")
    if token:
        logger.debug("Resolved GitHub token from the repoToken input.")
        return token

    return None


def resolve_pull_request_number() -> int | None:
    """Read the PR number from the workflow's event payload, if there is one."""
    event_path = os.environ.get("GITHUB_EVENT_PATH")
    if not event_path or not os.path.exists(event_path):
        return None
    try:
        with open(event_path, encoding="utf-8") as f:
            event = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not read event payload %s: %s", event_path, e)
        return None
    number = (event.get("pull_request") or {}).get("number") if isinstance(event, dict) else None
    return int(number) if number is not None else None
