import os
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_CONFIG: dict = {
    "show_detailed_urls": "false",
    "file_extension": "md, html",  # comma-separated allow-list, entries are trimmed
    "original_path": "_site/",  # build output prefix as it appears in the repo
    "replaced_path": "/",  # prefix the site is served under
}

# Workflow inputs arrive as INPUT_<NAME> environment variables (upper-cased input id).
_ACTION_INPUTS = {
    "show_detailed_urls": "showDetailedUrls",
    "file_extension": "fileExtension",
    "original_path": "originalPath",
    "replaced_path": "replacedPath",
}


def get_action_input(name: str) -> str:
    """Return a GitHub Actions workflow input, or "" when it was not supplied."""
    value = os.environ.get(f"INPUT_{name.replace(' ', '_').upper()}", "")
    return value.strip()


def load_config(config_path: str = ".prpreview.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .prpreview.yml in the current directory
      3. Workflow inputs (INPUT_* environment variables); empty means unset
      4. CLI argument overrides
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    for key, input_name in _ACTION_INPUTS.items():
        value = get_action_input(input_name)
        if value:
            config[key] = value

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    # YAML may hand back a bool for show_detailed_urls; it is echoed as text.
    if isinstance(config["show_detailed_urls"], bool):
        config["show_detailed_urls"] = str(config["show_detailed_urls"]).lower()

    return config


def parse_extensions(value) -> list[str]:
    """Split a comma-separated extension allow-list, trimming each entry.

    A list (e.g. from YAML) is accepted as-is. Blank entries are dropped, so
    "" yields an empty allow-list.
    """
    if value is None:
        return []
    items = value if isinstance(value, (list, tuple)) else str(value).split(",")
    return [str(item).strip() for item in items if str(item).strip()]
