"""Map changed repository files to the paths they are served at."""

from __future__ import annotations

from collections.abc import Iterable


def get_extension(file_name: str) -> str | None:
    """Return the text after the final ".", or None when the name has no dot."""
    if "." not in file_name:
        return None
    return file_name.rsplit(".", 1)[-1]


def is_identity_mapping(allowed_extensions: Iterable[str], original_path: str) -> bool:
    """An empty allow-list or an empty source prefix turns mapping off entirely."""
    return not [ext for ext in allowed_extensions if ext.strip()] or not original_path


def has_allowed_extension(file_name: str, allowed_extensions: set[str]) -> bool:
    return get_extension(file_name) in allowed_extensions


def to_served_path(file_name: str, original_path: str, replaced_path: str) -> str:
    """Swap a leading ``original_path`` for ``replaced_path``; anything else passes through."""
    if original_path and file_name.startswith(original_path):
        return replaced_path + file_name[len(original_path) :]
    return file_name


def map_changed_files(
    raw_paths: Iterable[str],
    allowed_extensions: Iterable[str],
    original_path: str,
    replaced_path: str,
) -> list[str]:
    """Filter changed files by extension, then rewrite them to served paths.

    Output order follows input order. A served path that appears twice is kept
    once, at its first position.
    """
    allowed = {ext.strip() for ext in allowed_extensions if ext.strip()}
    identity = is_identity_mapping(allowed, original_path)

    served: list[str] = []
    seen: set[str] = set()
    for file_name in raw_paths:
        if identity:
            path = file_name
        elif has_allowed_extension(file_name, allowed):
            path = to_served_path(file_name, original_path, replaced_path)
        else:
            continue
        if path in seen:
            continue
        seen.add(path)
        served.append(path)
    return served
