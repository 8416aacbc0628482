"""Logic for normalizing paths into a comparable, component-wise form."""

import posixpath
from pathlib import Path, PurePath


def normalize_path(path: str | PurePath) -> Path:
    """Collapse separators, `.` components and trailing slashes.

    Backslashes are treated as separators so Windows-style configuration
    compares equal to POSIX spelling.
    """
    text = str(path).replace("\\", "/")
    if not text:
        msg = "Empty path"
        raise ValueError(msg)
    return Path(posixpath.normpath(text))


def project_relative(path: str | PurePath, project_root: str | PurePath | None) -> Path:
    """Normalize `path`, stripping `project_root` from absolute paths under it."""
    normalized = normalize_path(path)
    if project_root is None or not normalized.is_absolute():
        return normalized
    root = normalize_path(project_root)
    if normalized.is_relative_to(root):
        return normalize_path(normalized.relative_to(root))
    return normalized
