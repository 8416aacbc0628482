"""Logic for component-wise ancestor matching of paths."""

from pathlib import Path


def relative_suffix(path: Path, root: Path) -> Path | None:
    """Return `path` relative to `root`, or None if `root` is not an ancestor.

    Comparison is done per path component, so `src/main` is not an ancestor
    of `src/mainline/a.txt`. A root equal to the path is not an ancestor.
    """
    root_parts = root.parts
    parts = path.parts
    if len(root_parts) >= len(parts):
        return None
    if parts[: len(root_parts)] != root_parts:
        return None
    return Path(*parts[len(root_parts) :])
