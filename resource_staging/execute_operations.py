"""Logic for carrying out a staging plan on disk."""

import logging
from collections.abc import Iterable
from pathlib import Path

from resource_staging.staging_errors import DirectoryConflict, LinkConflict
from resource_staging.staging_operation import (
    CreateLink,
    EnsureDirectory,
    StagingOperation,
)

logger = logging.getLogger(__name__)


def execute_operations(
    operations: Iterable[StagingOperation], project_root: str | Path
) -> int:
    """Apply operations in order and return how many changed the filesystem.

    Relative paths are resolved against `project_root`. Re-running a plan is
    safe: existing directories and identical links are left alone.
    """
    root = Path(project_root).resolve()
    changed = 0
    for op in operations:
        if isinstance(op, EnsureDirectory):
            directory = root / op.path
            if directory.is_dir():
                continue
            for entry in (directory, *directory.parents):
                if entry.exists() and not entry.is_dir():
                    raise DirectoryConflict(directory, entry)
            directory.mkdir(parents=True, exist_ok=True)
            logger.info("Created directory %s", directory)
            changed += 1
        elif isinstance(op, CreateLink):
            existing = root / op.existing_file
            link = root / op.desired_link
            if link.is_symlink():
                if link.readlink() == existing:
                    continue
                raise LinkConflict(link, existing)
            if link.exists():
                raise LinkConflict(link, existing)
            link.symlink_to(existing)
            logger.info("Linked %s -> %s", link, existing)
            changed += 1
        else:
            msg = f"Unknown staging operation: {op!r}"
            raise TypeError(msg)
    return changed
