"""Data model for the configured roots of package hierarchies."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path, PurePath

from resource_staging.normalize_path import normalize_path
from resource_staging.staging_errors import AmbiguousSourceRoot

logger = logging.getLogger(__name__)


def _anchor_at_project_root(root: str | PurePath) -> Path:
    # "/android/java/src" is anchored at the project root, not the filesystem.
    normalized = normalize_path(root)
    if normalized.is_absolute():
        return normalize_path(normalized.relative_to(normalized.anchor))
    return normalized


@dataclass(frozen=True)
class SourceRootSet:
    """Project-relative source roots plus bare directory names acting as roots."""

    roots: frozenset[Path] = field(default_factory=frozenset)
    names: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Reject roots that only differ by case."""
        by_folded: dict[tuple[str, ...], set[Path]] = {}
        for root in self.roots:
            key = tuple(part.casefold() for part in root.parts)
            by_folded.setdefault(key, set()).add(root)

        clashes = [r for group in by_folded.values() if len(group) > 1 for r in group]
        if clashes:
            raise AmbiguousSourceRoot(clashes)

        for name in self.names:
            if not name or "/" in name or "\\" in name or name in {".", ".."}:
                msg = f"Source root name must be a single directory name: {name!r}"
                raise ValueError(msg)

    @classmethod
    def from_config(
        cls,
        roots: Iterable[str | PurePath],
        names: Iterable[str] = (),
    ) -> "SourceRootSet":
        """Build a validated set from raw configuration values."""
        normalized: set[Path] = set()
        for raw in roots:
            root = _anchor_at_project_root(raw)
            if root in normalized:
                logger.debug("Collapsed duplicate source root: %s", raw)
            normalized.add(root)
        return cls(roots=frozenset(normalized), names=frozenset(names))

    def __bool__(self) -> bool:
        """Return True when at least one root or root name is configured."""
        return bool(self.roots or self.names)
