"""Logic for finding the package-relative suffix of a resource path.

A resource's suffix is the part of its path below the most specific source
root. It depends only on the resource path and the configured roots, so the
same resource stages to the same place no matter which directory declared it.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePath

from resource_staging.normalize_path import normalize_path
from resource_staging.relative_suffix import relative_suffix
from resource_staging.source_root_set import SourceRootSet
from resource_staging.staging_errors import NoMatchingSourceRoot

logger = logging.getLogger(__name__)


def resolve_suffix(path: str | PurePath, source_roots: SourceRootSet) -> Path:
    """Return `path` relative to its most specific source root.

    Anchored roots are tried first and the longest match wins; an absolute
    `path` is also compared against each root anchored at `/`. Failing that,
    the nearest enclosing directory named like a source root name is used.
    """
    candidate = normalize_path(path)

    best_root: Path | None = None
    best_suffix: Path | None = None
    for root in source_roots.roots:
        suffix = relative_suffix(candidate, root)
        if suffix is None and candidate.is_absolute():
            # Roots are stored project-relative; "/work/src" also matches as is.
            suffix = relative_suffix(candidate, Path(candidate.anchor) / root)
        if suffix is None:
            continue
        if best_root is None or len(root.parts) > len(best_root.parts):
            best_root, best_suffix = root, suffix

    if best_suffix is not None:
        return best_suffix

    parts = candidate.parts
    # Skip the file name itself; only directories can be roots.
    for index in range(len(parts) - 2, -1, -1):
        if parts[index] in source_roots.names:
            return Path(*parts[index + 1 :])

    raise NoMatchingSourceRoot(candidate, source_roots.roots, source_roots.names)


@dataclass(frozen=True)
class PackageRootResolver:
    """Resolves destination suffixes against an explicit source root set."""

    source_roots: SourceRootSet = field(default_factory=SourceRootSet)
    anchor_to_build_unit: bool = False

    def resolve_suffix(self, path: str | PurePath) -> Path:
        """Resolve against the configured roots only."""
        return resolve_suffix(path, self.source_roots)

    def resolve_destination_suffix(
        self, path: str | PurePath, build_unit_location: str | PurePath
    ) -> Path:
        """Resolve a suffix, falling back to the build unit when allowed.

        The build unit location is only consulted when no source root matches
        and `anchor_to_build_unit` is set.
        """
        try:
            suffix = self.resolve_suffix(path)
        except NoMatchingSourceRoot:
            if not self.anchor_to_build_unit:
                raise
            fallback = relative_suffix(
                normalize_path(path), normalize_path(build_unit_location)
            )
            if fallback is None:
                raise
            logger.debug(
                "No source root for %s; anchoring at build unit %s",
                path,
                build_unit_location,
            )
            return fallback

        logger.debug("Resolved %s -> %s", path, suffix)
        return suffix
