"""Structured failures raised while resolving and staging resources."""

from collections.abc import Iterable
from pathlib import Path


def _format_paths(paths: Iterable[Path]) -> str:
    rendered = sorted(p.as_posix() for p in paths)
    return ", ".join(rendered) if rendered else "<none>"


class StagingError(Exception):
    """Base class for every failure that aborts staging of a build unit."""


class NoMatchingSourceRoot(StagingError):
    """No configured source root is an ancestor of a declared resource."""

    def __init__(
        self,
        path: Path,
        roots: Iterable[Path],
        names: Iterable[str] = (),
    ) -> None:
        """Record the unanchored path and the roots that were tried."""
        self.path = path
        self.roots = tuple(sorted(roots, key=lambda p: p.as_posix()))
        self.names = tuple(sorted(names))
        msg = (
            f"No source root matches {path.as_posix()} "
            f"(roots: {_format_paths(self.roots)}; "
            f"names: {', '.join(self.names) or '<none>'})"
        )
        super().__init__(msg)


class AmbiguousSourceRoot(StagingError):
    """Two configured source roots are equally specific for the same paths."""

    def __init__(self, roots: Iterable[Path]) -> None:
        """Record the clashing root spellings."""
        self.roots = tuple(sorted(roots, key=lambda p: p.as_posix()))
        super().__init__(f"Ambiguous source roots: {_format_paths(self.roots)}")


class ResourceOutsideRoot(StagingError):
    """A resource does not live under the explicit resources root."""

    def __init__(self, path: Path, root: Path) -> None:
        """Record the offending resource and the override root."""
        self.path = path
        self.root = root
        super().__init__(
            f"Resource {path.as_posix()} is not under resources root "
            f"{root.as_posix()}"
        )


class DestinationConflict(StagingError):
    """Two distinct resources would be staged at the same destination."""

    def __init__(self, destination: Path, paths: Iterable[Path]) -> None:
        """Record the shared destination and the competing sources."""
        self.destination = destination
        self.paths = tuple(paths)
        super().__init__(
            f"Resources {_format_paths(self.paths)} all stage to "
            f"{destination.as_posix()}"
        )


class DirectoryConflict(StagingError):
    """A directory to ensure, or one of its ancestors, is not a directory."""

    def __init__(self, directory: Path, blocker: Path) -> None:
        """Record the requested directory and the entry in its way."""
        self.directory = directory
        self.blocker = blocker
        super().__init__(
            f"Cannot create directory {directory}: {blocker} exists and is "
            "not a directory"
        )


class LinkConflict(StagingError):
    """The desired link location is occupied by something else."""

    def __init__(self, link: Path, existing: Path) -> None:
        """Record the occupied link path and the file it should point at."""
        self.link = link
        self.existing = existing
        super().__init__(
            f"Cannot link {link} -> {existing}: path exists and is not that link"
        )
