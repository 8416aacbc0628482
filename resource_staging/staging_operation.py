"""Data models for the filesystem operations that realize a staged layout."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class EnsureDirectory:
    """Create `path` and any missing ancestors; no-op when it already exists."""

    path: Path

    def describe(self) -> str:
        """Render the operation as a shell-like command line."""
        return f"mkdir -p {self.path.as_posix()}"

    def to_dict(self) -> dict[str, str]:
        """Serialize for reports."""
        return {"op": "ensure_directory", "path": self.path.as_posix()}


@dataclass(frozen=True)
class CreateLink:
    """Create a symbolic link at `desired_link` pointing at `existing_file`."""

    existing_file: Path
    desired_link: Path

    def describe(self) -> str:
        """Render the operation as a shell-like command line."""
        return f"ln -s {self.existing_file.as_posix()} {self.desired_link.as_posix()}"

    def to_dict(self) -> dict[str, str]:
        """Serialize for reports."""
        return {
            "op": "create_link",
            "existing_file": self.existing_file.as_posix(),
            "desired_link": self.desired_link.as_posix(),
        }


StagingOperation = EnsureDirectory | CreateLink
