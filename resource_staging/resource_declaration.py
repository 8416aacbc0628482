"""Data model for a resource declared by a build unit."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ResourceDeclaration:
    """A resource file and the label of the build unit that declared it."""

    path: Path
    declared_by: str = ""
