"""Logic for planning where a build unit's resources are staged.

`stage` is a pure function: it performs no I/O and returns the complete list
of operations or raises, never a partial plan.
"""

import logging
from collections.abc import Iterable
from pathlib import Path, PurePath

from resource_staging.normalize_path import normalize_path, project_relative
from resource_staging.package_root_resolver import PackageRootResolver
from resource_staging.relative_suffix import relative_suffix
from resource_staging.resource_declaration import ResourceDeclaration
from resource_staging.staging_errors import DestinationConflict, ResourceOutsideRoot
from resource_staging.staging_operation import (
    CreateLink,
    EnsureDirectory,
    StagingOperation,
)

logger = logging.getLogger(__name__)

ResourceInput = ResourceDeclaration | str | PurePath


def _source_paths(
    resources: Iterable[ResourceInput], project_root: str | PurePath | None
) -> list[Path]:
    """Return unique, project-relative source paths in staging order."""
    unique: set[Path] = set()
    for resource in resources:
        raw = resource.path if isinstance(resource, ResourceDeclaration) else resource
        path = project_relative(raw, project_root)
        if path in unique:
            logger.debug("Collapsed duplicate resource: %s", raw)
        unique.add(path)
    return sorted(unique, key=lambda p: p.as_posix())


def stage(
    resources: Iterable[ResourceInput],
    build_unit_location: str | PurePath,
    resources_root: str | PurePath | None,
    output_root: str | PurePath,
    root_resolver: PackageRootResolver,
    *,
    project_root: str | PurePath | None = None,
) -> list[StagingOperation]:
    """Plan the operations that stage `resources` under `output_root`.

    Each resource yields an `EnsureDirectory` for its destination's parent
    immediately followed by the `CreateLink` that places it there. Resources
    are processed in ascending path order.

    With `resources_root` set, destinations mirror the path below that root
    and `root_resolver` is not consulted. Otherwise the resolver's source
    roots decide, so the result does not depend on `build_unit_location`
    unless the resolver is allowed to anchor at the build unit.
    """
    output = normalize_path(output_root)
    override = (
        project_relative(resources_root, project_root)
        if resources_root is not None
        else None
    )

    anchor = project_relative(build_unit_location, project_root)

    operations: list[StagingOperation] = []
    staged: dict[Path, Path] = {}
    for path in _source_paths(resources, project_root):
        if override is not None:
            suffix = relative_suffix(path, override)
            if suffix is None:
                raise ResourceOutsideRoot(path, override)
        else:
            suffix = root_resolver.resolve_destination_suffix(path, anchor)

        destination = output / suffix
        if destination in staged:
            raise DestinationConflict(destination, (staged[destination], path))
        staged[destination] = path

        existing = Path(project_root) / path if project_root is not None else path
        operations.append(EnsureDirectory(destination.parent))
        operations.append(CreateLink(existing_file=existing, desired_link=destination))

    return operations
