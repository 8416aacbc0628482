"""Logic for turning project configuration into a root resolver."""

from typing import Any

from resource_staging.package_root_resolver import PackageRootResolver
from resource_staging.source_root_set import SourceRootSet


def build_root_resolver(config: dict[str, Any]) -> PackageRootResolver:
    """Validate the configured source roots and wrap them in a resolver."""
    source_roots = SourceRootSet.from_config(
        config.get("source_roots", []),
        config.get("source_root_names", []),
    )
    return PackageRootResolver(
        source_roots=source_roots,
        anchor_to_build_unit=bool(config.get("anchor_to_build_unit", False)),
    )
