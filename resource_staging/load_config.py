"""Logic for loading and merging configuration files."""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from resource_staging.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "source_roots": [],
    "source_root_names": [],
    "anchor_to_build_unit": False,
    "report_schema_version": 1,
}


def load_config(
    path: str | None = None, extra_roots: Iterable[str] = ()
) -> dict[str, Any]:
    """Load staging configuration layered as defaults < YAML file < extra roots.

    `extra_roots` (e.g. from the command line) are added to the configured
    source roots rather than replacing them. A missing file is ignored.
    """
    config = DEFAULT_CONFIG.copy()
    if path and Path(path).is_file():
        with Path(path).open(encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}
        if not isinstance(user_config, dict):
            msg = f"Staging config must be a mapping: {path}"
            raise ValueError(msg)
        config = deep_merge(config, user_config)

    roots = [str(r) for r in extra_roots]
    if roots:
        config = deep_merge(config, {"source_roots": roots})
    return config
