"""Logic for computing stable hashes of staging configuration."""

import hashlib
import json
from typing import Any

from resource_staging.source_root_set import SourceRootSet


def compute_config_hash(config: dict[str, Any]) -> str:
    """Compute a stable hash of the settings that shape staged layouts.

    Source roots are hashed in normalized, sorted form, so `/src/main/` and
    `src/main` produce the same hash.
    """
    roots = SourceRootSet.from_config(
        config.get("source_roots", []), config.get("source_root_names", [])
    )
    canonical = {
        **config,
        "source_roots": sorted(r.as_posix() for r in roots.roots),
        "source_root_names": sorted(roots.names),
    }
    config_json = json.dumps(canonical, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(config_json.encode("utf-8")).hexdigest()
