"""Logic for generating reports on staged resource layouts."""

import json
import time
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from resource_staging.staging_operation import (
    CreateLink,
    EnsureDirectory,
    StagingOperation,
)


class StagingReport:
    """Collects the staging plans of build units and summarizes them."""

    def __init__(self, config_hash: str, schema_version: int) -> None:
        """Initialize the report with metadata."""
        self.config_hash = config_hash
        self.schema_version = schema_version
        self.units: list[tuple[str, list[StagingOperation]]] = []
        self.start_time = time.time()

    def add_unit(self, label: str, operations: Sequence[StagingOperation]) -> None:
        """Add the plan computed for a single build unit."""
        self.units.append((label, list(operations)))

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "schema_version": self.schema_version,
                "total_units": len(self.units),
                "total_operations": sum(len(ops) for _, ops in self.units),
            },
            "units": [
                {"label": label, "operations": [op.to_dict() for op in ops]}
                for label, ops in self.units
            ],
            "stats": self._compute_stats(),
        }

        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        links_per_unit: dict[str, int] = {}
        directories: set[str] = set()
        repeated_ensures = 0

        for label, ops in self.units:
            seen_in_unit: set[str] = set()
            for op in ops:
                if isinstance(op, CreateLink):
                    links_per_unit[label] = links_per_unit.get(label, 0) + 1
                elif isinstance(op, EnsureDirectory):
                    key = op.path.as_posix()
                    directories.add(key)
                    # Not deduplicated in the plan; counted to show the overhead.
                    if key in seen_in_unit:
                        repeated_ensures += 1
                    seen_in_unit.add(key)

        return {
            "links_per_unit": links_per_unit,
            "distinct_directories": len(directories),
            "repeated_ensure_directory": repeated_ensures,
        }
