"""Stage a build unit's resources under an output directory.

Resolves where each resource belongs in the package hierarchy, then either
prints the planned operations (`--dry-run`) or links the files into place.
"""

import argparse
import logging
import sys
from pathlib import Path

from resource_staging.build_root_resolver import build_root_resolver
from resource_staging.compute_config_hash import compute_config_hash
from resource_staging.execute_operations import execute_operations
from resource_staging.load_config import load_config
from resource_staging.resource_declaration import ResourceDeclaration
from resource_staging.resource_stager import stage
from resource_staging.staging_errors import StagingError
from resource_staging.staging_report import StagingReport

logger = logging.getLogger(__name__)


def run_staging(args: argparse.Namespace) -> int:
    """Plan, report and (unless dry-running) execute staging for one unit."""
    config = load_config(args.config, extra_roots=args.source_root)

    resolver = build_root_resolver(config)
    if not resolver.source_roots and args.resources_root is None:
        logger.warning("No source roots configured; every resource will fail")

    project_root = args.project_root.resolve()
    label = args.label or f"//{Path(args.build_unit).as_posix()}"
    declarations = [ResourceDeclaration(Path(r), label) for r in args.resources]

    operations = stage(
        declarations,
        args.build_unit,
        args.resources_root,
        args.output_root,
        resolver,
        project_root=project_root,
    )

    if args.report:
        report = StagingReport(
            compute_config_hash(config), config["report_schema_version"]
        )
        report.add_unit(label, operations)
        report.generate_report(args.report)

    if args.dry_run:
        for op in operations:
            print(op.describe())
        return 0

    changed = execute_operations(operations, project_root)
    print(
        f"Staged {len(declarations)} resources into: {args.output_root} "
        f"({changed} filesystem changes)"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run staging."""
    ap = argparse.ArgumentParser(
        description="Link resources into a package-mirroring output directory.",
    )
    ap.add_argument(
        "resources",
        nargs="+",
        type=Path,
        help="Resource files, relative to the project root",
    )
    ap.add_argument(
        "--output-root",
        required=True,
        type=Path,
        help="Staging directory for this build unit's resources",
    )
    ap.add_argument(
        "--resources-root",
        type=Path,
        default=None,
        help="Stage paths relative to this directory instead of source roots",
    )
    ap.add_argument(
        "--build-unit",
        type=Path,
        default=Path("."),
        help="Directory of the declaring build file (default: project root)",
    )
    ap.add_argument(
        "--label",
        default=None,
        help="Build unit label used in reports (default: //<build-unit>)",
    )
    ap.add_argument(
        "--project-root",
        type=Path,
        default=Path("."),
        help="Project root that relative paths are resolved against",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--source-root",
        action="append",
        default=[],
        help="Additional source root (repeatable)",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the planned operations without touching the filesystem",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON staging report to this path",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return run_staging(args)
    except StagingError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
