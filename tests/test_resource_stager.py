"""Tests for planning resource staging operations."""

from pathlib import Path

import pytest

from resource_staging.package_root_resolver import PackageRootResolver
from resource_staging.resource_declaration import ResourceDeclaration
from resource_staging.resource_stager import stage
from resource_staging.source_root_set import SourceRootSet
from resource_staging.staging_errors import (
    DestinationConflict,
    NoMatchingSourceRoot,
    ResourceOutsideRoot,
)
from resource_staging.staging_operation import CreateLink, EnsureDirectory

OUTPUT_ROOT = Path("scratch/android/java/lib__resources__classes")
BASE_DATA = "android/java/src/com/facebook/base/data.json"
UTIL_DATA = "android/java/src/com/facebook/common/util/data.json"


@pytest.fixture
def resolver() -> PackageRootResolver:
    """Fixture providing a resolver rooted at android/java/src."""
    return PackageRootResolver(SourceRootSet.from_config(["/android/java/src"]))


def expected_operations() -> list[EnsureDirectory | CreateLink]:
    """Build the plan expected for the two android data files."""
    base = OUTPUT_ROOT / "com/facebook/base/data.json"
    util = OUTPUT_ROOT / "com/facebook/common/util/data.json"
    return [
        EnsureDirectory(base.parent),
        CreateLink(existing_file=Path(BASE_DATA), desired_link=base),
        EnsureDirectory(util.parent),
        CreateLink(existing_file=Path(UTIL_DATA), desired_link=util),
    ]


@pytest.mark.parametrize(
    "build_unit",
    ["android/java", "android/java/src", "android/java/src/com/facebook"],
)
def test_plan_is_independent_of_build_unit_location(
    resolver: PackageRootResolver, build_unit: str
) -> None:
    """Verify the plan for build files above, at, and inside the source root."""
    resources = [
        ResourceDeclaration(Path(BASE_DATA), f"//{build_unit}:resources"),
        ResourceDeclaration(Path(UTIL_DATA), f"//{build_unit}:resources"),
    ]
    ops = stage(resources, build_unit, None, OUTPUT_ROOT, resolver)
    assert ops == expected_operations()


def test_plan_is_deterministic(resolver: PackageRootResolver) -> None:
    """Verify that insertion order does not affect the plan."""
    forward = stage([BASE_DATA, UTIL_DATA], "android/java", None, OUTPUT_ROOT, resolver)
    backward = stage(
        [UTIL_DATA, BASE_DATA], "android/java", None, OUTPUT_ROOT, resolver
    )
    assert forward == backward
    assert [op.describe() for op in forward] == [op.describe() for op in backward]


def test_every_link_is_preceded_by_its_directory(
    resolver: PackageRootResolver,
) -> None:
    """Verify that each CreateLink directly follows an EnsureDirectory of its parent."""
    resources = [
        "android/java/src/z/last.txt",
        UTIL_DATA,
        "android/java/src/top.txt",
        BASE_DATA,
        "android/java/src/com/facebook/base/other.json",
    ]
    ops = stage(resources, "android/java", None, OUTPUT_ROOT, resolver)

    assert len(ops) == 2 * len(resources)
    for index, op in enumerate(ops):
        if isinstance(op, CreateLink):
            assert ops[index - 1] == EnsureDirectory(op.desired_link.parent)


def test_shared_parent_is_not_deduplicated(resolver: PackageRootResolver) -> None:
    """Verify that resources in one directory each get their own EnsureDirectory."""
    resources = [BASE_DATA, "android/java/src/com/facebook/base/other.json"]
    ops = stage(resources, "android/java", None, OUTPUT_ROOT, resolver)
    ensures = [op for op in ops if isinstance(op, EnsureDirectory)]
    assert ensures == [EnsureDirectory(OUTPUT_ROOT / "com/facebook/base")] * 2


def test_override_replaces_source_roots() -> None:
    """Verify that an explicit resources root ignores the configured roots."""
    resolver = PackageRootResolver(SourceRootSet.from_config(["android"]))
    ops = stage(
        [BASE_DATA], "android/java", "android/java/src/com", OUTPUT_ROOT, resolver
    )
    assert ops[1] == CreateLink(
        existing_file=Path(BASE_DATA),
        desired_link=OUTPUT_ROOT / "facebook/base/data.json",
    )


def test_override_works_without_any_source_roots() -> None:
    """Verify that the resolver is not consulted when an override is set."""
    ops = stage(
        [BASE_DATA],
        "android/java",
        "android/java/src",
        OUTPUT_ROOT,
        PackageRootResolver(SourceRootSet()),
    )
    assert ops[1].desired_link == OUTPUT_ROOT / "com/facebook/base/data.json"


def test_resource_outside_override_fails(resolver: PackageRootResolver) -> None:
    """Verify that resources must live under the override root."""
    with pytest.raises(ResourceOutsideRoot) as excinfo:
        stage(
            [BASE_DATA, "android/res/icon.png"],
            "android/java",
            "android/java/src",
            OUTPUT_ROOT,
            resolver,
        )
    assert excinfo.value.path == Path("android/res/icon.png")
    assert excinfo.value.root == Path("android/java/src")


def test_unanchored_resource_aborts_whole_plan(
    resolver: PackageRootResolver,
) -> None:
    """Verify that one unmatched resource fails staging for the whole unit."""
    ops = None
    with pytest.raises(NoMatchingSourceRoot) as excinfo:
        ops = stage(
            [BASE_DATA, "ios/assets/data.json"],
            "android/java",
            None,
            OUTPUT_ROOT,
            resolver,
        )
    assert ops is None
    assert excinfo.value.path == Path("ios/assets/data.json")


def test_colliding_destinations_fail() -> None:
    """Verify that two resources may not stage to the same place."""
    resolver = PackageRootResolver(SourceRootSet.from_config(["a/src", "b/src"]))
    with pytest.raises(DestinationConflict) as excinfo:
        stage(["a/src/x.json", "b/src/x.json"], ".", None, OUTPUT_ROOT, resolver)
    assert excinfo.value.destination == OUTPUT_ROOT / "x.json"
    assert excinfo.value.paths == (Path("a/src/x.json"), Path("b/src/x.json"))


def test_duplicate_declarations_collapse(resolver: PackageRootResolver) -> None:
    """Verify that the same file declared twice is staged once."""
    ops = stage(
        [ResourceDeclaration(Path(BASE_DATA), "//a:r"), BASE_DATA, "./" + BASE_DATA],
        "android/java",
        None,
        OUTPUT_ROOT,
        resolver,
    )
    assert len(ops) == 2


def test_project_root_makes_links_absolute(resolver: PackageRootResolver) -> None:
    """Verify that link targets are absolute when a project root is given."""
    ops = stage(
        [BASE_DATA, "/repo/" + UTIL_DATA],
        "/repo/android/java",
        None,
        OUTPUT_ROOT,
        resolver,
        project_root="/repo",
    )
    links = [op for op in ops if isinstance(op, CreateLink)]
    assert [link.existing_file for link in links] == [
        Path("/repo") / BASE_DATA,
        Path("/repo") / UTIL_DATA,
    ]
    assert links[1].desired_link == OUTPUT_ROOT / "com/facebook/common/util/data.json"


def test_empty_resource_set_yields_empty_plan(
    resolver: PackageRootResolver,
) -> None:
    """Verify that a unit without resources produces no operations."""
    assert stage([], "android/java", None, OUTPUT_ROOT, resolver) == []


def test_absolute_resources_without_project_root() -> None:
    """Verify staging of absolute resources against an absolute source root."""
    resolver = PackageRootResolver(SourceRootSet.from_config(["/work/proj/src"]))
    ops = stage(
        ["/work/proj/src/com/a.txt"], "/work/proj", None, OUTPUT_ROOT, resolver
    )
    assert ops == [
        EnsureDirectory(OUTPUT_ROOT / "com"),
        CreateLink(
            existing_file=Path("/work/proj/src/com/a.txt"),
            desired_link=OUTPUT_ROOT / "com/a.txt",
        ),
    ]
