"""Package catalog: flatten per-project dependencies into one entry per package."""

from collections import defaultdict
from typing import Iterable

from stack_inspector.models import PackageInfo, ProjectInfo, VersionConflict


def _iter_packages(project: ProjectInfo) -> Iterable[tuple[str, str, bool]]:
    """Yield (name, version, is_direct) for a project, direct references first."""
    for ref in project.package_dependencies:
        yield ref.name, ref.version, True
    for dep in project.transitive_dependencies:
        yield dep.package_name, dep.version, False


def build_package_catalog(projects: list[ProjectInfo]) -> list[PackageInfo]:
    """Merge every project's direct and transitive packages.

    Names are unique case-insensitively. The first spelling and version seen
    win; consuming projects are unioned in first-seen order. A package is
    direct when any project references it directly.
    """
    if projects is None:
        raise TypeError("projects must not be None")

    entries: dict[str, PackageInfo] = {}
    for project in projects:
        for name, version, is_direct in _iter_packages(project):
            if not name:
                continue
            key = name.lower()
            entry = entries.get(key)
            if entry is None:
                entry = PackageInfo(name=name, version=version or "", is_direct=is_direct)
                entries[key] = entry
            elif is_direct:
                entry.is_direct = True
            if project.project_name not in entry.projects:
                entry.projects.append(project.project_name)

    return list(entries.values())


def find_version_conflicts(projects: list[ProjectInfo]) -> list[VersionConflict]:
    """Report packages whose version differs between projects."""
    seen: dict[str, str] = {}
    versions: dict[str, dict[str, list[str]]] = defaultdict(dict)

    for project in projects:
        for name, version, _ in _iter_packages(project):
            if not name or not version:
                continue
            key = name.lower()
            seen.setdefault(key, name)
            users = versions[key].setdefault(version, [])
            if project.project_name not in users:
                users.append(project.project_name)

    conflicts = [
        VersionConflict(name=seen[key], versions=by_version)
        for key, by_version in versions.items()
        if len(by_version) > 1
    ]
    conflicts.sort(key=lambda c: c.name.lower())
    return conflicts


def project_reference_graph(projects: list[ProjectInfo]) -> dict[str, list[str]]:
    """Map each project name to the names of the projects it references."""
    graph: dict[str, list[str]] = {}
    for project in projects:
        targets = graph.setdefault(project.project_name, [])
        for ref in project.project_references:
            if ref.project_name not in targets:
                targets.append(ref.project_name)
    return graph
