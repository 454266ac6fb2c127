"""Project-file scanning: turn *.csproj files into ProjectInfo records."""

import json
import xml.etree.ElementTree as ET
from collections import deque
from pathlib import Path
from typing import Optional, Union

import git  # GitPython

from stack_inspector.logging import get_logger
from stack_inspector.models import (
    PackageReference,
    ProjectInfo,
    ProjectReference,
    TransitiveDependency,
)

logger = get_logger("scanner")

# project file extension -> source file extension counted for lines of code
PROJECT_EXTENSIONS: dict[str, str] = {
    ".csproj": ".cs",
    ".fsproj": ".fs",
    ".vbproj": ".vb",
}

SKIP_DIRS = {".git", "bin", "obj", "node_modules", "packages", ".vs", ".idea"}


def find_repository_root(path: Path) -> Path:
    """Return the enclosing git working tree, or *path* itself outside of git."""
    try:
        repo = git.Repo(path, search_parent_directories=True)
    except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError):
        return path
    working_tree = repo.working_tree_dir
    return Path(working_tree).resolve() if working_tree else path


def _local(tag: str) -> str:
    """Strip an XML namespace from a tag name."""
    return tag.rsplit("}", 1)[-1]


def _is_true(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("true", "enable", "enabled")


def _is_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() == "true"


def _is_all(value: Optional[str]) -> bool:
    return (value or "").strip().lower() == "all"


def _item_value(element: ET.Element, name: str) -> Optional[str]:
    """Read item metadata given either as an attribute or a child element."""
    value = element.get(name)
    if value is not None:
        return value
    for child in element:
        if _local(child.tag) == name:
            return (child.text or "").strip()
    return None


class ProjectScanner:
    """Discovers and parses project files under a directory."""

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root).resolve()
        self.repository_root = find_repository_root(self.root)

    # ── Discovery ─────────────────────────────────────────────────────────

    def find_project_files(self) -> list[Path]:
        """Return project files below the root, skipping build output and VCS folders."""
        if not self.root.is_dir():
            return []
        found: list[Path] = []
        for p in self.root.rglob("*"):
            if not p.is_file() or p.suffix.lower() not in PROJECT_EXTENSIONS:
                continue
            rel_parts = p.relative_to(self.root).parts[:-1]
            if any(part in SKIP_DIRS or part.startswith(".") for part in rel_parts):
                continue
            found.append(p)
        return sorted(found)

    def scan(self) -> list[ProjectInfo]:
        """Parse every discovered project; failures are recorded per project."""
        projects = [self.parse_project(p) for p in self.find_project_files()]
        logger.info("Scanned %d project(s) under %s", len(projects), self.root)
        return projects

    # ── Parsing ───────────────────────────────────────────────────────────

    def _relative(self, path: Path) -> str:
        try:
            return path.relative_to(self.repository_root).as_posix()
        except ValueError:
            return path.relative_to(self.root).as_posix()

    def parse_project(self, path: Path) -> ProjectInfo:
        """Build a ProjectInfo from one project file.

        Unreadable or malformed inputs are recorded in ``parse_errors``; the
        project is still returned with whatever could be read.
        """
        path = path.resolve()
        project = ProjectInfo(
            project_path=str(path),
            project_name=path.stem,
            relative_path=self._relative(path),
        )

        try:
            root = ET.fromstring(path.read_text(encoding="utf-8-sig", errors="replace"))
        except OSError as exc:
            logger.warning("Could not read %s: %s", path, exc)
            project.parse_errors.append(f"Read error: {exc}")
            return project
        except ET.ParseError as exc:
            logger.warning("Could not parse %s: %s", path, exc)
            project.parse_errors.append(f"XML parse error: {exc}")
            return project

        project.sdk = root.get("Sdk")
        self._read_properties(root, project)

        private_packages: set[str] = set()
        by_name: dict[str, PackageReference] = {}
        for element in root.iter():
            tag = _local(element.tag)
            if tag == "PackageReference":
                include = element.get("Include")
                if include:
                    ref = PackageReference(name=include, version=_item_value(element, "Version") or "")
                    project.package_dependencies.append(ref)
                    by_name.setdefault(include.lower(), ref)
                    name = include
                else:
                    # Update only amends an item included earlier
                    ref = by_name.get((element.get("Update") or "").lower())
                    if ref is None:
                        continue
                    ref.version = _item_value(element, "Version") or ref.version
                    name = ref.name
                if _is_all(_item_value(element, "PrivateAssets")):
                    private_packages.add(name.lower())
            elif tag == "ProjectReference":
                include = element.get("Include")
                if include:
                    project.project_references.append(_project_reference(element, include))

        self._read_transitive(path, project, private_packages)
        project.total_lines_of_code = _count_lines(
            path.parent, PROJECT_EXTENSIONS.get(path.suffix.lower(), ".cs")
        )
        return project

    @staticmethod
    def _read_properties(root: ET.Element, project: ProjectInfo) -> None:
        props: dict[str, str] = {}
        for group in root:
            if _local(group.tag) != "PropertyGroup":
                continue
            for prop in group:
                name = _local(prop.tag)
                # first definition wins, later groups are usually conditional
                props.setdefault(name, (prop.text or "").strip())

        project.target_framework = props.get("TargetFrameworks") or props.get("TargetFramework") or None
        project.output_type = props.get("OutputType") or None
        project.nullable_enabled = _is_true(props.get("Nullable"))
        project.implicit_usings_enabled = _is_true(props.get("ImplicitUsings"))
        project.language_version = props.get("LangVersion") or None
        project.generates_documentation = _is_true(props.get("GenerateDocumentationFile"))
        project.aspnet_hosting_model = props.get("AspNetCoreHostingModel") or None
        project.preserve_compilation_context = _is_flag(props.get("PreserveCompilationContext"))
        project.razor_compile_on_publish = _is_flag(props.get("MvcRazorCompileOnPublish"))

    def _read_transitive(
        self, path: Path, project: ProjectInfo, private_packages: set[str]
    ) -> None:
        assets_file = path.parent / "obj" / "project.assets.json"
        if not assets_file.is_file():
            return
        try:
            assets = json.loads(assets_file.read_text(encoding="utf-8-sig"))
            resolved = resolve_transitive(assets, project.package_dependencies, private_packages)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s: %s", assets_file, exc)
            project.parse_errors.append(f"Assets file error: {exc}")
            return

        project.transitive_dependencies.extend(resolved)


def _project_reference(element: ET.Element, include: str) -> ProjectReference:
    normalized = include.replace("\\", "/")
    extras = [
        f"{_local(k)}={v}" for k, v in element.attrib.items() if k not in ("Include", "PrivateAssets")
    ]
    extras.extend(
        f"{_local(child.tag)}={(child.text or '').strip()}"
        for child in element
        if _local(child.tag) != "PrivateAssets"
    )
    return ProjectReference(
        project_name=Path(normalized).stem,
        path=normalized,
        is_private=_is_all(_item_value(element, "PrivateAssets")),
        metadata="; ".join(extras) or None,
    )


def resolve_transitive(
    assets: dict,
    direct: list[PackageReference],
    private_packages: Optional[set[str]] = None,
) -> list[TransitiveDependency]:
    """Walk the restore graph breadth-first from the direct references.

    Only the first target framework is read. Each package is reported once at
    its shallowest depth, attributed to the direct reference that reached it
    first. Privacy is inherited from that direct reference.

    Raises ValueError when the document does not have the restore-graph shape.
    """
    private_packages = private_packages or set()
    if not isinstance(assets, dict):
        raise ValueError("assets document is not a JSON object")
    targets = assets.get("targets")
    if targets is None:
        return []
    if not isinstance(targets, dict):
        raise ValueError("'targets' is not a JSON object")
    if not targets:
        return []
    target_name, first_target = next(iter(targets.items()))
    first_target = first_target or {}
    if not isinstance(first_target, dict):
        raise ValueError(f"target {target_name!r} is not a JSON object")

    graph: dict[str, tuple[str, str, list[str]]] = {}
    for key, info in first_target.items():
        if not isinstance(info, dict):
            raise ValueError(f"entry {key!r} is not a JSON object")
        if info.get("type", "package") != "package":
            continue
        dependencies = info.get("dependencies") or {}
        if not isinstance(dependencies, dict):
            raise ValueError(f"dependencies of {key!r} are not a JSON object")
        name, _, version = key.partition("/")
        graph[name.lower()] = (name, version, list(dependencies))

    direct_names = {ref.name.lower() for ref in direct}
    seen: set[str] = set(direct_names)
    queue: deque[tuple[str, str, int]] = deque()
    for ref in direct:
        node = graph.get(ref.name.lower())
        if node:
            for dep in node[2]:
                queue.append((dep, ref.name, 1))

    result: list[TransitiveDependency] = []
    while queue:
        dep_name, source, depth = queue.popleft()
        key = dep_name.lower()
        if key in seen:
            continue
        seen.add(key)
        name, version, children = graph.get(key, (dep_name, "", []))
        result.append(
            TransitiveDependency(
                package_name=name,
                version=version,
                source_package=source,
                is_private=source.lower() in private_packages,
                depth=depth,
            )
        )
        for child in children:
            queue.append((child, source, depth + 1))
    return result


def _count_lines(directory: Path, extension: str) -> int:
    """Count non-blank lines in source files below *directory*.

    Subdirectories holding their own project file belong to that project and
    are not counted.
    """
    nested = {
        p.parent
        for p in directory.rglob("*")
        if p.suffix.lower() in PROJECT_EXTENSIONS and p.parent != directory and p.is_file()
    }
    total = 0
    for p in directory.rglob(f"*{extension}"):
        rel_parts = p.relative_to(directory).parts[:-1]
        if not p.is_file() or any(part in SKIP_DIRS for part in rel_parts):
            continue
        if any(parent in nested for parent in p.parents):
            continue
        try:
            text = p.read_text(encoding="utf-8", errors="replace")
        except OSError:
            continue
        total += sum(1 for line in text.splitlines() if line.strip())
    return total
