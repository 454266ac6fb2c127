"""Inspection pipeline.

Scans a repository for project files, flattens their dependencies into a
package catalog, classifies it, and assembles report sections.
"""

import os
import threading
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from stack_inspector.catalog import build_package_catalog, find_version_conflicts
from stack_inspector.engine import FeatureDetectorEngine
from stack_inspector.logging import get_logger
from stack_inspector.models import FeatureRule, InspectionResult, ProjectInfo
from stack_inspector.report import build_feature_sections, build_framework_section
from stack_inspector.scanner import ProjectScanner

logger = get_logger("inspector")

MAX_WORKERS_ENV = "STACK_INSPECTOR_MAX_WORKERS"


def _workers_from_env() -> int:
    raw = os.environ.get(MAX_WORKERS_ENV, "").strip()
    if not raw:
        return 1
    try:
        return max(int(raw), 1)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r", MAX_WORKERS_ENV, raw)
        return 1


class Inspector:
    """End-to-end dependency inspection of a local repository."""

    def __init__(
        self,
        max_workers: Optional[int] = None,
        rules: Optional[Sequence[FeatureRule]] = None,
        on_status: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.max_workers = max_workers if max_workers is not None else _workers_from_env()
        self._engine = FeatureDetectorEngine(rules=rules, max_workers=self.max_workers)
        self._on_status = on_status or (lambda _: None)

    @property
    def engine(self) -> FeatureDetectorEngine:
        return self._engine

    def _status(self, msg: str) -> None:
        self._on_status(msg)

    # ── Pipeline ──────────────────────────────────────────────────────────

    def inspect(
        self,
        path: Union[str, Path],
        cancel_event: Optional[threading.Event] = None,
    ) -> InspectionResult:
        """Scan *path* and classify everything found below it."""
        self._status("Discovering project files …")
        scanner = ProjectScanner(path)
        projects = scanner.scan()
        self._status(f"Parsed {len(projects)} project(s)")
        return self.inspect_projects(projects, root=str(scanner.root), cancel_event=cancel_event)

    def inspect_projects(
        self,
        projects: list[ProjectInfo],
        root: str = "",
        cancel_event: Optional[threading.Event] = None,
    ) -> InspectionResult:
        """Classify an already populated project list."""
        if projects is None:
            raise TypeError("projects must not be None")

        self._status("Building package catalog …")
        packages = build_package_catalog(projects)
        conflicts = find_version_conflicts(projects)
        if conflicts:
            logger.info("%d package(s) have diverging versions across projects", len(conflicts))

        self._status(f"Classifying {len(packages)} package(s) …")
        categories = self._engine.analyze_features(packages, cancel_event=cancel_event)
        summary = {c.category: len(c.features) for c in categories}

        self._status("Assembling report …")
        sections = [build_framework_section(projects)] if projects else []
        sections.extend(build_feature_sections(categories))

        for project in projects:
            for error in project.parse_errors:
                logger.warning("%s: %s", project.display_name, error)

        return InspectionResult(
            root=root,
            projects=projects,
            packages=packages,
            categories=categories,
            summary=summary,
            sections=sections,
            version_conflicts=conflicts,
        )
