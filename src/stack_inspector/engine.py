"""Classification engine: run every rule over the package catalog.

Rules only read the catalog, so they can run on a thread pool without
locking. Results are joined in display order before grouping and sorting.
"""

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Iterable, Optional, Sequence

from stack_inspector.detectors import DEFAULT_RULES, detect_features
from stack_inspector.logging import get_logger
from stack_inspector.models import FeatureCategory, FeatureRule, FrameworkFeature, PackageInfo

logger = get_logger("engine")


class AnalysisCancelled(Exception):
    """Raised when the cancellation event is set between rule invocations."""


class FeatureDetectorEngine:
    """Coordinates the registered rules and groups their findings by category."""

    def __init__(
        self,
        rules: Optional[Sequence[FeatureRule]] = None,
        max_workers: int = 1,
    ) -> None:
        registered = tuple(DEFAULT_RULES if rules is None else rules)
        if not registered:
            raise ValueError("At least one classification rule is required")
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        # sorted() is stable: equal display orders keep registration order
        self._rules = tuple(sorted(registered, key=lambda r: r.display_order))
        self.max_workers = max_workers

    @property
    def rules(self) -> tuple[FeatureRule, ...]:
        return self._rules

    # ── Rule execution ────────────────────────────────────────────────────

    @staticmethod
    def _run_rule(rule: FeatureRule, packages: list[PackageInfo]) -> list[FrameworkFeature]:
        try:
            return detect_features(rule, packages)
        except Exception as exc:
            logger.warning("Rule '%s' failed, treating as no match: %s", rule.category, exc)
            return []

    @staticmethod
    def _check_cancelled(cancel_event: Optional[threading.Event]) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise AnalysisCancelled("Feature analysis was cancelled")

    def _run_all(
        self,
        packages: Iterable[PackageInfo],
        cancel_event: Optional[threading.Event] = None,
    ) -> list[tuple[FeatureRule, list[FrameworkFeature]]]:
        if packages is None:
            raise TypeError("package catalog must not be None")
        package_list = list(packages)

        if self.max_workers == 1:
            results = []
            for rule in self._rules:
                self._check_cancelled(cancel_event)
                results.append((rule, self._run_rule(rule, package_list)))
            return results

        futures: list[tuple[FeatureRule, Future]] = []
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            try:
                for rule in self._rules:
                    self._check_cancelled(cancel_event)
                    futures.append((rule, executor.submit(self._run_rule, rule, package_list)))
            except AnalysisCancelled:
                for _, future in futures:
                    future.cancel()
                raise
            return [(rule, future.result()) for rule, future in futures]

    # ── Public API ────────────────────────────────────────────────────────

    def analyze_features(
        self,
        packages: Iterable[PackageInfo],
        cancel_event: Optional[threading.Event] = None,
    ) -> list[FeatureCategory]:
        """Return one category per rule with findings, in display order.

        Findings are sorted by name (ordinal) and each finding's project list
        is deduplicated. Rules without findings are omitted.
        """
        categories: list[FeatureCategory] = []
        for rule, features in self._run_all(packages, cancel_event):
            if not features:
                continue
            ordered = sorted(features, key=lambda f: f.name)
            categories.append(
                FeatureCategory(
                    category=rule.category,
                    display_order=rule.display_order,
                    features=[f.model_copy(update={"projects": f.used_in}) for f in ordered],
                )
            )

        logger.debug(
            "Detected %d features in %d categories",
            sum(len(c.features) for c in categories),
            len(categories),
        )
        return categories

    def get_feature_summary(
        self,
        packages: Iterable[PackageInfo],
        cancel_event: Optional[threading.Event] = None,
    ) -> dict[str, int]:
        """Map each category with findings to its finding count."""
        return {
            rule.category: len(features)
            for rule, features in self._run_all(packages, cancel_event)
            if features
        }
