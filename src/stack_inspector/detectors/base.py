"""Shared matcher helpers and the scan routine used by every rule."""

from typing import Iterable, Optional

from stack_inspector.models import (
    FeatureRule,
    FeatureSignature,
    FrameworkFeature,
    MatchKind,
    MatchPolicy,
    PackageInfo,
    PackageMatcher,
)


def exact(literal: str) -> PackageMatcher:
    return PackageMatcher(kind=MatchKind.exact, literal=literal)


def prefix(literal: str) -> PackageMatcher:
    return PackageMatcher(kind=MatchKind.prefix, literal=literal)


def signature(
    feature: str,
    *matchers: PackageMatcher,
    description: Optional[str] = None,
    documentation_url: Optional[str] = None,
    policy: MatchPolicy = MatchPolicy.unique,
    strip_prefix: bool = False,
) -> FeatureSignature:
    """Build a signature; matchers are alternatives tried in order."""
    return FeatureSignature(
        feature=feature,
        matchers=matchers,
        policy=policy,
        description=description,
        documentation_url=documentation_url,
        strip_prefix=strip_prefix,
    )


def _to_feature(
    rule: FeatureRule,
    sig: FeatureSignature,
    matcher: PackageMatcher,
    package: PackageInfo,
) -> FrameworkFeature:
    name = package.name
    return FrameworkFeature(
        name=sig.feature_name(name, matcher),
        package=name,
        version=getattr(package, "version", None) or "",
        category=rule.category,
        projects=list(getattr(package, "projects", None) or []),
        description=sig.description,
        documentation_url=sig.documentation_url,
    )


def detect_features(
    rule: FeatureRule, packages: Iterable[PackageInfo]
) -> list[FrameworkFeature]:
    """Apply every signature of *rule* to the catalog, in signature order.

    ``unique`` signatures report the first catalog entry that satisfies any of
    their matchers; ``all_matches`` signatures report every satisfying entry.
    The catalog is only read.
    """
    package_list = list(packages)
    features: list[FrameworkFeature] = []

    for sig in rule.signatures:
        for package in package_list:
            matcher = sig.matching(getattr(package, "name", None))
            if matcher is None:
                continue
            features.append(_to_feature(rule, sig, matcher, package))
            if sig.policy is MatchPolicy.unique:
                break

    return features
