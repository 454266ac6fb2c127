"""Data models for stack-inspector."""

from datetime import datetime
from enum import Enum
from pathlib import PurePosixPath, PureWindowsPath
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ── Dependency catalog ───────────────────────────────────────────────────

class PackageReference(BaseModel):
    """A direct package dependency of a project."""

    name: str
    version: str = ""


class TransitiveDependency(BaseModel):
    """A package pulled in indirectly through a direct dependency."""

    package_name: str
    version: str = ""
    source_package: Optional[str] = None  # direct dependency that introduced it
    is_private: bool = False  # PrivateAssets="all", not exposed downstream
    depth: int = Field(default=1, ge=1)  # 1 = dependency of a direct dependency


class ProjectReference(BaseModel):
    """A project-to-project edge inside the repository."""

    project_name: str
    path: str
    is_private: bool = False
    metadata: Optional[str] = None


class ProjectInfo(BaseModel):
    """One build unit discovered in the repository."""

    project_path: str
    project_name: str
    relative_path: str
    target_framework: Optional[str] = None  # "net8.0" or "net8.0;net10.0"
    output_type: Optional[str] = None
    sdk: Optional[str] = None
    nullable_enabled: bool = False
    implicit_usings_enabled: bool = False
    language_version: Optional[str] = None
    package_dependencies: list[PackageReference] = Field(default_factory=list)
    transitive_dependencies: list[TransitiveDependency] = Field(default_factory=list)
    project_references: list[ProjectReference] = Field(default_factory=list)
    generates_documentation: bool = False
    aspnet_hosting_model: Optional[str] = None  # "InProcess" / "OutOfProcess"
    preserve_compilation_context: bool = False
    razor_compile_on_publish: bool = False
    parse_errors: list[str] = Field(default_factory=list)
    total_lines_of_code: int = 0

    @field_validator("relative_path")
    @classmethod
    def _must_be_relative(cls, value: str) -> str:
        if PurePosixPath(value).is_absolute() or PureWindowsPath(value).is_absolute():
            raise ValueError(f"relative_path must not be rooted: {value!r}")
        return value

    @property
    def display_name(self) -> str:
        return f"{self.project_name} ({self.relative_path})"

    @property
    def target_frameworks(self) -> list[str]:
        if not self.target_framework:
            return []
        return [t.strip() for t in self.target_framework.split(";") if t.strip()]

    @property
    def is_multi_targeting(self) -> bool:
        return len(self.target_frameworks) > 1

    @property
    def has_errors(self) -> bool:
        return bool(self.parse_errors)


class PackageInfo(BaseModel):
    """Flattened catalog entry: one package across every consuming project."""

    name: str
    version: str = ""
    is_direct: bool = False
    projects: list[str] = Field(default_factory=list)


class VersionConflict(BaseModel):
    """A package referenced with different versions across projects."""

    name: str
    versions: dict[str, list[str]] = Field(default_factory=dict)  # version -> projects


# ── Classification rules ─────────────────────────────────────────────────

class MatchKind(str, Enum):
    """How a matcher compares a package name to its literal."""

    exact = "exact"
    prefix = "prefix"


class MatchPolicy(str, Enum):
    """How many catalog entries a signature may report."""

    unique = "unique"  # first catalog entry wins
    all_matches = "all_matches"  # every matching entry, one finding each


class PackageMatcher(BaseModel):
    """Case-insensitive exact or prefix test over a package name."""

    model_config = ConfigDict(frozen=True)

    kind: MatchKind = MatchKind.exact
    literal: str

    def matches(self, name: Optional[str]) -> bool:
        if not name:
            return False
        candidate = name.lower()
        literal = self.literal.lower()
        if self.kind is MatchKind.prefix:
            return candidate.startswith(literal)
        return candidate == literal


class FeatureSignature(BaseModel):
    """A named technology recognised by one or more package matchers."""

    model_config = ConfigDict(frozen=True)

    feature: str
    matchers: tuple[PackageMatcher, ...]
    policy: MatchPolicy = MatchPolicy.unique
    description: Optional[str] = None
    documentation_url: Optional[str] = None
    strip_prefix: bool = False  # "AWSSDK.S3" -> "AWS S3"

    def matching(self, name: Optional[str]) -> Optional[PackageMatcher]:
        """Return the first matcher accepting *name*, if any."""
        for matcher in self.matchers:
            if matcher.matches(name):
                return matcher
        return None

    def feature_name(self, package_name: str, matcher: PackageMatcher) -> str:
        if self.strip_prefix and matcher.kind is MatchKind.prefix:
            suffix = package_name[len(matcher.literal):]
            return f"{self.feature} {suffix}".strip() if suffix else self.feature
        return self.feature


class FeatureRule(BaseModel):
    """One detector: a category of signatures with a display priority."""

    model_config = ConfigDict(frozen=True)

    category: str
    display_order: int
    signatures: tuple[FeatureSignature, ...] = ()


# ── Findings ─────────────────────────────────────────────────────────────

class FrameworkFeature(BaseModel):
    """A detected technology usage tied to its source package."""

    name: str
    package: str
    version: str = ""
    category: str = ""
    projects: list[str] = Field(default_factory=list)
    description: Optional[str] = None
    documentation_url: Optional[str] = None

    @property
    def used_in(self) -> list[str]:
        """Consuming projects, deduplicated, in first-seen order."""
        return list(dict.fromkeys(self.projects))


class FeatureCategory(BaseModel):
    """All findings of one rule, ready for presentation."""

    category: str
    display_order: int
    features: list[FrameworkFeature] = Field(default_factory=list)

    @property
    def title(self) -> str:
        return f"{self.category} ({len(self.features)} detected)"


# ── Report sink ──────────────────────────────────────────────────────────

class ReportTable(BaseModel):
    """A header row plus body rows of display strings."""

    headers: list[str] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)

    def add_row(self, *cells: str) -> None:
        self.rows.append([str(c) for c in cells])


class ReportSection(BaseModel):
    """A titled block of tables."""

    title: str
    level: int = 2
    tables: list[ReportTable] = Field(default_factory=list)


# ── Full inspection result ────────────────────────────────────────────────

class InspectionResult(BaseModel):
    """Complete result of a repository inspection."""

    root: str
    generated_at: datetime = Field(default_factory=datetime.now)
    projects: list[ProjectInfo] = Field(default_factory=list)
    packages: list[PackageInfo] = Field(default_factory=list)
    categories: list[FeatureCategory] = Field(default_factory=list)
    summary: dict[str, int] = Field(default_factory=dict)
    sections: list[ReportSection] = Field(default_factory=list)
    version_conflicts: list[VersionConflict] = Field(default_factory=list)

    @property
    def total_features(self) -> int:
        return sum(self.summary.values())

    @property
    def projects_with_errors(self) -> list[ProjectInfo]:
        return [p for p in self.projects if p.has_errors]
