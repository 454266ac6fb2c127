"""Report assembly: project findings and project metadata into tables."""

from stack_inspector.models import (
    FeatureCategory,
    ProjectInfo,
    ReportSection,
    ReportTable,
)

FEATURE_HEADERS = ["Feature", "Package", "Version", "Used In"]
FRAMEWORK_HEADERS = ["Project", "Target Framework", "SDK", "Features"]

_DEFAULT_SDK = "Microsoft.NET.Sdk"

# (feature, literal, is_prefix) checked against a project's direct references
_TESTING_MARKERS: list[tuple[str, str, bool]] = [
    ("xUnit", "xunit", True),
    ("NUnit", "nunit", True),
    ("MSTest", "mstest", True),
    ("Moq", "moq", False),
    ("FluentAssertions", "fluentassertions", False),
]


def build_feature_sections(categories: list[FeatureCategory]) -> list[ReportSection]:
    """One section per category, rows in the order the engine produced."""
    sections: list[ReportSection] = []
    for category in categories:
        table = ReportTable(headers=list(FEATURE_HEADERS))
        for feature in category.features:
            table.add_row(
                feature.name,
                feature.package,
                feature.version,
                ", ".join(feature.used_in),
            )
        sections.append(ReportSection(title=category.title, level=2, tables=[table]))
    return sections


def _project_features(project: ProjectInfo) -> list[str]:
    features: list[str] = []
    if project.is_multi_targeting:
        features.append("Multi-targeting")
    if project.aspnet_hosting_model:
        features.append(f"Hosting:{project.aspnet_hosting_model}")
    if project.preserve_compilation_context:
        features.append("RuntimeCompilation")
    if project.razor_compile_on_publish:
        features.append("RazorPrecompile")

    names = [ref.name.lower() for ref in project.package_dependencies if ref.name]
    for label, literal, is_prefix in _TESTING_MARKERS:
        if is_prefix:
            hit = any(n.startswith(literal) for n in names)
        else:
            hit = literal in names
        if hit:
            features.append(label)
    return features


def build_framework_section(projects: list[ProjectInfo]) -> ReportSection:
    """Target framework, SDK and notable features for every project."""
    table = ReportTable(headers=list(FRAMEWORK_HEADERS))
    for project in projects:
        sdk = project.sdk or ""
        table.add_row(
            project.project_name,
            project.target_framework or "Unknown",
            "" if sdk == _DEFAULT_SDK else sdk,
            ", ".join(_project_features(project)),
        )
    return ReportSection(title="Framework Analysis", level=2, tables=[table])


def _escape(cell: str) -> str:
    return cell.replace("|", "\\|")


def render_markdown(sections: list[ReportSection]) -> str:
    """Render sections as markdown headings followed by pipe tables."""
    lines: list[str] = []
    for section in sections:
        lines.append(f"{'#' * max(section.level, 1)} {section.title}")
        lines.append("")
        for table in section.tables:
            lines.append("| " + " | ".join(_escape(h) for h in table.headers) + " |")
            lines.append("|" + "|".join("---" for _ in table.headers) + "|")
            for row in table.rows:
                lines.append("| " + " | ".join(_escape(c) for c in row) + " |")
            lines.append("")
    return "\n".join(lines).rstrip() + "\n" if lines else ""
