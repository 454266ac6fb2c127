"""Results screen: one tab per detected category plus projects and summary."""

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import (
    DataTable,
    Footer,
    Header,
    Label,
    Markdown,
    Static,
    TabbedContent,
    TabPane,
)

from stack_inspector.models import FrameworkFeature, InspectionResult
from stack_inspector.report import FEATURE_HEADERS, render_markdown


class ResultsScreen(Screen):
    """Main results display."""

    CSS = """
    ResultsScreen {
        layout: vertical;
    }
    #results-header {
        height: 3;
        background: $primary;
        color: $text;
        text-align: center;
        padding: 1 2;
        text-style: bold;
    }
    .section-title {
        text-style: bold;
        margin: 1 0;
        color: $secondary;
    }
    DataTable {
        height: auto;
        max-height: 30;
        margin: 1 0;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("b", "go_back", "Back"),
        ("e", "export", "Export Markdown"),
    ]

    def __init__(self, result: InspectionResult, **kwargs) -> None:  # type: ignore[no-untyped-def]
        super().__init__(**kwargs)
        self.result = result

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield Static(
            f"  📦  {self.result.root}  ·  {len(self.result.projects)} project(s)  ·  "
            f"{self.result.total_features} feature(s)  ",
            id="results-header",
        )

        with TabbedContent():
            with TabPane("📊 Summary"):
                yield from self._compose_summary()
            with TabPane("🏗 Projects"):
                yield from self._compose_projects()
            for category in self.result.categories:
                with TabPane(category.category):
                    yield from self._compose_category(category.title, category.features)

        yield Footer()

    # ── Summary tab ───────────────────────────────────────────────────────

    def _compose_summary(self) -> ComposeResult:
        r = self.result
        with VerticalScroll():
            yield Static("DETECTED TECHNOLOGIES", classes="section-title")
            if not r.summary:
                yield Markdown("> _No known technologies detected._")
            else:
                table = DataTable()
                table.add_columns("Category", "Features")
                for category, count in r.summary.items():
                    table.add_row(category, str(count))
                yield table

            if r.version_conflicts:
                yield Static("VERSION DRIFT", classes="section-title")
                table = DataTable()
                table.add_columns("Package", "Versions")
                for conflict in r.version_conflicts:
                    table.add_row(
                        conflict.name,
                        "  ·  ".join(
                            f"{v} ({', '.join(p)})" for v, p in conflict.versions.items()
                        ),
                    )
                yield table

            errors = r.projects_with_errors
            if errors:
                yield Static("PARSE ERRORS", classes="section-title")
                for project in errors:
                    yield Label(f"⚠️  {project.display_name}: {'; '.join(project.parse_errors)}")

    # ── Projects tab ──────────────────────────────────────────────────────

    def _compose_projects(self) -> ComposeResult:
        with VerticalScroll():
            yield Static("PROJECTS", classes="section-title")
            if not self.result.projects:
                yield Markdown("> _No project files found._")
                return

            table = DataTable()
            table.add_columns(
                "Project", "Target Framework", "Output", "Packages",
                "Transitive", "References", "Lines",
            )
            for p in self.result.projects:
                table.add_row(
                    p.display_name,
                    p.target_framework or "—",
                    p.output_type or "—",
                    str(len(p.package_dependencies)),
                    str(len(p.transitive_dependencies)),
                    str(len(p.project_references)),
                    str(p.total_lines_of_code),
                )
            yield table

    # ── Category tabs ─────────────────────────────────────────────────────

    def _compose_category(self, title: str, features: list[FrameworkFeature]) -> ComposeResult:
        with VerticalScroll():
            yield Static(title.upper(), classes="section-title")
            table = DataTable()
            table.add_columns(*FEATURE_HEADERS)
            for f in features:
                table.add_row(f.name, f.package, f.version or "—", ", ".join(f.used_in))
            yield table
            for f in features:
                if f.description:
                    link = f"  ([docs]({f.documentation_url}))" if f.documentation_url else ""
                    yield Markdown(f"**{f.name}**: {f.description}{link}")

    # ── Actions ───────────────────────────────────────────────────────────

    def action_go_back(self) -> None:
        self.app.pop_screen()

    def action_export(self) -> None:
        """Write the report sections as markdown next to the inspected root."""
        target = self.app.export_markdown(render_markdown(self.result.sections))  # type: ignore[attr-defined]
        self.notify(f"Report written to {target}")
