"""Main Textual TUI application for stack-inspector."""

import threading
from pathlib import Path

from textual.app import App

from stack_inspector.engine import AnalysisCancelled
from stack_inspector.inspector import Inspector
from stack_inspector.logging import get_logger
from stack_inspector.models import InspectionResult
from stack_inspector.screens.home import HomeScreen
from stack_inspector.screens.loading import LoadingScreen
from stack_inspector.screens.results import ResultsScreen

logger = get_logger("app")

REPORT_FILENAME = "stack-inspector-report.md"


class StackInspectorApp(App):
    """TUI application for repository dependency inspection."""

    TITLE = "Stack Inspector"
    SUB_TITLE = "Projects · Packages · Technologies"

    CSS = """
    Screen {
        background: $background;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
    ]

    def __init__(self, initial_path: str = "", **kwargs) -> None:  # type: ignore[no-untyped-def]
        super().__init__(**kwargs)
        self.initial_path = initial_path
        self.result: InspectionResult | None = None

    def on_mount(self) -> None:
        self.push_screen(HomeScreen(initial_path=self.initial_path))

    def run_inspection(self, path: Path) -> None:
        """Kick off the inspection; called from HomeScreen."""
        cancel_event = threading.Event()
        loading = LoadingScreen(cancel_event=cancel_event)
        self.push_screen(loading)

        def _do_work() -> None:
            def on_status(msg: str) -> None:
                self.call_from_thread(loading.update_status, msg)

            try:
                result = Inspector(on_status=on_status).inspect(path, cancel_event=cancel_event)
            except AnalysisCancelled:
                self.call_from_thread(self._show_failure, loading, "Inspection cancelled.")
                return
            except (OSError, ValueError) as e:
                logger.exception("Inspection of %s failed", path)
                self.call_from_thread(self._show_failure, loading, f"❌ {e}")
                return

            self.call_from_thread(self._show_results, loading, result)

        self.run_worker(_do_work, thread=True)

    def _show_results(self, loading: LoadingScreen, result: InspectionResult) -> None:
        """Replace loading screen with results unless the user already went back."""
        if self.screen is not loading:
            return
        self.result = result
        loading.mark_complete()
        self.pop_screen()
        self.push_screen(ResultsScreen(result))

    def _show_failure(self, loading: LoadingScreen, message: str) -> None:
        loading.finished = True
        loading.update_status(message)
        loading.set_hint("Press [b]  b  [/b] to go back and try again.")

    def export_markdown(self, markdown: str) -> Path:
        """Write *markdown* into the inspected root and return the file path."""
        root = Path(self.result.root) if self.result and self.result.root else Path.cwd()
        target = root / REPORT_FILENAME
        target.write_text(markdown, encoding="utf-8")
        return target
