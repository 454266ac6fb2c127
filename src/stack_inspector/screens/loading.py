"""Loading screen: walks through the inspection phases."""

import threading
from typing import Optional

from textual.app import ComposeResult
from textual.containers import Center, Vertical
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Footer, Header, Label, ProgressBar, Static

# (status message prefix emitted by Inspector, checklist label)
PHASES: list[tuple[str, str]] = [
    ("Discovering", "Scan project files"),
    ("Building", "Build package catalog"),
    ("Classifying", "Classify packages"),
    ("Assembling", "Assemble report"),
]


def phase_index(message: str) -> Optional[int]:
    """Return the phase a status message opens, or None for an in-phase message."""
    for i, (prefix, _) in enumerate(PHASES):
        if message.startswith(prefix):
            return i
    return None


def render_checklist(current: int, done: bool = False) -> str:
    lines = []
    for i, (_, label) in enumerate(PHASES):
        if done or i < current:
            mark = "[green]✓[/green]"
        elif i == current:
            mark = "[bold]▶[/bold]"
        else:
            mark = "[dim]·[/dim]"
        lines.append(f"{mark} {label}")
    return "\n".join(lines)


class LoadingScreen(Screen):
    """Shows which phase the inspection is in; Escape requests cancellation."""

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        ("b", "go_back", "Back"),
    ]

    CSS = """
    LoadingScreen {
        align: center middle;
    }
    #loading-container {
        width: 64;
        height: auto;
        padding: 1 3;
        border: round $primary;
        background: $surface;
    }
    #loading-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }
    #phase-list {
        margin: 0 2 1 2;
    }
    #status-label {
        color: $text-muted;
    }
    #hint-label {
        text-align: center;
        color: $warning;
    }
    """

    def __init__(self, cancel_event: Optional[threading.Event] = None, **kwargs) -> None:  # type: ignore[no-untyped-def]
        super().__init__(**kwargs)
        self.cancel_event = cancel_event
        self.current_phase = 0
        self.finished = False

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Center():
            with Vertical(id="loading-container"):
                yield Static("🔍  Inspecting Projects", id="loading-title")
                yield Static(render_checklist(0), id="phase-list")
                yield ProgressBar(total=len(PHASES), show_eta=False, id="progress-bar")
                yield Label("", id="status-label")
                yield Label("", id="hint-label")
        yield Footer()

    def update_status(self, message: str) -> None:
        """Advance the checklist when *message* opens a new phase."""
        index = phase_index(message)
        if index is not None:
            self.current_phase = index
        try:
            self.query_one("#phase-list", Static).update(render_checklist(self.current_phase))
            self.query_one("#progress-bar", ProgressBar).update(progress=self.current_phase)
            self.query_one("#status-label", Label).update(message)
        except NoMatches:
            pass

    def mark_complete(self) -> None:
        self.finished = True
        try:
            self.query_one("#phase-list", Static).update(render_checklist(len(PHASES), done=True))
            self.query_one("#progress-bar", ProgressBar).update(progress=len(PHASES))
        except NoMatches:
            pass

    def set_hint(self, hint: str) -> None:
        try:
            self.query_one("#hint-label", Label).update(hint)
        except NoMatches:
            pass

    def action_cancel(self) -> None:
        """Ask the running inspection to stop before its next rule."""
        if self.cancel_event is None or self.finished:
            return
        self.cancel_event.set()
        self.set_hint("Cancelling …")

    def action_go_back(self) -> None:
        """Return to the home screen, cancelling a run still in progress."""
        if self.cancel_event is not None and not self.finished:
            self.cancel_event.set()
        self.app.pop_screen()
