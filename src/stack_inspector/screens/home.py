"""Home screen: repository path input."""

from pathlib import Path

from textual import on
from textual.app import ComposeResult
from textual.containers import Center, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Label, Static


class HomeScreen(Screen):
    """Initial screen to collect the directory to inspect."""

    CSS = """
    HomeScreen {
        align: center middle;
    }
    #home-container {
        width: 72;
        height: auto;
        padding: 1 4;
        border: round $primary;
        background: $surface;
    }
    #title {
        text-align: center;
        color: $accent;
        text-style: bold;
    }
    #subtitle {
        text-align: center;
        color: $text-muted;
        margin-bottom: 2;
    }
    .field-label {
        margin-top: 1;
        color: $text;
    }
    #start-btn {
        margin-top: 2;
        width: 100%;
    }
    #error-label {
        color: $error;
        text-align: center;
        margin-top: 1;
    }
    """

    def __init__(self, initial_path: str = "", **kwargs) -> None:  # type: ignore[no-untyped-def]
        super().__init__(**kwargs)
        self.initial_path = initial_path or str(Path.cwd())

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Center():
            with Vertical(id="home-container"):
                yield Static("📦  Stack Inspector", id="title")
                yield Static(
                    "Projects · Packages · Technologies",
                    id="subtitle",
                )
                yield Label("Repository directory:", classes="field-label")
                yield Input(value=self.initial_path, id="path-input")
                yield Button("▶  Start Inspection", id="start-btn", variant="primary")
                yield Label("", id="error-label")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#path-input", Input).focus()

    @on(Button.Pressed, "#start-btn")
    def start_inspection(self) -> None:
        path_input = self.query_one("#path-input", Input)
        error_label = self.query_one("#error-label", Label)

        raw = path_input.value.strip()
        if not raw:
            error_label.update("⚠  Enter a directory to inspect")
            return

        path = Path(raw).expanduser()
        if not path.is_dir():
            error_label.update(f"⚠  Not a directory: {path}")
            return

        self.app.run_inspection(path)  # type: ignore[attr-defined]

    @on(Input.Submitted, "#path-input")
    def submit_on_enter(self) -> None:
        self.start_inspection()
