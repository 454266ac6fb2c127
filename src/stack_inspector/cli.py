"""CLI entry point for stack-inspector."""

import os
import sys
from pathlib import Path


def main() -> None:
    """Launch the Stack Inspector TUI."""
    from dotenv import load_dotenv

    load_dotenv()  # Load .env file (e.g. STACK_INSPECTOR_MAX_WORKERS)

    from stack_inspector.logging import configure_logging

    verbose = os.environ.get("STACK_INSPECTOR_VERBOSE", "").lower() in ("1", "true", "yes")
    log_file = os.environ.get("STACK_INSPECTOR_LOG_FILE") or None
    configure_logging(verbose=verbose, log_file=Path(log_file) if log_file else None)

    from stack_inspector.app import StackInspectorApp

    initial_path = sys.argv[1] if len(sys.argv) > 1 else ""
    app = StackInspectorApp(initial_path=initial_path)
    app.run()


if __name__ == "__main__":
    main()
