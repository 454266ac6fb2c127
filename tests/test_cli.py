"""Tests for the CLI entry point."""

from unittest.mock import MagicMock, patch


class TestCli:
    def test_main_loads_env_and_runs(self):
        """main() calls load_dotenv and launches the app."""
        mock_app_instance = MagicMock()
        with patch("dotenv.load_dotenv") as mock_ld, \
                patch("sys.argv", ["stack-inspector"]), \
                patch.dict("os.environ", {}, clear=True), \
                patch("stack_inspector.logging.configure_logging") as mock_log:
            with patch("stack_inspector.app.StackInspectorApp", return_value=mock_app_instance) as mock_cls:
                from stack_inspector.cli import main
                main()
                mock_ld.assert_called_once()
                mock_log.assert_called_once()
                assert mock_log.call_args.kwargs == {"verbose": False, "log_file": None}
                mock_cls.assert_called_once_with(initial_path="")
                mock_app_instance.run.assert_called_once()

    def test_main_passes_path_argument(self):
        with patch("dotenv.load_dotenv"), \
                patch("sys.argv", ["stack-inspector", "/some/repo"]), \
                patch("stack_inspector.logging.configure_logging"):
            with patch("stack_inspector.app.StackInspectorApp") as mock_cls:
                from stack_inspector.cli import main
                main()
                mock_cls.assert_called_once_with(initial_path="/some/repo")

    def test_main_callable(self):
        from stack_inspector.cli import main
        assert callable(main)

    def test_log_file_from_env(self, tmp_path):
        env = {"STACK_INSPECTOR_LOG_FILE": str(tmp_path / "run.log"), "STACK_INSPECTOR_VERBOSE": "true"}
        with patch("dotenv.load_dotenv"), \
                patch("sys.argv", ["stack-inspector"]), \
                patch.dict("os.environ", env, clear=True), \
                patch("stack_inspector.logging.configure_logging") as mock_log:
            with patch("stack_inspector.app.StackInspectorApp"):
                from stack_inspector.cli import main
                main()
                mock_log.assert_called_once_with(verbose=True, log_file=tmp_path / "run.log")
