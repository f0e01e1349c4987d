"""
Tests for main.py - Main Entry Point

Tests for the main entry point including:
- Logging configuration
- Container and app creation
- Server startup
- Error handling
- Graceful shutdown
"""

import json
import logging
from unittest.mock import MagicMock, mock_open, patch

import pytest

from karaoke_server.main import _LOGGING_CONFIG_PATH, cli, main, setup_logging


class TestLoggingSetup:
    """Tests for logging configuration."""

    def _make_valid_config(self) -> dict:
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "handlers": {},
            "loggers": {
                "uvicorn.access": {"level": "WARNING"},
                "httpx": {"level": "WARNING"},
            },
            "root": {"level": "INFO", "handlers": []},
        }

    def test_dictconfig_called_when_json_exists(self):
        """Should call dictConfig when logging_config.json exists."""
        config = self._make_valid_config()
        m = mock_open(read_data=json.dumps(config))
        with (
            patch("builtins.open", m),
            patch("logging.config.dictConfig") as mock_dc,
        ):
            setup_logging()

            mock_dc.assert_called_once_with(config)

    def test_fallback_to_basicconfig_when_json_missing(self):
        """Should fallback to basicConfig when logging_config.json is missing."""
        with (
            patch("builtins.open", side_effect=FileNotFoundError),
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging()

            mock_bc.assert_called_once()
            assert mock_bc.call_args[1]["level"] == logging.INFO

    def test_fallback_to_basicconfig_when_json_malformed(self):
        """Should fallback to basicConfig when JSON is malformed."""
        m = mock_open(read_data="{invalid json")
        with (
            patch("builtins.open", m),
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging()

            mock_bc.assert_called_once()

    def test_root_logger_level_overridden(self):
        """Should override root logger level with the provided log_level."""
        m = mock_open(read_data=json.dumps(self._make_valid_config()))
        with (
            patch("builtins.open", m),
            patch("logging.config.dictConfig"),
            patch("logging.getLogger") as mock_get_logger,
        ):
            mock_root = MagicMock()
            mock_get_logger.return_value = mock_root

            setup_logging("DEBUG")

            mock_root.setLevel.assert_called_once_with(logging.DEBUG)

    def test_shipped_config_is_valid(self):
        """Should ship a logging_config.json that quiets the access log."""
        with open(_LOGGING_CONFIG_PATH) as f:
            config = json.load(f)

        assert config["version"] == 1
        assert config["loggers"]["uvicorn.access"]["level"] == "WARNING"
        assert config["formatters"]["console"]["()"] == "karaoke_server.utils.logging.ColoredFormatter"


class TestMainFunction:
    """Tests for main entry point function."""

    def _settings(self, settings):
        return patch("karaoke_server.config.settings.get_settings", return_value=settings)

    def test_main_successful_run(self, settings):
        """Should build the app and hand it to uvicorn."""
        with (
            self._settings(settings),
            patch("karaoke_server.main.setup_logging") as mock_logging,
            patch("uvicorn.run") as mock_run,
        ):
            exit_code = main()

        assert exit_code == 0
        mock_logging.assert_called_once_with("INFO")
        mock_run.assert_called_once()
        kwargs = mock_run.call_args.kwargs
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 3001
        assert kwargs["log_config"] is None
        app = mock_run.call_args.args[0]
        assert app.state.container.settings is settings

    def test_main_keyboard_interrupt(self, settings):
        """Should exit cleanly on Ctrl+C."""
        with (
            self._settings(settings),
            patch("karaoke_server.main.setup_logging"),
            patch("uvicorn.run", side_effect=KeyboardInterrupt),
        ):
            assert main() == 0

    def test_main_fatal_error(self, settings):
        """Should return 1 when the server crashes."""
        with (
            self._settings(settings),
            patch("karaoke_server.main.setup_logging"),
            patch("uvicorn.run", side_effect=OSError("address already in use")),
        ):
            assert main() == 1

    def test_cli_exits_with_main_code(self):
        with patch("karaoke_server.main.main", return_value=1):
            with pytest.raises(SystemExit) as exc_info:
                cli()

        assert exc_info.value.code == 1
