# =============================================================================
# tests/test_server.py - Server Entry Point Tests
# =============================================================================
# uvicorn.run is patched; no socket is opened.
# =============================================================================

from unittest.mock import patch

from leetlab.server import run


class TestRun:
    """Tests for run()."""

    def test_default_port(self, monkeypatch, clear_settings_cache):
        """With no PORT the listener binds 3000."""
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.delenv("HOST", raising=False)

        with patch("leetlab.server.uvicorn.run") as mock_run:
            run()

        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args == ("leetlab.main:app",)
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 3000

    def test_port_from_environment(self, monkeypatch, clear_settings_cache):
        """PORT from the environment is passed to uvicorn."""
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("DEBUG", "false")

        with patch("leetlab.server.uvicorn.run") as mock_run:
            run()

        _, kwargs = mock_run.call_args
        assert kwargs["port"] == 8080
        assert kwargs["log_level"] == "info"
