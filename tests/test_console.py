"""Tests for console.py module."""

from unittest.mock import patch

import pytest

from secrets_sync import console


class TestConsoleOutput:
    """Tests for console output functions."""

    @pytest.mark.parametrize(
        "func,icon",
        [
            (console.info, "ℹ"),
            (console.success, "✓"),
            (console.warning, "⚠"),
            (console.action, "→"),
            (console.step, "•"),
        ],
    )
    def test_status_messages_go_to_stdout(self, func, icon):
        """Test status helpers print one line with their icon on stdout."""
        with (
            patch.object(console.console, "print") as mock_out,
            patch.object(console.err_console, "print") as mock_err,
        ):
            func("Secret /app/db created")
            mock_out.assert_called_once()
            mock_err.assert_not_called()
            call_arg = mock_out.call_args[0][0]
            assert icon in call_arg
            assert "Secret /app/db created" in call_arg

    def test_error_message_goes_to_error_console(self):
        """Test error messages are printed on the stderr console."""
        with (
            patch.object(console.err_console, "print") as mock_err,
            patch.object(console.console, "print") as mock_out,
        ):
            console.error("Something failed")
            mock_err.assert_called_once()
            mock_out.assert_not_called()
            call_arg = mock_err.call_args[0][0]
            assert "✗" in call_arg
            assert "Something failed" in call_arg

    def test_error_console_writes_to_stderr(self):
        """Test the error console is bound to stderr."""
        assert console.err_console.stderr is True
        assert console.console.stderr is False

    def test_highlight_returns_markup(self):
        """Test highlight returns Rich markup."""
        result = console.highlight("important")
        assert result == "[highlight]important[/highlight]"

    def test_newline(self):
        """Test newline prints empty line."""
        with patch.object(console.console, "print") as mock_print:
            console.newline()
            mock_print.assert_called_once_with()


class TestConsoleSpinner:
    """Tests for spinner context manager."""

    def test_spinner_context_manager(self):
        """Test spinner works as context manager."""
        with patch.object(console.console, "status") as mock_status:
            mock_status.return_value.__enter__ = lambda x: None
            mock_status.return_value.__exit__ = lambda x, *args: None
            with console.spinner("Loading..."):
                pass
            mock_status.assert_called_once()


class TestConsoleSummaryPanel:
    """Tests for summary panel."""

    def test_summary_panel(self):
        """Test summary panel renders."""
        with patch.object(console.console, "print") as mock_print:
            console.summary_panel("Test Summary", {"Key1": "Value1", "Key2": "Value2"})
            mock_print.assert_called_once()
            assert mock_print.call_args[0][0].border_style == "green"

    def test_summary_panel_failed(self):
        """Test failed summary panel uses the error border."""
        with patch.object(console.console, "print") as mock_print:
            console.summary_panel("Test Summary", {"Key1": "Value1"}, failed=True)
            assert mock_print.call_args[0][0].border_style == "red"
