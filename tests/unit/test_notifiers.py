# tests/unit/test_notifiers.py

"""Unit tests for notification rendering and the notifier backends."""

import io
import subprocess
from unittest.mock import patch

import pytest
from rich.console import Console

from cargo_testify.exceptions import ConfigurationError, NotificationError
from cargo_testify.notifiers import (
    ConsoleNotifier,
    Notifier,
    NotifySendNotifier,
    OsaScriptNotifier,
    get_notifier,
    render,
)
from cargo_testify.outcome import CompileError, TestsFailed, TestsPassed

SUMMARY = "3 passed; 0 failed; 0 ignored; 0 measured; 0 filtered out"


class TestRender:
    def test_passed(self):
        notification = render(TestsPassed(SUMMARY))
        assert notification.title == "Tests passed"
        assert notification.body == SUMMARY
        assert notification.icon == "face-angel"
        assert notification.is_success is True
        assert notification.sound is None

    def test_failed(self):
        notification = render(TestsFailed("1 passed; 1 failed; 0 filtered out"))
        assert notification.title == "Tests failed"
        assert notification.icon == "face-angry"
        assert notification.urgency == "critical"
        assert notification.sound is not None

    def test_compile_error(self):
        notification = render(CompileError("error[E0308]: mismatched types"))
        assert notification.title == "Compilation error"
        assert notification.body == "error[E0308]: mismatched types"
        assert notification.icon == "face-angry"
        assert notification.sound is None


class TestNotifySendNotifier:
    def test_command_line(self):
        command = NotifySendNotifier().build_command(render(TestsPassed(SUMMARY)))
        assert command == [
            "notify-send",
            "--app-name=cargo-testify",
            "--icon=face-angel",
            "--urgency=normal",
            "Tests passed",
            SUMMARY,
        ]

    @patch("cargo_testify.notifiers.desktop.subprocess.run")
    def test_notify_runs_command(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(args=[], returncode=0, stdout="", stderr="")

        NotifySendNotifier().notify(TestsFailed("0 passed; 2 failed; 0 filtered out"))

        args, kwargs = mock_run.call_args
        assert args[0][0] == "notify-send"
        assert "--icon=face-angry" in args[0]
        assert args[0][-1] == "0 passed; 2 failed; 0 filtered out"

    @patch("cargo_testify.notifiers.desktop.subprocess.run")
    def test_non_zero_exit_raises(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=1, stdout="", stderr="Cannot autolaunch D-Bus"
        )

        with pytest.raises(NotificationError, match="D-Bus"):
            NotifySendNotifier().notify(TestsPassed(SUMMARY))

    @patch("cargo_testify.notifiers.desktop.subprocess.run", side_effect=FileNotFoundError("notify-send"))
    def test_missing_executable_raises(self, mock_run):
        with pytest.raises(NotificationError):
            NotifySendNotifier().notify(TestsPassed(SUMMARY))


class TestOsaScriptNotifier:
    def test_script_escapes_quotes(self):
        command = OsaScriptNotifier().build_command(render(CompileError('error: expected "u32"')))

        assert command[:2] == ["osascript", "-e"]
        assert 'display notification "error: expected \\"u32\\""' in command[2]
        assert 'with title "cargo-testify"' in command[2]
        assert "sound name" not in command[2]

    def test_failed_tests_play_a_sound(self):
        command = OsaScriptNotifier().build_command(render(TestsFailed("1 passed; 1 failed; 0 filtered out")))
        assert 'sound name "Basso"' in command[2]


class TestConsoleNotifier:
    def test_prints_panel(self):
        buffer = io.StringIO()
        notifier = ConsoleNotifier(Console(file=buffer, width=120))

        notifier.notify(TestsPassed(SUMMARY))

        output = buffer.getvalue()
        assert "Tests passed" in output
        assert SUMMARY in output


class TestFactory:
    def test_named_notifier(self):
        assert isinstance(get_notifier("console"), ConsoleNotifier)
        assert isinstance(get_notifier("notify-send"), NotifySendNotifier)

    def test_name_is_case_insensitive(self):
        assert isinstance(get_notifier("Console"), ConsoleNotifier)

    def test_unknown_notifier(self):
        with pytest.raises(ConfigurationError, match="Unsupported notifier"):
            get_notifier("carrier-pigeon")

    def test_auto_prefers_platform_tool(self):
        with patch.object(OsaScriptNotifier, "is_available", return_value=True):
            assert isinstance(get_notifier("auto", platform="darwin"), OsaScriptNotifier)
        with patch.object(NotifySendNotifier, "is_available", return_value=True):
            assert isinstance(get_notifier("auto", platform="linux"), NotifySendNotifier)

    def test_auto_falls_back_to_console(self):
        with patch.object(NotifySendNotifier, "is_available", return_value=False):
            assert isinstance(get_notifier("auto", platform="linux"), ConsoleNotifier)
        assert isinstance(get_notifier("auto", platform="win32"), ConsoleNotifier)

    def test_all_backends_satisfy_protocol(self):
        for notifier in (ConsoleNotifier(), NotifySendNotifier(), OsaScriptNotifier()):
            assert isinstance(notifier, Notifier)
