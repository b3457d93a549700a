"""Tests for starting processes, with and without a console window."""

import logging
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

from updater.local import app_globals
from updater.local.process import launcher
from updater.local.process.launcher import launch, start, start_in_console


class TestStart:

    def test_nonexistent_executable_returns_none(self, tmp_path):
        assert start(str(tmp_path / "does-not-exist")) is None

    def test_spawn_failure_is_logged(self, tmp_path, caplog):
        start([str(tmp_path / "does-not-exist"), "--flag"])
        assert "Unable to start new process" in caplog.text

    def test_permission_denied_returns_none(self, tmp_path):
        script = tmp_path / "not-executable.sh"
        script.write_text("#!/bin/sh\nexit 0\n")
        script.chmod(0o644)
        assert start(str(script)) is None

    def test_empty_command_returns_none(self):
        assert start([]) is None

    def test_wait_blocks_until_exit(self):
        proc = start([sys.executable, "-c", "import sys; sys.exit(3)"], wait=True)
        assert proc is not None
        assert proc.returncode == 3

    def test_no_wait_returns_running_handle(self):
        proc = start([sys.executable, "-c", "import time; time.sleep(30)"])
        try:
            assert proc is not None
            assert proc.poll() is None
        finally:
            proc.kill()
            proc.wait(timeout=10)

    def test_log_output_captures_stdout_and_stderr(self, caplog):
        caplog.set_level(logging.INFO)
        code = "import sys; print('hello from child'); print('child failure', file=sys.stderr)"
        proc = start([sys.executable, "-c", code], wait=True, log_output=True)

        assert proc.returncode == 0
        proc_records = [r for r in caplog.records if r.name.startswith("proc.")]
        by_message = {r.getMessage(): r.levelno for r in proc_records}
        assert by_message["hello from child"] == logging.INFO
        assert by_message["child failure"] == logging.ERROR

    def test_interrupted_wait_returns_none(self):
        with patch.object(subprocess.Popen, "wait", side_effect=KeyboardInterrupt):
            proc = start([sys.executable, "-c", "pass"], wait=True)
        assert proc is None


class TestStartInConsole:

    def test_program_runs_in_new_session(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")
        with patch.object(launcher.subprocess, "Popen") as popen:
            assert start_in_console("/opt/app/run.sh") is True

        args, kwargs = popen.call_args
        assert args[0] == [str(Path("/opt/app/run.sh"))]
        assert kwargs["start_new_session"] is True

    def test_python_script_runs_with_configured_interpreter(self):
        with patch.object(launcher.subprocess, "Popen") as popen:
            assert start_in_console("tool.py") is True

        args, _ = popen.call_args
        assert args[0] == [app_globals.PYTHON_EXECUTABLE, "tool.py"]

    def test_spawn_failure_returns_false(self):
        with patch.object(launcher.subprocess, "Popen", side_effect=FileNotFoundError("missing")):
            assert start_in_console("missing.exe") is False


class TestLaunch:

    def test_launches_app_from_base_dir_with_property(self, isolated_paths):
        with patch.object(launcher.subprocess, "Popen") as popen:
            assert launch("mte.launcher", "true", "mte-app.pyz", ["--update", "--quiet"]) is True

        args, kwargs = popen.call_args
        assert args[0] == [
            app_globals.PYTHON_EXECUTABLE,
            str(isolated_paths / "mte-app.pyz"),
            "--update",
            "--quiet",
        ]
        assert kwargs["env"]["mte.launcher"] == "true"
        assert kwargs["cwd"] == str(isolated_paths)

    def test_launch_failure_returns_false(self):
        with patch.object(launcher.subprocess, "Popen", side_effect=PermissionError("denied")):
            assert launch("mte.launcher", "true", "mte-app.pyz", []) is False
