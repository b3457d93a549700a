"""Shared test fixtures for unit tests."""

import io
import sys
import logging
import subprocess

import pytest

from updater.local import app_globals
from updater.local.console import user_input


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path, monkeypatch):
    """Point every file the updater touches into the test's tmp directory."""
    monkeypatch.setattr(app_globals, "BASE_DIR", tmp_path)
    monkeypatch.setattr(app_globals, "LOG_FILE_PATH", tmp_path / "logs" / "updater.log")
    monkeypatch.setattr(app_globals, "OVERRIDES_JSON_PATH", tmp_path / "overrides.json")
    monkeypatch.setattr(app_globals, "UPDATE_TEMP_DIR", tmp_path / "mte-update")
    monkeypatch.setattr(app_globals, "TEMP_FILES", [tmp_path / "mte-update.zip"])
    return tmp_path


@pytest.fixture(autouse=True)
def scripted_input():
    """Feed user input from an in-memory stream instead of the terminal."""
    stream = io.StringIO("\n")
    user_input.set_input_stream(stream)
    yield stream
    user_input.set_input_stream(None)


@pytest.fixture
def nonexistent_pid():
    """A PID far above any OS pid_max, never assigned to a real process."""
    return 99_999_999


@pytest.fixture
def isolated_root_logger():
    """Give a test an empty root logger and restore the original afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def sleeping_child():
    """A real child process that sleeps until it is killed."""
    proc = subprocess.Popen([sys.executable, "-c", "import time; time.sleep(60)"])
    yield proc
    if proc.poll() is None:
        proc.kill()
    proc.wait(timeout=10)
