"""Tests for the exit sequence, pausing and sleeping."""

from unittest.mock import MagicMock, call, patch

import pytest

from updater.local.process import shutdown


@pytest.fixture
def exit_steps(monkeypatch):
    """Record every exit step on a single mock so call order can be checked."""
    steps = MagicMock()
    monkeypatch.setattr(shutdown, "updater_cleanup", steps.cleanup)
    monkeypatch.setattr(shutdown, "pause", steps.pause)
    monkeypatch.setattr(shutdown, "close_logging", steps.close_logging)
    monkeypatch.setattr(shutdown.user_input, "close", steps.close_input)
    monkeypatch.setattr(shutdown.app_globals, "is_launcher", lambda: False)
    return steps


class TestExit:

    @pytest.mark.parametrize("clean", [True, False])
    @pytest.mark.parametrize("prompt", [True, False])
    def test_closes_logging_exactly_once(self, exit_steps, clean, prompt):
        with pytest.raises(SystemExit):
            shutdown.exit(0, clean=clean, prompt=prompt)
        exit_steps.close_logging.assert_called_once_with()

    def test_exit_code_is_propagated(self, exit_steps):
        with pytest.raises(SystemExit) as exc_info:
            shutdown.exit(2, clean=False, prompt=False)
        assert exc_info.value.code == 2

    def test_steps_run_in_fixed_order(self, exit_steps):
        with pytest.raises(SystemExit):
            shutdown.exit(0, clean=True, prompt=True)
        assert exit_steps.mock_calls == [
            call.cleanup(),
            call.pause(),
            call.close_logging(),
            call.close_input(),
        ]

    def test_flags_off_skip_cleanup_and_prompt(self, exit_steps):
        with pytest.raises(SystemExit):
            shutdown.exit(0, clean=False, prompt=False)
        exit_steps.cleanup.assert_not_called()
        exit_steps.pause.assert_not_called()

    def test_prompt_defaults_to_on(self, exit_steps):
        with pytest.raises(SystemExit):
            shutdown.exit(1, clean=False)
        exit_steps.pause.assert_called_once_with()

    def test_launcher_never_prompts(self, exit_steps, monkeypatch):
        monkeypatch.setattr(shutdown.app_globals, "is_launcher", lambda: True)
        with pytest.raises(SystemExit):
            shutdown.exit(0, clean=False, prompt=True)
        exit_steps.pause.assert_not_called()
        exit_steps.close_logging.assert_called_once_with()

    def test_interrupted_prompt_still_closes_logging(self, exit_steps):
        exit_steps.pause.side_effect = KeyboardInterrupt
        with pytest.raises(KeyboardInterrupt):
            shutdown.exit(0, clean=True, prompt=True)
        exit_steps.close_logging.assert_called_once_with()
        exit_steps.close_input.assert_called_once_with()


class TestWait:

    def test_sleeps_for_requested_time(self):
        with patch.object(shutdown.time, "sleep") as sleep:
            assert shutdown.wait(0.25) is True
        sleep.assert_called_once_with(0.25)

    def test_interrupted_sleep_is_logged(self, caplog):
        with patch.object(shutdown.time, "sleep", side_effect=KeyboardInterrupt):
            assert shutdown.wait(1) is False
        assert "interrupted while sleeping" in caplog.text


def test_pause_waits_for_enter():
    with patch.object(shutdown.user_input, "wait_for_enter") as wait_for_enter:
        shutdown.pause()
    wait_for_enter.assert_called_once_with()
