"""Tests for blocking on user input and closing the input stream."""

import io

from updater.local.console import user_input


def test_wait_for_enter_consumes_one_line(capsys):
    stream = io.StringIO("\nsecond line\n")
    user_input.set_input_stream(stream)

    user_input.wait_for_enter("Press Enter...")

    assert capsys.readouterr().out == "Press Enter..."
    assert stream.readline() == "second line\n"


def test_end_of_input_counts_as_enter():
    user_input.set_input_stream(io.StringIO(""))
    user_input.wait_for_enter()


def test_close_closes_stream_once():
    stream = io.StringIO("\n")
    user_input.set_input_stream(stream)

    user_input.close()
    user_input.close()

    assert stream.closed


def test_wait_after_close_returns_immediately(capsys):
    user_input.set_input_stream(io.StringIO("\n"))
    user_input.close()

    user_input.wait_for_enter("Press Enter...")

    assert capsys.readouterr().out == ""
