import sys
import logging
from typing import Optional, TextIO

log = logging.getLogger(__name__)

_stream: Optional[TextIO] = None
_closed = False


def _input_stream() -> TextIO:
    return _stream if _stream is not None else sys.stdin


def set_input_stream(stream: Optional[TextIO]) -> None:
    """Replaces the stream user input is read from. None restores stdin."""
    global _stream, _closed
    _stream = stream
    _closed = False


def wait_for_enter(prompt: str = "Press Enter to continue...") -> None:
    """
    Blocks until the user presses Enter.
    A closed or exhausted input stream counts as acknowledgement.
    """
    if _closed:
        log.debug("User input is closed, not waiting for Enter.")
        return
    print(prompt, end="", flush=True)
    try:
        _input_stream().readline()
    except (OSError, ValueError) as e:
        log.debug(f"Unable to read user input: {e}")


def close() -> None:
    """Closes the user input stream. Further calls are no-ops."""
    global _closed
    if _closed:
        return
    _closed = True
    stream = _input_stream()
    try:
        if stream is not sys.__stdin__:
            stream.close()
    except OSError as e:
        log.debug(f"Unable to close user input: {e}")
