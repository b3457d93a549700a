import sys
import time
import logging
from updater.local import app_globals
from updater.log.setup import close_logging
from updater.local.console import user_input
from updater.local.process.cleanup import updater_cleanup

log = logging.getLogger(__name__)


def pause() -> None:
    """
    Blocks the current thread until input data is available.
    The user must press Enter to continue running the application.
    """
    user_input.wait_for_enter()


def wait(seconds: float) -> bool:
    """
    Sleeps the current thread for the given amount of time.

    :param seconds: Amount of time to wait.
    :return: False if the sleep was interrupted, True otherwise.
    """
    try:
        time.sleep(seconds)
        return True
    except KeyboardInterrupt:
        log.error("Thread was interrupted while sleeping")
        return False


def exit(code: int, clean: bool, prompt: bool = True) -> None:
    """
    Terminates the currently running updater.

    The order is fixed: cleanup, user prompt, log close, exit. The prompt
    must happen before the logfile is closed since it still prints logs.

    :param code: Exit status (a nonzero value indicates abnormal termination).
    :param clean: Clean all temporary files created while updating.
    :param prompt: Prompt the user to press Enter before closing. Never
        prompts when running as the launcher.
    """
    if code == 0:
        log.debug("Closing updater application...")
    else:
        log.info("Terminating updater application...")

    try:
        if clean:
            updater_cleanup()
        if prompt and not app_globals.is_launcher():
            pause()
    finally:
        close_logging()
        user_input.close()
    sys.exit(code)
