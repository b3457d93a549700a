import psutil
import logging
from updater.local import app_globals
from updater.local.process.process_utils import get_process_from_pid, is_process_running
from updater.local.process.shutdown import wait as sleep_for

log = logging.getLogger(__name__)


def _force_kill(pid: int) -> None:
    """Sends a forceful kill request (SIGKILL / TerminateProcess) to the process."""
    try:
        proc = get_process_from_pid(pid)
        log.debug(f"Killing process {proc.name()} (PID {pid}).")
        proc.kill()
    except psutil.NoSuchProcess:
        log.debug(f"Process {pid} no longer exists, skipping forceful kill.")
    except (psutil.Error, OSError, ValueError, OverflowError) as e:
        log.error(f"Unable to kill process {pid}: {e}")


def kill(pid: int, wait: float) -> bool:
    """
    Tries to kill the process with the given PID. Waits in fixed intervals
    until the process has terminated or the wait time has elapsed.

    :param pid: Identifier of the process to terminate.
    :param wait: Time in seconds to wait for the process to terminate.
    :return: True if the process has been killed within the wait time, False otherwise.
    """
    if pid < 0:
        log.error(f"Unable to kill process {pid}: PID must be non-negative")
        return False
    _force_kill(pid)

    interval = app_globals.KILL_POLL_INTERVAL
    remaining = wait
    while remaining > 0 and is_process_running(pid):
        sleep_for(min(interval, remaining))
        remaining -= interval

    if is_process_running(pid):
        log.warning(f"Process {pid} is still running after {wait} seconds.")
        return False
    log.debug(f"Process {pid} terminated.")
    return True
