import os
import sys
import psutil
import logging
import threading
import subprocess
from typing import Any, Dict, List

log = logging.getLogger(__name__)


#* --- Process Status ---
def pid_exists(pid: int) -> bool:
    """A wrapper for psutil.pid_exists for easy testing/mocking if needed."""
    return psutil.pid_exists(pid)

def get_process_from_pid(pid: int) -> psutil.Process:
    """A wrapper for psutil.Process for easy testing/mocking if needed."""
    return psutil.Process(pid)

def get_process_id() -> int:
    """Returns the process id of the currently running updater."""
    return os.getpid()

def is_process_running(pid: int) -> bool:
    """
    Finds out if a process with the given PID is running.

    A zombie process has already terminated and only waits to be reaped by
    its parent, so it is reported as not running. Any failure to query the
    process table is logged and treated as "not running".

    :param pid: Identifier of the process to find.
    :return: True if the process was found in the process table, False otherwise.
    """
    try:
        if pid < 0 or not pid_exists(pid):
            return False
        return get_process_from_pid(pid).status() != psutil.STATUS_ZOMBIE
    except psutil.NoSuchProcess:
        return False
    except (psutil.Error, OSError, ValueError, OverflowError) as e:
        log.error(f"Unable to find if process {pid} is running: {e}", exc_info=True)
        return False


#* --- Process Creation ---
def get_popen_creation_flags(new_console: bool = False) -> Dict[str, Any]:
    """
    Returns platform-specific keyword arguments for subprocess.Popen.

    :param new_console: Open the process in its own console window on Windows.
        On other platforms the process is started in a new session instead.
    :return dict: A dictionary of keyword arguments for Popen.
    """
    if sys.platform == "win32":
        if new_console:
            return {"creationflags": subprocess.CREATE_NEW_CONSOLE}
        return {"creationflags": subprocess.CREATE_NO_WINDOW}
    if new_console:
        return {"start_new_session": True}
    return {}

def _read_pipe(pipe, process_name: str, level: int):
    """Target function for reader threads. Reads and logs lines from a subprocess pipe."""
    proc_logger = logging.getLogger(f"proc.{process_name}")
    try:
        for line_bytes in iter(pipe.readline, b""):
            line = line_bytes.decode("utf-8", errors="replace").rstrip()
            if not line:
                continue
            proc_logger.log(level, line)
    except Exception as e:
        proc_logger.debug(f"Pipe reader for {process_name} stream exited: {e}")
    finally:
        pipe.close()

def log_process_output(
    process: subprocess.Popen,
    process_name: str
) -> List[threading.Thread]:
    """
    Reads a process's stdout/stderr in threads and logs the output.

    The reader threads consume the output pipes so the child never blocks on a
    full pipe. Each line is logged through a logger named after the process,
    stdout at INFO and stderr at ERROR.

    :param process: The `subprocess.Popen` object to monitor.
    :param process_name: The logical name of the process for logging context.
    :return list: The started reader threads, so callers can join them.
    """
    threads = []
    if process.stdout:
        threads.append(threading.Thread(
            target=_read_pipe,
            args=(process.stdout, process_name, logging.INFO),
            daemon=True
        ))
    if process.stderr:
        threads.append(threading.Thread(
            target=_read_pipe,
            args=(process.stderr, process_name, logging.ERROR),
            daemon=True
        ))
    for thread in threads:
        thread.start()
    return threads
