import os
import logging
import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union
from updater.local import app_globals
from updater.local.process.process_utils import get_popen_creation_flags, log_process_output

log = logging.getLogger(__name__)

ProcessSpec = Union[str, Path, Sequence[str]]

PYTHON_SCRIPT_SUFFIXES = (".py", ".pyw", ".pyz")


def _as_args(process: ProcessSpec) -> List[str]:
    """Turns a program path or an argument list into Popen arguments."""
    if isinstance(process, (str, Path)):
        return [str(process)]
    return [str(arg) for arg in process]


def _command(args: List[str], env: Optional[Dict[str, str]] = None) -> bool:
    """
    Starts a command in a new console window without waiting for it.

    :param args: The command-line arguments of the program to start.
    :param env: Extra environment variables for the new process.
    :return: True if the command started without errors.
    """
    cmd = subprocess.list2cmdline(args)
    log.debug(f"Executing command: {cmd} in a new window")
    child_env = None
    if env:
        child_env = os.environ.copy()
        child_env.update(env)
    try:
        subprocess.Popen(
            args,
            stdin=subprocess.DEVNULL,
            env=child_env,
            cwd=str(app_globals.BASE_DIR),
            **get_popen_creation_flags(new_console=True)
        )
        return True
    except (OSError, subprocess.SubprocessError) as e:
        log.error(f"Unable to execute command: {cmd}: {e}", exc_info=True)
        return False


def start_in_console(path: Union[str, Path]) -> bool:
    """
    Starts a new program through its own console window.
    Python scripts and archives are run with the configured interpreter.

    :param path: Name or path to the program to start.
    :return: True if the program started without errors.
    """
    path = Path(path)
    if path.suffix.lower() in PYTHON_SCRIPT_SUFFIXES:
        return _command([app_globals.PYTHON_EXECUTABLE, str(path)])
    return _command([str(path)])


def start(process: ProcessSpec, wait: bool = False, log_output: bool = False) -> Optional[subprocess.Popen]:
    """
    Starts a new application or script process.

    Note that a console application started this way runs hidden.

    :param process: Path to the application or script, or a full argument list.
    :param wait: Block the current thread until the process terminates.
    :param log_output: Redirect the process output to the logfile.
    :return: The started process, or None if an error occurred.
    """
    args = _as_args(process)
    name = Path(args[0]).stem if args else "process"
    log.debug(f"Starting new process {args[0] if args else ''}" + (" and waiting for it to terminate" if wait else ""))
    try:
        proc = subprocess.Popen(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE if log_output else subprocess.DEVNULL,
            stderr=subprocess.PIPE if log_output else subprocess.DEVNULL,
            **get_popen_creation_flags()
        )
    except (OSError, subprocess.SubprocessError, ValueError, IndexError) as e:
        log.error(f"Unable to start new process {subprocess.list2cmdline(args)}: {e}", exc_info=True)
        return None

    readers = log_process_output(proc, name) if log_output else []
    if wait:
        try:
            proc.wait()
            for reader in readers:
                reader.join()
        except KeyboardInterrupt:
            log.error(f"Interrupted while waiting for process {name} (PID: {proc.pid}) to terminate")
            return None
        log.debug(f"Process {name} (PID: {proc.pid}) exited with code {proc.returncode}")
    return proc


def launch(prop: str, value: str, name: str, args: Sequence[str] = ()) -> bool:
    """
    Launches a bundled application inside a new console window.

    The application file is expected inside the updater's root directory and
    runs with the configured Python interpreter. The property is exposed to
    the new process as an environment variable.

    :param prop: Property name.
    :param value: Property value.
    :param name: Application filename.
    :param args: Application arguments.
    :return: True if the process launched successfully, False otherwise.
    """
    app_path = Path(app_globals.BASE_DIR) / name
    cmd = [app_globals.PYTHON_EXECUTABLE, str(app_path), *args]
    return _command(cmd, env={prop: value})
