import logging
from typing import Callable, Dict, List
from updater.local import app_globals
from updater.local import process

log = logging.getLogger(__name__)


def _parse_pid(value: str) -> int:
    pid = int(value)
    if pid < 0:
        raise ValueError(f"PID must be non-negative, got {pid}")
    return pid


def _cmd_start(args: List[str]) -> bool:
    if not args:
        print("Usage: start <path> [--wait] [--log]")
        return False
    wait = "--wait" in args
    log_output = "--log" in args
    target = [a for a in args if a not in ("--wait", "--log")]
    proc = process.start(target, wait=wait, log_output=log_output)
    if proc is None:
        print(f"Failed to start '{target[0]}'. Check logs for details.")
        return False
    if wait:
        print(f"Process {proc.pid} exited with code {proc.returncode}.")
    else:
        print(f"Started process {proc.pid}.")
    return proc.returncode in (None, 0)


def _cmd_open(args: List[str]) -> bool:
    if len(args) != 1:
        print("Usage: open <path>")
        return False
    return process.start_in_console(args[0])


def _cmd_launch(args: List[str]) -> bool:
    if len(args) < 3:
        print("Usage: launch <property> <value> <name> [args...]")
        return False
    prop, value, name = args[:3]
    return process.launch(prop, value, name, args[3:])


def _cmd_running(args: List[str]) -> bool:
    if len(args) != 1:
        print("Usage: running <pid>")
        return False
    try:
        pid = _parse_pid(args[0])
    except ValueError as e:
        print(f"Invalid PID '{args[0]}': {e}")
        return False
    running = process.is_process_running(pid)
    print(f"Process {pid} is {'RUNNING' if running else 'NOT RUNNING'}.")
    return running


def _cmd_kill(args: List[str]) -> bool:
    if not 1 <= len(args) <= 2:
        print("Usage: kill <pid> [seconds]")
        return False
    try:
        pid = _parse_pid(args[0])
        seconds = float(args[1]) if len(args) == 2 else app_globals.DEFAULT_KILL_WAIT
    except ValueError as e:
        print(f"Invalid argument: {e}")
        return False
    killed = process.kill(pid, seconds)
    if killed:
        print(f"Process {pid} terminated.")
    else:
        print(f"Process {pid} is still running after {seconds} seconds.")
    return killed


def _cmd_pid(args: List[str]) -> bool:
    print(process.get_process_id())
    return True


def _cmd_clean(args: List[str]) -> bool:
    return process.updater_cleanup()


def _config_show() -> None:
    """Displays the current values of all modifiable settings."""
    print("\n--- Current Updater Configuration ---")
    for key in sorted(app_globals.MODIFIABLE_SETTINGS):
        print(f"  {key} = {app_globals.get(key, 'N/A')}")
    print("---")
    print("Use 'config set <KEY> <VALUE>' to change a setting.")
    print("-------------------------------------\n")


def _config_help() -> None:
    """Displays help for the config command."""
    print("\nConfig Command Help:")
    print("  config show                - Display all modifiable settings.")
    print("  config set KEY VALUE       - Change a setting and save it to the overrides file.")
    print("  config help                - Show this help message.")


def _cmd_config(args: List[str]) -> bool:
    """Handles all sub-commands for the 'config' command."""
    sub_command = args[0].lower() if args else "show"

    if sub_command == "show":
        _config_show()
        return True
    if sub_command == "set":
        if len(args) < 3:
            print("Usage: config set <SETTING_NAME> <VALUE>")
            return False
        key, value_str = args[1].upper(), " ".join(args[2:])
        if app_globals.update_setting(key, value_str):
            print(f"Configuration for '{key}' updated.")
            return True
        print(f"Failed to update configuration for '{key}'. Check logs for details.")
        return False
    if sub_command == "help":
        _config_help()
        return True

    print(f"Unknown config sub-command: '{sub_command}'. Type 'config help' for available commands.")
    return False


def toggle_verbose_logging(args: List[str] = ()) -> bool:
    """Toggles verbose (DEBUG level) logging for the console handler."""
    app_globals.VERBOSE_LOGGING = not app_globals.VERBOSE_LOGGING
    new_level = logging.DEBUG if app_globals.VERBOSE_LOGGING else logging.INFO

    # Reconfigure the console handler's level directly
    found_handler = False
    for handler in logging.getLogger().handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(new_level)
            found_handler = True
            break

    status = "ON" if app_globals.VERBOSE_LOGGING else "OFF"
    if found_handler:
        print(f"Verbose console logging is now {status}.")
    else:
        print("Could not find console handler to modify level.")
    return found_handler


def print_help(args: List[str] = ()) -> bool:
    """Prints the main help text for the console."""
    print("\nAvailable commands:")
    print("  start <path> [--wait] [--log]          - Start a program, optionally waiting and logging its output.")
    print("  open <path>                            - Start a program or script in a new console window.")
    print("  launch <prop> <value> <name> [args]    - Launch a bundled application with a property set.")
    print("  running <pid>                          - Check whether a process is running.")
    print("  kill <pid> [seconds]                   - Force-kill a process and wait for it to terminate.")
    print("  pid                                    - Print the updater's own process id.")
    print("  clean                                  - Remove temporary update files.")
    print("  config <cmd>                           - Manage configuration. Use 'config help' for more details.")
    print("  verbose                                - Toggle detailed DEBUG log output in the console.")
    print("  exit                                   - Exit the updater console.")
    print()
    return True


COMMANDS: Dict[str, Callable[[List[str]], bool]] = {
    "start": _cmd_start,
    "open": _cmd_open,
    "launch": _cmd_launch,
    "running": _cmd_running,
    "kill": _cmd_kill,
    "pid": _cmd_pid,
    "clean": _cmd_clean,
    "config": _cmd_config,
    "verbose": toggle_verbose_logging,
    "help": print_help,
}


def execute_command(command: str, args: List[str]) -> bool:
    """
    Executes a single command from the user.

    :param command: The main command string (e.g., 'start', 'kill').
    :param args: A list of arguments for the command.
    :return bool: True if the command succeeded, False otherwise.
    """
    log.debug(f"Executing command: {command}, args: {args}")
    handler = COMMANDS.get(command)
    if handler is None:
        log.info(f"Unknown command: '{command}'. Type 'help' for a list of commands.")
        return False
    return handler(args)
