import sys
import logging
from typing import List, Optional

from updater.local import app_globals
from updater.log.setup import setup_logging
from updater.local import process
from updater.local.console.commands import execute_command

log = logging.getLogger("console")


def _interactive() -> int:
    """Runs the interactive console until 'exit' or end of input."""
    print("--- MTE Updater Console ---")
    print("Type 'help' for a list of commands.")
    while True:
        try:
            command_line_str = input("> ")
        except EOFError:
            break
        except KeyboardInterrupt:
            log.warning("\nExiting console due to KeyboardInterrupt.")
            break

        command_line = command_line_str.strip().split()
        if not command_line:
            continue
        command, args = command_line[0].lower(), command_line[1:]
        log.debug(f"Received command: {command}, args: {args}")
        if command == "exit":
            break
        execute_command(command, args)
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """The main entry point for the updater console."""
    args = list(sys.argv[1:] if argv is None else argv)

    launcher = "--launcher" in args
    if launcher:
        args.remove("--launcher")
    app_globals.set_process_title(launcher=launcher)

    if "--verbose" in args:
        args.remove("--verbose")
        app_globals.VERBOSE_LOGGING = True
    setup_logging(logging.DEBUG if app_globals.VERBOSE_LOGGING else logging.INFO)

    # Non-interactive mode for one-off commands
    if args:
        command, command_args = args[0].lower(), args[1:]
        code = 0 if execute_command(command, command_args) else 1
        process.exit(code, clean=False, prompt=False)

    code = _interactive()
    process.exit(code, clean=False, prompt=False)


if __name__ == "__main__":
    main()
