"""
This module contains the configuration settings for the MTE Updater.
It defines paths, process-control timings, logging configuration and the
settings that may be changed at runtime through the 'config' command.
"""

import os
import sys
import pathlib
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv(override=True)

#* --- Core Paths ---
BASE_DIR = pathlib.Path(os.getenv("UPDATER_BASE_DIR", pathlib.Path(__file__).resolve().parent.parent))
LOGS_DIR = BASE_DIR / "logs"
UPDATE_TEMP_DIR = BASE_DIR / "mte-update"

#* --- Application File Paths ---
LOG_FILE_PATH = LOGS_DIR / "mte-updater.log"
OVERRIDES_JSON_PATH = BASE_DIR / "updater-overrides.json"

# Files left behind by an update that are removed on a clean exit
TEMP_FILES = [
    BASE_DIR / "mte-update.zip",
    BASE_DIR / "mte-release.json",
]

#* --- Python Executable Configuration ---
# Interpreter used to run scripts and bundled application archives
PYTHON_EXECUTABLE = os.getenv("PYTHON_EXECUTABLE", sys.executable)

#* --- Process Titles ---
UPDATER_PROCESS_TITLE = "MTE Updater"
LAUNCHER_PROCESS_TITLE = "MTE Updater - Launcher"

#* --- Process Control ---
KILL_POLL_INTERVAL = 0.25  # seconds between liveness checks after a kill
DEFAULT_KILL_WAIT = int(os.getenv("UPDATER_KILL_WAIT", "10"))  # seconds

#* --- Application variables ---
VERBOSE_LOGGING = os.getenv("UPDATER_VERBOSE", "False").lower() in ('true', '1', 't')

#* --- MODIFIABLE SETTINGS (Changeable at runtime via 'config' command) ---
MODIFIABLE_SETTINGS = {
    # Process control
    "DEFAULT_KILL_WAIT",
    # Logging
    "LOG_BUFFER_SIZE", "LOG_BUFFER_FLUSH_INTERVAL", "MAX_LOG_FILE_SIZE_MB",
}

#* --- Default Values for Modifiable Settings ---
LOG_BUFFER_SIZE = 100
LOG_BUFFER_FLUSH_INTERVAL = 5
MAX_LOG_FILE_SIZE_MB = 10
