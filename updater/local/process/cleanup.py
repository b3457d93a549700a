import shutil
import logging
from pathlib import Path
from updater.local import app_globals

log = logging.getLogger(__name__)


def updater_cleanup() -> bool:
    """
    Removes the temporary files and directories created while updating.

    :return: True if every temporary file is gone afterwards, False if any removal failed.
    """
    all_ok = True
    temp_dir = Path(app_globals.UPDATE_TEMP_DIR)
    if temp_dir.is_dir():
        try:
            shutil.rmtree(temp_dir)
            log.debug(f"Removed temporary update directory '{temp_dir}'.")
        except OSError as e:
            log.error(f"Unable to remove temporary update directory '{temp_dir}': {e}")
            all_ok = False

    for temp_file in app_globals.TEMP_FILES:
        try:
            Path(temp_file).unlink(missing_ok=True)
        except OSError as e:
            log.error(f"Unable to remove temporary file '{temp_file}': {e}")
            all_ok = False

    log.debug("Cleaned up temporary update files.")
    return all_ok
