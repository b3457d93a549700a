import json
import logging
import setproctitle
from pathlib import Path
from typing import Dict, Any
import updater.settings as default_settings

log = logging.getLogger(__name__)


class GlobalSync:
    """
    A singleton class that houses all updater configuration.

    It follows a clear precedence:
    1. Base values from `settings.py`.
    2. Overrides from the `.env` file (handled by `python-dotenv` in settings.py).
    3. Overrides from the overrides JSON file for settings in `MODIFIABLE_SETTINGS`.

    It is also process-aware: the process title tells whether this instance
    runs as the launcher of the main application or as the updater itself.
    """

    def __init__(self) -> None:
        """Initializes the settings object by loading defaults and overrides."""
        self._config: Dict[str, Any] = {}
        self._load_defaults()
        self._load_overrides_from_file()

    def get(self, item: str, default: Any = None) -> Any:
        """Provides dictionary-like access to settings with a default value."""
        return self._config.get(item, default)

    def __getattr__(self, name: str) -> Any:
        """Allows attribute access to settings, raising an AttributeError if not found."""
        config = self.__dict__.get("_config", {})
        if name in config:
            return config[name]
        raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        if name.isupper():
            self._config[name] = value
        else:
            super().__setattr__(name, value)

    def _load_defaults(self) -> None:
        """Loads all uppercase attributes from settings.py as the baseline."""
        for key in dir(default_settings):
            if key.isupper():
                self._config[key] = getattr(default_settings, key)

    def _load_overrides_from_file(self) -> None:
        """
        Loads and applies settings from the overrides JSON file.

        Only keys listed in `MODIFIABLE_SETTINGS` are applied.
        """
        overrides_path = Path(self._config["OVERRIDES_JSON_PATH"])
        if not overrides_path.exists():
            return

        try:
            with overrides_path.open('r') as f:
                overrides = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            log.error(f"Failed to load or parse overrides file '{overrides_path}': {e}")
            return

        log.info(f"Loading runtime config overrides from {overrides_path}")
        for key, value in overrides.items():
            if key not in self._config:
                log.warning(f"Override setting '{key}' not found in default settings. Ignoring.")
            elif key not in self._config["MODIFIABLE_SETTINGS"]:
                log.warning(f"Attempted to override non-modifiable setting '{key}'. Ignoring.")
            else:
                self._config[key] = value
                log.debug(f"Overridden setting: {key} = {value}")

    def update_setting(self, key: str, value: Any) -> bool:
        """
        Updates a modifiable setting and persists it to the overrides file.

        The new value is coerced to the type of the current one.

        :param key: The setting name.
        :param value: The new value, usually a string from the console.
        :return: True if the setting was updated, False otherwise.
        """
        if key not in self._config.get("MODIFIABLE_SETTINGS", set()):
            log.warning(f"Rejected config update: Setting '{key}' is not modifiable.")
            return False

        try:
            original_value = self._config.get(key)
            if isinstance(original_value, bool):
                new_value = str(value).lower() in ('true', '1', 't', 'yes', 'y')
            elif original_value is not None:
                new_value = type(original_value)(value)
            else:
                new_value = value
        except (ValueError, TypeError) as e:
            log.error(f"Config update failed: Could not convert value '{value}' for key '{key}'. Error: {e}")
            return False

        self._config[key] = new_value
        self.save_overrides()
        log.info(f"Setting '{key}' updated to '{new_value}'.")
        return True

    def save_overrides(self) -> None:
        """Persists the modifiable parts of the config to the overrides file."""
        overrides_path = Path(self._config["OVERRIDES_JSON_PATH"])
        overrides = {
            key: self._config[key]
            for key in self._config["MODIFIABLE_SETTINGS"]
            if key in self._config
        }
        try:
            overrides_path.write_text(json.dumps(overrides, indent=4))
            log.info(f"Configuration overrides saved to {overrides_path}")
        except IOError as e:
            log.error(f"Failed to write overrides to '{overrides_path}': {e}")

    def get_all_settings(self) -> Dict[str, Any]:
        """Returns the entire configuration dictionary."""
        return self._config

    def set_process_title(self, launcher: bool = False) -> None:
        """Names the current process after the role it plays."""
        title = self._config["LAUNCHER_PROCESS_TITLE"] if launcher else self._config["UPDATER_PROCESS_TITLE"]
        setproctitle.setproctitle(title)
        log.debug(f"Process title set to '{title}'")

    def is_launcher(self) -> bool:
        """Returns True if this process runs as the launcher of the main application."""
        return setproctitle.getproctitle() == self._config["LAUNCHER_PROCESS_TITLE"]


# A singleton instance to be imported by other modules
app_globals = GlobalSync()
