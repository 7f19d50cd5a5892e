import os

import yaml

import constants as cv

USER_SPECS_DATA = cv.USER_SPECS_DATA

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsError(Exception):
    """Raised when the settings file can't be used"""


def load_user_specs(path=None):
    """Read the YAML settings file, or an empty dict if there is none"""
    path = path or USER_SPECS_DATA
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as file:
            user_specs = yaml.safe_load(file)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise SettingsError(f"Could not read {path}: {e}") from e

    if user_specs is None:
        return {}
    if not isinstance(user_specs, dict):
        raise SettingsError(f"{path} must contain a mapping of settings")
    return user_specs


def get_settings(path=None):
    """Return user settings merged over the defaults

    Raises:
        SettingsError: If the file is malformed or a value is invalid
    """
    settings = dict(cv.DEFAULT_SETTINGS)
    settings.update(load_user_specs(path))

    level = str(settings["log_level"]).upper()
    if level not in _LOG_LEVELS:
        raise SettingsError(f"Unknown log_level: {settings['log_level']!r}")
    settings["log_level"] = level

    try:
        settings["screen_width"] = int(settings["screen_width"])
    except (TypeError, ValueError) as e:
        raise SettingsError(
            f"screen_width must be a number, got {settings['screen_width']!r}"
        ) from e

    if not isinstance(settings["suggest_commands"], bool):
        raise SettingsError(
            f"suggest_commands must be true or false, "
            f"got {settings['suggest_commands']!r}"
        )
    return settings
