# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import json
import os
from utils.constants import (
    DEFAULT_GLOBAL_HOTKEY, DEFAULT_KEYBINDINGS, DEFAULT_LEFT_PANEL_WIDTH,
    DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH, MAX_RECENT_FILES
)
from utils.enums import ThemeMode
from utils.path_utils import get_config_file_path
import logging
logger = logging.getLogger(__name__)


def load_config(config_path=None):
    config_path = config_path or get_config_file_path()
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)
    except FileNotFoundError:
        config_data = {}
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        logger.warning(f"Settings file '{config_path}' is unreadable, using defaults: {e}")
        config_data = {}
    if not isinstance(config_data, dict):
        logger.warning(f"Settings file '{config_path}' does not hold an object, using defaults")
        config_data = {}

    # Files
    config_data.setdefault("last_opened_file_path", None)
    config_data.setdefault("recent_files", [])
    config_data["recent_files"] = [p for p in config_data["recent_files"] if isinstance(p, str)][:MAX_RECENT_FILES]
    config_data.setdefault("last_dir", "")

    # Window state
    config_data.setdefault("window_geometry", "")
    config_data.setdefault("window_width", DEFAULT_WINDOW_WIDTH)
    config_data.setdefault("window_height", DEFAULT_WINDOW_HEIGHT)
    config_data.setdefault("left_panel_width", DEFAULT_LEFT_PANEL_WIDTH)
    config_data.setdefault("show_other_languages_panel", True)

    # Appearance
    config_data["theme_mode"] = ThemeMode.from_value(config_data.get("theme_mode")).value
    config_data.setdefault("language", "")

    # Global hotkey
    config_data.setdefault("enable_global_hotkey", True)
    config_data.setdefault("global_hotkey", DEFAULT_GLOBAL_HOTKEY)

    # Keybindings
    if not isinstance(config_data.get('keybindings'), dict):
        config_data['keybindings'] = DEFAULT_KEYBINDINGS.copy()
    else:
        for key, value in DEFAULT_KEYBINDINGS.items():
            config_data['keybindings'].setdefault(key, value)

    return config_data


def save_config(config, config_path=None):
    config_path = config_path or get_config_file_path()
    try:
        directory = os.path.dirname(config_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(config_path, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=4, ensure_ascii=False)
        return True
    except (OSError, TypeError) as e:
        logger.error(f"Error saving config file: {e}")
        return False


def add_recent_file(config, filepath):
    if not filepath:
        return config.get("recent_files", [])
    recent_files = [p for p in config.get("recent_files", []) if os.path.normcase(p) != os.path.normcase(filepath)]
    recent_files.insert(0, filepath)
    config["recent_files"] = recent_files[:MAX_RECENT_FILES]
    return config["recent_files"]
