# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import sys
import os
import platform
from functools import lru_cache
from utils.constants import APP_NAME, CONFIG_FILE, INFO_FILE_SUFFIX


def get_resource_path(relative_path: str) -> str:
    base_path = getattr(sys, "_MEIPASS", None) or os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(base_path, relative_path)


@lru_cache(maxsize=None)
def get_app_data_path() -> str:
    """
    Returns the directory holding the editor's own settings.
    - Windows: C:/Users/User/AppData/Roaming/I18nStringEditor
    - macOS: ~/Library/Application Support/I18nStringEditor
    - Linux: ~/.local/share/I18nStringEditor
    """
    if platform.system() == "Windows":
        base_path = os.environ.get('APPDATA') or os.environ.get('LOCALAPPDATA')
        if not base_path:
            base_path = os.path.expanduser('~')
    elif platform.system() == "Darwin":
        base_path = os.path.expanduser('~/Library/Application Support')
    else:
        base_path = os.environ.get('XDG_DATA_HOME') or os.path.expanduser('~/.local/share')

    app_data_path = os.path.join(base_path, APP_NAME)
    os.makedirs(app_data_path, exist_ok=True)
    return app_data_path


def get_config_file_path() -> str:
    return os.path.join(get_app_data_path(), CONFIG_FILE)


def get_info_file_path(resource_path: str) -> str:
    if not resource_path:
        return ""
    return resource_path + INFO_FILE_SUFFIX
