# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

APP_NAME = "I18nStringEditor"
APP_VERSION = "1.0.0"
CONFIG_FILE = "settings.json"
MAX_RECENT_FILES = 10

ROOT_NODE_KEY = "Root"
PATH_SEPARATOR = "."
STRING_KEY_SEPARATOR = "_"
INFO_FILE_SUFFIX = ".info"
RESOURCE_FILE_EXTENSION = ".json"

KEY_PLACEHOLDER = "{KEY}"
DEFAULT_STRING_KEY_TEMPLATE = "{I18N {x:Static Strings.{KEY}}}"

AUTO_SAVE_DELAY_MS = 2000
SEARCH_DELAY_MS = 200
STATUS_MESSAGE_TIMEOUT_MS = 5000

DEFAULT_GLOBAL_HOTKEY = "Ctrl + Alt + I"
NO_HOTKEY = "None"

DEFAULT_WINDOW_WIDTH = 1200
DEFAULT_WINDOW_HEIGHT = 800
DEFAULT_LEFT_PANEL_WIDTH = 300

DEFAULT_KEYBINDINGS = {
    'open_file': 'Ctrl+O',
    'save_file': 'Ctrl+S',
    'add_group': 'Ctrl+G',
    'add_string': 'Ctrl+N',
    'rename_group': 'F2',
    'delete_string': 'Delete',
    'delete_group': 'Ctrl+Shift+Delete',
    'sort_nodes': 'Ctrl+Shift+S',
    'copy_string_key': 'Ctrl+Shift+C',
    'focus_search': 'Ctrl+F',
    'toggle_other_languages': 'Ctrl+L',
    'open_settings': 'Ctrl+,',
}
