# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import json

from utils import config_manager
from utils.constants import DEFAULT_GLOBAL_HOTKEY, DEFAULT_KEYBINDINGS, MAX_RECENT_FILES


def test_missing_file_gives_defaults(tmp_path):
    config = config_manager.load_config(str(tmp_path / "none.json"))
    assert config["recent_files"] == []
    assert config["theme_mode"] == "System"
    assert config["global_hotkey"] == DEFAULT_GLOBAL_HOTKEY
    assert config["enable_global_hotkey"] is True
    assert config["keybindings"] == DEFAULT_KEYBINDINGS


def test_corrupt_file_gives_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2", encoding="utf-8")
    assert config_manager.load_config(str(path))["show_other_languages_panel"] is True
    path.write_text("[1, 2]", encoding="utf-8")
    assert config_manager.load_config(str(path))["last_dir"] == ""


def test_existing_values_are_kept_and_normalized(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "theme_mode": "dark",
        "keybindings": {"save_file": "Ctrl+Shift+S"},
        "recent_files": ["a.json", 5, "b.json"],
    }), encoding="utf-8")
    config = config_manager.load_config(str(path))
    assert config["theme_mode"] == "Dark"
    assert config["keybindings"]["save_file"] == "Ctrl+Shift+S"
    assert config["keybindings"]["open_file"] == DEFAULT_KEYBINDINGS["open_file"]
    assert config["recent_files"] == ["a.json", "b.json"]


def test_save_and_reload(tmp_path):
    path = tmp_path / "nested" / "settings.json"
    config = config_manager.load_config(str(path))
    config["last_opened_file_path"] = "/data/en.json"
    assert config_manager.save_config(config, str(path))
    assert config_manager.load_config(str(path))["last_opened_file_path"] == "/data/en.json"


def test_add_recent_file_moves_to_front_and_caps():
    config = {"recent_files": []}
    for i in range(MAX_RECENT_FILES + 3):
        config_manager.add_recent_file(config, f"/f{i}.json")
    config_manager.add_recent_file(config, "/f5.json")
    assert config["recent_files"][0] == "/f5.json"
    assert config["recent_files"].count("/f5.json") == 1
    assert len(config["recent_files"]) == MAX_RECENT_FILES
