# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import json
import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from PySide6.QtWidgets import QApplication

SAMPLE_RESOURCE = {
    "Common": {
        "Ok": "OK",
        "Cancel": "Cancel",
        "Dialogs": {
            "Title": "Confirm",
        },
    },
    "Menu": {
        "File": "File",
        "Exit": "Exit",
    },
    "AppName": "Demo",
}


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    config_path = tmp_path / "config" / "settings.json"
    monkeypatch.setattr("utils.config_manager.get_config_file_path", lambda: str(config_path))
    return config_path


def write_json(path, data):
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def resource_file(tmp_path):
    return write_json(tmp_path / "en.json", SAMPLE_RESOURCE)
