# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from models.resource_info import GlobalSettings, ResourceInfo
from utils.constants import DEFAULT_STRING_KEY_TEMPLATE


def test_defaults():
    info = ResourceInfo()
    assert info.expanded_states == {}
    assert info.comments == {}
    assert info.settings.string_key_template == DEFAULT_STRING_KEY_TEMPLATE
    assert info.selected_tree_node_path is None


def test_to_dict_uses_pascal_case_keys():
    info = ResourceInfo()
    info.expanded_states["Common"] = False
    info.comments["Common.Ok"] = "button"
    info.selected_tree_node_path = "Common"
    data = info.to_dict()
    assert data == {
        "ExpandedStates": {"Common": False},
        "Comments": {"Common.Ok": "button"},
        "Settings": {"StringKeyTemplate": DEFAULT_STRING_KEY_TEMPLATE},
        "SelectedTreeNodePath": "Common",
        "SelectedStringItemPath": None,
    }


def test_from_dict_filters_bad_entries():
    info = ResourceInfo.from_dict({
        "ExpandedStates": {"A": True, "B": "yes"},
        "Comments": {"A.x": "note", "A.y": 3},
        "Settings": {"StringKeyTemplate": 12},
        "SelectedTreeNodePath": "",
        "SelectedStringItemPath": "A.x",
    })
    assert info.expanded_states == {"A": True}
    assert info.comments == {"A.x": "note"}
    assert info.settings.string_key_template == DEFAULT_STRING_KEY_TEMPLATE
    assert info.selected_tree_node_path is None
    assert info.selected_string_item_path == "A.x"


def test_from_dict_accepts_non_dict():
    assert ResourceInfo.from_dict(["nope"]).comments == {}
    assert GlobalSettings.from_dict(None).string_key_template == DEFAULT_STRING_KEY_TEMPLATE
