# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from models.resource_node import ResourceNode
from services.string_key_service import (
    copy_to_clipboard, read_clipboard_text, render_string_key, template_has_placeholder, to_string_key
)
from utils.constants import DEFAULT_STRING_KEY_TEMPLATE


def test_to_string_key_from_path():
    assert to_string_key("Common.Dialogs.Title") == "Common_Dialogs_Title"
    assert to_string_key("") == ""
    assert to_string_key(None) == ""


def test_to_string_key_from_node():
    root = ResourceNode.create_root()
    leaf = root.add_child(ResourceNode("A")).add_child(ResourceNode("B", "v"))
    assert to_string_key(leaf) == "A_B"


def test_render_default_template():
    assert render_string_key(DEFAULT_STRING_KEY_TEMPLATE, "Menu.File") == "{I18N {x:Static Strings.Menu_File}}"


def test_render_replaces_every_placeholder():
    assert render_string_key("{KEY}/{KEY}", "A.B") == "A_B/A_B"
    assert render_string_key("constant", "A.B") == "constant"


def test_template_has_placeholder():
    assert template_has_placeholder("x{KEY}")
    assert not template_has_placeholder("x{key}")
    assert not template_has_placeholder("")


def test_clipboard_round_trip(qapp):
    assert copy_to_clipboard("Strings.A_B")
    assert read_clipboard_text() == "Strings.A_B"
