# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from PySide6.QtCore import QEvent, Qt
from PySide6.QtGui import QAction, QKeyEvent
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QDialog

from dialogs.add_string_dialog import AddStringDialog
from dialogs.keybinding_dialog import KeybindingDialog
from dialogs.settings_dialog import SettingsDialog
from services.global_hotkey_service import normalize_key
from services.string_key_service import copy_to_clipboard
from ui_components.key_capture_edit import KeyCaptureEdit
from utils.constants import DEFAULT_KEYBINDINGS


def press(widget, key, modifiers=Qt.NoModifier):
    widget.keyPressEvent(QKeyEvent(QEvent.KeyPress, key, modifiers))


def test_key_capture_records_combination(qapp):
    edit = KeyCaptureEdit("None", separator=" + ", key_normalizer=normalize_key)
    captured = []
    edit.combination_captured.connect(captured.append)
    edit.start_capture()
    assert edit.value() == "None"
    press(edit, Qt.Key_I, Qt.ControlModifier | Qt.AltModifier)
    assert captured == ["Ctrl + Alt + I"]
    assert edit.value() == "Ctrl + Alt + I"
    assert not edit.is_capturing


def test_key_capture_escape_cancels(qapp):
    edit = KeyCaptureEdit("Ctrl+S")
    edit.start_capture()
    press(edit, Qt.Key_Escape)
    assert edit.text() == "Ctrl+S"
    assert not edit.is_capturing


def test_add_string_dialog_prefills_value_from_clipboard(qapp):
    copy_to_clipboard("Hello world")
    dialog = AddStringDialog(None, group_path="Common")
    assert dialog.value_edit.text() == "Hello world"
    dialog.key_edit.setText("  Greeting ")
    dialog.comment_edit.setText("shown on start")
    dialog.accept()
    assert dialog.string_key == "Greeting"
    assert dialog.string_value == "Hello world"
    assert dialog.string_comment == "shown on start"


def test_settings_dialog_normalizes_hotkey(qapp):
    dialog = SettingsDialog(None, "{KEY}", True, "ctrl+alt+i")
    assert dialog.hotkey_edit.value() == "Ctrl + Alt + I"
    dialog.template_edit.setText("T.{KEY}")
    dialog.clear_hotkey()
    dialog.accept()
    assert dialog.string_key_template == "T.{KEY}"
    assert dialog.global_hotkey == "None"
    assert dialog.enable_global_hotkey is True


def test_settings_checkbox_toggles_capture_field(qapp):
    dialog = SettingsDialog(None, "{KEY}", False, "Ctrl + Alt + I")
    assert not dialog.hotkey_edit.isEnabled()
    dialog.enable_hotkey_checkbox.setChecked(True)
    assert dialog.hotkey_edit.isEnabled()


def test_keybinding_dialog_moves_duplicate_shortcut(qapp):
    actions = {"save_file": QAction("&Save"), "sort_nodes": QAction("S&ort")}
    dialog = KeybindingDialog(None, "Keys", DEFAULT_KEYBINDINGS, actions)
    dialog.entries["save_file"].set_value("Ctrl+Shift+S")
    dialog._on_captured(dialog.entries["save_file"], "Ctrl+Shift+S")
    bindings = dialog.get_keybindings()
    assert bindings["save_file"] == "Ctrl+Shift+S"
    assert bindings["sort_nodes"] == ""


def test_alt_s_accepts_add_string_dialog(qapp):
    dialog = AddStringDialog(None, prefill_from_clipboard=False)
    dialog.show()
    dialog.key_edit.setText("Greeting")
    QTest.keyClick(dialog.key_edit, Qt.Key_S, Qt.AltModifier)
    assert dialog.result() == QDialog.Accepted
    assert not dialog.isVisible()
    assert dialog.string_key == "Greeting"


def test_alt_s_accepts_settings_dialog(qapp):
    dialog = SettingsDialog(None, "{KEY}", True, "Ctrl + Alt + I")
    dialog.show()
    QTest.keyClick(dialog.template_edit, Qt.Key_S, Qt.AltModifier)
    assert dialog.result() == QDialog.Accepted
    assert dialog.global_hotkey == "Ctrl + Alt + I"
