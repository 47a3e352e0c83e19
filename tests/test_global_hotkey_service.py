# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import sys
import types

import pytest

from services.global_hotkey_service import (
    GlobalHotkeyService, format_hotkey, normalize_hotkey_string, normalize_key, parse_hotkey_string,
    to_pynput_hotkey
)


def test_parse_default_hotkey():
    modifiers, key = parse_hotkey_string("Ctrl + Alt + I")
    assert modifiers == frozenset({"Ctrl", "Alt"})
    assert key == "I"


def test_parse_is_lenient_about_spacing_and_case():
    assert parse_hotkey_string("ctrl+shift+f5") == (frozenset({"Ctrl", "Shift"}), "F5")
    assert parse_hotkey_string("control + meta + pgup") == (frozenset({"Ctrl", "Win"}), "PageUp")


def test_parse_none_and_unknown():
    assert parse_hotkey_string("None") == (frozenset(), None)
    assert parse_hotkey_string("") == (frozenset(), None)
    assert parse_hotkey_string("Ctrl + Hyper") == (frozenset({"Ctrl"}), None)


def test_function_keys_up_to_f24():
    assert parse_hotkey_string("Ctrl + F21") == (frozenset({"Ctrl"}), "F21")
    assert parse_hotkey_string("f24") == (frozenset(), "F24")
    assert to_pynput_hotkey(frozenset({"Alt"}), "F24") == "<alt>+<f24>"
    assert parse_hotkey_string("F25") == (frozenset(), None)


def test_normalize_key():
    assert normalize_key("a") == "A"
    assert normalize_key("esc") == "Escape"
    assert normalize_key("f12") == "F12"
    assert normalize_key("/") == "/"
    assert normalize_key("Volume") is None


def test_format_orders_modifiers():
    assert format_hotkey({"Shift", "Ctrl"}, "K") == "Ctrl + Shift + K"
    assert format_hotkey({"Ctrl"}, None) == "None"
    assert normalize_hotkey_string("alt+ctrl+x") == "Ctrl + Alt + X"


def test_pynput_hotkey_strings():
    assert to_pynput_hotkey(frozenset({"Ctrl", "Alt"}), "I") == "<ctrl>+<alt>+i"
    assert to_pynput_hotkey(frozenset({"Win"}), "PageDown") == "<cmd>+<page_down>"
    assert to_pynput_hotkey(frozenset(), "F5") == "<f5>"
    assert to_pynput_hotkey(frozenset({"Ctrl"}), None) is None


def test_register_rejects_invalid_hotkey(qapp):
    service = GlobalHotkeyService()
    assert service.register_hotkey("Ctrl + Alt", lambda: None) == -1
    assert service.registered_ids == []
    service.dispose()


def test_dispatch_runs_callback(qapp):
    service = GlobalHotkeyService()
    calls = []
    service._hotkeys[7] = ("<ctrl>+<alt>+i", lambda: calls.append("hit"))
    triggered = []
    service.hotkey_triggered.connect(triggered.append)
    service._dispatch(7)
    service._dispatch(99)
    assert calls == ["hit"]
    assert triggered == [7]
    service._hotkeys.clear()
    service.dispose()


def test_disposed_service_refuses_registration(qapp):
    service = GlobalHotkeyService()
    service.dispose()
    assert service.register_hotkey("Ctrl + Alt + I", lambda: None) == -1


class RecordingHotKeys:
    instances = []
    fail_with = None

    def __init__(self, mapping):
        if RecordingHotKeys.fail_with is not None:
            raise RecordingHotKeys.fail_with
        self.mapping = dict(mapping)
        self.daemon = False
        self.started = False
        self.stopped = False
        RecordingHotKeys.instances.append(self)

    def start(self):
        self.started = True

    def stop(self):
        self.stopped = True


@pytest.fixture
def recording_pynput(monkeypatch):
    RecordingHotKeys.instances = []
    RecordingHotKeys.fail_with = None
    keyboard = types.ModuleType("pynput.keyboard")
    keyboard.GlobalHotKeys = RecordingHotKeys
    package = types.ModuleType("pynput")
    package.keyboard = keyboard
    monkeypatch.setitem(sys.modules, "pynput", package)
    monkeypatch.setitem(sys.modules, "pynput.keyboard", keyboard)
    return RecordingHotKeys


def test_register_starts_listener_with_combo(qapp, recording_pynput):
    service = GlobalHotkeyService()
    calls = []
    hotkey_id = service.register_hotkey("Ctrl + Alt + I", lambda: calls.append("front"))
    assert hotkey_id == 1
    listener = recording_pynput.instances[-1]
    assert set(listener.mapping) == {"<ctrl>+<alt>+i"}
    assert listener.started and listener.daemon

    listener.mapping["<ctrl>+<alt>+i"]()
    assert calls == ["front"]
    service.dispose()


def test_register_unregister_and_dispose_restart_listener(qapp, recording_pynput):
    service = GlobalHotkeyService()
    first = service.register_hotkey("Ctrl + Alt + I", None)
    second = service.register_hotkey("F5", None)
    assert service.register_hotkey("ctrl+alt+i", None) == -1
    assert service.registered_ids == [first, second]

    old_listener, listener = recording_pynput.instances[-2:]
    assert old_listener.stopped
    assert set(listener.mapping) == {"<ctrl>+<alt>+i", "<f5>"}

    service.unregister_hotkey(first)
    assert listener.stopped
    assert set(recording_pynput.instances[-1].mapping) == {"<f5>"}

    last = recording_pynput.instances[-1]
    service.dispose()
    assert last.stopped
    assert service.registered_ids == []
    assert service._listener is None


def test_listener_failure_rolls_back_registration(qapp, recording_pynput):
    recording_pynput.fail_with = ValueError("unsupported key")
    service = GlobalHotkeyService()
    assert service.register_hotkey("Ctrl + F24", None) == -1
    assert service.registered_ids == []
    service.dispose()
