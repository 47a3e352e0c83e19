# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import re
from PySide6.QtCore import QObject, Signal
from utils.constants import NO_HOTKEY
import logging
logger = logging.getLogger(__name__)

MOD_CTRL = "Ctrl"
MOD_ALT = "Alt"
MOD_SHIFT = "Shift"
MOD_WIN = "Win"
MODIFIER_ORDER = (MOD_CTRL, MOD_ALT, MOD_SHIFT, MOD_WIN)

MODIFIER_ALIASES = {
    "ctrl": MOD_CTRL, "control": MOD_CTRL,
    "alt": MOD_ALT, "option": MOD_ALT,
    "shift": MOD_SHIFT,
    "win": MOD_WIN, "windows": MOD_WIN, "meta": MOD_WIN, "super": MOD_WIN, "cmd": MOD_WIN,
}

PYNPUT_MODIFIERS = {
    MOD_CTRL: "<ctrl>",
    MOD_ALT: "<alt>",
    MOD_SHIFT: "<shift>",
    MOD_WIN: "<cmd>",
}

# Display name -> pynput name
NAMED_KEYS = {
    "Space": "space", "Tab": "tab", "Enter": "enter", "Escape": "esc", "Backspace": "backspace",
    "Insert": "insert", "Delete": "delete", "Home": "home", "End": "end",
    "PageUp": "page_up", "PageDown": "page_down",
    "Up": "up", "Down": "down", "Left": "left", "Right": "right",
    "Pause": "pause", "PrintScreen": "print_screen",
}
NAMED_KEYS.update({f"F{i}": f"f{i}" for i in range(1, 25)})

KEY_ALIASES = {
    "esc": "Escape", "return": "Enter", "del": "Delete", "ins": "Insert",
    "pgup": "PageUp", "prior": "PageUp", "pgdn": "PageDown", "next": "PageDown",
    "back": "Backspace", "print": "PrintScreen", "prtsc": "PrintScreen",
}

PUNCTUATION_KEYS = set("`~-=[]\\;',./")

_SPLIT_RE = re.compile(r"[+\s]+")


def normalize_key(key_text):
    if not key_text:
        return None
    text = key_text.strip()
    if len(text) == 1:
        if text.isalnum():
            return text.upper()
        if text in PUNCTUATION_KEYS:
            return text
        return None
    lowered = text.lower()
    if lowered in KEY_ALIASES:
        return KEY_ALIASES[lowered]
    for name in NAMED_KEYS:
        if name.lower() == lowered:
            return name
    return None


def parse_hotkey_string(hotkey_string):
    """
    Parses "Ctrl + Alt + I" style text.
    Returns (frozenset of modifiers, key or None); unknown keys yield None.
    """
    if not hotkey_string or not hotkey_string.strip() or hotkey_string.strip().lower() == NO_HOTKEY.lower():
        return frozenset(), None

    modifiers = set()
    key = None
    for part in _SPLIT_RE.split(hotkey_string.strip()):
        if not part:
            continue
        modifier = MODIFIER_ALIASES.get(part.lower())
        if modifier:
            modifiers.add(modifier)
        else:
            key = normalize_key(part)
    return frozenset(modifiers), key


def format_hotkey(modifiers, key):
    if not key:
        return NO_HOTKEY
    parts = [m for m in MODIFIER_ORDER if m in modifiers]
    parts.append(key)
    return " + ".join(parts)


def normalize_hotkey_string(hotkey_string):
    modifiers, key = parse_hotkey_string(hotkey_string)
    return format_hotkey(modifiers, key)


def to_pynput_hotkey(modifiers, key):
    if not key:
        return None
    parts = [PYNPUT_MODIFIERS[m] for m in MODIFIER_ORDER if m in modifiers]
    if key in NAMED_KEYS:
        parts.append(f"<{NAMED_KEYS[key]}>")
    else:
        parts.append(key.lower())
    return "+".join(parts)


class GlobalHotkeyService(QObject):
    """
    System-wide hotkeys backed by a pynput listener thread.
    Callbacks always run on the thread owning this object (the GUI thread).
    """
    hotkey_triggered = Signal(int)
    _listener_fired = Signal(int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._hotkeys = {}
        self._current_id = 0
        self._listener = None
        self._is_disposed = False
        self._listener_fired.connect(self._dispatch)

    @property
    def registered_ids(self):
        return sorted(self._hotkeys)

    def register_hotkey(self, hotkey_string, callback):
        if self._is_disposed:
            return -1
        modifiers, key = parse_hotkey_string(hotkey_string)
        combo = to_pynput_hotkey(modifiers, key)
        if combo is None:
            logger.warning(f"Cannot register global hotkey '{hotkey_string}': no valid key")
            return -1
        if any(existing == combo for existing, _cb in self._hotkeys.values()):
            logger.warning(f"Global hotkey '{hotkey_string}' is already registered")
            return -1

        self._current_id += 1
        hotkey_id = self._current_id
        self._hotkeys[hotkey_id] = (combo, callback)
        if not self._restart_listener():
            del self._hotkeys[hotkey_id]
            self._restart_listener()
            return -1
        logger.info(f"Registered global hotkey '{format_hotkey(modifiers, key)}' ({combo}) as #{hotkey_id}")
        return hotkey_id

    def unregister_hotkey(self, hotkey_id):
        if hotkey_id in self._hotkeys:
            del self._hotkeys[hotkey_id]
            self._restart_listener()

    def unregister_all(self):
        self._hotkeys.clear()
        self._stop_listener()

    def dispose(self):
        if self._is_disposed:
            return
        self.unregister_all()
        self._is_disposed = True

    def _dispatch(self, hotkey_id):
        entry = self._hotkeys.get(hotkey_id)
        if entry is None:
            return
        _combo, callback = entry
        if callback is not None:
            callback()
        self.hotkey_triggered.emit(hotkey_id)

    def _stop_listener(self):
        if self._listener is not None:
            self._listener.stop()
            self._listener = None

    def _restart_listener(self):
        self._stop_listener()
        if not self._hotkeys:
            return True
        try:
            from pynput import keyboard
        except ImportError as e:
            logger.warning(f"Global hotkeys are unavailable (pynput could not be loaded): {e}")
            return False

        mapping = {}
        for hotkey_id, (combo, _cb) in self._hotkeys.items():
            mapping[combo] = lambda hid=hotkey_id: self._listener_fired.emit(hid)
        try:
            self._listener = keyboard.GlobalHotKeys(mapping)
            self._listener.daemon = True
            self._listener.start()
        except (ValueError, OSError, RuntimeError) as e:
            logger.warning(f"Failed to start global hotkey listener: {e}")
            self._listener = None
            return False
        return True
