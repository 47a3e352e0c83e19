# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from PySide6.QtWidgets import QLineEdit
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QKeySequence
from utils.localization import _

MODIFIER_KEYS = (Qt.Key_Control, Qt.Key_Shift, Qt.Key_Alt, Qt.Key_Meta, Qt.Key_AltGr)


class KeyCaptureEdit(QLineEdit):
    """
    Read-only line edit that records a key combination after being clicked.
    separator="+" produces QKeySequence text ("Ctrl+Shift+S"), " + " the display form ("Ctrl + Alt + I").
    """
    combination_captured = Signal(str)

    def __init__(self, text="", separator="+", key_normalizer=None, parent=None):
        super().__init__(text, parent)
        self.separator = separator
        self.key_normalizer = key_normalizer
        self.is_capturing = False
        self._value_before_capture = text
        self.setReadOnly(True)
        self.setPlaceholderText(_("Click to set a shortcut..."))

    def value(self):
        return self._value_before_capture if self.is_capturing else self.text()

    def set_value(self, text):
        self.stop_capture()
        self._value_before_capture = text
        self.setText(text)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton and self.isEnabled():
            if self.is_capturing:
                self.cancel_capture()
            else:
                self.start_capture()
        super().mousePressEvent(event)

    def start_capture(self):
        self._value_before_capture = self.text()
        self.is_capturing = True
        self.setStyleSheet("border: 2px solid #409EFF;")
        self.setText(_("Press a key combination..."))
        self.setFocus()

    def cancel_capture(self):
        if self.is_capturing:
            self.setText(self._value_before_capture)
        self.stop_capture()

    def stop_capture(self):
        self.is_capturing = False
        self.setStyleSheet("")

    def focusOutEvent(self, event):
        self.cancel_capture()
        super().focusOutEvent(event)

    def modifier_names(self, modifiers):
        parts = []
        if modifiers & Qt.ControlModifier:
            parts.append('Ctrl')
        if modifiers & Qt.AltModifier:
            parts.append('Alt')
        if modifiers & Qt.ShiftModifier:
            parts.append('Shift')
        if modifiers & Qt.MetaModifier:
            parts.append('Win' if self.separator != "+" else 'Meta')
        return parts

    def keyPressEvent(self, event):
        if not self.is_capturing:
            super().keyPressEvent(event)
            return

        key = event.key()
        parts = self.modifier_names(event.modifiers())

        if key in MODIFIER_KEYS:
            self.setText(self.separator.join(parts + ["..."]))
            return

        if key == Qt.Key_Escape and not parts:
            self.cancel_capture()
            return

        key_name = QKeySequence(key).toString(QKeySequence.PortableText)
        if self.key_normalizer is not None:
            key_name = self.key_normalizer(key_name)
        if not key_name:
            self.setText(_("Unsupported key, try another..."))
            return

        combination = self.separator.join(parts + [key_name])
        self._value_before_capture = combination
        self.setText(combination)
        self.stop_capture()
        self.combination_captured.emit(combination)
