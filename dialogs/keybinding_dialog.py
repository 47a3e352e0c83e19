# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from PySide6.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QMessageBox, QWidget
from PySide6.QtGui import QAction
from ui_components.key_capture_edit import KeyCaptureEdit
from utils.constants import DEFAULT_KEYBINDINGS
from utils.localization import _


class KeybindingDialog(QDialog):
    def __init__(self, parent, title, keybindings, action_map):
        """
        keybindings: current {action_name: "Ctrl+S"} mapping.
        action_map: {action_name: QAction} used for the row labels.
        """
        super().__init__(parent)
        self.action_map = action_map
        self.keybindings = dict(keybindings)
        self.entries = {}

        self.setWindowTitle(title)
        self.setModal(True)
        self.resize(460, 480)

        self.setup_ui()

    def setup_ui(self):
        main_layout = QVBoxLayout(self)
        form_layout = QVBoxLayout()

        for action_name, action_obj in self.action_map.items():
            row_widget = QWidget()
            row_layout = QHBoxLayout(row_widget)
            row_layout.setContentsMargins(0, 0, 0, 0)
            description = action_obj.text().replace('&', '') if isinstance(action_obj, QAction) else str(action_obj)
            label = QLabel(description + ":")
            label.setMinimumWidth(180)
            row_layout.addWidget(label)

            key_sequence_str = self.keybindings.get(action_name, DEFAULT_KEYBINDINGS.get(action_name, ''))
            entry = KeyCaptureEdit(key_sequence_str, separator="+")
            entry.combination_captured.connect(lambda combo, e=entry: self._on_captured(e, combo))
            row_layout.addWidget(entry, 1)

            form_layout.addWidget(row_widget)
            self.entries[action_name] = entry

        main_layout.addLayout(form_layout)
        main_layout.addStretch(1)

        button_box = QHBoxLayout()
        reset_btn = QPushButton(_("Reset to Defaults"))
        reset_btn.clicked.connect(self.reset_to_defaults)
        button_box.addWidget(reset_btn)
        button_box.addStretch(1)

        ok_btn = QPushButton(_("OK"))
        ok_btn.clicked.connect(self.accept)
        button_box.addWidget(ok_btn)

        cancel_btn = QPushButton(_("Cancel"))
        cancel_btn.clicked.connect(self.reject)
        button_box.addWidget(cancel_btn)
        main_layout.addLayout(button_box)

    def _on_captured(self, entry, combination):
        # A shortcut may only belong to one action; the previous owner loses it.
        for other in self.entries.values():
            if other is not entry and other.value() == combination:
                other.set_value("")

    def reset_to_defaults(self):
        reply = QMessageBox.question(self, _("Confirm"),
                                     _("Are you sure you want to reset all keybindings to their default settings?"),
                                     QMessageBox.Yes | QMessageBox.No, QMessageBox.No)
        if reply == QMessageBox.Yes:
            for action_name, entry in self.entries.items():
                entry.set_value(DEFAULT_KEYBINDINGS.get(action_name, ''))

    def get_keybindings(self):
        result = dict(self.keybindings)
        for action_name, entry in self.entries.items():
            result[action_name] = entry.value().strip()
        return result

    def accept(self):
        for entry in self.entries.values():
            entry.cancel_capture()
        self.keybindings = self.get_keybindings()
        super().accept()

    def reject(self):
        for entry in self.entries.values():
            entry.cancel_capture()
        super().reject()
