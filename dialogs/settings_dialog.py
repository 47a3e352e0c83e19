# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QGroupBox, QLabel, QLineEdit, QCheckBox,
    QPushButton, QDialogButtonBox, QMessageBox
)
from services.global_hotkey_service import normalize_hotkey_string, normalize_key, parse_hotkey_string
from services.string_key_service import template_has_placeholder
from ui_components.key_capture_edit import KeyCaptureEdit
from utils.constants import DEFAULT_STRING_KEY_TEMPLATE, NO_HOTKEY
from utils.localization import _
import logging
logger = logging.getLogger(__name__)


class SettingsDialog(QDialog):
    def __init__(self, parent, current_template, enable_global_hotkey, global_hotkey):
        super().__init__(parent)
        self.setWindowTitle(_("Settings"))
        self.setModal(True)
        self.resize(500, 320)

        self.string_key_template = current_template
        self.enable_global_hotkey = enable_global_hotkey
        self.global_hotkey = normalize_hotkey_string(global_hotkey)

        main_layout = QVBoxLayout(self)

        # String key template
        template_group = QGroupBox(_("String Key Template"))
        template_layout = QVBoxLayout(template_group)
        template_layout.addWidget(QLabel(_("Template (use {KEY} as the placeholder):")))
        self.template_edit = QLineEdit(current_template)
        template_layout.addWidget(self.template_edit)
        hint_label = QLabel(_("Example: {example}").format(example=DEFAULT_STRING_KEY_TEMPLATE))
        hint_label.setStyleSheet("color: gray; font-size: 11px;")
        template_layout.addWidget(hint_label)
        main_layout.addWidget(template_group)

        # Global hotkey
        hotkey_group = QGroupBox(_("Global Hotkey"))
        hotkey_layout = QVBoxLayout(hotkey_group)
        self.enable_hotkey_checkbox = QCheckBox(_("Enable global hotkey (bring the main window to front)"))
        self.enable_hotkey_checkbox.setChecked(enable_global_hotkey)
        hotkey_layout.addWidget(self.enable_hotkey_checkbox)

        hotkey_row = QHBoxLayout()
        hotkey_row.addWidget(QLabel(_("Hotkey:")))
        self.hotkey_edit = KeyCaptureEdit(self.global_hotkey, separator=" + ", key_normalizer=normalize_key)
        self.hotkey_edit.setMinimumWidth(200)
        self.hotkey_edit.setEnabled(enable_global_hotkey)
        hotkey_row.addWidget(self.hotkey_edit, 1)
        self.clear_button = QPushButton(_("Clear"))
        self.clear_button.clicked.connect(self.clear_hotkey)
        hotkey_row.addWidget(self.clear_button)
        hotkey_layout.addLayout(hotkey_row)

        hotkey_hint = QLabel(_("Click the field and press the desired combination (Ctrl+Alt combinations are recommended)."))
        hotkey_hint.setWordWrap(True)
        hotkey_hint.setStyleSheet("color: gray; font-size: 11px;")
        hotkey_layout.addWidget(hotkey_hint)
        main_layout.addWidget(hotkey_group)

        self.enable_hotkey_checkbox.toggled.connect(self.hotkey_edit.setEnabled)
        self.enable_hotkey_checkbox.toggled.connect(self.clear_button.setEnabled)
        self.clear_button.setEnabled(enable_global_hotkey)

        main_layout.addStretch(1)
        button_box = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        button_box.button(QDialogButtonBox.Ok).setText(_("OK (&S)"))
        button_box.accepted.connect(self.accept)
        button_box.rejected.connect(self.reject)
        main_layout.addWidget(button_box)

        self.template_edit.setFocus()

    def clear_hotkey(self):
        self.hotkey_edit.set_value(NO_HOTKEY)

    def accept(self):
        template = self.template_edit.text()
        if not template_has_placeholder(template):
            reply = QMessageBox.question(
                self, _("Confirm"),
                _("The template does not contain {KEY}; every copied key will be identical. Keep it anyway?"),
                QMessageBox.Yes | QMessageBox.No, QMessageBox.No)
            if reply != QMessageBox.Yes:
                return

        hotkey_text = self.hotkey_edit.value()
        _modifiers, key = parse_hotkey_string(hotkey_text)
        if self.enable_hotkey_checkbox.isChecked() and hotkey_text != NO_HOTKEY and key is None:
            QMessageBox.warning(self, _("Notice"), _("'{hotkey}' is not a valid hotkey.").format(hotkey=hotkey_text))
            return

        self.string_key_template = template
        self.enable_global_hotkey = self.enable_hotkey_checkbox.isChecked()
        self.global_hotkey = normalize_hotkey_string(hotkey_text)
        logger.debug(f"Settings accepted: template={template!r}, hotkey={self.global_hotkey!r}, "
                     f"enabled={self.enable_global_hotkey}")
        super().accept()
