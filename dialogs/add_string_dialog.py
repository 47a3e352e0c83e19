# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QLabel, QLineEdit, QDialogButtonBox, QMessageBox
)
from services.string_key_service import read_clipboard_text
from utils.localization import _


class AddStringDialog(QDialog):
    def __init__(self, parent, group_path="", prefill_from_clipboard=True):
        super().__init__(parent)
        self.setWindowTitle(_("Add String"))
        self.setModal(True)
        self.resize(450, 200)

        self.string_key = ""
        self.string_value = ""
        self.string_comment = ""

        main_layout = QVBoxLayout(self)
        if group_path:
            group_label = QLabel(_("Group: {path}").format(path=group_path))
            group_label.setStyleSheet("color: gray;")
            main_layout.addWidget(group_label)

        form_layout = QFormLayout()
        self.key_edit = QLineEdit()
        self.value_edit = QLineEdit()
        self.comment_edit = QLineEdit()
        form_layout.addRow(_("Key:"), self.key_edit)
        form_layout.addRow(_("Value:"), self.value_edit)
        form_layout.addRow(_("Comment:"), self.comment_edit)
        main_layout.addLayout(form_layout)

        button_box = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        button_box.button(QDialogButtonBox.Ok).setText(_("OK (&S)"))
        button_box.accepted.connect(self.accept)
        button_box.rejected.connect(self.reject)
        main_layout.addWidget(button_box)

        if prefill_from_clipboard:
            clipboard_text = read_clipboard_text()
            if clipboard_text:
                self.value_edit.setText(clipboard_text)
        self.key_edit.setFocus()

    def accept(self):
        key = self.key_edit.text().strip()
        if not key:
            QMessageBox.warning(self, _("Notice"), _("Key cannot be empty."))
            self.key_edit.setFocus()
            return
        self.string_key = key
        self.string_value = self.value_edit.text()
        self.string_comment = self.comment_edit.text()
        super().accept()
