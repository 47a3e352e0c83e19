# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex
from PySide6.QtGui import QColor
from utils.localization import _


class OtherLanguagesModel(QAbstractTableModel):
    def __init__(self, parent=None):
        super().__init__(parent)
        self._values = []

    def set_values(self, values):
        self.beginResetModel()
        self._values = list(values)
        self.endResetModel()

    def clear(self):
        self.set_values([])

    @property
    def values(self):
        return list(self._values)

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._values)

    def columnCount(self, parent=QModelIndex()):
        return 2

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid() or index.row() >= len(self._values):
            return None
        item = self._values[index.row()]
        if role == Qt.DisplayRole:
            if index.column() == 0:
                return item.language_file
            if item.value is None:
                return _("(missing)")
            return item.value
        if role == Qt.ForegroundRole and index.column() == 1:
            if item.failed:
                return QColor("#F56C6C")
            if item.value is None:
                return QColor("#909399")
        if role == Qt.ToolTipRole and index.column() == 1:
            return item.value
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if orientation == Qt.Horizontal and role == Qt.DisplayRole:
            return [_("Language File"), _("Value")][section] if section < 2 else None
        return None
