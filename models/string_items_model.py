# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex, Signal
from services.resource_file_service import ResourceKeyError
from utils.localization import _

COLUMN_KEY = 0
COLUMN_VALUE = 1
COLUMN_COMMENT = 2


class StringItemsModel(QAbstractTableModel):
    item_edited = Signal(object, int)
    edit_rejected = Signal(str)

    def __init__(self, resource_service, parent=None):
        super().__init__(parent)
        self.resource_service = resource_service
        self.group_node = None
        self._items = []

    def headers(self):
        return [_("Key"), _("Value"), _("Comment")]

    @property
    def items(self):
        return list(self._items)

    def set_group(self, group_node):
        self.beginResetModel()
        self.group_node = group_node
        self._items = group_node.leaves() if group_node is not None else []
        self.endResetModel()

    def reload(self):
        self.set_group(self.group_node)

    def clear(self):
        self.set_group(None)

    def node_at(self, row):
        if 0 <= row < len(self._items):
            return self._items[row]
        return None

    def row_of(self, node):
        for row, item in enumerate(self._items):
            if item is node:
                return row
        return -1

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._items)

    def columnCount(self, parent=QModelIndex()):
        return 3

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        node = self.node_at(index.row())
        if node is None:
            return None
        col = index.column()

        if role in (Qt.DisplayRole, Qt.EditRole):
            if col == COLUMN_KEY:
                return node.key
            elif col == COLUMN_VALUE:
                return node.value or ""
            elif col == COLUMN_COMMENT:
                return node.comment or ""
        elif role == Qt.ToolTipRole:
            if col == COLUMN_KEY:
                return node.full_path
            elif col == COLUMN_VALUE:
                return node.value
            elif col == COLUMN_COMMENT:
                return node.comment
        elif role == Qt.UserRole:
            return node
        return None

    def setData(self, index, value, role=Qt.EditRole):
        if not index.isValid() or role != Qt.EditRole:
            return False
        node = self.node_at(index.row())
        if node is None:
            return False
        col = index.column()
        text = "" if value is None else str(value)

        if col == COLUMN_KEY:
            try:
                changed = self.resource_service.rename_node(node, text)
            except ResourceKeyError as e:
                self.edit_rejected.emit(str(e))
                return False
            if not changed:
                return False
        elif col == COLUMN_VALUE:
            if node.value == text:
                return False
            node.value = text
        elif col == COLUMN_COMMENT:
            new_comment = text or None
            if node.comment == new_comment:
                return False
            node.comment = new_comment
        else:
            return False

        self.dataChanged.emit(index, index, [Qt.DisplayRole, Qt.EditRole])
        self.item_edited.emit(node, col)
        return True

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role == Qt.DisplayRole:
            if orientation == Qt.Horizontal:
                headers = self.headers()
                if 0 <= section < len(headers):
                    return headers[section]
            else:
                return section + 1
        return None

    def flags(self, index):
        if not index.isValid():
            return Qt.NoItemFlags
        return Qt.ItemIsEnabled | Qt.ItemIsSelectable | Qt.ItemIsEditable
