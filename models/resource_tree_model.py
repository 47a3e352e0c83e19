# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from PySide6.QtCore import QAbstractItemModel, QModelIndex, Qt
from utils.localization import _

NodeRole = Qt.UserRole
FullPathRole = Qt.UserRole + 1


class ResourceTreeModel(QAbstractItemModel):
    """Group nodes of a resource tree; string leaves are shown in the string table instead."""

    def __init__(self, root=None, parent=None):
        super().__init__(parent)
        self._root = root

    @property
    def root(self):
        return self._root

    def reset_root(self, root):
        self.beginResetModel()
        self._root = root
        self.endResetModel()

    def refresh(self):
        self.beginResetModel()
        self.endResetModel()

    def _groups(self, node):
        if node is None:
            return []
        return node.groups()

    def node_from_index(self, index):
        if not index.isValid():
            return self._root
        return index.internalPointer()

    def index_for_node(self, node):
        if node is None or node is self._root or node.parent is None:
            return QModelIndex()
        siblings = self._groups(node.parent)
        for row, sibling in enumerate(siblings):
            if sibling is node:
                return self.createIndex(row, 0, node)
        return QModelIndex()

    def index(self, row, column, parent=QModelIndex()):
        if column != 0 or row < 0:
            return QModelIndex()
        parent_node = self.node_from_index(parent)
        groups = self._groups(parent_node)
        if row >= len(groups):
            return QModelIndex()
        return self.createIndex(row, column, groups[row])

    def parent(self, index=QModelIndex()):
        if not index.isValid():
            return QModelIndex()
        node = index.internalPointer()
        parent_node = node.parent if node is not None else None
        if parent_node is None or parent_node is self._root:
            return QModelIndex()
        return self.index_for_node(parent_node)

    def rowCount(self, parent=QModelIndex()):
        if parent.column() > 0:
            return 0
        return len(self._groups(self.node_from_index(parent)))

    def columnCount(self, parent=QModelIndex()):
        return 1

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        node = index.internalPointer()
        if role in (Qt.DisplayRole, Qt.EditRole):
            return node.key
        if role == Qt.ToolTipRole:
            if node.comment:
                return f"{node.full_path}\n{node.comment}"
            return node.full_path
        if role == NodeRole:
            return node
        if role == FullPathRole:
            return node.full_path
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if orientation == Qt.Horizontal and role == Qt.DisplayRole and section == 0:
            return _("Groups")
        return None

    def flags(self, index):
        if not index.isValid():
            return Qt.NoItemFlags
        return Qt.ItemIsEnabled | Qt.ItemIsSelectable
