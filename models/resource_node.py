# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from utils.constants import PATH_SEPARATOR, ROOT_NODE_KEY, STRING_KEY_SEPARATOR


class ResourceNode:
    """
    One entry of a resource tree: a group (JSON object) or a string (leaf).
    The invisible root carries the key "Root" and never appears in paths.
    """

    def __init__(self, key="", value=None, comment=None):
        self.key = key
        self.value = value
        self.comment = comment
        self.is_expanded = True
        self.is_selected = False
        self.parent = None
        self.children = []

    def __repr__(self):
        kind = "leaf" if self.is_leaf else "group"
        return f"<ResourceNode {kind} {self.full_path or self.key!r}>"

    @classmethod
    def create_root(cls):
        return cls(ROOT_NODE_KEY)

    @property
    def is_leaf(self):
        return self.value is not None and not self.children

    @property
    def is_root(self):
        return self.parent is None

    @property
    def full_path(self):
        if self.parent is None:
            return ""
        if self.parent.is_root:
            return self.key
        return f"{self.parent.full_path}{PATH_SEPARATOR}{self.key}"

    @property
    def string_key(self):
        return self.full_path.replace(PATH_SEPARATOR, STRING_KEY_SEPARATOR)

    def add_child(self, child):
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        return child

    def insert_child(self, index, child):
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.insert(index, child)
        return child

    def remove_child(self, child):
        if child in self.children:
            self.children.remove(child)
        child.parent = None

    def find_child(self, key):
        for child in self.children:
            if child.key == key:
                return child
        return None

    def has_child(self, key):
        return self.find_child(key) is not None

    def index_in_parent(self):
        if self.parent is None:
            return 0
        for i, sibling in enumerate(self.parent.children):
            if sibling is self:
                return i
        return -1

    def groups(self):
        return [child for child in self.children if not child.is_leaf]

    def leaves(self):
        return [child for child in self.children if child.is_leaf]

    def walk(self):
        # Depth-first, pre-order, the node itself excluded.
        for child in self.children:
            yield child
            yield from child.walk()

    def ancestors(self):
        node = self.parent
        while node is not None and not node.is_root:
            yield node
            node = node.parent

    def sort_children(self):
        self.children.sort(key=lambda c: c.key)
