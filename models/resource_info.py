# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from utils.constants import DEFAULT_STRING_KEY_TEMPLATE


class GlobalSettings:
    def __init__(self, string_key_template=DEFAULT_STRING_KEY_TEMPLATE):
        self.string_key_template = string_key_template

    def to_dict(self):
        return {"StringKeyTemplate": self.string_key_template}

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            return cls()
        template = data.get("StringKeyTemplate")
        if not isinstance(template, str):
            template = DEFAULT_STRING_KEY_TEMPLATE
        return cls(template)


class ResourceInfo:
    """
    Contents of the "<resource>.json.info" sidecar. Keys are node full paths.
    The JSON layout uses PascalCase names so existing sidecars keep loading.
    """

    def __init__(self):
        self.expanded_states = {}
        self.comments = {}
        self.settings = GlobalSettings()
        self.selected_tree_node_path = None
        self.selected_string_item_path = None

    def to_dict(self):
        return {
            "ExpandedStates": dict(self.expanded_states),
            "Comments": dict(self.comments),
            "Settings": self.settings.to_dict(),
            "SelectedTreeNodePath": self.selected_tree_node_path,
            "SelectedStringItemPath": self.selected_string_item_path,
        }

    @classmethod
    def from_dict(cls, data):
        info = cls()
        if not isinstance(data, dict):
            return info

        expanded = data.get("ExpandedStates")
        if isinstance(expanded, dict):
            info.expanded_states = {str(k): bool(v) for k, v in expanded.items() if isinstance(v, bool)}

        comments = data.get("Comments")
        if isinstance(comments, dict):
            info.comments = {str(k): v for k, v in comments.items() if isinstance(v, str)}

        info.settings = GlobalSettings.from_dict(data.get("Settings"))

        for attr, json_key in (("selected_tree_node_path", "SelectedTreeNodePath"),
                               ("selected_string_item_path", "SelectedStringItemPath")):
            value = data.get(json_key)
            setattr(info, attr, value if isinstance(value, str) and value else None)
        return info
