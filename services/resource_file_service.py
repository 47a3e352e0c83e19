# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import json
import shutil
from pathlib import Path
from models.other_language_value import OtherLanguageValue
from models.resource_info import ResourceInfo
from models.resource_node import ResourceNode
from utils.constants import PATH_SEPARATOR, RESOURCE_FILE_EXTENSION
from utils.localization import _
from utils.path_utils import get_info_file_path
import logging
logger = logging.getLogger(__name__)

JSON_INDENT = 2


class ResourceFileError(Exception):
    pass


class ResourceKeyError(ValueError):
    pass


def scalar_to_text(value):
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(value, ensure_ascii=False)


def json_to_node(data, parent_node):
    for key, item in data.items():
        child = ResourceNode(str(key))
        parent_node.add_child(child)
        if isinstance(item, dict):
            json_to_node(item, child)
        else:
            child.value = scalar_to_text(item)


def node_to_json(node):
    result = {}
    for child in node.children:
        if child.is_leaf:
            result[child.key] = child.value
        else:
            result[child.key] = node_to_json(child)
    return result


def get_value_by_path(data, path):
    if data is None or not path:
        return None
    current = data
    for part in path.split(PATH_SEPARATOR):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return None
    if isinstance(current, dict):
        return None
    return scalar_to_text(current)


def _write_json_file(path: Path, data):
    temp_file = path.with_name(path.name + ".tmp")
    try:
        with open(temp_file, 'w', encoding='utf-8', newline='\n') as f:
            json.dump(data, f, indent=JSON_INDENT, ensure_ascii=False)
        shutil.move(str(temp_file), str(path))
    except OSError:
        if temp_file.exists():
            temp_file.unlink()
        raise


class ResourceFileService:
    def __init__(self):
        self.current_file_path = None
        self.current_info = None
        self.root_node = None

    @property
    def is_loaded(self):
        return self.root_node is not None and bool(self.current_file_path)

    @property
    def string_key_template(self):
        if self.current_info is None:
            return ResourceInfo().settings.string_key_template
        return self.current_info.settings.string_key_template

    @string_key_template.setter
    def string_key_template(self, template):
        if self.current_info is None:
            self.current_info = ResourceInfo()
        self.current_info.settings.string_key_template = template

    # --- Loading & saving ---

    def load(self, file_path):
        path = Path(file_path)
        if not path.is_file():
            logger.warning(f"Resource file not found: {path}")
            return None

        try:
            with open(path, 'r', encoding='utf-8-sig') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ResourceFileError(
                _("'{filename}' is not valid JSON: {error}").format(filename=path.name, error=e)) from e
        except UnicodeDecodeError as e:
            raise ResourceFileError(
                _("'{filename}' is not UTF-8 encoded.").format(filename=path.name)) from e

        if not isinstance(data, dict):
            raise ResourceFileError(
                _("'{filename}' must contain a JSON object at the top level.").format(filename=path.name))

        root = ResourceNode.create_root()
        json_to_node(data, root)

        self.current_file_path = str(path.absolute())
        self.root_node = root
        self.current_info = self._load_info()
        self.apply_info_to_nodes(root)
        logger.info(f"Loaded resource file {path} ({sum(1 for _n in root.walk())} nodes)")
        return root

    def save(self):
        if not self.current_file_path or self.root_node is None:
            return False

        path = Path(self.current_file_path)
        _write_json_file(path, node_to_json(self.root_node))
        self._save_info()
        logger.debug(f"Saved resource file {path}")
        return True

    def info_file_path(self):
        return get_info_file_path(self.current_file_path)

    def _load_info(self):
        info_path = Path(self.info_file_path())
        if not info_path.is_file():
            return ResourceInfo()
        try:
            with open(info_path, 'r', encoding='utf-8-sig') as f:
                return ResourceInfo.from_dict(json.load(f))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable info file {info_path}: {e}")
            return ResourceInfo()

    def _save_info(self):
        if self.root_node is None:
            return
        if self.current_info is None:
            self.current_info = ResourceInfo()
        self.collect_node_info()
        _write_json_file(Path(self.info_file_path()), self.current_info.to_dict())

    def collect_node_info(self):
        """Rebuilds expanded states and comments from the live tree, dropping paths that no longer exist."""
        expanded_states = {}
        comments = {}
        for node in self.root_node.walk():
            path = node.full_path
            if not node.is_leaf:
                expanded_states[path] = node.is_expanded
            if node.comment:
                comments[path] = node.comment
        self.current_info.expanded_states = expanded_states
        self.current_info.comments = comments

    def apply_info_to_nodes(self, root=None):
        root = root or self.root_node
        if root is None or self.current_info is None:
            return
        for node in root.walk():
            path = node.full_path
            if path in self.current_info.expanded_states:
                node.is_expanded = self.current_info.expanded_states[path]
            if path in self.current_info.comments:
                node.comment = self.current_info.comments[path]

    # --- Other languages ---

    def get_other_language_files(self):
        if not self.current_file_path:
            return []
        current = Path(self.current_file_path)
        directory = current.parent
        if not directory.is_dir():
            return []
        current_name = current.name.lower()
        files = []
        for candidate in directory.iterdir():
            if not candidate.is_file():
                continue
            if candidate.suffix.lower() != RESOURCE_FILE_EXTENSION:
                continue
            if candidate.name.lower() == current_name:
                continue
            files.append(str(candidate))
        return sorted(files, key=lambda p: Path(p).name.lower())

    def get_other_language_values(self, full_path):
        result = []
        for file_path in self.get_other_language_files():
            name = Path(file_path).name
            try:
                with open(file_path, 'r', encoding='utf-8-sig') as f:
                    data = json.load(f)
            except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
                logger.warning(f"Failed to read language file {file_path}: {e}")
                result.append(OtherLanguageValue(name, _("[Read failed]"), failed=True))
                continue
            result.append(OtherLanguageValue(name, get_value_by_path(data, full_path)))
        return result

    # --- Tree editing ---

    def validate_key(self, parent, key, node=None):
        if key is None or not key.strip():
            raise ResourceKeyError(_("Key cannot be empty."))
        if PATH_SEPARATOR in key:
            raise ResourceKeyError(_("Key cannot contain '{separator}'.").format(separator=PATH_SEPARATOR))
        existing = parent.find_child(key)
        if existing is not None and existing is not node:
            raise ResourceKeyError(_("Key '{key}' already exists in this group.").format(key=key))

    def create_node(self, parent, key, value=None):
        key = key.strip() if key else key
        self.validate_key(parent, key)
        node = ResourceNode(key, value)
        parent.add_child(node)
        logger.debug(f"Created node {node.full_path}")
        return node

    def delete_node(self, node):
        if node.parent is not None:
            logger.debug(f"Deleted node {node.full_path}")
            node.parent.remove_child(node)

    def rename_node(self, node, new_key):
        if node.parent is None:
            raise ResourceKeyError(_("The root node cannot be renamed."))
        new_key = new_key.strip() if new_key else new_key
        if new_key == node.key:
            return False
        self.validate_key(node.parent, new_key, node)
        old_path = node.full_path
        node.key = new_key
        logger.debug(f"Renamed node {old_path} -> {node.full_path}")
        return True

    def sort_node(self, node):
        node.sort_children()

    # --- Lookup ---

    def search(self, keyword):
        if self.root_node is None or not keyword or not keyword.strip():
            return []
        needle = keyword.lower()
        results = []
        for node in self.root_node.walk():
            if needle in node.key.lower() \
                    or (node.value is not None and needle in node.value.lower()) \
                    or (node.comment and needle in node.comment.lower()):
                results.append(node)
        return results

    def find_node_by_path(self, path):
        if self.root_node is None or not path:
            return None
        current = self.root_node
        for part in path.split(PATH_SEPARATOR):
            current = current.find_child(part)
            if current is None:
                return None
        return current

    def get_selected_paths(self):
        if self.current_info is None:
            return None, None
        return self.current_info.selected_tree_node_path, self.current_info.selected_string_item_path

    def set_selected_paths(self, tree_node_path, string_item_path):
        if self.current_info is None:
            self.current_info = ResourceInfo()
        self.current_info.selected_tree_node_path = tree_node_path or None
        self.current_info.selected_string_item_path = string_item_path or None
