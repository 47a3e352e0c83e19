# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from models.resource_node import ResourceNode


def build_tree():
    root = ResourceNode.create_root()
    common = root.add_child(ResourceNode("Common"))
    dialogs = common.add_child(ResourceNode("Dialogs"))
    title = dialogs.add_child(ResourceNode("Title", "Confirm"))
    ok = common.add_child(ResourceNode("Ok", "OK"))
    return root, common, dialogs, title, ok


def test_full_path_skips_root():
    root, common, dialogs, title, ok = build_tree()
    assert root.full_path == ""
    assert common.full_path == "Common"
    assert title.full_path == "Common.Dialogs.Title"
    assert title.string_key == "Common_Dialogs_Title"


def test_top_level_key_named_root_keeps_its_path():
    root = ResourceNode.create_root()
    child = root.add_child(ResourceNode("Root"))
    leaf = child.add_child(ResourceNode("Name", "x"))
    assert leaf.full_path == "Root.Name"


def test_leaf_and_group_classification():
    root, common, dialogs, title, ok = build_tree()
    assert title.is_leaf
    assert not common.is_leaf
    assert not ResourceNode("Empty").is_leaf
    assert ResourceNode("Blank", "").is_leaf
    assert common.groups() == [dialogs]
    assert common.leaves() == [ok]


def test_add_child_moves_node_between_parents():
    root, common, dialogs, title, ok = build_tree()
    root.add_child(ok)
    assert ok.parent is root
    assert ok not in common.children
    assert root.children.count(ok) == 1


def test_walk_is_depth_first_preorder():
    root, common, dialogs, title, ok = build_tree()
    assert [n.key for n in root.walk()] == ["Common", "Dialogs", "Title", "Ok"]
    assert [n.key for n in title.ancestors()] == ["Dialogs", "Common"]


def test_sort_children_is_ordinal():
    root = ResourceNode.create_root()
    for key in ["b", "B", "a", "A"]:
        root.add_child(ResourceNode(key, key))
    root.sort_children()
    assert [c.key for c in root.children] == ["A", "B", "a", "b"]


def test_remove_and_find_child():
    root, common, dialogs, title, ok = build_tree()
    assert common.find_child("Ok") is ok
    assert ok.index_in_parent() == 1
    common.remove_child(ok)
    assert ok.parent is None
    assert not common.has_child("Ok")


def test_insert_child_places_node_and_detaches_from_old_parent():
    root, common, dialogs, title, ok = build_tree()
    menu = root.add_child(ResourceNode("Menu"))
    menu.insert_child(0, ok)
    assert ok.parent is menu
    assert ok not in common.children
    common.insert_child(0, ResourceNode("Apply", "Apply"))
    assert [c.key for c in common.children] == ["Apply", "Dialogs"]
    assert common.children[0].full_path == "Common.Apply"
