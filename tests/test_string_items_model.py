# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import pytest
from PySide6.QtCore import Qt

from models.other_language_value import OtherLanguageValue
from models.other_languages_model import OtherLanguagesModel
from models.string_items_model import COLUMN_COMMENT, COLUMN_KEY, COLUMN_VALUE, StringItemsModel
from services.resource_file_service import ResourceFileService


@pytest.fixture
def loaded(qapp, resource_file):
    service = ResourceFileService()
    service.load(str(resource_file))
    model = StringItemsModel(service)
    model.set_group(service.find_node_by_path("Common"))
    return service, model


def test_rows_are_leaves_of_group(loaded):
    service, model = loaded
    assert model.rowCount() == 2
    assert model.data(model.index(0, COLUMN_KEY)) == "Ok"
    assert model.data(model.index(1, COLUMN_VALUE)) == "Cancel"
    assert model.data(model.index(0, COLUMN_COMMENT)) == ""


def test_root_group_shows_top_level_strings(loaded):
    service, model = loaded
    model.set_group(service.root_node)
    assert [n.key for n in model.items] == ["AppName"]
    model.clear()
    assert model.rowCount() == 0


def test_edit_value_and_comment(loaded):
    service, model = loaded
    edited = []
    model.item_edited.connect(lambda node, column: edited.append((node.key, column)))
    assert model.setData(model.index(0, COLUMN_VALUE), "Okay")
    assert model.setData(model.index(0, COLUMN_COMMENT), "primary")
    assert not model.setData(model.index(0, COLUMN_VALUE), "Okay")
    node = service.find_node_by_path("Common.Ok")
    assert node.value == "Okay"
    assert node.comment == "primary"
    assert edited == [("Ok", COLUMN_VALUE), ("Ok", COLUMN_COMMENT)]
    assert model.setData(model.index(0, COLUMN_COMMENT), "")
    assert node.comment is None


def test_edit_key_renames_node(loaded):
    service, model = loaded
    assert model.setData(model.index(0, COLUMN_KEY), "Accept")
    assert service.find_node_by_path("Common.Accept").value == "OK"


def test_duplicate_key_is_rejected(loaded):
    service, model = loaded
    rejected = []
    model.edit_rejected.connect(rejected.append)
    assert not model.setData(model.index(0, COLUMN_KEY), "Cancel")
    assert len(rejected) == 1
    assert service.find_node_by_path("Common.Ok") is not None


def test_all_cells_editable(loaded):
    service, model = loaded
    assert model.flags(model.index(1, COLUMN_KEY)) & Qt.ItemIsEditable


def test_other_languages_model(qapp):
    model = OtherLanguagesModel()
    model.set_values([OtherLanguageValue("ja.json", "はい"), OtherLanguageValue("de.json", None)])
    assert model.rowCount() == 2
    assert model.data(model.index(0, 0)) == "ja.json"
    assert model.data(model.index(0, 1)) == "はい"
    assert model.data(model.index(1, 1)) == "(missing)"
    assert model.data(model.index(1, 1), Qt.ForegroundRole) is not None
    model.clear()
    assert model.rowCount() == 0
