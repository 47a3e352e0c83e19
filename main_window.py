# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import os
from datetime import datetime
import logging
logger = logging.getLogger(__name__)

from PySide6.QtWidgets import (
    QMainWindow, QApplication, QWidget, QVBoxLayout, QHBoxLayout, QSplitter,
    QPushButton, QLineEdit, QFileDialog, QMessageBox, QInputDialog, QStatusBar,
    QTreeView, QTableView, QHeaderView, QLabel, QAbstractItemView, QGroupBox,
    QListWidget, QListWidgetItem, QMenu
)
from PySide6.QtCore import Qt, QModelIndex, QTimer, QByteArray
from PySide6.QtGui import QAction, QActionGroup, QKeySequence

from dialogs.add_string_dialog import AddStringDialog
from dialogs.keybinding_dialog import KeybindingDialog
from dialogs.settings_dialog import SettingsDialog
from models.other_languages_model import OtherLanguagesModel
from models.resource_tree_model import ResourceTreeModel
from models.string_items_model import StringItemsModel, COLUMN_KEY, COLUMN_VALUE
from services.global_hotkey_service import GlobalHotkeyService, parse_hotkey_string
from services.resource_file_service import ResourceFileService, ResourceFileError, ResourceKeyError
from services.string_key_service import copy_to_clipboard, render_string_key
from utils import config_manager
from utils.constants import (
    APP_VERSION, AUTO_SAVE_DELAY_MS, DEFAULT_KEYBINDINGS, DEFAULT_LEFT_PANEL_WIDTH,
    DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH, NO_HOTKEY, SEARCH_DELAY_MS, STATUS_MESSAGE_TIMEOUT_MS
)
from utils.enums import ThemeMode
from utils.localization import _
from utils.theme import apply_theme


class I18nEditorWindow(QMainWindow):
    def __init__(self, config, initial_file=None):
        super().__init__()
        self.config = config
        self.initial_file = initial_file
        self.resource_service = ResourceFileService()
        self.string_key_template = self.resource_service.string_key_template
        self.selected_tree_node = None
        self.selected_string_item = None
        self.is_modified = False
        self.theme_mode = ThemeMode.from_value(self.config.get("theme_mode"))
        self.show_other_languages = bool(self.config.get("show_other_languages_panel", True))

        self.auto_save_timer = QTimer(self)
        self.auto_save_timer.setSingleShot(True)
        self.auto_save_timer.setInterval(AUTO_SAVE_DELAY_MS)
        self.auto_save_timer.timeout.connect(self.auto_save)

        self.quick_search_timer = QTimer(self)
        self.quick_search_timer.setSingleShot(True)
        self.quick_search_timer.setInterval(SEARCH_DELAY_MS)
        self.quick_search_timer.timeout.connect(self.perform_search)

        self.hotkey_service = GlobalHotkeyService(self)
        self.global_hotkey_id = -1

        self.tree_model = ResourceTreeModel(parent=self)
        self.string_model = StringItemsModel(self.resource_service, self)
        self.other_languages_model = OtherLanguagesModel(self)

        if self.config.get("window_geometry"):
            self.restoreGeometry(QByteArray.fromBase64(self.config["window_geometry"].encode('utf-8')))
        else:
            self.resize(self.config.get("window_width", DEFAULT_WINDOW_WIDTH),
                        self.config.get("window_height", DEFAULT_WINDOW_HEIGHT))
        self.setAcceptDrops(True)

        self._setup_ui()
        self.apply_theme(self.theme_mode, persist=False)
        self.update_title()
        self.update_ui_state()
        self.update_global_hotkey()

        app = QApplication.instance()
        if app is not None and hasattr(app.styleHints(), "colorSchemeChanged"):
            app.styleHints().colorSchemeChanged.connect(self._on_system_color_scheme_changed)

    # --- UI construction ---

    def _setup_ui(self):
        self._setup_actions()
        self._setup_menu()
        self._setup_main_layout()
        self._setup_statusbar()
        self._setup_keybindings()

    def _setup_actions(self):
        self.action_open_file = QAction(_("&Open..."), self)
        self.action_open_file.triggered.connect(self.open_file_dialog)
        self.action_save_file = QAction(_("&Save"), self)
        self.action_save_file.triggered.connect(lambda: self.save_file())
        self.action_add_group = QAction(_("Add &Group..."), self)
        self.action_add_group.triggered.connect(self.add_group)
        self.action_rename_group = QAction(_("&Rename Group..."), self)
        self.action_rename_group.triggered.connect(self.rename_group)
        self.action_delete_group = QAction(_("Delete G&roup"), self)
        self.action_delete_group.triggered.connect(self.delete_selected_group)
        self.action_add_string = QAction(_("Add &String..."), self)
        self.action_add_string.triggered.connect(self.add_string)
        self.action_delete_string = QAction(_("&Delete String"), self)
        self.action_delete_string.triggered.connect(self.delete_selected_string)
        self.action_sort_nodes = QAction(_("S&ort Children"), self)
        self.action_sort_nodes.triggered.connect(self.sort_nodes)
        self.action_copy_string_key = QAction(_("&Copy String Key"), self)
        self.action_copy_string_key.triggered.connect(self.copy_string_key)
        self.action_focus_search = QAction(_("&Find..."), self)
        self.action_focus_search.triggered.connect(self.focus_search)
        self.action_toggle_other_languages = QAction(_("&Other Languages Panel"), self)
        self.action_toggle_other_languages.setCheckable(True)
        self.action_toggle_other_languages.setChecked(self.show_other_languages)
        self.action_toggle_other_languages.toggled.connect(self.set_other_languages_panel_visible)
        self.action_open_settings = QAction(_("&Settings..."), self)
        self.action_open_settings.triggered.connect(self.open_settings)

        self.ACTION_MAP_FOR_DIALOG = {
            'open_file': self.action_open_file,
            'save_file': self.action_save_file,
            'add_group': self.action_add_group,
            'add_string': self.action_add_string,
            'rename_group': self.action_rename_group,
            'delete_string': self.action_delete_string,
            'delete_group': self.action_delete_group,
            'sort_nodes': self.action_sort_nodes,
            'copy_string_key': self.action_copy_string_key,
            'focus_search': self.action_focus_search,
            'toggle_other_languages': self.action_toggle_other_languages,
            'open_settings': self.action_open_settings,
        }

    def _setup_menu(self):
        self.file_menu = self.menuBar().addMenu(_("&File"))
        self.edit_menu = self.menuBar().addMenu(_("&Edit"))
        self.view_menu = self.menuBar().addMenu(_("&View"))
        self.settings_menu = self.menuBar().addMenu(_("Se&ttings"))
        self.help_menu = self.menuBar().addMenu(_("&Help"))

        self.file_menu.addAction(self.action_open_file)
        self.recent_files_menu = self.file_menu.addMenu(_("Recent Files"))
        self.update_recent_files_menu()
        self.file_menu.addAction(self.action_save_file)
        self.file_menu.addSeparator()
        self.file_menu.addAction(_("E&xit"), self.close)

        self.edit_menu.addAction(self.action_add_group)
        self.edit_menu.addAction(self.action_rename_group)
        self.edit_menu.addAction(self.action_delete_group)
        self.edit_menu.addSeparator()
        self.edit_menu.addAction(self.action_add_string)
        self.edit_menu.addAction(self.action_delete_string)
        self.edit_menu.addSeparator()
        self.edit_menu.addAction(self.action_sort_nodes)
        self.edit_menu.addAction(self.action_copy_string_key)
        self.edit_menu.addAction(self.action_focus_search)

        self.view_menu.addAction(self.action_toggle_other_languages)
        theme_menu = self.view_menu.addMenu(_("Theme"))
        self.theme_action_group = QActionGroup(self)
        self.theme_actions = {}
        for mode in ThemeMode:
            action = QAction(mode.get_display_text(), self, checkable=True)
            action.setChecked(mode == self.theme_mode)
            action.triggered.connect(lambda checked, m=mode: self.apply_theme(m))
            self.theme_action_group.addAction(action)
            theme_menu.addAction(action)
            self.theme_actions[mode] = action

        self.settings_menu.addAction(self.action_open_settings)
        self.settings_menu.addAction(_("&Keybindings..."), self.show_keybinding_dialog)

        self.help_menu.addAction(_("About"), self.about)

    def _setup_main_layout(self):
        self.main_splitter = QSplitter(Qt.Horizontal)

        # Left: group tree
        left_widget = QWidget()
        left_layout = QVBoxLayout(left_widget)
        left_layout.setContentsMargins(4, 4, 0, 4)
        self.tree_view = QTreeView()
        self.tree_view.setModel(self.tree_model)
        self.tree_view.setHeaderHidden(True)
        self.tree_view.setSelectionMode(QAbstractItemView.SingleSelection)
        self.tree_view.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.tree_view.setContextMenuPolicy(Qt.CustomContextMenu)
        self.tree_view.customContextMenuRequested.connect(self.show_tree_context_menu)
        self.tree_view.selectionModel().currentChanged.connect(self.on_tree_selection_changed)
        self.tree_view.expanded.connect(lambda index: self._set_node_expanded(index, True))
        self.tree_view.collapsed.connect(lambda index: self._set_node_expanded(index, False))
        left_layout.addWidget(self.tree_view, 1)

        tree_buttons = QHBoxLayout()
        for text, slot in ((_("Add Group"), self.add_group),
                           (_("Delete Group"), self.delete_selected_group),
                           (_("Sort"), self.sort_nodes)):
            button = QPushButton(text)
            button.clicked.connect(slot)
            tree_buttons.addWidget(button)
        left_layout.addLayout(tree_buttons)
        self.main_splitter.addWidget(left_widget)

        # Right: search, strings, other languages
        self.right_splitter = QSplitter(Qt.Vertical)
        strings_widget = QWidget()
        strings_layout = QVBoxLayout(strings_widget)
        strings_layout.setContentsMargins(0, 4, 4, 0)

        self.search_entry = QLineEdit()
        self.search_entry.setPlaceholderText(_("Search keys, values and comments..."))
        self.search_entry.setClearButtonEnabled(True)
        self.search_entry.textChanged.connect(lambda _text: self.quick_search_timer.start())
        strings_layout.addWidget(self.search_entry)

        self.search_results_list = QListWidget()
        self.search_results_list.setMaximumHeight(180)
        self.search_results_list.setVisible(False)
        self.search_results_list.itemActivated.connect(self._on_search_result_activated)
        self.search_results_list.itemClicked.connect(self._on_search_result_activated)
        strings_layout.addWidget(self.search_results_list)

        self.strings_view = QTableView()
        self.strings_view.setModel(self.string_model)
        self.strings_view.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.strings_view.setSelectionMode(QAbstractItemView.SingleSelection)
        self.strings_view.setEditTriggers(QAbstractItemView.DoubleClicked | QAbstractItemView.EditKeyPressed
                                          | QAbstractItemView.AnyKeyPressed)
        self.strings_view.setAlternatingRowColors(True)
        self.strings_view.setContextMenuPolicy(Qt.CustomContextMenu)
        self.strings_view.customContextMenuRequested.connect(self.show_strings_context_menu)
        header = self.strings_view.horizontalHeader()
        header.setSectionResizeMode(COLUMN_KEY, QHeaderView.Interactive)
        header.setSectionResizeMode(COLUMN_VALUE, QHeaderView.Stretch)
        header.resizeSection(COLUMN_KEY, 220)
        self.strings_view.selectionModel().currentRowChanged.connect(self.on_string_selection_changed)
        self.string_model.item_edited.connect(self.on_string_item_edited)
        self.string_model.edit_rejected.connect(
            lambda message: QMessageBox.warning(self, _("Invalid Key"), message))
        strings_layout.addWidget(self.strings_view, 1)

        string_buttons = QHBoxLayout()
        for text, slot in ((_("Add String"), self.add_string),
                           (_("Delete String"), self.delete_selected_string),
                           (_("Copy Key"), self.copy_string_key)):
            button = QPushButton(text)
            button.clicked.connect(slot)
            string_buttons.addWidget(button)
        string_buttons.addStretch(1)
        strings_layout.addLayout(string_buttons)
        self.right_splitter.addWidget(strings_widget)

        self.other_languages_panel = QGroupBox(_("Other Languages"))
        other_layout = QVBoxLayout(self.other_languages_panel)
        self.other_languages_view = QTableView()
        self.other_languages_view.setModel(self.other_languages_model)
        self.other_languages_view.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.other_languages_view.verticalHeader().setVisible(False)
        self.other_languages_view.horizontalHeader().setSectionResizeMode(1, QHeaderView.Stretch)
        other_layout.addWidget(self.other_languages_view)
        self.other_languages_panel.setVisible(self.show_other_languages)
        self.right_splitter.addWidget(self.other_languages_panel)
        self.right_splitter.setStretchFactor(0, 3)
        self.right_splitter.setStretchFactor(1, 1)

        self.main_splitter.addWidget(self.right_splitter)
        self.main_splitter.setStretchFactor(1, 1)
        left_width = int(self.config.get("left_panel_width", DEFAULT_LEFT_PANEL_WIDTH))
        self.main_splitter.setSizes([left_width, max(self.width() - left_width, 400)])
        self.setCentralWidget(self.main_splitter)

    def _setup_statusbar(self):
        self.statusBar = QStatusBar()
        self.setStatusBar(self.statusBar)
        self.statusbar_label = QLabel(_("Ready"))
        self.statusBar.addWidget(self.statusbar_label, 1)
        self.counts_label = QLabel()
        self.statusBar.addPermanentWidget(self.counts_label)

    def _setup_keybindings(self):
        bindings = self.config.get('keybindings', DEFAULT_KEYBINDINGS)
        for name, action in self.ACTION_MAP_FOR_DIALOG.items():
            action.setShortcut(QKeySequence(bindings.get(name, DEFAULT_KEYBINDINGS.get(name, ''))))
            if action not in self.actions():
                self.addAction(action)

    # --- Status & title ---

    def update_statusbar(self, text, persistent=False):
        self.statusbar_label.setText(text)
        if not persistent:
            QTimer.singleShot(STATUS_MESSAGE_TIMEOUT_MS, lambda: self.clear_statusbar_if_unchanged(text))

    def clear_statusbar_if_unchanged(self, original_text):
        if self.statusbar_label.text() == original_text:
            self.statusbar_label.setText(_("Ready"))

    def update_title(self):
        path = self.resource_service.current_file_path
        if path:
            modified_indicator = "*" if self.is_modified else ""
            self.setWindowTitle(f"{path}{modified_indicator}")
        else:
            self.setWindowTitle(_("String Manager - v{version}").format(version=APP_VERSION))

    def update_counts_display(self):
        root = self.resource_service.root_node
        if root is None:
            self.counts_label.setText("")
            return
        groups = strings = 0
        for node in root.walk():
            if node.is_leaf:
                strings += 1
            else:
                groups += 1
        self.counts_label.setText(_("Groups: {groups} | Strings: {strings}").format(groups=groups, strings=strings))

    def update_ui_state(self):
        loaded = self.resource_service.is_loaded
        has_group = self.selected_tree_node is not None
        has_string = self.selected_string_item is not None
        self.action_save_file.setEnabled(loaded)
        self.action_add_group.setEnabled(loaded)
        self.action_add_string.setEnabled(loaded)
        self.action_rename_group.setEnabled(has_group)
        self.action_delete_group.setEnabled(has_group)
        self.action_sort_nodes.setEnabled(loaded)
        self.action_delete_string.setEnabled(has_string)
        self.action_copy_string_key.setEnabled(has_string)
        self.update_counts_display()

    # --- File handling ---

    def initialize(self):
        candidate = self.initial_file or self.config.get("last_opened_file_path")
        if candidate and os.path.isfile(candidate):
            self.load_file(candidate)

    def open_file_dialog(self):
        start_dir = self.config.get("last_dir") or ""
        filepath, __ = QFileDialog.getOpenFileName(
            self, _("Open Resource File"), start_dir,
            _("JSON files (*.json);;All files (*.*)"))
        if filepath:
            self.load_file(filepath)

    def load_file(self, filepath):
        self.save_current_state()
        self.update_statusbar(_("Loading..."), persistent=True)
        try:
            root = self.resource_service.load(filepath)
        except (ResourceFileError, OSError) as e:
            logger.error(f"Failed to load {filepath}: {e}")
            self.update_statusbar(_("Load failed: {error}").format(error=e))
            QMessageBox.critical(self, _("Error"), _("Failed to load file: {error}").format(error=e))
            return False

        if root is None:
            self.update_statusbar(_("File '{filepath}' does not exist.").format(filepath=filepath))
            self._forget_recent_file(filepath)
            return False

        self.selected_tree_node = None
        self.selected_string_item = None
        self.is_modified = False
        self.string_key_template = self.resource_service.string_key_template
        self.tree_model.reset_root(root)
        self.apply_expanded_states()
        self.string_model.set_group(root)
        self.other_languages_model.clear()

        current_path = self.resource_service.current_file_path
        self.config["last_opened_file_path"] = current_path
        self.config["last_dir"] = os.path.dirname(current_path)
        config_manager.add_recent_file(self.config, current_path)
        self.update_recent_files_menu()
        config_manager.save_config(self.config)

        self.restore_selected_states()
        self.update_title()
        self.update_ui_state()
        self.update_statusbar(_("File loaded successfully"))
        return True

    def save_file(self, auto=False):
        self.auto_save_timer.stop()
        if not self.resource_service.is_loaded:
            return False
        self.resource_service.string_key_template = self.string_key_template
        self.resource_service.set_selected_paths(
            self.selected_tree_node.full_path if self.selected_tree_node else None,
            self.selected_string_item.full_path if self.selected_string_item else None)
        try:
            self.resource_service.save()
        except OSError as e:
            logger.error(f"Failed to save {self.resource_service.current_file_path}: {e}")
            self.update_statusbar(_("Save failed: {error}").format(error=e), persistent=True)
            if not auto:
                QMessageBox.critical(self, _("Save Error"), str(e))
            return False
        self.is_modified = False
        self.update_title()
        self.update_statusbar(_("Saved - {time}").format(time=datetime.now().strftime("%H:%M:%S")))
        return True

    def auto_save(self):
        if self.is_modified:
            self.save_file(auto=True)

    def save_current_state(self):
        # Selection and expansion live only in the sidecar, so save even when unmodified.
        if self.resource_service.is_loaded:
            self.save_file(auto=True)

    def trigger_auto_save(self):
        self.is_modified = True
        self.update_title()
        self.auto_save_timer.start()

    def update_recent_files_menu(self):
        self.recent_files_menu.clear()
        recent_files = self.config.get("recent_files", [])
        if not recent_files:
            self.recent_files_menu.setEnabled(False)
            return
        self.recent_files_menu.setEnabled(True)
        for i, filepath in enumerate(recent_files):
            action = QAction(f"{i + 1}: {os.path.basename(filepath)}", self)
            action.setToolTip(filepath)
            action.triggered.connect(lambda checked, p=filepath: self.open_recent_file(p))
            self.recent_files_menu.addAction(action)
        self.recent_files_menu.addSeparator()
        self.recent_files_menu.addAction(_("Clear History"), self.clear_recent_files)

    def open_recent_file(self, filepath):
        if not os.path.isfile(filepath):
            QMessageBox.critical(self, _("File not found"),
                                 _("File '{filepath}' does not exist.").format(filepath=filepath))
            self._forget_recent_file(filepath)
            return False
        return self.load_file(filepath)

    def _forget_recent_file(self, filepath):
        recent_files = self.config.get("recent_files", [])
        if filepath in recent_files:
            recent_files.remove(filepath)
            self.update_recent_files_menu()
            config_manager.save_config(self.config)

    def clear_recent_files(self):
        self.config["recent_files"] = []
        self.update_recent_files_menu()
        config_manager.save_config(self.config)

    # --- Tree & selection ---

    def _set_node_expanded(self, index, expanded):
        node = self.tree_model.node_from_index(index)
        if node is not None and not node.is_root:
            node.is_expanded = expanded

    def apply_expanded_states(self, parent_index=QModelIndex()):
        for row in range(self.tree_model.rowCount(parent_index)):
            index = self.tree_model.index(row, 0, parent_index)
            node = self.tree_model.node_from_index(index)
            self.tree_view.setExpanded(index, node.is_expanded)
            self.apply_expanded_states(index)

    def refresh_tree(self, select_node=None):
        target = select_node or self.selected_tree_node
        self.tree_model.refresh()
        self.apply_expanded_states()
        self.select_tree_node(target)
        self.update_ui_state()

    def select_tree_node(self, node):
        if node is None or node.is_root or node.parent is None:
            self.tree_view.selectionModel().clearSelection()
            self.tree_view.setCurrentIndex(QModelIndex())
            self.on_tree_selection_changed(QModelIndex(), QModelIndex())
            return
        for ancestor in node.ancestors():
            ancestor.is_expanded = True
            self.tree_view.expand(self.tree_model.index_for_node(ancestor))
        index = self.tree_model.index_for_node(node)
        if index.isValid():
            self.tree_view.setCurrentIndex(index)
            self.tree_view.scrollTo(index)

    def on_tree_selection_changed(self, current, previous):
        node = self.tree_model.node_from_index(current) if current.isValid() else None
        if self.selected_tree_node is not None:
            self.selected_tree_node.is_selected = False
        self.selected_tree_node = node
        if node is not None:
            node.is_selected = True
        self.selected_string_item = None
        self.string_model.set_group(node or self.resource_service.root_node)
        self.other_languages_model.clear()
        self.update_ui_state()

    def select_string_item(self, node):
        row = self.string_model.row_of(node)
        if row < 0:
            return
        index = self.string_model.index(row, COLUMN_KEY)
        self.strings_view.setCurrentIndex(index)
        self.strings_view.selectRow(row)
        self.strings_view.scrollTo(index)

    def on_string_selection_changed(self, current, previous):
        self.selected_string_item = self.string_model.node_at(current.row()) if current.isValid() else None
        self.load_other_language_values()
        self.update_ui_state()

    def on_string_item_edited(self, node, column):
        if column == COLUMN_KEY:
            self.update_statusbar(_("Renamed to {path}").format(path=node.full_path))
        self.load_other_language_values()
        self.trigger_auto_save()

    def restore_selected_states(self):
        tree_node_path, string_item_path = self.resource_service.get_selected_paths()
        tree_node = self.resource_service.find_node_by_path(tree_node_path)
        if tree_node is not None and not tree_node.is_leaf:
            self.select_tree_node(tree_node)
        string_item = self.resource_service.find_node_by_path(string_item_path)
        if string_item is not None and string_item.is_leaf:
            self.select_string_item(string_item)

    def load_other_language_values(self):
        if not self.show_other_languages or self.selected_string_item is None:
            self.other_languages_model.clear()
            return
        values = self.resource_service.get_other_language_values(self.selected_string_item.full_path)
        self.other_languages_model.set_values(values)

    # --- Editing commands ---

    def _require_loaded(self):
        if not self.resource_service.is_loaded:
            self.update_statusbar(_("Please open a resource file first"))
            return False
        return True

    def add_group(self):
        if not self._require_loaded():
            return
        parent_node = self.selected_tree_node or self.resource_service.root_node
        name, ok = QInputDialog.getText(self, _("Add Group"), _("Group name:"))
        if not ok or not name.strip():
            return
        try:
            new_node = self.resource_service.create_node(parent_node, name)
        except ResourceKeyError as e:
            QMessageBox.warning(self, _("Invalid Key"), str(e))
            return
        parent_node.is_expanded = True
        self.refresh_tree(select_node=new_node)
        self.trigger_auto_save()
        self.update_statusbar(_("Group '{path}' added").format(path=new_node.full_path))

    def rename_group(self):
        node = self.selected_tree_node
        if node is None:
            self.update_statusbar(_("Please select a group first"))
            return
        name, ok = QInputDialog.getText(self, _("Rename Group"), _("New name:"), text=node.key)
        if not ok:
            return
        try:
            changed = self.resource_service.rename_node(node, name)
        except ResourceKeyError as e:
            QMessageBox.warning(self, _("Invalid Key"), str(e))
            return
        if changed:
            self.refresh_tree(select_node=node)
            self.trigger_auto_save()

    def delete_selected_group(self):
        node = self.selected_tree_node
        if node is None:
            return
        reply = QMessageBox.question(
            self, _("Confirm Delete"),
            _("Are you sure you want to delete the group \"{key}\" and all of its contents?").format(key=node.key),
            QMessageBox.Yes | QMessageBox.No, QMessageBox.No)
        if reply != QMessageBox.Yes:
            return
        self.resource_service.delete_node(node)
        self.selected_tree_node = None
        self.refresh_tree(select_node=None)
        self.trigger_auto_save()

    def add_string(self):
        if not self._require_loaded():
            return
        group = self.selected_tree_node or self.resource_service.root_node
        dialog = AddStringDialog(self, group_path=group.full_path)
        if not dialog.exec():
            return
        try:
            new_node = self.resource_service.create_node(group, dialog.string_key, dialog.string_value)
        except ResourceKeyError as e:
            QMessageBox.warning(self, _("Invalid Key"), str(e))
            return
        new_node.comment = dialog.string_comment or None
        self.string_model.reload()
        self.select_string_item(new_node)
        self.trigger_auto_save()

        string_key = render_string_key(self.string_key_template, new_node)
        copy_to_clipboard(string_key)
        self.update_statusbar(_("String added, key copied: {key}").format(key=string_key))

    def delete_selected_string(self):
        node = self.selected_string_item
        if node is None:
            return
        reply = QMessageBox.question(
            self, _("Confirm Delete"),
            _("Are you sure you want to delete the string \"{key}\"?").format(key=node.key),
            QMessageBox.Yes | QMessageBox.No, QMessageBox.No)
        if reply != QMessageBox.Yes:
            return
        self.resource_service.delete_node(node)
        self.selected_string_item = None
        self.string_model.reload()
        self.other_languages_model.clear()
        self.update_ui_state()
        self.trigger_auto_save()

    def sort_nodes(self):
        if not self._require_loaded():
            return
        node = self.selected_tree_node or self.resource_service.root_node
        self.resource_service.sort_node(node)
        self.refresh_tree(select_node=self.selected_tree_node)
        self.trigger_auto_save()

    def copy_string_key(self):
        node = self.selected_string_item
        if node is None:
            return
        string_key = render_string_key(self.string_key_template, node)
        copy_to_clipboard(string_key)
        self.update_statusbar(_("Copied: {key}").format(key=string_key))

    # --- Search ---

    def focus_search(self):
        self.search_entry.setFocus()
        self.search_entry.selectAll()

    def perform_search(self):
        self.search_results_list.clear()
        text = self.search_entry.text()
        if not text.strip():
            self.search_results_list.setVisible(False)
            return
        results = self.resource_service.search(text)
        for node in results:
            if node.is_leaf:
                label = f"{node.full_path} — {node.value}"
            else:
                label = _("{path} (group)").format(path=node.full_path)
            item = QListWidgetItem(label)
            item.setData(Qt.UserRole, node)
            if node.comment:
                item.setToolTip(node.comment)
            self.search_results_list.addItem(item)
        self.search_results_list.setVisible(bool(results))
        if not results:
            self.update_statusbar(_("No matches for '{text}'").format(text=text))

    def _on_search_result_activated(self, item):
        node = item.data(Qt.UserRole)
        if node is not None:
            self.navigate_to_search_result(node)

    def navigate_to_search_result(self, node):
        if node is None:
            return
        tree_node = node.parent if node.is_leaf else node
        self.select_tree_node(tree_node)
        if node.is_leaf:
            self.select_string_item(node)
        self.search_entry.clear()

    # --- View & settings ---

    def set_other_languages_panel_visible(self, visible):
        self.show_other_languages = visible
        self.other_languages_panel.setVisible(visible)
        self.config["show_other_languages_panel"] = visible
        config_manager.save_config(self.config)
        self.load_other_language_values()

    def apply_theme(self, mode, persist=True):
        self.theme_mode = ThemeMode.from_value(mode)
        app = QApplication.instance()
        if app is not None:
            apply_theme(app, self.theme_mode)
        if self.theme_mode in getattr(self, "theme_actions", {}):
            self.theme_actions[self.theme_mode].setChecked(True)
        if persist:
            self.config["theme_mode"] = self.theme_mode.value
            config_manager.save_config(self.config)

    def _on_system_color_scheme_changed(self, *args):
        if self.theme_mode == ThemeMode.SYSTEM:
            self.apply_theme(ThemeMode.SYSTEM, persist=False)

    def open_settings(self):
        dialog = SettingsDialog(self, self.string_key_template,
                                bool(self.config.get("enable_global_hotkey", True)),
                                self.config.get("global_hotkey", NO_HOTKEY))
        if not dialog.exec():
            return
        template_changed = dialog.string_key_template != self.string_key_template
        self.string_key_template = dialog.string_key_template
        self.config["enable_global_hotkey"] = dialog.enable_global_hotkey
        self.config["global_hotkey"] = dialog.global_hotkey
        config_manager.save_config(self.config)
        self.update_global_hotkey()
        if template_changed and self.resource_service.is_loaded:
            self.trigger_auto_save()

    def show_keybinding_dialog(self):
        dialog = KeybindingDialog(self, _("Keybinding Settings"),
                                  self.config.get('keybindings', DEFAULT_KEYBINDINGS), self.ACTION_MAP_FOR_DIALOG)
        if dialog.exec():
            self.config['keybindings'] = dialog.keybindings
            config_manager.save_config(self.config)
            self._setup_keybindings()
            self.update_statusbar(_("Keybindings have been updated."))

    def update_global_hotkey(self):
        if self.global_hotkey_id > 0:
            self.hotkey_service.unregister_hotkey(self.global_hotkey_id)
            self.global_hotkey_id = -1
        if not self.config.get("enable_global_hotkey", True):
            return
        hotkey = self.config.get("global_hotkey", NO_HOTKEY)
        _modifiers, key = parse_hotkey_string(hotkey)
        if key is None:
            return
        self.global_hotkey_id = self.hotkey_service.register_hotkey(hotkey, self.bring_to_front)
        if self.global_hotkey_id < 0:
            self.update_statusbar(_("Global hotkey '{hotkey}' could not be registered.").format(hotkey=hotkey))

    def bring_to_front(self):
        if self.isMinimized():
            self.showNormal()
        self.show()
        self.raise_()
        self.activateWindow()

    # --- Context menus ---

    def show_tree_context_menu(self, pos):
        menu = QMenu(self)
        menu.addAction(self.action_add_group)
        menu.addAction(self.action_add_string)
        menu.addSeparator()
        menu.addAction(self.action_rename_group)
        menu.addAction(self.action_delete_group)
        menu.addAction(self.action_sort_nodes)
        menu.exec(self.tree_view.viewport().mapToGlobal(pos))

    def show_strings_context_menu(self, pos):
        menu = QMenu(self)
        menu.addAction(self.action_copy_string_key)
        menu.addAction(self.action_add_string)
        menu.addAction(self.action_delete_string)
        menu.exec(self.strings_view.viewport().mapToGlobal(pos))

    # --- Window events ---

    def about(self):
        QMessageBox.about(self, _("About"),
                          _("I18n String Editor\n\nVersion: {version}").format(version=APP_VERSION))

    def dragEnterEvent(self, event):
        if event.mimeData().hasUrls():
            event.acceptProposedAction()

    def dropEvent(self, event):
        for url in event.mimeData().urls():
            path = url.toLocalFile()
            if path.lower().endswith(".json") and os.path.isfile(path):
                self.load_file(path)
                event.acceptProposedAction()
                return
        self.update_statusbar(_("Only .json resource files can be opened."))

    def save_window_state(self):
        self.config["window_geometry"] = self.saveGeometry().toBase64().data().decode('utf-8')
        self.config["window_width"] = self.width()
        self.config["window_height"] = self.height()
        sizes = self.main_splitter.sizes()
        if sizes and sizes[0] > 0:
            self.config["left_panel_width"] = sizes[0]

    def closeEvent(self, event):
        self.save_current_state()
        self.save_window_state()
        config_manager.save_config(self.config)
        self.hotkey_service.dispose()
        event.accept()
