# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from PySide6.QtGui import QGuiApplication
from models.resource_node import ResourceNode
from utils.constants import KEY_PLACEHOLDER, PATH_SEPARATOR, STRING_KEY_SEPARATOR
import logging
logger = logging.getLogger(__name__)


def to_string_key(node_or_path):
    if isinstance(node_or_path, ResourceNode):
        return node_or_path.string_key
    return (node_or_path or "").replace(PATH_SEPARATOR, STRING_KEY_SEPARATOR)


def render_string_key(template, node_or_path):
    """Fills every {KEY} in the template, e.g. "{I18N {x:Static Strings.{KEY}}}" -> "{I18N {x:Static Strings.A_B}}"."""
    return (template or "").replace(KEY_PLACEHOLDER, to_string_key(node_or_path))


def template_has_placeholder(template):
    return bool(template) and KEY_PLACEHOLDER in template


def copy_to_clipboard(text):
    app = QGuiApplication.instance()
    if app is None:
        logger.warning("No application instance, clipboard is unavailable")
        return False
    QGuiApplication.clipboard().setText(text)
    return True


def read_clipboard_text():
    app = QGuiApplication.instance()
    if app is None:
        return ""
    return QGuiApplication.clipboard().text() or ""
