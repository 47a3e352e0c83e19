# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QGuiApplication, QPalette
from utils.enums import ThemeMode
import logging
logger = logging.getLogger(__name__)

_effective_dark = False


def is_system_dark_theme():
    app = QGuiApplication.instance()
    if app is None:
        return False
    hints = app.styleHints()
    if not hasattr(hints, "colorScheme"):
        return False
    return hints.colorScheme() == Qt.ColorScheme.Dark


def resolve_dark(mode):
    mode = ThemeMode.from_value(mode)
    if mode == ThemeMode.DARK:
        return True
    if mode == ThemeMode.LIGHT:
        return False
    return is_system_dark_theme()


def build_dark_palette():
    palette = QPalette()
    palette.setColor(QPalette.Window, QColor(32, 32, 36))
    palette.setColor(QPalette.WindowText, QColor(230, 230, 230))
    palette.setColor(QPalette.Base, QColor(24, 24, 26))
    palette.setColor(QPalette.AlternateBase, QColor(38, 38, 42))
    palette.setColor(QPalette.ToolTipBase, QColor(45, 45, 50))
    palette.setColor(QPalette.ToolTipText, QColor(230, 230, 230))
    palette.setColor(QPalette.Text, QColor(230, 230, 230))
    palette.setColor(QPalette.PlaceholderText, QColor(140, 140, 145))
    palette.setColor(QPalette.Button, QColor(45, 45, 50))
    palette.setColor(QPalette.ButtonText, QColor(230, 230, 230))
    palette.setColor(QPalette.Highlight, QColor(64, 158, 255))
    palette.setColor(QPalette.HighlightedText, QColor(255, 255, 255))
    palette.setColor(QPalette.Link, QColor(102, 177, 255))
    palette.setColor(QPalette.Disabled, QPalette.Text, QColor(120, 120, 125))
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, QColor(120, 120, 125))
    palette.setColor(QPalette.Disabled, QPalette.WindowText, QColor(120, 120, 125))
    return palette


def apply_theme(app, mode):
    """Applies Light, Dark or System (follow the OS color scheme) and returns True when the result is dark."""
    global _effective_dark
    dark = resolve_dark(mode)
    app.setStyle("Fusion")
    if dark:
        app.setPalette(build_dark_palette())
    else:
        app.setPalette(app.style().standardPalette())
    _effective_dark = dark
    logger.debug(f"Theme applied: mode={ThemeMode.from_value(mode).value}, dark={dark}")
    return dark


def is_dark_theme():
    return _effective_dark
