# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from enum import Enum


class ThemeMode(Enum):
    LIGHT = "Light"
    DARK = "Dark"
    SYSTEM = "System"

    @classmethod
    def from_value(cls, value, default=None):
        if isinstance(value, cls):
            return value
        for mode in cls:
            if isinstance(value, str) and mode.value.lower() == value.strip().lower():
                return mode
        return default if default is not None else cls.SYSTEM

    def get_display_text(self):
        from utils.localization import _
        if self == ThemeMode.LIGHT:
            return _("Light")
        if self == ThemeMode.DARK:
            return _("Dark")
        if self == ThemeMode.SYSTEM:
            return _("Follow System")
        return self.value
