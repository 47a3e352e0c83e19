# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import gettext
import os
import locale
from PySide6.QtCore import QObject, Signal
from .path_utils import get_resource_path
import logging
logger = logging.getLogger(__name__)


class LanguageManager(QObject):
    language_changed = Signal()

    def __init__(self):
        super().__init__()
        self.translator = lambda s: s
        self.app_name = "i18n_string_editor"
        self.locale_dir = get_resource_path('locales')
        self.supported_languages = self._get_supported_languages()
        self.default_lang = 'en_US'
        self.current_lang_code = self.default_lang

    def _get_supported_languages(self):
        languages = []
        if os.path.isdir(self.locale_dir):
            for name in os.listdir(self.locale_dir):
                mo_path = os.path.join(self.locale_dir, name, 'LC_MESSAGES', f'{self.app_name}.mo')
                if os.path.exists(mo_path):
                    languages.append(name)
        return languages

    def get_system_language(self):
        try:
            system_lang = locale.getlocale()[0]
            if system_lang:
                return system_lang
        except ValueError:
            pass

        env_lang = os.getenv('LANG')
        if env_lang:
            return env_lang.split('.')[0]
        return None

    def get_best_match_language(self):
        system_lang = self.get_system_language()
        if not system_lang:
            return self.default_lang

        normalized = system_lang.replace('-', '_')
        for lang in self.supported_languages:
            if lang.lower() == normalized.lower():
                return lang

        base_lang = normalized.lower().split('_')[0]
        for lang in self.supported_languages:
            if lang.lower().startswith(base_lang):
                return lang

        return self.default_lang

    def setup_translation(self, lang_code=None):
        if lang_code is None:
            lang_code = self.get_best_match_language()
        self.current_lang_code = lang_code

        lang = gettext.translation(self.app_name, localedir=self.locale_dir, languages=[lang_code], fallback=True)
        self.translator = lang.gettext
        if type(lang) is gettext.NullTranslations:
            logger.info(f"No catalog for '{lang_code}', using built-in strings")
        else:
            logger.info(f"Successfully set up translation for '{lang_code}'")
        self.language_changed.emit()

    def get_translator(self):
        return self.translator


lang_manager = LanguageManager()
_ = lambda s: lang_manager.get_translator()(s)
