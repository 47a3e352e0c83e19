# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

import os
import sys
from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QTimer
from utils import debug_utils
debug_utils.setup_debug_mode()
import logging
logger = logging.getLogger(__name__)


def main(argv=None):
    argv = list(sys.argv if argv is None else argv)
    log_level = logging.DEBUG if debug_utils.IS_DEBUG_MODE else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout,
    )

    initial_file = None
    if len(argv) > 1 and argv[1].lower().endswith(".json"):
        initial_file = os.path.abspath(argv[1])

    app = QApplication(argv)

    from utils.single_instance import SingleInstanceServer, raise_existing_instance
    if raise_existing_instance(initial_file):
        logger.info("Another instance is already running; handed over to it.")
        return 0

    from utils.config_manager import load_config
    from utils.localization import lang_manager

    config = load_config()
    language_code = config.get('language')
    if not language_code:
        language_code = lang_manager.get_best_match_language()
        config['language'] = language_code
    lang_manager.setup_translation(language_code)

    from main_window import I18nEditorWindow
    window = I18nEditorWindow(config, initial_file=initial_file)

    instance_server = SingleInstanceServer(window)
    instance_server.request_activation.connect(window.bring_to_front)
    instance_server.request_open_file.connect(window.load_file)
    instance_server.start()

    window.show()
    QTimer.singleShot(0, window.initialize)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
