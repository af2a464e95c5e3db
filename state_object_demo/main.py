"""Main entry point for State Object Demo"""

import sys
from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from state_object_demo.config import APP_NAME
from state_object_demo.logger_config import setup_logging
from state_object_demo.ui.main_window import MainWindow
from state_object_demo.ui.theme import apply_dark_theme


def main():
    """Main application entry point"""
    # Packaged builds have no console, so log to a file there
    is_frozen = getattr(sys, 'frozen', False) or "__compiled__" in globals()
    setup_logging(log_to_file=is_frozen)

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_NAME)

    apply_dark_theme(app)

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
