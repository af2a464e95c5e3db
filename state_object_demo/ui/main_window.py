"""Main Window for State Object Demo with list navigation"""

import logging
from typing import Callable, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QStackedWidget, QStatusBar,
    QPushButton, QFrame, QLabel, QMessageBox,
)
from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QAction

from state_object_demo.config import (
    APP_NAME,
    APP_VERSION,
    ABOUT_NAV_TEXT,
    ABOUT_FOOTER,
    RESET_BUTTON_TEXT,
    RESET_FOOTER,
    FetchSettings,
)
from state_object_demo.services.about_info import make_about_fetcher
from state_object_demo.services.about_loader import AboutLoader
from state_object_demo.services.load_state import DisplayMode, LoadState
from .about_view import AboutView


logger = logging.getLogger(__name__)


class ListSection(QWidget):
    """Grouped section with a single row and a footer, like an inset list."""

    def __init__(self, row: QPushButton, footer: str, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        frame = QFrame()
        frame.setObjectName("section")
        frame_layout = QVBoxLayout(frame)
        frame_layout.setContentsMargins(0, 0, 0, 0)
        frame_layout.addWidget(row)
        layout.addWidget(frame)

        footer_label = QLabel(footer)
        footer_label.setObjectName("footer")
        footer_label.setWordWrap(True)
        layout.addWidget(footer_label)


class MainWindow(QMainWindow):
    """
    Parent screen that owns the about LoadState.

    The state and loader live as long as the window. Every visit to the
    about page builds a new AboutView on top of them.
    """

    LIST_PAGE = 0

    def __init__(self, fetch_func: Optional[Callable[[], str]] = None):
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.setMinimumSize(420, 480)
        self.resize(480, 560)

        self.about_state = LoadState(self)
        self.about_loader = AboutLoader(
            fetch_func or make_about_fetcher(FetchSettings.from_env()), parent=self
        )
        self._about_view: Optional[AboutView] = None

        self.init_ui()
        self.create_menu_bar()
        self.create_status_bar()

        self.about_state.display_mode_changed.connect(self._on_display_mode_changed)

    def init_ui(self):
        """Initialize the user interface"""
        self._content_stack = QStackedWidget()
        self.setCentralWidget(self._content_stack)

        list_page = QWidget()
        layout = QVBoxLayout(list_page)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        about_row = QPushButton(f"{ABOUT_NAV_TEXT}    ›")
        about_row.setObjectName("row")
        about_row.setCursor(Qt.CursorShape.PointingHandCursor)
        about_row.clicked.connect(self.show_about_page)
        layout.addWidget(ListSection(about_row, ABOUT_FOOTER))

        reset_row = QPushButton(RESET_BUTTON_TEXT)
        reset_row.setObjectName("actionRow")
        reset_row.setCursor(Qt.CursorShape.PointingHandCursor)
        reset_row.clicked.connect(self.reset_model)
        layout.addWidget(ListSection(reset_row, RESET_FOOTER))

        layout.addStretch()

        self._content_stack.addWidget(list_page)  # 0

    def create_menu_bar(self):
        """Create application menu bar"""
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")

        reset_action = QAction("&Reset Model", self)
        reset_action.setShortcut("Ctrl+R")
        reset_action.triggered.connect(self.reset_model)
        file_menu.addAction(reset_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Alt+F4")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        view_menu = menubar.addMenu("&View")

        about_page_action = QAction("&About Page", self)
        about_page_action.setShortcut("Ctrl+1")
        about_page_action.triggered.connect(self.show_about_page)
        view_menu.addAction(about_page_action)

        list_action = QAction("&List", self)
        list_action.setShortcut("Ctrl+0")
        list_action.triggered.connect(self.show_list_page)
        view_menu.addAction(list_action)

        help_menu = menubar.addMenu("&Help")

        about_action = QAction("&About", self)
        about_action.triggered.connect(self.show_about_dialog)
        help_menu.addAction(about_action)

    def create_status_bar(self):
        """Create status bar"""
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self._show_mode(self.about_state.display_mode)

    @property
    def about_view(self) -> Optional[AboutView]:
        """The about page currently on the stack, if any."""
        return self._about_view

    @Slot()
    def show_about_page(self) -> None:
        """Navigate to a freshly built about page."""
        self._drop_about_view()
        self._about_view = AboutView(self.about_state, self.about_loader)
        self._about_view.back_requested.connect(self.show_list_page)
        index = self._content_stack.addWidget(self._about_view)
        self._content_stack.setCurrentIndex(index)
        logger.debug("Navigated to about page")

    @Slot()
    def show_list_page(self) -> None:
        """Navigate back to the list and discard the about page."""
        self._content_stack.setCurrentIndex(self.LIST_PAGE)
        self._drop_about_view()

    @Slot()
    def reset_model(self) -> None:
        """Reset the about model as if it had never been loaded."""
        self.about_state.reset()
        self.status_bar.showMessage("Model reset", 2000)

    def show_about_dialog(self):
        """Show about dialog"""
        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"{APP_NAME} v{APP_VERSION}\n\n"
            "Shows a parent-owned model that loads\n"
            "the 'About' info once, no matter how\n"
            "many times the page is visited.\n\n"
            "Built with Python and PySide6"
        )

    @Slot(DisplayMode)
    def _on_display_mode_changed(self, mode: DisplayMode) -> None:
        self._show_mode(mode)

    def _show_mode(self, mode: DisplayMode) -> None:
        self.status_bar.showMessage(f"About info: {mode.value}")

    def _drop_about_view(self) -> None:
        if self._about_view is None:
            return
        view = self._about_view
        self._about_view = None
        view.dispose()
        self._content_stack.removeWidget(view)
        view.deleteLater()

    def closeEvent(self, event):
        """Clean up resources when closing."""
        self._drop_about_view()
        event.accept()
