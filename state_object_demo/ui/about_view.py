"""About View - Child screen that renders the parent-owned load state."""

import logging

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton
from PySide6.QtCore import Qt, Signal, Slot

from state_object_demo.config import LOADING_TEXT
from state_object_demo.services.about_loader import AboutLoader
from state_object_demo.services.load_state import DisplayMode, LoadState
from state_object_demo.ui.theme import Colors
from state_object_demo.ui.widgets.loading_indicator import LoadingMessage


logger = logging.getLogger(__name__)


def describe_state(state: LoadState) -> str:
    """Text the about screen shows for the current display mode."""
    mode = state.display_mode
    if mode == DisplayMode.LOADING:
        return LOADING_TEXT
    if mode == DisplayMode.READY:
        return f"About: {state.info}"
    return f"Error: {state.error.description}"


class AboutView(QWidget):
    """
    Shows the about info, loading it the first time the view appears.

    The view never owns the LoadState. It is handed the parent's state and
    loader, so creating a new AboutView for each visit reuses whatever was
    already loaded.
    """

    back_requested = Signal()

    def __init__(self, state: LoadState, loader: AboutLoader, parent=None):
        super().__init__(parent)
        self._state = state
        self._loader = loader
        self._init_ui()

        self._state.state_changed.connect(self._on_state_changed)
        self._render()

    def _init_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        header = QHBoxLayout()
        back_btn = QPushButton("< Back")
        back_btn.setFlat(True)
        back_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        back_btn.setStyleSheet(f"color: {Colors.ACCENT.name()}; border: none; font-size: 13px;")
        back_btn.clicked.connect(self.back_requested.emit)
        header.addWidget(back_btn)
        header.addStretch()
        layout.addLayout(header)

        layout.addStretch()

        self._loading = LoadingMessage(self)
        layout.addWidget(self._loading, alignment=Qt.AlignCenter)

        self._text_label = QLabel()
        self._text_label.setAlignment(Qt.AlignCenter)
        self._text_label.setWordWrap(True)
        layout.addWidget(self._text_label)

        layout.addStretch()

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def text(self) -> str:
        """Currently displayed text."""
        if self._state.is_loading:
            return self._loading.message
        return self._text_label.text()

    @property
    def is_showing_spinner(self) -> bool:
        return self._loading.is_spinning

    def on_appear(self) -> None:
        """Lifecycle hook for when the view becomes visible."""
        self._loader.ensure_loaded(self._state)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self.on_appear()

    def dispose(self) -> None:
        """Stop listening to the shared state before the view is dropped."""
        self._loading.hide_loading()
        try:
            self._state.state_changed.disconnect(self._on_state_changed)
        except (RuntimeError, TypeError):
            logger.debug("AboutView was already disconnected from state")

    @Slot()
    def _on_state_changed(self) -> None:
        self._render()

    def _render(self) -> None:
        mode = self._state.display_mode
        text = describe_state(self._state)

        if mode == DisplayMode.LOADING:
            self._text_label.clear()
            self._text_label.hide()
            self._loading.show_loading(text)
            return

        self._loading.hide_loading()
        color = Colors.TEXT_PRIMARY if mode == DisplayMode.READY else Colors.ERROR
        self._text_label.setStyleSheet(f"font-size: 15px; color: {color.name()};")
        self._text_label.setText(text)
        self._text_label.show()
