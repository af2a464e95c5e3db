"""
Loading indicator widgets.

Provides visual feedback while the about info is being fetched.
"""

from PySide6.QtCore import Qt, QTimer, QSize
from PySide6.QtGui import QPainter, QColor, QPen
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel


class SpinnerWidget(QWidget):
    """
    Animated spinner widget.

    A circular loading indicator that rotates while started.
    """

    def __init__(
        self,
        parent: QWidget = None,
        size: int = 32,
        color: QColor = None,
        line_width: int = 3,
    ) -> None:
        super().__init__(parent)
        self._color = color or QColor(100, 149, 237)  # Cornflower blue
        self._line_width = line_width
        self._angle = 0
        self._arc_length = 270  # Degrees of arc to draw

        self.setFixedSize(QSize(size, size))

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._rotate)

    @property
    def is_spinning(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        """Start the spinning animation."""
        self._timer.start(16)  # ~60fps

    def stop(self) -> None:
        """Stop the spinning animation."""
        self._timer.stop()

    def _rotate(self) -> None:
        self._angle = (self._angle + 6) % 360
        self.update()

    def paintEvent(self, event) -> None:
        """Draw the spinner arc."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        padding = self._line_width
        rect = self.rect().adjusted(padding, padding, -padding, -padding)

        pen = QPen(self._color)
        pen.setWidth(self._line_width)
        pen.setCapStyle(Qt.RoundCap)
        painter.setPen(pen)

        # Qt uses 1/16th degree units
        painter.drawArc(rect, self._angle * 16, self._arc_length * 16)


class LoadingMessage(QWidget):
    """
    Spinner with a message underneath.

    Usage:
        indicator = LoadingMessage()
        indicator.show_loading("Loading about info...")
        # Later...
        indicator.hide_loading()
    """

    def __init__(self, parent: QWidget = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)

        self._spinner = SpinnerWidget(self, size=48)
        layout.addWidget(self._spinner, alignment=Qt.AlignCenter)

        self._message = QLabel()
        self._message.setAlignment(Qt.AlignCenter)
        self._message.setStyleSheet("color: #888; font-size: 12px;")
        layout.addWidget(self._message, alignment=Qt.AlignCenter)

        self.hide()

    @property
    def message(self) -> str:
        return self._message.text()

    @property
    def is_spinning(self) -> bool:
        return self._spinner.is_spinning

    def show_loading(self, message: str = "") -> None:
        """Show the spinner with optional message."""
        self._message.setText(message)
        self._message.setVisible(bool(message))
        self._spinner.start()
        self.show()

    def hide_loading(self) -> None:
        self._spinner.stop()
        self.hide()
