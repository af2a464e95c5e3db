"""
Application theming and color palette.

Provides dark theme colors and palette configuration for the application.
"""

from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from PySide6.QtWidgets import QApplication


class Colors:
    """Color constants for the application theme."""

    # Background colors
    WINDOW = QColor(24, 28, 32)           # Main window background
    WINDOW_ALT = QColor(32, 36, 42)       # Section backgrounds
    WIDGET = QColor(40, 44, 52)           # Rows and buttons
    WIDGET_HOVER = QColor(50, 56, 66)     # Hovered row

    # Text colors
    TEXT_PRIMARY = QColor(220, 223, 228)
    TEXT_SECONDARY = QColor(140, 145, 155) # Footers
    TEXT_DISABLED = QColor(90, 95, 105)

    # Accent colors
    ACCENT = QColor(100, 149, 237)        # Cornflower blue
    ACCENT_PRESSED = QColor(80, 129, 217)

    # Status colors
    ERROR = QColor(244, 67, 54)

    BORDER = QColor(55, 60, 70)


def create_dark_palette() -> QPalette:
    """
    Create a QPalette configured for dark theme.

    Returns:
        QPalette configured with dark theme colors.
    """
    palette = QPalette()

    palette.setColor(QPalette.Window, Colors.WINDOW)
    palette.setColor(QPalette.WindowText, Colors.TEXT_PRIMARY)
    palette.setColor(QPalette.Base, Colors.WIDGET)
    palette.setColor(QPalette.AlternateBase, Colors.WINDOW_ALT)
    palette.setColor(QPalette.Text, Colors.TEXT_PRIMARY)
    palette.setColor(QPalette.BrightText, Qt.white)

    palette.setColor(QPalette.Button, Colors.WIDGET)
    palette.setColor(QPalette.ButtonText, Colors.TEXT_PRIMARY)

    palette.setColor(QPalette.Highlight, Colors.ACCENT)
    palette.setColor(QPalette.HighlightedText, Qt.white)

    palette.setColor(QPalette.Disabled, QPalette.WindowText, Colors.TEXT_DISABLED)
    palette.setColor(QPalette.Disabled, QPalette.Text, Colors.TEXT_DISABLED)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, Colors.TEXT_DISABLED)

    palette.setColor(QPalette.Link, Colors.ACCENT)
    palette.setColor(QPalette.LinkVisited, Colors.ACCENT_PRESSED)

    return palette


def get_stylesheet() -> str:
    """Stylesheet rules for the grouped-list look of the main page."""
    return f"""
        QFrame#section {{
            background: {Colors.WINDOW_ALT.name()};
            border: 1px solid {Colors.BORDER.name()};
            border-radius: 8px;
        }}
        QPushButton#row {{
            background: transparent;
            color: {Colors.TEXT_PRIMARY.name()};
            border: none;
            padding: 10px 16px;
            text-align: left;
            font-size: 13px;
        }}
        QPushButton#row:hover {{
            background: {Colors.WIDGET_HOVER.name()};
        }}
        QPushButton#actionRow {{
            background: transparent;
            color: {Colors.ACCENT.name()};
            border: none;
            padding: 10px 16px;
            text-align: left;
            font-size: 13px;
        }}
        QPushButton#actionRow:hover {{
            background: {Colors.WIDGET_HOVER.name()};
        }}
        QLabel#footer {{
            color: {Colors.TEXT_SECONDARY.name()};
            font-size: 11px;
            padding: 2px 16px 12px 16px;
        }}
        QMenu {{
            background: {Colors.WINDOW_ALT.name()};
            border: 1px solid {Colors.BORDER.name()};
            padding: 4px;
        }}
        QMenu::item:selected {{
            background: {Colors.ACCENT.name()};
        }}
    """


def apply_dark_theme(app: QApplication) -> None:
    """
    Apply dark theme to the application.

    Args:
        app: The QApplication instance to style.
    """
    app.setStyle("Fusion")
    app.setPalette(create_dark_palette())
    app.setStyleSheet(get_stylesheet())
