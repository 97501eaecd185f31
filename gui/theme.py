"""
------------------------------------------------------------------------------
Project:        WikiFlux
File:           gui/theme.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Qt adapters for the presentation preferences: a styling root
                backed by a widget, the platform color-scheme source and the
                text size / width metrics used by the page view.
------------------------------------------------------------------------------
"""

from typing import Optional

from PyQt6.QtCore import QObject, Qt
from PyQt6.QtGui import QColor, QGuiApplication, QPalette
from PyQt6.QtWidgets import QWidget

from core.logger import get_logger
from core.models.preferences import TextSize, Width
from core.preferences import StylingRoot, SystemSchemeSource

logger = get_logger("gui.theme")

# Pixel sizes of the body font per text size
TEXT_SIZE_PIXELS = {
    TextSize.SMALL: 14,
    TextSize.STANDARD: 16,
    TextSize.LARGE: 18,
}

# Maximum width of the content column; None = unbounded
WIDTH_MAX_PIXELS = {
    Width.STANDARD: 1152,
    Width.WIDE: None,
}

# QWIDGETSIZE_MAX
_UNBOUNDED = 16777215


def text_size_pixel_size(text_size: TextSize) -> int:
    return TEXT_SIZE_PIXELS[TextSize(text_size)]


def width_max_pixels(width: Width) -> Optional[int]:
    return WIDTH_MAX_PIXELS[Width(width)]


def apply_text_size(widget: QWidget, text_size: TextSize) -> None:
    font = widget.font()
    font.setPixelSize(text_size_pixel_size(text_size))
    widget.setFont(font)


def apply_width(widget: QWidget, width: Width) -> None:
    max_px = width_max_pixels(width)
    widget.setMaximumWidth(max_px if max_px is not None else _UNBOUNDED)


def dark_palette() -> QPalette:
    """Palette used while the 'dark' class is set."""
    palette = QPalette()
    window = QColor(17, 24, 39)
    base = QColor(31, 41, 55)
    text = QColor(243, 244, 246)
    link = QColor(96, 165, 250)

    palette.setColor(QPalette.ColorRole.Window, window)
    palette.setColor(QPalette.ColorRole.WindowText, text)
    palette.setColor(QPalette.ColorRole.Base, base)
    palette.setColor(QPalette.ColorRole.AlternateBase, window)
    palette.setColor(QPalette.ColorRole.Text, text)
    palette.setColor(QPalette.ColorRole.Button, base)
    palette.setColor(QPalette.ColorRole.ButtonText, text)
    palette.setColor(QPalette.ColorRole.ToolTipBase, base)
    palette.setColor(QPalette.ColorRole.ToolTipText, text)
    palette.setColor(QPalette.ColorRole.Highlight, link)
    palette.setColor(QPalette.ColorRole.HighlightedText, window)
    palette.setColor(QPalette.ColorRole.Link, link)
    palette.setColor(QPalette.ColorRole.LinkVisited, QColor(167, 139, 250))
    return palette


class WidgetStylingRoot(StylingRoot):
    """
    Styling root backed by a top-level widget.
    Marker classes end up in the dynamic property 'classes' (usable from
    style sheets as [classes~="dark"]), the scheme in 'colorScheme'.
    """

    def __init__(self, widget: QWidget) -> None:
        super().__init__()
        self.widget = widget
        self._light_palette = QPalette(widget.palette())
        self._on_changed()

    def _on_changed(self) -> None:
        self.widget.setProperty("classes", " ".join(sorted(self.classes)))
        self.widget.setProperty("colorScheme", self.color_scheme)

        if self.has_class("dark"):
            self.widget.setPalette(dark_palette())
        else:
            self.widget.setPalette(self._light_palette)

        # Re-evaluate property selectors in style sheets
        style = self.widget.style()
        if style is not None:
            style.unpolish(self.widget)
            style.polish(self.widget)
        self.widget.update()


class QtSystemSchemeSource(SystemSchemeSource):
    """
    Follows the platform color scheme via QStyleHints.
    """

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._hints = QGuiApplication.styleHints()
        self._hints.colorSchemeChanged.connect(self._on_scheme_changed)

    def is_dark(self) -> bool:
        return self._hints.colorScheme() == Qt.ColorScheme.Dark

    def _on_scheme_changed(self, scheme: Qt.ColorScheme) -> None:
        dark = scheme == Qt.ColorScheme.Dark
        logger.debug(f"System color scheme changed (dark={dark})")
        self.dark_changed.emit(dark)

