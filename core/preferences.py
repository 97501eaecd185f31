"""
------------------------------------------------------------------------------
Project:        WikiFlux
File:           core/preferences.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Presentation-state store. Holds the user's theme, text size
                and width preferences, persists every change to QSettings,
                applies the theme to a styling root and keeps several
                running instances in sync through a file-change subscription
                on the settings file.
------------------------------------------------------------------------------
"""

from pathlib import Path
from typing import Optional, Set, Type, TypeVar, Union

from PyQt6.QtCore import QFileSystemWatcher, QObject, QSettings, pyqtSignal

from core.logger import get_logger
from core.models.preferences import PresentationPreferences, TextSize, Theme, Width

logger = get_logger("prefs")

E = TypeVar("E", Theme, TextSize, Width)


class StylingRoot:
    """
    The styling root of the displayed document: a set of marker classes and
    a color-scheme hint. Subclasses push the state to a real view by
    overriding _on_changed().
    """

    def __init__(self) -> None:
        self.classes: Set[str] = set()
        self.color_scheme: str = "light"

    def add_class(self, name: str) -> None:
        if name not in self.classes:
            self.classes.add(name)
            self._on_changed()

    def remove_class(self, name: str) -> None:
        if name in self.classes:
            self.classes.discard(name)
            self._on_changed()

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def set_color_scheme(self, scheme: str) -> None:
        if scheme != self.color_scheme:
            self.color_scheme = scheme
            self._on_changed()

    def _on_changed(self) -> None:
        """Hook for subclasses."""
        pass


class SystemSchemeSource(QObject):
    """
    Reports whether the operating system prefers a dark color scheme.
    Emits dark_changed whenever that preference changes.
    """
    dark_changed = pyqtSignal(bool)

    def is_dark(self) -> bool:
        raise NotImplementedError


class ManualSchemeSource(SystemSchemeSource):
    """
    A scheme source driven by the application itself, used where no
    platform preference is available (headless runs, tests).
    """

    def __init__(self, dark: bool = False, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._dark = dark

    def is_dark(self) -> bool:
        return self._dark

    def set_dark(self, dark: bool) -> None:
        if dark != self._dark:
            self._dark = dark
            self.dark_changed.emit(dark)


class PresentationStateStore(QObject):
    """
    Owner of the presentation preferences. One instance per window; hand it
    to the widgets that read it and change values only through the setters.
    """

    KEY_THEME: str = "wiki-theme"
    KEY_TEXT_SIZE: str = "wiki-text-size"
    KEY_WIDTH: str = "wiki-width"

    DARK_CLASS: str = "dark"

    theme_changed = pyqtSignal(object)       # Theme
    text_size_changed = pyqtSignal(object)   # TextSize
    width_changed = pyqtSignal(object)       # Width

    def __init__(
        self,
        settings: QSettings,
        styling_root: StylingRoot,
        scheme_source: SystemSchemeSource,
        default_theme: Union[Theme, str] = Theme.DARK,
        watch_storage: bool = True,
        parent: Optional[QObject] = None,
    ) -> None:
        """
        Args:
            settings: Persistent storage for the three preference keys.
            styling_root: Where the theme is applied.
            scheme_source: The system dark-mode preference, consulted for 'auto'.
            default_theme: Theme used when nothing is stored ('dark' or 'auto').
            watch_storage: Subscribe to changes of the settings file made by
                other instances.
        """
        super().__init__(parent)
        self.settings = settings
        self.styling_root = styling_root
        self.scheme_source = scheme_source
        self.default_theme = Theme(default_theme)
        self.watch_storage = watch_storage

        self._theme: Theme = self.default_theme
        self._text_size: TextSize = TextSize.STANDARD
        self._width: Width = Width.STANDARD

        self._system_listener_attached = False
        self._watcher: Optional[QFileSystemWatcher] = None

    # --- State ---

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def text_size(self) -> TextSize:
        return self._text_size

    @property
    def width(self) -> Width:
        return self._width

    @property
    def preferences(self) -> PresentationPreferences:
        return PresentationPreferences(theme=self._theme, text_size=self._text_size, width=self._width)

    @property
    def system_listener_attached(self) -> bool:
        return self._system_listener_attached

    # --- Lifecycle ---

    def initialize(self) -> PresentationPreferences:
        """
        Loads the preferences from storage and applies the theme right away.
        Missing or unrecognized values fall back to their defaults.
        """
        self.settings.sync()
        self._theme = self._read(self.KEY_THEME, Theme, self.default_theme)
        self._text_size = self._read(self.KEY_TEXT_SIZE, TextSize, TextSize.STANDARD)
        self._width = self._read(self.KEY_WIDTH, Width, Width.STANDARD)

        self._apply_theme()

        if self.watch_storage:
            self._start_watching()

        logger.debug(f"Preferences initialized: {self.preferences}")
        return self.preferences

    def teardown(self) -> None:
        """Detaches every listener the store holds."""
        self._detach_system_listener()
        if self._watcher is not None:
            self._watcher.fileChanged.disconnect(self._on_storage_changed)
            self._watcher.directoryChanged.disconnect(self._on_storage_changed)
            paths = self._watcher.files() + self._watcher.directories()
            if paths:
                self._watcher.removePaths(paths)
            self._watcher = None

    # --- Setters ---

    def set_theme(self, value: Union[Theme, str]) -> None:
        theme = Theme(value)
        self._persist(self.KEY_THEME, theme)
        if theme != self._theme:
            self._theme = theme
            self._apply_theme()
            self.theme_changed.emit(theme)

    def set_text_size(self, value: Union[TextSize, str]) -> None:
        text_size = TextSize(value)
        self._persist(self.KEY_TEXT_SIZE, text_size)
        if text_size != self._text_size:
            self._text_size = text_size
            self.text_size_changed.emit(text_size)

    def set_width(self, value: Union[Width, str]) -> None:
        width = Width(value)
        self._persist(self.KEY_WIDTH, width)
        if width != self._width:
            self._width = width
            self.width_changed.emit(width)

    # --- Cross-instance sync ---

    def reconcile(self) -> bool:
        """
        Re-reads all keys from storage and adopts values written elsewhere.
        Last write wins.

        Returns:
            True if any preference changed.
        """
        self.settings.sync()
        changed = False

        theme = self._read(self.KEY_THEME, Theme, self.default_theme)
        if theme != self._theme:
            self._theme = theme
            self._apply_theme()
            self.theme_changed.emit(theme)
            changed = True

        text_size = self._read(self.KEY_TEXT_SIZE, TextSize, TextSize.STANDARD)
        if text_size != self._text_size:
            self._text_size = text_size
            self.text_size_changed.emit(text_size)
            changed = True

        width = self._read(self.KEY_WIDTH, Width, Width.STANDARD)
        if width != self._width:
            self._width = width
            self.width_changed.emit(width)
            changed = True

        if changed:
            logger.info(f"Preferences changed by another instance: {self.preferences}")
        return changed

    def _start_watching(self) -> None:
        if self._watcher is not None:
            return
        self._watcher = QFileSystemWatcher(self)
        self._watcher.fileChanged.connect(self._on_storage_changed)
        self._watcher.directoryChanged.connect(self._on_storage_changed)
        self._update_watched_paths()

    def _update_watched_paths(self) -> None:
        """
        Watches the settings file, or its directory until the file exists.
        Atomic rewrites replace the file, so the path is re-added each time.
        """
        if self._watcher is None:
            return
        file_name = self.settings.fileName()
        if not file_name:
            return
        path = Path(file_name)
        if path.is_file():
            if file_name not in self._watcher.files():
                self._watcher.addPath(file_name)
        elif path.parent.is_dir() and str(path.parent) not in self._watcher.directories():
            self._watcher.addPath(str(path.parent))

    def _on_storage_changed(self, _path: str) -> None:
        self._update_watched_paths()
        self.reconcile()

    # --- Theme application ---

    def _apply_theme(self) -> None:
        if self._theme == Theme.AUTO:
            self._attach_system_listener()
            self._apply_dark(self.scheme_source.is_dark())
        else:
            self._detach_system_listener()
            self._apply_dark(self._theme == Theme.DARK)

    def _apply_dark(self, dark: bool) -> None:
        if dark:
            self.styling_root.add_class(self.DARK_CLASS)
            self.styling_root.set_color_scheme("dark")
        else:
            self.styling_root.remove_class(self.DARK_CLASS)
            self.styling_root.set_color_scheme("light")

    def _attach_system_listener(self) -> None:
        if not self._system_listener_attached:
            self.scheme_source.dark_changed.connect(self._on_system_scheme_changed)
            self._system_listener_attached = True

    def _detach_system_listener(self) -> None:
        if self._system_listener_attached:
            self.scheme_source.dark_changed.disconnect(self._on_system_scheme_changed)
            self._system_listener_attached = False

    def _on_system_scheme_changed(self, dark: bool) -> None:
        if self._theme == Theme.AUTO:
            self._apply_dark(dark)

    # --- Storage helpers ---

    def _read(self, key: str, enum_cls: Type[E], default: E) -> E:
        raw = self.settings.value(key, None)
        if raw is None or str(raw).strip() == "":
            return default
        try:
            return enum_cls(str(raw).strip())
        except ValueError:
            logger.warning(f"Ignoring unrecognized value {raw!r} for '{key}', using '{default.value}'")
            return default

    def _persist(self, key: str, value: Union[Theme, TextSize, Width]) -> None:
        self.settings.setValue(key, value.value)
        self.settings.sync()
