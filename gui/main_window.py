"""
------------------------------------------------------------------------------
Project:        WikiFlux
File:           gui/main_window.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Main viewer window. Lists the knowledge base, shows one page
                with its contents outline, metadata and related pages, and
                exposes the presentation preferences in the View menu.
------------------------------------------------------------------------------
"""

import html
from typing import Optional

from PyQt6.QtCore import QEvent, Qt
from PyQt6.QtGui import QAction, QActionGroup, QCloseEvent, QTextCursor
from PyQt6.QtWidgets import (
    QHBoxLayout, QLabel, QListWidget, QListWidgetItem, QMainWindow, QSplitter,
    QTextBrowser, QVBoxLayout, QWidget
)

from core.logger import get_logger
from core.models.content import PageData
from core.models.preferences import TextSize, Theme, Width
from core.pages import PageResolver
from core.preferences import PresentationStateStore
from gui.theme import apply_text_size, apply_width

logger = get_logger("gui.main_window")

SLUG_ROLE = Qt.ItemDataRole.UserRole
HEADING_ROLE = Qt.ItemDataRole.UserRole.value + 1
TOC_INDENT = "    "


class MainWindow(QMainWindow):
    """
    Knowledge base viewer. The preference store is owned by the caller and
    injected; the window only reads it and routes menu actions to its setters.
    """

    def __init__(self, resolver: PageResolver, prefs: Optional[PresentationStateStore] = None) -> None:
        super().__init__()
        self.resolver = resolver
        self.prefs: Optional[PresentationStateStore] = None
        self.current_page: Optional[PageData] = None

        self.setWindowTitle(self.tr("WikiFlux"))
        self.resize(1280, 800)

        self._create_widgets()
        self._create_menu()

        if prefs is not None:
            self.attach_preferences(prefs)

        self.reload_index()

    def attach_preferences(self, prefs: PresentationStateStore) -> None:
        """Connects the window to an initialized preference store."""
        self.prefs = prefs
        self.prefs.theme_changed.connect(self._sync_menu)
        self.prefs.text_size_changed.connect(self._on_text_size_changed)
        self.prefs.width_changed.connect(self._on_width_changed)
        self._on_text_size_changed(self.prefs.text_size)
        self._on_width_changed(self.prefs.width)

    # --- Construction ---

    def _create_widgets(self) -> None:
        splitter = QSplitter(Qt.Orientation.Horizontal)

        self.page_list = QListWidget()
        self.page_list.currentItemChanged.connect(self._on_page_selected)
        splitter.addWidget(self.page_list)

        center = QWidget()
        center_layout = QVBoxLayout(center)
        self.title_label = QLabel()
        self.title_label.setObjectName("pageTitle")
        self.title_label.setWordWrap(True)
        self.title_label.setTextFormat(Qt.TextFormat.RichText)
        self.categories_label = QLabel()
        self.categories_label.setWordWrap(True)
        self.categories_label.setTextFormat(Qt.TextFormat.PlainText)
        self.browser = QTextBrowser()
        self.browser.setOpenExternalLinks(True)
        center_layout.addWidget(self.title_label)
        center_layout.addWidget(self.categories_label)
        center_layout.addWidget(self.browser, 1)

        self.content_column = QWidget()
        column_layout = QHBoxLayout(self.content_column)
        column_layout.setContentsMargins(0, 0, 0, 0)
        column_layout.addWidget(center)
        splitter.addWidget(self.content_column)

        side = QWidget()
        side_layout = QVBoxLayout(side)
        side_layout.addWidget(QLabel(self.tr("Contents")))
        self.toc_list = QListWidget()
        self.toc_list.itemActivated.connect(self._on_toc_activated)
        self.toc_list.itemClicked.connect(self._on_toc_activated)
        side_layout.addWidget(self.toc_list, 2)
        side_layout.addWidget(QLabel(self.tr("Related pages")))
        self.related_list = QListWidget()
        self.related_list.itemActivated.connect(self._on_related_activated)
        side_layout.addWidget(self.related_list, 1)
        self.info_label = QLabel()
        self.info_label.setWordWrap(True)
        self.info_label.setOpenExternalLinks(True)
        self.info_label.setTextFormat(Qt.TextFormat.RichText)
        side_layout.addWidget(self.info_label)
        splitter.addWidget(side)

        splitter.setSizes([220, 800, 260])
        self.setCentralWidget(splitter)

    def _create_menu(self) -> None:
        view_menu = self.menuBar().addMenu(self.tr("&View"))

        self.theme_actions = self._add_choice_group(
            view_menu.addMenu(self.tr("Theme")),
            [(Theme.LIGHT, self.tr("Light")), (Theme.DARK, self.tr("Dark")), (Theme.AUTO, self.tr("Automatic"))],
            self._on_theme_action,
        )
        self.text_size_actions = self._add_choice_group(
            view_menu.addMenu(self.tr("Text size")),
            [(TextSize.SMALL, self.tr("Small")), (TextSize.STANDARD, self.tr("Standard")), (TextSize.LARGE, self.tr("Large"))],
            self._on_text_size_action,
        )
        self.width_actions = self._add_choice_group(
            view_menu.addMenu(self.tr("Width")),
            [(Width.STANDARD, self.tr("Standard")), (Width.WIDE, self.tr("Wide"))],
            self._on_width_action,
        )

        view_menu.addSeparator()
        reload_action = QAction(self.tr("Reload"), self)
        reload_action.setShortcut("F5")
        reload_action.triggered.connect(self.reload_index)
        view_menu.addAction(reload_action)

    def _add_choice_group(self, menu, choices, handler) -> dict:
        group = QActionGroup(self)
        group.setExclusive(True)
        actions = {}
        for value, label in choices:
            action = QAction(label, self)
            action.setCheckable(True)
            action.setData(value.value)
            action.triggered.connect(lambda _checked, v=value: handler(v))
            group.addAction(action)
            menu.addAction(action)
            actions[value] = action
        return actions

    # --- Content ---

    def reload_index(self) -> None:
        """Re-reads the list of pages and re-opens the current one."""
        current_slug = self.current_page.slug if self.current_page else None

        self.page_list.blockSignals(True)
        self.page_list.clear()
        for item in self.resolver.store.list_all():
            entry = QListWidgetItem(item.metadata.title)
            entry.setData(SLUG_ROLE, item.slug)
            entry.setToolTip(item.slug)
            self.page_list.addItem(entry)
        self.page_list.blockSignals(False)

        if self.page_list.count() == 0:
            self.show_not_found(None)
            return

        target = current_slug
        for row in range(self.page_list.count()):
            if self.page_list.item(row).data(SLUG_ROLE) == target:
                self.page_list.setCurrentRow(row)
                return
        self.page_list.setCurrentRow(0)

    def open_slug(self, slug: str) -> bool:
        """
        Displays the page for a slug.

        Returns:
            False if the slug does not resolve.
        """
        page = self.resolver.resolve(slug)
        if page is None:
            self.show_not_found(slug)
            return False
        self.show_page(page)
        return True

    def show_page(self, page: PageData) -> None:
        self.current_page = page
        meta = page.metadata

        self.setWindowTitle(f"{meta.title} - WikiFlux")
        self.title_label.setText(f"<h1>{html.escape(meta.title)}</h1>")
        self.categories_label.setText(
            self.tr("Categories: %s") % ", ".join(meta.categories) if meta.categories else ""
        )
        self.browser.setMarkdown(page.content)

        self.toc_list.clear()
        for entry in page.table_of_contents:
            row = QListWidgetItem(TOC_INDENT * (entry.level - 1) + entry.title)
            row.setData(HEADING_ROLE, entry.title)
            row.setToolTip(f"#{entry.id}")
            self.toc_list.addItem(row)

        self.related_list.clear()
        for related in page.related_pages:
            row = QListWidgetItem(related.title)
            row.setData(SLUG_ROLE, related.slug)
            row.setToolTip(", ".join(related.tags))
            self.related_list.addItem(row)

        parts = []
        if meta.tags:
            parts.append("<b>%s</b> %s" % (self.tr("Tags:"), html.escape(", ".join(meta.tags))))
        if meta.notes:
            parts.append("<b>%s</b> %s" % (self.tr("Notes:"), html.escape(meta.notes)))
        if meta.external_links:
            links = "<br>".join(f'<a href="{html.escape(l.url)}">{html.escape(l.title)}</a>' for l in meta.external_links)
            parts.append("<b>%s</b><br>%s" % (self.tr("External links:"), links))
        self.info_label.setText("<br><br>".join(parts))

    def show_not_found(self, slug: Optional[str]) -> None:
        self.current_page = None
        self.title_label.setText(f"<h1>{self.tr('Page not found')}</h1>")
        self.categories_label.clear()
        if slug:
            self.browser.setPlainText(self.tr("There is no page named '%s'.") % slug)
        else:
            self.browser.setPlainText(self.tr("The knowledge base is empty."))
        self.toc_list.clear()
        self.related_list.clear()
        self.info_label.clear()

    # --- Slots ---

    def _on_page_selected(self, current: Optional[QListWidgetItem], _previous) -> None:
        if current is not None:
            self.open_slug(current.data(SLUG_ROLE))

    def _on_toc_activated(self, item: QListWidgetItem) -> None:
        self.browser.moveCursor(QTextCursor.MoveOperation.Start)
        if self.browser.find(item.data(HEADING_ROLE)):
            self.browser.ensureCursorVisible()

    def _on_related_activated(self, item: QListWidgetItem) -> None:
        slug = item.data(SLUG_ROLE)
        for row in range(self.page_list.count()):
            if self.page_list.item(row).data(SLUG_ROLE) == slug:
                self.page_list.setCurrentRow(row)
                return
        self.open_slug(slug)

    def _on_theme_action(self, theme: Theme) -> None:
        if self.prefs is not None:
            self.prefs.set_theme(theme)

    def _on_text_size_action(self, text_size: TextSize) -> None:
        if self.prefs is not None:
            self.prefs.set_text_size(text_size)

    def _on_width_action(self, width: Width) -> None:
        if self.prefs is not None:
            self.prefs.set_width(width)

    def _on_text_size_changed(self, text_size: TextSize) -> None:
        apply_text_size(self.browser, text_size)
        self._sync_menu()

    def _on_width_changed(self, width: Width) -> None:
        apply_width(self.content_column, width)
        self._sync_menu()

    def _sync_menu(self, *_args) -> None:
        if self.prefs is None:
            return
        self.theme_actions[self.prefs.theme].setChecked(True)
        self.text_size_actions[self.prefs.text_size].setChecked(True)
        self.width_actions[self.prefs.width].setChecked(True)

    # --- Events ---

    def changeEvent(self, event: QEvent) -> None:
        if event.type() == QEvent.Type.ActivationChange and self.isActiveWindow() and self.prefs is not None:
            self.prefs.reconcile()
        super().changeEvent(event)

    def closeEvent(self, event: QCloseEvent) -> None:
        if self.prefs is not None:
            self.prefs.teardown()
        logger.info("Viewer closed")
        super().closeEvent(event)
