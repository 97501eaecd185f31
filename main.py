"""
------------------------------------------------------------------------------
Project:        WikiFlux
File:           main.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Application entry point. Initializes the Qt environment,
                configuration and logging, sets up the content services and
                the presentation preferences before launching the viewer.
------------------------------------------------------------------------------
"""

import argparse
import sys

from PyQt6.QtCore import QCoreApplication
from PyQt6.QtWidgets import QApplication

from core.config import AppConfig
from core.content_store import ContentStore
from core.logger import setup_logging, get_logger
from core.pages import PageResolver
from core.preferences import PresentationStateStore
from gui.main_window import MainWindow
from gui.theme import QtSystemSchemeSource, WidgetStylingRoot


def main() -> None:
    """
    WikiFlux Entry Point.
    Initializes infrastructure and launches the GUI.
    """
    parser = argparse.ArgumentParser(description="WikiFlux - Personal Knowledge Base Viewer")
    parser.add_argument("-P", "--profile", type=str, help="Application profile for isolation (e.g. 'dev')")
    parser.add_argument("-C", "--content-dir", type=str, help="Directory with the content files (saved to the profile)")
    parser.add_argument("slug", nargs="?", help="Page to open on start")
    args, unknown = parser.parse_known_args()

    app = QApplication(sys.argv)

    app_id = "wikiflux"
    if args.profile:
        app_id = f"wikiflux-{args.profile}"
    QCoreApplication.setApplicationName(app_id)

    app_config = AppConfig(profile=args.profile)
    if args.content_dir:
        app_config.set_content_dir(args.content_dir)

    # Initialize Logging
    setup_logging(
        level=app_config.get_log_level(),
        log_file=str(app_config.get_log_file_path()),
        component_levels=app_config.get_log_components()
    )
    logger = get_logger("core")
    logger.info(f"WikiFlux started (Profile: {args.profile or 'default'})")

    # 1. Content services
    content_dir = app_config.get_content_dir()
    store = ContentStore(base_path=content_dir, extensions=app_config.get_content_extensions())
    resolver = PageResolver(store)
    if not store.base_path.is_dir():
        logger.warning(f"Content directory not found: {store.base_path}")
    else:
        logger.info(f"Serving {len(store.list_slugs())} pages from {store.base_path}")

    # 2. Window + preferences (theme is applied before the window is shown)
    window = MainWindow(resolver=resolver)
    prefs = PresentationStateStore(
        settings=app_config.settings,
        styling_root=WidgetStylingRoot(window),
        scheme_source=QtSystemSchemeSource(parent=window),
        default_theme=app_config.get_default_theme(),
        parent=window,
    )
    prefs.initialize()
    window.attach_preferences(prefs)

    if args.profile:
        window.setWindowTitle(f"{window.windowTitle()} [PROFILE: {args.profile.upper()}]")

    if args.slug and not window.open_slug(args.slug):
        logger.warning(f"Requested page '{args.slug}' does not exist")

    window.show()

    # 3. Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
