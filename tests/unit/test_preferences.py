"""
------------------------------------------------------------------------------
Project:        WikiFlux
File:           tests/unit/test_preferences.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Unit tests for the presentation-state store: defaults,
                persistence, theme application, system scheme listener and
                cross-instance reconciliation.
------------------------------------------------------------------------------
"""

import logging

import pytest
from PyQt6.QtCore import QSettings

from core.models.preferences import PresentationPreferences, TextSize, Theme, Width
from core.preferences import ManualSchemeSource, PresentationStateStore, StylingRoot


@pytest.fixture
def root():
    return StylingRoot()


@pytest.fixture
def system():
    return ManualSchemeSource(dark=False)


@pytest.fixture
def make_store(settings, root, system):
    stores = []

    def _make(default_theme=Theme.DARK, store_settings=None, styling_root=None):
        store = PresentationStateStore(
            settings=store_settings or settings,
            styling_root=styling_root or root,
            scheme_source=system,
            default_theme=default_theme,
            watch_storage=False,
        )
        stores.append(store)
        return store

    yield _make
    for store in stores:
        store.teardown()


def test_defaults_when_storage_is_empty(make_store, root):
    store = make_store()
    prefs = store.initialize()

    assert prefs == PresentationPreferences(theme=Theme.DARK, text_size=TextSize.STANDARD, width=Width.STANDARD)
    assert root.has_class("dark")
    assert root.color_scheme == "dark"


def test_auto_default_variant(make_store, system, root):
    system.set_dark(True)
    store = make_store(default_theme="auto")
    store.initialize()

    assert store.theme == Theme.AUTO
    assert root.has_class("dark")
    assert store.system_listener_attached


def test_setters_persist_immediately(make_store, settings):
    store = make_store()
    store.initialize()

    store.set_theme("light")
    store.set_text_size(TextSize.LARGE)
    store.set_width("wide")

    assert settings.value("wiki-theme") == "light"
    assert settings.value("wiki-text-size") == "large"
    assert settings.value("wiki-width") == "wide"


def test_dark_survives_reload(make_store, settings, tmp_path):
    store = make_store(default_theme=Theme.AUTO)
    store.initialize()
    store.set_theme(Theme.DARK)
    store.teardown()

    # A fresh QSettings on the same file simulates the next session
    reopened = QSettings(settings.fileName(), QSettings.Format.IniFormat)
    fresh = make_store(default_theme=Theme.AUTO, store_settings=reopened, styling_root=StylingRoot())
    assert fresh.initialize().theme == Theme.DARK


def test_unrecognized_stored_value_falls_back(make_store, settings, caplog):
    settings.setValue("wiki-theme", "sepia")
    settings.setValue("wiki-text-size", "huge")
    settings.setValue("wiki-width", "")

    store = make_store()
    with caplog.at_level(logging.WARNING, logger="wikiflux.prefs"):
        prefs = store.initialize()

    assert prefs.theme == Theme.DARK
    assert prefs.text_size == TextSize.STANDARD
    assert prefs.width == Width.STANDARD
    assert any("sepia" in rec.getMessage() for rec in caplog.records)


def test_invalid_setter_value_raises(make_store):
    store = make_store()
    store.initialize()
    with pytest.raises(ValueError):
        store.set_theme("blue")
    with pytest.raises(ValueError):
        store.set_width("narrow")
    assert store.theme == Theme.DARK


def test_light_removes_marker(make_store, root):
    store = make_store()
    store.initialize()
    assert root.has_class("dark")

    store.set_theme(Theme.LIGHT)
    assert not root.has_class("dark")
    assert root.color_scheme == "light"


def test_auto_follows_system_changes(make_store, root, system):
    store = make_store()
    store.initialize()
    store.set_theme(Theme.AUTO)
    assert not root.has_class("dark")

    system.set_dark(True)
    assert root.has_class("dark")
    assert root.color_scheme == "dark"

    system.set_dark(False)
    assert not root.has_class("dark")


def test_leaving_auto_detaches_system_listener(make_store, root, system):
    store = make_store()
    store.initialize()
    store.set_theme(Theme.AUTO)
    assert store.system_listener_attached

    store.set_theme(Theme.LIGHT)
    assert not store.system_listener_attached

    # No residual reapplication once auto is gone
    system.set_dark(True)
    assert not root.has_class("dark")
    assert root.color_scheme == "light"


def test_teardown_detaches_system_listener(make_store, root, system):
    store = make_store(default_theme=Theme.AUTO)
    store.initialize()
    store.teardown()

    system.set_dark(True)
    assert not root.has_class("dark")


def test_signals_fire_only_on_change(make_store):
    store = make_store()
    store.initialize()

    seen = []
    store.theme_changed.connect(lambda v: seen.append(v))
    store.text_size_changed.connect(lambda v: seen.append(v))

    store.set_theme(Theme.DARK)
    store.set_text_size(TextSize.STANDARD)
    assert seen == []

    store.set_theme(Theme.LIGHT)
    store.set_text_size(TextSize.SMALL)
    assert seen == [Theme.LIGHT, TextSize.SMALL]


def test_reconcile_adopts_other_instance_writes(make_store, root):
    first = make_store()
    first.initialize()

    other_root = StylingRoot()
    second = make_store(styling_root=other_root)
    second.initialize()

    second.set_theme(Theme.LIGHT)
    second.set_width(Width.WIDE)

    changes = []
    first.theme_changed.connect(lambda v: changes.append(v))
    first.width_changed.connect(lambda v: changes.append(v))

    assert first.reconcile() is True
    assert first.theme == Theme.LIGHT
    assert first.width == Width.WIDE
    assert not root.has_class("dark")
    assert changes == [Theme.LIGHT, Width.WIDE]

    assert first.reconcile() is False
