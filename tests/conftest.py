import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from pathlib import Path
from PyQt6.QtCore import QSettings, QStandardPaths


@pytest.fixture(autouse=True)
def isolated_qt_paths():
    """Keeps QStandardPaths away from the real user config/data folders."""
    QStandardPaths.setTestModeEnabled(True)
    yield
    QStandardPaths.setTestModeEnabled(False)


@pytest.fixture
def settings(tmp_path):
    """A throwaway INI backed QSettings store."""
    store = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    store.clear()
    store.sync()
    return store


@pytest.fixture
def content_dir(tmp_path) -> Path:
    path = tmp_path / "content"
    path.mkdir()
    return path


@pytest.fixture
def write_item(content_dir):
    """
    Writes a content file. Returns the created path.
    Usage: write_item("slug", title="T", tags=["a"], body="# Head")
    """
    def _write(slug, title=None, tags=None, body="", ext=".mdx", extra=""):
        lines = ["---"]
        if title is not None:
            lines.append(f'title: "{title}"')
        if tags is not None:
            lines.append("tags: [" + ", ".join(f'"{t}"' for t in tags) + "]")
        if extra:
            lines.append(extra.rstrip("\n"))
        lines.append("---")
        lines.append(body)
        path = content_dir / f"{slug}{ext}"
        path.write_text("\n".join(lines), encoding="utf-8")
        return path
    return _write
