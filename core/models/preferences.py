"""
------------------------------------------------------------------------------
Project:        WikiFlux
File:           core/models/preferences.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Enumerations and snapshot model for the user's presentation
                preferences (theme, text size, layout width). Enum values are
                the literal strings persisted in the settings store.
------------------------------------------------------------------------------
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Theme(str, Enum):
    """Color theme of the page."""
    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"


class TextSize(str, Enum):
    """Body text size."""
    SMALL = "small"
    STANDARD = "standard"
    LARGE = "large"


class Width(str, Enum):
    """Layout width of the content column."""
    STANDARD = "standard"
    WIDE = "wide"


class PresentationPreferences(BaseModel):
    """Immutable snapshot of the three independent display preferences."""
    model_config = ConfigDict(frozen=True)

    theme: Theme = Theme.DARK
    text_size: TextSize = TextSize.STANDARD
    width: Width = Width.STANDARD
