"""
------------------------------------------------------------------------------
Project:        WikiFlux
File:           core/models/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Package initializer for core data models. Exports the content
                models and the presentation preference types for easy access.
------------------------------------------------------------------------------
"""

from .content import (
    ContentItem,
    ContentMetadata,
    ExternalLink,
    PageData,
    RelatedPage,
    TableOfContentsEntry,
)
from .preferences import PresentationPreferences, TextSize, Theme, Width
