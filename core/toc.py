"""
------------------------------------------------------------------------------
Project:        WikiFlux
File:           core/toc.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Builds the table of contents of a content body from its
                Markdown ATX headings and derives the in-page anchor ids the
                rendered headings link to.
------------------------------------------------------------------------------
"""

import re
from typing import List

from core.models.content import TableOfContentsEntry

# 1-6 hashes at line start, horizontal whitespace, then the title text
HEADING_PATTERN = re.compile(r"^(#{1,6})[ \t]+(.+)$", re.MULTILINE)

# Anchor normalization steps. Word characters are ASCII only.
_STRIP_PATTERN = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_HYPHEN_RUN_PATTERN = re.compile(r"-+")
_EDGE_HYPHEN_PATTERN = re.compile(r"^-|-$")


def make_anchor_id(title: str) -> str:
    """
    Derives the anchor id for a heading title.
    e.g. 'Research & Development' -> 'research-development'
    """
    anchor = title.lower()
    anchor = _STRIP_PATTERN.sub("", anchor)
    anchor = _WHITESPACE_PATTERN.sub("-", anchor)
    anchor = _HYPHEN_RUN_PATTERN.sub("-", anchor)
    return _EDGE_HYPHEN_PATTERN.sub("", anchor)


def generate_table_of_contents(content: str) -> List[TableOfContentsEntry]:
    """
    Scans the body for headings in document order.
    Duplicate titles produce duplicate ids.

    Args:
        content: The raw Markdown body.

    Returns:
        The ordered list of headings.
    """
    toc: List[TableOfContentsEntry] = []
    for match in HEADING_PATTERN.finditer(content or ""):
        title = match.group(2).strip()
        if not title:
            continue
        toc.append(TableOfContentsEntry(
            id=make_anchor_id(title),
            title=title,
            level=len(match.group(1)),
        ))
    return toc
