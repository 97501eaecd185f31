"""
------------------------------------------------------------------------------
Project:        WikiFlux
File:           core/models/content.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Domain models for knowledge base content. Defines the explicit
                front-matter schema with fail-soft normalization, the loaded
                content item, table-of-contents entries and the page bundle
                handed to the presentation layer.
------------------------------------------------------------------------------
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_string_list(v: Any) -> List[str]:
    """
    Coerces a front-matter value into a list of non-empty strings.
    Accepts None, a single (optionally comma separated) string or a list.
    """
    if v is None:
        return []
    if isinstance(v, str):
        return [t.strip() for t in v.split(",") if t.strip()]
    if isinstance(v, (list, tuple, set)):
        return [str(t).strip() for t in v if t is not None and str(t).strip()]
    return []


class ExternalLink(BaseModel):
    """A titled link to an external resource."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    url: str


class ContentMetadata(BaseModel):
    """
    Schema of the front-matter block of a content file.
    Only 'title' is required; unknown keys are ignored.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    title: str
    tags: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    external_links: List[ExternalLink] = Field(default_factory=list, alias="externalLinks")

    @field_validator("title", mode="before")
    @classmethod
    def normalize_title(cls, v: Any) -> Any:
        """YAML may hand over numbers or dates as titles; keep them as text."""
        if v is None:
            return v
        if not isinstance(v, str):
            v = str(v)
        v = v.strip()
        if not v:
            raise ValueError("title must not be empty")
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: Any) -> List[str]:
        """
        Tags have set semantics: duplicates are dropped, first-seen order is
        kept for display.
        """
        seen: List[str] = []
        for tag in _as_string_list(v):
            if tag not in seen:
                seen.append(tag)
        return seen

    @field_validator("categories", mode="before")
    @classmethod
    def normalize_categories(cls, v: Any) -> List[str]:
        return _as_string_list(v)

    @field_validator("notes", mode="before")
    @classmethod
    def normalize_notes(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        text = str(v).strip()
        return text or None

    @field_validator("external_links", mode="before")
    @classmethod
    def normalize_links(cls, v: Any) -> List[dict]:
        """
        Drops entries that are not mappings or carry no url.
        A missing title falls back to the url itself.
        """
        if not isinstance(v, (list, tuple)):
            return []
        links = []
        for entry in v:
            if not isinstance(entry, dict):
                continue
            url = str(entry.get("url") or "").strip()
            if not url:
                continue
            title = str(entry.get("title") or "").strip() or url
            links.append({"title": title, "url": url})
        return links


class ContentItem(BaseModel):
    """
    One loaded content file. Read-only after load.
    """
    model_config = ConfigDict(frozen=True)

    slug: str
    metadata: ContentMetadata
    content: str = ""


class TableOfContentsEntry(BaseModel):
    """A heading found in a content body."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    level: int = Field(ge=1, le=6)


class RelatedPage(BaseModel):
    """Summary of a related item as shown next to a page."""
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    tags: List[str] = Field(default_factory=list)

    @classmethod
    def from_item(cls, item: ContentItem) -> "RelatedPage":
        return cls(slug=item.slug, title=item.metadata.title, tags=list(item.metadata.tags))


class PageData(BaseModel):
    """
    Everything the presentation layer needs to display one page.
    """
    model_config = ConfigDict(frozen=True)

    slug: str
    metadata: ContentMetadata
    content: str
    table_of_contents: List[TableOfContentsEntry] = Field(default_factory=list)
    related_pages: List[RelatedPage] = Field(default_factory=list)
