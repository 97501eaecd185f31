"""
------------------------------------------------------------------------------
Project:        WikiFlux
File:           core/pages.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Page resolution. Combines the content store, the table of
                contents extractor and the related-content ranker into the
                bundle the presentation layer displays for one slug.
------------------------------------------------------------------------------
"""

from typing import Dict, List, Optional

from core.content_store import ContentStore
from core.logger import get_logger
from core.models.content import PageData, RelatedPage
from core.related import RelatedContentRanker
from core.toc import generate_table_of_contents

logger = get_logger("pages")


class PageResolver:
    """
    Resolves a slug into a PageData bundle. Nothing is cached; each call
    re-reads and re-ranks.
    """

    def __init__(self, store: ContentStore, ranker: Optional[RelatedContentRanker] = None) -> None:
        self.store = store
        self.ranker = ranker or RelatedContentRanker(store)

    def resolve(self, slug: str) -> Optional[PageData]:
        """
        Builds the page for a slug.

        Returns:
            The PageData, or None if there is no such item (render a not-found page).
        """
        item = self.store.get_by_slug(slug)
        if item is None:
            logger.info(f"No content for slug {slug!r}")
            return None

        related = self.ranker.find_related(item.metadata.tags, slug)
        return PageData(
            slug=item.slug,
            metadata=item.metadata,
            content=item.content,
            table_of_contents=generate_table_of_contents(item.content),
            related_pages=[RelatedPage.from_item(r) for r in related],
        )

    def static_params(self) -> List[Dict[str, str]]:
        """Route parameters for every known slug, e.g. for pre-rendering."""
        return [{"slug": slug} for slug in sorted(self.store.list_slugs())]
