"""
------------------------------------------------------------------------------
Project:        WikiFlux
File:           core/related.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Finds content items related to a tag set. Candidates must
                share at least one tag and are ranked by the number of
                shared tags.
------------------------------------------------------------------------------
"""

from typing import Iterable, List

from core.content_store import ContentStore
from core.logger import get_logger
from core.models.content import ContentItem

logger = get_logger("related")

MAX_RELATED = 10


def tag_overlap(item_tags: Iterable[str], query_tags: Iterable[str]) -> int:
    """Number of distinct tags both collections have in common."""
    return len(set(item_tags) & set(query_tags))


class RelatedContentRanker:
    """
    Ranks the items of a ContentStore by tag overlap with a query.
    """

    def __init__(self, store: ContentStore) -> None:
        self.store = store

    def find_related(self, tags: Iterable[str], exclude_slug: str,
                     limit: int = MAX_RELATED) -> List[ContentItem]:
        """
        Find items sharing tags with the query, best match first.

        Args:
            tags: The query tag set.
            exclude_slug: Slug of the item to leave out (usually the current page).
            limit: Maximum number of results, never more than MAX_RELATED.

        Returns:
            Items ordered by descending overlap; ties keep the store's order.
        """
        query = set(tags or [])
        if not query:
            return []

        limit = max(0, min(limit, MAX_RELATED))

        scored = []
        for item in self.store.list_all():
            if item.slug == exclude_slug:
                continue
            score = tag_overlap(item.metadata.tags, query)
            if score > 0:
                scored.append((score, item))

        # sorted() is stable: equal scores stay in enumeration order
        scored = sorted(scored, key=lambda pair: pair[0], reverse=True)
        result = [item for _, item in scored[:limit]]

        logger.debug(f"Related for {exclude_slug!r}: {len(scored)} candidates, returning {len(result)}")
        return result
