"""
------------------------------------------------------------------------------
Project:        WikiFlux
File:           tests/unit/test_related.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Unit tests for tag-overlap ranking of related content.
------------------------------------------------------------------------------
"""

from unittest.mock import MagicMock

import pytest

from core.content_store import ContentStore
from core.related import MAX_RELATED, RelatedContentRanker, tag_overlap


@pytest.fixture
def ranker(content_dir):
    return RelatedContentRanker(ContentStore(base_path=content_dir))


def slugs(items):
    return [item.slug for item in items]


def test_empty_tags_short_circuit():
    """No tags means no related content; the store is never consulted."""
    store = MagicMock(spec=ContentStore)
    ranker = RelatedContentRanker(store)

    assert ranker.find_related([], "any") == []
    assert ranker.find_related(None, "any") == []
    store.list_all.assert_not_called()


def test_ranked_by_overlap(ranker, write_item):
    write_item("p", title="P", tags=["a", "b", "c"])
    write_item("q", title="Q", tags=["a"])
    write_item("r", title="R", tags=["b", "c"])

    assert slugs(ranker.find_related(["a", "b", "c"], "")) == ["p", "r", "q"]


def test_excluded_slug_is_dropped_even_if_matching(ranker, write_item):
    write_item("x", title="X", tags=["a", "b"])
    write_item("y", title="Y", tags=["a"])

    assert slugs(ranker.find_related(["a", "b"], "x")) == ["y"]


def test_items_without_shared_tags_are_dropped(ranker, write_item):
    write_item("match", title="Match", tags=["a"])
    write_item("other", title="Other", tags=["z"])
    write_item("untagged", title="Untagged")

    assert slugs(ranker.find_related(["a"], "")) == ["match"]


def test_ties_keep_enumeration_order(ranker, write_item):
    for slug in ["delta", "alpha", "charlie", "bravo"]:
        write_item(slug, title=slug, tags=["shared"])
    write_item("best", title="Best", tags=["shared", "extra"])

    result = slugs(ranker.find_related(["shared", "extra"], ""))
    assert result == ["best", "alpha", "bravo", "charlie", "delta"]


def test_result_is_capped(ranker, write_item):
    for i in range(25):
        write_item(f"item-{i:02d}", title=f"Item {i}", tags=["common"])

    assert len(ranker.find_related(["common"], "")) == MAX_RELATED
    assert len(ranker.find_related(["common"], "", limit=50)) == MAX_RELATED
    assert len(ranker.find_related(["common"], "", limit=3)) == 3


def test_duplicate_query_tags_count_once(ranker, write_item):
    write_item("one", title="One", tags=["a"])
    write_item("two", title="Two", tags=["a", "b"])

    assert slugs(ranker.find_related(["a", "a", "a", "b"], "")) == ["two", "one"]


def test_tag_overlap():
    assert tag_overlap(["a", "b", "c"], {"b", "c", "d"}) == 2
    assert tag_overlap([], {"a"}) == 0
    assert tag_overlap(["a", "a"], ["a"]) == 1
