"""QdrantItemStore filter translation and paging, against a fake client.

No Qdrant server required.
"""

from types import SimpleNamespace

import pytest
from qdrant_client.models import FieldCondition, Filter, MatchAny, MatchText

from tagquery.adapters.qdrant_item_store import QdrantItemStore
from tagquery.config.runtime import RuntimeSettings
from tagquery.domain.compiler import compile_criteria
from tagquery.domain.predicates import Overlaps
from tagquery.ports.item_store import ItemRecord


class FakeQdrantClient:
    """Records calls; returns canned points."""

    def __init__(self, payloads=None, total=None, collections=()):
        self.payloads = payloads or []
        self.total = total if total is not None else len(self.payloads)
        self.collections = list(collections)
        self.calls = []

    def count(self, collection_name, count_filter, exact):
        self.calls.append(("count", collection_name, count_filter, exact))
        return SimpleNamespace(count=self.total)

    def query_points(self, collection_name, query_filter, offset, limit, with_payload):
        self.calls.append(("query_points", collection_name, query_filter, offset, limit))
        points = [SimpleNamespace(payload=p) for p in self.payloads[offset : offset + limit]]
        return SimpleNamespace(points=points)

    def get_collections(self):
        return SimpleNamespace(collections=[SimpleNamespace(name=n) for n in self.collections])

    def create_collection(self, collection_name, vectors_config):
        self.calls.append(("create_collection", collection_name))
        self.collections.append(collection_name)

    def upsert(self, collection_name, points):
        self.calls.append(("upsert", collection_name, points))


def _store(client=None, **settings_kwargs) -> QdrantItemStore:
    settings = RuntimeSettings(_env_file=None, **settings_kwargs)
    return QdrantItemStore(settings, client=client or FakeQdrantClient())


def _tags(ids):
    return FieldCondition(key="tags_ids", match=MatchAny(any=ids))


class TestTranslateOverlaps:
    def test_required_overlap_is_must_match_any(self):
        qf = _store().translate_predicate(Overlaps(ids={7, 3}, must_overlap=True))
        assert qf == Filter(must=[_tags([3, 7])])

    def test_forbidden_overlap_is_must_not_match_any(self):
        qf = _store().translate_predicate(Overlaps(ids={7}, must_overlap=False))
        assert qf == Filter(must_not=[_tags([7])])

    def test_empty_forbidden_overlap_matches_everything(self):
        qf = _store().translate_predicate(Overlaps(ids=set(), must_overlap=False))
        assert qf == Filter()

    def test_empty_required_overlap_matches_nothing(self):
        qf = _store().translate_predicate(Overlaps(ids=set(), must_overlap=True))
        assert qf.must and qf.must_not
        assert qf.must == qf.must_not

    def test_custom_tag_field(self):
        qf = _store(tag_field="labels").translate_predicate(Overlaps(ids={1}, must_overlap=True))
        assert qf.must[0].key == "labels"


class TestTranslateTree:
    def test_and_becomes_must_or_becomes_should(self):
        qf = _store().translate_predicate(compile_criteria([5, [3, -7]]))
        assert qf == Filter(
            must=[
                Filter(must=[_tags([5])]),
                Filter(should=[Filter(must=[_tags([3])]), Filter(must_not=[_tags([7])])]),
            ]
        )

    def test_unknown_node_rejected(self):
        with pytest.raises(ValueError):
            _store().translate_predicate("bogus")


class TestBuildQueryFilter:
    def test_no_predicate_no_title_is_none(self):
        assert _store().build_query_filter(None, None) is None

    def test_title_only(self):
        qf = _store().build_query_filter(None, "graph")
        assert qf == Filter(must=[FieldCondition(key="title", match=MatchText(text="graph"))])

    def test_predicate_and_title(self):
        qf = _store().build_query_filter(compile_criteria([5]), "graph")
        assert len(qf.must) == 2
        assert qf.must[1].match == MatchText(text="graph")


class TestFind:
    def test_find_counts_and_pages(self):
        payloads = [
            {"item_id": i, "title": f"Item {i}", "tags_ids": [i]} for i in range(1, 6)
        ]
        client = FakeQdrantClient(payloads=payloads)
        page = _store(client).find(compile_criteria([1]), None, offset=2, limit=2)
        assert page.total == 5
        assert page.items == [
            ItemRecord(item_id=3, title="Item 3", tag_ids=[3]),
            ItemRecord(item_id=4, title="Item 4", tag_ids=[4]),
        ]
        count_call, query_call = client.calls
        assert count_call[0] == "count" and count_call[3] is True
        assert query_call[3:] == (2, 2)
        assert count_call[2] == query_call[2]


class TestMutations:
    def test_ensure_collection_creates_once(self):
        client = FakeQdrantClient()
        store = _store(client)
        assert store.ensure_collection() == {"name": "items", "created": True}
        assert store.ensure_collection() == {"name": "items", "created": False}

    def test_upsert_items_payload(self):
        client = FakeQdrantClient()
        count = _store(client).upsert_items([ItemRecord(item_id=3, title="x", tag_ids=[1, 0, 2])])
        assert count == 1
        _, _, points = client.calls[0]
        assert points[0].id == 3
        assert points[0].payload == {"item_id": 3, "title": "x", "tags_ids": [1, 0, 2]}

    def test_string_ids_map_to_stable_uuids(self):
        client = FakeQdrantClient()
        store = _store(client)
        store.upsert_items([ItemRecord(item_id="ex-1", tag_ids=[])])
        store.upsert_items([ItemRecord(item_id="ex-1", tag_ids=[1])])
        first, second = client.calls[0][2][0].id, client.calls[1][2][0].id
        assert first == second
        assert isinstance(first, str)

    def test_upsert_empty_skips_client(self):
        client = FakeQdrantClient()
        assert _store(client).upsert_items([]) == 0
        assert client.calls == []
