"""Adapter: Qdrant-backed ItemStorePort implementing ItemStorePort."""

from __future__ import annotations

import uuid

from qdrant_client import QdrantClient
from qdrant_client.models import (
    Distance,
    FieldCondition,
    Filter,
    MatchAny,
    MatchText,
    PointStruct,
    VectorParams,
)

from ..config.runtime import RuntimeSettings
from ..domain.predicates import And, Or, Overlaps
from ..ports.item_store import ItemPage, ItemRecord


class QdrantItemStore:
    """Concrete ItemStorePort backed by Qdrant payload filtering."""

    # Items carry no embedding; every point gets this placeholder vector.
    _PLACEHOLDER_VECTOR = [0.0]

    def __init__(self, settings: RuntimeSettings, client: QdrantClient | None = None) -> None:
        self._settings = settings
        self._client = client

    @property
    def _collection(self) -> str:
        return self._settings.qdrant_collection_name

    def _get_client(self) -> QdrantClient:
        if self._client is None:
            self._client = QdrantClient(
                host=self._settings.qdrant_host,
                port=self._settings.qdrant_port,
                timeout=self._settings.request_timeout_seconds,
            )
        return self._client

    def _point_id(self, item_id: int | str) -> int | str:
        if isinstance(item_id, int) and item_id >= 0:
            return item_id
        return str(uuid.uuid5(self._settings.item_id_namespace, str(item_id)))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find(
        self,
        predicate: Overlaps | And | Or | None,
        title: str | None,
        offset: int,
        limit: int,
    ) -> ItemPage:
        client = self._get_client()
        qf = self.build_query_filter(predicate, title)

        total = client.count(
            collection_name=self._collection,
            count_filter=qf,
            exact=True,
        ).count
        response = client.query_points(
            collection_name=self._collection,
            query_filter=qf,
            offset=offset,
            limit=limit,
            with_payload=True,
        )
        return ItemPage(
            total=total,
            items=[self._to_record(point.payload or {}) for point in response.points],
        )

    def _to_record(self, payload: dict) -> ItemRecord:
        return ItemRecord(
            item_id=payload.get("item_id", ""),
            title=payload.get(self._settings.title_field, ""),
            tag_ids=payload.get(self._settings.tag_field, []),
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def ensure_collection(self) -> dict:
        client = self._get_client()
        collections = [c.name for c in client.get_collections().collections]
        created = False
        if self._collection not in collections:
            client.create_collection(
                collection_name=self._collection,
                vectors_config=VectorParams(size=len(self._PLACEHOLDER_VECTOR), distance=Distance.COSINE),
            )
            created = True
        return {"name": self._collection, "created": created}

    def delete_collection(self) -> None:
        self._get_client().delete_collection(self._collection)

    def upsert_items(self, items: list[ItemRecord]) -> int:
        points = [
            PointStruct(
                id=self._point_id(item.item_id),
                vector=list(self._PLACEHOLDER_VECTOR),
                payload={
                    "item_id": item.item_id,
                    self._settings.title_field: item.title,
                    self._settings.tag_field: list(item.tag_ids),
                },
            )
            for item in items
        ]
        if points:
            self._get_client().upsert(collection_name=self._collection, points=points)
        return len(points)

    # ------------------------------------------------------------------
    # Filter translation: domain Predicate -> Qdrant Filter
    # ------------------------------------------------------------------

    def build_query_filter(
        self,
        predicate: Overlaps | And | Or | None,
        title: str | None,
    ) -> Filter | None:
        must: list[Filter | FieldCondition] = []
        if predicate is not None:
            must.append(self.translate_predicate(predicate))
        if title:
            # Without a full-text index Qdrant treats MatchText as a substring match.
            must.append(FieldCondition(key=self._settings.title_field, match=MatchText(text=title)))
        return Filter(must=must) if must else None

    def translate_predicate(self, predicate: Overlaps | And | Or) -> Filter:
        if isinstance(predicate, Overlaps):
            return self._translate_overlaps(predicate)
        elif isinstance(predicate, And):
            return Filter(must=[self.translate_predicate(c) for c in predicate.children])
        elif isinstance(predicate, Or):
            return Filter(should=[self.translate_predicate(c) for c in predicate.children])
        else:
            raise ValueError(f"Unsupported predicate node: {predicate!r}")

    def _translate_overlaps(self, leaf: Overlaps) -> Filter:
        if not leaf.ids:
            # Overlap with no ids is always false.
            if leaf.must_overlap:
                return self._never()
            return Filter()
        condition = FieldCondition(key=self._settings.tag_field, match=MatchAny(any=sorted(leaf.ids)))
        if leaf.must_overlap:
            return Filter(must=[condition])
        return Filter(must_not=[condition])

    @staticmethod
    def _never() -> Filter:
        # Contradiction: no point satisfies it.
        marker = FieldCondition(key="__never__", match=MatchAny(any=[0]))
        return Filter(must=[marker], must_not=[marker])
