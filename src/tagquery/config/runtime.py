"""Pydantic-based runtime settings for the tag search service.

Loads from environment variables (with optional .env file).
Invalid values fail fast when settings are first loaded.
"""

from __future__ import annotations

import uuid
from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class StoreBackend(str, Enum):
    qdrant = "qdrant"
    memory = "memory"


class RuntimeSettings(BaseSettings):
    """All configuration for the tag search runtime, validated at startup."""

    model_config = {"env_prefix": "", "env_file": ".env", "env_file_encoding": "utf-8"}

    # --- Store ---
    store_backend: StoreBackend = Field(
        default=StoreBackend.qdrant,
        description="Which item store executes compiled predicates: 'qdrant' or 'memory'",
    )

    # --- Qdrant ---
    qdrant_host: str = Field(default="localhost", description="Qdrant server host")
    qdrant_port: int = Field(default=6333, description="Qdrant server port")
    qdrant_collection_name: str = Field(default="items", description="Qdrant collection name")

    # --- Memory store ---
    memory_items_file: str | None = Field(
        default=None,
        description="JSON file of items preloaded into the memory store",
    )

    # --- Payload fields ---
    tag_field: str = Field(default="tags_ids", description="Payload field holding the item's tag ids")
    title_field: str = Field(default="title", description="Payload field holding the item's title")

    # --- ID namespace ---
    item_id_namespace: uuid.UUID = Field(
        default=uuid.UUID("5f1c9a52-7a4e-4c1b-9a57-2f3d8e6b0c11"),
        description="UUID namespace for non-integer item ids",
    )

    # --- Limits ---
    default_page_size: int = Field(default=10, ge=1, description="Page size when the request omits one")
    max_page_size: int = Field(default=100, ge=1, le=1000, description="Largest page size served")
    request_timeout_seconds: float = Field(default=30.0, gt=0, description="Per-request timeout")

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Root log level for CLI and MCP entrypoints")

    @field_validator("qdrant_port")
    @classmethod
    def _port_range(cls, v: int) -> int:
        if not (1 <= v <= 65535):
            raise ValueError(f"qdrant_port must be 1-65535, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
