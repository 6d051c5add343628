"""Indexer configuration.

All settings can be overridden via environment variables or by passing
values directly to ``load_config``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def _parse_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class IndexerConfig:
    """Backend selection and connection settings for an indexer."""

    type: str = "elastic"
    servers: list[str] = field(default_factory=list)
    index: str = ""
    insecure_skip_verify: bool = False
    metrics_directory: str = "collected-metrics"
    request_timeout: int = 600
    flush_bytes: int = 5_000_000
    chunk_size: int = 500
    workers: Optional[int] = None

    @property
    def thread_count(self) -> int:
        """Number of bulk worker threads, one per CPU unless configured."""
        return self.workers or os.cpu_count() or 1


@dataclass
class IndexingOpts:
    """Per-call metadata passed along with a batch of documents."""

    metric_name: str = ""
    job_name: str = ""


def load_config(**overrides) -> IndexerConfig:
    """Build an IndexerConfig with env-var and keyword overrides.

    Resolution order (later wins):
      1. Dataclass defaults
      2. Environment variables (``INDEXER_TYPE``, etc.)
      3. Explicit keyword arguments

    Supported env vars:
      - INDEXER_TYPE  ("elastic", "opensearch" or "local")
      - INDEXER_SERVERS  (comma-separated URLs)
      - INDEXER_INDEX
      - INDEXER_INSECURE_SKIP_VERIFY  ("true"/"false")
      - INDEXER_METRICS_DIRECTORY
      - INDEXER_REQUEST_TIMEOUT
      - INDEXER_FLUSH_BYTES
      - INDEXER_CHUNK_SIZE
      - INDEXER_WORKERS
    """
    cfg = IndexerConfig()

    # Env-var layer
    indexer_type = os.getenv("INDEXER_TYPE")
    if indexer_type:
        cfg.type = indexer_type

    servers = os.getenv("INDEXER_SERVERS")
    if servers:
        cfg.servers = _parse_list(servers)

    index = os.getenv("INDEXER_INDEX")
    if index:
        cfg.index = index

    insecure = os.getenv("INDEXER_INSECURE_SKIP_VERIFY")
    if insecure is not None:
        cfg.insecure_skip_verify = _parse_bool(insecure)

    metrics_directory = os.getenv("INDEXER_METRICS_DIRECTORY")
    if metrics_directory:
        cfg.metrics_directory = metrics_directory

    request_timeout = os.getenv("INDEXER_REQUEST_TIMEOUT")
    if request_timeout:
        cfg.request_timeout = int(request_timeout)

    flush_bytes = os.getenv("INDEXER_FLUSH_BYTES")
    if flush_bytes:
        cfg.flush_bytes = int(flush_bytes)

    chunk_size = os.getenv("INDEXER_CHUNK_SIZE")
    if chunk_size:
        cfg.chunk_size = int(chunk_size)

    workers = os.getenv("INDEXER_WORKERS")
    if workers:
        cfg.workers = int(workers)

    # Explicit overrides layer
    for key, value in overrides.items():
        if hasattr(cfg, key):
            setattr(cfg, key, value)
        else:
            raise TypeError(f"Unknown config key: {key!r}")

    return cfg
