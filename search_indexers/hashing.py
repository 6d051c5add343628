"""Document encoding and content hashing."""

from __future__ import annotations

import dataclasses
import hashlib
import json
from typing import Any

from .errors import IndexerError


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json")
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode_document(document: Any) -> bytes:
    """Return the compact, key-sorted UTF-8 JSON encoding of *document*.

    Raises:
        IndexerError: The document cannot be represented as JSON.
    """
    try:
        text = json.dumps(
            document,
            default=_default,
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise IndexerError(f"Cannot encode document {document!r}: {exc}") from exc
    return text.encode("utf-8")


def document_id(body: bytes) -> str:
    """SHA-256 hex digest of an encoded document."""
    return hashlib.sha256(body).hexdigest()
