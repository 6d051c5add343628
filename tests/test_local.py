from __future__ import annotations

import json

import pytest

from search_indexers import IndexerConfig, IndexerError, IndexingOpts, new_indexer
from search_indexers.local import LocalIndexer


def test_creates_directory(tmp_path):
    target = tmp_path / "nested" / "metrics"
    indexer = new_indexer(IndexerConfig(type="local", metrics_directory=str(target)))
    assert isinstance(indexer, LocalIndexer)
    assert target.is_dir()


def test_missing_directory_name():
    with pytest.raises(IndexerError, match="^directory name not specified$"):
        LocalIndexer(IndexerConfig(type="local", metrics_directory=""))


def test_writes_documents_as_json_array(tmp_path):
    indexer = LocalIndexer(IndexerConfig(type="local", metrics_directory=str(tmp_path)))
    documents = [{"uuid": "abc", "value": 1.5}, {"uuid": "abc", "value": 1.5}, "note"]

    summary = indexer.index(documents, IndexingOpts(metric_name="podLatency"))

    path = tmp_path / "podLatency.json"
    assert summary == f"File {path} created with 3 documents"
    assert json.loads(path.read_text(encoding="utf-8")) == documents


def test_metric_name_required(tmp_path):
    indexer = LocalIndexer(IndexerConfig(type="local", metrics_directory=str(tmp_path)))
    with pytest.raises(IndexerError, match="^metric name not specified$"):
        indexer.index([{"a": 1}])


def test_unencodable_document(tmp_path):
    indexer = LocalIndexer(IndexerConfig(type="local", metrics_directory=str(tmp_path)))
    with pytest.raises(IndexerError, match="Cannot encode document"):
        indexer.index([object()], IndexingOpts(metric_name="bad"))
    assert not (tmp_path / "bad.json").exists()
