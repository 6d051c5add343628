"""Pluggable document indexers for Elasticsearch, OpenSearch and local files."""

from .base import INDEXERS, Indexer, new_indexer, register
from .config import IndexerConfig, IndexingOpts, load_config
from .elastic import ElasticIndexer
from .errors import IndexerError
from .hashing import document_id, encode_document
from .local import LocalIndexer
from .opensearch import OpenSearchIndexer
from .search import SearchEngineIndexer

__all__ = [
    # config
    "IndexerConfig",
    "IndexingOpts",
    "load_config",
    # registry
    "INDEXERS",
    "Indexer",
    "new_indexer",
    "register",
    # backends
    "SearchEngineIndexer",
    "ElasticIndexer",
    "OpenSearchIndexer",
    "LocalIndexer",
    # hashing
    "encode_document",
    "document_id",
    # errors
    "IndexerError",
]
