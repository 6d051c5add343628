"""Elasticsearch backend."""

from __future__ import annotations

from typing import Any

from elasticsearch import ApiError, Elasticsearch, TransportError, helpers

from .base import register
from .config import IndexerConfig
from .search import SearchEngineIndexer


@register("elastic")
class ElasticIndexer(SearchEngineIndexer):
    client_class = Elasticsearch
    helpers = helpers
    label = "ES"
    url_env_var = "ELASTICSEARCH_URL"
    transport_errors = (TransportError,)
    status_errors = (ApiError,)

    def client_options(self, config: IndexerConfig) -> dict[str, Any]:
        options = super().client_options(config)
        options["request_timeout"] = config.request_timeout
        return options
