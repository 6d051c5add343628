"""OpenSearch backend."""

from __future__ import annotations

from typing import Any

from opensearchpy import OpenSearch, helpers
from opensearchpy.exceptions import ConnectionError, TransportError

from .base import register
from .config import IndexerConfig
from .search import SearchEngineIndexer


@register("opensearch")
class OpenSearchIndexer(SearchEngineIndexer):
    client_class = OpenSearch
    helpers = helpers
    label = "OpenSearch"
    url_env_var = "OPENSEARCH_URL"
    # ConnectionError subclasses TransportError, so it must come first.
    transport_errors = (ConnectionError,)
    status_errors = (TransportError,)

    def client_options(self, config: IndexerConfig) -> dict[str, Any]:
        options = super().client_options(config)
        options["timeout"] = config.request_timeout
        return options
