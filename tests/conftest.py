from __future__ import annotations

import os
from typing import Any

import pytest

from search_indexers.config import IndexerConfig
from search_indexers.search import SearchEngineIndexer

from fakes import DummyClient, DummyStatusError, DummyTransportError, FakeHelpers


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: tests that require a running Elasticsearch/OpenSearch cluster",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if os.getenv("SEARCH_INDEXERS_RUN_INTEGRATION") == "1":
        return

    skip_integration = pytest.mark.skip(
        reason="Set SEARCH_INDEXERS_RUN_INTEGRATION=1 to run integration tests"
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def make_client_class():
    def factory(**attrs: Any) -> type:
        return type("Client", (DummyClient,), attrs)

    return factory


@pytest.fixture
def make_indexer(make_client_class):
    """Build a SearchEngineIndexer bound to dummy client and helpers."""

    def factory(helpers=None, health_error=None, create_error=None, existing=(), **overrides):
        client_cls = make_client_class(
            health_error=health_error,
            create_error=create_error,
            existing=existing,
        )
        indexer_cls = type(
            "DummyIndexer",
            (SearchEngineIndexer,),
            {
                "client_class": client_cls,
                "helpers": helpers or FakeHelpers(),
                "label": "Test",
                "url_env_var": "TEST_SEARCH_URL",
                "transport_errors": (DummyTransportError,),
                "status_errors": (DummyStatusError,),
            },
        )
        settings = {
            "type": "dummy",
            "servers": ["http://search.local:9200"],
            "index": "My-Index",
        }
        settings.update(overrides)
        return indexer_cls(IndexerConfig(**settings))

    return factory
