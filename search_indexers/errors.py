"""Exceptions raised by indexers."""


class IndexerError(Exception):
    """Indexer setup or indexing failed.

    Errors coming from the search-engine client are wrapped with their
    message kept as-is and the upstream exception chained.
    """
