"""CLI: Read JSON documents -> index them with the configured backend."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional, Sequence

from .base import new_indexer
from .config import IndexingOpts, load_config
from .errors import IndexerError

logger = logging.getLogger("search_indexers")


def read_documents(path: str) -> list[Any]:
    """Load documents from a JSON file, or stdin when *path* is ``-``."""
    if path == "-":
        data = json.load(sys.stdin)
    else:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    return data if isinstance(data, list) else [data]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="search-indexers",
        description="Index JSON documents into Elasticsearch, OpenSearch or local files",
    )
    parser.add_argument("input", help="JSON file with a document or a list of documents ('-' for stdin)")
    parser.add_argument("--type", choices=["elastic", "opensearch", "local"], default=None,
                        help="Indexer backend (INDEXER_TYPE)")
    parser.add_argument("--server", action="append", dest="servers", default=None,
                        help="Cluster URL, repeatable (INDEXER_SERVERS)")
    parser.add_argument("--index", default=None, help="Target index (INDEXER_INDEX)")
    parser.add_argument("--insecure", action="store_true", default=None,
                        help="Skip TLS certificate verification")
    parser.add_argument("--metrics-directory", default=None,
                        help="Output directory for the local backend")
    parser.add_argument("--metric-name", default="", help="Metric name (local backend file name)")
    parser.add_argument("--job-name", default="", help="Job name attached to the run")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides = {
        "type": args.type,
        "servers": args.servers,
        "index": args.index,
        "insecure_skip_verify": args.insecure,
        "metrics_directory": args.metrics_directory,
    }
    config = load_config(**{k: v for k, v in overrides.items() if v is not None})

    try:
        documents = read_documents(args.input)
    except (OSError, ValueError) as exc:
        logger.error("Cannot read documents from %s: %s", args.input, exc)
        return 1

    try:
        indexer = new_indexer(config)
        summary = indexer.index(
            documents,
            IndexingOpts(metric_name=args.metric_name, job_name=args.job_name),
        )
    except IndexerError as exc:
        logger.error("%s", exc)
        return 1

    print(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
