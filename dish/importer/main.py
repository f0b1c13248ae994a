"""CLI entry point for one-off DHIS2 uploads.

Usage:
    python -m dish.importer.main --url https://dhis.example.org/api/metadata \
        --file data/metadata.json --output-file data/response.json

    # CSV is converted to a list of records and posted as JSON
    python -m dish.importer.main --url https://dhis.example.org/api/dataValueSets \
        --file data/values.csv --payload-file data/payload.json

    # Anything else is uploaded as-is with the given Content-Type
    python -m dish.importer.main --url https://dhis.example.org/api/dataValueSets \
        --file data/values.xml --content-type application/xml
"""

from __future__ import annotations

import logging
import sys

from ..common.config import ConfigNotFoundError, load_config
from ..common.logging import setup_logging
from .args import build_parser, parse_args
from .client import DhisClient
from .converter import convert_csv_to_json, get_json_from_file

logger = logging.getLogger("dish.importer.main")

JSON_CONTENT_TYPE = "application/json"


def main(argv: list[str] | None = None) -> int:
    setup_logging(module_name="dish")
    args = parse_args(argv)

    if not args.is_arg("url") or not args.is_arg("file"):
        build_parser().error("Both --url and --file are required")

    try:
        config = load_config()
    except ConfigNotFoundError as exc:
        logger.error("%s", exc)
        return 2

    content_type = args.content_type or ""

    with DhisClient(config, args) as client:
        if args.file.lower().endswith(".csv"):
            result = convert_csv_to_json(
                lambda records: client.post_json(args.url, records), args
            )
        elif content_type == JSON_CONTENT_TYPE or args.file.lower().endswith(".json"):
            result = client.post_json(args.url, get_json_from_file(args.file))
        else:
            result = client.post_file(
                args.url, args.file, content_type or "application/octet-stream"
            )

    logger.info("=== Import finished: %s ===", result.outcome.value)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
