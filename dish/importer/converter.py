"""CSV and JSON file readers for importer commands."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, TypeVar

import pandas as pd

from .args import ImportArgs, get_args

logger = logging.getLogger(__name__)

T = TypeVar("T")


def convert_csv_to_json(
    callback: Callable[[list[dict[str, str]]], T],
    args: ImportArgs | None = None,
) -> T:
    """Read the CSV file named by the ``file`` argument and hand it to ``callback``.

    Every cell is kept as a string and empty cells stay as ``""``. Each
    record maps the column header to the cell value. An empty file gives
    an empty list.

    Args:
        callback: Invoked once with the list of records.
        args: Parsed arguments. Defaults to the process arguments.

    Returns:
        Whatever ``callback`` returns.

    Raises:
        ValueError: If no ``file`` argument was supplied.
        OSError: If the file cannot be read.
    """
    args = args or get_args()
    if not args.is_arg("file"):
        raise ValueError("No CSV file given, use --file")

    try:
        df = pd.read_csv(args.file, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        records = []
    else:
        records = df.to_dict(orient="records")
    logger.debug("Parsed %d records from %s", len(records), args.file)
    return callback(records)


def get_json_from_file(path: str | Path) -> Any:
    """Read a UTF-8 JSON file and return its parsed content."""
    return json.loads(Path(path).read_text(encoding="utf-8"))
