"""Local file output and console rendering for import results."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from .models import FileWriteResult

logger = logging.getLogger(__name__)

COMPACT_SEPARATORS = (",", ":")


def write_json_file(
    path: str | Path,
    data: Any,
    indent: Optional[int] = None,
) -> FileWriteResult:
    """Serialize ``data`` to ``path``, compact unless ``indent`` is given.

    Write failures are returned rather than raised so that a broken debug
    output path never aborts an import.
    """
    try:
        Path(path).write_text(
            json.dumps(
                data,
                ensure_ascii=False,
                indent=indent,
                separators=COMPACT_SEPARATORS if indent is None else None,
            ),
            encoding="utf-8",
        )
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("Could not write %s: %s", path, exc)
        return FileWriteResult(path=str(path), error=str(exc))
    return FileWriteResult(path=str(path))


def render_response(data: Any) -> str:
    """Render a parsed JSON response as human-readable YAML-style text."""
    if data is None:
        return ""
    return yaml.safe_dump(
        data,
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
    ).rstrip("\n")
