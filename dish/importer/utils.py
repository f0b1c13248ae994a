"""Validation and formatting helpers shared by importer commands."""

from __future__ import annotations

import re
from collections import Counter
from typing import Union

from .models import CountEntry

UID_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9]{10}")


def is_uid(value: str | None) -> bool:
    """Indicate whether the given string is a valid DHIS2 UID.

    A UID is one ASCII letter followed by ten ASCII letters or digits.
    """
    if not isinstance(value, str) or not value:
        return False
    return UID_PATTERN.fullmatch(value) is not None


def is_2xx(code: Union[int, str]) -> bool:
    """Indicate whether the HTTP status code is in the 200 series."""
    return int(code) // 100 == 2


def set_query_param(url: str, param: str, val: object) -> str:
    """Append ``param=val`` to the URL.

    Values are not escaped; callers must pre-encode them.
    """
    sep = "&" if "?" in url else "?"
    return f"{url}{sep}{param}={val}"


class CountMap:
    """Counts occurrences per key.

    Usage:
        counts = CountMap()
        counts.increment("dataElement")
        for entry in counts.entries():
            print(entry.key, entry.val)
    """

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()

    def increment(self, key: str) -> None:
        self._counts[key] += 1

    def entries(self) -> list[CountEntry]:
        """Return all entries. Callers must not rely on the order."""
        return [CountEntry(key=k, val=v) for k, v in self._counts.items()]

    def __getitem__(self, key: str) -> int:
        return self._counts[key]

    def __contains__(self, key: object) -> bool:
        return key in self._counts

    def __len__(self) -> int:
        return len(self._counts)
