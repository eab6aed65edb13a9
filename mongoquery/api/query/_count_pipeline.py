"""Translate a count filter pipeline."""

from typing import Any


def _count_pipeline(stages: list[Any]) -> list[Any]:
    """Append a terminal ``$count`` stage producing ``[{"count": n}]`` (or ``[]``)."""
    return [*stages, {"$count": "count"}]
