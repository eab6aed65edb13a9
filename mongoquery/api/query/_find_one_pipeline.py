"""Translate find_one arguments into an aggregation pipeline."""

from typing import Any


def _find_one_pipeline(query: Any = None, projection: Any = None) -> list[dict[str, Any]]:
    """Build ``[$match?, $limit 1, $project?]``.

    Empty or missing query/projection stages are omitted.
    """
    pipeline: list[dict[str, Any]] = []
    if query:
        pipeline.append({"$match": query})
    pipeline.append({"$limit": 1})
    if projection:
        pipeline.append({"$project": projection})
    return pipeline
