"""Build a stable identifier for a Mongo wrapper."""

import hashlib
import json


def _build_uid(uri: str, db: str) -> str:
    digest = hashlib.sha256(json.dumps({"uri": uri, "db": db}, sort_keys=True).encode("utf-8")).hexdigest()
    return f"mongodb:{digest[:16]}"
