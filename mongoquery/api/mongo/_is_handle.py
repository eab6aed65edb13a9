"""Shape check for driver handles."""

from typing import Any


def _is_handle(obj: Any, *methods: str) -> bool:
    """Check that ``obj`` exposes every named method as a callable."""
    if obj is None or isinstance(obj, (bool, int, float, str, bytes)):
        return False
    return all(callable(getattr(obj, method, None)) for method in methods)
