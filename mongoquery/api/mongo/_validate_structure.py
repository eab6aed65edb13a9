"""Validate a bootstrap structure."""

from typing import Any

from pydantic import ValidationError

from .CollectionStructure import CollectionStructure


def _validate_structure(structure: Any, msg: str) -> list[CollectionStructure]:
    """Validate raw collection definitions.

    Args:
        structure: List of collection definitions (dicts or CollectionStructure)
        msg: Operation prefix for error messages (e.g., "Mongo.bootstrap")

    Returns:
        Validated collection structures

    Raises:
        ValueError: If a definition is invalid or index names repeat within a collection
    """
    if not isinstance(structure, (list, tuple)):
        raise ValueError(f"{msg}: Structure should be a list")

    validated: list[CollectionStructure] = []
    for struct in structure:
        try:
            validated_struct = CollectionStructure.model_validate(struct)
        except ValidationError as e:
            raise ValueError(f"{msg}: All collection objects need to be valid") from e

        if validated_struct.idx:
            names = {idx.name for idx in validated_struct.idx}
            if len(names) != len(validated_struct.idx):
                raise ValueError(f"{msg}: Ensure all indexes have a unique name")

        validated.append(validated_struct)
    return validated
