"""Shared snapshot lookup helpers for application use cases."""

from collections.abc import Iterable
from typing import TypeVar

from src.domain.errors import NotFoundError

T = TypeVar("T")


def find_by_id(items: Iterable[T], entity_id: str, kind: str) -> T:
    """Return the item whose ``id`` matches.

    Args:
        items: Snapshot collection to search.
        entity_id: Identifier to look for.
        kind: Entity label used in the error message.

    Returns:
        T: Matching item.

    Raises:
        NotFoundError: If no item has the identifier.
    """
    for item in items:
        if item.id == entity_id:
            return item
    raise NotFoundError(f"{kind} not found: {entity_id}")


__all__ = ["find_by_id"]
