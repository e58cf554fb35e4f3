"""Lookup table of blur filters by id."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .base import BaseFilter

filter_registry: dict[str, type[BaseFilter]] = {}


def register_filter(filter_id: str) -> Callable[[type[BaseFilter]], type[BaseFilter]]:
    """Class decorator storing a filter under ``filter_id``."""

    def decorator(cls: type[BaseFilter]) -> type[BaseFilter]:
        if filter_id in filter_registry:
            raise ValueError(f"Filter id already registered: {filter_id}")
        cls.filter_type = filter_id
        filter_registry[filter_id] = cls
        return cls

    return decorator


def get_filter_class(filter_id: str) -> type[BaseFilter]:
    """Return the filter class registered under ``filter_id``."""
    try:
        return filter_registry[filter_id]
    except KeyError:
        raise ValueError(f"Unknown filter type: {filter_id}") from None
