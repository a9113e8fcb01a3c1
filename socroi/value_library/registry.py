from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

# Global registry -- maps category_id -> ValueCategoryDefinition
_REGISTRY: dict[str, ValueCategoryDefinition] = {}


@dataclass(frozen=True)
class ValueCategoryDefinition:
    """A value category beyond direct cost savings."""

    id: str
    label: str
    description: str
    formula_fn: Callable[..., float]


def register_value_category(
    category_id: str,
    label: str,
    description: str,
) -> Callable:
    """Decorator to register a formula function as a value category."""

    def decorator(fn: Callable[..., float]) -> Callable[..., float]:
        _REGISTRY[category_id] = ValueCategoryDefinition(
            id=category_id,
            label=label,
            description=description,
            formula_fn=fn,
        )
        return fn

    return decorator


def get_value_category(category_id: str) -> Optional[ValueCategoryDefinition]:
    """Look up a value category definition by ID."""
    return _REGISTRY.get(category_id)


def get_all_value_categories() -> dict[str, ValueCategoryDefinition]:
    """Return the full registry (read-only copy)."""
    return dict(_REGISTRY)
