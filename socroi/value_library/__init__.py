from . import formulas  # noqa: F401
from .registry import (
    ValueCategoryDefinition,
    get_all_value_categories,
    get_value_category,
    register_value_category,
)

__all__ = [
    "ValueCategoryDefinition",
    "get_all_value_categories",
    "get_value_category",
    "register_value_category",
]
