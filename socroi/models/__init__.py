from .enums import InputField, ViewMode
from .inputs import (
    BASE_FIELDS,
    DEFAULT_INPUTS,
    DERIVED_FIELDS,
    InputRecord,
    field_alias,
    resolve_field,
)

__all__ = [
    "BASE_FIELDS",
    "DEFAULT_INPUTS",
    "DERIVED_FIELDS",
    "InputField",
    "InputRecord",
    "ViewMode",
    "field_alias",
    "resolve_field",
]
