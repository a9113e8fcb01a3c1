from .chart import DonutSlice, donut_slices
from .derivation import base_fields, calculate_computed_fields, derive_fields
from .metrics import compute_results
from .result import ResultRecord, ValueBreakdown, ValueCategoryResult, ValueInsights
from .value import compute_value_breakdown

__all__ = [
    "DonutSlice",
    "ResultRecord",
    "ValueBreakdown",
    "ValueCategoryResult",
    "ValueInsights",
    "base_fields",
    "calculate_computed_fields",
    "compute_results",
    "compute_value_breakdown",
    "derive_fields",
    "donut_slices",
]
