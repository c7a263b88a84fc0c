"""Numeric comparison of strings of arbitrary length."""

from numstrcmp.compare import contains_invalid_chars, is_valid_numeric_str, numeric_str_cmp
from numstrcmp.numeric_str import N, NumericStr
from numstrcmp.ordering import Ordering
from numstrcmp.sorting import max_numeric, min_numeric, numeric_sort_key, sort_numeric

__version__ = "0.1.0"
__all__ = [
    "numeric_str_cmp",
    "contains_invalid_chars",
    "is_valid_numeric_str",
    "Ordering",
    "NumericStr",
    "N",
    "numeric_sort_key",
    "sort_numeric",
    "max_numeric",
    "min_numeric",
    "__version__",
]
