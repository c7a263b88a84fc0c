"""Characters with special meaning inside a numeric string.

The decimal point and grouping character are fixed: locale-specific
separators are not supported.
"""

# Cosmetic digit separator, skipped wherever it occurs
THOUSANDS_SEPARATOR = ","

# Separates the integer and fractional parts; a second one is invalid content
DECIMAL_PT = "."

# Leading sign characters (at most one is stripped)
MINUS_SIGN = "-"
PLUS_SIGN = "+"

# Sign values, ordered so that negative < non-negative
NEGATIVE = -1
NON_NEGATIVE = 1
