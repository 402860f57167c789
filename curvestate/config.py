"""Package-level defaults."""

# Day count used to turn grid dates into rate times and accrual fractions
DEFAULT_DAY_COUNT = "ACT/365F"

# Increases in consecutive discount ratios above this are logged as warnings
DISCOUNT_RATIO_INCREASE_TOLERANCE = 1e-6

# Value placed in result slots before the first valid index
UNSET_VALUE = float("nan")
