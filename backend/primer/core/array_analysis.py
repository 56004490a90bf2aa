"""Array Analysis: average, min, max and length of a numeric sequence.

Invariants:
    - Only list and tuple are accepted; str, bytes, dict, set and iterators raise InvalidArgumentError
    - Empty input returns average/min/max as None and length 0
    - Input sequence is never mutated
    - Integer elements beyond float range raise InvalidArgumentError instead of
      overflowing in the average
    - Returns a flat dict with exactly the keys average, min, max, length

Design Decisions:
    - Pure function returning a dict, same shape as the JSON response (no extra model)
    - Elements assumed numeric; mixed-type behavior is left to the built-ins
"""

from collections.abc import Sequence

from primer.core.calculator import fits_float
from primer.core.errors import InvalidArgumentError

_EMPTY_ANALYSIS = {"average": None, "min": None, "max": None, "length": 0}


def analyze_array(values: Sequence[int | float]) -> dict:
    """Compute summary statistics for values. Pure, no IO."""
    if not isinstance(values, (list, tuple)):
        raise InvalidArgumentError(
            "analyze_array expects a list", "values", operation="analyze_array",
        )
    if not values:
        return dict(_EMPTY_ANALYSIS)
    if any(isinstance(v, int) and not fits_float(v) for v in values):
        raise InvalidArgumentError(
            "analyze_array element is too large for a float",
            "values", operation="analyze_array",
        )

    length = len(values)
    return {
        "average": sum(values) / length,
        "min": min(values),
        "max": max(values),
        "length": length,
    }
