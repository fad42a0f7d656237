"""Internal utilities for isoperiod.

This module contains private implementation details:
    - Fixed-point scale constants
    - Component validation and fixed-point conversion
    - Exact decimal rendering helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from isoperiod._internal.numeric import (
    from_thousandths,
    multiply_decimal,
    render_number,
    render_thousandths,
)
from isoperiod._internal.validation import (
    to_decimal,
    to_fixed_point,
    validate_field,
    validate_sign_consistency,
)

__all__: list[str] = [
    "from_thousandths",
    "multiply_decimal",
    "render_number",
    "render_thousandths",
    "to_decimal",
    "to_fixed_point",
    "validate_field",
    "validate_sign_consistency",
]
