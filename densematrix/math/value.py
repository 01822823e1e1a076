"""
Tolerance-based comparison helpers.

Structural equality on Matrix is exact; these helpers back the separate,
explicitly named ``Matrix.is_close`` comparison.
"""

from __future__ import annotations


class ToleranceMode:
    """Modes for fuzzy comparison."""

    RELATIVE = "relative"  # |a - b| / max(|a|, |b|) <= tol
    ABSOLUTE = "absolute"  # |a - b| <= tol


def fuzzy_compare(a: float, b: float, tolerance: float, mode: str = ToleranceMode.RELATIVE) -> bool:
    """
    Compare two floats with tolerance.

    Args:
        a: First value
        b: Second value
        tolerance: Tolerance value
        mode: Comparison mode (relative, absolute)

    Returns:
        True if values are equal within tolerance

    Raises:
        ValueError: If mode is not a known ToleranceMode
    """
    if a == b:
        return True

    EPSILON = 1e-12

    if mode == ToleranceMode.ABSOLUTE:
        return abs(a - b) <= tolerance + EPSILON

    elif mode == ToleranceMode.RELATIVE:
        # Relative to the larger magnitude; near zero fall back to absolute
        max_abs = max(abs(a), abs(b))
        if max_abs < 1.0:
            return abs(a - b) <= tolerance + EPSILON
        return abs(a - b) / max_abs <= tolerance + EPSILON

    else:
        raise ValueError(f"Unknown tolerance mode: {mode}")
