# coherent_noise/interpolation.py

"""
Fade curves and linear interpolation shared by every lattice evaluator.

The curve is part of the output contract: switching it changes every sample.
Both curves map 0 -> 0 and 1 -> 1 exactly and have zero slope at both ends.
"""

from numba import njit

from .errors import require_choice

FADE_QUINTIC = 0
FADE_CUBIC = 1

FADE_CURVES = {
    "quintic": FADE_QUINTIC,
    "cubic": FADE_CUBIC,
}


def resolve_fade_curve(name) -> int:
    return require_choice("fade_curve", name, FADE_CURVES)


@njit
def fade(t, curve):
    "6t^5 - 15t^4 + 10t^3, or 3t^2 - 2t^3 for the cubic curve"
    if curve == FADE_CUBIC:
        return t * t * (3.0 - 2.0 * t)
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


@njit
def lerp(a, b, t):
    "Linear interpolation."
    return a + t * (b - a)
