# coherent_noise/lattice.py

"""
================================================================================
LATTICE NOISE EVALUATORS
================================================================================
The coherent-noise primitives. A sample point is located in its lattice cell
(floor and fractional part per axis), each of the 2**N cell corners is hashed
through the permutation table, and the corner contributions are blended with
the fade curve, one axis at a time (axis 0 first).

Data Contract:
---------------
- Inputs:
    - perm: The doubled permutation table (int64 array of length 2N).
    - mask: N - 1.
    - gradients: The (M, dimension) gradient table for the point's dimension.
    - scale: Output scale for gradient noise (see gradients.gradient_scale).
    - kind: KIND_VALUE, KIND_GRADIENT or KIND_WHITE.
    - curve: FADE_QUINTIC or FADE_CUBIC.
    - point: 1D float64 array of coordinates.
- Outputs:
    - A float64 scalar.
        - value:    [-1, 1], equal to the hashed corner value at lattice points.
        - gradient: nominally [-1, 1], zero at lattice points.
        - white:    [-1, 1], constant inside a cell, uncorrelated across cells.
- Side Effects: None.
- Invariants: Identical inputs give bit-identical outputs.
================================================================================
"""

import numpy as np
from numba import njit

from .errors import require_choice
from .interpolation import fade, lerp

KIND_VALUE = 0
KIND_GRADIENT = 1
KIND_WHITE = 2

NOISE_KINDS = {
    "value": KIND_VALUE,
    "gradient": KIND_GRADIENT,
    "white": KIND_WHITE,
}


def resolve_kind(name) -> int:
    return require_choice("kind", name, NOISE_KINDS)


@njit
def lattice_value(h, table_size):
    """Maps a hashed index in [0, table_size) onto [-1, 1]."""
    return 2.0 * h / (table_size - 1) - 1.0


@njit
def _corner_hash(perm, mask, cell, corner):
    # Bit `axis` of `corner` selects the lower (0) or upper (1) lattice
    # coordinate along that axis.
    h = 0
    for axis in range(cell.shape[0]):
        offset = (corner >> axis) & 1
        h = perm[h + ((cell[axis] + offset) & mask)]
    return h


@njit
def evaluate(perm, mask, gradients, scale, kind, curve, point):
    """Evaluates one noise kind at a single N-dimensional point."""
    n = point.shape[0]
    cell = np.empty(n, dtype=np.int64)
    frac = np.empty(n, dtype=np.float64)
    for axis in range(n):
        base = np.floor(point[axis])
        cell[axis] = int(base)
        frac[axis] = point[axis] - base

    if kind == KIND_WHITE:
        return lattice_value(_corner_hash(perm, mask, cell, 0), mask + 1)

    corners = 1 << n
    values = np.empty(corners, dtype=np.float64)
    for corner in range(corners):
        h = _corner_hash(perm, mask, cell, corner)
        if kind == KIND_VALUE:
            values[corner] = lattice_value(h, mask + 1)
        else:
            g = gradients[h % gradients.shape[0]]
            dot = 0.0
            for axis in range(n):
                dot += g[axis] * (frac[axis] - ((corner >> axis) & 1))
            values[corner] = dot

    # Collapse one axis per pass: pairs (2i, 2i + 1) differ only in the
    # lowest remaining axis bit.
    width = corners
    for axis in range(n):
        weight = fade(frac[axis], curve)
        width >>= 1
        for i in range(width):
            values[i] = lerp(values[2 * i], values[2 * i + 1], weight)

    if kind == KIND_GRADIENT:
        return values[0] * scale
    return values[0]
