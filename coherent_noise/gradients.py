# coherent_noise/gradients.py

"""
Seed-independent gradient vectors for gradient noise.

The 1D, 2D and 3D sets are fixed module constants. Sets for four or more
dimensions (every vector with exactly one zero component and +-1 elsewhere,
the generalization of the 3D cube-edge set) are generated on first use and
cached for the life of the process. All arrays are read-only.
"""

import itertools

import numpy as np

from .errors import InvalidConfiguration, require_integer

GRADIENTS_1D = np.array([[1.0], [-1.0]])

# 8-direction 2D gradient vectors
GRADIENTS_2D = np.array([
    [1, 1], [-1, 1], [1, -1], [-1, -1],  # Diagonal gradients
    [1, 0], [-1, 0], [0, 1], [0, -1]      # Axis-aligned gradients
], dtype=np.float64)

# Midpoints of the 12 cube edges
GRADIENTS_3D = np.array([
    [1, 1, 0], [-1, 1, 0], [1, -1, 0], [-1, -1, 0],
    [1, 0, 1], [-1, 0, 1], [1, 0, -1], [-1, 0, -1],
    [0, 1, 1], [0, -1, 1], [0, 1, -1], [0, -1, -1]
], dtype=np.float64)

for _table in (GRADIENTS_1D, GRADIENTS_2D, GRADIENTS_3D):
    _table.setflags(write=False)

_GRADIENT_SETS = {1: GRADIENTS_1D, 2: GRADIENTS_2D, 3: GRADIENTS_3D}


def _check_dimension(dimension) -> int:
    dimension = require_integer("dimension", dimension)
    if dimension < 1:
        raise InvalidConfiguration("dimension", dimension, "must be >= 1")
    return dimension


def _build_edge_gradients(dimension: int) -> np.ndarray:
    vectors = []
    for zero_axis in range(dimension):
        for signs in itertools.product((1.0, -1.0), repeat=dimension - 1):
            vector = list(signs)
            vector.insert(zero_axis, 0.0)
            vectors.append(vector)
    table = np.array(vectors, dtype=np.float64)
    table.setflags(write=False)
    return table


def gradient_set(dimension: int) -> np.ndarray:
    """Returns the read-only (M, dimension) gradient table."""
    dimension = _check_dimension(dimension)
    table = _GRADIENT_SETS.get(dimension)
    if table is None:
        # setdefault keeps the first table if two threads race here.
        table = _GRADIENT_SETS.setdefault(dimension, _build_edge_gradients(dimension))
    return table


def gradient(dimension: int, hash_index: int) -> tuple:
    """Gradient vector selected by `hash_index mod set size`."""
    table = gradient_set(dimension)
    row = table[int(hash_index) % table.shape[0]]
    return tuple(float(component) for component in row)


def gradient_scale(dimension: int) -> float:
    """
    Output scale for gradient noise of the given dimension.

    Up to 3D the raw lattice sum already peaks at about 1. Above that each
    corner can contribute up to (dimension - 1) / 2, so the sum is scaled
    back down by the inverse of that.
    """
    dimension = _check_dimension(dimension)
    if dimension <= 3:
        return 1.0
    return 2.0 / (dimension - 1)
