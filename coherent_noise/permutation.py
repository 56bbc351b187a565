# coherent_noise/permutation.py

"""
================================================================================
SEEDED PERMUTATION TABLE
================================================================================
The leaf dependency of every noise kind. A permutation of [0, N) is derived
from the seed and folded over integer lattice coordinates to give each lattice
corner a stable pseudo-random index.

Data Contract:
---------------
- Inputs:
    - seed: Any integer. Reduced modulo 2**64 before seeding.
    - table_size: A power of two (default 256).
- Outputs:
    - PermutationTable whose `values` array holds the permutation twice
      (length 2N), so `values[values[a] + b]` never needs a wrap check.
- Side Effects: None.
- Invariants:
    - Same seed and size => identical table on every run and platform.
    - The table is read-only after construction.

Shuffle algorithm ("numpy-pcg64-shuffle/1"):
    p = numpy.arange(N)
    numpy.random.default_rng(seed % 2**64).shuffle(p)
    values = concatenate([p, p])
================================================================================
"""

import numpy as np

from . import config as DEFAULTS
from .errors import InvalidConfiguration, require_integer


def is_power_of_two(value: int) -> bool:
    return value >= 2 and (value & (value - 1)) == 0


def _check_table_size(table_size) -> int:
    table_size = require_integer("table_size", table_size)
    if not is_power_of_two(table_size):
        raise InvalidConfiguration(
            "table_size", table_size, "must be a power of two and >= 2"
        )
    return table_size


class PermutationTable:
    """
    An immutable, doubled permutation of [0, size).

    Build one with build_permutation_table() or, to pin a known table,
    PermutationTable.from_permutation().
    """

    def __init__(self, permutation: np.ndarray):
        # Callers are expected to have validated `permutation` already.
        permutation = np.asarray(permutation, dtype=np.int64)
        self.size = int(permutation.shape[0])
        self.mask = self.size - 1
        doubled = np.concatenate([permutation, permutation])
        doubled.setflags(write=False)
        self.values = doubled

    @classmethod
    def from_permutation(cls, permutation) -> "PermutationTable":
        """
        Wraps a caller-supplied permutation.

        Both the plain form (length N) and the doubled form (length 2N, the
        same permutation repeated) are accepted. N must be a power of two.
        """
        array = np.asarray(permutation)
        if array.ndim != 1 or not np.issubdtype(array.dtype, np.integer):
            raise InvalidConfiguration(
                "permutation_table", permutation, "must be a 1D integer sequence"
            )

        length = array.shape[0]
        if _is_permutation(array):
            plain = array
        elif length % 2 == 0 and np.array_equal(array[: length // 2], array[length // 2:]) \
                and _is_permutation(array[: length // 2]):
            plain = array[: length // 2]
        else:
            raise InvalidConfiguration(
                "permutation_table", permutation, "must be a permutation of [0, N)"
            )

        if not is_power_of_two(plain.shape[0]):
            raise InvalidConfiguration(
                "permutation_table", plain.shape[0], "length must be a power of two"
            )
        return cls(plain)

    def hash(self, *coords) -> int:
        """
        Folds integer lattice coordinates into a single index in [0, size).

        h = 0; for c in coords: h = values[h + (c & mask)]
        """
        h = 0
        for coord in coords:
            h = int(self.values[h + (int(coord) & self.mask)])
        return h

    def __len__(self):
        return self.size

    def __eq__(self, other):
        if not isinstance(other, PermutationTable):
            return NotImplemented
        return np.array_equal(self.values, other.values)

    def __repr__(self):
        return f"PermutationTable(size={self.size})"


def _is_permutation(array: np.ndarray) -> bool:
    return array.shape[0] > 0 and np.array_equal(np.sort(array), np.arange(array.shape[0]))


def build_permutation_table(seed: int, table_size: int = DEFAULTS.DEFAULT_TABLE_SIZE) -> PermutationTable:
    """Derives a permutation table from a seed (see the module docstring)."""
    seed = require_integer("seed", seed)
    table_size = _check_table_size(table_size)

    p = np.arange(table_size, dtype=np.int64)
    rng = np.random.default_rng(seed % DEFAULTS.SEED_MODULUS)
    rng.shuffle(p)
    return PermutationTable(p)
