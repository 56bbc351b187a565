# coherent_noise/fractal.py

"""
================================================================================
FRACTAL COMPOSITOR
================================================================================
Sums several octaves of a lattice evaluator. Octave i is evaluated at
`point * frequency_i` and weighted by `amplitude_i`, where

    frequency_0 = base_frequency,   frequency_{i+1} = frequency_i * lacunarity
    amplitude_0 = 1,                amplitude_{i+1} = amplitude_i * persistence

Octaves are always accumulated in increasing order; floating-point summation
order is part of the bit-exact output. With `normalize` the sum is divided by
the accumulated amplitude so the result keeps the evaluator's nominal range.

All parameters are validated by FractalConfig; the compiled kernels below
assume valid input and never fail.
================================================================================
"""

import numpy as np
from numba import njit

from . import config as DEFAULTS
from .errors import (
    InvalidConfiguration,
    require_bool,
    require_positive_float,
    require_positive_integer,
)
from .lattice import evaluate


class FractalConfig:
    """Validated octave settings. Treat instances as immutable."""

    def __init__(
        self,
        octave_count: int = DEFAULTS.DEFAULT_OCTAVE_COUNT,
        lacunarity: float = DEFAULTS.DEFAULT_LACUNARITY,
        persistence: float = DEFAULTS.DEFAULT_PERSISTENCE,
        base_frequency: float = DEFAULTS.DEFAULT_BASE_FREQUENCY,
        normalize: bool = DEFAULTS.DEFAULT_NORMALIZE,
    ):
        self.octave_count = require_positive_integer("octave_count", octave_count)
        self.lacunarity = require_positive_float("lacunarity", lacunarity)
        self.persistence = require_positive_float("persistence", persistence)
        self.base_frequency = require_positive_float("base_frequency", base_frequency)
        self.normalize = require_bool("normalize", normalize)

    @classmethod
    def from_dict(cls, user_config: dict) -> "FractalConfig":
        """
        Builds a config from a dictionary, falling back to the defaults for
        missing keys. Keys that are not fractal options are rejected.
        """
        unknown = sorted(set(user_config) - set(DEFAULTS.FRACTAL_OPTIONS))
        if unknown:
            raise InvalidConfiguration(unknown[0], user_config[unknown[0]], "unrecognized option")

        return cls(
            octave_count=user_config.get('octave_count', DEFAULTS.DEFAULT_OCTAVE_COUNT),
            lacunarity=user_config.get('lacunarity', DEFAULTS.DEFAULT_LACUNARITY),
            persistence=user_config.get('persistence', DEFAULTS.DEFAULT_PERSISTENCE),
            base_frequency=user_config.get('base_frequency', DEFAULTS.DEFAULT_BASE_FREQUENCY),
            normalize=user_config.get('normalize', DEFAULTS.DEFAULT_NORMALIZE),
        )

    def as_dict(self) -> dict:
        return {name: getattr(self, name) for name in DEFAULTS.FRACTAL_OPTIONS}

    def octave_parameters(self) -> list:
        """(frequency, amplitude) per octave, in evaluation order."""
        parameters = []
        frequency = self.base_frequency
        amplitude = 1.0
        for _ in range(self.octave_count):
            parameters.append((frequency, amplitude))
            amplitude *= self.persistence
            frequency *= self.lacunarity
        return parameters

    def __eq__(self, other):
        if not isinstance(other, FractalConfig):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        fields = ", ".join(f"{key}={value!r}" for key, value in self.as_dict().items())
        return f"FractalConfig({fields})"


@njit
def fractal_sum(perm, mask, gradients, scale, kind, curve,
                octave_count, lacunarity, persistence, base_frequency, normalize,
                point):
    """Multi-octave sum of `evaluate` at a single point."""
    scaled = np.empty(point.shape[0], dtype=np.float64)
    total = 0.0
    max_amplitude = 0.0
    amplitude = 1.0
    frequency = base_frequency

    for _ in range(octave_count):
        for axis in range(point.shape[0]):
            scaled[axis] = point[axis] * frequency
        total += evaluate(perm, mask, gradients, scale, kind, curve, scaled) * amplitude
        max_amplitude += amplitude
        amplitude *= persistence
        frequency *= lacunarity

    if normalize:
        return total / max_amplitude
    return total


@njit
def fractal_sum_batch(perm, mask, gradients, scale, kind, curve,
                      octave_count, lacunarity, persistence, base_frequency, normalize,
                      points):
    """Row-wise fractal_sum over an (M, N) array; output order matches input."""
    out = np.empty(points.shape[0], dtype=np.float64)
    for i in range(points.shape[0]):
        out[i] = fractal_sum(perm, mask, gradients, scale, kind, curve,
                             octave_count, lacunarity, persistence, base_frequency,
                             normalize, points[i])
    return out
