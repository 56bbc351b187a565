# coherent_noise/noise_map.py

"""
================================================================================
NOISE MAPS
================================================================================
Regular 1D, 2D or 3D grids of noise values held in a NumPy array.

Data Contract:
---------------
- Inputs:
    - shape: 1 to 3 positive extents, or an existing float array.
    - sampler: Any object with a sample_batch(points) method.
    - scale, offset: Cell (i, j, k) is sampled at ((i, j, k) + offset) / scale.
- Outputs:
    - NoiseMap.data: a float64 array of the requested shape. Axis 0 is x.
- Side Effects: fill() and normalize() write into `data` in place.
- Invariants: Filling the same map with the same sampler and parameters
  always produces the same array.
================================================================================
"""

import logging

import numpy as np

from . import config as DEFAULTS
from .errors import InvalidConfiguration, require_positive_float, require_positive_integer


def _check_shape(shape) -> tuple:
    if isinstance(shape, (int, np.integer)):
        shape = (shape,)
    shape = tuple(shape)
    if not 1 <= len(shape) <= DEFAULTS.MAX_MAP_DIMENSIONS:
        raise InvalidConfiguration(
            "shape", shape, f"must have 1 to {DEFAULTS.MAX_MAP_DIMENSIONS} dimensions"
        )
    return tuple(require_positive_integer("shape", extent) for extent in shape)


class NoiseMap:
    """A grid of noise samples."""

    def __init__(self, shape, logger: logging.Logger = None):
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.data = np.zeros(_check_shape(shape), dtype=np.float64)

    @classmethod
    def from_array(cls, array, logger: logging.Logger = None) -> "NoiseMap":
        """Wraps a copy of an existing array."""
        array = np.asarray(array, dtype=np.float64)
        noise_map = cls(array.shape, logger=logger)
        noise_map.data[...] = array
        return noise_map

    @property
    def shape(self) -> tuple:
        return self.data.shape

    @property
    def dimension(self) -> int:
        return self.data.ndim

    def coordinates(self, scale: float = DEFAULTS.DEFAULT_MAP_SCALE, offset: float = 0.0) -> np.ndarray:
        """The (cells, dimension) array of sample points in C order."""
        scale = require_positive_float("scale", scale)
        axes = [(np.arange(extent, dtype=np.float64) + offset) / scale for extent in self.shape]
        grids = np.meshgrid(*axes, indexing="ij")
        return np.stack([grid.ravel() for grid in grids], axis=1)

    def fill(self, sampler, scale: float = DEFAULTS.DEFAULT_MAP_SCALE, offset: float = 0.0) -> "NoiseMap":
        """Samples every cell. Returns self so calls can be chained."""
        points = self.coordinates(scale, offset)
        self.logger.debug(f"Filling {self.shape} noise map ({points.shape[0]} points, scale={scale}).")
        self.data[...] = sampler.sample_batch(points).reshape(self.shape)
        return self

    def normalize(self, lower_bound: float = DEFAULTS.DEFAULT_MAP_LOWER_BOUND,
                  upper_bound: float = DEFAULTS.DEFAULT_MAP_UPPER_BOUND) -> "NoiseMap":
        """
        Linearly rescales the map so its minimum becomes `lower_bound` and its
        maximum `upper_bound`. A map whose values are all equal is set to
        `lower_bound`.
        """
        if lower_bound > upper_bound:
            raise InvalidConfiguration(
                "lower_bound", lower_bound, f"must not exceed upper_bound {upper_bound!r}"
            )

        low = self.data.min()
        high = self.data.max()
        if low == high:
            self.data.fill(lower_bound)
            return self

        self.data[...] = lower_bound + (self.data - low) / (high - low) * (upper_bound - lower_bound)
        return self

    def __repr__(self):
        return f"NoiseMap(shape={self.shape})"


def generate_map(sampler, shape, bounds: tuple = None,
                 scale: float = DEFAULTS.DEFAULT_MAP_SCALE, offset: float = 0.0,
                 logger: logging.Logger = None) -> NoiseMap:
    """
    Creates and fills a noise map in one call.

    Args:
        sampler: The noise source (usually from create_sampler()).
        shape: Map extents, 1 to 3 dimensions.
        bounds (tuple, optional): (lower, upper) to rescale into. The raw
            samples are kept when omitted.
        scale (float): Cells per lattice unit.
        offset (float): Added to every cell index before scaling.
    """
    noise_map = NoiseMap(shape, logger=logger).fill(sampler, scale=scale, offset=offset)
    if bounds is not None:
        lower_bound, upper_bound = bounds
        noise_map.normalize(lower_bound, upper_bound)
    return noise_map
