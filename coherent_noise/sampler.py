# coherent_noise/sampler.py

"""
================================================================================
SAMPLING FACADE
================================================================================
This module contains the Sampler class, which binds a seed-derived permutation
table, a fractal configuration, a noise kind and a fade curve into a reusable
handle, plus the create_sampler() entry point.

Data Contract:
---------------
- Inputs (on initialization):
    - seed (int): Master seed. May also be given as config['seed'].
    - kind (str): 'gradient', 'value' or 'white'.
    - config (dict | FractalConfig): Overrides for the internal defaults.
      Recognized keys: seed, table_size, fade_curve, octave_count,
      lacunarity, persistence, base_frequency, normalize.
    - logger: An optional Python logging object for construction messages.
    - permutation_table: An optional pre-computed table that replaces the
      seed-derived one.
- Outputs (from methods):
    - sample(*coords): a float.
    - sample_batch(points): a float64 NumPy array, one value per input point,
      in input order.
- Side Effects: Logs construction messages using the provided logger.
- Invariants:
    - All validation happens in __init__; sampling never raises for numeric
      input.
    - Nothing is cached between calls and nothing is mutated after
      construction, so a Sampler may be shared between threads.
================================================================================
"""

import logging

import numpy as np

from . import config as DEFAULTS
from .errors import InvalidConfiguration, require_integer
from .fractal import FractalConfig, fractal_sum, fractal_sum_batch
from .gradients import gradient_scale, gradient_set
from .interpolation import resolve_fade_curve
from .lattice import resolve_kind
from .permutation import PermutationTable, build_permutation_table


def _split_config(config) -> tuple:
    """Separates sampler-level options from fractal options."""
    if config is None:
        return {}, FractalConfig()
    if isinstance(config, FractalConfig):
        return {}, config
    if not isinstance(config, dict):
        raise InvalidConfiguration("config", config, "must be a dict or FractalConfig")

    unknown = sorted(set(config) - set(DEFAULTS.SAMPLER_OPTIONS))
    if unknown:
        raise InvalidConfiguration(unknown[0], config[unknown[0]], "unrecognized option")

    fractal_options = {key: value for key, value in config.items() if key in DEFAULTS.FRACTAL_OPTIONS}
    sampler_options = {key: value for key, value in config.items() if key not in DEFAULTS.FRACTAL_OPTIONS}
    return sampler_options, FractalConfig.from_dict(fractal_options)


class Sampler:
    """
    A validated, immutable noise source.

    Prefer create_sampler() over calling this constructor directly.
    """

    def __init__(self, seed=None, kind: str = DEFAULTS.DEFAULT_NOISE_KIND, config=None,
                 logger: logging.Logger = None, permutation_table=None):
        self.logger = logger if logger is not None else logging.getLogger(__name__)

        # --- Consolidate Configuration ---
        user_config, fractal_config = _split_config(config)
        config_seed = user_config.get('seed')
        if seed is None:
            seed = config_seed if config_seed is not None else DEFAULTS.DEFAULT_SEED
        elif config_seed is not None and config_seed != seed:
            raise InvalidConfiguration("seed", config_seed, f"conflicts with seed argument {seed!r}")

        self.seed = require_integer("seed", seed)
        self.kind = kind
        self._kind_tag = resolve_kind(kind)
        self.fade_curve = user_config.get('fade_curve', DEFAULTS.DEFAULT_FADE_CURVE)
        self._fade_tag = resolve_fade_curve(self.fade_curve)
        self.fractal_config = fractal_config

        # --- Initialize Permutation Table ---
        if permutation_table is not None:
            if not isinstance(permutation_table, PermutationTable):
                permutation_table = PermutationTable.from_permutation(permutation_table)
            requested_size = user_config.get('table_size')
            if requested_size is not None and requested_size != permutation_table.size:
                raise InvalidConfiguration(
                    "table_size", requested_size,
                    f"conflicts with injected table of size {permutation_table.size}"
                )
            self.table = permutation_table
            self.logger.debug("Initialized with injected permutation table.")
        else:
            self.logger.debug("No permutation table provided, generating new one from seed.")
            self.table = build_permutation_table(
                self.seed, user_config.get('table_size', DEFAULTS.DEFAULT_TABLE_SIZE)
            )

        self.logger.info(
            f"Sampler initialized: kind={self.kind}, seed={self.seed}, "
            f"table_size={self.table.size}, fade_curve={self.fade_curve}"
        )
        self.logger.debug(f"Fractal settings: {self.fractal_config!r}")

    @property
    def settings(self) -> dict:
        """The fully consolidated configuration, defaults included."""
        settings = {
            'seed': self.seed,
            'table_size': self.table.size,
            'fade_curve': self.fade_curve,
        }
        settings.update(self.fractal_config.as_dict())
        return settings

    def _kernel_args(self, dimension: int) -> tuple:
        fractal = self.fractal_config
        return (
            self.table.values, self.table.mask,
            gradient_set(dimension), gradient_scale(dimension),
            self._kind_tag, self._fade_tag,
            fractal.octave_count, fractal.lacunarity, fractal.persistence,
            fractal.base_frequency, fractal.normalize,
        )

    def sample(self, *coords) -> float:
        """
        Samples the noise at one point.

        Accepts the coordinates as separate arguments (`sample(x, y, z)`) or
        as a single sequence (`sample((x, y, z))`). Any dimension >= 1 works.
        """
        if len(coords) == 1 and np.ndim(coords[0]) == 1:
            coords = coords[0]
        point = np.array(coords, dtype=np.float64)
        if point.ndim != 1 or point.shape[0] == 0:
            raise TypeError("sample() needs at least one scalar coordinate")
        return float(fractal_sum(*self._kernel_args(point.shape[0]), point))

    def sample_batch(self, points) -> np.ndarray:
        """
        Samples many points of the same dimension.

        `points` is an (M, N) array-like; a flat sequence is read as M
        one-dimensional points. Returns an array of length M.
        """
        points = np.asarray(points, dtype=np.float64)
        if points.ndim == 1:
            points = points.reshape(-1, 1)
        if points.ndim != 2 or points.shape[1] == 0:
            raise TypeError("sample_batch() needs an (M, N) array of points")
        if points.shape[0] == 0:
            return np.empty(0, dtype=np.float64)

        points = np.ascontiguousarray(points)
        return fractal_sum_batch(*self._kernel_args(points.shape[1]), points)

    def __call__(self, *coords) -> float:
        return self.sample(*coords)

    def __repr__(self):
        return (f"Sampler(seed={self.seed!r}, kind={self.kind!r}, "
                f"fade_curve={self.fade_curve!r}, table_size={self.table.size}, "
                f"{self.fractal_config!r})")


def create_sampler(seed=None, kind: str = DEFAULTS.DEFAULT_NOISE_KIND, config=None, *,
                   logger: logging.Logger = None, permutation_table=None) -> Sampler:
    """
    Builds a Sampler, validating every parameter up front.

    Args:
        seed (int): Master seed. None falls back to config['seed'], then to
            the internal default.
        kind (str): One of 'gradient', 'value', 'white'.
        config (dict | FractalConfig, optional): Option overrides.
        logger (logging.Logger, optional): Receives construction messages.
        permutation_table (optional): A PermutationTable, or a permutation of
            [0, N) to use instead of the seed-derived table.

    Raises:
        InvalidConfiguration: If any parameter violates its constraint.
    """
    return Sampler(seed, kind, config, logger=logger, permutation_table=permutation_table)


