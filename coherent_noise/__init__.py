# coherent_noise/__init__.py

# This file makes the 'coherent_noise' directory a Python package.
# It also defines the public API of the package.

from .errors import InvalidConfiguration
from .permutation import PermutationTable, build_permutation_table
from .gradients import gradient, gradient_set
from .interpolation import fade, lerp
from .fractal import FractalConfig
from .sampler import Sampler, create_sampler
from .noise_map import NoiseMap, generate_map

__version__ = "0.1.0"

__all__ = [
    "InvalidConfiguration",
    "PermutationTable", "build_permutation_table",
    "gradient", "gradient_set",
    "fade", "lerp",
    "FractalConfig",
    "Sampler", "create_sampler",
    "NoiseMap", "generate_map",
]
