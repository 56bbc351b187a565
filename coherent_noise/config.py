# coherent_noise/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback constants for the noise engine.
These values are used if they are not explicitly provided by the caller's
configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC SAMPLER.
Instead, pass a configuration dictionary (or a FractalConfig) to
create_sampler().
================================================================================
"""

# --- Seeding ---
DEFAULT_SEED = 1337
# Seeds are reduced modulo 2**64 before they reach the shuffle, so every
# signed or unsigned 64-bit value maps to a distinct permutation.
SEED_MODULUS = 2 ** 64

# --- Permutation Table ---
# Must be a power of two so lattice indices wrap with a single bitmask.
DEFAULT_TABLE_SIZE = 256
# Identifies the exact shuffle used to derive a table from a seed. Changing
# the algorithm changes every output for existing seeds, so bump the suffix.
SHUFFLE_ALGORITHM = "numpy-pcg64-shuffle/1"

# --- Evaluator ---
DEFAULT_NOISE_KIND = "gradient"
# 'quintic': 6t^5 - 15t^4 + 10t^3
# 'cubic':   3t^2 - 2t^3
DEFAULT_FADE_CURVE = "quintic"

# Gradient noise is nominally in [-1, 1]. 1D and 2D stay inside it exactly;
# 3D (and higher) can overshoot by at most this much.
GRADIENT_RANGE_EPSILON = 0.1

# --- Fractal Compositor ---
DEFAULT_OCTAVE_COUNT = 1
DEFAULT_LACUNARITY = 2.0
DEFAULT_PERSISTENCE = 0.5
DEFAULT_BASE_FREQUENCY = 1.0
DEFAULT_NORMALIZE = True

# --- Recognized configuration keys ---
FRACTAL_OPTIONS = (
    "octave_count",
    "lacunarity",
    "persistence",
    "base_frequency",
    "normalize",
)
SAMPLER_OPTIONS = ("seed", "table_size", "fade_curve") + FRACTAL_OPTIONS

# --- Noise Maps ---
# Maps are plain NumPy arrays of 1 to 3 dimensions.
MAX_MAP_DIMENSIONS = 3
# Range used when a map is rescaled without explicit bounds.
DEFAULT_MAP_LOWER_BOUND = 0.0
DEFAULT_MAP_UPPER_BOUND = 128.0
DEFAULT_MAP_SCALE = 1.0
