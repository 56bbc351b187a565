"""
Shared fixtures for the coherent_noise test suite.
"""
import numpy as np
import pytest

from coherent_noise import PermutationTable, create_sampler


@pytest.fixture(scope="session")
def identity_table():
    """p[i] = i, so every corner hash is the sum of its coordinates (mod 256)."""
    return PermutationTable.from_permutation(np.arange(256))


@pytest.fixture(scope="session")
def gradient_sampler():
    return create_sampler(42, "gradient")


@pytest.fixture(scope="session")
def value_sampler():
    return create_sampler(42, "value")


@pytest.fixture(scope="session")
def sample_points_2d():
    """Reproducible off-lattice points spread over many cells."""
    rng = np.random.default_rng(2024)
    return rng.uniform(-40.0, 40.0, size=(500, 2))
