import numpy as np
import pytest

from coherent_noise import InvalidConfiguration, gradient, gradient_set
from coherent_noise.gradients import gradient_scale


@pytest.mark.parametrize("dimension, count", [(1, 2), (2, 8), (3, 12), (4, 32), (5, 80)])
def test_gradient_set_sizes(dimension, count):
    table = gradient_set(dimension)
    assert table.shape == (count, dimension)


def test_one_dimensional_gradients_are_signs():
    assert gradient(1, 0) == (1.0,)
    assert gradient(1, 1) == (-1.0,)


def test_three_dimensional_gradients_are_cube_edges():
    table = gradient_set(3)
    assert ((table == 0).sum(axis=1) == 1).all()
    assert len({tuple(row) for row in table}) == 12


def test_higher_dimensional_gradients_have_one_zero():
    table = gradient_set(4)
    assert ((table == 0).sum(axis=1) == 1).all()
    assert set(np.abs(table).ravel()) == {0.0, 1.0}
    assert len({tuple(row) for row in table}) == 32


def test_hash_index_is_reduced_modulo_set_size():
    assert gradient(2, 9) == gradient(2, 1)
    assert gradient(3, 12 * 7 + 5) == gradient(3, 5)


def test_sets_are_shared_and_read_only():
    assert gradient_set(4) is gradient_set(4)
    with pytest.raises(ValueError):
        gradient_set(2)[0, 0] = 3.0


def test_gradient_scale():
    assert gradient_scale(1) == 1.0
    assert gradient_scale(3) == 1.0
    assert gradient_scale(4) == pytest.approx(2.0 / 3.0)


@pytest.mark.parametrize("dimension", [0, -2, 2.5])
def test_rejects_bad_dimension(dimension):
    with pytest.raises(InvalidConfiguration):
        gradient_set(dimension)
