import numpy as np
import pytest

from coherent_noise import InvalidConfiguration, PermutationTable, build_permutation_table


def test_table_is_a_doubled_permutation():
    table = build_permutation_table(1337)
    assert table.size == 256
    assert table.mask == 255
    assert table.values.shape == (512,)
    np.testing.assert_array_equal(np.sort(table.values[:256]), np.arange(256))
    np.testing.assert_array_equal(table.values[:256], table.values[256:])


def test_table_is_read_only():
    table = build_permutation_table(1)
    with pytest.raises(ValueError):
        table.values[0] = 5


def test_same_seed_same_table():
    assert build_permutation_table(99) == build_permutation_table(99)


def test_different_seeds_different_tables():
    assert build_permutation_table(1) != build_permutation_table(2)


def test_seed_is_reduced_to_64_bits():
    assert build_permutation_table(-1) == build_permutation_table(2 ** 64 - 1)
    assert build_permutation_table(5) == build_permutation_table(5 + 2 ** 64)


@pytest.mark.parametrize("table_size", [2, 16, 1024])
def test_power_of_two_sizes(table_size):
    table = build_permutation_table(7, table_size)
    assert len(table) == table_size
    np.testing.assert_array_equal(np.sort(table.values[:table_size]), np.arange(table_size))


@pytest.mark.parametrize("table_size", [300, 0, 1, -256, 255])
def test_rejects_non_power_of_two_size(table_size):
    with pytest.raises(InvalidConfiguration) as excinfo:
        build_permutation_table(7, table_size)
    assert excinfo.value.parameter == "table_size"
    assert excinfo.value.value == table_size


@pytest.mark.parametrize("seed", [1.5, "42", True, None])
def test_rejects_non_integer_seed(seed):
    with pytest.raises(InvalidConfiguration) as excinfo:
        build_permutation_table(seed)
    assert excinfo.value.parameter == "seed"


def test_hash_chains_through_the_table(identity_table):
    assert identity_table.hash(3) == 3
    assert identity_table.hash(1, 2) == 3
    assert identity_table.hash(1, 2, 3) == 6
    assert identity_table.hash(200, 100) == 44


def test_hash_wraps_negative_coordinates(identity_table):
    assert identity_table.hash(-1) == 255
    assert identity_table.hash(-1, 1) == 0


def test_hash_is_uniform_over_a_full_period():
    # For a fixed x, y -> p[p[x] + y] is itself a bijection, so a full
    # 256 x 256 block hits every index exactly 256 times.
    table = build_permutation_table(4242)
    counts = np.zeros(256, dtype=int)
    for x in range(256):
        for y in range(256):
            counts[table.hash(x, y)] += 1
    assert (counts == 256).all()


def test_hash_spreads_a_small_block():
    table = build_permutation_table(8)
    hashes = [table.hash(x, y) for x in range(32) for y in range(32)]
    counts = np.bincount(hashes, minlength=256)
    # 1024 draws over 256 buckets: expect 4 per bucket.
    assert counts.max() <= 16
    assert (counts > 0).sum() > 200


def test_from_permutation_accepts_plain_and_doubled_forms():
    perm = np.random.default_rng(3).permutation(64)
    plain = PermutationTable.from_permutation(perm)
    doubled = PermutationTable.from_permutation(np.concatenate([perm, perm]))
    assert plain == doubled
    assert plain.size == 64


@pytest.mark.parametrize("permutation", [
    [0, 1, 1, 3],
    [0, 1, 2, 3, 4, 5],
    [[0, 1], [1, 0]],
    [0.0, 1.0],
    [],
])
def test_from_permutation_rejects_invalid_input(permutation):
    with pytest.raises(InvalidConfiguration):
        PermutationTable.from_permutation(permutation)
