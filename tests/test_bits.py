import pytest

from algodrills.bits import (
    clear_ith_bit,
    clear_last_i_bits,
    clear_range,
    count_bits,
    count_bits_kernighan,
    decimal_to_binary,
    get_ith_bit,
    hamming_distance,
    is_odd,
    is_power_of_four,
    is_power_of_two,
    longest_consecutive_ones,
    replace_bits,
    set_ith_bit,
    sort_by_bits,
    update_ith_bit,
)


@pytest.mark.parametrize("k", [0, 1, 7, 50, 1001])
def test_is_odd(k):
    assert is_odd(2 * k + 1) is True
    assert is_odd(2 * k) is False


@pytest.mark.parametrize("n", [0, 5, 31, 1024, 123456])
@pytest.mark.parametrize("i", [0, 1, 3, 10])
def test_set_and_clear_bit(n, i):
    assert get_ith_bit(set_ith_bit(n, i), i) == 1
    assert get_ith_bit(clear_ith_bit(n, i), i) == 0
    assert set_ith_bit(clear_ith_bit(n, i), i) == set_ith_bit(n, i)
    for other in range(12):
        if other != i:
            assert get_ith_bit(set_ith_bit(n, i), other) == get_ith_bit(n, other)


@pytest.mark.parametrize("n", [0, 31, 1000])
@pytest.mark.parametrize("i", [0, 2, 5])
def test_update_bit(n, i):
    assert update_ith_bit(n, i, 1) == set_ith_bit(n, i)
    assert update_ith_bit(n, i, 0) == clear_ith_bit(n, i)


def test_update_bit_rejects_bad_value():
    with pytest.raises(ValueError):
        update_ith_bit(5, 1, 2)


def test_negative_position_rejected():
    with pytest.raises(ValueError):
        get_ith_bit(5, -1)


@pytest.mark.parametrize("n", [31, 255, 1023, 987654])
@pytest.mark.parametrize("i", [0, 1, 4, 8])
def test_clear_last_i_bits(n, i):
    result = clear_last_i_bits(n, i)
    assert result % (1 << i) == 0
    assert 0 <= n - result < (1 << i)


@pytest.mark.parametrize("n", [31, 1024, 65535])
@pytest.mark.parametrize("i,j", [(1, 2), (0, 3), (2, 6)])
def test_clear_range(n, i, j):
    result = clear_range(n, i, j)
    for bit in range(20):
        if i <= bit <= j:
            assert get_ith_bit(result, bit) == 0
        else:
            assert get_ith_bit(result, bit) == get_ith_bit(n, bit)


def test_replace_bits_source_example():
    assert replace_bits(15, 1, 3, 2) == 5


@pytest.mark.parametrize("n", [0b10000000000, 0b11111111111, 0])
def test_replace_bits_embeds_m(n):
    m, i, j = 0b10101, 2, 6
    result = replace_bits(n, i, j, m)
    assert (result >> i) & 0b11111 == m
    assert clear_range(result, i, j) == clear_range(n, i, j)


@pytest.mark.parametrize("n", list(range(0, 300)) + [2**31 - 1])
def test_count_bits_agree(n):
    assert count_bits(n) == count_bits_kernighan(n)


@pytest.mark.parametrize("k", [0, 1, 5, 31, 40])
def test_count_bits_all_ones(k):
    assert count_bits(2**k - 1) == k
    assert count_bits_kernighan(2**k - 1) == k


def test_count_bits_non_positive():
    assert count_bits(0) == 0
    assert count_bits(-8) == 0
    assert count_bits_kernighan(-8) == 0


@pytest.mark.parametrize("n", [1, 2, 5, 10, 255, 1000])
def test_decimal_to_binary_round_trip(n):
    digits = str(decimal_to_binary(n))
    assert set(digits) <= {"0", "1"}
    assert int(digits, 2) == n


def test_hamming_distance_example():
    assert hamming_distance(1, 4) == 2


@pytest.mark.parametrize("x,y", [(0, 0), (7, 3), (1000, 33), (123, 456)])
def test_hamming_distance_properties(x, y):
    assert hamming_distance(x, x) == 0
    assert hamming_distance(x, y) == hamming_distance(y, x)
    assert hamming_distance(x, 0) == count_bits(x)


@pytest.mark.parametrize("a", [1, 2, 5])
@pytest.mark.parametrize("b", [1, 3, 6])
def test_longest_consecutive_ones(a, b):
    n = ((2**a - 1) << (b + 1)) | (2**b - 1)
    assert longest_consecutive_ones(n) == max(a, b)
    assert longest_consecutive_ones(2**a - 1) == a


def test_longest_consecutive_ones_zero():
    assert longest_consecutive_ones(0) == 0


@pytest.mark.parametrize("k", range(0, 40))
def test_powers_of_two(k):
    assert is_power_of_two(2**k)
    if k >= 1:
        assert not is_power_of_two(2**k + 1)
    assert not is_power_of_two(-(2**k))


def test_zero_is_not_power():
    assert not is_power_of_two(0)
    assert not is_power_of_four(0)


@pytest.mark.parametrize("k", range(0, 16))
def test_powers_of_four(k):
    assert is_power_of_four(4**k)
    assert not is_power_of_four(2 * 4**k)
    if k >= 1:
        assert not is_power_of_four(4**k - 1)


def test_sort_by_bits_example():
    assert sort_by_bits([0, 1, 2, 3, 4, 5, 6, 7, 8]) == [0, 1, 2, 4, 8, 3, 5, 6, 7]


def test_sort_by_bits_invariants():
    data = [1024, 512, 256, 128, 64, 32, 16, 8, 4, 2, 1, 7, 3, 15]
    result = sort_by_bits(data)
    assert sorted(result) == sorted(data)
    keys = [(count_bits(x), x) for x in result]
    assert keys == sorted(keys)