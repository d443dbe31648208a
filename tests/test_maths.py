import pytest

from dsakit.maths import is_prime, my_sqrt, pascal_triangle, subsets


@pytest.mark.parametrize("n", [2, 3, 5, 7, 97, 7919])
def test_is_prime_known_primes(n):
    assert is_prime(n) is True


@pytest.mark.parametrize("n", [-7, 0, 1])
def test_is_prime_small_and_negative(n):
    assert is_prime(n) is False


def test_is_prime_products_are_composite():
    for a in range(2, 20):
        for b in range(2, 20):
            assert is_prime(a * b) is False


@pytest.mark.parametrize("x", list(range(0, 300)) + [2147395599, 2**31 - 1])
def test_my_sqrt_bounds(x):
    r = my_sqrt(x)
    assert r * r <= x < (r + 1) * (r + 1)


def test_my_sqrt_perfect_squares():
    for r in range(50):
        assert my_sqrt(r * r) == r


def test_my_sqrt_negative():
    assert my_sqrt(-5) == 0


def test_pascal_triangle_shape():
    rows = pascal_triangle(10)
    assert len(rows) == 10
    for i, row in enumerate(rows):
        assert len(row) == i + 1
        assert row[0] == row[-1] == 1
        assert row == row[::-1]
        assert sum(row) == 2**i


def test_pascal_triangle_recurrence():
    rows = pascal_triangle(8)
    for i in range(2, len(rows)):
        for j in range(1, i):
            assert rows[i][j] == rows[i - 1][j - 1] + rows[i - 1][j]


def test_pascal_triangle_empty():
    assert pascal_triangle(0) == []


def test_subsets_order_small():
    assert subsets([1, 2]) == [[], [1], [2], [1, 2]]


def test_subsets_invariants():
    nums = [4, 8, 15, 16]
    result = subsets(nums)
    assert len(result) == 2 ** len(nums)
    assert result[0] == []
    assert result[-1] == nums
    assert len({tuple(s) for s in result}) == len(result)
    for s in result:
        positions = [nums.index(v) for v in s]
        assert positions == sorted(positions)


def test_subsets_empty_input():
    assert subsets([]) == [[]]