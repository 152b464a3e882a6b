import math

import pytest

from interviewkit.numbers import (
    add,
    count_digit_one,
    count_one_bits,
    dice_probabilities,
    digit_sum,
    fibonacci,
    last_remaining,
    max_product_dp,
    max_product_greedy,
    moving_count,
    nth_digit,
    nth_ugly_number,
    numbers_up_to_digits,
    power,
    sum_to,
)


def test_fibonacci_first_terms():
    assert fibonacci(1) == 0
    assert fibonacci(2) == 1


def test_fibonacci_recurrence():
    for n in range(3, 60):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_rejects_zero():
    with pytest.raises(ValueError):
        fibonacci(0)


def test_digit_sum_example():
    assert digit_sum(35) + digit_sum(37) == 18
    assert digit_sum(35) + digit_sum(38) == 19
    assert digit_sum(0) == 0


def test_moving_count_rejects_degenerate():
    assert moving_count(0, 10, 10) == 0
    assert moving_count(5, 0, 10) == 0
    assert moving_count(5, 10, -1) == 0


def test_moving_count_single_cell_and_full_grid():
    assert moving_count(1, 1, 1) == 1
    assert moving_count(100, 10, 10) == 10 * 10


def test_moving_count_monotone_in_threshold():
    counts = [moving_count(k, 40, 40) for k in range(1, 20)]
    assert counts == sorted(counts)
    assert all(count <= 40 * 40 for count in counts)


def test_cutting_rope_example():
    assert max_product_dp(8) == 18
    assert max_product_greedy(8) == 18


@pytest.mark.parametrize("cut", [max_product_dp, max_product_greedy])
def test_cutting_rope_small(cut):
    assert cut(1) == 0
    assert cut(2) == 1
    assert cut(3) == 2


def test_cutting_rope_methods_agree():
    for length in range(0, 60):
        assert max_product_dp(length) == max_product_greedy(length)


def test_count_one_bits_example():
    assert count_one_bits(9) == 2


def test_count_one_bits_matches_binary():
    for n in range(0, 2000):
        assert count_one_bits(n) == bin(n).count("1")


def test_count_one_bits_negative_is_32_bit():
    assert count_one_bits(-1) == 32
    assert count_one_bits(-(2**31)) == 1


@pytest.mark.parametrize("base", [-3, -1.5, 0.5, 1, 2, 7])
@pytest.mark.parametrize("exponent", [-4, -1, 0, 1, 2, 5, 10])
def test_power_matches_builtin(base, exponent):
    assert power(base, exponent) == pytest.approx(base**exponent)


def test_power_zero_base():
    assert power(0, 0) == 1.0
    assert power(0, 3) == 0.0
    with pytest.raises(ZeroDivisionError):
        power(0, -1)


def test_numbers_up_to_digits():
    assert list(numbers_up_to_digits(2)) == [str(i) for i in range(1, 100)]
    assert list(numbers_up_to_digits(1)) == [str(i) for i in range(1, 10)]


def test_numbers_up_to_digits_nothing():
    assert list(numbers_up_to_digits(0)) == []
    assert list(numbers_up_to_digits(-3)) == []


def test_count_digit_one_example():
    assert count_digit_one(12) == 5
    assert count_digit_one(0) == 0


def test_count_digit_one_by_counting():
    for n in range(1, 400):
        assert count_digit_one(n) == sum(str(i).count("1") for i in range(1, n + 1))


@pytest.mark.parametrize("position,expected", [(5, 5), (13, 1), (19, 4)])
def test_nth_digit_examples(position, expected):
    assert nth_digit(position) == expected


def test_nth_digit_against_sequence():
    sequence = "".join(str(i) for i in range(1, 1200))
    for n in range(1, 3000):
        assert nth_digit(n) == int(sequence[n - 1])


def test_nth_digit_rejects_zero():
    with pytest.raises(ValueError):
        nth_digit(0)


def _only_small_primes(number):
    for prime in (2, 3, 5):
        while number % prime == 0:
            number //= prime
    return number == 1


def test_nth_ugly_number_sequence():
    values = [nth_ugly_number(n) for n in range(1, 60)]
    assert values[0] == 1
    assert all(a < b for a, b in zip(values, values[1:]))
    assert all(_only_small_primes(v) for v in values)
    expected = [v for v in range(1, values[-1] + 1) if _only_small_primes(v)]
    assert values == expected


def test_nth_ugly_number_rejects_zero():
    with pytest.raises(ValueError):
        nth_ugly_number(0)


def test_dice_single_die():
    result = dice_probabilities(1)
    assert [total for total, _ in result] == [1, 2, 3, 4, 5, 6]
    assert all(p == pytest.approx(1 / 6) for _, p in result)


@pytest.mark.parametrize("n", [1, 2, 3, 6])
def test_dice_distribution_invariants(n):
    result = dice_probabilities(n)
    totals = [total for total, _ in result]
    probabilities = [p for _, p in result]
    assert totals == list(range(n, 6 * n + 1))
    assert math.fsum(probabilities) == pytest.approx(1.0)
    for low, high in zip(probabilities, reversed(probabilities)):
        assert low == pytest.approx(high)


def test_dice_rejects_zero():
    with pytest.raises(ValueError):
        dice_probabilities(0)


def _eliminate(n, m):
    people = list(range(n))
    index = 0
    while len(people) > 1:
        index = (index + m - 1) % len(people)
        people.pop(index)
    return people[0]


def test_last_remaining_by_elimination():
    for n in range(1, 25):
        for m in range(1, 10):
            assert last_remaining(n, m) == _eliminate(n, m)


def test_last_remaining_single():
    assert last_remaining(1, 7) == 0


@pytest.mark.parametrize("n,m", [(0, 3), (5, 0)])
def test_last_remaining_rejects(n, m):
    with pytest.raises(ValueError):
        last_remaining(n, m)


def test_sum_to():
    for n in range(0, 200):
        assert sum_to(n) == n * (n + 1) // 2
    with pytest.raises(ValueError):
        sum_to(-1)


@pytest.mark.parametrize("a", [-1000, -17, -1, 0, 1, 5, 123456])
@pytest.mark.parametrize("b", [-99999, -3, 0, 2, 17, 2**20])
def test_add_matches_plus(a, b):
    assert add(a, b) == a + b


def test_add_wraps_at_32_bits():
    assert add(2**31 - 1, 1) == -(2**31)
    assert add(-(2**31), -1) == 2**31 - 1