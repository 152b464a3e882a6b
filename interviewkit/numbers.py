"""Number puzzles: sequences, digits, bits and counting."""

from __future__ import annotations

from collections import defaultdict
from itertools import product
from typing import Dict, Iterator, List, Tuple

_MASK32 = 0xFFFFFFFF
_SIGN32 = 0x80000000
_EPSILON = 1e-7


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting 0 as the first."""
    if n < 1:
        raise ValueError("n must be at least 1")
    previous, current = 1, 0
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def digit_sum(number: int) -> int:
    """Return the sum of the decimal digits of a positive ``number``; 0 otherwise."""
    if number <= 0:
        return 0
    return sum(map(int, str(number)))


def moving_count(threshold: int, rows: int, cols: int) -> int:
    """Count the cells a robot reaches from (0, 0) on a grid, entering only
    cells whose row and column digit sums total at most ``threshold``."""
    if threshold <= 0 or rows <= 0 or cols <= 0:
        return 0
    visited = {(0, 0)}
    stack = [(0, 0)]
    while stack:
        x, y = stack.pop()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if (
                0 <= nx < rows
                and 0 <= ny < cols
                and (nx, ny) not in visited
                and digit_sum(nx) + digit_sum(ny) <= threshold
            ):
                visited.add((nx, ny))
                stack.append((nx, ny))
    return len(visited)


def max_product_dp(length: int) -> int:
    """Return the largest product of integer pieces of a rope, by dynamic programming."""
    if length < 2:
        return 0
    if length <= 3:
        return length - 1
    best = [0, 1, 2, 3]
    for i in range(4, length + 1):
        best.append(max(best[j] * best[i - j] for j in range(1, i // 2 + 1)))
    return best[length]


def max_product_greedy(length: int) -> int:
    """Return the largest product of integer pieces of a rope, cutting threes greedily."""
    if length < 2:
        return 0
    if length <= 3:
        return length - 1
    threes = length // 3
    if length - threes * 3 == 1:
        threes -= 1
    twos = (length - threes * 3) // 2
    return 3**threes * 2**twos


def count_one_bits(n: int) -> int:
    """Count the set bits of ``n`` as a 32-bit two's complement integer."""
    return (n & _MASK32).bit_count()


def _is_zero(value: float) -> bool:
    return -_EPSILON < value < _EPSILON


def power(base: float, exponent: int) -> float:
    """Return ``base`` raised to the integer ``exponent`` by repeated squaring."""
    if _is_zero(base) and exponent < 0:
        raise ZeroDivisionError("zero cannot be raised to a negative power")
    result = 1.0
    factor = float(base)
    remaining = abs(exponent)
    while remaining:
        if remaining & 1:
            result *= factor
        factor *= factor
        remaining >>= 1
    return 1.0 / result if exponent < 0 else result


def numbers_up_to_digits(n: int) -> Iterator[str]:
    """Yield 1 up to the largest ``n``-digit number as decimal strings, in order."""
    if n <= 0:
        return
    for digits in product("0123456789", repeat=n):
        text = "".join(digits).lstrip("0")
        if text:
            yield text


def count_digit_one(n: int) -> int:
    """Count the digit 1 across the decimal forms of 1 to ``n``."""
    if n < 1:
        return 0
    remaining, base, count = n, 1, 0
    while remaining:
        remaining, weight = divmod(remaining, 10)
        count += remaining * base
        if weight == 1:
            count += n % base + 1
        elif weight > 1:
            count += base
        base *= 10
    return count


def nth_digit(n: int) -> int:
    """Return the ``n``-th digit (from 1) of the sequence 123456789101112..."""
    if n < 1:
        raise ValueError("n must be at least 1")
    width, count, start = 1, 9, 1
    while n > count * width:
        n -= count * width
        width += 1
        count *= 10
        start *= 10
    number = start + (n - 1) // width
    return int(str(number)[(n - 1) % width])


def nth_ugly_number(n: int) -> int:
    """Return the ``n``-th number whose only prime factors are 2, 3 and 5."""
    if n < 1:
        raise ValueError("n must be at least 1")
    ugly = [1]
    i2 = i3 = i5 = 0
    while len(ugly) < n:
        m2, m3, m5 = ugly[i2] * 2, ugly[i3] * 3, ugly[i5] * 5
        smallest = min(m2, m3, m5)
        if smallest == m2:
            i2 += 1
        if smallest == m3:
            i3 += 1
        if smallest == m5:
            i5 += 1
        ugly.append(smallest)
    return ugly[-1]


def dice_probabilities(n: int) -> List[Tuple[int, float]]:
    """Return each possible total of ``n`` dice with its probability, by total."""
    if n < 1:
        raise ValueError("need at least one die")
    distribution: Dict[int, float] = {0: 1.0}
    for _ in range(n):
        rolled: Dict[int, float] = defaultdict(float)
        for total, probability in distribution.items():
            for face in range(1, 7):
                rolled[total + face] += probability / 6
        distribution = rolled
    return sorted(distribution.items())


def last_remaining(n: int, m: int) -> int:
    """Return the last of 0..n-1 standing when every ``m``-th one around a circle is removed."""
    if n < 1 or m < 1:
        raise ValueError("n and m must be positive")
    last = 0
    for size in range(2, n + 1):
        last = (last + m) % size
    return last


def sum_to(n: int) -> int:
    """Return 1 + 2 + ... + ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return sum(range(n + 1))


def add(a: int, b: int) -> int:
    """Add two 32-bit integers with bit operations only, wrapping on overflow."""
    a &= _MASK32
    b &= _MASK32
    while b:
        a, b = (a ^ b) & _MASK32, ((a & b) << 1) & _MASK32
    return a - (1 << 32) if a & _SIGN32 else a