"""Array puzzles: reordering, subarrays, counting and sequences."""

from __future__ import annotations

from collections import deque
from functools import cmp_to_key
from typing import List, MutableSequence, Optional, Sequence, Tuple


def reorder_odd_even_stable(nums: MutableSequence[int]) -> None:
    """Move odd values before even ones in place, keeping relative order."""
    nums[:] = [v for v in nums if v % 2] + [v for v in nums if not v % 2]


def reorder_odd_even(nums: MutableSequence[int]) -> None:
    """Move odd values before even ones in place, order not preserved."""
    left, right = 0, len(nums) - 1
    while left <= right:
        while left <= right and nums[left] % 2 == 1:
            left += 1
        while left <= right and nums[right] % 2 == 0:
            right -= 1
        if left < right:
            nums[left], nums[right] = nums[right], nums[left]


def spiral_order(matrix: Sequence[Sequence[int]]) -> List[int]:
    """Return the values of ``matrix`` in clockwise spiral order."""
    if not matrix or not matrix[0]:
        return []
    up, down = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: List[int] = []
    while True:
        result.extend(matrix[up][left:right + 1])
        up += 1
        if up > down:
            break
        result.extend(matrix[i][right] for i in range(up, down + 1))
        right -= 1
        if right < left:
            break
        result.extend(matrix[down][i] for i in range(right, left - 1, -1))
        down -= 1
        if down < up:
            break
        result.extend(matrix[i][left] for i in range(down, up - 1, -1))
        left += 1
        if left > right:
            break
    return result


def validate_stack_sequences(pushed: Sequence[int], popped: Sequence[int]) -> bool:
    """Tell whether ``popped`` can be a pop order of a stack fed by ``pushed``."""
    stack: List[int] = []
    pending = iter(pushed)
    for target in popped:
        while not stack or stack[-1] != target:
            try:
                stack.append(next(pending))
            except StopIteration:
                return False
        stack.pop()
    return not stack


def more_than_half(nums: Sequence[int]) -> Optional[int]:
    """Return the value occurring in more than half of ``nums``, or None."""
    if not nums:
        return None
    candidate, count = nums[0], 1
    for value in nums[1:]:
        count += 1 if value == candidate else -1
        if count == 0:
            candidate, count = value, 1
    if nums.count(candidate) > len(nums) // 2:
        return candidate
    return None


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("empty array")
    current = 0
    best = nums[0]
    for value in nums:
        current = max(current + value, value)
        best = max(best, current)
    return best


def largest_number(nums: Sequence[int]) -> str:
    """Concatenate ``nums`` into the largest possible decimal string."""
    if not nums:
        return ""

    def order(x: str, y: str) -> int:
        if x + y > y + x:
            return -1
        if x + y < y + x:
            return 1
        return 0

    result = "".join(sorted(map(str, nums), key=cmp_to_key(order)))
    return "0" if result[0] == "0" else result


def max_gift_value(values: Sequence[Sequence[int]]) -> int:
    """Return the best total collected moving right or down across the board."""
    if not values or not values[0]:
        return 0
    best = [0] * len(values[0])
    for row in values:
        running = 0
        for j, value in enumerate(row):
            running = max(running, best[j]) + value if j else best[0] + value
            best[j] = running
    return best[-1]


def _sort_and_count(values: List[int]) -> Tuple[List[int], int]:
    if len(values) <= 1:
        return values, 0
    mid = len(values) // 2
    left, left_count = _sort_and_count(values[:mid])
    right, right_count = _sort_and_count(values[mid:])
    merged: List[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            count += len(left) - i
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def inverse_pairs(nums: Sequence[int]) -> int:
    """Count pairs ``i < j`` with ``nums[i] > nums[j]``."""
    return _sort_and_count(list(nums))[1]


def numbers_appearing_once(nums: Sequence[int]) -> Tuple[int, int]:
    """Return the two values that occur once where every other occurs twice."""
    if len(nums) < 2:
        raise ValueError("need at least two values")
    combined = 0
    for value in nums:
        combined ^= value
    lowest_bit = combined & -combined
    first = second = 0
    for value in nums:
        if value & lowest_bit:
            first ^= value
        else:
            second ^= value
    return first, second


def number_appearing_once(nums: Sequence[int]) -> int:
    """Return the 32-bit value that occurs once where every other occurs thrice."""
    if not nums:
        raise ValueError("Invalid input.")
    bit_counts = [0] * 32
    for value in nums:
        for bit in range(32):
            if (value >> bit) & 1:
                bit_counts[bit] += 1
    result = sum((count % 3) << bit for bit, count in enumerate(bit_counts))
    if result >= 1 << 31:
        result -= 1 << 32
    return result


def two_sum_sorted(nums: Sequence[int], target: int) -> Optional[Tuple[int, int]]:
    """Return two values of ascending ``nums`` summing to ``target``, or None."""
    left, right = 0, len(nums) - 1
    while left < right:
        total = nums[left] + nums[right]
        if total == target:
            return nums[left], nums[right]
        if total < target:
            left += 1
        else:
            right -= 1
    return None


def continuous_sequences(total: int) -> List[List[int]]:
    """Return every run of at least two consecutive positive integers summing to ``total``."""
    result: List[List[int]] = []
    if total < 3:
        return result
    limit = (total + 1) // 2
    small, big = 1, 2
    current = small + big
    while small < big and big <= limit:
        if current == total:
            result.append(list(range(small, big + 1)))
            current -= small
            small += 1
        elif current < total:
            big += 1
            current += big
        else:
            current -= small
            small += 1
    return result


def max_sliding_window(nums: Sequence[int], k: int) -> List[int]:
    """Return the maximum of every window of ``k`` consecutive values."""
    if k < 1:
        raise ValueError("window size must be positive")
    result: List[int] = []
    window: deque = deque()
    for i, value in enumerate(nums):
        if window and i - window[0] == k:
            window.popleft()
        while window and nums[window[-1]] < value:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(nums[window[0]])
    return result


def is_straight(cards: Sequence[int]) -> bool:
    """Tell whether five cards (1..13, 0 wild) form a straight."""
    if len(cards) != 5:
        return False
    seen = set()
    low, high = 14, -1
    for card in cards:
        if card < 0 or card > 13:
            return False
        if card == 0:
            continue
        if card in seen:
            return False
        seen.add(card)
        low, high = min(low, card), max(high, card)
        if high - low >= 5:
            return False
    return True


def max_profit(prices: Sequence[int]) -> int:
    """Return the best gain from one purchase followed by one sale."""
    lowest = float("inf")
    best = 0
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def product_array(nums: Sequence[int]) -> List[int]:
    """Return, for each position, the product of all other values."""
    if not nums:
        return []
    result = [1] * len(nums)
    for i in range(1, len(nums)):
        result[i] = result[i - 1] * nums[i - 1]
    suffix = 1
    for i in range(len(nums) - 2, -1, -1):
        suffix *= nums[i + 1]
        result[i] *= suffix
    return result