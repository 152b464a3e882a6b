"""String puzzles: matching, parsing, permuting and searching."""

from __future__ import annotations

from collections import Counter
from functools import lru_cache
from typing import List, Sequence, Set, Tuple

_DIGITS = "0123456789"
_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)


def replace_spaces(text: str) -> str:
    """Replace every space of ``text`` with ``%20``."""
    return text.replace(" ", "%20")


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be traced through adjacent cells of ``board``,
    using each cell at most once."""
    if not board or not board[0]:
        return False
    rows, cols = len(board), len(board[0])

    def search(index: int, x: int, y: int, visited: Set[Tuple[int, int]]) -> bool:
        if index == len(word):
            return True
        if not (0 <= x < rows and 0 <= y < cols):
            return False
        if (x, y) in visited or board[x][y] != word[index]:
            return False
        visited.add((x, y))
        found = any(search(index + 1, x + dx, y + dy, visited) for dx, dy in _STEPS)
        visited.discard((x, y))
        return found

    return any(search(0, x, y, set()) for x in range(rows) for y in range(cols))


def is_match_recursive(s: str, p: str) -> bool:
    """Tell whether ``p`` (with ``.`` and ``*``) matches the whole of ``s``, recursively."""

    @lru_cache(maxsize=None)
    def match(i: int, j: int) -> bool:
        if j == len(p):
            return i == len(s)
        first = i < len(s) and p[j] in (s[i], ".")
        if j + 1 < len(p) and p[j + 1] == "*":
            return match(i, j + 2) or (first and match(i + 1, j))
        return first and match(i + 1, j + 1)

    return match(0, 0)


def is_match_dp(s: str, p: str) -> bool:
    """Tell whether ``p`` (with ``.`` and ``*``) matches the whole of ``s``, by dynamic programming."""
    m, n = len(s), len(p)
    dp = [[False] * (n + 1) for _ in range(m + 1)]
    dp[0][0] = True
    for i in range(m + 1):
        for j in range(1, n + 1):
            if j > 1 and p[j - 1] == "*":
                dp[i][j] = dp[i][j - 2] or (
                    i > 0 and p[j - 2] in (s[i - 1], ".") and dp[i - 1][j]
                )
            else:
                dp[i][j] = i > 0 and dp[i - 1][j - 1] and p[j - 1] in (s[i - 1], ".")
    return dp[m][n]


def is_number(s: str) -> bool:
    """Tell whether ``s`` spells a decimal number, optionally with a lower-case exponent."""
    seen_digit = False
    digit_after_e = True
    seen_dot = False
    seen_e = False
    seen_sign = False
    last = len(s) - 1
    for i, ch in enumerate(s):
        if ch == " ":
            if i < last and s[i + 1] != " " and (seen_digit or seen_dot or seen_e or seen_sign):
                return False
        elif ch in ("+", "-"):
            if i > 0 and s[i - 1] not in ("e", " "):
                return False
            seen_sign = True
        elif ch in _DIGITS:
            seen_digit = True
            digit_after_e = True
        elif ch == ".":
            if seen_dot or seen_e:
                return False
            seen_dot = True
        elif ch == "e":
            if seen_e or not seen_digit:
                return False
            seen_e = True
            digit_after_e = False
        else:
            return False
    return seen_digit and digit_after_e


def permutations(s: str) -> List[str]:
    """Return the arrangements of the characters of ``s``, built by swapping."""
    chars = list(s)
    result: List[str] = []

    def place(index: int) -> None:
        if index == len(chars):
            result.append("".join(chars))
            return
        for i in range(index, len(chars)):
            if i != index and chars[i] == chars[index]:
                continue
            chars[i], chars[index] = chars[index], chars[i]
            place(index + 1)
            chars[i], chars[index] = chars[index], chars[i]

    place(0)
    return result


def num_decodings(s: str) -> int:
    """Count the ways to read the digits of ``s`` as letters numbered 1 to 26."""
    ways = [1]
    for i, ch in enumerate(s, start=1):
        count = 0 if ch == "0" else ways[-1]
        if i > 1 and (s[i - 2] == "1" or (s[i - 2] == "2" and ch <= "6")):
            count += ways[-2]
        ways.append(count)
    return ways[-1]


def longest_unique_substring(s: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    last_seen = {}
    left = -1
    best = 0
    for i, ch in enumerate(s):
        left = max(left, last_seen.get(ch, -1))
        last_seen[ch] = i
        best = max(best, i - left)
    return best


def first_unique_char(s: str) -> int:
    """Return the index of the first character occurring once in ``s``, or -1."""
    counts = Counter(s)
    return next((i for i, ch in enumerate(s) if counts[ch] == 1), -1)


def reverse_words(s: str) -> str:
    """Reverse the order of the words of ``s``, joining them with single spaces."""
    return " ".join(reversed(s.split()))


def left_rotate(s: str, n: int) -> str:
    """Move the first ``n`` characters of ``s`` to its end."""
    if not 0 <= n <= len(s):
        raise ValueError("rotation must lie between 0 and the length of the string")
    return s[n:] + s[:n]


def str_to_int(s: str) -> int:
    """Parse a leading signed decimal integer, clamped to the 32-bit range; 0 if none."""
    text = s.lstrip(" ")
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    value = 0
    for ch in text:
        if ch not in _DIGITS:
            break
        value = value * 10 + int(ch)
        if value > _INT_MAX:
            return _INT_MAX if sign == 1 else _INT_MIN
    return sign * value


def kmp_next(pattern: str) -> List[int]:
    """Return the failure table of ``pattern`` for Knuth-Morris-Pratt search."""
    if not pattern:
        return []
    table = [-1] * len(pattern)
    j, k = 0, -1
    while j < len(pattern) - 1:
        if k == -1 or pattern[k] == pattern[j]:
            k += 1
            j += 1
            table[j] = k
        else:
            k = table[k]
    return table


def kmp_search(text: str, pattern: str) -> int:
    """Return the index of the first occurrence of ``pattern`` in ``text``, or -1."""
    table = kmp_next(pattern)
    i = j = 0
    while i < len(text) and j < len(pattern):
        if j == -1 or pattern[j] == text[i]:
            i += 1
            j += 1
        else:
            j = table[j]
    return i - j if j == len(pattern) else -1