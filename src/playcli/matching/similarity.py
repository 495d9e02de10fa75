"""String similarity used for fuzzy project lookup."""

from __future__ import annotations

from playcli.config import DEFAULT_SUBSTRING_SCORE


def levenshtein(a: str, b: str) -> int:
    """Edit distance between two strings with unit insert, delete and substitute costs."""
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(
                min(
                    current[j - 1] + 1,
                    previous[j] + 1,
                    previous[j - 1] + cost,
                )
            )
        previous = current
    return previous[-1]


def similarity(a: str, b: str, *, substring_score: float = DEFAULT_SUBSTRING_SCORE) -> float:
    """Score two strings between 0 and 1, case-insensitively.

    The first rule that applies decides the score:

    1. identical after case folding -> 1.0
    2. one contains the other -> ``substring_score``
    3. otherwise ``1 - levenshtein / max(len)``
    """
    s1 = a.casefold()
    s2 = b.casefold()

    if s1 == s2:
        return 1.0
    if s1 in s2 or s2 in s1:
        return substring_score

    longest = max(len(s1), len(s2))
    return 1.0 - levenshtein(s1, s2) / longest
