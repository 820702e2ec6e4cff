"""String puzzles: character counting, patterns and simple transformations."""

from __future__ import annotations


def gender_verdict(name: str) -> str:
    """Verdict from the parity of the number of distinct characters in ``name``."""
    if len(set(name)) % 2 == 0:
        return "CHAT WITH HER!"
    return "IGNORE HIM!"


def snake_pattern(n: int, m: int) -> str:
    """An ``n`` by ``m`` snake drawn with '#' on '.', rows joined by newlines."""
    rows = []
    odd_rows_seen = 0
    for i in range(n):
        if i % 2 == 0:
            rows.append("#" * m)
            continue
        if odd_rows_seen % 2 == 0:
            rows.append("." * (m - 1) + "#")
        else:
            rows.append("#" + "." * (m - 1))
        odd_rows_seen += 1
    return "\n".join(rows)


def is_nearly_lucky(number: int | str) -> bool:
    """Whether the count of lucky digits (4 and 7) is itself 4 or 7."""
    lucky = sum(1 for ch in str(number) if ch in "47")
    return lucky in (4, 7)


def stones_to_remove(stones: str) -> int:
    """Stones to take so that no two neighbouring stones share a colour."""
    return sum(1 for a, b in zip(stones, stones[1:]) if a == b)


def ultra_fast_xor(a: str, b: str) -> str:
    """Digit-wise difference of two equally long binary strings."""
    if len(a) != len(b):
        raise ValueError("numbers must have the same length")
    return "".join("0" if x == y else "1" for x, y in zip(a, b))


def capitalize_word(word: str) -> str:
    """``word`` with its first letter upper-cased and the rest untouched."""
    return word[:1].upper() + word[1:]


def hulk_feelings(n: int) -> str:
    """Hulk's sentence with ``n`` layers of alternating hate and love."""
    parts = ["I hate "]
    for i in range(1, n):
        parts.append("that I hate " if i % 2 == 0 else "that I love ")
    if n >= 1:
        parts.append("it")
    return "".join(parts)


def is_reversed_translation(s: str, t: str) -> bool:
    """Whether ``t`` is ``s`` written backwards."""
    return s[::-1] == t