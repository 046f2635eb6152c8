"""Number and bit-manipulation exercises."""

from __future__ import annotations

from math import prod

_WORD_BITS = 32


def trailing_zeroes(n: int) -> int:
    """Number of trailing zeros in n factorial."""
    count = 0
    power = 5
    while power <= n:
        count += n // power
        power *= 5
    return count


def factorial(n: int) -> int:
    """n factorial for n of at least 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return prod(range(1, n + 1))


def _check_word(n: int) -> None:
    if not 0 <= n < 1 << _WORD_BITS:
        raise ValueError("n must be an unsigned 32-bit value")


def reverse_bits(n: int) -> int:
    """The 32-bit value whose bits are those of n in reverse order."""
    _check_word(n)
    return int(format(n, f"0{_WORD_BITS}b")[::-1], 2)


def hamming_weight(n: int) -> int:
    """Number of set bits in an unsigned 32-bit value."""
    _check_word(n)
    return bin(n).count("1")


def is_happy(n: int) -> bool:
    """Whether repeatedly summing the squares of the digits reaches 1."""
    seen: set[int] = set()
    current = n
    while current != 1:
        current = sum(int(digit) ** 2 for digit in str(abs(current)))
        if current in seen:
            return False
        seen.add(current)
    return True