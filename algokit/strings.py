"""String and expression exercises."""

from __future__ import annotations

import operator
from functools import cmp_to_key
from typing import Callable, Sequence


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def is_palindrome(s: str) -> bool:
    """Whether s reads the same both ways, ignoring case and non-alphanumerics."""
    kept = [c.lower() for c in s if c.isascii() and c.isalnum()]
    return kept == kept[::-1]


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def eval_rpn(tokens: Sequence[str]) -> int:
    """Evaluate integer arithmetic in reverse Polish notation."""
    stack: list[int] = []
    for token in tokens:
        op = _OPERATORS.get(token)
        if op is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(op(left, right))
    if not stack:
        raise ValueError("expression has no operands")
    return stack[-1]


def fraction_to_decimal(numerator: int, denominator: int) -> str:
    """Decimal form of a fraction, with any repeating part in parentheses."""
    if denominator == 0:
        raise ZeroDivisionError("denominator must not be zero")
    sign = "-" if numerator != 0 and (numerator < 0) != (denominator < 0) else ""
    num, den = abs(numerator), abs(denominator)
    whole, remainder = divmod(num, den)
    digits: list[str] = []
    seen: dict[int, int] = {}
    while remainder:
        if remainder in seen:
            start = seen[remainder]
            fixed = "".join(digits[:start])
            repeating = "".join(digits[start:])
            return f"{sign}{whole}.{fixed}({repeating})"
        seen[remainder] = len(digits)
        digit, remainder = divmod(remainder * 10, den)
        digits.append(str(digit))
    fraction = "." + "".join(digits) if digits else ""
    return f"{sign}{whole}{fraction}"


def title_to_number(s: str) -> int:
    """Column number of a spreadsheet column title such as 'A' or 'ZY'."""
    result = 0
    for c in s:
        result = result * 26 + ord(c) - ord("A") + 1
    return result


def is_bigger(a: int, b: int) -> bool:
    """Whether a should precede b to form the larger concatenated number."""
    return str(a) + str(b) > str(b) + str(a)


def _compare(a: int, b: int) -> int:
    if is_bigger(a, b):
        return -1
    if is_bigger(b, a):
        return 1
    return 0


def largest_number(nums: Sequence[int]) -> str:
    """The largest number formed by concatenating all of nums."""
    if not nums:
        raise ValueError("nums must not be empty")
    ordered = sorted(nums, key=cmp_to_key(_compare))
    if ordered[0] == 0:
        return "0"
    return "".join(str(n) for n in ordered)


def _fold(op: str, total: int, last: int, current: int) -> tuple[int, int]:
    if op == "+":
        total += last
    elif op == "-":
        total += last
        current = -current
    elif op == "*":
        current *= last
    else:
        current = _truncating_div(last, current)
    return total, current


def calculate(s: str) -> int:
    """Evaluate non-negative integers joined by + - * / with usual precedence."""
    total = last = current = 0
    pending = "+"
    for c in s:
        if c in "+-*/":
            total, current = _fold(pending, total, last, current)
            pending = c
            last = current
            current = 0
        elif "0" <= c <= "9":
            current = current * 10 + int(c)
    total, current = _fold(pending, total, last, current)
    return total + current


def _apply(op: str, left: int, right: int) -> int:
    return _OPERATORS[op](left, right)


def calculate_with_stacks(s: str) -> int:
    """Evaluate the same expressions as :func:`calculate` using two stacks."""
    ops: list[str] = []
    nums: list[int] = []
    last_was_digit = False
    for c in s:
        if c == " ":
            continue
        if "0" <= c <= "9":
            digit = int(c)
            if last_was_digit:
                prev = nums.pop()
                nums.append(prev * 10 + digit if prev > 0 else prev * 10 - digit)
            elif ops and ops[-1] == "-":
                ops[-1] = "+"
                nums.append(-digit)
            else:
                nums.append(digit)
            last_was_digit = True
            continue
        if c not in _OPERATORS:
            raise ValueError(f"unexpected character {c!r}")
        last_was_digit = False
        if ops and ops[-1] in ("*", "/"):
            right = nums.pop()
            left = nums.pop()
            nums.append(_apply(ops.pop(), left, right))
        if c in ("+", "-"):
            while ops and len(nums) > 1:
                right = nums.pop()
                left = nums.pop()
                if ops[-1] in ("+", "-"):
                    nums.append(_apply(ops.pop(), left, right))
        ops.append(c)
    while ops and len(nums) > 1:
        right = nums.pop()
        left = nums.pop()
        nums.append(_apply(ops.pop(), left, right))
    if not nums:
        raise ValueError("expression has no numbers")
    return nums[-1]