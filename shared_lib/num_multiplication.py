"""Grade-school multiplication of non-negative decimal digit strings."""
from typing import List

from shared_lib.utils import validate_digit_string

BASE = 10


def reverse_digits(s: str) -> List[int]:
    """Digits of ``s`` as ints, least significant first."""
    return [ord(ch) - 48 for ch in reversed(s)]


def _normalize(acc: List[int]) -> List[int]:
    # single low-to-high pass, every slot ends up in 0..9
    carry = 0
    for idx, value in enumerate(acc):
        value += carry
        acc[idx] = value % BASE
        carry = value // BASE
    if carry:
        raise ArithmeticError("accumulator overflowed its most significant slot")
    return acc


def multiply_decimal_strings(s1: str, s2: str) -> str:
    """Exact product of two digit strings, without leading zeros.

    Inputs may carry leading zeros. Raises MalformedInputError for an empty
    string or any character outside '0'-'9'.

    Carry bound: inside the inner loop a slot holds at most 9*9 + 9 + 9 = 99,
    so the running carry never exceeds 9 and the leftover carry lands in a
    slot the current row has not touched yet. One extra carry per row is
    therefore enough in base 10; the final normalization pass keeps the result
    valid for any slot that still exceeds a single digit.
    """
    validate_digit_string(s1, "s1")
    validate_digit_string(s2, "s2")

    d1 = reverse_digits(s1)
    d2 = reverse_digits(s2)
    n1, n2 = len(d1), len(d2)
    acc = [0] * (n1 + n2)

    for i, digit1 in enumerate(d1):
        if digit1 == 0:
            continue
        carry = 0
        for j, digit2 in enumerate(d2):
            product = digit1 * digit2 + acc[i + j] + carry
            carry = product // BASE
            acc[i + j] = product % BASE
        if carry:
            acc[i + n2] += carry

    _normalize(acc)

    top = len(acc) - 1
    while top > 0 and acc[top] == 0:
        top -= 1
    return "".join(chr(48 + d) for d in reversed(acc[:top + 1]))
