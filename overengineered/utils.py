"""Integer and string helpers used by menus and the HUD."""

from __future__ import annotations


def digits(n: int) -> int:
    """Return how many digits a positive integer has; 0 for n <= 0."""
    count = 0
    while n > 0:
        count += 1
        n //= 10
    return count


def digitize(n: int) -> str:
    """Return the digit character for 0..9, or '-' for anything above 9."""
    if n > 9:
        return "-"
    return chr(ord("0") + n)


def stringify(n: int, prefix: str = "") -> str:
    """Append the decimal digits of n to prefix.

    A negative number puts its minus sign in front of the whole prefix.
    """
    if n == 0:
        return prefix + "0"
    if n < 0:
        prefix = "-" + prefix
        n = -n
    return prefix + str(n)


def leftpad(n: int, text: str) -> str:
    """Pad text on the left with spaces to n characters.

    A longer text is cut to its first n - 1 characters.
    """
    length = len(text)
    if length > n:
        return text[: n - 1] if n > 0 else text
    return " " * (n - length) + text