"""Small numeric helpers and star patterns."""

from collections.abc import Iterable

__all__ = ["average", "factorial", "triangle_pattern", "reversed_triangle_pattern"]


def average(values: Iterable[float]) -> float:
    """Return the arithmetic mean of the values."""
    numbers = list(values)
    if not numbers:
        raise ValueError("cannot average an empty collection")
    return sum(numbers) / len(numbers)


def factorial(number: int) -> int:
    """Return number! for a non-negative integer."""
    if number < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for factor in range(2, number + 1):
        result *= factor
    return result


def triangle_pattern(rows: int) -> str:
    """Return rows lines of stars, growing from one star to rows stars."""
    return "".join("*" * width + "\n" for width in range(1, rows + 1))


def reversed_triangle_pattern(rows: int) -> str:
    """Return rows lines of stars, shrinking from rows stars to one star."""
    return "".join("*" * width + "\n" for width in range(rows, 0, -1))