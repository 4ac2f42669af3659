"""Number puzzles: sequences, primes, triplets, triangles and planetary ages."""

from __future__ import annotations

import math
from enum import Enum, IntEnum

_BOARD_SQUARES = 64
_EARTH_YEAR_SECONDS = 3600.0 * 8765.82


def collatz_steps(number: int) -> int:
    """Count the Collatz steps needed to reach 1 from ``number``."""
    if number <= 0:
        raise ValueError("number must be a positive integer")
    steps = 0
    while number != 1:
        number = number // 2 if number % 2 == 0 else number * 3 + 1
        steps += 1
    return steps


def square_of_sum(n: int) -> int:
    """Square of the sum of 1..n."""
    total = n * (n + 1) // 2
    return total * total


def sum_of_squares(n: int) -> int:
    """Sum of the squares of 1..n."""
    return n * (n + 1) * (2 * n + 1) // 6


def difference(n: int) -> int:
    """Square of the sum minus the sum of the squares of 1..n."""
    return square_of_sum(n) - sum_of_squares(n)


def grains_square(number: int) -> int:
    """Grains on the given chessboard square, doubling from one on the first."""
    if not 1 <= number <= _BOARD_SQUARES:
        raise ValueError(f"square must be between 1 and {_BOARD_SQUARES}")
    return 1 << (number - 1)


def grains_total() -> int:
    """Total grains on the whole chessboard."""
    return (1 << _BOARD_SQUARES) - 1


def is_leap_year(year: int) -> bool:
    """Tell whether ``year`` is a leap year in the Gregorian calendar."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def sieve(limit: int) -> list[int]:
    """Return the primes from 2 up to and including ``limit``."""
    if limit < 2:
        return []
    composite = [False] * (limit + 1)
    primes: list[int] = []
    for candidate in range(2, limit + 1):
        if composite[candidate]:
            continue
        primes.append(candidate)
        for multiple in range(candidate * candidate, limit + 1, candidate):
            composite[multiple] = True
    return primes


def sum_multiples(limit: int, *args: int) -> int:
    """Sum the numbers in [1, limit) divisible by any of the given divisors.

    A divisor of zero contributes nothing.
    """
    divisors = [d for d in args if d != 0]
    return sum(n for n in range(1, limit) if any(n % d == 0 for d in divisors))


def is_square(value: int) -> bool:
    """Tell whether ``value`` is a perfect square."""
    if value < 0:
        return False
    root = math.isqrt(value)
    return root * root == value


def pythagorean_range(low: int, high: int) -> list[tuple[int, int, int]]:
    """Pythagorean triplets whose sides all lie in [low, high]."""
    triplets: list[tuple[int, int, int]] = []
    for a in range(low, high + 1):
        for b in range(a + 1, high + 1):
            hyp_sq = a * a + b * b
            c = math.isqrt(hyp_sq)
            if c <= high and c * c == hyp_sq:
                triplets.append((a, b, c))
    return triplets


def pythagorean_sum(perimeter: int) -> list[tuple[int, int, int]]:
    """Pythagorean triplets whose sides add up to ``perimeter``."""
    half = perimeter // 2
    triplets: list[tuple[int, int, int]] = []
    for a in range(1, half):
        for b in range(a + 1, half):
            hyp_sq = a * a + b * b
            c = math.isqrt(hyp_sq)
            if c * c == hyp_sq and a + b + c == perimeter:
                triplets.append((a, b, c))
    return triplets


class TriangleKind(IntEnum):
    """The kind of triangle three sides make."""

    NOT_A_TRIANGLE = 0
    EQUILATERAL = 1
    ISOSCELES = 2
    SCALENE = 3


def kind_from_sides(a: float, b: float, c: float) -> TriangleKind:
    """Classify the triangle with sides ``a``, ``b`` and ``c``.

    Degenerate triangles, whose sides just meet the triangle inequality,
    still count as triangles.
    """
    sides = (a, b, c)
    if (
        any(not math.isfinite(side) or side == 0 for side in sides)
        or a + b < c
        or a + c < b
        or b + c < a
    ):
        return TriangleKind.NOT_A_TRIANGLE
    if a == b == c:
        return TriangleKind.EQUILATERAL
    if a == b or b == c or a == c:
        return TriangleKind.ISOSCELES
    return TriangleKind.SCALENE


class Planet(str, Enum):
    """Planets of the solar system."""

    EARTH = "Earth"
    MERCURY = "Mercury"
    VENUS = "Venus"
    MARS = "Mars"
    JUPITER = "Jupiter"
    SATURN = "Saturn"
    URANUS = "Uranus"
    NEPTUNE = "Neptune"


_ORBITAL_PERIODS: dict[Planet, float] = {
    Planet.EARTH: 1.0,
    Planet.MERCURY: 0.2408467,
    Planet.VENUS: 0.61519726,
    Planet.MARS: 1.8808158,
    Planet.JUPITER: 11.862615,
    Planet.SATURN: 29.447498,
    Planet.URANUS: 84.016846,
    Planet.NEPTUNE: 164.79132,
}


def age(seconds: float, planet: Planet | str) -> float:
    """Age in years on ``planet`` of someone ``seconds`` old.

    Raises ValueError for an unknown planet name.
    """
    period = _ORBITAL_PERIODS[Planet(planet)]
    return seconds / (_EARTH_YEAR_SECONDS * period)