"""Number-crunching contest problems: counting, greedy change and digit checks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

POLYHEDRON_FACES = {
    "Tetrahedron": 4,
    "Cube": 6,
    "Octahedron": 8,
    "Dodecahedron": 12,
    "Icosahedron": 20,
}

BILL_VALUES = (100, 20, 10, 5, 1)


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def polyhedron_faces(shapes: Iterable[str]) -> int:
    """Total faces of the named polyhedra; unknown names add nothing."""
    return sum(POLYHEDRON_FACES.get(shape, 0) for shape in shapes)


def count_divisible(a: int, b: int, k: int) -> int:
    """Count the integers in [a, b] divisible by k."""
    if k == 0:
        raise ValueError("divisor must be non-zero")
    if a > b:
        return 0
    k = abs(k)
    return b // k - (a - 1) // k


def years_to_outgrow(a: int, b: int) -> int:
    """Years until a weight tripling yearly exceeds one doubling yearly."""
    years = 0
    while True:
        a *= 3
        b *= 2
        years += 1
        if a > b:
            return years
        if a <= 0:
            raise ValueError("the first weight never exceeds the second")


def _has_distinct_digits(year: int) -> bool:
    digits = [(year // 10**place) % 10 for place in range(4)]
    return len(set(digits)) == 4


def next_beautiful_year(year: int) -> int:
    """Smallest later year whose last four digits are all different."""
    if year < 0:
        raise ValueError("year must not be negative")
    candidate = year + 1
    while not _has_distinct_digits(candidate):
        candidate += 1
    return candidate


def candy_ways(n: int) -> int:
    """Ways to split n candies so the first sister gets strictly more, both some."""
    return (n - 1) // 2 if n > 2 else 0


def domino_count(m: int, n: int) -> int:
    """Most 2x1 dominoes that fit on an m by n board."""
    return _trunc_div(m * n, 2)


def orange_fraction(volumes: Sequence[float]) -> float:
    """Mean fraction of orange juice when equal amounts of each drink are mixed."""
    count = len(volumes)
    return sum(volume / count for volume in volumes)


def elephant_steps(x: int) -> int:
    """Fewest steps of length at most five needed to reach point x."""
    return max(1, -(-x // 5))


def lottery_bills(n: int) -> int:
    """Fewest bills of 1, 5, 10, 20 and 100 that add up to n."""
    if n < 0:
        raise ValueError("amount must not be negative")
    bills = 0
    for value in BILL_VALUES:
        count, n = divmod(n, value)
        bills += count
    return bills


def damaged_dragons(k: int, l: int, m: int, n: int, d: int) -> int:
    """Count dragons among the first d that are hit by every k-th, l-th, m-th or n-th blow."""
    divisors = (k, l, m, n)
    if 1 in divisors:
        return d
    if any(divisor <= 0 for divisor in divisors):
        raise ValueError("divisors must be positive")
    return sum(
        1
        for dragon in range(1, d + 1)
        if any(dragon % divisor == 0 for divisor in divisors)
    )


def is_nearly_lucky(n: int) -> bool:
    """True when the count of digits 4 and 7 in n is itself 4 or 7."""
    if n < 0:
        raise ValueError("number must not be negative")
    digits = str(n) if n else ""
    lucky = sum(1 for digit in digits if digit in "47")
    return lucky in (4, 7)


def banana_loan(k: int, n: int, w: int) -> int:
    """Money to borrow to buy w bananas costing k, 2k, ... wk with n in hand."""
    total = sum(i * k for i in range(w + 1)) - n
    return max(total, 0)


def wrong_subtraction(n: int, k: int) -> int:
    """Apply k times: drop a trailing zero, otherwise subtract one."""
    for _ in range(k):
        n = n // 10 if n % 10 == 0 else n - 1
    return n


def greedy_grid(n: int, m: int) -> bool:
    """Whether an n by m grid admits the required greedy path (YES/NO)."""
    if n <= 1 or m <= 1:
        return False
    return not (n <= 2 and m <= 2)