"""Contest problems that scan a sequence of readings and count or check them."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import chain, pairwise


def matching_games(teams: Sequence[tuple[int, int]]) -> int:
    """Count games where the host wears its guest uniform.

    Each team is a (home, away) colour pair. A game of host ``i`` against
    guest ``j`` counts when the away colour of ``i`` equals the home colour of ``j``.
    """
    home_colours = Counter(home for home, _ in teams)
    return sum(home_colours[away] for _, away in teams)


def rooms_with_space(rooms: Iterable[tuple[int, int]]) -> int:
    """Count rooms (people, capacity) that still have room for two more."""
    return sum(1 for people, capacity in rooms if people <= capacity - 2)


def can_pass_all_levels(
    n: int, x_levels: Iterable[int], y_levels: Iterable[int]
) -> bool:
    """Whether the two players together cover exactly the levels 1 to n."""
    return set(chain(x_levels, y_levels)) == set(range(1, n + 1))


def is_easy(opinions: Iterable[int]) -> bool:
    """A problem is easy unless somebody answered 1 (hard)."""
    return 1 not in opinions


def magnet_groups(magnets: Iterable[int]) -> int:
    """Count groups formed by a row of magnets given as 10 or 1.

    A new group starts wherever a magnet differs from the one before it.
    """
    return sum(
        1 for previous, current in pairwise(chain([0], magnets)) if previous != current
    )


def stay_or_mirror(values: Iterable[int]) -> int:
    """Count descents scanned left to right, skipping past each one found."""
    count = 0
    pairs = pairwise(values)
    for left, right in pairs:
        if left > right:
            count += 1
            next(pairs, None)
    return count


def problems_solved(votes: Iterable[Iterable[int]]) -> int:
    """Count problems that at least two of the three friends are sure about."""
    return sum(1 for vote in votes if sum(1 for sure in vote if sure) > 1)


def tram_capacity(stops: Iterable[tuple[int, int]]) -> int:
    """Smallest capacity that holds everybody, given (exiting, entering) per stop."""
    passengers = 0
    capacity = 0
    for exiting, entering in stops:
        passengers += entering - exiting
        capacity = max(capacity, passengers)
    return capacity


def fence_width(h: int, heights: Iterable[int]) -> int:
    """Road width needed: friends taller than the fence h must bend and take two."""
    return sum(1 if height <= h else 2 for height in heights)


def advancers(k: int, scores: Iterable[int]) -> int:
    """Count participants advancing: positive scores in the top k, plus ties after.

    Scores are expected in non-increasing order. Scanning stops at the first
    participant who neither sits in the top k with a positive score nor ties
    the previous positive score.
    """
    count = 0
    previous = 0
    for place, score in enumerate(scores):
        if score > 0 and place < k:
            count += 1
        elif score > 0 and score == previous:
            count += 1
        else:
            break
        previous = score
    return count