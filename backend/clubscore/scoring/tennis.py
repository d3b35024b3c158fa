"""Tennis scoring engine.
Validates completed set scores and resolves best-of-three matches."""

from enum import Enum
from typing import NamedTuple, Optional, Sequence

SUPER_TIEBREAK_TARGET = 10
# A played third set is always judged as a super tiebreak when resolving
# the match winner.
DECIDER_IS_SUPER_TIEBREAK = True
DECIDER_INDEX = 2


class Side(str, Enum):
    A = "A"
    B = "B"


class SetsWon(NamedTuple):
    sets_a: int
    sets_b: int


def is_valid_set(games_a: int, games_b: int, super_tiebreak: bool = False) -> bool:
    """Return ``True`` if ``games_a``-``games_b`` is a completed, legal set.

    Standard sets end 6-0 through 6-4, 7-5 or 7-6. A super tiebreak is won
    by the first side to reach 10 with a two point margin.
    """
    winner = max(games_a, games_b)
    loser = min(games_a, games_b)

    if super_tiebreak:
        return winner >= SUPER_TIEBREAK_TARGET and winner - loser >= 2

    if winner == 6 and loser <= 4:
        return True
    if winner == 7 and loser == 5:
        return True
    # tiebreak
    if winner == 7 and loser == 6:
        return True
    return False


def get_set_winner(
    games_a: int, games_b: int, super_tiebreak: bool = False
) -> Optional[Side]:
    """Return the side that won the set, or ``None`` if it is not decided."""
    if not is_valid_set(games_a, games_b, super_tiebreak):
        return None
    if games_a > games_b:
        return Side.A
    if games_b > games_a:
        return Side.B
    return None


def infer_super_tiebreak(index: int, games_a: int, games_b: int) -> bool:
    """Guess whether the set at ``index`` was played as a super tiebreak.

    Only the third set can be one, and only when either side's count looks
    like tiebreak points rather than games.
    """
    return index == DECIDER_INDEX and (
        games_a >= SUPER_TIEBREAK_TARGET or games_b >= SUPER_TIEBREAK_TARGET
    )


def count_sets_won(scores_a: Sequence[int], scores_b: Sequence[int]) -> SetsWon:
    """Count the sets won by each side over the overlapping prefix."""
    sets_a = sets_b = 0
    for index, (ga, gb) in enumerate(zip(scores_a, scores_b)):
        winner = get_set_winner(ga, gb, infer_super_tiebreak(index, ga, gb))
        if winner is Side.A:
            sets_a += 1
        elif winner is Side.B:
            sets_b += 1
    return SetsWon(sets_a, sets_b)


def needs_third_set(scores_a: Sequence[int], scores_b: Sequence[int]) -> bool:
    """Return ``True`` when the first two sets are split one apiece."""
    return count_sets_won(scores_a, scores_b) == (1, 1)


def get_match_winner(
    scores_a: Sequence[int], scores_b: Sequence[int]
) -> Optional[Side]:
    """Resolve the winner of a best-of-three match.

    The first side to two sets wins. Failing that, a played third set is
    re-judged under the decider rule, so a match tied at a set apiece can
    still be settled by its super tiebreak.
    """
    sets_played = min(len(scores_a), len(scores_b))
    sets_a, sets_b = count_sets_won(scores_a, scores_b)

    if sets_a >= 2:
        return Side.A
    if sets_b >= 2:
        return Side.B

    if sets_played > DECIDER_INDEX:
        return get_set_winner(
            scores_a[DECIDER_INDEX],
            scores_b[DECIDER_INDEX],
            DECIDER_IS_SUPER_TIEBREAK,
        )
    return None
