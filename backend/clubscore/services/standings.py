"""Group standings for championship round-robin stages."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, fields
from functools import cmp_to_key
from typing import Iterable, Mapping, Sequence

from ..exceptions import UnknownResultType
from ..scoring.tennis import Side, get_match_winner

logger = logging.getLogger(__name__)

RESULT_PLAYED = "played"
RESULT_TECHNICAL_DRAW = "technical_draw"
SUPPORTED_RESULT_TYPES = {RESULT_PLAYED, RESULT_TECHNICAL_DRAW}

KNOCKOUT_ROUND_PREFIX = "mata-mata"
KNOCKOUT_MATCH_PHASES = frozenset(
    {
        "Oitavas",
        "Quartas",
        "Semi",
        "Final",
        "round_of_16",
        "quarterfinal",
        "semifinal",
        "final",
    }
)


@dataclass(frozen=True)
class ScoringConfig:
    pts_victory: float = 3
    pts_defeat: float = 0
    pts_set: float = 0
    pts_game: float = 0
    pts_technical_draw: float = 0


@dataclass(frozen=True)
class Registration:
    id: str
    group: str | None = None


@dataclass
class GroupMatch:
    id: str
    registration_a: str | None
    registration_b: str | None
    score_a: Sequence[int] = field(default_factory=list)
    score_b: Sequence[int] = field(default_factory=list)
    status: str = "finished"
    result_type: str | None = None
    winner: Side | None = None


@dataclass
class Standing:
    registration_id: str
    group: str | None = None
    points: float = 0
    matches_played: int = 0
    wins: int = 0
    losses: int = 0
    sets_won: int = 0
    sets_lost: int = 0
    games_won: int = 0
    games_lost: int = 0

    @property
    def sets_diff(self) -> int:
        return self.sets_won - self.sets_lost

    @property
    def games_diff(self) -> int:
        return self.games_won - self.games_lost


def _pick_number(value: object, fallback: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return fallback
    if not math.isfinite(value):
        return fallback
    return value


def merge_scoring(config: ScoringConfig | Mapping[str, object] | None = None) -> ScoringConfig:
    """Overlay ``config`` onto the default points table.

    Unset, non-numeric and non-finite entries keep their default value.
    """
    if config is None:
        return ScoringConfig()
    if isinstance(config, ScoringConfig):
        values = {f.name: getattr(config, f.name) for f in fields(config)}
    else:
        values = dict(config)

    defaults = ScoringConfig()
    return ScoringConfig(
        **{
            f.name: _pick_number(values.get(f.name), getattr(defaults, f.name))
            for f in fields(defaults)
        }
    )


def _sum_games(scores: Sequence[int] | None) -> int:
    return sum(value or 0 for value in (scores or []))


def _raw_set_wins(score_a: Sequence[int], score_b: Sequence[int]) -> tuple[int, int]:
    # Sets are compared game for game; a side without an entry has 0 games.
    sets_a = sets_b = 0
    for index in range(max(len(score_a), len(score_b))):
        a = (score_a[index] or 0) if index < len(score_a) else 0
        b = (score_b[index] or 0) if index < len(score_b) else 0
        if a > b:
            sets_a += 1
        elif b > a:
            sets_b += 1
    return sets_a, sets_b


def _is_finished(match: GroupMatch) -> bool:
    return match.status == "finished"


def resolve_winner(match: GroupMatch) -> Side | None:
    """Return the recorded winner, or resolve it from the set scores."""
    if match.winner is not None:
        return Side(match.winner)
    return get_match_winner(list(match.score_a or []), list(match.score_b or []))


def resolve_result_type(match: GroupMatch) -> str:
    if match.result_type:
        if match.result_type not in SUPPORTED_RESULT_TYPES:
            raise UnknownResultType(match.result_type)
        return match.result_type

    has_score = _sum_games(match.score_a) + _sum_games(match.score_b) > 0
    if match.winner is None and not has_score:
        return RESULT_TECHNICAL_DRAW
    return RESULT_PLAYED


def _winner_registration(match: GroupMatch) -> str | None:
    winner = resolve_winner(match)
    if winner is Side.A:
        return match.registration_a
    if winner is Side.B:
        return match.registration_b
    return None


def _head_to_head_wins(
    registration: str, opponent: str, matches: Sequence[GroupMatch]
) -> int:
    wins = 0
    for match in matches:
        if not _is_finished(match):
            continue
        if not match.registration_a or not match.registration_b:
            continue
        if {match.registration_a, match.registration_b} != {registration, opponent}:
            continue
        if _winner_registration(match) == registration:
            wins += 1
    return wins


def calculate_group_standings(
    registrations: Iterable[Registration],
    matches: Sequence[GroupMatch],
    config: ScoringConfig | Mapping[str, object] | None = None,
) -> list[Standing]:
    """Build the ordered standings table for a group.

    Ties on points are broken by head-to-head wins, then set difference,
    then game difference and finally by registration id.
    """
    scoring = merge_scoring(config)
    standings: dict[str, Standing] = {
        reg.id: Standing(registration_id=reg.id, group=reg.group)
        for reg in registrations
    }

    for match in matches:
        if not _is_finished(match):
            continue

        reg_a, reg_b = match.registration_a, match.registration_b
        if not reg_a or not reg_b or reg_a not in standings or reg_b not in standings:
            logger.debug("Skipping match %s with unknown registrations", match.id)
            continue

        stat_a = standings[reg_a]
        stat_b = standings[reg_b]
        result_type = resolve_result_type(match)

        stat_a.matches_played += 1
        stat_b.matches_played += 1

        if result_type == RESULT_TECHNICAL_DRAW:
            stat_a.points += scoring.pts_technical_draw
            stat_b.points += scoring.pts_technical_draw
            continue

        score_a = list(match.score_a or [])
        score_b = list(match.score_b or [])
        sets_a, sets_b = _raw_set_wins(score_a, score_b)
        games_a = _sum_games(score_a)
        games_b = _sum_games(score_b)

        stat_a.sets_won += sets_a
        stat_a.sets_lost += sets_b
        stat_a.games_won += games_a
        stat_a.games_lost += games_b

        stat_b.sets_won += sets_b
        stat_b.sets_lost += sets_a
        stat_b.games_won += games_b
        stat_b.games_lost += games_a

        stat_a.points += sets_a * scoring.pts_set + games_a * scoring.pts_game
        stat_b.points += sets_b * scoring.pts_set + games_b * scoring.pts_game

        winner = _winner_registration(match)
        if winner == reg_a:
            stat_a.points += scoring.pts_victory
            stat_b.points += scoring.pts_defeat
            stat_a.wins += 1
            stat_b.losses += 1
        elif winner == reg_b:
            stat_b.points += scoring.pts_victory
            stat_a.points += scoring.pts_defeat
            stat_b.wins += 1
            stat_a.losses += 1
        else:
            logger.debug("Match %s has no resolvable winner", match.id)

    def _compare(left: Standing, right: Standing) -> int:
        if left.points != right.points:
            return -1 if left.points > right.points else 1

        h2h_left = _head_to_head_wins(left.registration_id, right.registration_id, matches)
        h2h_right = _head_to_head_wins(right.registration_id, left.registration_id, matches)
        if h2h_left != h2h_right:
            return h2h_right - h2h_left

        if left.sets_diff != right.sets_diff:
            return right.sets_diff - left.sets_diff
        if left.games_diff != right.games_diff:
            return right.games_diff - left.games_diff

        if left.registration_id == right.registration_id:
            return 0
        return -1 if left.registration_id < right.registration_id else 1

    return sorted(standings.values(), key=cmp_to_key(_compare))


def is_technical_draw_allowed(
    round_phase: str | None = None, match_phase: str | None = None
) -> bool:
    """Technical draws are only allowed outside knockout rounds."""
    if (round_phase or "").startswith(KNOCKOUT_ROUND_PREFIX):
        return False
    if not match_phase:
        return True
    return match_phase not in KNOCKOUT_MATCH_PHASES
