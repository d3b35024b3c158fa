import logging
from typing import Optional

from fastapi import APIRouter, Query, Request

from ..config import MAX_GAMES_PER_SET, MAX_SETS_PER_MATCH
from ..exceptions import InvalidScores
from ..rate_limit import limiter, scoring_rate_limit
from ..schemas import GroupMatchIn, StandingOut, StandingsIn, TechnicalDrawOut
from ..services import ValidationError, validate_set_scores
from ..services.standings import (
    GroupMatch,
    Registration,
    calculate_group_standings,
    is_technical_draw_allowed,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/standings", tags=["standings"])


def _group_match(m: GroupMatchIn) -> GroupMatch:
    score_a, score_b = m.score_a, m.score_b
    # Technical draws may arrive without any sets at all.
    if score_a or score_b:
        try:
            score_a, score_b = validate_set_scores(
                score_a,
                score_b,
                max_sets=MAX_SETS_PER_MATCH,
                max_games=MAX_GAMES_PER_SET,
            )
        except ValidationError as exc:
            logger.debug("Rejected scores for match %s: %s", m.id, exc.detail)
            raise InvalidScores(f"Match {m.id}: {exc.detail}") from exc

    return GroupMatch(
        id=m.id,
        registration_a=m.registration_a,
        registration_b=m.registration_b,
        score_a=score_a,
        score_b=score_b,
        status=m.status,
        result_type=m.result_type,
        winner=m.winner,
    )


# POST /api/v0/standings
@router.post("", response_model=list[StandingOut])
@limiter.limit(scoring_rate_limit)
async def compute_standings(request: Request, body: StandingsIn) -> list[StandingOut]:
    registrations = [Registration(id=r.id, group=r.group) for r in body.registrations]
    matches = [_group_match(m) for m in body.matches]
    scoring = body.scoring.model_dump(exclude_none=True) if body.scoring else None

    standings = calculate_group_standings(registrations, matches, scoring)
    return [
        StandingOut(
            registration_id=s.registration_id,
            group=s.group,
            position=position,
            points=s.points,
            matches_played=s.matches_played,
            wins=s.wins,
            losses=s.losses,
            sets_won=s.sets_won,
            sets_lost=s.sets_lost,
            games_won=s.games_won,
            games_lost=s.games_lost,
        )
        for position, s in enumerate(standings, start=1)
    ]


# GET /api/v0/standings/technical-draw?roundPhase=...&matchPhase=...
@router.get("/technical-draw", response_model=TechnicalDrawOut)
async def technical_draw_allowed(
    round_phase: Optional[str] = Query(None, alias="roundPhase"),
    match_phase: Optional[str] = Query(None, alias="matchPhase"),
) -> TechnicalDrawOut:
    return TechnicalDrawOut(
        allowed=is_technical_draw_allowed(round_phase, match_phase)
    )
