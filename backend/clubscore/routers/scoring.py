import logging

from fastapi import APIRouter, Request

from ..config import MAX_GAMES_PER_SET, MAX_SETS_PER_MATCH
from ..exceptions import InvalidScores
from ..rate_limit import limiter, scoring_rate_limit
from ..schemas import MatchResultOut, MatchScoresIn, SetResultOut, SetScoreIn
from ..scoring import tennis
from ..services import ValidationError, validate_game_pair, validate_set_scores

logger = logging.getLogger(__name__)

# Resource-only prefix
router = APIRouter(prefix="/scoring", tags=["scoring"])


def _invalid_scores(exc: ValidationError) -> InvalidScores:
    logger.debug("Rejected score submission: %s", exc.detail)
    return InvalidScores(exc.detail)


# POST /api/v0/scoring/sets
@router.post("/sets", response_model=SetResultOut)
@limiter.limit(scoring_rate_limit)
async def score_set(request: Request, body: SetScoreIn) -> SetResultOut:
    try:
        games_a, games_b = validate_game_pair(
            body.A, body.B, max_games=MAX_GAMES_PER_SET
        )
    except ValidationError as exc:
        raise _invalid_scores(exc) from exc

    return SetResultOut(
        valid=tennis.is_valid_set(games_a, games_b, body.super_tiebreak),
        winner=tennis.get_set_winner(games_a, games_b, body.super_tiebreak),
    )


# POST /api/v0/scoring/matches
@router.post("/matches", response_model=MatchResultOut)
@limiter.limit(scoring_rate_limit)
async def score_match(request: Request, body: MatchScoresIn) -> MatchResultOut:
    try:
        scores_a, scores_b = validate_set_scores(
            body.score_a,
            body.score_b,
            max_sets=MAX_SETS_PER_MATCH,
            max_games=MAX_GAMES_PER_SET,
        )
    except ValidationError as exc:
        raise _invalid_scores(exc) from exc

    sets = tennis.count_sets_won(scores_a, scores_b)
    return MatchResultOut(
        winner=tennis.get_match_winner(scores_a, scores_b),
        sets_a=sets.sets_a,
        sets_b=sets.sets_b,
        sets_played=min(len(scores_a), len(scores_b)),
        needs_third_set=tennis.needs_third_set(scores_a, scores_b),
    )
