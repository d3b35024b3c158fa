from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .scoring.tennis import Side


class SetScoreIn(BaseModel):
    """Game counts for a single set."""

    A: Any
    B: Any
    super_tiebreak: bool = Field(default=False, alias="superTiebreak")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    def _coerce(cls, value: Any) -> Dict[str, Any]:
        """Allow incoming set scores to be provided as tuples or objects."""
        if isinstance(value, dict):
            return value
        if isinstance(value, (list, tuple)) and len(value) == 2:
            return {"A": value[0], "B": value[1]}
        raise ValueError("Set scores must be a mapping or 2-item tuple/list.")


class SetResultOut(BaseModel):
    valid: bool
    winner: Optional[Side] = None


class MatchScoresIn(BaseModel):
    score_a: List[Any] = Field(alias="scoreA")
    score_b: List[Any] = Field(alias="scoreB")

    model_config = ConfigDict(populate_by_name=True)


class MatchResultOut(BaseModel):
    winner: Optional[Side] = None
    sets_a: int = Field(alias="setsA")
    sets_b: int = Field(alias="setsB")
    sets_played: int = Field(alias="setsPlayed")
    needs_third_set: bool = Field(alias="needsThirdSet")

    model_config = ConfigDict(populate_by_name=True)


class ScoringConfigIn(BaseModel):
    pts_victory: Optional[float] = Field(default=None, alias="ptsVictory")
    pts_defeat: Optional[float] = Field(default=None, alias="ptsDefeat")
    pts_set: Optional[float] = Field(default=None, alias="ptsSet")
    pts_game: Optional[float] = Field(default=None, alias="ptsGame")
    pts_technical_draw: Optional[float] = Field(
        default=None, alias="ptsTechnicalDraw"
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class RegistrationIn(BaseModel):
    id: str = Field(..., min_length=1, max_length=100)
    group: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _validate_id(cls, value: str) -> str:
        if not isinstance(value, str):
            raise ValueError("id must be a string")
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("id must not be empty")
        return trimmed


class GroupMatchIn(BaseModel):
    id: str
    registration_a: Optional[str] = Field(default=None, alias="registrationA")
    registration_b: Optional[str] = Field(default=None, alias="registrationB")
    score_a: List[Any] = Field(default_factory=list, alias="scoreA")
    score_b: List[Any] = Field(default_factory=list, alias="scoreB")
    status: str = "finished"
    result_type: Optional[Literal["played", "technical_draw"]] = Field(
        default=None, alias="resultType"
    )
    winner: Optional[Side] = None

    model_config = ConfigDict(populate_by_name=True)


class StandingsIn(BaseModel):
    registrations: List[RegistrationIn]
    matches: List[GroupMatchIn] = Field(default_factory=list)
    scoring: Optional[ScoringConfigIn] = None


class StandingOut(BaseModel):
    registration_id: str = Field(alias="registrationId")
    group: Optional[str] = None
    position: int
    points: float
    matches_played: int = Field(alias="matchesPlayed")
    wins: int
    losses: int
    sets_won: int = Field(alias="setsWon")
    sets_lost: int = Field(alias="setsLost")
    games_won: int = Field(alias="gamesWon")
    games_lost: int = Field(alias="gamesLost")

    model_config = ConfigDict(populate_by_name=True)


class TechnicalDrawOut(BaseModel):
    allowed: bool
