"""Internal application services (pure helpers, no I/O)."""

from .validation import ValidationError, validate_game_pair, validate_set_scores
from .standings import (
    GroupMatch,
    Registration,
    ScoringConfig,
    Standing,
    calculate_group_standings,
    is_technical_draw_allowed,
)

__all__ = [
    "validate_set_scores",
    "validate_game_pair",
    "ValidationError",
    "GroupMatch",
    "Registration",
    "ScoringConfig",
    "Standing",
    "calculate_group_standings",
    "is_technical_draw_allowed",
]
