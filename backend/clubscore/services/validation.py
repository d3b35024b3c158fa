from typing import Any, List, Optional, Sequence, Tuple


class ValidationError(Exception):
    """Raised when submitted set scores are invalid."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


def _coerce_games(raw: Any, label: str, *, max_games: Optional[int]) -> int:
    # Reject booleans explicitly (bool is a subclass of int in Python)
    if isinstance(raw, bool):
        raise ValidationError(f"{label} must be an integer (not a boolean).")
    if isinstance(raw, float) and not raw.is_integer():
        raise ValidationError(f"{label} must be an integer.")
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"{label} must be an integer.")

    if value < 0:
        raise ValidationError(f"{label} must be >= 0.")
    if max_games is not None and value > max_games:
        raise ValidationError(f"{label} must be <= {max_games}.")
    return value


def validate_game_pair(
    games_a: Any,
    games_b: Any,
    *,
    max_games: Optional[int] = 99,
) -> Tuple[int, int]:
    """Validate the game counts of a single set and return them as ints."""

    return (
        _coerce_games(games_a, "Side A games", max_games=max_games),
        _coerce_games(games_b, "Side B games", max_games=max_games),
    )


def validate_set_scores(
    scores_a: Sequence[Any],
    scores_b: Sequence[Any],
    *,
    max_sets: Optional[int] = 3,
    max_games: Optional[int] = 99,
) -> Tuple[List[int], List[int]]:
    """Validate per-set game counts for both sides of a match.

    Rules:
    - Each side must be a sequence of integers (strings are rejected)
    - At least one set must be recorded for some side
    - Neither side may list more than ``max_sets`` sets (if provided)
    - Values must be integers >= 0 and <= ``max_games`` (booleans are rejected)

    Sides of different lengths are accepted; only the sets both sides
    report are scored.
    """

    for side, scores in (("A", scores_a), ("B", scores_b)):
        if not isinstance(scores, Sequence) or isinstance(scores, (str, bytes)):
            raise ValidationError(
                f"Side {side} scores must be provided as a list of integers."
            )
        if max_sets is not None and len(scores) > max_sets:
            raise ValidationError(
                f"Too many sets for side {side}. Max allowed is {max_sets}."
            )

    if len(scores_a) == 0 and len(scores_b) == 0:
        raise ValidationError("At least one set is required.")

    normalized_a = [
        _coerce_games(raw, f"Set #{i} for side A", max_games=max_games)
        for i, raw in enumerate(scores_a, start=1)
    ]
    normalized_b = [
        _coerce_games(raw, f"Set #{i} for side B", max_games=max_games)
        for i, raw in enumerate(scores_b, start=1)
    ]
    return normalized_a, normalized_b
