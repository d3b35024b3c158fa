import pytest
from clubscore.services.validation import (
    ValidationError,
    validate_game_pair,
    validate_set_scores,
)


def test_accepts_valid_sets() -> None:
    assert validate_set_scores([6, 6], [4, 2]) == ([6, 6], [4, 2])
    assert validate_set_scores([6, 4, 10], [4, 6, 8]) == ([6, 4, 10], [4, 6, 8])


def test_normalizes_integral_values() -> None:
    assert validate_set_scores(["6", 4.0], [3, "6"]) == ([6, 4], [3, 6])


def test_accepts_mismatched_lengths() -> None:
    assert validate_set_scores([6, 6], [4]) == ([6, 6], [4])
    assert validate_set_scores([], [6]) == ([], [6])


@pytest.mark.parametrize(
    "scores_a, scores_b, msg",
    [
        ([], [], "At least one set"),                  # nothing recorded
        ([-1], [6], ">= 0"),                           # negative
        ([6], ["x"], "must be an integer"),            # non-integer
        ([True], [6], "not a boolean"),                # boolean
        ([6.5], [4], "must be an integer"),            # fractional
        ("64", [4, 6], "list of integers"),            # wrong top-level type
        ([6], None, "list of integers"),               # missing side
        ([100], [98], "<= 99"),                        # absurd games
    ],
    ids=[
        "empty",
        "negative",
        "non-integer",
        "boolean",
        "fractional",
        "string-side",
        "none-side",
        "too-many-games",
    ],
)
def test_rejects_invalid_sets(scores_a, scores_b, msg) -> None:
    with pytest.raises(ValidationError) as exc:
        validate_set_scores(scores_a, scores_b)  # type: ignore[arg-type]
    assert msg.lower() in str(exc.value).lower()


def test_rejects_too_many_sets() -> None:
    with pytest.raises(ValidationError, match="Too many sets for side A"):
        validate_set_scores([6, 4, 6, 6], [4, 6, 4, 4], max_sets=3)


def test_limits_can_be_lifted() -> None:
    scores = validate_set_scores(
        [6, 4, 6, 6, 150], [4, 6, 4, 4, 148], max_sets=None, max_games=None
    )
    assert scores == ([6, 4, 6, 6, 150], [4, 6, 4, 4, 148])


def test_error_names_the_offending_set() -> None:
    with pytest.raises(ValidationError) as exc:
        validate_set_scores([6, 4, 6], [4, 6, -2])
    assert exc.value.detail == "Set #3 for side B must be >= 0."


def test_validate_game_pair() -> None:
    assert validate_game_pair(7, "5") == (7, 5)
    with pytest.raises(ValidationError, match="Side A games must be >= 0"):
        validate_game_pair(-1, 6)
    with pytest.raises(ValidationError, match="Side B games must be <= 20"):
        validate_game_pair(6, 21, max_games=20)
