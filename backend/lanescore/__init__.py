"""Ten-pin bowling scoring for tournament live scoring."""

from .scoring.bowling import (
    compute_handicap,
    create_empty_game,
    record_roll,
    resolve,
    validate_roll,
)

__all__ = [
    "compute_handicap",
    "create_empty_game",
    "record_roll",
    "resolve",
    "validate_roll",
]
