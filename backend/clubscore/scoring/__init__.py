"""Scoring engines for the club's sports."""

from . import tennis

__all__ = [
    "tennis",
]
