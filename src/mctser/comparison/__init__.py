"""Comparing search engines against each other."""

from .arena import Engine, GameRecord, MatchResult, play_game, play_match

__all__ = [
    "Engine",
    "GameRecord",
    "MatchResult",
    "play_game",
    "play_match",
]
