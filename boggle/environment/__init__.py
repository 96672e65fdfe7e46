"""Game layer for Boggle: players, configuration and sessions."""

from .models import (
    GameConfig,
    WordSubmission,
    SessionResult,
)
from .player import Player
from .session import GameSession, BoardGenerationError
from .display import format_scores, format_check, format_final_scores

__all__ = [
    "GameConfig",
    "WordSubmission",
    "SessionResult",
    "Player",
    "GameSession",
    "BoardGenerationError",
    "format_scores",
    "format_check",
    "format_final_scores",
]
