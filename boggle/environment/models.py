"""
Pydantic models for the game layer.

This module contains the configuration and result models used by the game
session. The logic classes (Player, GameSession) live in their own files.
"""

from typing import List, Dict, Optional
from pydantic import BaseModel, Field, field_validator

from ..engine.data import resolve_language
from ..engine.models import WordCheck
from ..engine.parsing import clean_player_name


class GameConfig(BaseModel):
    """Configuration for a game."""
    language: str = "en"
    board_size: int = Field(default=4, ge=4, le=9)
    turns: int = Field(default=3, ge=1, le=10)
    turn_seconds: float = Field(default=60.0, gt=0)
    players: List[str] = Field(default_factory=lambda: ["PLAYER 1", "PLAYER 2"], min_length=2)
    seed: Optional[int] = None
    dictionary_path: Optional[str] = None
    letters_path: Optional[str] = None
    generation_attempts: int = Field(default=3, ge=1)

    @field_validator("language")
    @classmethod
    def _resolve_language(cls, value: str) -> str:
        return resolve_language(value)

    @field_validator("players")
    @classmethod
    def _clean_players(cls, value: List[str]) -> List[str]:
        names: List[str] = []
        for raw in value:
            name = clean_player_name(raw)
            if not name:
                raise ValueError(f"The player's name cannot be empty. ({raw!r})")
            if name in names:
                raise ValueError(f"The player's name must be unique. ({raw!r})")
            names.append(name)
        return names

    @property
    def num_players(self) -> int:
        return len(self.players)


class WordSubmission(BaseModel):
    """One word submitted during a turn."""
    player: str
    round_number: int
    raw: str
    check: WordCheck
    elapsed_seconds: float = 0.0


class SessionResult(BaseModel):
    """Result of a complete game."""
    config: GameConfig
    winner: Optional[str] = None
    rounds_played: int = 0
    scores: Dict[str, int] = Field(default_factory=dict)
    found_words: Dict[str, Dict[str, int]] = Field(default_factory=dict)
    submissions: List[WordSubmission] = Field(default_factory=list)
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0
