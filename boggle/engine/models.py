"""Data models for board generation and word acceptance."""

from typing import Literal
from pydantic import BaseModel


CheckCode = Literal[
    "ACCEPTED",
    "TOO_SHORT",
    "ALREADY_FOUND",
    "NOT_ON_BOARD",
    "NOT_IN_DICTIONARY",
    "TIME_UP",
]


class GenerationFailure(BaseModel):
    """A board that could not satisfy its occurrence caps within the retry budget."""
    code: str = "GENERATION_FAILED"
    message: str
    row: int
    col: int
    failures: int


class WordCheck(BaseModel):
    """Result of submitting a word against a board and a dictionary."""
    word: str
    accepted: bool
    code: CheckCode
    message: str
    points: int = 0
