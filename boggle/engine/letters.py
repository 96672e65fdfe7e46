"""Letter profiles: point values, occurrence caps and the weighted letter sampler."""

import math
import random
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator


# Every profile expands into exactly this many sampling slots
SAMPLING_TABLE_SIZE = 100

# Occurrence caps in a profile are given for a 4x4 board
REFERENCE_CELLS = 16


class LetterProfile(BaseModel):
    """
    Per-letter data for one language.

    Attributes:
        language: Language code the profile belongs to
        points: Points scored by each letter
        max_occurrences: Base maximum occurrences of each letter on a 4x4
            board, also the letter's weight in the sampling table
    """

    model_config = ConfigDict(frozen=True)

    language: str = ""
    points: Dict[str, int] = Field(default_factory=dict)
    max_occurrences: Dict[str, int] = Field(default_factory=dict)
    _sampling_table: List[str] = PrivateAttr(default_factory=list)

    @model_validator(mode="after")
    def _check_letters(self) -> "LetterProfile":
        if set(self.points) != set(self.max_occurrences):
            raise ValueError("points and max_occurrences must cover the same letters")
        for letter, points in self.points.items():
            if len(letter) != 1 or not letter.isupper():
                raise ValueError(f"Invalid letter {letter!r}: expected one uppercase character")
            if points < 0:
                raise ValueError(f"Negative points for '{letter}'")
            if self.max_occurrences[letter] < 1:
                raise ValueError(f"Letter '{letter}' must occur at least once")

        total = sum(self.max_occurrences.values())
        if total != SAMPLING_TABLE_SIZE:
            raise ValueError(
                f"Occurrences must add up to {SAMPLING_TABLE_SIZE}, got {total}"
            )
        return self

    def model_post_init(self, __context) -> None:
        """Expand the occurrences into the sampling table."""
        table: List[str] = []
        for letter, count in self.max_occurrences.items():
            table.extend([letter] * count)
        self._sampling_table = table

    @property
    def sampling_table(self) -> List[str]:
        """Each letter repeated as many times as its occurrence weight."""
        return list(self._sampling_table)

    def draw_letter(self, rng: random.Random) -> str:
        """Draw one letter following the profile's weights."""
        return self._sampling_table[rng.randrange(SAMPLING_TABLE_SIZE)]

    def scaled_max_occurrences(self, size: int) -> Dict[str, int]:
        """
        Occurrence caps for a size x size board.

        Caps scale with the board area relative to a 4x4 board and are
        rounded up. The profile itself is left unchanged.
        """
        ratio = (size * size) / REFERENCE_CELLS
        return {
            letter: math.ceil(base * ratio)
            for letter, base in self.max_occurrences.items()
        }

    def score_word(self, word: str) -> int:
        """Letter points plus a bonus of len * ceil(log2(len))."""
        if not word:
            return 0
        score = sum(self.points.get(letter, 0) for letter in word)
        score += len(word) * math.ceil(math.log2(len(word)))
        return score
