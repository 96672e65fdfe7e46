"""
Player class for tracking an individual player's score and found words.
"""

from typing import Dict
from pydantic import BaseModel, Field, field_validator

from ..engine.parsing import clean_player_name


class Player(BaseModel):
    """
    A player's running score and the words they found.

    Attributes:
        name: Cleaned, uppercase display name
        score: Total points so far
        found_words: Each accepted word and how many boards it was found on
    """

    name: str
    score: int = 0
    found_words: Dict[str, int] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def _clean_name(cls, value: str) -> str:
        name = clean_player_name(value)
        if not name:
            raise ValueError(f"The player's name cannot be empty. ({value!r})")
        return name

    @property
    def words_found(self) -> int:
        """Number of distinct words found."""
        return len(self.found_words)

    def add_word(self, word: str, points: int) -> None:
        """
        Credit an accepted word.

        Args:
            word: The accepted word
            points: Points the word is worth
        """
        word = word.upper()
        self.found_words[word] = self.found_words.get(word, 0) + 1
        self.score += points

    def get_state(self) -> Dict:
        """
        Get the current player state as a dictionary.

        Returns:
            Dictionary containing player state
        """
        return {
            "name": self.name,
            "score": self.score,
            "words_found": self.words_found,
            "found_words": dict(sorted(self.found_words.items())),
        }

    def __str__(self) -> str:
        return f"Player: {self.name}, Score: {self.score}, Number of words found: {self.words_found}."
