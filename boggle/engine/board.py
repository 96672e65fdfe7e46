"""Board generation and adjacency search."""

import random
from typing import Dict, List, Optional, Set

from pydantic import BaseModel, Field

from .die import Die
from .letters import LetterProfile
from .models import GenerationFailure


# After this many failed rolls in one cell, every further failure swaps in a new die
REPLACE_DIE_AFTER = 5

# Exceeding this many failed rolls in one cell aborts the whole board
MAX_CELL_FAILURES = 30

NEIGHBOR_OFFSETS = [
    (dr, dc)
    for dr in (-1, 0, 1)
    for dc in (-1, 0, 1)
    if (dr, dc) != (0, 0)
]


class BoardGrid(BaseModel):
    """
    A size x size matrix of dice.

    Attributes:
        size: Number of rows (and columns)
        cells: Dice in row-major order, cells[row][col]
        found_words: Words accepted on the current board, reset by every generation
    """

    size: int = Field(..., ge=1)
    cells: List[List[Die]]
    found_words: Set[str] = Field(default_factory=set)

    @classmethod
    def generate(
        cls,
        size: int,
        profile: LetterProfile,
        rng: random.Random,
    ) -> "GenerationResult":
        """
        Build a new board whose letter counts respect the profile's caps.

        Args:
            size: Board side length
            profile: Letter profile for faces and occurrence caps
            rng: Random source

        Returns:
            GenerationResult holding the board, or the failure that stopped it
        """
        cells = [[Die.create(rng, profile) for _ in range(size)] for _ in range(size)]
        board = cls(size=size, cells=cells)
        return board.regenerate(profile, rng)

    @classmethod
    def from_rows(cls, rows: List[str]) -> "BoardGrid":
        """
        Build a board with fixed letters, one string per row.

        Raises:
            ValueError: If the rows do not form a square
        """
        size = len(rows)
        if size == 0 or any(len(row) != size for row in rows):
            raise ValueError(f"Rows must form a square board, got {rows!r}")
        cells = [[Die.fixed(letter) for letter in row.upper()] for row in rows]
        return cls(size=size, cells=cells)

    def regenerate(self, profile: LetterProfile, rng: random.Random) -> "GenerationResult":
        """
        Re-roll every die under the occurrence caps for a new turn.

        Cells are filled in row-major order without revisiting earlier
        cells. found_words is cleared only when the fill succeeds.
        """
        quotas = profile.scaled_max_occurrences(self.size)

        for row in range(self.size):
            for col in range(self.size):
                failure = self._fill_cell(row, col, quotas, profile, rng)
                if failure is not None:
                    return GenerationResult.failed(failure)

        self.found_words.clear()
        return GenerationResult.ok(self)

    def _fill_cell(
        self,
        row: int,
        col: int,
        quotas: Dict[str, int],
        profile: LetterProfile,
        rng: random.Random,
    ) -> Optional[GenerationFailure]:
        """Roll one cell until its letter fits the remaining quota."""
        failures = 0

        while True:
            letter = self.cells[row][col].roll(rng)

            if quotas.get(letter, 0) > 0:
                quotas[letter] -= 1
                return None

            failures += 1
            if failures >= REPLACE_DIE_AFTER:
                self.cells[row][col] = Die.create(rng, profile)

            if failures > MAX_CELL_FAILURES:
                return GenerationFailure(
                    message=f"Board cannot be generated: cell ({row}, {col}) failed {failures} times",
                    row=row,
                    col=col,
                    failures=failures,
                )

    def contains(self, word: str) -> bool:
        """
        Check whether the word can be spelled along a path of adjacent cells.

        Each cell may be used at most once per path and cells touch in all
        eight directions.
        """
        if not word:
            return False

        for row in range(self.size):
            for col in range(self.size):
                if self.cells[row][col].visible != word[0]:
                    continue
                visited = [[False] * self.size for _ in range(self.size)]
                if self._search(word, 1, row, col, visited):
                    return True

        return False

    def _search(self, word: str, index: int, row: int, col: int, visited: List[List[bool]]) -> bool:
        if index == len(word):
            return True

        visited[row][col] = True

        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = row + dr, col + dc
            if not (0 <= nr < self.size and 0 <= nc < self.size):
                continue
            if visited[nr][nc] or self.cells[nr][nc].visible != word[index]:
                continue
            if self._search(word, index + 1, nr, nc, visited):
                return True

        visited[row][col] = False
        return False

    def mark_found(self, word: str) -> None:
        self.found_words.add(word)

    def visible_letters(self) -> List[List[str]]:
        """Snapshot of the visible faces, one list per row."""
        return [[die.visible for die in row] for row in self.cells]

    def render(self) -> str:
        """Render the visible faces as space separated rows."""
        return "\n".join(" ".join(row) for row in self.visible_letters())

    def letter_counts(self) -> Dict[str, int]:
        """Number of cells showing each letter."""
        counts: Dict[str, int] = {}
        for row in self.cells:
            for die in row:
                counts[die.visible] = counts.get(die.visible, 0) + 1
        return counts


class GenerationResult(BaseModel):
    """Outcome of a board generation: a board or the failure that stopped it."""
    success: bool
    board: Optional[BoardGrid] = None
    failure: Optional[GenerationFailure] = None

    @classmethod
    def ok(cls, board: BoardGrid) -> "GenerationResult":
        return cls(success=True, board=board)

    @classmethod
    def failed(cls, failure: GenerationFailure) -> "GenerationResult":
        return cls(success=False, failure=failure)
