import random
from typing import Tuple

from pydantic import BaseModel, model_validator

from .letters import LetterProfile


FACE_COUNT = 6


class Die(BaseModel):
    """
    A letter die: six faces drawn once, one of them visible.

    Attributes:
        faces: The six letters on the die, fixed at construction
        visible: The face currently showing on the board
    """

    faces: Tuple[str, str, str, str, str, str]
    visible: str

    @model_validator(mode="after")
    def _check_visible(self) -> "Die":
        if self.visible not in self.faces:
            raise ValueError(f"Visible face '{self.visible}' is not one of {self.faces}")
        return self

    @classmethod
    def create(cls, rng: random.Random, profile: LetterProfile) -> "Die":
        """
        Draw six faces from the profile's weighted distribution.

        Args:
            rng: Random source
            profile: Letter profile providing the weights

        Returns:
            A new Die showing a uniformly chosen face
        """
        faces = tuple(profile.draw_letter(rng) for _ in range(FACE_COUNT))
        return cls(faces=faces, visible=faces[rng.randrange(FACE_COUNT)])

    @classmethod
    def fixed(cls, letter: str) -> "Die":
        """A die carrying the same letter on every face."""
        return cls(faces=(letter,) * FACE_COUNT, visible=letter)

    def roll(self, rng: random.Random) -> str:
        """Show a uniformly random face. The faces themselves never change."""
        self.visible = self.faces[rng.randrange(FACE_COUNT)]
        return self.visible
