"""Parsing utilities for letter files, word lists and player input."""

import re
from typing import Dict, List

from .letters import LetterProfile


WORD_STRIP_CHARS = " ,?;.:/!§%*µ$£^¨<>&~#{([-|`_@)]=}+°"
NAME_STRIP_CHARS = " ;§%*µ$£^¨`@=+"

LETTER_LINE = re.compile(r'^(\w);\s*(\d+)\s*;\s*(\d+)$')


def clean_word(raw: str) -> str:
    """Strip surrounding whitespace and punctuation, then uppercase."""
    return raw.strip().strip(WORD_STRIP_CHARS).upper()


def clean_player_name(raw: str) -> str:
    """Strip surrounding whitespace and a few symbols, then uppercase."""
    return raw.strip().strip(NAME_STRIP_CHARS).upper()


def parse_letter_profile(text: str, language: str = "") -> LetterProfile:
    """
    Parse a letter file into a LetterProfile.

    Each non-blank line reads LETTER;POINTS;OCCURRENCES, for example ``E;1;13``.

    Raises:
        ValueError: On a malformed line, a repeated letter or an invalid profile
    """
    points: Dict[str, int] = {}
    occurrences: Dict[str, int] = {}

    for i, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue

        match = LETTER_LINE.match(line)
        if not match:
            raise ValueError(f"Invalid letter line {i}: '{line}'")

        letter = match.group(1).upper()
        if letter in points:
            raise ValueError(f"Letter '{letter}' repeated on line {i}")

        points[letter] = int(match.group(2))
        occurrences[letter] = int(match.group(3))

    return LetterProfile(language=language, points=points, max_occurrences=occurrences)


def parse_word_list(text: str) -> List[str]:
    """Split a word list into uppercase words, skipping blank lines."""
    return [line.strip().upper() for line in text.splitlines() if line.strip()]
