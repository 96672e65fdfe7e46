"""Bundled letter profiles and word lists for the supported languages."""

from pathlib import Path
from typing import List, Optional

from ..letters import LetterProfile
from ..parsing import WORD_STRIP_CHARS, parse_letter_profile, parse_word_list
from ..word_index import WordIndex


DATA_DIR = Path(__file__).parent

LANGUAGES = {
    "fr": ["french", "français", "francais", "fr"],
    "en": ["english", "anglais", "en", "an"],
}


def resolve_language(name: str) -> str:
    """
    Map a language name or alias to its code.

    Raises:
        ValueError: If the language is not supported
    """
    cleaned = name.strip().strip(WORD_STRIP_CHARS).lower()
    for code, aliases in LANGUAGES.items():
        if cleaned in aliases:
            return code
    raise ValueError(f"Language '{name}' not recognized. ({', '.join(LANGUAGES)})")


def _read(path: Path) -> str:
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")
    return path.read_text(encoding="utf-8")


def load_letter_profile(language: str, path: Optional[str | Path] = None) -> LetterProfile:
    """Load the letter profile of a language, from the bundled file unless a path is given."""
    code = resolve_language(language)
    source = Path(path) if path else DATA_DIR / f"letters_{code}.txt"
    return parse_letter_profile(_read(source), language=code)


def load_word_list(language: str, path: Optional[str | Path] = None) -> List[str]:
    """Load the dictionary words of a language, from the bundled file unless a path is given."""
    code = resolve_language(language)
    source = Path(path) if path else DATA_DIR / f"words_{code}.txt"
    return parse_word_list(_read(source))


def load_word_index(language: str, path: Optional[str | Path] = None) -> WordIndex:
    return WordIndex.build(load_word_list(language, path))
