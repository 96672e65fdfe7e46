"""Core engine for the Boggle word game."""

from .letters import LetterProfile, SAMPLING_TABLE_SIZE
from .die import Die
from .board import BoardGrid, GenerationResult, REPLACE_DIE_AFTER, MAX_CELL_FAILURES
from .models import GenerationFailure, WordCheck
from .word_index import WordIndex
from .sorting import quick_sort, partition, binary_search
from .parsing import clean_word, clean_player_name, parse_letter_profile, parse_word_list
from .acceptance import submit_word, MIN_WORD_LENGTH
from .data import resolve_language, load_letter_profile, load_word_list, load_word_index

__all__ = [
    # Letters
    "LetterProfile",
    "SAMPLING_TABLE_SIZE",
    # Board
    "Die",
    "BoardGrid",
    "GenerationResult",
    "GenerationFailure",
    "REPLACE_DIE_AFTER",
    "MAX_CELL_FAILURES",
    # Dictionary
    "WordIndex",
    "quick_sort",
    "partition",
    "binary_search",
    # Parsing
    "clean_word",
    "clean_player_name",
    "parse_letter_profile",
    "parse_word_list",
    # Acceptance
    "submit_word",
    "WordCheck",
    "MIN_WORD_LENGTH",
    # Bundled data
    "resolve_language",
    "load_letter_profile",
    "load_word_list",
    "load_word_index",
]
