"""
Word acceptance for a running board.

A submitted word is checked in order:
1. Length (at least two letters after cleaning)
2. Not already found on the current board
3. Spelled by a path of adjacent cells on the board
4. Present in the dictionary

The board check runs before the dictionary lookup since it only touches
the small grid.
"""

from .board import BoardGrid
from .models import WordCheck
from .parsing import clean_word
from .word_index import WordIndex


MIN_WORD_LENGTH = 2


def submit_word(raw: str, board: BoardGrid, index: WordIndex) -> WordCheck:
    """
    Check a player's word and record it on the board when accepted.

    Args:
        raw: The word as typed by the player
        board: The current board
        index: Dictionary for the game language

    Returns:
        WordCheck with the cleaned word, a code and a message for the player
    """
    word = clean_word(raw)

    if len(word) < MIN_WORD_LENGTH:
        return WordCheck(
            word=word,
            accepted=False,
            code="TOO_SHORT",
            message="The word must be at least two letters long.",
        )

    if word in board.found_words:
        return WordCheck(
            word=word,
            accepted=False,
            code="ALREADY_FOUND",
            message="The word has already been found.",
        )

    if not board.contains(word):
        return WordCheck(
            word=word,
            accepted=False,
            code="NOT_ON_BOARD",
            message="The word is not in the board.",
        )

    if not index.contains(word):
        return WordCheck(
            word=word,
            accepted=False,
            code="NOT_IN_DICTIONARY",
            message="The word is not in the dictionary.",
        )

    board.mark_found(word)
    return WordCheck(word=word, accepted=True, code="ACCEPTED", message="Word accepted!")
