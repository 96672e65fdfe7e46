"""Dictionary lookups backed by two sorted indices."""

from typing import Dict, Iterable, List, Tuple

from .sorting import quick_sort, binary_search


class WordIndex(object):
    """
    Immutable dictionary with one sorted bucket per word length and one
    per first letter.

    Membership queries binary-search whichever of the two candidate
    buckets is smaller.
    """

    def __init__(
        self,
        by_length: Dict[int, Tuple[str, ...]],
        by_letter: Dict[str, Tuple[str, ...]],
    ):
        self._by_length = by_length
        self._by_letter = by_letter
        self._count_by_length = {length: len(words) for length, words in by_length.items()}
        self._count_by_letter = {letter: len(words) for letter, words in by_letter.items()}

    @classmethod
    def build(cls, words: Iterable[str]) -> "WordIndex":
        """
        Bucket and sort a word list.

        Args:
            words: Dictionary words, already normalized. Empty strings are skipped.

        Returns:
            A read-only WordIndex
        """
        length_buckets: Dict[int, List[str]] = {}
        letter_buckets: Dict[str, List[str]] = {}

        for word in words:
            if not word:
                continue
            length_buckets.setdefault(len(word), []).append(word)
            letter_buckets.setdefault(word[0], []).append(word)

        for bucket in length_buckets.values():
            quick_sort(bucket)
        for bucket in letter_buckets.values():
            quick_sort(bucket)

        return cls(
            by_length={length: tuple(bucket) for length, bucket in sorted(length_buckets.items())},
            by_letter={letter: tuple(bucket) for letter, bucket in sorted(letter_buckets.items())},
        )

    @property
    def by_length(self) -> Dict[int, Tuple[str, ...]]:
        return dict(self._by_length)

    @property
    def by_letter(self) -> Dict[str, Tuple[str, ...]]:
        return dict(self._by_letter)

    @property
    def count_by_length(self) -> Dict[int, int]:
        return dict(self._count_by_length)

    @property
    def count_by_letter(self) -> Dict[str, int]:
        return dict(self._count_by_letter)

    def candidates(self, word: str) -> Tuple[str, ...]:
        """
        The bucket a lookup for this word would search.

        The by-length bucket wins ties. Returns an empty tuple when either
        bucket is missing.
        """
        if not word:
            return ()
        if len(word) not in self._count_by_length or word[0] not in self._count_by_letter:
            return ()

        if self._count_by_length[len(word)] <= self._count_by_letter[word[0]]:
            return self._by_length[len(word)]
        return self._by_letter[word[0]]

    def contains(self, word: str) -> bool:
        '''
        Returns True if `word` is in the dictionary.
        Returns False otherwise.
        '''
        bucket = self.candidates(word)
        if not bucket:
            return False
        return binary_search(bucket, word) != -1

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return sum(self._count_by_length.values())
