"""
Test suite for board generation and adjacency search.

Covers:
- Dice (faces, rolls)
- Constrained generation (occurrence caps, die replacement, failure result)
- Word search (adjacency, no cell reuse, backtracking, brute-force agreement)
"""

import itertools
import random

import pytest

from boggle.engine import (
    BoardGrid,
    Die,
    GenerationResult,
    LetterProfile,
    MAX_CELL_FAILURES,
    REPLACE_DIE_AFTER,
    load_letter_profile,
)


class FirstChoiceRandom(random.Random):
    """Random source that always picks the lowest possible value."""

    def randrange(self, start, stop=None, step=1):
        return 0 if stop is None else start


class ScriptedRandom(random.Random):
    """Random source replaying fixed randrange values, then zeros."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def randrange(self, start, stop=None, step=1):
        return self.values.pop(0) if self.values else 0


class DieFactory:
    """Stands in for Die.create and records every die it hands out."""

    def __init__(self, letter):
        self.letter = letter
        self.created = []

    def __call__(self, rng, profile):
        die = Die.fixed(self.letter)
        self.created.append(die)
        return die


def make_profile(occurrences):
    return LetterProfile(
        language="test",
        points={letter: 1 for letter in occurrences},
        max_occurrences=occurrences,
    )


@pytest.fixture
def english():
    return load_letter_profile("en")


@pytest.fixture
def sample_board():
    """3x3 board, row-major: A T E / C A T / R S T."""
    return BoardGrid.from_rows(["ATE", "CAT", "RST"])


class TestDie:
    """Test cases for letter dice."""

    def test_create_draws_six_faces(self, english):
        """A new die has six faces from the profile and shows one of them."""
        die = Die.create(random.Random(1), english)
        assert len(die.faces) == 6
        assert all(face in english.max_occurrences for face in die.faces)
        assert die.visible in die.faces

    def test_roll_keeps_faces(self, english):
        """Rolling changes only the visible face."""
        rng = random.Random(2)
        die = Die.create(rng, english)
        faces = die.faces
        for _ in range(50):
            letter = die.roll(rng)
            assert letter == die.visible
            assert letter in faces
        assert die.faces == faces

    def test_visible_must_be_a_face(self):
        """A die cannot show a letter it does not carry."""
        with pytest.raises(ValueError):
            Die(faces=("A", "B", "C", "D", "E", "F"), visible="Z")

    def test_fixed_die(self):
        """A fixed die shows its letter whatever the roll."""
        die = Die.fixed("Q")
        die.roll(random.Random(3))
        assert die.visible == "Q"
        assert set(die.faces) == {"Q"}


class TestGeneration:
    """Test cases for constrained board generation."""

    @pytest.mark.parametrize("size", [4, 5, 6])
    def test_occurrence_bound(self, english, size):
        """No letter appears more often than its scaled cap."""
        caps = english.scaled_max_occurrences(size)
        for seed in range(20):
            result = BoardGrid.generate(size, english, random.Random(seed))
            assert result.success is True
            assert result.failure is None
            board = result.board
            assert board.size == size
            for letter, count in board.letter_counts().items():
                assert count <= caps[letter]

    def test_letter_with_base_max_one(self):
        """On a 4x4 board a letter with base max 1 appears at most once."""
        profile = make_profile({"A": 1, "E": 50, "S": 49})
        assert profile.scaled_max_occurrences(4)["A"] == 1

        for seed in range(50):
            result = BoardGrid.generate(4, profile, random.Random(seed))
            assert result.success is True
            assert result.board.letter_counts().get("A", 0) <= 1

    def test_visible_letters_snapshot(self, english):
        """visible_letters returns a size x size copy of the visible faces."""
        board = BoardGrid.generate(4, english, random.Random(5)).board
        letters = board.visible_letters()
        assert len(letters) == 4
        assert all(len(row) == 4 for row in letters)
        assert letters[0][0] == board.cells[0][0].visible

        letters[0][0] = "#"
        assert board.cells[0][0].visible != "#"

    def test_render(self, sample_board):
        assert sample_board.render() == "A T E\nC A T\nR S T"

    def test_same_seed_same_board(self, english):
        """Generation is reproducible with an injected random source."""
        first = BoardGrid.generate(5, english, random.Random(42)).board
        second = BoardGrid.generate(5, english, random.Random(42)).board
        assert first.visible_letters() == second.visible_letters()

    def test_failure_is_returned_not_raised(self):
        """Exhausting a cell's retry budget yields a failure result."""
        # Every draw lands on 'A', whose cap is 1: the second cell can never be filled
        profile = make_profile({"A": 1, "B": 99})
        result = BoardGrid.generate(4, profile, FirstChoiceRandom())

        assert isinstance(result, GenerationResult)
        assert result.success is False
        assert result.board is None
        assert result.failure.code == "GENERATION_FAILED"
        assert (result.failure.row, result.failure.col) == (0, 1)
        assert result.failure.failures == MAX_CELL_FAILURES + 1

    def test_die_kept_through_four_failures(self, monkeypatch):
        """Four failed rolls leave the original die in its cell."""
        factory = DieFactory("B")
        monkeypatch.setattr(Die, "create", staticmethod(factory))
        profile = make_profile({"A": 1, "B": 99})
        board = BoardGrid.from_rows(["AA", "BB"])
        stuck_die = Die(faces=("A", "A", "A", "A", "B", "B"), visible="A")
        board.cells[0][1] = stuck_die

        # (0, 0) takes the only A, then (0, 1) shows A four times before a B
        result = board.regenerate(profile, ScriptedRandom([0, 0, 0, 0, 0, 4]))

        assert result.success is True
        assert factory.created == []
        assert board.cells[0][1] is stuck_die
        assert board.cells[0][1].visible == "B"

    def test_die_replaced_on_fifth_failure(self, monkeypatch):
        """The fifth failed roll installs a new die, which is rolled next."""
        factory = DieFactory("B")
        monkeypatch.setattr(Die, "create", staticmethod(factory))
        profile = make_profile({"A": 1, "B": 99})
        board = BoardGrid.from_rows(["AA", "BB"])
        board.cells[0][1] = Die(faces=("A", "A", "A", "A", "B", "B"), visible="A")

        result = board.regenerate(profile, ScriptedRandom([0] * (1 + REPLACE_DIE_AFTER)))

        assert result.success is True
        assert len(factory.created) == 1
        assert board.cells[0][1] is factory.created[0]

    def test_die_replaced_on_every_later_failure(self, monkeypatch):
        """Every failure from the fifth on installs another new die."""
        factory = DieFactory("A")
        monkeypatch.setattr(Die, "create", staticmethod(factory))
        profile = make_profile({"A": 1, "B": 99})
        board = BoardGrid.from_rows(["AA", "AA"])

        result = board.regenerate(profile, FirstChoiceRandom())

        assert result.success is False
        assert result.failure.failures == MAX_CELL_FAILURES + 1
        assert len(factory.created) == MAX_CELL_FAILURES + 2 - REPLACE_DIE_AFTER
        assert len({id(die) for die in factory.created}) == len(factory.created)
        assert board.cells[0][1] is factory.created[-1]

    def test_regenerate_clears_found_words(self, english):
        """Found words only live as long as the board they were found on."""
        result = BoardGrid.generate(4, english, random.Random(7))
        board = result.board
        board.mark_found("CAT")

        again = board.regenerate(english, random.Random(8))

        assert again.success is True
        assert again.board is board
        assert board.found_words == set()

    def test_failed_regenerate_keeps_found_words(self):
        profile = make_profile({"A": 1, "B": 99})
        board = BoardGrid.from_rows(["AB", "BA"])
        board.mark_found("AB")

        result = board.regenerate(profile, FirstChoiceRandom())

        assert result.success is False
        assert board.found_words == {"AB"}

    def test_from_rows_requires_square(self):
        with pytest.raises(ValueError):
            BoardGrid.from_rows(["AB", "C"])
        with pytest.raises(ValueError):
            BoardGrid.from_rows([])


class TestContains:
    """Test cases for adjacency word search."""

    def test_cat(self, sample_board):
        """C(1,0) -> A(0,0) -> T(0,1) is a valid path."""
        assert sample_board.contains("CAT") is True

    def test_stare_not_on_board(self, sample_board):
        """No adjacency path spells STARE."""
        assert sample_board.contains("STARE") is False

    def test_diagonal_steps(self, sample_board):
        """Paths may move diagonally."""
        assert sample_board.contains("SCAT") is True
        assert sample_board.contains("RATS") is True

    def test_cells_are_not_reused(self, sample_board):
        """CAC would need the single C twice."""
        assert sample_board.contains("CAC") is False
        assert sample_board.contains("TEE") is False

    def test_needs_backtracking(self, sample_board):
        """From T(0,1) the first A tried, A(0,0), has no R neighbour; A(1,1) does."""
        assert sample_board.contains("TAR") is True
        assert sample_board.contains("TEAT") is True

    def test_non_adjacent_letters(self, sample_board):
        """R and E are not neighbours."""
        assert sample_board.contains("RE") is False

    def test_single_letter_and_empty(self, sample_board):
        assert sample_board.contains("S") is True
        assert sample_board.contains("Z") is False
        assert sample_board.contains("") is False

    def test_search_is_read_only(self, sample_board):
        """Searching never touches the found words or the letters."""
        before = sample_board.visible_letters()
        sample_board.contains("CAT")
        assert sample_board.found_words == set()
        assert sample_board.visible_letters() == before

    def test_agrees_with_brute_force(self):
        """contains() is true exactly for the words spelled by some simple path."""
        rng = random.Random(11)
        for _ in range(10):
            rows = ["".join(rng.choice("AB") for _ in range(3)) for _ in range(3)]
            board = BoardGrid.from_rows(rows)
            spelled = _spelled_words(rows, max_length=4)

            for length in range(1, 5):
                for letters in itertools.product("ABC", repeat=length):
                    word = "".join(letters)
                    assert board.contains(word) is (word in spelled), (rows, word)


def _spelled_words(rows, max_length):
    """Every string spelled by a simple 8-adjacent path of at most max_length cells."""
    size = len(rows)
    words = set()

    def walk(path):
        words.add("".join(rows[r][c] for r, c in path))
        if len(path) == max_length:
            return
        r, c = path[-1]
        for nr in range(r - 1, r + 2):
            for nc in range(c - 1, c + 2):
                if 0 <= nr < size and 0 <= nc < size and (nr, nc) not in path:
                    walk(path + [(nr, nc)])

    for r in range(size):
        for c in range(size):
            walk([(r, c)])
    return words
