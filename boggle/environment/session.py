import json
import random
import time
from datetime import datetime
from pathlib import Path
from typing import List, Dict, Optional, Any, Callable
from pydantic import BaseModel, Field, ConfigDict

from ..engine.board import BoardGrid
from ..engine.acceptance import submit_word
from ..engine.data import load_letter_profile, load_word_index
from ..engine.letters import LetterProfile
from ..engine.models import WordCheck
from ..engine.parsing import clean_word
from ..engine.word_index import WordIndex
from .player import Player
from .models import GameConfig, WordSubmission, SessionResult
from .display import format_check, format_scores, format_final_scores


class BoardGenerationError(RuntimeError):
    """Raised when no board could be generated within the configured attempts."""


class GameSession(BaseModel):
    """
    Top-level orchestrator for a game of Boggle.

    Owns the board, the dictionary, the random source and the turn clock
    for one game, manages turn order and scoring.

    Attributes:
        config: Game configuration
        profile: Letter profile of the game language
        word_index: Dictionary of the game language
        board: The board of the turn in progress (or the last one)
        players: Players in turn order
        history: Every word submitted so far
        current_round: Round in progress, starting at 1
        current_player: Name of the player whose turn is running
        is_complete: Whether all rounds have been played
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    profile: LetterProfile
    word_index: WordIndex
    board: Optional[BoardGrid] = None
    players: List[Player] = Field(default_factory=list)
    history: List[WordSubmission] = Field(default_factory=list)
    current_round: int = 0
    current_player: Optional[str] = None
    is_complete: bool = False
    started_at: Optional[datetime] = None
    _rng: random.Random = None
    _clock: Callable[[], float] = None
    _turn_started_at: Optional[float] = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator and the clock after model creation."""
        self._rng = random.Random(self.config.seed)
        self._clock = time.monotonic

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        word_index: Optional[WordIndex] = None,
        profile: Optional[LetterProfile] = None,
        clock: Optional[Callable[[], float]] = None,
        **config_kwargs: Any
    ) -> "GameSession":
        """
        Factory method to create a game with its language data and players.

        Args:
            config: Optional GameConfig instance
            word_index: Dictionary to use instead of the configured word list
            profile: Letter profile to use instead of the configured letter file
            clock: Monotonic clock in seconds, time.monotonic by default
            **config_kwargs: Config parameters if config not provided

        Returns:
            Configured GameSession instance
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        if profile is None:
            profile = load_letter_profile(config.language, config.letters_path)
        if word_index is None:
            word_index = load_word_index(config.language, config.dictionary_path)

        players = [Player(name=name) for name in config.players]
        session = cls(config=config, profile=profile, word_index=word_index, players=players)
        if clock is not None:
            session._clock = clock
        return session

    def get_player(self, name: str) -> Player:
        for player in self.players:
            if player.name == name:
                return player
        raise ValueError(f"Unknown player '{name}'")

    @property
    def winner(self) -> Optional[Player]:
        """First player holding the highest score."""
        best: Optional[Player] = None
        for player in self.players:
            if best is None or player.score > best.score:
                best = player
        return best

    def _generate_board(self) -> BoardGrid:
        """
        Produce the board for a new turn.

        The existing grid is re-rolled first. Further attempts start from
        brand-new dice.
        """
        result = None
        for attempt in range(self.config.generation_attempts):
            if attempt == 0 and self.board is not None:
                result = self.board.regenerate(self.profile, self._rng)
            else:
                result = BoardGrid.generate(self.config.board_size, self.profile, self._rng)
            if result.success:
                return result.board

        raise BoardGenerationError(
            f"{result.failure.message} (after {self.config.generation_attempts} attempts)"
        )

    def start_turn(self, player: Player) -> BoardGrid:
        """
        Start a player's turn on a freshly generated board.

        Raises:
            BoardGenerationError: If no board could be generated
        """
        self.get_player(player.name)

        self.board = self._generate_board()
        self.current_player = player.name
        self._turn_started_at = self._clock()

        if self.started_at is None:
            self.started_at = datetime.now()
        if self.current_round == 0:
            self.current_round = 1

        return self.board

    def end_turn(self) -> None:
        self.current_player = None
        self._turn_started_at = None

    def elapsed(self) -> float:
        """Seconds since the current turn started."""
        if self._turn_started_at is None:
            return 0.0
        return self._clock() - self._turn_started_at

    def time_remaining(self) -> float:
        if self._turn_started_at is None:
            return 0.0
        return max(0.0, self.config.turn_seconds - self.elapsed())

    def turn_expired(self) -> bool:
        return self._turn_started_at is None or self.elapsed() > self.config.turn_seconds

    def submit(self, raw: str) -> WordSubmission:
        """
        Submit a word for the player whose turn is running.

        Accepted words are scored with the letter profile and credited to
        the player. Words arriving after the time limit are rejected.

        Raises:
            ValueError: If no turn is in progress
        """
        if self.board is None or self.current_player is None:
            raise ValueError("No turn in progress. Call start_turn() first.")

        player = self.get_player(self.current_player)
        elapsed = self.elapsed()

        if elapsed > self.config.turn_seconds:
            check = WordCheck(
                word=clean_word(raw),
                accepted=False,
                code="TIME_UP",
                message="Time's up!",
            )
        else:
            check = submit_word(raw, self.board, self.word_index)
            if check.accepted:
                check.points = self.profile.score_word(check.word)
                player.add_word(check.word, check.points)

        submission = WordSubmission(
            player=player.name,
            round_number=self.current_round,
            raw=raw,
            check=check,
            elapsed_seconds=elapsed,
        )
        self.history.append(submission)
        return submission

    def play_turn(
        self,
        player: Player,
        read_word: Callable[[], str],
        interactive: bool = False,
        on_submission: Optional[Callable[[WordSubmission], None]] = None,
    ) -> List[WordSubmission]:
        """
        Play one timed turn, reading words until a blank answer or the time limit.

        Args:
            player: The player taking the turn
            read_word: Returns the next word typed by the player
            interactive: If True, print the board and feedback to stdout
            on_submission: Optional callback called after each word

        Returns:
            The submissions made during the turn
        """
        board = self.start_turn(player)

        if interactive:
            print(f"\n{'='*40}")
            print(f"Round {self.current_round}: it's {player.name}'s turn!")
            print(f"You have {self.config.turn_seconds:.0f} seconds.")
            print("-" * 40)
            print(board.render())
            print("-" * 40)

        submissions: List[WordSubmission] = []
        while not self.turn_expired():
            raw = read_word()
            if not raw.strip():
                break

            submission = self.submit(raw)
            submissions.append(submission)

            if interactive:
                print(format_check(submission.check))
            if on_submission:
                on_submission(submission)

        timed_out = self.turn_expired()
        self.end_turn()

        if interactive:
            prefix = "Time's up! " if timed_out else ""
            print(f"{prefix}End of {player.name}'s turn!")

        return submissions

    def run(
        self,
        read_word: Callable[[], str],
        verbose: bool = False,
        interactive: bool = False,
        on_submission: Optional[Callable[[WordSubmission], None]] = None,
    ) -> SessionResult:
        """
        Play every round until the game is complete.

        Args:
            read_word: Returns the next word typed by the current player
            verbose: If True, also print the game settings before the first round
            interactive: If True, print boards, feedback and scores to stdout
            on_submission: Optional callback called after each word

        Returns:
            SessionResult containing the full game data
        """
        if self.is_complete:
            raise ValueError("Game is already complete")

        self.started_at = datetime.now()
        interactive = interactive or verbose

        if verbose:
            print(f"Starting game with {len(self.players)} players")
            print(f"Language: {self.config.language}, board: {self.config.board_size}x{self.config.board_size}")
            print(f"Rounds: {self.config.turns}")

        for round_index in range(self.config.turns):
            self.current_round = round_index + 1
            for player in self.players:
                self.play_turn(player, read_word, interactive=interactive, on_submission=on_submission)

            if interactive:
                print()
                print(format_scores(self.players))

        self.is_complete = True

        if interactive:
            print()
            print("The game is over, well played!")
            print(format_final_scores(self.players, self.winner))

        return self.get_result()

    def get_state(self) -> Dict:
        """
        Get the current game state.

        Returns:
            Dictionary containing game state
        """
        return {
            "current_round": self.current_round,
            "current_player": self.current_player,
            "is_complete": self.is_complete,
            "time_remaining": self.time_remaining(),
            "board": self.board.visible_letters() if self.board else None,
            "found_words": sorted(self.board.found_words) if self.board else [],
            "players": [p.get_state() for p in self.players],
            "num_submissions": len(self.history),
        }

    def get_result(self) -> SessionResult:
        """
        Get the game result.

        Returns:
            SessionResult containing full game data
        """
        ended_at = datetime.now()
        duration = (ended_at - self.started_at).total_seconds() if self.started_at else 0.0
        winner = self.winner

        return SessionResult(
            config=self.config,
            winner=winner.name if winner and self.is_complete else None,
            rounds_played=self.current_round if self.is_complete else max(0, self.current_round - 1),
            scores={p.name: p.score for p in self.players},
            found_words={p.name: dict(p.found_words) for p in self.players},
            submissions=self.history,
            started_at=self.started_at.isoformat() if self.started_at else "",
            ended_at=ended_at.isoformat(),
            duration_seconds=duration,
        )

    def save_result(self, path: str | Path) -> None:
        """
        Save the game result to a JSON file.

        Args:
            path: Path to save the result file
        """
        result = self.get_result()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(result.model_dump(), f, indent=2, default=str)
