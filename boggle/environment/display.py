"""
Console text for the game: word feedback and score tables.
"""

from typing import List, Optional

from ..engine.models import WordCheck
from .player import Player


def format_scores(players: List[Player], title: str = "Current scores:") -> str:
    """Format one score line per player under a title."""
    lines = [title]
    for player in players:
        lines.append(f"Player {player.name}: {player.score} points")
    return "\n".join(lines)


def format_check(check: WordCheck) -> str:
    """Format the outcome of a submitted word."""
    if check.accepted:
        return f"{check.message} {check.word} (+{check.points})"
    return check.message


def format_final_scores(players: List[Player], winner: Optional[Player]) -> str:
    """Format the final scores and congratulate the winner."""
    text = format_scores(players, title="Final scores:")
    if winner is not None:
        text += f"\nCongratulations to the winner: {winner.name} with {winner.score} points!"
    return text
