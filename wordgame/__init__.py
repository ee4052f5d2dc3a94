"""Word-construction game engine.

Players build words from the letters of a fixed starting string; each new
valid word scores its length for the player who submitted it.
"""

from .dictionary import AllowedWords, HashedWords, WordSet
from .errors import (
    GameExistsError,
    GameNotFoundError,
    InvalidStartingStringError,
    PlayerNotFoundError,
    WordGameError,
)
from .game_logic import ScoreBoard, Verdict, WordGame
from .letters import LetterTally, is_lowercase_word
from .managers import GameManager
from .schemas import Player, ScoreBoardState, SubmissionRecord

__all__ = [
    "AllowedWords",
    "HashedWords",
    "WordSet",
    "GameExistsError",
    "GameNotFoundError",
    "InvalidStartingStringError",
    "PlayerNotFoundError",
    "WordGameError",
    "ScoreBoard",
    "Verdict",
    "WordGame",
    "LetterTally",
    "is_lowercase_word",
    "GameManager",
    "Player",
    "ScoreBoardState",
    "SubmissionRecord",
]
