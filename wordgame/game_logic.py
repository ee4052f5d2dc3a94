from __future__ import annotations
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Protocol, Set, Tuple, runtime_checkable

from .errors import InvalidStartingStringError, PlayerNotFoundError
from .letters import LetterTally, is_lowercase_word
from .schemas import Player, ScoreBoardState, SubmissionRecord
from . import utils

logger = utils.setup_logger(__name__)


class Verdict(str, Enum):
    ACCEPTED = 'accepted'
    EMPTY = 'empty'
    INVALID_CHARACTERS = 'invalid_characters'
    INSUFFICIENT_LETTERS = 'insufficient_letters'
    ALREADY_USED = 'already_used'


@runtime_checkable
class WordGame(Protocol):
    """Submission and position read-back surface shared by scoreboards."""

    def submit(self, player_name: str, word: str) -> int:
        ...

    def get_player_name_at_position(self, position: int) -> str:
        ...

    def get_word_entry_at_position(self, position: int) -> str:
        ...

    def get_score_at_position(self, position: int) -> int:
        ...


class ScoreBoard:
    """Validates and scores words drawn from a fixed starting string.

    A word is accepted when it is ASCII lowercase, needs no more of any letter
    than the starting string holds, and has not been accepted before in this
    session. The starting string is never consumed: every word is checked
    against the full pool. Accepted words score one point per letter.

    Not thread safe. Callers that share a scoreboard must serialize access
    (see ``managers.game.GameManager``).
    """

    def __init__(self, starting_string: str = ''):
        if not is_lowercase_word(starting_string):
            raise InvalidStartingStringError(starting_string)
        self.starting_string = starting_string
        self._pool = LetterTally.from_string(starting_string)
        self._used_words: Set[str] = set()
        # append-only; a record's position is its index
        self._submissions: List[SubmissionRecord] = []
        self._players: Dict[str, Player] = {}

    # Players

    def register_player(self, name: str) -> Player:
        player = self._players.get(name)
        if player is None:
            player = Player(name=name)
            self._players[name] = player
            logger.info(f"[player-registered] player={name}")
        return player.model_copy(deep=True)

    def has_player(self, name: str) -> bool:
        return name in self._players

    def get_player(self, name: str) -> Player:
        player = self._players.get(name)
        if player is None:
            raise PlayerNotFoundError(name)
        return player.model_copy(deep=True)

    @property
    def players(self) -> List[Player]:
        return [p.model_copy(deep=True) for p in self._players.values()]

    def standings(self) -> List[Player]:
        # highest score first; ties keep registration order
        return sorted(self.players, key=lambda p: -p.score)

    # Submissions

    def check_word(self, word: str) -> Verdict:
        if not word:
            return Verdict.EMPTY
        if not is_lowercase_word(word):
            return Verdict.INVALID_CHARACTERS
        if not LetterTally.from_string(word).fits_within(self._pool):
            return Verdict.INSUFFICIENT_LETTERS
        if word in self._used_words:
            return Verdict.ALREADY_USED
        return Verdict.ACCEPTED

    def submit(self, player_name: str, word: str) -> int:
        """Score ``word`` for ``player_name``; 0 means rejected and nothing changed.

        Raises PlayerNotFoundError when a valid word comes from a player that
        was never registered.
        """
        verdict = self.check_word(word)
        if verdict is not Verdict.ACCEPTED:
            logger.debug(f"[submit-rejected] player={player_name} word={word!r} reason={verdict.value}")
            return 0

        player = self._players.get(player_name)
        if player is None:
            logger.warning(f"[submit-unknown-player] player={player_name} word={word!r}")
            raise PlayerNotFoundError(player_name)

        score = len(word)
        record = SubmissionRecord(
            position=len(self._submissions),
            player_name=player_name,
            word=word,
            score=score,
        )
        self._used_words.add(word)
        self._submissions.append(record)
        player.words.append(word)
        player.score += score
        logger.info(
            f"[submit-accepted] position={record.position} player={player_name} word={word} score={score} total={player.score}"
        )
        return score

    # Position lookups

    def _record_at(self, position: int) -> Optional[SubmissionRecord]:
        if 0 <= position < len(self._submissions):
            return self._submissions[position]
        return None

    def get_player_name_at_position(self, position: int) -> str:
        record = self._record_at(position)
        return record.player_name if record is not None else ''

    def get_word_entry_at_position(self, position: int) -> str:
        record = self._record_at(position)
        return record.word if record is not None else ''

    def get_score_at_position(self, position: int) -> int:
        record = self._record_at(position)
        return record.score if record is not None else 0

    # Read-back

    @property
    def submissions(self) -> Tuple[SubmissionRecord, ...]:
        return tuple(self._submissions)

    @property
    def used_words(self) -> FrozenSet[str]:
        return frozenset(self._used_words)

    def to_state(self) -> ScoreBoardState:
        return ScoreBoardState(
            starting_string=self.starting_string,
            players=self.players,
            submissions=list(self._submissions),
            used_words=[r.word for r in self._submissions],
        )
