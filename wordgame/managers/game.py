from __future__ import annotations
import threading
from typing import Dict, List

from ..errors import GameExistsError, GameNotFoundError
from ..game_logic import ScoreBoard
from ..schemas import Player, ScoreBoardState
from .. import utils

logger = utils.setup_logger(__name__)


class Game:
    def __init__(self, game_id: str, starting_string: str):
        self.id = game_id
        self.board = ScoreBoard(starting_string)
        # one writer at a time per scoreboard
        self.lock = threading.Lock()


class GameManager:
    """Hosts several scoreboards by game id and serializes access to each one.

    Boards never leave the manager; every call runs under the board's lock
    and hands back copies or snapshots.
    """

    def __init__(self):
        self._games: Dict[str, Game] = {}
        self._registry_lock = threading.Lock()

    def create_game(self, game_id: str, starting_string: str = '') -> ScoreBoardState:
        with self._registry_lock:
            if game_id in self._games:
                raise GameExistsError(game_id)
            game = Game(game_id, starting_string)
            self._games[game_id] = game
        logger.info(f"[game-created] game={game_id} starting_string={starting_string}")
        return game.board.to_state()

    def _game(self, game_id: str) -> Game:
        with self._registry_lock:
            game = self._games.get(game_id)
        if game is None:
            raise GameNotFoundError(game_id)
        return game

    def game_ids(self) -> List[str]:
        with self._registry_lock:
            return list(self._games)

    def add_player(self, game_id: str, name: str) -> Player:
        game = self._game(game_id)
        with game.lock:
            return game.board.register_player(name)

    def get_player(self, game_id: str, name: str) -> Player:
        game = self._game(game_id)
        with game.lock:
            return game.board.get_player(name)

    def submit(self, game_id: str, player_name: str, word: str) -> int:
        game = self._game(game_id)
        with game.lock:
            return game.board.submit(player_name, word)

    def standings(self, game_id: str) -> List[Player]:
        game = self._game(game_id)
        with game.lock:
            return game.board.standings()

    def state(self, game_id: str) -> ScoreBoardState:
        game = self._game(game_id)
        with game.lock:
            return game.board.to_state()
