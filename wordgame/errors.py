from __future__ import annotations


class WordGameError(Exception):
    """Base class for errors raised by the word game engine."""


class PlayerNotFoundError(WordGameError, KeyError):
    def __init__(self, player_name: str):
        super().__init__(player_name)
        self.player_name = player_name

    def __str__(self) -> str:
        return f"Player not found: {self.player_name!r}"


class InvalidStartingStringError(WordGameError, ValueError):
    def __init__(self, starting_string: str):
        super().__init__(starting_string)
        self.starting_string = starting_string

    def __str__(self) -> str:
        return f"Starting string must be ASCII lowercase letters only: {self.starting_string!r}"


class GameNotFoundError(WordGameError, KeyError):
    def __init__(self, game_id: str):
        super().__init__(game_id)
        self.game_id = game_id

    def __str__(self) -> str:
        return f"Game not found: {self.game_id!r}"


class GameExistsError(WordGameError):
    def __init__(self, game_id: str):
        super().__init__(f"Game already exists: {game_id!r}")
        self.game_id = game_id
