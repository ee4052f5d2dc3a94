import pytest

from wordgame import AllowedWords, GameManager, ScoreBoard


@pytest.fixture()
def board():
    sb = ScoreBoard('eat')
    sb.register_player('Ann')
    return sb


@pytest.fixture()
def lexicon():
    words = AllowedWords('cat')
    words.add('dog')
    return words


@pytest.fixture()
def manager():
    games = GameManager()
    games.create_game('table-1', 'listen')
    return games
