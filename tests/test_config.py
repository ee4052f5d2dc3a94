import logging

import pytest

from wordgame import ScoreBoard
from wordgame.config import DEFAULT_LOG_FORMAT, DEFAULT_LOG_LEVEL, Config
from wordgame.utils import setup_logger


class QuietConfig(Config):
    LOG_LEVEL = 'warning'
    LOG_FORMAT = '%(message)s'


class TypoConfig(Config):
    LOG_LEVEL = 'verbose'


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture()
def isolated_logger():
    # a top-level name of its own so the package logger is left alone
    yield 'wgtest.config'
    top = logging.getLogger('wgtest')
    for h in list(top.handlers):
        top.removeHandler(h)


def test_defaults():
    assert DEFAULT_LOG_LEVEL == 'INFO'
    assert Config.LOG_FORMAT
    assert Config.LOG_LEVEL


def test_setup_logger_applies_config(isolated_logger):
    logger = setup_logger(isolated_logger, QuietConfig)
    top = logging.getLogger('wgtest')
    assert logger.name == 'wgtest.config'
    assert top.level == logging.WARNING
    assert len(top.handlers) == 1
    assert top.handlers[0].formatter._fmt == '%(message)s'
    # second call does not stack handlers
    setup_logger(isolated_logger, QuietConfig)
    assert len(top.handlers) == 1
    assert not logger.handlers


def test_unknown_level_falls_back(isolated_logger):
    with pytest.warns(RuntimeWarning, match='verbose'):
        setup_logger(isolated_logger, TypoConfig)
    assert logging.getLogger('wgtest').level == logging.getLevelName(DEFAULT_LOG_LEVEL)


def test_engine_lines_emitted_once_with_root_configured():
    root = logging.getLogger()
    root_records = ListHandler()
    package_records = ListHandler()
    package = logging.getLogger('wordgame')
    old_level = package.level
    root.addHandler(root_records)
    package.addHandler(package_records)
    package.setLevel(logging.INFO)
    try:
        ScoreBoard('eat').register_player('Ann')
    finally:
        root.removeHandler(root_records)
        package.removeHandler(package_records)
        package.setLevel(old_level)

    registered = [r for r in package_records.records if '[player-registered]' in r.getMessage()]
    assert len(registered) == 1
    assert registered[0].name == 'wordgame.game_logic'
    assert not [r for r in root_records.records if r.name.startswith('wordgame')]
