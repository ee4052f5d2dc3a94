import os

DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


class Config:
    # Logging
    LOG_LEVEL = os.environ.get('WORDGAME_LOG_LEVEL') or DEFAULT_LOG_LEVEL
    LOG_FORMAT = os.environ.get('WORDGAME_LOG_FORMAT') or DEFAULT_LOG_FORMAT
