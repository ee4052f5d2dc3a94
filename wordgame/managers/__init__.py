from .game import GameManager

__all__ = ['GameManager']
