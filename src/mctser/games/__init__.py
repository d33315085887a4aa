"""Reference games implementing the game abstraction."""

from .tictactoe import TicTacToe, Mark, Win, Tie, NOUGHT, CROSS

__all__ = ["TicTacToe", "Mark", "Win", "Tie", "NOUGHT", "CROSS"]
