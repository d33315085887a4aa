"""Tic-tac-toe on a 3x3 board.

Reference implementation of the game abstraction, used by the driver
scripts and the tests. Actions are ``(row, col)`` tuples.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from ..game import GameState, Player

Cell = Optional["Mark"]
Board = Tuple[Tuple[Cell, ...], ...]

LINES = (
    [((r, 0), (r, 1), (r, 2)) for r in range(3)]
    + [((0, c), (1, c), (2, c)) for c in range(3)]
    + [((0, 0), (1, 1), (2, 2)), ((0, 2), (1, 1), (2, 0))]
)


@dataclass(frozen=True)
class Mark(Player):
    """A tic-tac-toe player: win 1, tie 0.5, loss 0."""
    symbol: str

    def reward_when_outcome_is(self, outcome: Union["Win", "Tie"]) -> float:
        if isinstance(outcome, Win):
            return 1.0 if outcome.winner == self else 0.0
        return 0.5

    def next(self) -> "Mark":
        return CROSS if self == NOUGHT else NOUGHT

    def __repr__(self) -> str:
        return self.symbol


NOUGHT = Mark("O")
CROSS = Mark("X")


@dataclass(frozen=True)
class Win:
    winner: Mark


@dataclass(frozen=True)
class Tie:
    pass


def _empty_board() -> Board:
    return tuple(tuple(None for _ in range(3)) for _ in range(3))


def _outcome(board: Board) -> Optional[Union[Win, Tie]]:
    for line in LINES:
        first = board[line[0][0]][line[0][1]]
        if first is not None and all(board[r][c] == first for r, c in line):
            return Win(first)
    if all(cell is not None for row in board for cell in row):
        return Tie()
    return None


@dataclass(frozen=True)
class TicTacToe(GameState):
    """Immutable tic-tac-toe position. NOUGHT moves first."""
    board: Board = _empty_board()
    to_move: Mark = NOUGHT

    def player(self) -> Mark:
        return self.to_move

    def end_status(self) -> Optional[Union[Win, Tie]]:
        return _outcome(self.board)

    def occupied(self, action: Tuple[int, int]) -> bool:
        row, col = action
        return self.board[row][col] is not None

    def possible_actions(self) -> List[Tuple[int, int]]:
        if self.end_status() is not None:
            return []
        return [(r, c) for r in range(3) for c in range(3) if self.board[r][c] is None]

    def act(self, action: Tuple[int, int]) -> "TicTacToe":
        row, col = action
        if self.board[row][col] is not None:
            raise ValueError(f"Cell {action} is already taken")
        board = tuple(
            tuple(self.to_move if (r, c) == (row, col) else self.board[r][c] for c in range(3))
            for r in range(3)
        )
        return TicTacToe(board=board, to_move=self.to_move.next())

    @classmethod
    def from_rows(cls, rows: Sequence[str], to_move: Optional[Mark] = None) -> "TicTacToe":
        """Build a position from three strings such as ``"OX-"``.

        The player to move defaults to whoever has placed fewer marks,
        NOUGHT on equal counts.
        """
        if len(rows) != 3 or any(len(row) != 3 for row in rows):
            raise ValueError("Board must be 3 rows of 3 cells")
        symbols = {"O": NOUGHT, "X": CROSS, "-": None, ".": None}
        try:
            board = tuple(tuple(symbols[ch] for ch in row.upper()) for row in rows)
        except KeyError as e:
            raise ValueError(f"Unknown cell symbol: {e.args[0]}") from None

        if to_move is None:
            noughts = sum(cell == NOUGHT for row in board for cell in row)
            crosses = sum(cell == CROSS for row in board for cell in row)
            to_move = CROSS if noughts > crosses else NOUGHT
        return cls(board=board, to_move=to_move)

    def render(self) -> str:
        lines = ["┌───┐"]
        for row in self.board:
            cells = "".join(cell.symbol if cell is not None else "-" for cell in row)
            lines.append(f"│{cells}│")
        lines.append("└───┘")
        return "\n".join(lines)
