"""
Board evaluation for TicTacToe.
Pure functions over a 9-cell board: who won, is it full, would a move win.

The board is a flat sequence of 9 cells in row-major order
(index i is row i // 3, column i % 3). Each cell is a Marker or None.
"""

from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .config import EngineConfig


class Marker(Enum):
    """The two markers that can occupy a cell."""
    PLAYER = EngineConfig.PLAYER_MARKER
    OPPONENT = EngineConfig.OPPONENT_MARKER

    def opposite(self) -> "Marker":
        """Get the other marker."""
        return Marker.OPPONENT if self == Marker.PLAYER else Marker.PLAYER


class GameOutcome(Enum):
    """Result of a board, always recomputed from the cells."""
    ONGOING = "ongoing"
    PLAYER_WINS = "player_wins"
    OPPONENT_WINS = "opponent_wins"
    DRAW = "draw"


Board = Sequence[Optional[Marker]]

# All possible winning lines, in the order they are checked
LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def new_board() -> List[Optional[Marker]]:
    """Create an empty board."""
    return [None] * EngineConfig.BOARD_CELLS


def winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """
    Get the first completed line, if there is one.

    Args:
        board: The board to check.

    Returns:
        The line as an index triple, or None if no line is complete.
    """
    for line in LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return line
    return None


def winner(board: Board) -> Optional[Marker]:
    """
    Check if there's a winner.

    Args:
        board: The board to check.

    Returns:
        The marker occupying the first completed line, or None.
    """
    line = winning_line(board)
    if line is None:
        return None
    return board[line[0]]


def is_full(board: Board) -> bool:
    """True if no cell is empty."""
    return all(cell is not None for cell in board)


def available_moves(board: Board) -> List[int]:
    """Indices of all empty cells, ascending."""
    return [index for index, cell in enumerate(board) if cell is None]


def would_win(board: Board, player: Marker, move: int) -> bool:
    """
    Check whether placing `player` at `move` completes a line for them.

    The move is tried on a copy; the given board is never touched.
    Asking about an occupied cell is a caller error and always answers False.

    Args:
        board: Current board.
        player: Marker to place.
        move: Cell index (0-8).

    Returns:
        True if the move wins the game for `player`.
    """
    if board[move] is not None:
        return False

    trial = list(board)
    trial[move] = player
    return winner(trial) == player


def evaluate(board: Board) -> GameOutcome:
    """Classify the board as ongoing, won by one side, or drawn."""
    result = winner(board)

    if result == Marker.PLAYER:
        return GameOutcome.PLAYER_WINS
    if result == Marker.OPPONENT:
        return GameOutcome.OPPONENT_WINS
    if is_full(board):
        return GameOutcome.DRAW
    return GameOutcome.ONGOING
