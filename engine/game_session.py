"""
Game session for TicTacToe.
Owns the board and whose turn it is, and decides which moves are legal.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .board import (
    GameOutcome,
    Marker,
    evaluate,
    new_board,
    winning_line,
)
from .config import EngineConfig
from .move_selector import MoveSelector

logger = logging.getLogger(__name__)


class TurnState(Enum):
    """Where the game is in its turn cycle."""
    TURN_PLAYER = "turn_player"
    TURN_OPPONENT_PENDING = "turn_opponent_pending"  # Human moved, CPU move not started
    TURN_OPPONENT = "turn_opponent"                  # CPU move being chosen
    GAME_OVER = "game_over"


@dataclass
class MoveResult:
    """Result of trying a human move."""
    is_valid: bool
    error_message: Optional[str] = None


class GameSession:
    """
    One game of human (X) against CPU (O).

    Flow:
    1. Human plays a cell (TURN_PLAYER -> TURN_OPPONENT_PENDING)
    2. Front-end waits a moment, then asks for the CPU move
       (TURN_OPPONENT_PENDING -> TURN_OPPONENT -> TURN_PLAYER)
    3. Any move that wins or fills the board ends the game (GAME_OVER)
    """

    def __init__(self, selector: Optional[MoveSelector] = None):
        self.selector = selector if selector is not None else MoveSelector()
        self._board: List[Optional[Marker]] = new_board()
        self.state = TurnState.TURN_PLAYER

    @property
    def board(self) -> List[Optional[Marker]]:
        """A copy of the current board."""
        return list(self._board)

    @property
    def outcome(self) -> GameOutcome:
        return evaluate(self._board)

    @property
    def is_game_over(self) -> bool:
        return self.state == TurnState.GAME_OVER

    @property
    def is_cpu_thinking(self) -> bool:
        return self.state in (TurnState.TURN_OPPONENT_PENDING, TurnState.TURN_OPPONENT)

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return winning_line(self._board)

    def play_human_move(self, index: int) -> MoveResult:
        """
        Place the human's marker.

        Args:
            index: Cell index (0-8).

        Returns:
            MoveResult with is_valid and error_message.
        """
        if self.is_game_over:
            return MoveResult(is_valid=False, error_message="Game is already over!")

        if self.is_cpu_thinking:
            return MoveResult(is_valid=False, error_message="Wait for the CPU to move!")

        if not 0 <= index < EngineConfig.BOARD_CELLS:
            return MoveResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{EngineConfig.BOARD_CELLS - 1}."
            )

        if self._board[index] is not None:
            return MoveResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {self._board[index].value}"
            )

        self._board[index] = Marker.PLAYER
        logger.info("Human played %d", index)

        if not self._check_game_over():
            self.state = TurnState.TURN_OPPONENT_PENDING

        return MoveResult(is_valid=True)

    def play_cpu_move(self) -> int:
        """
        Let the CPU move, if it's waiting to.

        Returns:
            The cell the CPU played, or -1 if it wasn't the CPU's turn.
        """
        if self.state != TurnState.TURN_OPPONENT_PENDING:
            logger.warning("CPU move requested in state %s", self.state.value)
            return -1

        self.state = TurnState.TURN_OPPONENT
        move = self.selector.select_move(self._board)

        self._board[move] = Marker.OPPONENT
        logger.info("CPU played %d", move)

        if not self._check_game_over():
            self.state = TurnState.TURN_PLAYER

        return move

    def _check_game_over(self) -> bool:
        """Move to GAME_OVER if the board is won or full."""
        outcome = self.outcome
        if outcome == GameOutcome.ONGOING:
            return False

        self.state = TurnState.GAME_OVER
        logger.info("Game over: %s", outcome.value)
        return True

    def status_message(self) -> str:
        """Human-readable status line."""
        if self.is_cpu_thinking:
            return "CPU is thinking..."

        outcome = self.outcome
        if outcome == GameOutcome.PLAYER_WINS:
            return "You Win!"
        if outcome == GameOutcome.OPPONENT_WINS:
            return "CPU Wins!"
        if outcome == GameOutcome.DRAW:
            return "It's a Draw!"
        return f"Your Turn ({Marker.PLAYER.value})"

    def reset(self):
        """Start a new game."""
        self._board = new_board()
        self.state = TurnState.TURN_PLAYER
        logger.info("Game reset")
