"""
CPU opponent for TicTacToe.
Takes a win, blocks a loss, and otherwise only sometimes plays the
Minimax move - the rest of the time it picks a random empty cell.
"""

import logging
import random
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from .board import Board, Marker, available_moves, is_full, winner, would_win
from .config import EngineConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a Minimax search.

    move is -1 when there was nothing to choose (terminal board).
    score is from the CPU's point of view: +10 win, 0 draw, -10 loss.
    """
    move: int
    score: int


def optimal_move(board: Board, maximizing: bool = True) -> SearchResult:
    """
    Find the Minimax move by searching the whole game tree.

    Args:
        board: Current board. Not modified.
        maximizing: True if it's the CPU's (OPPONENT) turn to move.

    Returns:
        SearchResult with the best move and its score. Ties go to the
        lowest index. move is -1 if the game is already over.
    """
    return _search(tuple(board), maximizing)


@lru_cache(maxsize=None)
def _search(board: Tuple[Optional[Marker], ...], maximizing: bool) -> SearchResult:
    # Check terminal states
    result = winner(board)

    if result == Marker.OPPONENT:
        return SearchResult(-1, EngineConfig.WIN_SCORE)
    if result == Marker.PLAYER:
        return SearchResult(-1, EngineConfig.LOSS_SCORE)
    if is_full(board):
        return SearchResult(-1, EngineConfig.DRAW_SCORE)

    marker = Marker.OPPONENT if maximizing else Marker.PLAYER
    best_move = -1
    best_score = float('-inf') if maximizing else float('inf')

    for move in available_moves(board):
        child = board[:move] + (marker,) + board[move + 1:]
        score = _search(child, not maximizing).score

        # Only a strictly better score replaces the incumbent
        if (maximizing and score > best_score) or (not maximizing and score < best_score):
            best_move = move
            best_score = score

    return SearchResult(best_move, int(best_score))


class MoveSelector:
    """
    Chooses the CPU's move on "easy" difficulty.

    Priority:
    1. Win now if possible
    2. Block the human's winning move
    3. Otherwise play the Minimax move with probability
       OPTIMAL_MOVE_PROBABILITY, or a random empty cell
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        optimal_probability: float = EngineConfig.OPTIMAL_MOVE_PROBABILITY
    ):
        """
        Initialize the move selector.

        Args:
            rng: Source of randomness (anything with random() and choice()).
            seed: Seed for a fresh random.Random when rng is not given.
            optimal_probability: Chance of playing the Minimax move in tier 3.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.optimal_probability = optimal_probability

    def select_move(self, board: Board) -> int:
        """
        Pick the CPU's next move.

        Args:
            board: Current board, already holding the human's last move.

        Returns:
            Index of an empty cell, or -1 if the board is full.
        """
        moves = available_moves(board)

        if not moves:
            logger.warning("select_move called on a full board")
            return -1

        # 1. Take a win
        for move in moves:
            if would_win(board, Marker.OPPONENT, move):
                logger.debug("Winning move at %d", move)
                return move

        # 2. Block the human
        for move in moves:
            if would_win(board, Marker.PLAYER, move):
                logger.debug("Blocking move at %d", move)
                return move

        # 3. Easy difficulty: mostly random
        if self.rng.random() < self.optimal_probability:
            result = optimal_move(board)
            logger.debug("Minimax move at %d (score %d)", result.move, result.score)
            return result.move

        move = self.rng.choice(moves)
        logger.debug("Random move at %d", move)
        return move
