"""
TicTacToe engine.
Board evaluation, the "easy" CPU opponent, and the turn state machine.
"""

__version__ = "1.0.0"

from .config import EngineConfig
from .board import (
    LINES,
    Board,
    GameOutcome,
    Marker,
    available_moves,
    evaluate,
    is_full,
    new_board,
    winner,
    winning_line,
    would_win,
)
from .move_selector import MoveSelector, SearchResult, optimal_move
from .game_session import GameSession, MoveResult, TurnState
