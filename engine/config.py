"""
Engine configuration for TicTacToe.
All the tunable constants for the board, the CPU opponent and the UI.
"""


class EngineConfig:
    """
    Configuration class for engine settings.
    The CPU difficulty lives here too - it is the only knob there is.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    BOARD_CELLS = BOARD_SIZE * BOARD_SIZE  # 9 cells, row-major

    # Markers shown on the board
    PLAYER_MARKER = "X"     # Human, always moves first
    OPPONENT_MARKER = "O"   # CPU

    # ==================== SEARCH SETTINGS ====================
    # Minimax scores, from the CPU's point of view.
    # Not adjusted by depth: a win in 1 and a win in 5 both score WIN_SCORE.
    WIN_SCORE = 10
    LOSS_SCORE = -10
    DRAW_SCORE = 0

    # ==================== DIFFICULTY ====================
    # "Easy": when there is nothing to win or block, play the minimax
    # move only this often, otherwise play a random empty cell.
    OPTIMAL_MOVE_PROBABILITY = 0.25

    # ==================== UI SETTINGS ====================
    # Fake "CPU is thinking" pause before the CPU move is applied
    CPU_THINK_DELAY_MS = 500

    WINDOW_BG = '#1a1a2e'
    CELL_BG = '#16213e'
    WIN_CELL_BG = '#065f46'
    PLAYER_FG = '#00ff88'
    OPPONENT_FG = '#ff6b6b'
    TITLE_FG = '#00d4ff'
    STATUS_FG = '#ffd700'
    FONT_FAMILY = 'Segoe UI'
