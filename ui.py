"""
TicTacToe UI
A graphical interface for playing against the CPU using Tkinter.

Shows:
- The 3x3 board (click a cell to play X)
- Game status ("Your Turn", "CPU is thinking...", result)
- A New Game button
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from engine import EngineConfig, GameSession, Marker, MoveSelector


class TicTacToeUI:
    """
    Main UI class for TicTacToe against the CPU.
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize the UI."""
        self.session = GameSession(MoveSelector(seed=seed))

        # Pending CPU move callback, so reset can cancel it
        self._cpu_job: Optional[str] = None

        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("Tic-Tac-Toe")
        self.root.configure(bg=EngineConfig.WINDOW_BG)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=EngineConfig.WINDOW_BG)
        style.configure('TLabel', background=EngineConfig.WINDOW_BG, foreground='white',
                        font=(EngineConfig.FONT_FAMILY, 11))
        style.configure('Title.TLabel', font=(EngineConfig.FONT_FAMILY, 18, 'bold'),
                        foreground=EngineConfig.TITLE_FG)
        style.configure('Status.TLabel', font=(EngineConfig.FONT_FAMILY, 13),
                        foreground=EngineConfig.STATUS_FG)

        ttk.Label(main_frame, text="Tic-Tac-Toe", style='Title.TLabel').pack()
        ttk.Label(main_frame, text="Play against the CPU (Easy Difficulty)").pack(pady=(0, 10))

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Board grid
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.cells = []
        for index in range(EngineConfig.BOARD_CELLS):
            row, col = divmod(index, EngineConfig.BOARD_SIZE)
            cell = tk.Button(
                board_frame,
                text="",
                font=(EngineConfig.FONT_FAMILY, 24, 'bold'),
                width=4,
                height=2,
                bg=EngineConfig.CELL_BG,
                activebackground=EngineConfig.CELL_BG,
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.cells.append(cell)

        tk.Button(
            main_frame,
            text="New Game",
            font=(EngineConfig.FONT_FAMILY, 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=16,
            command=self._reset_game
        ).pack(pady=10)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Handle a click on a board cell."""
        result = self.session.play_human_move(index)
        if not result.is_valid:
            return

        if self.session.is_cpu_thinking:
            self._cpu_job = self.root.after(EngineConfig.CPU_THINK_DELAY_MS, self._cpu_move)

        self._refresh()

    def _cpu_move(self):
        """Apply the CPU's move (runs after the think delay)."""
        self._cpu_job = None
        self.session.play_cpu_move()
        self._refresh()

    def _refresh(self):
        """Redraw the board and status from the session."""
        board = self.session.board
        line = self.session.winning_line or ()
        locked = self.session.is_game_over or self.session.is_cpu_thinking

        for index, cell in enumerate(self.cells):
            marker = board[index]
            if marker is None:
                text, fg = "", 'white'
            elif marker == Marker.PLAYER:
                text, fg = marker.value, EngineConfig.PLAYER_FG
            else:
                text, fg = marker.value, EngineConfig.OPPONENT_FG

            bg = EngineConfig.WIN_CELL_BG if index in line else EngineConfig.CELL_BG
            state = 'disabled' if locked or marker is not None else 'normal'
            cell.configure(text=text, fg=fg, disabledforeground=fg, bg=bg, state=state)

        self.status_label.configure(text=self.session.status_message())

    def _reset_game(self):
        """Reset the game."""
        if self._cpu_job is not None:
            self.root.after_cancel(self._cpu_job)
            self._cpu_job = None

        self.session.reset()
        self._refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
