"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (click a cell to play)
- Game status and whose turn it is
- Scoreboard for the session
- Mode selection (Player vs Player / Player vs Computer)
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from logic.config import GameConfig
from logic.game_state import Mark
from logic.move_validator import InvalidMoveError
from logic.session import Session, Mode, MoveOutcome


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, session: Optional[Session] = None, config: Optional[GameConfig] = None):
        """Initialize the UI."""
        self.config = config or GameConfig()
        self.session = session or Session(config=self.config)
        self._pending_reply: Optional[str] = None

        # Create UI
        self._create_ui()
        self._refresh()
        self._schedule_reply()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config
        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.BACKGROUND_COLOR)
        self.root.geometry(cfg.WINDOW_SIZE)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.BACKGROUND_COLOR)
        style.configure('TLabel', background=cfg.BACKGROUND_COLOR, foreground='white', font=(cfg.FONT_FAMILY, 11))
        style.configure('Title.TLabel', font=(cfg.FONT_FAMILY, 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=(cfg.FONT_FAMILY, 12), foreground='#ffd700')
        style.configure('TRadiobutton', background=cfg.BACKGROUND_COLOR, foreground='white')

        ttk.Label(main_frame, text="🎮 TicTacToe", style='Title.TLabel').pack(pady=(0, 10))

        # Mode selection
        mode_frame = ttk.Frame(main_frame)
        mode_frame.pack(pady=5)

        self.mode_var = tk.StringVar(value=self.session.mode.value)
        for text, value in (("Player vs Player", Mode.PVP.value), ("Player vs Computer", Mode.AI.value)):
            ttk.Radiobutton(
                mode_frame,
                text=text,
                value=value,
                variable=self.mode_var,
                command=self._on_mode_change
            ).pack(side=tk.LEFT, padx=5)

        # Board grid
        self.board_frame = ttk.Frame(main_frame)
        self.board_frame.pack(pady=10)

        self.board_cells = []
        for index in range(9):
            cell = tk.Button(
                self.board_frame,
                text="",
                font=(cfg.FONT_FAMILY, 24, 'bold'),
                width=4,
                height=2,
                bg=cfg.CELL_COLOR,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=index // 3, column=index % 3, padx=2, pady=2)
            self.board_cells.append(cell)

        # Status
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Scoreboard
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        self.score_label = ttk.Label(main_frame, text="")
        self.score_label.pack()

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="🔄 Restart",
            font=(cfg.FONT_FAMILY, 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._restart
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Reset Scores",
            font=(cfg.FONT_FAMILY, 11, 'bold'),
            bg='#2d3748',
            fg='white',
            width=12,
            command=self._reset_scores
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Handle a click on a board cell."""
        try:
            outcome = self.session.play(index)
        except InvalidMoveError as e:
            # Occupied cell, finished game or computer's turn: ignore the click
            if self.config.DEBUG_MODE:
                print(f"Ignored click on {index}: {e}")
            return

        self._after_move(outcome)
        self._schedule_reply()

    def _schedule_reply(self):
        """Queue the computer's move if it is due, including the opening move."""
        if self.session.awaiting_opponent and self._pending_reply is None:
            self._pending_reply = self.root.after(self.config.AI_REPLY_DELAY_MS, self._opponent_move)

    def _opponent_move(self):
        """Let the computer answer (scheduled with root.after)."""
        self._pending_reply = None
        outcome = self.session.opponent_move()
        if outcome is not None:
            self._after_move(outcome)

    def _after_move(self, outcome: MoveOutcome):
        if self.config.DEBUG_MODE:
            reason = f" ({self.session.ai.last_reason})" if self.session.mode is Mode.AI and outcome.mark == self.session.ai.player else ""
            print(f"{outcome.mark.value} played {outcome.index}{reason}")
        self._refresh()

    def _on_mode_change(self):
        """Switch between Player vs Player and Player vs Computer."""
        self._cancel_reply()
        self.session.set_mode(Mode(self.mode_var.get()))
        print(f"Mode set to: {self.session.mode.value}")
        self._refresh()
        self._schedule_reply()

    def _restart(self):
        self._cancel_reply()
        self.session.restart(keep_scores=True)
        self._refresh()
        self._schedule_reply()

    def _reset_scores(self):
        self._cancel_reply()
        self.session.restart(keep_scores=False)
        self._refresh()
        self._schedule_reply()

    def _cancel_reply(self):
        if self._pending_reply is not None:
            self.root.after_cancel(self._pending_reply)
            self._pending_reply = None

    def _refresh(self):
        """Redraw board, status and score from the session."""
        cfg = self.config
        board = self.session.board
        status = self.session.status

        for index, cell in enumerate(board.cells):
            button = self.board_cells[index]
            if cell is None:
                button.configure(text="", fg='white')
            else:
                # Played cells are disabled, keep their colour anyway
                color = cfg.X_COLOR if cell == Mark.X else cfg.O_COLOR
                button.configure(text=cell.value, fg=color, disabledforeground=color)

            # Highlight the winning line
            bg = cfg.WIN_CELL_COLOR if index in status.line else cfg.CELL_COLOR
            button.configure(bg=bg)
            button.configure(state='disabled' if cell is not None or status.is_terminal else 'normal')

        self.status_label.configure(text=self.session.status_message())

        score = self.session.score
        self.score_label.configure(
            text=f"X: {score.wins_x}    O: {score.wins_o}    Draws: {score.draws}"
        )

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_reply()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
