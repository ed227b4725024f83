"""
Logic module for TicTacToe.
Handles the board, rules, AI opponent and scorekeeping.
"""

__version__ = "1.0.0"

from .game_state import Board, Mark, new_game
from .win_checker import WinChecker, GameStatus, GameResult, WINNING_LINES
from .move_validator import MoveValidator, MoveError, InvalidMoveError
from .rules import apply_move, evaluate, is_terminal
from .ai_player import AIPlayer, choose_move
from .config import GameConfig
from .session import Session, Score, Mode, MoveOutcome
