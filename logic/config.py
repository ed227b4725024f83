"""
Game configuration for TicTacToe.
Settings for game modes, the AI opponent and the window.
"""

from .game_state import Mark


class GameConfig:
    """
    Configuration class for game settings.
    Override values on an instance to change them for one session.
    """

    # ==================== GAME SETTINGS ====================
    DEFAULT_MODE = "pvp"  # "pvp" (human vs human) or "ai" (human vs computer)

    # ==================== AI SETTINGS ====================
    AI_MARK = Mark.O      # The computer plays O, the human X
    # Pause before the computer answers, only for the feel of the game.
    # Front ends apply it, the engine never waits.
    AI_REPLY_DELAY_MS = 250
    AI_SEED = None        # Set an int for repeatable corner/side choices

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    WINDOW_SIZE = "420x560"
    BACKGROUND_COLOR = '#1a1a2e'
    CELL_COLOR = '#16213e'
    WIN_CELL_COLOR = '#065f46'
    X_COLOR = '#f87171'
    O_COLOR = '#00d4ff'
    FONT_FAMILY = 'Segoe UI'

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False    # Print every move to the console
