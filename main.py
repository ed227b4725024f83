"""
Main entry point for TicTacToe.

Launches the Tkinter window by default, or a console game with --no-ui.
Both drive the same Session from the logic package.
"""

import random
import sys
import time
from typing import Callable, Optional

from logic.config import GameConfig
from logic.move_validator import InvalidMoveError
from logic.session import Session, Mode, MoveOutcome

HELP_TEXT = "Enter a cell 0-8, 'r' restart, 'm' switch mode, 's' score, 'q' quit."


class ConsoleGame:
    """
    Plays TicTacToe in the terminal.

    Input and output are injectable so the loop can run without a terminal.
    """

    def __init__(
        self,
        session: Session,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
        sleep_fn: Optional[Callable[[float], None]] = None
    ):
        self.session = session
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.sleep_fn = sleep_fn or time.sleep
        self.is_running = False

    def start(self):
        """Run until the user quits or input runs out."""
        self.is_running = True
        self.output_fn(HELP_TEXT)
        self._show()
        self._computer_move()

        while self.is_running:
            try:
                command = self.input_fn("> ").strip().lower()
            except EOFError:
                break
            self.handle_command(command)

        self._show_score()

    def handle_command(self, command: str):
        """Process one line of user input."""
        if command == "q":
            self.output_fn("\nGame quit by user.")
            self.is_running = False
        elif command == "r":
            self.session.restart(keep_scores=True)
            self._show()
            self._computer_move()
        elif command == "m":
            mode = Mode.AI if self.session.mode is Mode.PVP else Mode.PVP
            self.session.set_mode(mode)
            self._show()
            self._computer_move()
        elif command == "s":
            self._show_score()
        elif command.isdigit():
            self._human_move(int(command))
        elif command:
            self.output_fn(HELP_TEXT)

    def _human_move(self, index: int):
        try:
            outcome = self.session.play(index)
        except InvalidMoveError as e:
            self.output_fn(f"Move rejected: {e}")
            return

        self._report(outcome)
        self._computer_move()

    def _computer_move(self):
        """Let the computer play if it is due, including the opening move."""
        if not self.session.awaiting_opponent:
            return

        self.output_fn("\n>>> Computer is thinking...")
        self.sleep_fn(self.session.config.AI_REPLY_DELAY_MS / 1000.0)
        outcome = self.session.opponent_move()
        if outcome is not None:
            if self.session.config.DEBUG_MODE:
                self.output_fn(f"[debug] computer chose {outcome.index} ({self.session.ai.last_reason})")
            self._report(outcome)

    def _report(self, outcome: MoveOutcome):
        self.output_fn(f"\n>>> {outcome.mark.value} plays {outcome.index}")
        self._show()
        if outcome.status.is_terminal:
            self.output_fn("Type 'r' for a new game.")

    def _show(self):
        self.output_fn("")
        self.output_fn(self.session.board.render())
        self.output_fn(f"\n{self.session.status_message()}")

    def _show_score(self):
        score = self.session.score
        self.output_fn(f"Score  X: {score.wins_x}  O: {score.wins_o}  Draws: {score.draws}")


def build_session(args) -> Session:
    """Create the Session described by the command line."""
    config = GameConfig()
    if args.delay is not None:
        config.AI_REPLY_DELAY_MS = args.delay
    if args.debug:
        config.DEBUG_MODE = True

    seed = args.seed if args.seed is not None else config.AI_SEED
    rng = random.Random(seed) if seed is not None else None

    mode = Mode(args.mode) if args.mode else None
    return Session(mode=mode, config=config, rng=rng)


def parse_args(argv: Optional[list] = None):
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in Mode],
        help="pvp: two players, ai: play against the computer"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the computer's random corner/side choices"
    )
    parser.add_argument(
        "--delay",
        type=int,
        help="Milliseconds the computer waits before answering"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print why the computer picked each move"
    )
    return parser.parse_args(argv)


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    session = build_session(args)

    print("\n" + "="*60)
    print("   TicTacToe")
    print("="*60)
    print(f"   Mode: {'Player vs Computer' if session.mode is Mode.AI else 'Player vs Player'}")
    print("="*60 + "\n")

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(session=session, config=session.config)
        ui.run()
        return 0

    # Console mode (--no-ui)
    game = ConsoleGame(session)
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
