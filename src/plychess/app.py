"""Application entry point: the interactive console command loop."""

from __future__ import annotations

import logging
import random
import sys
from collections.abc import Callable, Sequence

from plychess.config import AppSettings
from plychess.core.enums import Color, GameEndReason, GameResult
from plychess.core.move import is_move_text
from plychess.core.notation import format_moves
from plychess.engine.scorer import MoveScorer, ScorerConfig
from plychess.game.controller import GameController
from plychess.game.interfaces import IPlayer
from plychess.game.player import AIPlayer, HumanPlayer
from plychess.game.storage import SavedGame, SaveStore, StorageError, is_valid_name
from plychess.render import render_board, render_captured

_LOGGER = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

HELP_TEXT = (
    "\nEnter start and end coordinates to move a piece (for example c2c4)\n"
    "or one of the following commands:\n"
    "\n"
    "save   (save the state of the current game)\n"
    "load   (load a previously saved game)\n"
    "moves  (list the legal moves for the side to play)\n"
    "resign (admit defeat)\n"
    "help   (displays this message)\n"
    "exit   (terminate the game, losing any unsaved states)\n"
)

_YES = ("", "y", "ye", "yes")


class ConsoleApp:
    """Runs games in the terminal until the user quits."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        input_fn: InputFn = input,
        output: OutputFn = print,
        store: SaveStore | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._input = input_fn
        self._output = output
        self._store = store or SaveStore(self._settings.save_dir)
        self._engine = MoveScorer(
            ScorerConfig(debug=self._settings.ai_debug),
            random.Random(self._settings.seed),
        )
        self._controller = GameController()
        self._controller.events.on_check.append(self._on_check)
        self._controller.events.on_game_over.append(self._on_game_over)
        self._notices: list[str] = []
        self._done = False
        self._skip_board_draw = False

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Main loop ────────────────────────────────────────────────────────

    def run(self) -> int:
        while True:
            self._start_game()
            self._play()
            if self._done:
                break
            if not self._ask_yes_no("\nPlay again?"):
                break
        return 0

    def _start_game(self) -> None:
        white = self._make_player(Color.WHITE, self._ask_yes_no("Do you want White to be human?"))
        black = self._make_player(Color.BLACK, self._ask_yes_no("Do you want Black to be human?"))
        self._controller.new_game(white, black)
        self._output(HELP_TEXT)

    def _play(self) -> None:
        self._skip_board_draw = False
        self._controller.refresh_status()
        state = self._controller.state
        while not self._done:
            if not self._skip_board_draw:
                self._draw()
            self._skip_board_draw = False
            self._flush_notices()
            if state.is_game_over:
                break
            self._process_input(self._controller.next_command())
            state = self._controller.state

    def _process_input(self, text: str) -> None:
        controller = self._controller
        if text == "load":
            self._do_load()
        elif text == "save":
            self._do_save()
        elif text in ("exit", "quit"):
            self._done = True
        elif text == "resign":
            controller.resign(controller.state.side_to_move)
        elif text in ("help", "h"):
            self._output(HELP_TEXT)
            self._skip_board_draw = True
        elif text == "moves":
            self._output(format_moves(controller.state.legal_moves()))
            self._skip_board_draw = True
        elif is_move_text(text):
            outcome = controller.submit_move(text)
            if not outcome:
                self._output(f"{outcome.message} Try again.")
                self._skip_board_draw = True
        else:
            self._output("Invalid move or command. Try again.")
            self._skip_board_draw = True

    # ── Save / load ──────────────────────────────────────────────────────

    def _do_save(self) -> None:
        while True:
            name = self._input("Enter name of game to save: ").strip()
            if is_valid_name(name):
                break
            self._output("Invalid filename. Use only letters, numbers, and underscore.")

        controller = self._controller
        overwrite = False
        if self._store.exists(name):
            overwrite = self._ask_yes_no(f"Overwrite save game '{name}'?")
            if not overwrite:
                self._output("Game not saved.")
                return

        saved = SavedGame(
            state=controller.state,
            white_human=self._is_human(Color.WHITE),
            black_human=self._is_human(Color.BLACK),
        )
        try:
            self._store.save(name, saved, overwrite=overwrite)
        except (StorageError, OSError) as exc:
            self._output(f"Game not saved: {exc}")
            return
        self._output(f"Saved game {name}.")

    def _do_load(self) -> None:
        self._output("Saved games:")
        for name in self._store.names():
            self._output(name)
        name = self._input("Enter name of game to load: ").strip()
        try:
            saved = self._store.load(name)
        except StorageError as exc:
            self._output(str(exc))
            return

        self._controller.load(
            saved.state,
            self._make_player(Color.WHITE, saved.white_human),
            self._make_player(Color.BLACK, saved.black_human),
        )
        self._controller.refresh_status()

    # ── Helpers ──────────────────────────────────────────────────────────

    def _make_player(self, color: Color, human: bool) -> IPlayer:
        if human:
            return HumanPlayer(color, prompt=self._input)
        return AIPlayer(color, self._engine, announce=self._output)

    def _is_human(self, color: Color) -> bool:
        player = self._controller.player(color)
        return player is None or player.is_human

    def _ask_yes_no(self, prompt: str) -> bool:
        return self._input(f"{prompt} [Y/n] ").strip().lower() in _YES

    def _draw(self) -> None:
        board = self._controller.board
        self._output(render_board(board, unicode=self._settings.unicode))
        captured = render_captured(board, unicode=self._settings.unicode)
        if captured:
            self._output(captured)

    def _flush_notices(self) -> None:
        for notice in self._notices:
            self._output(notice)
        self._notices.clear()

    # ── Event handlers ───────────────────────────────────────────────────

    def _on_check(self, color: Color) -> None:
        self._notices.append("Check!")

    def _on_game_over(self, result: GameResult, reason: GameEndReason) -> None:
        if reason == GameEndReason.CHECKMATE:
            self._notices.append(f"Checkmate! {_winner(result)} wins!")
        elif reason == GameEndReason.STALEMATE:
            self._notices.append("Stalemate!")
        elif reason == GameEndReason.INSUFFICIENT_MATERIAL:
            self._notices.append("Draw!")
        else:
            self._notices.append(f"{_winner(result)} wins!")


def _winner(result: GameResult) -> str:
    return Color.WHITE.title if result == GameResult.WHITE_WINS else Color.BLACK.title


def main(argv: Sequence[str] | None = None) -> int:
    """Launch the console game."""
    settings = AppSettings.from_args(argv)
    logging.basicConfig(
        level=settings.log_level_value,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if settings.ai_debug:
        logging.getLogger("plychess.engine").setLevel(logging.DEBUG)

    try:
        return ConsoleApp(settings).run()
    except (EOFError, KeyboardInterrupt):
        _LOGGER.debug("Input closed, leaving")
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())
