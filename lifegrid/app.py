"""Interactive windowed front end: input handling, drawing and the main loop."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from os import PathLike

import pygame

from .board import Board, BoardError
from .rules import Rules, conway, day_night, highlife, maze
from .state import GameState

PIXEL_SIZE = 10
"""Edge length of one cell on screen, in pixels."""

BOARD_SIZE = 64
"""Rows and columns of the board the game starts with."""

FRAME_DELAY_MS = 50
"""Pause between frames, in milliseconds."""

RULE_CREATORS: tuple[Callable[[], Rules], ...] = (conway, highlife, day_night, maze)
"""Rule sets the game cycles through, in order."""

ALIVE_COLOR = (255, 255, 255, 255)
DEAD_COLOR = (0, 0, 0, 255)

_KEY_NAMES = {
    pygame.K_SPACE: "space",
    pygame.K_r: "r",
    pygame.K_c: "c",
    pygame.K_g: "g",
    pygame.K_t: "t",
    pygame.K_h: "h",
    pygame.K_ESCAPE: "escape",
    pygame.K_q: "q",
}

_LEFT_BUTTON = 1


def cell_at_pixel(x: int, y: int, board: Board) -> tuple[int, int] | None:
    """Map window coordinates to a ``(row, col)`` cell, or ``None`` if outside."""
    col = x // PIXEL_SIZE - 1
    row = y // PIXEL_SIZE - 1
    if 0 <= row < board.height and 0 <= col < board.width:
        return row, col
    return None


def paint_cell_at_mouse(x: int, y: int, board: Board, state: GameState) -> bool:
    """Set the cell under the pointer to the current paint mode.

    Returns whether a cell was painted.
    """
    cell = cell_at_pixel(x, y, board)
    if cell is None:
        return False
    board[cell] = state.drag_paint_mode
    return True


def help_text(rules: Rules) -> str:
    """Return the list of controls followed by the active rule set."""
    return (
        "\n=== Game of Life Controls ===\n"
        "SPACE       - Pause/Unpause simulation\n"
        "R           - Reload from file (if loaded from file)\n"
        "C           - Clear board\n"
        "G           - Generate random board\n"
        "T           - Switch rule set\n"
        "H           - Show this help\n"
        "ESC/Q       - Quit game\n"
        "Mouse Click - Toggle cell (when paused)\n"
        "Mouse Drag  - Paint alive cells (when paused)\n"
        "Ctrl+Drag   - Paint dead cells (when paused)\n"
        "\nCurrent Rules: "
        f"{rules.describe()}"
        "=============================\n"
    )


def load_board_from_file(path: str | PathLike[str], board: Board) -> None:
    """Load a pattern into ``board``, reporting progress on standard output.

    Raises :class:`BoardError` if the file cannot be loaded.
    """
    print(f"Loading board from file: {path}")
    try:
        board.load(path)
    except BoardError:
        print(f"Error loading file: {path}")
        raise
    print(f"Board loaded successfully from: {path}")


class Game:
    """A running session: the board pair, the active rules and the UI state."""

    def __init__(self, board: Board, rules: Rules, state: GameState) -> None:
        self.board = board
        self.rules = rules
        self.state = state
        self._back = Board(board.height, board.width)

    def handle_key(self, key: str) -> None:
        """React to a key press given by its lower-case name (``"space"``, ``"q"``...)."""
        state = self.state
        if key == "space":
            paused = state.toggle_pause()
            print(f"Game {'PAUSED' if paused else 'RESUMED'}")
        elif key == "r":
            if state.loaded_filename:
                try:
                    load_board_from_file(state.loaded_filename, self.board)
                except BoardError:
                    return
                state.pause = True
            else:
                print("No file to reload from. Load a file first.")
        elif key == "c":
            self.board.clear()
            print("Board cleared")
            state.pause = True
        elif key == "g":
            self.board.random_fill()
            print("Random board generated")
            state.pause = True
        elif key == "t":
            index = state.advance_rule_index(len(RULE_CREATORS))
            self.rules = RULE_CREATORS[index]()
            print(f"Switched to rule set: {self.rules.describe()}", end="")
        elif key == "h":
            print(help_text(self.rules), end="")
        elif key in ("escape", "q"):
            state.keep_alive = False

    def handle_mouse_down(self, x: int, y: int, ctrl: bool) -> None:
        """Start painting while paused: alive cells, or dead ones with Ctrl held."""
        if not self.state.pause:
            return
        self.state.drag_paint_mode = not ctrl
        self.state.is_dragging = True
        paint_cell_at_mouse(x, y, self.board, self.state)

    def handle_mouse_up(self) -> None:
        """Stop painting."""
        self.state.is_dragging = False

    def handle_mouse_motion(self, x: int, y: int) -> None:
        """Keep painting under the pointer while dragging on a paused board."""
        if self.state.pause and self.state.is_dragging:
            paint_cell_at_mouse(x, y, self.board, self.state)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Dispatch one pygame event."""
        if event.type == pygame.QUIT:
            self.state.keep_alive = False
        elif event.type == pygame.KEYDOWN:
            name = _KEY_NAMES.get(event.key)
            if name is not None:
                self.handle_key(name)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == _LEFT_BUTTON:
                ctrl = bool(pygame.key.get_mods() & pygame.KMOD_CTRL)
                x, y = event.pos
                self.handle_mouse_down(x, y, ctrl)
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == _LEFT_BUTTON:
                self.handle_mouse_up()
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            self.handle_mouse_motion(x, y)

    def step(self) -> bool:
        """Advance one generation unless paused; return whether it advanced."""
        if self.state.pause:
            return False
        self.board.next_into(self._back, self.rules)
        self.board, self._back = self._back, self.board
        return True

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the board onto ``surface`` with a one-cell border."""
        surface.fill(DEAD_COLOR)
        for row, cells in enumerate(self.board):
            for col, alive in enumerate(cells):
                rect = pygame.Rect(
                    (col + 1) * PIXEL_SIZE,
                    (row + 1) * PIXEL_SIZE,
                    PIXEL_SIZE,
                    PIXEL_SIZE,
                )
                surface.fill(ALIVE_COLOR if alive else DEAD_COLOR, rect)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game; an optional first argument names a pattern file."""
    args = list(sys.argv[1:] if argv is None else argv)

    rules = conway()
    board = Board(BOARD_SIZE, BOARD_SIZE)
    state = GameState()

    if args:
        path = args[0]
        try:
            load_board_from_file(path, board)
        except BoardError:
            print("Error reading the file. Generating a random board instead.")
            board.random_fill()
        else:
            state.loaded_filename = path
    else:
        print("Loading a random board")
        board.random_fill()

    game = Game(board, rules, state)
    window_size = (PIXEL_SIZE * (BOARD_SIZE + 2), PIXEL_SIZE * (BOARD_SIZE + 2))

    try:
        pygame.init()
        try:
            screen = pygame.display.set_mode(window_size)
        except pygame.error as exc:
            print(f"Error creating the window: {exc}")
            return 1
        pygame.display.set_caption("Game Of Life - Enhanced")

        print(help_text(game.rules), end="")
        state.pause = True
        print("Starting paused. Press SPACE to begin simulation.")

        while state.keep_alive:
            for event in pygame.event.get():
                game.handle_event(event)
            game.draw(screen)
            pygame.display.flip()
            game.step()
            pygame.time.delay(FRAME_DELAY_MS)

        print("Game ended. Goodbye!")
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())