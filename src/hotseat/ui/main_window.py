"""MainWindow — top-level window hosting the board and a status line."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeyEvent
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from hotseat.core.enums import GameResult
from hotseat.game.controller import GameController
from hotseat.game.interfaces import GamePhase
from hotseat.game.state import GameState
from hotseat.ui.board.board_view import BoardView
from hotseat.ui.settings import AppSettings


def status_text(state: GameState) -> str:
    """One-line description of the game for the status bar."""
    side = str(state.side_to_move).capitalize()
    phase = state.phase
    if phase == GamePhase.CHECKMATE:
        winner = "White" if state.result == GameResult.WHITE_WINS else "Black"
        return f"Checkmate — {winner} wins"
    if phase == GamePhase.STALEMATE:
        return "Stalemate — draw"
    if phase == GamePhase.CHECK:
        return f"{side} to move — check"
    return f"{side} to move"


class MainWindow(QMainWindow):
    """Main application window: the board plus a status bar.

    Space (or Game ▸ New game) restarts from the initial position.
    """

    def __init__(
        self,
        controller: GameController | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Hotseat Chess")

        self._controller = controller or GameController()
        self._settings = settings or AppSettings()

        self._board_view = BoardView(self._controller, self._settings, self)
        self.setCentralWidget(self._board_view)
        side = 8 * self._settings.square_size
        self.resize(side, side + 24)

        self._status_label = QLabel()
        status_bar = QStatusBar(self)
        status_bar.addWidget(self._status_label)
        self.setStatusBar(status_bar)

        self._setup_menu()

        self._controller.events.on_move.append(lambda _r, _s: self._update_status())
        self._controller.events.on_reset.append(lambda _s: self._update_status())
        self._update_status()

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_label(self) -> QLabel:
        return self._status_label

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        game_menu = menu_bar.addMenu("&Game")
        assert game_menu is not None

        new_game = QAction("&New game", self)
        new_game.setShortcut("Ctrl+N")
        new_game.triggered.connect(self._controller.reset)
        game_menu.addAction(new_game)

        quit_action = QAction("&Quit", self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        game_menu.addAction(quit_action)

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is not None and event.key() == Qt.Key.Key_Space:
            self._controller.reset()
            return
        super().keyPressEvent(event)

    def _update_status(self) -> None:
        self._status_label.setText(status_text(self._controller.state))
