"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from hotseat.core.enums import Color
from hotseat.core.move import Move
from hotseat.core.types import (
    BOARD_SIZE,
    Square,
    column_of,
    row_of,
    square_at_pixel,
    square_origin,
)
from hotseat.game.controller import GameController
from hotseat.game.state import GameState, MoveRecord
from hotseat.ui.settings import AppSettings
from hotseat.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, highlights and pieces of a :class:`GameController`.

    A left-button release over a highlighted target plays the selected
    piece there; a release over the selected square drops the selection;
    a release over another own piece selects that piece instead.  Pressing
    on a piece and releasing elsewhere is treated as a drag.
    """

    def __init__(
        self,
        controller: GameController,
        settings: AppSettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._settings = settings or AppSettings()
        self._theme = BoardTheme.by_name(self._settings.board_theme)

        # Interaction state
        self._selected_sq: Square | None = None
        self._selected_moves: list[Move] = []
        self._pressed_sq: Square | None = None

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}

        controller.events.on_move.append(self._on_move)
        controller.events.on_reset.append(self._on_reset)

        self._draw_board()
        self.refresh()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def square_size(self) -> int:
        return self._settings.square_size

    @property
    def selected_square(self) -> Square | None:
        return self._selected_sq

    @property
    def selected_moves(self) -> list[Move]:
        return list(self._selected_moves)

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def refresh(self) -> None:
        """Redraw pieces and highlights from the controller's state."""
        self._sync_pieces()
        self._sync_highlights()

    def handle_release(self, sq: Square) -> None:
        """React to the mouse being released over *sq*."""
        pressed, self._pressed_sq = self._pressed_sq, None

        if pressed is not None and pressed != sq and self._is_own_piece(pressed):
            self._select(pressed)

        if self._selected_sq is not None:
            if any(m.to_sq == sq for m in self._selected_moves):
                origin = self._selected_sq
                self._clear_selection()
                self._controller.attempt_move(origin, sq)
                return
            if sq == self._selected_sq:
                self._clear_selection()
                self._sync_highlights()
                return

        if self._is_own_piece(sq):
            self._select(sq)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None and event.button() == Qt.MouseButton.LeftButton:
            self._pressed_sq = self._pos_to_square(event.scenePos())
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None and event.button() == Qt.MouseButton.LeftButton:
            self.handle_release(self._pos_to_square(event.scenePos()))
        super().mouseReleaseEvent(event)

    # ── Controller events ────────────────────────────────────────────────

    def _on_move(self, _record: MoveRecord, _state: GameState) -> None:
        self._clear_selection()
        self.refresh()

    def _on_reset(self, _state: GameState) -> None:
        self._clear_selection()
        self.refresh()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()

        t = self.square_size
        for sq in range(BOARD_SIZE * BOARD_SIZE):
            x, y = square_origin(sq, t)
            is_light = (row_of(sq) + column_of(sq)) % 2 != 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(x, y, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        t = self.square_size
        font = QFont()
        font.setPixelSize(int(t * 0.75))
        for sq in range(BOARD_SIZE * BOARD_SIZE):
            piece = self._controller.get_square(sq)
            if piece is None:
                continue
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            fill = (
                self._theme.piece_white
                if piece.color == Color.WHITE
                else self._theme.piece_black
            )
            item.setBrush(QBrush(fill))
            item.setPen(QPen(QColor(0, 0, 0)))
            x, y = square_origin(sq, t)
            bounds = item.boundingRect()
            item.setPos(x + (t - bounds.width()) / 2, y + (t - bounds.height()) / 2)
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    def _sync_highlights(self) -> None:
        self._clear_highlights()
        state = self._controller.state

        last_move = state.last_move
        if last_move is not None and self._settings.highlight_last_move:
            for sq in (last_move.from_sq, last_move.to_sq):
                self._add_highlight(sq, self._theme.last_move, 0.4)

        if state.is_king_under_check:
            king_sq = state.board.king_square(state.side_to_move)
            color = (
                self._theme.highlight_mate
                if state.is_king_under_mate
                else self._theme.highlight_check
            )
            self._add_highlight(king_sq, color, 0.5)

        if self._selected_sq is not None:
            self._add_highlight(self._selected_sq, self._theme.highlight_selection, 0.8)
            if self._settings.show_legal_moves:
                for move in self._selected_moves:
                    self._add_highlight(
                        move.to_sq, self._theme.highlight_selection, 0.8
                    )

    # ── Selection / highlights ───────────────────────────────────────────

    def _is_own_piece(self, sq: Square) -> bool:
        piece = self._controller.get_square(sq)
        return piece is not None and piece.color == self._controller.side_to_move

    def _select(self, sq: Square) -> None:
        self._selected_sq = sq
        self._selected_moves = self._controller.select_piece(sq)
        self._sync_highlights()

    def _clear_selection(self) -> None:
        self._selected_sq = None
        self._selected_moves = []

    def _clear_highlights(self) -> None:
        for item in self._highlight_items:
            self.removeItem(item)
        self._highlight_items.clear()

    def _add_highlight(self, sq: Square, color: QColor, z: float) -> None:
        """Create a coloured overlay rectangle on a square."""
        t = self.square_size
        x, y = square_origin(sq, t)
        rect = QGraphicsRectItem(x, y, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(z)
        self.addItem(rect)
        self._highlight_items.append(rect)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Square:
        """Scene position → board square (clamped to the board)."""
        return square_at_pixel(pos.x(), pos.y(), self.square_size)
