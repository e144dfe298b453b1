from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from .. import config
from ..game_logic import BOARD_SIZE, CELL_COUNT, Player


def board_geometry(width, height):
    """
    square board centred in widget: (offset_x, offset_y, side)
    """
    side = min(width, height)
    return (width - side) / 2, (height - side) / 2, side


def cell_index_at(x, y, width, height, size=BOARD_SIZE):
    """
    map widget coords to row-major cell index, None outside grid
    """
    ox, oy, side = board_geometry(width, height)
    # only inside grid
    if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
        return None
    cell = side / size
    col = int((x - ox) // cell); row = int((y - oy) // cell)
    # clamp float edge cases
    row = max(0, min(row, size - 1)); col = max(0, min(col, size - 1))
    return row * size + col


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    only shows what it is told, no game rules here
    """
    cell_clicked = Signal(int)  # emits row-major index on click

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(config.BOARD_MIN_SIZE, config.BOARD_MIN_SIZE))
        self.cells = [None] * CELL_COUNT    # displayed marks
        self.highlighted = set()            # winning cells
        self._accept_clicks = True          # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def set_mark(self, index, mark):
        self.cells[index] = mark
        self.update()

    def set_highlight(self, indices):
        self.highlighted = set(indices)
        self.update()

    def clear(self):
        # wipe marks and highlight
        self.cells = [None] * CELL_COUNT
        self.highlighted = set()
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def paintEvent(self, event):
        """
        draw grid, highlight, then X/O marks
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = board_geometry(self.width(), self.height())
            # background
            painter.fillRect(self.rect(), QColor(config.BOARD_BG_COLOR))
            cell_size = side / BOARD_SIZE
            # winning cells under everything else
            for index in self.highlighted:
                r, c = divmod(index, BOARD_SIZE)
                painter.fillRect(QRectF(ox + c*cell_size, oy + r*cell_size,
                                        cell_size, cell_size),
                                 QColor(config.WINNER_CELL_COLOR))
            # grid lines
            painter.setPen(QPen(QColor(config.GRID_COLOR), 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i*cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy+side))
                y = oy + i*cell_size
                painter.drawLine(int(ox), int(y), int(ox+side), int(y))
            # draw marks
            for index, sym in enumerate(self.cells):
                if sym is None: continue
                r, c = divmod(index, BOARD_SIZE)
                cx = ox + c*cell_size + cell_size/2
                cy = oy + r*cell_size + cell_size/2
                rad = cell_size/2 * config.MARK_SCALE
                if sym is Player.X:
                    painter.setPen(QPen(QColor(config.X_COLOR), config.MARK_PEN_WIDTH))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(config.O_COLOR), config.MARK_PEN_WIDTH))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks:
            return
        pos = event.position()
        index = cell_index_at(pos.x(), pos.y(), self.width(), self.height())
        if index is not None:
            self.cell_clicked.emit(index)  # notify main window
