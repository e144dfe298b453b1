import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)

BOARD_SIZE = 3                      # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# row-major indices; scan order matters, first match is reported
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),    # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),    # cols
    (0, 4, 8), (2, 4, 6),               # diags
)


class Player(Enum):
    """
    mark placed by a player
    """
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        return Player.O if self is Player.X else Player.X


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    in progress, won by a player, or drawn
    winner is set only for WON
    """
    outcome: Outcome
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls):
        return cls(Outcome.IN_PROGRESS)

    @classmethod
    def won(cls, player):
        return cls(Outcome.WON, player)

    @classmethod
    def draw(cls):
        return cls(Outcome.DRAW)

    @property
    def is_over(self):
        return self.outcome is not Outcome.IN_PROGRESS


class RejectReason(Enum):
    GAME_OVER = "game_over"
    OUT_OF_RANGE = "out_of_range"
    OCCUPIED = "occupied"


@dataclass(frozen=True)
class Rejected:
    """
    move refused, nothing changed
    """
    index: object
    reason: RejectReason


@dataclass(frozen=True)
class Accepted:
    """
    move placed; carries what the display needs to redraw
    """
    status: GameStatus
    index: int
    mark: Player
    winning_line: Optional[Tuple[int, int, int]] = None


MoveResult = Union[Accepted, Rejected]


@dataclass(frozen=True)
class GameSnapshot:
    """
    read-only copy of engine state for rendering
    """
    board: Tuple[Optional[Player], ...]
    current_player: Player
    status: GameStatus
    winning_line: Optional[Tuple[int, int, int]] = None


class GameEngine:
    """
    tic-tac-toe rules and state
    """
    def __init__(self):
        """
        init empty board, X to move
        """
        self.reset()

    def reset(self):
        """
        clear board and reset turn/status
        """
        self.board = [None] * CELL_COUNT           # None means empty
        self.current_player = Player.X             # X always starts
        self.status = GameStatus.in_progress()
        self.winning_line = None                   # set on win, for highlight

    @property
    def is_over(self):
        return self.status.is_over

    def apply_move(self, index) -> MoveResult:
        """
        place current player's mark at index (0-8, row-major)
        returns Accepted or Rejected, never raises for bad moves
        """
        if self.status.is_over:
            return Rejected(index, RejectReason.GAME_OVER)
        # bool is an int subclass but never a cell
        if isinstance(index, bool) or not isinstance(index, int) \
           or not 0 <= index < CELL_COUNT:
            logger.warning("move index out of range: %r", index)
            return Rejected(index, RejectReason.OUT_OF_RANGE)
        if self.board[index] is not None:
            logger.debug("cell %d already holds %s", index, self.board[index].value)
            return Rejected(index, RejectReason.OCCUPIED)

        mark = self.current_player
        self.board[index] = mark

        line = self.find_winning_line()
        if line is not None:
            self.status = GameStatus.won(mark); self.winning_line = line
            logger.info("player %s wins on %s", mark.value, line)
        elif None not in self.board:
            self.status = GameStatus.draw()
            logger.info("board full, draw")
        else:
            self.current_player = mark.opposite()
        return Accepted(self.status, index, mark, line)

    def find_winning_line(self):
        """
        first line (rows, cols, diags) holding three identical marks, or None
        """
        b = self.board
        for line in WINNING_LINES:
            i, j, k = line
            if b[i] is not None and b[i] == b[j] == b[k]:
                return line
        return None

    def available_moves(self):
        """
        empty cell indices; none once game is over
        """
        if self.status.is_over:
            return []
        return [i for i, cell in enumerate(self.board) if cell is None]

    def get_state(self) -> GameSnapshot:
        return GameSnapshot(tuple(self.board), self.current_player,
                            self.status, self.winning_line)
