import logging
from typing import Optional, Protocol, Sequence

from .game_logic import Accepted, GameEngine, Outcome, Player, RejectReason

logger = logging.getLogger(__name__)

TURN_MESSAGE = "Player {mark}'s Turn"
WIN_MESSAGE = "Player {mark} Wins!"
DRAW_MESSAGE = "It's a Draw!"


class Presenter(Protocol):
    """
    display surface driven by the controller
    """
    def show_mark(self, index: int, mark: Player) -> None: ...

    def show_message(self, text: str, kind: str = "info",
                     player: Optional[Player] = None) -> None: ...

    def highlight_cells(self, indices: Sequence[int]) -> None: ...

    def clear_board(self) -> None: ...


def turn_message(player):
    return TURN_MESSAGE.format(mark=player.value)


def result_message(status):
    """
    text for a finished game, None while still in progress
    """
    if status.outcome is Outcome.WON:
        return WIN_MESSAGE.format(mark=status.winner.value)
    if status.outcome is Outcome.DRAW:
        return DRAW_MESSAGE
    return None


class GameController:
    """
    glue between ui events and the engine
    holds no rules of its own
    """
    def __init__(self, presenter: Presenter, engine: Optional[GameEngine] = None):
        self.presenter = presenter
        self.engine = engine if engine is not None else GameEngine()

    def start(self):
        """
        first render of whatever state the engine holds
        """
        state = self.engine.get_state()
        self.presenter.clear_board()
        for index, mark in enumerate(state.board):
            if mark is not None:
                self.presenter.show_mark(index, mark)
        if state.winning_line:
            self.presenter.highlight_cells(state.winning_line)
        self._show_status(state.status, state.current_player)

    def select_cell(self, index):
        """
        cell clicked; returns the engine result
        """
        result = self.engine.apply_move(index)
        if not isinstance(result, Accepted):
            # misclicks are normal, just ignore them
            if result.reason is not RejectReason.OUT_OF_RANGE:
                logger.debug("ignored move at %r: %s", index, result.reason.value)
            return result

        logger.info("player %s took cell %d", result.mark.value, result.index)
        self.presenter.show_mark(result.index, result.mark)
        if result.winning_line:
            self.presenter.highlight_cells(result.winning_line)
        self._show_status(result.status, self.engine.current_player)
        return result

    def reset(self):
        """
        new game, wipe display
        """
        self.engine.reset()
        logger.info("game reset")
        self.presenter.clear_board()
        self._show_status(self.engine.status, self.engine.current_player)

    def _show_status(self, status, current_player):
        text = result_message(status)
        if text is not None:
            self.presenter.show_message(text, "success", status.winner)
        else:
            self.presenter.show_message(turn_message(current_player), "turn",
                                        current_player)
