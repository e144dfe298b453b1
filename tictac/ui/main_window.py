from .. import config
from ..controller import GameController
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot


class TicTacToeWindow(QMainWindow):
    """
    main window; renders what the controller tells it
    and forwards clicks / reset back to it
    """
    def __init__(self, engine=None):
        """
        init ui widgets, signals, then first render
        """
        super().__init__()
        self.board_widget = BoardWidget(parent=self)
        self._setup_ui()
        self.controller = GameController(self, engine)
        self.controller.start()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(config.WINDOW_TITLE)
        self.setStyleSheet("QMainWindow { background-color: #222; }")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + reset
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.reset_button)

    # --- presenter interface, called by controller ---

    def show_mark(self, index, mark):
        self.board_widget.set_mark(index, mark)

    def show_message(self, text, kind="info", player=None):
        # set message text + style
        if kind not in config.MESSAGE_STYLES:
            raise ValueError(f"unknown message kind: {kind!r}")
        style = config.MESSAGE_STYLES[kind]
        if player is not None:
            style = config.PLAYER_MESSAGE_STYLE.format(color=config.MARK_COLORS[player.value])
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)
        # terminal result shown, stop taking clicks until reset
        self.board_widget.set_accept_clicks(kind != "success")

    def highlight_cells(self, indices):
        self.board_widget.set_highlight(indices)

    def clear_board(self):
        self.board_widget.clear()

    # --- slots ---

    @Slot(int)
    def _on_cell_clicked(self, index):
        self.controller.select_cell(index)

    @Slot()
    def reset_game(self):
        self.controller.reset()
