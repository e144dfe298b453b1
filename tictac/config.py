import os

# -----------------------------------------------------------------------------
# WINDOW
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic-Tac-Toe"
BOARD_MIN_SIZE = 150        # px, board stays square

# -----------------------------------------------------------------------------
# BOARD COLORS
# -----------------------------------------------------------------------------

BOARD_BG_COLOR = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WINNER_CELL_COLOR = "#3f5f3f"
MARK_PEN_WIDTH = 4
MARK_SCALE = 0.7            # mark radius relative to half a cell

# -----------------------------------------------------------------------------
# STATUS MESSAGE STYLES
# -----------------------------------------------------------------------------

MESSAGE_STYLES = {
    "info": "color: #eee;",
    "turn": "color: #8acaff; font-weight: bold;",
    "success": "color: lime; font-weight: bold;",
}

# turn and win lines take the colour of the player they name
PLAYER_MESSAGE_STYLE = "color: {color}; font-weight: bold;"
MARK_COLORS = {"X": X_COLOR, "O": O_COLOR}

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

LOG_LEVEL = os.environ.get("TICTAC_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
