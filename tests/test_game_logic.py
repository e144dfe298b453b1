"""
Unit tests for the tic-tac-toe engine.
No display needed.
"""
import unittest

from tictac.game_logic import (
    WINNING_LINES, Accepted, GameEngine, GameStatus, Outcome, Player,
    RejectReason, Rejected,
)

# X: 0,1,5,6,8  O: 2,3,4,7 -> full board, no line
DRAW_SEQUENCE = [0, 2, 1, 3, 5, 4, 6, 7, 8]


def play(engine, moves):
    return [engine.apply_move(i) for i in moves]


class TestInitialState(unittest.TestCase):

    def test_new_engine_is_empty_x_to_move(self):
        state = GameEngine().get_state()
        self.assertEqual(state.board, (None,) * 9)
        self.assertIs(state.current_player, Player.X)
        self.assertEqual(state.status, GameStatus.in_progress())
        self.assertIsNone(state.winning_line)

    def test_available_moves_all_cells(self):
        self.assertEqual(GameEngine().available_moves(), list(range(9)))


class TestApplyMove(unittest.TestCase):

    def setUp(self):
        self.engine = GameEngine()

    def test_accepted_move_reports_cell_and_mark(self):
        result = self.engine.apply_move(4)
        self.assertIsInstance(result, Accepted)
        self.assertEqual(result.index, 4)
        self.assertIs(result.mark, Player.X)
        self.assertEqual(result.status.outcome, Outcome.IN_PROGRESS)
        self.assertIsNone(result.winning_line)
        self.assertIs(self.engine.board[4], Player.X)

    def test_players_alternate_starting_with_x(self):
        marks = [r.mark for r in play(self.engine, [0, 1, 2, 4, 3, 5])]
        self.assertEqual(marks, [Player.X, Player.O] * 3)
        self.assertIs(self.engine.current_player, Player.X)

    def test_occupied_cell_rejected_without_side_effects(self):
        self.engine.apply_move(0)
        before = self.engine.get_state()
        result = self.engine.apply_move(0)
        self.assertEqual(result, Rejected(0, RejectReason.OCCUPIED))
        self.assertEqual(self.engine.get_state(), before)

    def test_out_of_range_rejected(self):
        for bad in (-1, 9, 100, "3", 1.0, None, True):
            with self.subTest(index=bad):
                result = self.engine.apply_move(bad)
                self.assertIsInstance(result, Rejected)
                self.assertIs(result.reason, RejectReason.OUT_OF_RANGE)
        self.assertEqual(self.engine.board, [None] * 9)
        self.assertIs(self.engine.current_player, Player.X)


class TestWinDetection(unittest.TestCase):

    def test_top_row_win(self):
        engine = GameEngine()
        results = play(engine, [0, 3, 1, 4, 2])
        for r in results[:-1]:
            self.assertEqual(r.status.outcome, Outcome.IN_PROGRESS)
        last = results[-1]
        self.assertEqual(last.index, 2)
        self.assertEqual(last.status, GameStatus.won(Player.X))
        self.assertEqual(last.winning_line, (0, 1, 2))
        # no switch after a win
        self.assertIs(engine.current_player, Player.X)
        self.assertTrue(engine.is_over)

    def test_o_can_win(self):
        engine = GameEngine()
        # X: 0,1,8  O: 2,4,6 -> anti-diagonal
        last = play(engine, [0, 2, 1, 4, 8, 6])[-1]
        self.assertEqual(last.status, GameStatus.won(Player.O))
        self.assertEqual(last.winning_line, (2, 4, 6))

    def test_every_line_wins_on_third_mark_only(self):
        for line in WINNING_LINES:
            with self.subTest(line=line):
                others = [i for i in range(9) if i not in line]
                fillers = others[:2]
                engine = GameEngine()
                moves = [line[0], fillers[0], line[1], fillers[1], line[2]]
                results = play(engine, moves)
                self.assertTrue(all(isinstance(r, Accepted) for r in results))
                self.assertFalse(any(r.status.is_over for r in results[:-1]))
                self.assertEqual(results[-1].status, GameStatus.won(Player.X))
                self.assertEqual(results[-1].winning_line, line)

    def test_first_line_in_scan_order_reported(self):
        engine = GameEngine()
        # X completes row 0 and column 0 with the same move
        engine.board = [None, Player.X, Player.X,
                        Player.X, Player.O, Player.O,
                        Player.X, Player.O, None]
        result = engine.apply_move(0)
        self.assertEqual(result.winning_line, (0, 1, 2))

    def test_moves_after_win_rejected(self):
        engine = GameEngine()
        play(engine, [0, 3, 1, 4, 2])
        before = engine.get_state()
        result = engine.apply_move(8)
        self.assertEqual(result, Rejected(8, RejectReason.GAME_OVER))
        self.assertEqual(engine.get_state(), before)
        self.assertEqual(engine.available_moves(), [])


class TestDraw(unittest.TestCase):

    def test_full_board_without_line_is_draw(self):
        engine = GameEngine()
        results = play(engine, DRAW_SEQUENCE)
        self.assertFalse(any(r.status.is_over for r in results[:-1]))
        last = results[-1]
        self.assertEqual(last.status, GameStatus.draw())
        self.assertIsNone(last.status.winner)
        self.assertIsNone(last.winning_line)
        self.assertIs(engine.current_player, Player.X)

    def test_win_on_last_cell_beats_draw(self):
        engine = GameEngine()
        # X: 0,1,4,5,8  O: 2,3,6,7 -> ninth move completes the diagonal
        last = play(engine, [0, 2, 1, 3, 4, 6, 5, 7, 8])[-1]
        self.assertEqual(last.status, GameStatus.won(Player.X))
        self.assertEqual(last.winning_line, (0, 4, 8))

    def test_moves_after_draw_rejected(self):
        engine = GameEngine()
        play(engine, DRAW_SEQUENCE)
        self.assertIs(engine.apply_move(0).reason, RejectReason.GAME_OVER)


class TestReset(unittest.TestCase):

    def test_reset_restores_initial_state(self):
        engine = GameEngine()
        initial = engine.get_state()
        play(engine, [0, 3, 1, 4, 2])
        engine.reset()
        self.assertEqual(engine.get_state(), initial)
        engine.reset(); engine.reset()
        self.assertEqual(engine.get_state(), initial)

    def test_moves_accepted_again_after_reset(self):
        engine = GameEngine()
        play(engine, DRAW_SEQUENCE)
        engine.reset()
        result = engine.apply_move(0)
        self.assertIsInstance(result, Accepted)
        self.assertIs(result.mark, Player.X)


class TestSnapshot(unittest.TestCase):

    def test_snapshot_is_detached_from_engine(self):
        engine = GameEngine()
        snap = engine.get_state()
        engine.apply_move(0)
        self.assertIsNone(snap.board[0])
        self.assertIs(snap.current_player, Player.X)


if __name__ == "__main__":
    unittest.main()
