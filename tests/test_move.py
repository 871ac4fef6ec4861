import dataclasses
import unittest

from connect4board import Move, Player, NUM_COLS


class TestMove(unittest.TestCase):
    def test_given_player_and_column_when_constructed_then_fields_readable(self):
        move = Move(Player.YELLOW, 5)
        self.assertIs(move.player, Player.YELLOW)
        self.assertEqual(move.column, 5)

    def test_given_same_fields_when_compared_then_equal_and_same_hash(self):
        self.assertEqual(Move(Player.RED, 2), Move(Player.RED, 2))
        self.assertEqual(hash(Move(Player.RED, 2)), hash(Move(Player.RED, 2)))
        self.assertNotEqual(Move(Player.RED, 2), Move(Player.YELLOW, 2))
        self.assertNotEqual(Move(Player.RED, 2), Move(Player.RED, 3))

    def test_given_move_when_assigning_field_then_frozen(self):
        move = Move(Player.RED, 0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            move.column = 1

    def test_given_out_of_range_column_when_constructed_then_accepted(self):
        move = Move(Player.RED, NUM_COLS + 3)
        self.assertEqual(move.column, NUM_COLS + 3)

    def test_given_move_when_str_then_names_player_and_column(self):
        self.assertEqual(str(Move(Player.RED, 4)), "RED -> column 4")


if __name__ == "__main__":
    unittest.main()
