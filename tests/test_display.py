import unittest

from tetris_display import Display
from tetris_layout import compute_dims
from tetris_piece import Color


class DisplayTests(unittest.TestCase):
    def test_set_and_clear(self):
        d = Display(4, 2)
        d.set_pixel("*", 1, 0, Color.CYAN)
        self.assertEqual(d.get_pixel(1, 0), ("*", Color.CYAN))
        self.assertEqual(d.rows(), [" *  ", "    "])
        d.clear_buffer()
        self.assertIsNone(d.get_pixel(1, 0))

    def test_out_of_range(self):
        d = Display(4, 2)
        with self.assertRaises(IndexError):
            d.set_pixel("*", 4, 0, Color.RED)
        with self.assertRaises(IndexError):
            d.set_pixel("*", 0, -1, Color.RED)
        with self.assertRaises(IndexError):
            d.get_pixel(-1, 0)
        with self.assertRaises(IndexError):
            d.get_pixel(0, 2)

    def test_dims(self):
        dims = compute_dims(10, 20)
        self.assertEqual(dims.cols, 22)
        self.assertEqual(dims.rows, 22)
        self.assertEqual(dims.total_w, dims.screen_w + 2 * dims.margin)


if __name__ == "__main__":
    unittest.main()
