from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

import numpy as np
from PIL import Image

import plot


class TestPlotComparison(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.original = self.tmp / "img.png"
        Image.fromarray(np.full((4, 4), 100, dtype=np.uint8), "L").save(self.original)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_mse(self) -> None:
        a = np.zeros((2, 2), dtype=np.uint8)
        b = np.full((2, 2), 3, dtype=np.uint8)
        self.assertEqual(plot.mse(a, a), 0.0)
        self.assertEqual(plot.mse(a, b), 9.0)

    def test_mse_shape_mismatch(self) -> None:
        with self.assertRaises(ValueError):
            plot.mse(np.zeros((2, 2)), np.zeros((2, 3)))

    def test_plot_comparison_writes_figure(self) -> None:
        res = self.tmp / "res.png"
        Image.fromarray(np.full((4, 4), 110, dtype=np.uint8), "L").save(res)
        output = self.tmp / "figures" / "cmp.png"

        errors = plot.plot_comparison(self.original, [self.original, res], output)

        self.assertEqual(errors, [0.0, 100.0])
        self.assertTrue(output.exists())

    def test_main_reports_size_mismatch(self) -> None:
        res = self.tmp / "small.png"
        Image.new("L", (2, 2)).save(res)
        output = self.tmp / "cmp.png"

        with self.assertLogs(level="ERROR"):
            code = plot.main([str(self.original), str(res), "-o", str(output)])

        self.assertEqual(code, 1)
        self.assertFalse(output.exists())


if __name__ == "__main__":
    unittest.main()
