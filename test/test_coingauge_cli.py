"""End-to-end tests for the command-line front end."""

import contextlib
import io
import os
import tempfile
import unittest

import cv2

import coingauge
import scene


class TestCoingaugeCli(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, name, image):
        path = os.path.join(self.tmp, name)
        cv2.imwrite(path, image)
        return path

    def run_cli(self, *argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(io.StringIO()):
            code = coingauge.main(list(argv))
        return code, out.getvalue()

    def test_all_products_pass(self):
        master = self.write("master.png", scene.coin_and_square(side=150))
        product = self.write("product.png", scene.coin_and_square(side=150))
        code, out = self.run_cli(master, product)
        self.assertEqual(code, coingauge.EXIT_PASS)
        self.assertIn("MASTER stored", out)
        self.assertIn("product.png: PASS - 100.00% match (Perfect Match)", out)

    def test_failing_product(self):
        master = self.write("master.png", scene.coin_and_square(side=150))
        good = self.write("good.png", scene.coin_and_square(side=150))
        large = self.write("large.png", scene.coin_and_square(side=180))
        code, out = self.run_cli(master, good, large)
        self.assertEqual(code, coingauge.EXIT_FAIL)
        self.assertIn("large.png: FAIL", out)
        self.assertIn("Too Large (+", out)

    def test_unmeasurable_product(self):
        master = self.write("master.png", scene.coin_and_square())
        blank = self.write("blank.png", scene.blank())
        code, out = self.run_cli(master, blank)
        self.assertEqual(code, coingauge.EXIT_FAIL)
        self.assertIn("blank.png: Detection failed. Retake photo.", out)

    def test_unmeasurable_master(self):
        master = self.write("master.png", scene.blank())
        product = self.write("product.png", scene.coin_and_square())
        code, out = self.run_cli(master, product)
        self.assertEqual(code, coingauge.EXIT_MASTER_ERROR)
        self.assertIn("MASTER: Detection failed", out)

    def test_missing_master_file(self):
        product = self.write("product.png", scene.coin_and_square())
        code, _ = self.run_cli(os.path.join(self.tmp, "missing.png"), product)
        self.assertEqual(code, coingauge.EXIT_MASTER_ERROR)

    def test_invalid_threshold(self):
        master = self.write("master.png", scene.coin_and_square())
        code, _ = self.run_cli(master, master, "--threshold", "150")
        self.assertEqual(code, coingauge.EXIT_MASTER_ERROR)

    def test_inches_and_debug_images(self):
        master = self.write("master.png", scene.coin_and_square())
        debug_dir = os.path.join(self.tmp, "debug")
        product = self.write("product.png", scene.coin_and_square())
        code, out = self.run_cli(master, product, "--units", "inches", "--debug-dir", debug_dir)
        self.assertEqual(code, coingauge.EXIT_PASS)
        self.assertIn(" in", out)
        self.assertTrue(os.path.exists(os.path.join(debug_dir, "master_gauge.png")))
        self.assertTrue(os.path.exists(os.path.join(debug_dir, "product_gauge.png")))


if __name__ == "__main__":
    unittest.main()
