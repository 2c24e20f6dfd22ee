"""Tests for configuration defaults, validation and loading."""

import json
import os
import tempfile
import unittest

from gauge.config import GaugeConfig, load_config


class TestGaugeConfig(unittest.TestCase):
    def test_defaults(self):
        config = GaugeConfig()
        config.validate()
        self.assertEqual(config.to_dict(), {
            "calibration_diameter_mm": 24.0,
            "min_contour_area_px": 500,
            "pass_threshold_percent": 95.0,
        })

    def test_invalid_values(self):
        for kwargs in ({"calibration_diameter_mm": 0},
                       {"calibration_diameter_mm": -1.0},
                       {"min_contour_area_px": -1},
                       {"pass_threshold_percent": 101.0},
                       {"pass_threshold_percent": float("nan")}):
            with self.assertRaises(ValueError):
                GaugeConfig(**kwargs).validate()

    def test_from_dict_rejects_unknown_keys(self):
        with self.assertRaises(ValueError):
            GaugeConfig.from_dict({"coin": 24.0})

    def test_load_config(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "gauge.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"calibration_diameter_mm": 23.25, "pass_threshold_percent": 98}, f)

            config = load_config(path)
            self.assertEqual(config.calibration_diameter_mm, 23.25)
            self.assertEqual(config.pass_threshold_percent, 98.0)
            self.assertEqual(config.min_contour_area_px, 500)

    def test_load_config_rejects_invalid(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "gauge.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"calibration_diameter_mm": -2}, f)
            with self.assertRaises(ValueError):
                load_config(path)

            with open(path, "w", encoding="utf-8") as f:
                json.dump([1, 2, 3], f)
            with self.assertRaises(ValueError):
                load_config(path)


if __name__ == "__main__":
    unittest.main()
