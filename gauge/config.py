"""
Configuration for coin-calibrated perimeter measurement.
"""

import json
import math
from dataclasses import dataclass, fields

# Diameter of the calibration coin expected in every photo
COIN_DIAMETER_MM = 24.0
# Contours enclosing this many pixels or fewer are treated as noise
MIN_CONTOUR_AREA = 500
# Minimum match percentage for a product to pass
PASS_THRESHOLD = 95.0


@dataclass
class GaugeConfig:
    """Tunable constants for measuring and scoring."""

    calibration_diameter_mm: float = COIN_DIAMETER_MM
    min_contour_area_px: float = MIN_CONTOUR_AREA
    pass_threshold_percent: float = PASS_THRESHOLD

    def validate(self):
        """
        Validate configuration values.

        Raises:
            ValueError: If any value is out of range
        """
        if not (math.isfinite(self.calibration_diameter_mm) and self.calibration_diameter_mm > 0):
            raise ValueError("calibration_diameter_mm must be positive")
        if not (math.isfinite(self.min_contour_area_px) and self.min_contour_area_px >= 0):
            raise ValueError("min_contour_area_px must be >= 0")
        if not (0.0 <= self.pass_threshold_percent <= 100.0):
            raise ValueError("pass_threshold_percent must be in [0, 100]")

    def to_dict(self):
        """Return a JSON-serializable dict."""
        return {
            "calibration_diameter_mm": self.calibration_diameter_mm,
            "min_contour_area_px": self.min_contour_area_px,
            "pass_threshold_percent": self.pass_threshold_percent,
        }

    @classmethod
    def from_dict(cls, data):
        """
        Build a config from a dict, rejecting unknown keys.

        Args:
            data: Mapping of field names to values

        Returns:
            GaugeConfig (not yet validated)
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**{key: float(value) for key, value in data.items()})


def load_config(path):
    """
    Load and validate a GaugeConfig from a JSON file.

    Args:
        path: Path to a JSON object with any subset of the config fields

    Returns:
        Validated GaugeConfig
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")

    config = GaugeConfig.from_dict(data)
    config.validate()
    return config
