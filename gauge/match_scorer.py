"""
MatchScorer - Compares a product perimeter against the master perimeter.
"""

import math
from dataclasses import dataclass

from .config import PASS_THRESHOLD
from .errors import InvalidReference

PERFECT_MATCH = "Perfect Match"
WITHIN_TOLERANCE = "Within Tolerance"


@dataclass(frozen=True)
class MatchResult:
    """Outcome of one product/master comparison."""

    match_percent: float
    passed: bool
    reason: str
    product_mm: float
    master_mm: float
    deviation_percent: float

    @property
    def verdict(self):
        return "PASS" if self.passed else "FAIL"


class MatchScorer:
    """
    Scores how close a product measurement is to the master.

    The match percentage falls off linearly with the relative deviation
    from the master, symmetric for larger and smaller products, and is
    clamped at 0.
    """

    def __init__(self, pass_threshold=PASS_THRESHOLD):
        self.pass_threshold = pass_threshold

    def match_percent(self, product_mm, master_mm):
        """
        Calculate the match percentage.

        Args:
            product_mm: Product perimeter in millimeters
            master_mm: Master perimeter in millimeters

        Returns:
            float: Match in [0, 100]

        Raises:
            InvalidReference: If master_mm is missing, non-finite or not positive
            ValueError: If product_mm is missing or non-finite
        """
        if master_mm is None or not math.isfinite(master_mm) or master_mm <= 0:
            raise InvalidReference(f"Master measurement must be positive, got {master_mm}")
        if product_mm is None or not math.isfinite(product_mm):
            raise ValueError(f"Product measurement must be finite, got {product_mm}")

        diff = abs(product_mm - master_mm)
        return max(0.0, 100.0 - (diff / master_mm) * 100.0)

    def score(self, product_mm, master_mm):
        """
        Compare a product against the master.

        Args:
            product_mm: Product perimeter in millimeters
            master_mm: Master perimeter in millimeters

        Returns:
            MatchResult
        """
        match = self.match_percent(product_mm, master_mm)
        passed = match >= self.pass_threshold
        deviation = (product_mm - master_mm) / master_mm * 100.0

        if passed:
            reason = PERFECT_MATCH if match >= 100.0 else WITHIN_TOLERANCE
        elif product_mm > master_mm:
            reason = f"Too Large (+{deviation:.1f}%)"
        else:
            reason = f"Too Small ({deviation:.1f}%)"

        return MatchResult(
            match_percent=match,
            passed=passed,
            reason=reason,
            product_mm=product_mm,
            master_mm=master_mm,
            deviation_percent=deviation,
        )


def score(product_mm, master_mm, config=None):
    """
    Compare a product perimeter against the master perimeter.

    Args:
        product_mm: Product perimeter in millimeters
        master_mm: Master perimeter in millimeters
        config: GaugeConfig (optional), supplies the pass threshold

    Returns:
        MatchResult
    """
    threshold = PASS_THRESHOLD if config is None else config.pass_threshold_percent
    return MatchScorer(threshold).score(product_mm, master_mm)
