"""
CalibrationSession - Master/product comparison workflow for one session.
"""

import logging
from dataclasses import dataclass, replace

from .config import GaugeConfig
from .errors import InvalidReference
from .match_scorer import MatchResult, MatchScorer
from .measurer import Measurement, Measurer

NO_MASTER = "no_master"
MASTER_CAPTURED = "master_captured"


@dataclass(frozen=True)
class ComparisonRecord:
    """One row of the session history."""

    index: int
    product: Measurement
    result: MatchResult


def _without_contours(measurement):
    """Copy of a measurement that no longer references contour point arrays"""
    return replace(measurement, calibration_contour=None, object_contour=None)


class CalibrationSession:
    """
    Holds the master measurement and the comparisons made against it.

    A session starts without a master. Capturing a master moves it to
    MASTER_CAPTURED, where every product photo is measured and scored
    against the stored master. Capturing another master replaces the
    stored one; the session never returns to NO_MASTER.

    A failed capture (master or product) raises and leaves the stored
    master and the history unchanged. Stored measurements keep only
    scalar values; contour points stay with the caller.
    """

    def __init__(self, config=None):
        if config is None:
            config = GaugeConfig()

        self.config = config
        self.measurer = Measurer(config)
        self.scorer = MatchScorer(config.pass_threshold_percent)

        self.master = None
        self.history = []

    @property
    def state(self):
        return MASTER_CAPTURED if self.has_master() else NO_MASTER

    def has_master(self):
        """Check if a master measurement is stored"""
        return self.master is not None

    def capture_master(self, image):
        """
        Measure a master photo and store it as the reference.

        Args:
            image: numpy array of the master photo

        Returns:
            Measurement of the master, including its contours
        """
        measurement = self.measurer.measure(image)
        self.master = _without_contours(measurement)
        logging.info(f"Master stored: {measurement.perimeter_mm:.2f} mm")
        return measurement

    def compare(self, image):
        """
        Measure a product photo and score it against the master.

        Args:
            image: numpy array of the product photo

        Returns:
            ComparisonRecord appended to the history

        Raises:
            InvalidReference: If no master has been captured
            InsufficientContours: If the product photo cannot be measured
        """
        self._require_master()
        measurement = self.measurer.measure(image)
        return self.compare_measurement(measurement)

    def compare_measurement(self, measurement):
        """
        Score an existing product measurement against the master.

        Args:
            measurement: Measurement of the product

        Returns:
            ComparisonRecord appended to the history
        """
        self._require_master()
        result = self.scorer.score(measurement.perimeter_mm, self.master.perimeter_mm)

        record = ComparisonRecord(
            index=len(self.history) + 1,
            product=_without_contours(measurement),
            result=result,
        )
        self.history.append(record)

        logging.info(f"Product #{record.index}: {self.get_status_message()}")
        return record

    def _require_master(self):
        if not self.has_master():
            raise InvalidReference("No master measurement captured")

    def get_status_message(self, units=None):
        """
        Get a status message describing the session.

        Args:
            units: UnitConverter for the master perimeter (optional, default mm)

        Returns:
            str: Human-readable status message
        """
        if not self.has_master():
            return "Ready. Capture MASTER sample."

        if not self.history:
            if units is None:
                stored = f"{self.master.perimeter_mm:.2f} mm"
            else:
                stored = units.format(self.master.perimeter_mm)
            return f"MASTER stored: {stored}"

        last = self.history[-1].result
        return f"{last.verdict} - {last.match_percent:.2f}% match ({last.reason})"
