"""
Measurer - Finds the calibration coin and measures the object's perimeter.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .config import GaugeConfig
from .contour_extractor import Contour, ContourExtractor
from .errors import InsufficientContours
from .scale_calibrator import ScaleCalibrator


@dataclass(frozen=True)
class Measurement:
    """Perimeter of the measured object plus the calibration it came from."""

    perimeter_mm: float
    perimeter_px: float
    pixels_per_mm: float
    calibration_center: Tuple[float, float]
    calibration_radius_px: float
    calibration_deficit: float
    contour_count: int
    calibration_contour: Optional[Contour] = field(default=None, compare=False, repr=False)
    object_contour: Optional[Contour] = field(default=None, compare=False, repr=False)


def select_calibration_contour(contours):
    """
    Pick the contour most likely to be the calibration coin.

    The contour with the smallest circularity deficit wins; ties go to the
    larger area.

    Args:
        contours: Non-empty list of Contour

    Returns:
        tuple: (index, deficit) of the chosen contour
    """
    scored = [(c.circularity_deficit, -c.area, i) for i, c in enumerate(contours)]
    deficit, _, index = min(scored)
    return index, deficit


def select_measured_contour(contours, exclude):
    """
    Pick the largest contour other than the one at index `exclude`.

    Returns:
        int: Index of the chosen contour
    """
    candidates = [i for i in range(len(contours)) if i != exclude]
    return max(candidates, key=lambda i: contours[i].area)


class Measurer:
    """
    Measures one object's perimeter in millimeters from a single photo.

    Each photo must contain a coin of known diameter (the calibration
    object) and the object to measure. The most circular contour is taken
    as the coin; the largest of the rest is the object.

    Known limitation: if the object is itself more circular than the coin
    (a washer, a bottle cap) the two are swapped.
    """

    def __init__(self, config=None):
        """
        Initialize the measurer.

        Args:
            config: GaugeConfig (default: GaugeConfig())
        """
        if config is None:
            config = GaugeConfig()
        config.validate()

        self.config = config
        self.extractor = ContourExtractor(min_area=config.min_contour_area_px)
        self.calibrator = ScaleCalibrator(config.calibration_diameter_mm)

    def measure(self, image):
        """
        Measure the object perimeter in an image.

        Args:
            image: numpy array, grayscale, RGB or RGBA. Not modified.

        Returns:
            Measurement

        Raises:
            InsufficientContours: If fewer than two qualifying regions are found
        """
        contours = self.extractor.extract(image)
        return self.measure_contours(contours)

    def measure_contours(self, contours):
        """
        Measure the object perimeter from already extracted contours.

        Args:
            contours: List of Contour

        Returns:
            Measurement

        Raises:
            InsufficientContours: If fewer than two contours are given
        """
        if len(contours) < 2:
            logging.warning(f"Detection failed: {len(contours)} qualifying contour(s)")
            raise InsufficientContours(len(contours))

        coin_index, deficit = select_calibration_contour(contours)
        coin = contours[coin_index]

        center, radius = self.calibrator.fit_reference(coin)
        pixels_per_mm = self.calibrator.pixels_per_mm(radius)
        logging.debug(self.calibrator.get_status_message(pixels_per_mm))

        target = contours[select_measured_contour(contours, coin_index)]
        perimeter_px = target.perimeter
        perimeter_mm = self.calibrator.pixels_to_mm(perimeter_px, pixels_per_mm)

        logging.info(
            f"Coin r={radius:.1f}px (deficit {deficit:.3f}), "
            f"{pixels_per_mm:.3f} px/mm, perimeter {perimeter_px:.1f}px = {perimeter_mm:.2f} mm"
        )

        return Measurement(
            perimeter_mm=perimeter_mm,
            perimeter_px=perimeter_px,
            pixels_per_mm=pixels_per_mm,
            calibration_center=center,
            calibration_radius_px=radius,
            calibration_deficit=deficit,
            contour_count=len(contours),
            calibration_contour=coin,
            object_contour=target,
        )


def measure(image, config=None):
    """
    Measure the object perimeter (mm) in an image.

    Args:
        image: numpy array, grayscale, RGB or RGBA
        config: GaugeConfig (optional)

    Returns:
        Measurement
    """
    return Measurer(config).measure(image)
