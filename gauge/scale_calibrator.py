"""
ScaleCalibrator - Converts pixels to millimeters using a circular reference.
"""

import math

import cv2

from .config import COIN_DIAMETER_MM


class ScaleCalibrator:
    """
    Derives the pixel-to-millimeter scale from a circle of known diameter.

    The scale is anchored on the minimal enclosing circle of the reference
    contour, not on the contour's own perimeter.
    """

    def __init__(self, reference_diameter_mm=COIN_DIAMETER_MM):
        """
        Initialize the scale calibrator.

        Args:
            reference_diameter_mm: True diameter of the reference circle

        Raises:
            ValueError: If the diameter is not a positive finite number
        """
        if not (math.isfinite(reference_diameter_mm) and reference_diameter_mm > 0):
            raise ValueError("Reference diameter must be positive")
        self.reference_diameter_mm = float(reference_diameter_mm)

    def fit_reference(self, contour):
        """
        Fit the minimal enclosing circle to the reference contour.

        Args:
            contour: Contour of the calibration object

        Returns:
            tuple: ((center_x, center_y), radius) in pixels
        """
        (cx, cy), radius = cv2.minEnclosingCircle(contour.points)
        return (float(cx), float(cy)), float(radius)

    def pixels_per_mm(self, radius_px):
        """
        Calculate the scale factor from the enclosing circle radius.

        Args:
            radius_px: Radius of the reference's enclosing circle in pixels

        Returns:
            float: Pixels per millimeter

        Raises:
            ValueError: If the radius is not positive
        """
        if radius_px <= 0:
            raise ValueError("Reference radius must be positive")
        return (2.0 * radius_px) / self.reference_diameter_mm

    def pixels_to_mm(self, pixels, pixels_per_mm):
        """Convert a pixel length to millimeters"""
        return pixels / pixels_per_mm

    def get_status_message(self, pixels_per_mm):
        """
        Get a status message describing a calibration result.

        Args:
            pixels_per_mm: Scale returned by pixels_per_mm()

        Returns:
            str: Human-readable status message
        """
        return (f"Scale calibrated: {pixels_per_mm:.3f} px/mm "
                f"from {self.reference_diameter_mm:.1f} mm reference")
