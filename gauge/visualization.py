"""
Debug overlays showing what the measurer detected.
"""

import cv2
import cv3  # For basic drawing operations
import numpy as np

COIN_COLOR = (0, 255, 255)
OBJECT_COLOR = (255, 0, 0)
TEXT_COLOR = (255, 255, 255)


def _to_rgb(image):
    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2RGB)
    if image.shape[2] == 4:
        return cv2.cvtColor(image, cv2.COLOR_RGBA2RGB)
    return image.copy()


def draw_measurement(image, measurement, unit_converter=None):
    """
    Draw the detected coin and measured object on a copy of the image.

    Args:
        image: numpy array (grayscale, RGB or RGBA), uint8
        measurement: Measurement produced from this image
        unit_converter: UnitConverter for the caption (optional, default mm)

    Returns:
        numpy array in RGB format with overlays
    """
    canvas = np.ascontiguousarray(_to_rgb(image))

    # Enclosing circle that anchors the scale
    cx, cy = measurement.calibration_center
    radius = measurement.calibration_radius_px
    cv3.circle(canvas, int(round(cx)), int(round(cy)), int(round(radius)), color=COIN_COLOR, t=2)
    cv3.circle(canvas, int(round(cx)), int(round(cy)), 3, color=COIN_COLOR, fill=True)

    if measurement.calibration_contour is not None:
        cv2.drawContours(canvas, [measurement.calibration_contour.points], 0, COIN_COLOR, 1)
    if measurement.object_contour is not None:
        cv2.drawContours(canvas, [measurement.object_contour.points], 0, OBJECT_COLOR, 2)

    if unit_converter is None:
        caption = f"{measurement.perimeter_mm:.2f} mm"
    else:
        caption = unit_converter.format(measurement.perimeter_mm)
    info_text = f"Perimeter: {caption} | {measurement.pixels_per_mm:.3f} px/mm"
    cv2.putText(canvas, info_text, (10, 20), cv2.FONT_HERSHEY_SIMPLEX, 0.5, TEXT_COLOR, 1)

    return canvas
