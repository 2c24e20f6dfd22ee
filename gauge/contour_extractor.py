"""
ContourExtractor - Segments an image into closed object boundaries.
"""

import logging
import numpy as np
import cv2

from .config import MIN_CONTOUR_AREA


class Contour:
    """
    Closed boundary of one foreground region.

    Wraps the OpenCV point array (N x 1 x 2, int32) and derives
    shape properties on demand.
    """

    def __init__(self, points):
        self.points = points

    def __len__(self):
        return len(self.points)

    def __repr__(self):
        return f"Contour(points={len(self.points)}, area={self.area:.1f})"

    @property
    def area(self):
        """Enclosed area in pixels squared"""
        return float(cv2.contourArea(self.points))

    @property
    def perimeter(self):
        """Length of the closed polyline in pixels"""
        return float(cv2.arcLength(self.points, True))

    @property
    def circularity(self):
        """4*pi*area / perimeter^2, 1.0 for a perfect circle"""
        perimeter = self.perimeter
        if perimeter == 0:
            return 0.0
        return 4 * np.pi * self.area / (perimeter * perimeter)

    @property
    def circularity_deficit(self):
        """Distance from a perfect circle, 0.0 for a perfect circle"""
        return abs(1.0 - self.circularity)


def to_gray(image):
    """
    Convert an image to single-channel uint8 intensity.

    Args:
        image: numpy array, grayscale, RGB or RGBA

    Returns:
        Grayscale uint8 image (a new array unless the input already is one)
    """
    if image is None or image.size == 0:
        raise ValueError("image is required")

    if image.ndim == 2:
        gray = image
    elif image.ndim == 3:
        channels = image.shape[2]
        if channels == 1:
            gray = np.ascontiguousarray(image[:, :, 0])
        elif channels == 3:
            gray = cv2.cvtColor(_as_uint8(image), cv2.COLOR_RGB2GRAY)
        elif channels == 4:
            gray = cv2.cvtColor(_as_uint8(image), cv2.COLOR_RGBA2GRAY)
        else:
            raise ValueError(f"Unsupported channel count: {channels}")
    else:
        raise ValueError(f"Unsupported image shape: {image.shape}")

    return _as_uint8(gray)


def _as_uint8(image):
    if image.dtype == np.uint8:
        return image
    if image.dtype == bool:
        return image.astype(np.uint8) * 255

    max_val = float(np.max(image))

    if np.issubdtype(image.dtype, np.integer):
        # 16/32-bit data spans the dtype range; small ints already fit 0-255
        if max_val > 255:
            scale = 255.0 / np.iinfo(image.dtype).max
            return _rescale(image, scale)
        return np.clip(image, 0, 255).astype(np.uint8)

    if max_val <= 1.0:
        return _rescale(image, 255.0)
    if max_val > 255:
        return _rescale(image, 255.0 / max_val)
    return np.clip(image, 0, 255).astype(np.uint8)


def _rescale(image, scale):
    return np.round(image.astype(np.float64) * scale).clip(0, 255).astype(np.uint8)


class ContourExtractor:
    """
    Turns an image into the outer contours of its dark foreground objects.

    Objects are expected to be darker than the background. The image is
    binarized with Otsu's threshold, small gaps are closed with a 5x5
    morphological closing, and only external contours larger than the
    noise floor are kept.
    """

    KERNEL_SIZE = 5

    def __init__(self, min_area=MIN_CONTOUR_AREA):
        """
        Initialize the extractor.

        Args:
            min_area: Contours with area at or below this (px^2) are dropped
        """
        self.min_area = min_area

    def binarize(self, image):
        """
        Produce the cleaned foreground mask for an image.

        Args:
            image: numpy array, grayscale, RGB or RGBA

        Returns:
            tuple: (mask, threshold) where mask is uint8 with foreground 255
        """
        gray = to_gray(image)

        threshold, binary = cv2.threshold(
            gray, 0, 255, cv2.THRESH_BINARY_INV + cv2.THRESH_OTSU
        )

        kernel = cv2.getStructuringElement(
            cv2.MORPH_RECT, (self.KERNEL_SIZE, self.KERNEL_SIZE)
        )
        mask = cv2.morphologyEx(binary, cv2.MORPH_CLOSE, kernel)

        return mask, float(threshold)

    def extract(self, image):
        """
        Extract candidate object boundaries from an image.

        Args:
            image: numpy array, grayscale, RGB or RGBA. Not modified.

        Returns:
            List of Contour objects with area above the noise floor
        """
        mask, threshold = self.binarize(image)

        raw, _ = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_NONE)

        contours = []
        for points in raw:
            contour = Contour(points)
            if contour.area > self.min_area:
                contours.append(contour)

        logging.debug(
            f"Otsu threshold {threshold:.0f}: {len(raw)} contours, "
            f"{len(contours)} above {self.min_area} px^2"
        )
        return contours
