"""
Exception types raised by the measurement pipeline.
"""


class GaugeError(Exception):
    """Base class for all coingauge errors"""


class InsufficientContours(GaugeError):
    """
    Raised when an image does not contain enough foreground regions.

    A measurement needs one calibration circle and one measured object.
    This is a user-correctable condition: the photo has to be retaken.
    """

    def __init__(self, found, required=2):
        self.found = found
        self.required = required
        super().__init__(
            f"Found {found} qualifying contour(s), need at least {required}"
        )


class InvalidReference(GaugeError):
    """Raised when the master measurement is missing, zero or negative"""


class ImageLoadError(GaugeError):
    """Raised when an image file cannot be read or decoded"""
