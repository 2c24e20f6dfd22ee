"""
Image loading and saving for the command-line front end.
"""

import logging
import os

import cv3  # RGB-order image reading
import numpy as np
from PIL import Image
from pillow_heif import register_heif_opener  # For HEIC file support

from .errors import ImageLoadError

# Register HEIF opener with Pillow to enable HEIC support
register_heif_opener()

HEIC_EXTENSIONS = ('.heic', '.heif')


def load_image(file_path):
    """
    Load an image file as an RGB numpy array.

    Args:
        file_path: Path to a JPEG, PNG, BMP, HEIC or other readable image

    Returns:
        numpy array in RGB format

    Raises:
        ImageLoadError: If the file cannot be read
    """
    file_path = os.fspath(file_path)

    if not os.path.isfile(file_path):
        logging.error(f"Image file not found: {file_path}")
        raise ImageLoadError(f"Image file not found: {file_path}")

    if file_path.lower().endswith(HEIC_EXTENSIONS):
        # Load HEIC with PIL/pillow-heif, then convert to numpy array for OpenCV
        try:
            with Image.open(file_path) as pil_image:
                image = np.array(pil_image.convert('RGB'))
        except OSError as e:
            logging.error(f"Could not load HEIC image {file_path}: {e}")
            raise ImageLoadError(f"Could not load HEIC image {file_path}: {e}") from e
    else:
        # cv3 loads images in RGB by default
        try:
            image = cv3.imread(file_path)
        except OSError as e:
            logging.error(f"Could not load image {file_path}: {e}")
            raise ImageLoadError(f"Could not load image {file_path}: {e}") from e

    if image is None or image.size == 0:
        logging.error(f"Could not load image {file_path}")
        raise ImageLoadError(f"Could not load image {file_path}")

    return image


def save_image(file_path, image):
    """
    Save an RGB (or grayscale) numpy array with Pillow.

    Args:
        file_path: Destination path; format follows the extension
        image: numpy array in RGB format
    """
    pil_image = Image.fromarray(image)
    pil_image.save(os.fspath(file_path))
