"""
coingauge - Coin-calibrated perimeter comparison
Measures a MASTER object and any number of PRODUCT objects, each photographed
next to a coin of known diameter, and reports the percentage match of every
product perimeter against the master.
"""

import argparse
import logging
import os
import sys

from gauge.config import GaugeConfig, load_config
from gauge.errors import ImageLoadError, InsufficientContours
from gauge.image_io import load_image, save_image
from gauge.session import CalibrationSession
from gauge.unit_converter import UnitConverter
from gauge.visualization import draw_measurement

EXIT_PASS = 0
EXIT_FAIL = 1
EXIT_MASTER_ERROR = 2


def build_config(args):
    """Combine the optional config file with command-line overrides"""
    config = load_config(args.config) if args.config else GaugeConfig()

    if args.coin_diameter is not None:
        config.calibration_diameter_mm = args.coin_diameter
    if args.min_area is not None:
        config.min_contour_area_px = args.min_area
    if args.threshold is not None:
        config.pass_threshold_percent = args.threshold

    config.validate()
    return config


def save_debug(debug_dir, image_path, image, measurement, units):
    """Write an annotated copy of the image to debug_dir"""
    os.makedirs(debug_dir, exist_ok=True)
    name_without_ext, _ = os.path.splitext(os.path.basename(image_path))
    out_path = os.path.join(debug_dir, f"{name_without_ext}_gauge.png")
    save_image(out_path, draw_measurement(image, measurement, units))
    logging.info(f"Debug image saved to {out_path}")


def print_history(session, units):
    print()
    print(f"{'#':>3}  {'Match':>7}  {'Result':<6}  {'Perimeter':>12}  Reason")
    for record in reversed(session.history):
        result = record.result
        print(f"{record.index:>3}  {result.match_percent:>6.1f}%  {result.verdict:<6}  "
              f"{units.format(record.product.perimeter_mm):>12}  {result.reason}")


def main(argv=None):
    parser = argparse.ArgumentParser(description='coingauge - Coin-calibrated perimeter comparison')
    parser.add_argument('master', help='Photo of the MASTER object next to the coin')
    parser.add_argument('products', nargs='+', help='Photos of PRODUCT objects next to the coin')
    parser.add_argument('--coin-diameter', type=float, default=None,
                        help='Diameter of the calibration coin in mm (default: 24.0)')
    parser.add_argument('--min-area', type=float, default=None,
                        help='Noise floor for contour area in pixels (default: 500)')
    parser.add_argument('--threshold', type=float, default=None,
                        help='Minimum match percentage to pass (default: 95.0)')
    parser.add_argument('--config', help='JSON file with configuration values')
    parser.add_argument('--units', choices=['mm', 'inches'], default='mm',
                        help='Units for reported perimeters (default: mm)')
    parser.add_argument('--debug-dir', help='Save annotated detection images to this directory')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s: %(message)s')

    try:
        config = build_config(args)
    except (OSError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_MASTER_ERROR

    units = UnitConverter(args.units)
    session = CalibrationSession(config)
    logging.info(session.get_status_message())

    try:
        master_image = load_image(args.master)
        master = session.capture_master(master_image)
    except ImageLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_MASTER_ERROR
    except InsufficientContours:
        print("MASTER: Detection failed. Retake photo.")
        return EXIT_MASTER_ERROR

    print(session.get_status_message(units))
    if args.debug_dir:
        save_debug(args.debug_dir, args.master, master_image, master, units)

    failures = 0
    for product_path in args.products:
        name = os.path.basename(product_path)
        try:
            product_image = load_image(product_path)
            # keep the contours for the debug overlay; the session stores only scalars
            product = session.measurer.measure(product_image)
            record = session.compare_measurement(product)
        except ImageLoadError as e:
            print(f"{name}: Error: {e}")
            failures += 1
            continue
        except InsufficientContours:
            print(f"{name}: Detection failed. Retake photo.")
            failures += 1
            continue

        print(f"{name}: {session.get_status_message()}")
        if not record.result.passed:
            failures += 1
        if args.debug_dir:
            save_debug(args.debug_dir, product_path, product_image, product, units)

    if session.history:
        print_history(session, units)

    return EXIT_FAIL if failures else EXIT_PASS


if __name__ == "__main__":
    sys.exit(main())
