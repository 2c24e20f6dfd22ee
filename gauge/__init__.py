"""
coingauge library - coin-calibrated perimeter measurement and match scoring.
"""

from .config import GaugeConfig, load_config
from .contour_extractor import Contour, ContourExtractor
from .errors import GaugeError, ImageLoadError, InsufficientContours, InvalidReference
from .match_scorer import MatchResult, MatchScorer, score
from .measurer import Measurement, Measurer, measure
from .scale_calibrator import ScaleCalibrator
from .session import CalibrationSession, ComparisonRecord
from .unit_converter import UnitConverter

__all__ = [
    'GaugeConfig',
    'load_config',
    'Contour',
    'ContourExtractor',
    'GaugeError',
    'ImageLoadError',
    'InsufficientContours',
    'InvalidReference',
    'MatchResult',
    'MatchScorer',
    'score',
    'Measurement',
    'Measurer',
    'measure',
    'ScaleCalibrator',
    'CalibrationSession',
    'ComparisonRecord',
    'UnitConverter',
]
