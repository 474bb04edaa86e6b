"""
Utility Modules for Vision Target Tracking
"""

from .range_estimator import RangeEstimator, center_offset, estimate_range

__all__ = [
    'RangeEstimator',
    'center_offset',
    'estimate_range',
]
