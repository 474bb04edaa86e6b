"""
Particle Measurements
=====================

Immutable records describing the geometry of one detected particle
(connected region of a segmented frame), plus the scored copy produced
by the evaluator.

Bounding box edges are in pixel coordinates with rows increasing
downwards. Degenerate boxes (zero width or height) are legal values.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

import numpy as np

# Column layout of the particle measurement array
ARRAY_COLUMNS = ('area_fraction', 'area', 'top', 'left', 'bottom', 'right')


@dataclass(frozen=True)
class ParticleMeasurement:
    """
    Geometry of a single particle.

    Attributes:
        area_fraction: Fraction of the total image area occupied (0..1)
        area: Filled pixel area of the particle
        bounds_top: Top edge of the bounding box
        bounds_left: Left edge of the bounding box
        bounds_bottom: Bottom edge of the bounding box
        bounds_right: Right edge of the bounding box
    """
    area_fraction: float
    area: float
    bounds_top: float
    bounds_left: float
    bounds_bottom: float
    bounds_right: float

    @property
    def center_x(self) -> float:
        """Bounding box center X coordinate."""
        return self.bounds_left + (self.bounds_right - self.bounds_left) / 2

    @property
    def center_y(self) -> float:
        """Bounding box center Y coordinate."""
        return self.bounds_top + (self.bounds_bottom - self.bounds_top) / 2

    @property
    def box_width(self) -> float:
        """Horizontal extent of the bounding box."""
        return self.bounds_right - self.bounds_left

    @property
    def box_height(self) -> float:
        """Vertical extent of the bounding box."""
        return self.bounds_bottom - self.bounds_top

    @property
    def bounding_box_area(self) -> float:
        """Area of the bounding box in pixels."""
        return self.box_height * self.box_width

    @classmethod
    def from_dict(cls, data: Mapping[str, Any],
                  image_area: Optional[float] = None) -> 'ParticleMeasurement':
        """
        Build a measurement from a mapping.

        Accepts either the field names or the short column names
        ('top', 'left', 'bottom', 'right'). Without an 'area_fraction'
        key the fraction is derived from image_area.

        Raises:
            KeyError: If a field is missing, or area_fraction is missing
                and no image_area is given
        """
        def pick(name: str, short: str) -> float:
            if name in data:
                return float(data[name])
            return float(data[short])

        if 'area_fraction' in data or not image_area:
            area_fraction = float(data['area_fraction'])
        else:
            area_fraction = float(data['area']) / image_area

        return cls(
            area_fraction=area_fraction,
            area=float(data['area']),
            bounds_top=pick('bounds_top', 'top'),
            bounds_left=pick('bounds_left', 'left'),
            bounds_bottom=pick('bounds_bottom', 'bottom'),
            bounds_right=pick('bounds_right', 'right'),
        )


@dataclass(frozen=True)
class ScoredParticle:
    """
    A particle measurement with its shape scores attached.

    Attributes:
        particle: The original measurement (never modified)
        aspect_score: Closeness of the box aspect ratio to the ideal (0-1)
        area_score: Closeness of the fill ratio to the ideal (0-1)
        cumulative_score: Mean of the two sub-scores (0-1)
        index: Position of the particle in the frame's input list
    """
    particle: ParticleMeasurement
    aspect_score: float
    area_score: float
    cumulative_score: float
    index: int = 0

    @property
    def area(self) -> float:
        return self.particle.area

    @property
    def center_x(self) -> float:
        return self.particle.center_x

    @property
    def center_y(self) -> float:
        return self.particle.center_y


def measurements_from_array(array: np.ndarray) -> List[ParticleMeasurement]:
    """
    Convert an N x 6 particle measurement array into measurements.

    Columns follow ARRAY_COLUMNS:
    (area_fraction, area, top, left, bottom, right).

    Args:
        array: Array-like of shape (N, 6). An empty array yields no particles.

    Returns:
        List of ParticleMeasurement in row order

    Raises:
        ValueError: If the array is not two-dimensional with six columns
    """
    data = np.asarray(array, dtype=np.float64)
    if data.size == 0:
        return []
    if data.ndim != 2 or data.shape[1] != len(ARRAY_COLUMNS):
        raise ValueError(
            f"Expected an N x {len(ARRAY_COLUMNS)} array, got shape {data.shape}")

    return [ParticleMeasurement(*(float(v) for v in row)) for row in data]
