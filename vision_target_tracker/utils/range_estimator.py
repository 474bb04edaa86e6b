"""
Range and Offset Estimator
==========================

Converts the selected target's bounding box into a normalized
screen-space offset and an estimated horizontal range.

Range uses a pinhole-camera model on the vertical axis:

    d = H_target * H_image / (2 * h_pixels * tan(FOV / 2))

which is the line-of-sight distance; multiplying by cos(elevation)
projects it onto the horizontal plane. Height is used because it is the
most consistent dimension across view angles. The estimate assumes the
target is seen head on.

Usage:
    estimator = RangeEstimator(TargetGeometryProfile(), CameraProfile())

    dx, dy = estimator.center_offset(best, 640, 480)
    distance = estimator.estimate_range(best, 480)
"""

import math
from typing import Optional, Tuple, Union

from vision_target_tracker.particles import ParticleMeasurement, ScoredParticle
from vision_target_tracker.profiles import CameraProfile, TargetGeometryProfile

Target = Union[ParticleMeasurement, ScoredParticle]


def _measurement(target: Target) -> ParticleMeasurement:
    if isinstance(target, ScoredParticle):
        return target.particle
    return target


def center_offset(best: Optional[Target],
                  image_width: float,
                  image_height: float) -> Tuple[float, float]:
    """
    Offset of the target center from the image center.

    Args:
        best: Selected target, or None
        image_width: Frame width in pixels
        image_height: Frame height in pixels

    Returns:
        Tuple of (dx, dy) normalized to +/-1 at the image edges
        (+x is right, +y is up). (0.0, 0.0) when there is no target
        or the image has no size.
    """
    if best is None or image_width == 0 or image_height == 0:
        return 0.0, 0.0

    half_width = image_width / 2.0
    half_height = image_height / 2.0

    # Rows grow downwards, so invert y
    dx = (best.center_x - half_width) / half_width
    dy = -(best.center_y - half_height) / half_height
    return dx, dy


def estimate_range(best: Optional[Target],
                   image_height: float,
                   geometry: TargetGeometryProfile,
                   camera: CameraProfile) -> float:
    """
    Horizontal range to the target in the unit of the target height.

    Returns:
        The range, or 0.0 if there is no target or its box has no height
    """
    return RangeEstimator(geometry, camera).estimate_range(best, image_height)


class RangeEstimator:
    """
    Offset and range estimation with the profiles bound once.

    Args:
        geometry: Ideal target geometry (physical height is used)
        camera: Camera optics
    """

    def __init__(self,
                 geometry: TargetGeometryProfile,
                 camera: CameraProfile):
        self.geometry = geometry
        self.camera = camera

        # Precompute
        self._tan_half_fov = math.tan(math.radians(camera.vertical_fov_degrees / 2))
        self._cos_elevation = math.cos(math.radians(camera.elevation_angle_degrees))

    def estimate_range(self, best: Optional[Target], image_height: float) -> float:
        """Horizontal range to the target, 0.0 when unavailable."""
        if best is None:
            return 0.0

        particle = _measurement(best)
        target_height_pixels = particle.bounds_bottom - particle.bounds_top
        if target_height_pixels == 0:
            return 0.0

        return (self.geometry.target_physical_height * image_height /
                (2 * target_height_pixels * self._tan_half_fov)) * self._cos_elevation

    def center_offset(self, best: Optional[Target],
                      image_width: float, image_height: float) -> Tuple[float, float]:
        """Normalized (dx, dy) of the target center, +y up."""
        return center_offset(best, image_width, image_height)

    def is_centered(self, best: Optional[Target],
                    image_width: float, image_height: float,
                    threshold: float = 0.1) -> bool:
        """
        Check if the target is horizontally within threshold of center.

        Args:
            best: Selected target, or None
            image_width: Frame width in pixels
            image_height: Frame height in pixels
            threshold: Maximum normalized distance from center (0.1 = 10%)

        Returns:
            True if a target exists and is within threshold
        """
        if best is None:
            return False
        dx, _ = self.center_offset(best, image_width, image_height)
        return abs(dx) < threshold
