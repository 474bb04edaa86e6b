"""
Target and Camera Profiles
==========================

Immutable descriptions of the ideal target geometry and the camera
optics. Defaults describe the retro-reflective goal target (20 x 14 in
outline, 88 of its 280 square inches lit) seen through the robot camera.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TargetGeometryProfile:
    """
    Ideal target geometry.

    Attributes:
        ideal_aspect_ratio: Width / height of the ideal target
        ideal_area_ratio: Particle area / bounding box area of the ideal target
        target_physical_height: Real-world target height (range uses this unit)
        target_physical_width: Real-world target width
    """
    ideal_aspect_ratio: float = 20.0 / 14.0
    ideal_area_ratio: float = 88.0 / 280.0
    target_physical_height: float = 14 / 12.0
    target_physical_width: float = 20 / 12.0

    def __post_init__(self):
        for name in ('ideal_aspect_ratio', 'ideal_area_ratio',
                     'target_physical_height', 'target_physical_width'):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")


@dataclass(frozen=True)
class CameraProfile:
    """
    Camera optics used for range estimation.

    Attributes:
        vertical_fov_degrees: Vertical field of view in degrees
        elevation_angle_degrees: Mounting tilt relative to horizontal
    """
    vertical_fov_degrees: float = 39.935
    elevation_angle_degrees: float = 45.0

    def __post_init__(self):
        if not 0 < self.vertical_fov_degrees < 180:
            raise ValueError(
                f"vertical_fov_degrees must be in (0, 180), got {self.vertical_fov_degrees}")
