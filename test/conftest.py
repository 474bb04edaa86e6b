"""
Pytest Configuration for Vision Target Tracker Tests
====================================================

Provides fixtures shared by the unit tests.
"""

import pytest
import sys
import os

# Add package to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vision_target_tracker.profiles import CameraProfile, TargetGeometryProfile

from test.utils import make_particle


@pytest.fixture
def geometry():
    """Default target geometry (20 x 14 target, 88/280 lit)."""
    return TargetGeometryProfile()


@pytest.fixture
def camera():
    """Default camera optics."""
    return CameraProfile(vertical_fov_degrees=39.935, elevation_angle_degrees=45)


@pytest.fixture
def perfect_particle():
    """Particle matching the ideal aspect (200/140) and fill (8800/28000) ratios."""
    return make_particle(top=100, left=250, bottom=300, right=390, area=8800)


@pytest.fixture
def reference_particle():
    """100 x 100 box centered horizontally, above image center."""
    return make_particle(top=100, left=270, bottom=200, right=370, area=9000)
