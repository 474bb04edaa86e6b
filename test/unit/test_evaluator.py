"""
Target Evaluator Tests
======================

Unit tests for aspect and area sub-scores.
"""

import os
import pytest

import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from vision_target_tracker.particles import ScoredParticle
from vision_target_tracker.profiles import TargetGeometryProfile
from vision_target_tracker.scoring import (
    aspect_ratio_score, area_ratio_score, cumulative_score,
    evaluate_particle, evaluate_particles
)
from test.utils import make_particle


class TestAspectRatioScore:
    """Test aspect_ratio_score."""

    def test_perfect_aspect(self, geometry, perfect_particle):
        """200 rows by 140 columns matches the 20/14 ideal."""
        assert aspect_ratio_score(perfect_particle, geometry) == 1.0

    def test_square_box(self, geometry, reference_particle):
        """A square box has ratio 1, which is 0.7 of the ideal."""
        assert aspect_ratio_score(reference_particle, geometry) == pytest.approx(0.7)

    def test_width_taken_from_vertical_bounds(self, geometry):
        """Rotating the perfect box by 90 degrees loses the perfect score."""
        rotated = make_particle(top=100, left=250, bottom=240, right=450, area=8800)
        # width = 140, height = 200 -> 0.7 / (20/14) = 0.49
        assert aspect_ratio_score(rotated, geometry) == pytest.approx(0.49)

    def test_zero_height(self, geometry):
        """No horizontal extent scores 0 instead of dividing by zero."""
        line = make_particle(top=10, left=50, bottom=60, right=50, area=0)
        assert aspect_ratio_score(line, geometry) == 0.0


class TestAreaRatioScore:
    """Test area_ratio_score."""

    def test_perfect_fill(self, geometry, perfect_particle):
        """8800 of 28000 box pixels matches the 88/280 ideal."""
        assert area_ratio_score(perfect_particle, geometry) == 1.0

    def test_solid_box_scores_zero(self, geometry, reference_particle):
        """A 90% filled box is far above twice the ideal fill."""
        assert area_ratio_score(reference_particle, geometry) == 0.0

    def test_half_ideal_fill(self, geometry):
        """Half the ideal fill scores 0.5."""
        particle = make_particle(top=100, left=250, bottom=300, right=390, area=4400)
        assert area_ratio_score(particle, geometry) == pytest.approx(0.5)

    def test_zero_box_area(self, geometry):
        """Degenerate boxes score 0."""
        point = make_particle(top=10, left=10, bottom=10, right=10, area=1)
        assert area_ratio_score(point, geometry) == 0.0


class TestCumulativeScore:
    """Test cumulative scoring."""

    def test_average(self):
        assert cumulative_score(0.7, 0.0) == pytest.approx(0.35)
        assert cumulative_score(1.0, 1.0) == 1.0

    def test_scores_in_unit_interval(self, geometry):
        """Sub-scores stay within [0, 1] for assorted boxes."""
        boxes = [
            (0, 0, 1, 1000, 5),
            (0, 0, 1000, 1, 5),
            (0, 0, 10, 10, 1000),
            (5, 5, 5, 5, 0),
            (0, 0, 140, 100, 4000),
        ]
        for top, left, bottom, right, area in boxes:
            scored = evaluate_particle(make_particle(top, left, bottom, right, area), geometry)
            assert 0.0 <= scored.aspect_score <= 1.0
            assert 0.0 <= scored.area_score <= 1.0
            assert 0.0 <= scored.cumulative_score <= 1.0


class TestEvaluateParticles:
    """Test scored copies."""

    def test_evaluate_particle(self, geometry, perfect_particle):
        scored = evaluate_particle(perfect_particle, geometry, index=3)

        assert isinstance(scored, ScoredParticle)
        assert scored.particle is perfect_particle
        assert scored.cumulative_score == 1.0
        assert scored.index == 3

    def test_evaluate_particles_keeps_order(self, geometry, perfect_particle, reference_particle):
        scored = evaluate_particles([reference_particle, perfect_particle], geometry)

        assert [s.particle for s in scored] == [reference_particle, perfect_particle]
        assert [s.index for s in scored] == [0, 1]

    def test_evaluate_particles_with_indices(self, geometry, perfect_particle, reference_particle):
        scored = evaluate_particles([reference_particle, perfect_particle], geometry, indices=[2, 5])

        assert [s.index for s in scored] == [2, 5]

        with pytest.raises(ValueError):
            evaluate_particles([reference_particle], geometry, indices=[0, 1])

    def test_custom_profile(self, reference_particle):
        """A square, solid ideal makes the solid square perfect-ish."""
        profile = TargetGeometryProfile(ideal_aspect_ratio=1.0, ideal_area_ratio=0.9)
        scored = evaluate_particle(reference_particle, profile)

        assert scored.aspect_score == 1.0
        assert scored.area_score == pytest.approx(1.0)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
