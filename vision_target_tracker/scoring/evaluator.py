"""
Target Evaluator
================

Shape sub-scores for a particle against the ideal target geometry.

Note on orientation: the aspect score takes "width" from the vertical
bound difference and "height" from the horizontal one. This matches the
particle measurement axis convention the ideal ratio was tuned against.
"""

from typing import Iterable, List, Optional, Sequence

from vision_target_tracker.particles import ParticleMeasurement, ScoredParticle
from vision_target_tracker.profiles import TargetGeometryProfile

from .shape_scorer import score_from_distance


def aspect_ratio_score(particle: ParticleMeasurement,
                       profile: TargetGeometryProfile) -> float:
    """0-1 closeness of the particle's box ratio to the ideal aspect ratio."""
    height = particle.bounds_right - particle.bounds_left
    width = particle.bounds_bottom - particle.bounds_top

    if height == 0:
        return 0.0
    return score_from_distance(width / height, profile.ideal_aspect_ratio)


def area_ratio_score(particle: ParticleMeasurement,
                     profile: TargetGeometryProfile) -> float:
    """
    0-1 closeness of the particle's fill ratio to the ideal.

    The fill ratio is the particle's filled area over its bounding box
    area. A zero-area box scores 0.
    """
    bounding_box_area = ((particle.bounds_bottom - particle.bounds_top) *
                         (particle.bounds_right - particle.bounds_left))

    if bounding_box_area == 0:
        return 0.0
    return score_from_distance(particle.area / bounding_box_area, profile.ideal_area_ratio)


def cumulative_score(aspect_score: float, area_score: float) -> float:
    """Mean of the two sub-scores; 1.0 only when both are perfect."""
    return (aspect_score + area_score) / 2.0


def evaluate_particle(particle: ParticleMeasurement,
                      profile: TargetGeometryProfile,
                      index: int = 0) -> ScoredParticle:
    """Score one particle, returning a scored copy."""
    aspect = aspect_ratio_score(particle, profile)
    area = area_ratio_score(particle, profile)
    return ScoredParticle(
        particle=particle,
        aspect_score=aspect,
        area_score=area,
        cumulative_score=cumulative_score(aspect, area),
        index=index,
    )


def evaluate_particles(particles: Iterable[ParticleMeasurement],
                       profile: TargetGeometryProfile,
                       indices: Optional[Sequence[int]] = None) -> List[ScoredParticle]:
    """
    Score every particle, keeping input order.

    indices gives each particle's position in the frame's input list
    when the particles are a filtered subset; by default they are
    numbered from 0.
    """
    particles = list(particles)
    if indices is None:
        indices = range(len(particles))
    elif len(indices) != len(particles):
        raise ValueError(f"Got {len(indices)} indices for {len(particles)} particles")
    return [evaluate_particle(p, profile, index=i) for i, p in zip(indices, particles)]
