"""
Scoring Module
==============

Shape-fit scoring of particles against the ideal target geometry.
"""

from .shape_scorer import score_from_distance
from .evaluator import (
    aspect_ratio_score,
    area_ratio_score,
    cumulative_score,
    evaluate_particle,
    evaluate_particles,
)

__all__ = [
    'score_from_distance',
    'aspect_ratio_score',
    'area_ratio_score',
    'cumulative_score',
    'evaluate_particle',
    'evaluate_particles',
]
