"""
Particles Module
================

Particle measurement records and the pre-scoring area filter.
"""

from .measurement import (
    ARRAY_COLUMNS,
    ParticleMeasurement,
    ScoredParticle,
    measurements_from_array,
)
from .filters import ParticleFilter

__all__ = [
    'ARRAY_COLUMNS',
    'ParticleMeasurement',
    'ScoredParticle',
    'measurements_from_array',
    'ParticleFilter',
]
