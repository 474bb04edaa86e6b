"""Area-fraction particle filter applied before scoring."""

import logging
from typing import Iterable, Tuple

from .measurement import ParticleMeasurement

logger = logging.getLogger(__name__)


class ParticleFilter:
    """
    Keeps particles whose share of the image area lies in a window.

    Bounds are percentages of the total image area, so the default
    window of 1..100 drops specks smaller than 1% of the frame.

    Args:
        area_minimum: Lower bound, percent of image area (inclusive)
        area_maximum: Upper bound, percent of image area (inclusive)
    """

    def __init__(self, area_minimum: float = 1.0, area_maximum: float = 100.0):
        if area_minimum < 0 or area_maximum < area_minimum:
            raise ValueError(
                f"Invalid area window: [{area_minimum}, {area_maximum}]")
        self.area_minimum = area_minimum
        self.area_maximum = area_maximum

    def accepts(self, particle: ParticleMeasurement) -> bool:
        percent = particle.area_fraction * 100.0
        return self.area_minimum <= percent <= self.area_maximum

    def apply(self, particles: Iterable[ParticleMeasurement]) -> Tuple[ParticleMeasurement, ...]:
        """Return the accepted particles, preserving input order."""
        return tuple(p for _, p in self.apply_indexed(particles))

    def apply_indexed(self, particles: Iterable[ParticleMeasurement]
                      ) -> Tuple[Tuple[int, ParticleMeasurement], ...]:
        """Return (input position, particle) pairs for the accepted particles."""
        particles = tuple(particles)
        kept = tuple((i, p) for i, p in enumerate(particles) if self.accepts(p))
        if len(kept) != len(particles):
            logger.debug(f"Area filter dropped {len(particles) - len(kept)} "
                         f"of {len(particles)} particles")
        return kept

    def __repr__(self) -> str:
        return f"ParticleFilter(area_minimum={self.area_minimum}, area_maximum={self.area_maximum})"
