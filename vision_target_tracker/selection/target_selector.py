"""Target selection from scored particles."""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from vision_target_tracker.particles import ParticleMeasurement, ScoredParticle
from vision_target_tracker.profiles import TargetGeometryProfile
from vision_target_tracker.scoring import evaluate_particles

logger = logging.getLogger(__name__)


def rank_by_area(scored: Iterable[ScoredParticle]) -> List[ScoredParticle]:
    """Order scored particles largest area first; equal areas keep input order."""
    return sorted(scored, key=lambda s: -s.area)


def rank_by_score(scored: Iterable[ScoredParticle]) -> List[ScoredParticle]:
    """
    Order scored particles best first.

    Equal scores fall back to the area ordering, so the first entry is
    always the particle select_best would pick (when it scores above 0).
    """
    return sorted(rank_by_area(scored), key=lambda s: -s.cumulative_score)


def find_best_target(scored: Sequence[ScoredParticle]) -> Optional[ScoredParticle]:
    """Find the highest-scoring particle.

    Candidates are scanned largest area first and only a strictly better
    score replaces the current best, so ties go to the larger particle.

    Args:
        scored: Scored particles from one frame.

    Returns:
        Best scored particle, or None if nothing scores above 0.
    """
    best = None
    best_score = 0.0
    for candidate in rank_by_area(scored):
        if candidate.cumulative_score > best_score:
            best = candidate
            best_score = candidate.cumulative_score
    return best


def select_best(particles: Iterable[ParticleMeasurement],
                profile: TargetGeometryProfile,
                indices: Optional[Sequence[int]] = None
                ) -> Tuple[Optional[ScoredParticle], List[ScoredParticle]]:
    """
    Score all particles of a frame and pick the best target.

    Args:
        particles: Particle measurements for one frame
        profile: Ideal target geometry
        indices: Input-list positions of the particles, when they are a
            filtered subset of the frame

    Returns:
        Tuple of (best, scored) where best may be None and scored holds
        every particle in input order
    """
    scored = evaluate_particles(particles, profile, indices)
    best = find_best_target(scored)

    if best is not None:
        logger.debug(f"Best of {len(scored)} particles: index={best.index} "
                     f"score={best.cumulative_score:.3f}")
    else:
        logger.debug(f"No target among {len(scored)} particles")

    return best, scored
