"""
Tracker Session
===============

Runs one tracking cycle per frame: filter, score, select, estimate, and
cache the outcome so other threads can query the last known target
between cycles.

States:
    IDLE        no frame evaluated yet
    HAS_RESULT  last frame produced a target
    NO_TARGET   last frame produced no target

Usage:
    session = TrackerSession(TargetGeometryProfile(), CameraProfile())
    session.on('on_target_lost', lambda result: ...)

    # In the frame loop:
    result = session.evaluate_frame(particles, 640, 480)
    dx, dy = result.center_offset
"""

import logging
import threading
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from vision_target_tracker.particles import ParticleFilter, ParticleMeasurement, ScoredParticle
from vision_target_tracker.profiles import CameraProfile, TargetGeometryProfile
from vision_target_tracker.selection import select_best
from vision_target_tracker.utils import RangeEstimator

logger = logging.getLogger(__name__)


class TrackerState(Enum):
    """Session states."""
    IDLE = auto()
    HAS_RESULT = auto()
    NO_TARGET = auto()


@dataclass(frozen=True)
class EvaluationResult:
    """
    Outcome of one tracking cycle.

    Attributes:
        best_target: Selected target, or None
        scored: Every evaluated particle with its scores, in input order
        center_offset: (dx, dy) of the target, +x right and +y up
        estimated_range: Horizontal range, 0.0 without a target
        image_size: (width, height) of the frame
        frame_index: Sequence number of the cycle within the session
        timestamp: Unix time of the evaluation
    """
    best_target: Optional[ScoredParticle]
    scored: Tuple[ScoredParticle, ...] = ()
    center_offset: Tuple[float, float] = (0.0, 0.0)
    estimated_range: float = 0.0
    image_size: Tuple[int, int] = (0, 0)
    frame_index: int = field(default=0, compare=False)
    timestamp: float = field(default_factory=time.time, compare=False)

    @property
    def has_target(self) -> bool:
        return self.best_target is not None


@dataclass
class StateTransition:
    """Represents a state transition."""
    from_state: TrackerState
    to_state: TrackerState
    frame_index: int
    timestamp: float = field(default_factory=time.time)


class TrackerSession:
    """
    Per-frame target tracking with a cached last result.

    evaluate_frame is meant to be called from a single frame-processing
    thread; the cached properties may be read from any thread.

    Args:
        geometry: Ideal target geometry
        camera: Camera optics
        particle_filter: Optional area filter applied before scoring
    """

    MAX_HISTORY = 100

    def __init__(self,
                 geometry: Optional[TargetGeometryProfile] = None,
                 camera: Optional[CameraProfile] = None,
                 particle_filter: Optional[ParticleFilter] = None):
        self.geometry = geometry or TargetGeometryProfile()
        self.camera = camera or CameraProfile()
        self.particle_filter = particle_filter
        self._estimator = RangeEstimator(self.geometry, self.camera)

        self._lock = threading.RLock()
        self._state = TrackerState.IDLE
        self._last_result: Optional[EvaluationResult] = None
        self._frame_count = 0
        self._targets_found = 0
        self._transition_history: List[StateTransition] = []
        self._callbacks: Dict[str, List[Callable]] = {
            'on_state_change': [],
            'on_target_acquired': [],
            'on_target_lost': [],
        }

    @classmethod
    def from_config(cls, config) -> 'TrackerSession':
        """Build a session from a Config instance."""
        return cls(
            geometry=config.geometry_profile(),
            camera=config.camera_profile(),
            particle_filter=config.build_particle_filter(),
        )

    # -- Callbacks --
    def on(self, event: str, callback: Callable) -> None:
        """Register event callback."""
        if event in self._callbacks:
            self._callbacks[event].append(callback)
        else:
            logger.warning(f"Unknown session event: {event}")

    def _emit(self, event: str, *args, **kwargs) -> None:
        """Emit event to callbacks."""
        for callback in self._callbacks.get(event, []):
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(f"Callback error in {event}: {e}")

    # -- Cached state --
    @property
    def state(self) -> TrackerState:
        with self._lock:
            return self._state

    @property
    def state_name(self) -> str:
        return self.state.name

    @property
    def last_result(self) -> Optional[EvaluationResult]:
        with self._lock:
            return self._last_result

    @property
    def best_target(self) -> Optional[ScoredParticle]:
        result = self.last_result
        return result.best_target if result else None

    @property
    def estimated_range(self) -> float:
        result = self.last_result
        return result.estimated_range if result else 0.0

    @property
    def center_offset(self) -> Tuple[float, float]:
        result = self.last_result
        return result.center_offset if result else (0.0, 0.0)

    @property
    def frame_count(self) -> int:
        with self._lock:
            return self._frame_count

    # -- Tracking cycle --
    def evaluate_frame(self,
                       particles: Iterable[ParticleMeasurement],
                       image_width: int,
                       image_height: int) -> EvaluationResult:
        """
        Evaluate one frame's particles.

        Args:
            particles: Particle measurements for exactly one frame
            image_width: Frame width in pixels
            image_height: Frame height in pixels

        Returns:
            EvaluationResult for this frame; also cached on the session
        """
        particles = tuple(particles)
        if self.particle_filter is not None:
            kept = self.particle_filter.apply_indexed(particles)
            indices = [i for i, _ in kept]
            particles = tuple(p for _, p in kept)
        else:
            indices = None

        best, scored = select_best(particles, self.geometry, indices)
        offset = self._estimator.center_offset(best, image_width, image_height)
        distance = self._estimator.estimate_range(best, image_height)

        with self._lock:
            frame_index = self._frame_count
            result = EvaluationResult(
                best_target=best,
                scored=tuple(scored),
                center_offset=offset,
                estimated_range=distance,
                image_size=(image_width, image_height),
                frame_index=frame_index,
            )
            old_state = self._state
            new_state = TrackerState.HAS_RESULT if best is not None else TrackerState.NO_TARGET

            self._last_result = result
            self._frame_count += 1
            if best is not None:
                self._targets_found += 1
            if new_state != old_state:
                self._record_transition(old_state, new_state, frame_index)

        if best is not None:
            logger.debug(f"Frame {frame_index}: target at offset "
                         f"({offset[0]:+.3f}, {offset[1]:+.3f}) range {distance:.2f}")

        if new_state != old_state:
            self._emit('on_state_change', old_state, new_state)
            if new_state == TrackerState.HAS_RESULT:
                self._emit('on_target_acquired', result)
            elif old_state == TrackerState.HAS_RESULT:
                self._emit('on_target_lost', result)

        return result

    def _record_transition(self, old_state: TrackerState,
                           new_state: TrackerState, frame_index: int) -> None:
        self._state = new_state
        self._transition_history.append(
            StateTransition(from_state=old_state, to_state=new_state, frame_index=frame_index))

        # Keep history bounded
        if len(self._transition_history) > self.MAX_HISTORY:
            self._transition_history = self._transition_history[-self.MAX_HISTORY // 2:]

        logger.info(f"Tracker state: {old_state.name} -> {new_state.name} (frame {frame_index})")

    def reset(self) -> None:
        """Forget the cached result and return to IDLE."""
        with self._lock:
            old_state = self._state
            self._last_result = None
            if old_state != TrackerState.IDLE:
                self._record_transition(old_state, TrackerState.IDLE, self._frame_count)
        if old_state != TrackerState.IDLE:
            self._emit('on_state_change', old_state, TrackerState.IDLE)

    def get_transition_history(self) -> List[StateTransition]:
        """Get state transition history."""
        with self._lock:
            return self._transition_history.copy()

    def get_stats(self) -> Dict[str, Any]:
        """Get session statistics."""
        with self._lock:
            return {
                'state': self._state.name,
                'frame_count': self._frame_count,
                'targets_found': self._targets_found,
                'estimated_range': self._last_result.estimated_range if self._last_result else 0.0,
                'particle_filter': repr(self.particle_filter) if self.particle_filter else None,
            }
