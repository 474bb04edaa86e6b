"""
Core Module
===========

Contains the pieces that tie the tracker together:
- Configuration management
- Logging setup
- Tracking session (per-frame orchestration and cached result)
"""

from .config import Config, get_config, load_config
from .logging_setup import configure_logging
from .session import EvaluationResult, TrackerSession, TrackerState

__all__ = [
    'Config',
    'get_config',
    'load_config',
    'configure_logging',
    'EvaluationResult',
    'TrackerSession',
    'TrackerState',
]
