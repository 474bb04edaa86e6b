"""
Vision Target Tracker - Test Suite
==================================

Unit tests for particle scoring, selection, range estimation and the
tracking session.

Test Categories:
    - unit/test_shape_scorer.py    : Pyramid closeness score
    - unit/test_evaluator.py       : Aspect and area sub-scores
    - unit/test_target_selector.py : Best-target selection and ranking
    - unit/test_range_estimator.py : Offset and range estimation
    - unit/test_session.py         : Tracking session and state transitions
    - unit/test_particles.py       : Measurement records and area filter
    - unit/test_config.py          : Configuration loading
    - unit/test_logging_setup.py   : Logging handlers

Usage:
    # Run all tests
    pytest test/

    # Run specific test with verbose output
    pytest test/unit/test_session.py -v
"""

__version__ = "1.0.0"
