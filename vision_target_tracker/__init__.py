"""
Vision Target Tracker Package
=============================

Picks the best target blob among the particles of a segmented camera
frame and reports its screen offset and estimated range.

Subpackages:
    - particles: Particle measurement records and the area filter
    - scoring:   Shape-fit scores against the ideal target geometry
    - selection: Ranking and best-target selection
    - utils:     Offset and range estimation from the bounding box
    - core:      Configuration, logging setup, tracking session

Example:
    from vision_target_tracker.core import TrackerSession, load_config
    from vision_target_tracker.particles import ParticleMeasurement
"""

__version__ = '1.0.0'
