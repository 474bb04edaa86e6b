"""Test helpers."""

from .factories import IMAGE_HEIGHT, IMAGE_WIDTH, make_particle

__all__ = ['IMAGE_HEIGHT', 'IMAGE_WIDTH', 'make_particle']
