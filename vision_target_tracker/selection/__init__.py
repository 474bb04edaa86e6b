"""Selection package - ranks scored particles and picks the best target."""

from .target_selector import find_best_target, rank_by_area, rank_by_score, select_best

__all__ = ['find_best_target', 'rank_by_area', 'rank_by_score', 'select_best']
