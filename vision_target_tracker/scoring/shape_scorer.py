"""Closeness score between an observed ratio and its ideal value."""


def score_from_distance(observed: float, ideal: float) -> float:
    """
    Score how close a value is to its ideal.

    A "pyramid" function: 1.0 when observed equals ideal, falling linearly
    to 0.0 as observed/ideal reaches 0 or 2, and clamped to [0, 1].

    Args:
        observed: The measured value
        ideal: The optimal value

    Returns:
        Closeness score in [0, 1], or 0.0 when ideal is zero
    """
    if ideal == 0:
        return 0.0
    return max(0.0, min(1.0 - abs(1.0 - observed / ideal), 1.0))
