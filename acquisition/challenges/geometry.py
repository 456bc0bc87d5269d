"""Distance helpers for target acquisition."""

import math
from typing import Optional, Sequence

from .base import Point


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    dz = a.z - b.z
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def nearest(origin: Point, candidates: Sequence[Point]) -> Optional[str]:
    """
    Return the id of the candidate closest to origin.

    Ties go to the candidate that comes first. Returns None when there
    are no candidates.
    """
    if not candidates:
        return None

    closest_id = candidates[0].id
    min_distance = distance(origin, candidates[0])

    for candidate in candidates[1:]:
        dist = distance(origin, candidate)
        if dist < min_distance:
            min_distance = dist
            closest_id = candidate.id

    return closest_id
