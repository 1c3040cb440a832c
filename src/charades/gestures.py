"""Swipe classification for mouse drags on the card."""

from enum import Enum

# Minimum horizontal travel before a drag counts as a swipe
MIN_SWIPE_DISTANCE = 50


class Swipe(str, Enum):
    NEXT = "next"
    PREVIOUS = "previous"


def classify_swipe(
    start: tuple[int, int],
    end: tuple[int, int],
    threshold: int = MIN_SWIPE_DISTANCE,
) -> Swipe | None:
    """Map a drag from start to end onto a navigation direction.

    Only horizontal-dominant drags longer than the threshold count.
    Dragging left shows the next card, dragging right the previous one.

    Args:
        start: (x, y) where the drag began
        end: (x, y) where the drag ended
        threshold: Minimum horizontal distance

    Returns:
        The swipe direction, or None if the drag should be ignored.
    """
    distance_x = start[0] - end[0]
    distance_y = start[1] - end[1]

    if abs(distance_x) <= abs(distance_y):
        return None
    if abs(distance_x) <= threshold:
        return None
    return Swipe.NEXT if distance_x > 0 else Swipe.PREVIOUS
