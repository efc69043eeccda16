"""Edge-triggered key latches"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Controls:
    rotate: bool = False
    left: bool = False
    right: bool = False
    soft_drop: bool = False


class EdgeLatch:
    def __init__(self):
        self.was_pressed = False

    def update(self, pressed: bool) -> bool:
        """Return True only on the tick the control goes from released to pressed."""
        fired = pressed and not self.was_pressed
        self.was_pressed = pressed
        return fired


class InputLatches:
    """Turns raw held state into per-tick actions; soft drop stays level-triggered."""

    def __init__(self):
        self.rotate = EdgeLatch()
        self.left = EdgeLatch()
        self.right = EdgeLatch()

    def update(self, held: Controls) -> Controls:
        rotate = self.rotate.update(held.rotate)
        # both directions held: no move, and the horizontal latches stay as they were
        if held.left and held.right:
            left = right = False
        else:
            left = self.left.update(held.left)
            right = self.right.update(held.right)
        return Controls(rotate=rotate, left=left, right=right, soft_drop=held.soft_drop)
