"""Wheel geometry and rotation targeting.

Angles are in degrees. Screen angles are measured clockwise from the 12
o'clock position, so the pointer at the top of the wheel sits at 0.
Wheel-frame angles are measured from where segment 0 begins, in the
direction segment indices increase.

The renderer and the planner must agree on the frame, so both read it
from the same WheelGeometry instance.
"""
import math
from .errors import InvalidConfiguration

CLOCKWISE = 1
COUNTERCLOCKWISE = -1


class WheelGeometry:
    """Angular layout of one wheel, fixed for the duration of a spin."""

    def __init__(self, count: int, start_offset: float = 0.0, direction: int = CLOCKWISE,
                 pointer_angle: float = 0.0):
        """
        count: number of segments
        start_offset: screen angle where segment 0 begins
        direction: CLOCKWISE or COUNTERCLOCKWISE, for both the segment
            order and the sense a positive rotation turns the wheel
        pointer_angle: screen angle of the fixed pointer
        """
        if count <= 0:
            raise InvalidConfiguration("A wheel needs at least one segment")
        if direction not in (CLOCKWISE, COUNTERCLOCKWISE):
            raise InvalidConfiguration(f"Unknown direction: {direction!r}")
        self.count = count
        self.start_offset = start_offset
        self.direction = direction
        self.pointer_angle = pointer_angle

    @property
    def angle_per_segment(self) -> float:
        return 360 / self.count

    def segment_span(self, index: int) -> tuple:
        """Wheel-frame span [start, end) of a segment."""
        aps = self.angle_per_segment
        return index * aps, (index + 1) * aps

    def segment_center(self, index: int) -> float:
        return (index + 0.5) * self.angle_per_segment

    def screen_angle(self, wheel_angle: float, rotation: float = 0.0) -> float:
        """Where a wheel-frame angle shows up on screen at a given rotation."""
        return self.start_offset + self.direction * (wheel_angle + rotation)

    def pointer_wheel_angle(self, rotation: float) -> float:
        """Wheel-frame angle under the pointer, in [0, 360)."""
        angle = (self.direction * (self.pointer_angle - self.start_offset) - rotation) % 360
        # -1e-15 % 360 comes back as 360.0
        return 0.0 if angle >= 360 else angle

    def segment_at_pointer(self, rotation: float) -> int:
        """Index of the segment the pointer indicates at a given rotation."""
        index = int(self.pointer_wheel_angle(rotation) // self.angle_per_segment)
        return min(index, self.count - 1)


def plan_target_angle(index: int, geometry: WheelGeometry, turns: int, rest_angle: float = 0.0) -> float:
    """Rotation value that parks the center of segment `index` under the pointer.

    The result is cumulative: it starts from `rest_angle`, adds `turns`
    full revolutions, then the partial turn needed to line the segment up.
    It is never normalized, and always at least `turns * 360` past
    `rest_angle`.
    """
    if not 0 <= index < geometry.count:
        raise InvalidConfiguration(f"Segment index {index} out of range for {geometry.count} segments")
    if isinstance(turns, bool) or not isinstance(turns, int) or turns < 1:
        raise InvalidConfiguration(f"Turns must be a positive integer, got {turns!r}")

    center = geometry.segment_center(index)
    desired = (geometry.direction * (geometry.pointer_angle - geometry.start_offset) - center) % 360
    correction = (desired - rest_angle) % 360
    return rest_angle + turns * 360 + correction


def polar_to_cartesian(cx: float, cy: float, r: float, angle: float) -> tuple:
    """Pixel position of a screen angle on a circle (y grows downwards)."""
    rad = math.radians(angle - 90)
    return cx + r * math.cos(rad), cy + r * math.sin(rad)


def arc_points(cx: float, cy: float, r: float, start_angle: float, end_angle: float,
               steps_per_degree: float = 0.5) -> list:
    """Polygon for a pie wedge between two screen angles, center first."""
    points = [(cx, cy)]
    steps = max(3, int(abs(end_angle - start_angle) * steps_per_degree))
    for i in range(steps + 1):
        angle = start_angle + (end_angle - start_angle) * i / steps
        points.append(polar_to_cartesian(cx, cy, r, angle))
    return points
