import pytest

from spinwheel.errors import InvalidConfiguration
from spinwheel.geometry import (
    CLOCKWISE, COUNTERCLOCKWISE, WheelGeometry, arc_points, plan_target_angle, polar_to_cartesian
)


def test_angle_per_segment_and_spans():
    geometry = WheelGeometry(4)
    assert geometry.angle_per_segment == 90
    assert geometry.segment_span(0) == (0, 90)
    assert geometry.segment_span(2) == (180, 270)
    assert geometry.segment_center(2) == 225


def test_target_for_four_segments_lands_on_segment_two():
    geometry = WheelGeometry(4)
    target = plan_target_angle(2, geometry, turns=5)

    # Pointer at the top, wheel turned by `target` in the layout direction
    pointer_in_wheel_frame = (geometry.pointer_angle - target % 360) % 360
    start, end = geometry.segment_span(2)
    assert start <= pointer_in_wheel_frame < end
    assert target == 5 * 360 + 135


def test_target_for_three_segments_matches_formula():
    geometry = WheelGeometry(3)
    target = plan_target_angle(2, geometry, turns=3)
    # 1080 base + correction so that 360 - correction is segment 2's center (300)
    assert target == 1080 + 60


@pytest.mark.parametrize("count", [1, 2, 3, 5, 7, 12, 37])
@pytest.mark.parametrize("start_offset", [0.0, 45.0, -90.0, 200.5])
@pytest.mark.parametrize("direction", [CLOCKWISE, COUNTERCLOCKWISE])
@pytest.mark.parametrize("pointer_angle", [0.0, 90.0, 270.0])
def test_every_index_lands_under_pointer(count, start_offset, direction, pointer_angle):
    geometry = WheelGeometry(count, start_offset, direction, pointer_angle)
    for index in range(count):
        target = plan_target_angle(index, geometry, turns=4)
        assert geometry.segment_at_pointer(target) == index
        # Centered, not just inside
        assert geometry.pointer_wheel_angle(target) == pytest.approx(geometry.segment_center(index))


def test_target_is_cumulative_from_rest_angle():
    geometry = WheelGeometry(6)
    rest = 0.0
    previous = None
    for index in [3, 3, 0, 5, 1, 1]:
        target = plan_target_angle(index, geometry, turns=2, rest_angle=rest)
        assert target >= rest + 2 * 360
        assert target < rest + 3 * 360
        if previous is not None:
            assert target > previous
        assert geometry.segment_at_pointer(target) == index
        previous = rest = target


def test_same_segment_twice_still_spins():
    geometry = WheelGeometry(4)
    first = plan_target_angle(1, geometry, turns=1)
    second = plan_target_angle(1, geometry, turns=1, rest_angle=first)
    assert second - first == 360


@pytest.mark.parametrize("turns", [0, -1, 1.5, True, "3"])
def test_turns_must_be_positive_integer(turns):
    with pytest.raises(InvalidConfiguration):
        plan_target_angle(0, WheelGeometry(4), turns=turns)


@pytest.mark.parametrize("index", [-1, 4])
def test_index_out_of_range(index):
    with pytest.raises(InvalidConfiguration):
        plan_target_angle(index, WheelGeometry(4), turns=1)


def test_geometry_rejects_bad_layout():
    with pytest.raises(InvalidConfiguration):
        WheelGeometry(0)
    with pytest.raises(InvalidConfiguration):
        WheelGeometry(4, direction=2)


def test_screen_angle_follows_direction():
    clockwise = WheelGeometry(4, start_offset=10)
    counter = WheelGeometry(4, start_offset=10, direction=COUNTERCLOCKWISE)
    assert clockwise.screen_angle(90, rotation=30) == 130
    assert counter.screen_angle(90, rotation=30) == -110


def test_segment_at_pointer_at_rest():
    geometry = WheelGeometry(4)
    # Segment 0 starts at the pointer
    assert geometry.segment_at_pointer(0) == 0
    # Turning clockwise by a little brings the last segment under the pointer
    assert geometry.segment_at_pointer(10) == 3
    assert geometry.segment_at_pointer(-10) == 0


def test_polar_to_cartesian_zero_is_up_and_clockwise():
    x, y = polar_to_cartesian(100, 100, 50, 0)
    assert (x, y) == pytest.approx((100, 50))
    x, y = polar_to_cartesian(100, 100, 50, 90)
    assert (x, y) == pytest.approx((150, 100))


def test_arc_points_start_at_center_and_span_the_wedge():
    points = arc_points(0, 0, 10, 0, 90)
    assert points[0] == (0, 0)
    assert points[1] == pytest.approx((0, -10))
    assert points[-1] == pytest.approx((10, 0))
