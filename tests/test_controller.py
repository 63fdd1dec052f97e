import pytest

from conftest import FixedRandom
from spinwheel.animation import RotationAnimation, linear
from spinwheel.controller import SpinController, SpinState
from spinwheel.errors import InvalidConfiguration
from spinwheel.geometry import WheelGeometry
from spinwheel.segment import Segment


class FakeAnimator:
    """Records what the controller asks for; completion is triggered by hand."""

    def __init__(self):
        self.value = 0.0
        self.starts = []
        self.set_values = []
        self.on_complete = None

    def set_value(self, value):
        self.set_values.append(value)
        self.value = value

    def start(self, to_value, duration, easing, on_complete=None):
        self.starts.append((to_value, duration, easing))
        self.on_complete = on_complete

    def finish(self):
        self.value = self.starts[-1][0]
        self.on_complete()


def make_controller(labels=("A", "B", "C"), **kwargs):
    results = []
    kwargs.setdefault("animator", FakeAnimator())
    kwargs.setdefault("on_spin_end", lambda segment, index: results.append((segment, index)))
    controller = SpinController(list(labels), **kwargs)
    return controller, controller.animator, results


def test_starts_idle():
    controller, _, _ = make_controller()
    assert controller.state is SpinState.IDLE
    assert not controller.is_spinning
    assert controller.target is None


def test_full_spin_cycle():
    rng = FixedRandom(0.95)
    controller, animator, results = make_controller(weights=[1, 1, 8], turns=3, duration=1234, rng=rng)

    assert controller.request_spin() is True
    assert controller.state is SpinState.SPINNING
    assert animator.set_values == [0.0]
    assert animator.starts[0][0] == 1080 + 60
    assert animator.starts[0][1] == 1234
    assert controller.target == 1140
    assert results == []

    animator.finish()
    assert controller.state is SpinState.IDLE
    assert results == [(Segment("C"), 2)]
    assert controller.rotation == 1140


def test_second_request_while_spinning_is_dropped():
    rng = FixedRandom(0.5, 0.1)
    controller, animator, results = make_controller(rng=rng)

    assert controller.request_spin() is True
    assert controller.request_spin() is False

    assert rng.calls == 1
    assert len(animator.starts) == 1
    assert controller.state is SpinState.SPINNING

    animator.finish()
    assert len(results) == 1
    assert controller.state is SpinState.IDLE


def test_disabled_wheel_never_spins():
    controller, animator, results = make_controller(disabled=True)
    assert controller.request_spin() is False
    assert controller.state is SpinState.IDLE
    assert animator.starts == []
    assert results == []


def test_enabling_later_allows_spin():
    controller, animator, _ = make_controller(disabled=True)
    controller.disabled = False
    assert controller.request_spin() is True


def test_completion_without_callback_still_returns_idle():
    controller, animator, _ = make_controller(on_spin_end=None)
    controller.request_spin()
    animator.finish()
    assert controller.state is SpinState.IDLE


def test_repeated_completion_reports_once():
    controller, animator, results = make_controller()
    controller.request_spin()
    callback = animator.on_complete
    callback()
    callback()
    assert len(results) == 1


def test_stale_completion_is_ignored():
    controller, animator, results = make_controller(rng=FixedRandom(0.0, 0.5))
    controller.request_spin()
    first_callback = animator.on_complete
    animator.finish()
    controller.request_spin()

    first_callback()
    assert controller.state is SpinState.SPINNING
    assert len(results) == 1

    animator.finish()
    assert [index for _, index in results] == [0, 1]


def test_stays_spinning_if_animation_never_completes():
    controller, _, results = make_controller()
    controller.request_spin()
    for _ in range(5):
        controller.request_spin()
    assert controller.state is SpinState.SPINNING
    assert results == []


def test_consecutive_targets_increase():
    rng = FixedRandom(0.9, 0.1, 0.9, 0.9, 0.4)
    controller, animator, _ = make_controller(labels="ABCD", rng=rng)
    targets = []
    for _ in range(5):
        controller.request_spin()
        targets.append(controller.target)
        animator.finish()
    assert all(b > a for a, b in zip(targets, targets[1:]))
    # Each spin restarts from where the previous one landed
    assert animator.set_values == [0.0] + targets[:-1]


def test_lands_on_selected_segment_with_real_animation():
    """Selector, planner and animator agree on where the wheel stops."""
    results = []
    animation = RotationAnimation()
    geometry = WheelGeometry(4)
    controller = SpinController(
        ["A", "B", "C", "D"], turns=5, duration=3000, easing=linear, animator=animation,
        geometry=geometry, rng=FixedRandom(0.6), on_spin_end=lambda s, i: results.append(i),
    )

    controller.request_spin()
    for _ in range(200):
        animation.update(1000 / 60)

    assert results == [2]
    assert geometry.segment_at_pointer(animation.value) == 2
    pointer = (geometry.pointer_angle - animation.value % 360) % 360
    assert 2 * 90 <= pointer < 3 * 90


def test_segments_are_frozen():
    controller, _, _ = make_controller()
    assert isinstance(controller.segments, tuple)
    assert [s.label for s in controller.segments] == ["A", "B", "C"]


@pytest.mark.parametrize("kwargs", [
    {"labels": []},
    {"weights": [1, 2]},
    {"weights": [1, -2, 3]},
    {"turns": 0},
    {"turns": 2.5},
    {"geometry": WheelGeometry(5)},
])
def test_bad_configuration_fails_at_construction(kwargs):
    with pytest.raises(InvalidConfiguration):
        make_controller(**kwargs)
