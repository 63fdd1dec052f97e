from enum import Enum, auto
from .animation import RotationAnimation, ease_out_cubic
from .constants import NUMBER_OF_TURNS, SPIN_DURATION
from .errors import InvalidConfiguration
from .geometry import WheelGeometry, plan_target_angle
from .segment import SpinResult, as_segments
from .selector import validate_weights, weighted_random_choice


class SpinState(Enum):
    IDLE = auto()
    SPINNING = auto()


class SpinController:
    """Owns the Idle/Spinning state of one wheel.

    A spin request picks the winner, plans the rotation target and hands it
    to the animator. The animator's completion callback lands the wheel,
    returns to IDLE and reports the result. Requests made while spinning
    or disabled are dropped.
    """

    def __init__(self, segments, weights=None, turns: int = NUMBER_OF_TURNS, duration: float = SPIN_DURATION,
                 easing=ease_out_cubic, disabled: bool = False, on_spin_end=None,
                 animator: RotationAnimation = None, geometry: WheelGeometry = None, rng=None):
        """
        segments: Segment objects or labels, in wheel order
        weights: relative weights, one per segment, or None for uniform
        turns: full revolutions before landing
        duration: spin length in ms, passed through to the animator
        easing: easing curve, passed through to the animator
        on_spin_end: called as on_spin_end(segment, index) after each spin
        animator: object with value/set_value/start, defaults to a RotationAnimation
        geometry: angular layout shared with the renderer
        rng: zero-argument callable returning floats in [0, 1)
        """
        self._segments = tuple(as_segments(segments))
        count = len(self._segments)
        self.weights = validate_weights(weights, count)

        if isinstance(turns, bool) or not isinstance(turns, int) or turns < 1:
            raise InvalidConfiguration(f"Turns must be a positive integer, got {turns!r}")

        if geometry is None:
            geometry = WheelGeometry(count)
        elif geometry.count != count:
            raise InvalidConfiguration(
                f"Geometry is laid out for {geometry.count} segments, wheel has {count}"
            )

        self.turns = turns
        self.duration = duration
        self.easing = easing
        self.disabled = disabled
        self.on_spin_end = on_spin_end
        self.animator = animator if animator is not None else RotationAnimation()
        self._geometry = geometry
        self.rng = rng

        self._state = SpinState.IDLE
        self._rest_angle = self.animator.value
        self._spin_id = 0
        self._pending = None  # (index, target) of the spin in flight

    @property
    def state(self) -> SpinState:
        return self._state

    @property
    def is_spinning(self) -> bool:
        return self._state is SpinState.SPINNING

    @property
    def segments(self) -> tuple:
        return self._segments

    @property
    def geometry(self) -> WheelGeometry:
        return self._geometry

    @property
    def rotation(self) -> float:
        """Rotation the wheel rests at between spins."""
        return self._rest_angle

    @property
    def target(self):
        """Target of the spin in flight, or None when idle."""
        return self._pending[1] if self._pending else None

    def request_spin(self) -> bool:
        """Start a spin. Returns False if the request was ignored."""
        if self._state is SpinState.SPINNING or self.disabled:
            return False

        self.animator.set_value(self._rest_angle)

        index = weighted_random_choice(self.weights, len(self._segments), self.rng)
        target = plan_target_angle(index, self._geometry, self.turns, self._rest_angle)

        self._spin_id += 1
        spin_id = self._spin_id
        self._pending = (index, target)
        self._state = SpinState.SPINNING
        print(f"[Wheel] Spin {spin_id} started: {self._rest_angle:.1f} -> {target:.1f} deg")

        self.animator.start(target, self.duration, self.easing,
                            on_complete=lambda: self._on_animation_complete(spin_id))
        return True

    def _on_animation_complete(self, spin_id: int):
        # Stale or repeated notification
        if spin_id != self._spin_id or self._state is not SpinState.SPINNING:
            return

        index, target = self._pending
        self._pending = None
        self._rest_angle = target
        self._state = SpinState.IDLE

        result = SpinResult(index, self._segments[index])
        print(f"[Wheel] Spin {spin_id} landed on {index}: {result.segment.label}")
        if self.on_spin_end:
            self.on_spin_end(result.segment, result.index)
