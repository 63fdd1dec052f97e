"""Frame-driven rotation animation.

The app loop calls update(dt) once per frame; the animation moves its
value from where it was when start() was called to the target along an
easing curve, then calls on_complete exactly once.
"""


def linear(t: float) -> float:
    return t


def decelerate(power: float = 2.0):
    """Curve whose speed falls continuously to zero at t=1.

    theta(t) = 1 - (1 - t)^(power + 1). Higher power brakes harder at the
    end; 1..4 look natural on a wheel.
    """
    n = max(0.0, power)

    def curve(t: float) -> float:
        return 1.0 - (1.0 - t) ** (n + 1.0)
    return curve


def ease_out_cubic(t: float) -> float:
    return 1.0 - (1.0 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


EASINGS = {
    'linear': linear,
    'ease-out-cubic': ease_out_cubic,
    'ease-in-out-cubic': ease_in_out_cubic,
    'decelerate': decelerate(3.0),
}


class RotationAnimation:
    def __init__(self, value: float = 0.0):
        self.value = value
        self.start_value = value
        self.target = value
        self.duration = 0
        self.elapsed = 0
        self.easing = linear
        self.running = False
        self._on_complete = None

    def set_value(self, value: float):
        """Jump to a value without animating (ignored while running)."""
        if not self.running:
            self.value = value

    def start(self, to_value: float, duration: float, easing=ease_out_cubic, on_complete=None):
        """Animate from the current value to `to_value` over `duration` ms."""
        self.start_value = self.value
        self.target = to_value
        self.duration = max(0, duration)
        self.elapsed = 0
        self.easing = easing or linear
        self._on_complete = on_complete
        self.running = True

    @property
    def progress(self) -> float:
        if self.duration <= 0:
            return 0.0 if self.running else 1.0
        return min(1.0, self.elapsed / self.duration)

    def update(self, dt: float):
        """Advance by dt milliseconds."""
        if not self.running:
            return

        self.elapsed += max(dt, 1e-9)
        t = 1.0 if self.duration <= 0 else min(1.0, self.elapsed / self.duration)

        if t >= 1.0:
            self.value = self.target
            self.running = False
            # Drop the callback before calling it so it can only fire once
            callback = self._on_complete
            self._on_complete = None
            if callback:
                callback()
            return

        self.value = self.start_value + (self.target - self.start_value) * self.easing(t)
