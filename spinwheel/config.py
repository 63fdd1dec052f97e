# Wheel configuration

import os
from .constants import (
    NUMBER_OF_TURNS, SPIN_DURATION, BUTTON_TEXT,
    INNER_CIRCLE_COLOR, OUTER_CIRCLE_COLOR, CENTER_CIRCLE_RADIUS,
    IMAGE_TEXT_SPACING, LINE_SPACING, IMAGE_SIZE, IMAGE_RADIUS_FACTOR
)
from .animation import ease_out_cubic
from .controller import SpinController
from .errors import InvalidConfiguration
from .geometry import WheelGeometry, CLOCKWISE
from .segment import Segment, as_segments
from .selector import validate_weights

__all__ = ['WheelConfig', 'InvalidConfiguration', 'load_segments', 'parse_weights',
           'get_config', 'set_config']


class WheelConfig:
    """Everything a host supplies to build one wheel."""

    def __init__(self, segments=None, **overrides):
        self.segments = as_segments(segments or [])
        self._setup_defaults()
        for key, value in overrides.items():
            if not hasattr(self, key):
                raise InvalidConfiguration(f"Unknown wheel setting: {key}")
            setattr(self, key, value)

    def _setup_defaults(self):
        # Selection and targeting
        self.weights = None  # None means uniform
        self.turns = NUMBER_OF_TURNS
        self.duration = SPIN_DURATION  # ms
        self.easing = ease_out_cubic
        self.disabled = False
        self.on_spin_end = None
        self.rng = None

        # Pointer convention, shared by renderer and planner
        self.start_offset = 0.0
        self.direction = CLOCKWISE
        self.pointer_angle = 0.0

        # Widget
        self.wheel_size = None  # Defaults to a fraction of the window width
        self.button_text = BUTTON_TEXT
        self.inner_circle_color = INNER_CIRCLE_COLOR
        self.outer_circle_color = OUTER_CIRCLE_COLOR
        self.center_circle_radius = CENTER_CIRCLE_RADIUS
        self.image_text_spacing = IMAGE_TEXT_SPACING
        self.line_spacing = LINE_SPACING
        self.image_size = IMAGE_SIZE
        self.image_radius_factor = IMAGE_RADIUS_FACTOR

        # Sound
        self.muted = False

    def validate(self):
        """Fail fast on anything that would break a spin later."""
        self.weights = validate_weights(self.weights, len(self.segments))
        turns = self.turns
        if isinstance(turns, bool) or not isinstance(turns, int) or turns < 1:
            raise InvalidConfiguration(f"Turns must be a positive integer, got {turns!r}")
        if self.duration < 0:
            raise InvalidConfiguration(f"Duration can't be negative, got {self.duration!r}")
        return self

    def build_geometry(self) -> WheelGeometry:
        return WheelGeometry(len(self.segments), self.start_offset, self.direction, self.pointer_angle)

    def build_controller(self, animator=None) -> SpinController:
        self.validate()
        return SpinController(
            self.segments,
            weights=self.weights,
            turns=self.turns,
            duration=self.duration,
            easing=self.easing,
            disabled=self.disabled,
            on_spin_end=self.on_spin_end,
            animator=animator,
            geometry=self.build_geometry(),
            rng=self.rng,
        )


def parse_weights(text: str) -> list:
    """Parse a comma separated weight list like "1,1,8"."""
    weights = []
    for part in text.split(','):
        part = part.strip()
        if not part:
            continue
        try:
            weights.append(float(part))
        except ValueError:
            raise InvalidConfiguration(f"Bad weight: {part!r}")
    return weights


def load_segments(filepath: str) -> tuple:
    """Load segments from a text file, one per line.

    A line may end with "| weight". Blank lines and lines starting with #
    are skipped. Returns (segments, weights) where weights is None when no
    line carries one.
    """
    if not os.path.exists(filepath):
        raise InvalidConfiguration(f"Segment file not found: {filepath}")

    segments = []
    weights = []
    with open(filepath, 'r', encoding='utf-8') as f:
        for line_no, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            if '|' in line:
                label, _, weight = line.rpartition('|')
                try:
                    weights.append(float(weight.strip()))
                except ValueError:
                    raise InvalidConfiguration(f"{filepath}:{line_no}: bad weight {weight.strip()!r}")
                line = label.strip()
            segments.append(Segment(line))

    if weights and len(weights) != len(segments):
        raise InvalidConfiguration(f"{filepath}: either every segment has a weight or none does")

    print(f"[Config] Loaded {len(segments)} segments from {filepath}")
    return segments, (weights or None)


# Global config instance (set by main.py)
current_config = None


def get_config():
    """Get the current wheel configuration."""
    global current_config
    if current_config is None:
        current_config = WheelConfig()
    return current_config


def set_config(config):
    """Install a wheel configuration."""
    global current_config
    current_config = config
    return current_config
