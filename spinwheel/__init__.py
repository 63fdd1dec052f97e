from .errors import InvalidConfiguration
from .segment import Segment, SpinResult
from .selector import weighted_random_choice, validate_weights
from .geometry import WheelGeometry, plan_target_angle, CLOCKWISE, COUNTERCLOCKWISE
from .controller import SpinController, SpinState
from .config import WheelConfig, load_segments, parse_weights
