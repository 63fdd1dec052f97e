# Window settings
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 900
FPS = 60

# Colors
WHITE = (255, 255, 255)

# UI Colors
UI_BG = (25, 25, 35)
UI_PANEL = (40, 40, 55)
UI_ACCENT = (255, 107, 107)
UI_ACCENT_HOVER = (255, 140, 140)
UI_TEXT = (230, 230, 240)
UI_TEXT_DIM = (150, 150, 160)

# Result banner
RESULT_COLOR = (255, 215, 0)

# Wheel defaults
NUMBER_OF_TURNS = 5
SPIN_DURATION = 5000  # ms
BUTTON_TEXT = 'SPIN'
SPINNING_TEXT = 'Spinning...'
WHEEL_SIZE_FACTOR = 0.85  # Fraction of window width when no size given

# Wheel drawing
INNER_CIRCLE_COLOR = (255, 255, 255)
OUTER_CIRCLE_COLOR = (4, 24, 57)
SEGMENT_COLORS = [(162, 108, 242), (255, 255, 255)]  # Alternating fill
SEGMENT_STROKE = (34, 34, 34)
SEGMENT_TEXT_COLOR = (255, 255, 255)
HUB_COLOR = (255, 215, 0)
POINTER_COLOR = (0, 0, 0)
CENTER_CIRCLE_RADIUS = 15
IMAGE_TEXT_SPACING = 5
LINE_SPACING = 20
IMAGE_SIZE = 30
IMAGE_RADIUS_FACTOR = 0.55
TEXT_RADIUS_FACTOR = 0.8
LABEL_WRAP = 12  # Characters per label line

# Ring insets from the outer radius
GOLD_RING_INSET = 4
INNER_RING_INSET = 8
SEGMENT_INSET = 14

# Arc smoothness (polygon points per degree)
ARC_STEPS_PER_DEGREE = 0.5

# Text
FONT_SIZES = {
    'tiny': 16,
    'small': 20,
    'medium': 28,
    'large': 42,
}

# File loading
SEGMENT_FILE = "segments.txt"
