import pygame
import re
from .animation import RotationAnimation
from .constants import (
    SEGMENT_COLORS, SEGMENT_STROKE, SEGMENT_TEXT_COLOR, HUB_COLOR, POINTER_COLOR,
    GOLD_RING_INSET, INNER_RING_INSET, SEGMENT_INSET, TEXT_RADIUS_FACTOR, LABEL_WRAP,
    ARC_STEPS_PER_DEGREE, SPINNING_TEXT
)
from .geometry import arc_points, polar_to_cartesian
from .ui import Button


def wrap_label(label: str, width: int = LABEL_WRAP) -> list:
    """Split a label into chunks of at most `width` characters."""
    return re.findall('.{1,%d}' % width, label) or ['']


class SpinWheel:
    """Spinnable wheel widget with its own SPIN button.

    Drawing uses the controller's WheelGeometry, so the wedge under the
    pointer is always the one the controller reports.
    """

    def __init__(self, config, fonts, center, size, sound_manager=None):
        """
        config: WheelConfig
        fonts: dict of pygame fonts
        center: (x, y) center of wheel
        size: wheel diameter in pixels
        sound_manager: optional SoundManager for spin/tick/stop sounds
        """
        self.config = config
        self.fonts = fonts
        self.sound_manager = sound_manager
        self.on_spin_end = config.on_spin_end

        self.animation = RotationAnimation()
        self.controller = config.build_controller(animator=self.animation)
        self.controller.on_spin_end = self._handle_spin_end

        self.icons = self._load_icons()
        self.last_pointer_segment = self.geometry.segment_at_pointer(self.animation.value)

        self.spin_button = Button(0, 0, 180, 56, config.button_text, fonts['medium'])
        self.update_layout(center, size)

    @property
    def geometry(self):
        return self.controller.geometry

    @property
    def segments(self):
        return self.controller.segments

    @property
    def spinning(self) -> bool:
        return self.controller.is_spinning

    @property
    def disabled(self) -> bool:
        return self.controller.disabled

    @disabled.setter
    def disabled(self, value: bool):
        self.controller.disabled = value

    def update_layout(self, center, size):
        self.center = center
        self.size = size
        self.outer_radius = size // 2
        self.gold_radius = self.outer_radius - GOLD_RING_INSET
        self.inner_radius = self.outer_radius - INNER_RING_INSET
        self.segment_radius = self.outer_radius - SEGMENT_INSET

        cx, cy = center
        self.spin_button.rect.center = (cx, cy + self.outer_radius + 60)

    def _load_icons(self) -> dict:
        """Load segment icons once, keyed by segment index."""
        icons = {}
        size = self.config.image_size
        for i, segment in enumerate(self.segments):
            if segment.icon is None:
                continue
            try:
                image = segment.icon if isinstance(segment.icon, pygame.Surface) else pygame.image.load(segment.icon)
            except (pygame.error, FileNotFoundError) as e:
                print(f"[Wheel] Could not load icon for {segment.label!r}: {e}")
                continue
            icons[i] = pygame.transform.smoothscale(image, (size, size))
        return icons

    def request_spin(self) -> bool:
        started = self.controller.request_spin()
        if started and self.sound_manager:
            self.sound_manager.play('wheel_spin')
        return started

    def _handle_spin_end(self, segment, index):
        if self.sound_manager:
            self.sound_manager.play('wheel_stop')
        if self.on_spin_end:
            self.on_spin_end(segment, index)

    def handle_event(self, event) -> bool:
        """Spin on a button click or the space bar. Returns True if a spin started."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.spin_button.is_clicked(event.pos, True):
                return self.request_spin()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
            return self.request_spin()
        return False

    def update(self, dt: float, mouse_pos: tuple = (0, 0)):
        """Advance the animation by dt ms and refresh the button."""
        self.animation.update(dt)

        current = self.geometry.segment_at_pointer(self.animation.value)
        if current != self.last_pointer_segment:
            self.last_pointer_segment = current
            if self.spinning and self.sound_manager:
                self.sound_manager.play('wheel_tick')

        self.spin_button.enabled = not self.spinning and not self.disabled
        self.spin_button.text = SPINNING_TEXT if self.spinning else self.config.button_text
        self.spin_button.update(mouse_pos)

    def draw(self, screen: pygame.Surface):
        cx, cy = self.center
        rotation = self.animation.value

        pygame.draw.circle(screen, self.config.outer_circle_color, (cx, cy), self.gold_radius)
        pygame.draw.circle(screen, self.config.inner_circle_color, (cx, cy), self.inner_radius)

        for i in range(len(self.segments)):
            self._draw_segment(screen, i, rotation)
        for i in range(len(self.segments)):
            self._draw_label(screen, i, rotation)

        # Center hub
        hub = self.config.center_circle_radius
        pygame.draw.circle(screen, HUB_COLOR, (cx, cy), hub)
        pygame.draw.circle(screen, SEGMENT_STROKE, (cx, cy), hub, 2)

        self._draw_pointer(screen)
        self.spin_button.draw(screen)

    def segment_color(self, index: int) -> tuple:
        segment = self.segments[index]
        if segment.background:
            return segment.background
        return SEGMENT_COLORS[index % len(SEGMENT_COLORS)]

    def _draw_segment(self, screen, index, rotation):
        cx, cy = self.center
        start, end = self.geometry.segment_span(index)
        points = arc_points(cx, cy, self.segment_radius,
                            self.geometry.screen_angle(start, rotation),
                            self.geometry.screen_angle(end, rotation),
                            ARC_STEPS_PER_DEGREE)
        pygame.draw.polygon(screen, self.segment_color(index), points)
        pygame.draw.polygon(screen, SEGMENT_STROKE, points, 2)

    def _draw_label(self, screen, index, rotation):
        """Icon and wrapped label along the segment's mid line."""
        cx, cy = self.center
        segment = self.segments[index]
        angle = self.geometry.screen_angle(self.geometry.segment_center(index), rotation)

        icon = self.icons.get(index)
        if icon is not None:
            ix, iy = polar_to_cartesian(cx, cy, self.segment_radius * self.config.image_radius_factor, angle)
            rotated = pygame.transform.rotate(icon, -angle)
            screen.blit(rotated, rotated.get_rect(center=(ix, iy)))

        # Render the lines upright, then turn the block to face outwards
        font = self.fonts['tiny']
        color = segment.text_color or SEGMENT_TEXT_COLOR
        lines = [font.render(line, True, color) for line in wrap_label(segment.label)]
        spacing = self.config.line_spacing
        width = max(line.get_width() for line in lines)
        height = lines[0].get_height() + spacing * (len(lines) - 1)
        block = pygame.Surface((width, height), pygame.SRCALPHA)
        for n, line in enumerate(lines):
            block.blit(line, line.get_rect(midtop=(width // 2, n * spacing)))

        tx, ty = polar_to_cartesian(cx, cy, self.segment_radius * TEXT_RADIUS_FACTOR, angle)
        rotated = pygame.transform.rotate(block, -angle)
        screen.blit(rotated, rotated.get_rect(center=(tx, ty - self.config.image_text_spacing)))

    def _draw_pointer(self, screen):
        """Fixed notch at the pointer angle, pointing at the hub."""
        cx, cy = self.center
        angle = self.geometry.pointer_angle
        tip = polar_to_cartesian(cx, cy, self.outer_radius - 18, angle)
        left = polar_to_cartesian(cx, cy, self.outer_radius + 10, angle - 5)
        right = polar_to_cartesian(cx, cy, self.outer_radius + 10, angle + 5)
        pygame.draw.polygon(screen, POINTER_COLOR, [tip, left, right])
