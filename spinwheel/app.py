import pygame
import os
import threading
from .constants import WINDOW_WIDTH, WINDOW_HEIGHT, FPS, UI_BG, UI_TEXT_DIM, WHEEL_SIZE_FACTOR
from .effects import SoundManager
from .ui import ResultBanner, create_fonts
from .wheel import SpinWheel


class App:
    """Window hosting a single SpinWheel."""

    def __init__(self, config, web_mode=False):
        pygame.init()

        # Web mode flag for streaming to browsers
        self.web_mode = web_mode
        if web_mode:
            print(f"[App] Starting in web mode, cwd: {os.getcwd()}")
        self.frame_callback = None  # Called after each frame with screen surface
        self.external_events = []  # Events injected from web clients
        self._external_events_lock = threading.Lock()  # Thread safety for web events
        self._web_mouse_pos = (0, 0)  # Mouse position from web client

        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Spin Wheel")

        actual_size = self.screen.get_size()
        self.window_width = actual_size[0]
        self.window_height = actual_size[1]

        self.clock = pygame.time.Clock()
        self.fonts = create_fonts()
        self.sound = self._create_sound(config.muted)

        self.config = config
        self.result_banner = ResultBanner(self.fonts)
        self.host_callback = config.on_spin_end
        config.on_spin_end = self._on_spin_end

        center, size = self._wheel_layout(self.window_width, self.window_height)
        self.wheel = SpinWheel(config, self.fonts, center, size, self.sound)

        self.running = True

    def _create_sound(self, muted):
        try:
            return SoundManager(muted=muted)
        except pygame.error as e:
            print(f"[App] Sound disabled: {e}")
            return None

    def _wheel_layout(self, width, height):
        """Center and diameter of the wheel for a window size."""
        size = self.config.wheel_size or int(min(width * WHEEL_SIZE_FACTOR, height - 260))
        size = max(size, 100)
        center = (width // 2, 40 + size // 2)
        return center, size

    def _handle_resize(self, new_width, new_height):
        """Handle window resize - updates the wheel layout."""
        if new_width == self.window_width and new_height == self.window_height:
            return
        self.window_width = new_width
        self.window_height = new_height
        center, size = self._wheel_layout(new_width, new_height)
        self.wheel.update_layout(center, size)

    def _on_spin_end(self, segment, index):
        self.result_banner.set_result(segment.label)
        if self.sound:
            self.sound.play('win')
        if self.host_callback:
            self.host_callback(segment, index)

    def inject_event(self, event_dict):
        """Inject an event from external source (web client)."""
        with self._external_events_lock:
            self.external_events.append(event_dict)

    def handle_events(self):
        current_size = self.screen.get_size()
        if current_size[0] != self.window_width or current_size[1] != self.window_height:
            self._handle_resize(current_size[0], current_size[1])

        # Process external events from web clients (thread-safe)
        with self._external_events_lock:
            events_to_process = self.external_events[:]
            self.external_events.clear()
        for ext in events_to_process:
            event = self._convert_external_event(ext)
            if event:
                pygame.event.post(event)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                self._handle_resize(event.w, event.h)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_m and self.sound:
                muted = self.sound.toggle_mute()
                print(f"[App] Sound {'muted' if muted else 'unmuted'}")
            elif self.wheel.handle_event(event):
                self.result_banner.clear()

    def _convert_external_event(self, ext):
        """Convert external event dict to pygame event."""
        event_type = ext.get('type')
        if event_type == 'mousedown':
            return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=ext.get('button', 1), pos=(ext['x'], ext['y']))
        elif event_type == 'mouseup':
            return pygame.event.Event(pygame.MOUSEBUTTONUP, button=ext.get('button', 1), pos=(ext['x'], ext['y']))
        elif event_type == 'mousemove':
            self._web_mouse_pos = (ext['x'], ext['y'])
            return None
        elif event_type == 'keydown':
            return pygame.event.Event(pygame.KEYDOWN, key=ext.get('key', 0), mod=ext.get('mod', 0),
                                      unicode=ext.get('unicode', ''))
        elif event_type == 'keyup':
            return pygame.event.Event(pygame.KEYUP, key=ext.get('key', 0), mod=ext.get('mod', 0))
        return None

    def mouse_pos(self):
        if self.web_mode:
            return self._web_mouse_pos
        return pygame.mouse.get_pos()

    def update(self, dt):
        self.wheel.update(dt, self.mouse_pos())
        self.result_banner.update()

    def draw(self):
        self.screen.fill(UI_BG)
        self.wheel.draw(self.screen)

        banner_y = self.wheel.spin_button.rect.bottom + 50
        self.result_banner.draw(self.screen, (self.window_width // 2, banner_y))

        hint = self.fonts['tiny'].render("SPACE to spin  |  M to mute  |  ESC to quit", True, UI_TEXT_DIM)
        self.screen.blit(hint, hint.get_rect(center=(self.window_width // 2, self.window_height - 20)))

        pygame.display.flip()

        # Call frame callback for web streaming
        if self.frame_callback:
            self.frame_callback(self.screen)

    def run(self):
        while self.running:
            dt = self.clock.tick(FPS)
            self.handle_events()
            self.update(dt)
            self.draw()

        pygame.quit()
