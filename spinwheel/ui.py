import pygame
from .constants import (
    FONT_SIZES, UI_PANEL, UI_ACCENT, UI_ACCENT_HOVER, UI_TEXT, UI_TEXT_DIM,
    RESULT_COLOR, WHITE
)


class Button:
    def __init__(self, x: int, y: int, width: int, height: int, text: str,
                 font: pygame.font.Font, color=UI_ACCENT, hover_color=UI_ACCENT_HOVER):
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.font = font
        self.color = color
        self.hover_color = hover_color
        self.hovered = False
        self.enabled = True

    def update(self, mouse_pos: tuple):
        self.hovered = self.rect.collidepoint(mouse_pos) and self.enabled

    def draw(self, screen: pygame.Surface):
        color = self.hover_color if self.hovered else self.color
        if not self.enabled:
            color = UI_TEXT_DIM

        pygame.draw.rect(screen, color, self.rect, border_radius=25)
        pygame.draw.rect(screen, WHITE, self.rect, 2, border_radius=25)

        text_surface = self.font.render(self.text, True, WHITE if self.enabled else UI_PANEL)
        text_rect = text_surface.get_rect(center=self.rect.center)
        screen.blit(text_surface, text_rect)

    def is_clicked(self, mouse_pos: tuple, mouse_pressed: bool) -> bool:
        return self.enabled and self.rect.collidepoint(mouse_pos) and mouse_pressed


class ResultBanner:
    """Shows where the wheel last landed. Replaced on every spin."""

    def __init__(self, fonts: dict):
        self.fonts = fonts
        self.text = None
        self.animation_timer = 0

    def set_result(self, label: str):
        self.text = label
        self.animation_timer = 0

    def clear(self):
        self.text = None

    def update(self):
        if self.text:
            self.animation_timer += 1

    def draw(self, screen: pygame.Surface, center: tuple):
        if not self.text:
            return
        # Pop in from the smaller font over the first frames
        font = self.fonts['large'] if self.animation_timer >= 10 else self.fonts['medium']
        caption = self.fonts['small'].render("RESULT", True, UI_TEXT)
        label = font.render(self.text, True, RESULT_COLOR)
        screen.blit(caption, caption.get_rect(center=(center[0], center[1] - 28)))
        screen.blit(label, label.get_rect(center=(center[0], center[1] + 8)))


def create_fonts() -> dict:
    pygame.font.init()
    fonts = {}
    for name, size in FONT_SIZES.items():
        try:
            fonts[name] = pygame.font.SysFont('Arial', size, bold=(name in ['large', 'medium']))
        except (OSError, pygame.error):
            fonts[name] = pygame.font.Font(None, size)
    return fonts
