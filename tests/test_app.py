import pygame
import pytest

from conftest import FixedRandom
from spinwheel.app import App
from spinwheel.config import WheelConfig


@pytest.fixture
def app():
    landed = []
    config = WheelConfig(["Pizza", "Tacos", "Sushi"], duration=500, muted=True, rng=FixedRandom(0.5),
                         on_spin_end=lambda segment, index: landed.append(index))
    wheel_app = App(config, web_mode=True)
    wheel_app.landed = landed
    yield wheel_app
    pygame.quit()


def test_injected_click_spins_and_shows_result(app):
    x, y = app.wheel.spin_button.rect.center
    app.inject_event({'type': 'mousemove', 'x': x, 'y': y})
    app.inject_event({'type': 'mousedown', 'button': 1, 'x': x, 'y': y})
    app.handle_events()
    assert app.mouse_pos() == (x, y)
    assert app.wheel.spinning

    for _ in range(60):
        app.update(1000 / 60)
    assert not app.wheel.spinning
    assert app.landed == [1]
    assert app.result_banner.text == "Tacos"


def test_frame_callback_receives_screen(app):
    frames = []
    app.frame_callback = frames.append
    app.update(16)
    app.draw()
    assert frames == [app.screen]


def test_escape_quits(app):
    app.inject_event({'type': 'keydown', 'key': pygame.K_ESCAPE, 'mod': 0, 'unicode': ''})
    app.handle_events()
    assert not app.running


def test_unknown_external_event_is_dropped(app):
    assert app._convert_external_event({'type': 'mousewheel', 'y': 1}) is None


def test_resize_moves_wheel(app):
    app._handle_resize(1000, 1000)
    assert app.wheel.center[0] == 500
