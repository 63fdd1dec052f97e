#!/usr/bin/env python3
"""
Web server wrapper for Spin Wheel.
Streams the pygame display to web browsers and handles input from them.

Usage:
    xvfb-run -a python web_server.py A B C --weights 1,1,8
"""

import os
import sys
import io
import base64
import time
import threading

if sys.platform.startswith('linux'):
    if not os.environ.get('DISPLAY'):
        print("Warning: No DISPLAY set. Run with 'xvfb-run -a python web_server.py'")

import pygame
from flask import Flask, render_template
from flask_socketio import SocketIO, emit
from PIL import Image

from main import build_parser, config_from_args
from spinwheel.app import App
from spinwheel.config import InvalidConfiguration, get_config, set_config
from spinwheel.constants import WINDOW_WIDTH, WINDOW_HEIGHT

# Create Flask app
app = Flask(__name__)
app.config['SECRET_KEY'] = 'spinwheel-secret'
socketio = SocketIO(app, cors_allowed_origins="*", async_mode='threading')

# Global state
wheel_app = None

# Frame rate limiting
last_frame_time = 0
STREAM_FPS = 30
PORT = 8080

KEY_MAP = {
    ' ': pygame.K_SPACE,
    'Enter': pygame.K_RETURN,
    'Escape': pygame.K_ESCAPE,
}


def frame_to_base64(surface):
    """Convert pygame surface to base64 JPEG."""
    data = pygame.image.tobytes(surface, 'RGB')
    img = Image.frombytes('RGB', surface.get_size(), data)
    buffer = io.BytesIO()
    img.save(buffer, format='JPEG', quality=70)
    return base64.b64encode(buffer.getvalue()).decode('utf-8')


def on_frame(surface):
    """Callback called after each frame is drawn."""
    global last_frame_time

    current_time = time.time()
    if current_time - last_frame_time < 1.0 / STREAM_FPS:
        return
    last_frame_time = current_time

    socketio.emit('frame', {'data': frame_to_base64(surface)})


def run_wheel():
    """Run the wheel loop."""
    global wheel_app

    wheel_app = App(get_config(), web_mode=True)
    wheel_app.frame_callback = on_frame
    wheel_app.run()


# Flask routes
@app.route('/')
def index():
    print("[WEB] Serving index page")
    return render_template('index.html', width=WINDOW_WIDTH, height=WINDOW_HEIGHT)


@app.route('/test')
def test():
    return f"Server OK. Wheel ready: {wheel_app is not None}"


# Socket.IO events
@socketio.on('connect')
def handle_connect():
    print("[WEB] Client connected")
    emit('status', {'msg': 'connected'})


@socketio.on('disconnect')
def handle_disconnect():
    print("[WEB] Client disconnected")


@socketio.on('mouse')
def handle_mouse(data):
    if not wheel_app:
        return

    x = data.get('x', 0)
    y = data.get('y', 0)
    event_type = data.get('type')
    if event_type == 'mousemove':
        wheel_app.inject_event({'type': 'mousemove', 'x': x, 'y': y})
    elif event_type in ('mousedown', 'mouseup'):
        if event_type == 'mousedown':
            print(f"[WEB] Click at ({x}, {y})")
        wheel_app.inject_event({
            'type': event_type,
            'button': data.get('button', 1),
            'x': x,
            'y': y
        })


@socketio.on('key')
def handle_key(data):
    if not wheel_app:
        return

    js_key = data.get('jsKey', '')
    if js_key in KEY_MAP:
        pygame_key = KEY_MAP[js_key]
    elif len(js_key) == 1:
        pygame_key = ord(js_key.lower())
    else:
        return

    wheel_app.inject_event({
        'type': data.get('type', 'keydown'),
        'key': pygame_key,
        'mod': 0,
        'unicode': js_key if len(js_key) == 1 else ''
    })


def main(argv=None):
    try:
        set_config(config_from_args(build_parser().parse_args(argv)))
    except InvalidConfiguration as e:
        print(f"[Config] {e}")
        sys.exit(2)

    print("\n" + "=" * 50)
    print("  Spin Wheel - Web Server")
    print("=" * 50)
    print(f"\n  Open in browser: http://localhost:{PORT}")
    print("\n  Press Ctrl+C to stop")
    print("=" * 50 + "\n")

    # Start wheel thread
    print("[SERVER] Starting wheel thread...")
    wheel_thread = threading.Thread(target=run_wheel, daemon=True)
    wheel_thread.start()

    # Wait for the window to initialize
    time.sleep(1)
    print(f"[SERVER] Wheel initialized: {wheel_app is not None}")

    print(f"[SERVER] Starting web server on port {PORT}...")
    socketio.run(app, host='0.0.0.0', port=PORT, debug=False, allow_unsafe_werkzeug=True)


if __name__ == '__main__':
    main()
