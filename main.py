#!/usr/bin/env python3
"""
Spin Wheel
Spin a weighted prize wheel and see where it lands.

Usage:
    python main.py Pizza Tacos Sushi           # Uniform wheel from labels
    python main.py -f segments.txt             # One segment per line, "label | weight" allowed
    python main.py A B C --weights 1,1,8       # Weighted wheel
    python main.py A B C --turns 3 --seed 42   # Reproducible spins
"""

import argparse
import random
import sys
from spinwheel.animation import EASINGS
from spinwheel.app import App
from spinwheel.config import WheelConfig, InvalidConfiguration, load_segments, parse_weights, set_config
from spinwheel.constants import NUMBER_OF_TURNS, SPIN_DURATION, SEGMENT_FILE
from spinwheel.geometry import CLOCKWISE, COUNTERCLOCKWISE


def build_parser():
    parser = argparse.ArgumentParser(description='Spin Wheel')
    parser.add_argument('labels', nargs='*', help='Segment labels, in wheel order')
    parser.add_argument('-f', '--file', help=f'Load segments from a text file (e.g. {SEGMENT_FILE})')
    parser.add_argument('-w', '--weights', help='Comma separated weights, one per segment')
    parser.add_argument('-t', '--turns', type=int, default=NUMBER_OF_TURNS,
                        help='Full turns before landing')
    parser.add_argument('-d', '--duration', type=int, default=SPIN_DURATION,
                        help='Spin duration in ms')
    parser.add_argument('--easing', choices=sorted(EASINGS), default='ease-out-cubic',
                        help='Easing curve of the spin')
    parser.add_argument('--size', type=int, help='Wheel diameter in pixels')
    parser.add_argument('--start-offset', type=float, default=0.0,
                        help='Screen angle where segment 0 begins (degrees clockwise from top)')
    parser.add_argument('--counterclockwise', action='store_true',
                        help='Lay segments out and spin counterclockwise')
    parser.add_argument('--disabled', action='store_true', help='Show the wheel without allowing spins')
    parser.add_argument('--mute', action='store_true', help='Start with sound muted')
    parser.add_argument('--seed', type=int, help='Seed the random source for reproducible spins')
    return parser


def config_from_args(args):
    """Build and validate a WheelConfig from parsed arguments."""
    weights = None
    if args.file:
        segments, weights = load_segments(args.file)
    else:
        segments = args.labels
    if args.weights:
        weights = parse_weights(args.weights)

    rng = random.Random(args.seed).random if args.seed is not None else None

    config = WheelConfig(
        segments,
        weights=weights,
        turns=args.turns,
        duration=args.duration,
        easing=EASINGS[args.easing],
        wheel_size=args.size,
        start_offset=args.start_offset,
        direction=COUNTERCLOCKWISE if args.counterclockwise else CLOCKWISE,
        disabled=args.disabled,
        muted=args.mute,
        rng=rng,
    )
    return config.validate()


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = config_from_args(args)
    except InvalidConfiguration as e:
        print(f"[Config] {e}")
        sys.exit(2)

    set_config(config)
    print(f"[Config] {len(config.segments)} segments, {config.turns} turns, {config.duration} ms")

    app = App(config)
    app.run()


if __name__ == "__main__":
    main()
