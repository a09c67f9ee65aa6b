"""Shows a PNG image hopping up and down."""

from __future__ import annotations

import argparse
import math
import sys

from simple2d.app import App, Callbacks
from simple2d.image import ImageError, load_image
from simple2d.input import Key, KeyMods

DEFAULT_IMAGE = "../assets/colon3.png"


def hop_offset(current_time: float, height: int) -> float:
    """How far above the bottom edge the image sits at ``current_time``."""
    return abs(math.sin(current_time * 5) * (height // 16))


def main(argv=None) -> int:
    """Show the image at the given path bouncing in a window."""
    parser = argparse.ArgumentParser(prog="image-demo", description="Show a hopping image.")
    parser.add_argument("path", nargs="?", default=DEFAULT_IMAGE, help="PNG file to show")
    args = parser.parse_args(argv)
    try:
        picture = load_image(args.path)
    except ImageError:
        print("Could not load image", file=sys.stderr)
        return 1

    app = App(width=640, height=480, title=":3Hop")

    def init(on: Callbacks) -> None:
        def key_pressed(key: Key, mods: KeyMods) -> None:
            if key == Key.ESCAPE:
                app.quit()

        on.key_pressed = key_pressed

    def update(current: App) -> None:
        canvas = current.canvas
        canvas.background(1, 1, 1)
        y = hop_offset(current.current_time, current.height)
        canvas.image(picture, 0, y, current.width, current.height // 4 * 3)

    app.init = init
    app.update = update
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())