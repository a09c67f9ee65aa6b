"""A blank window that reports mouse clicks and quits on Escape."""

from __future__ import annotations

import argparse

from simple2d.app import App, Callbacks
from simple2d.input import Key, KeyMods, Mouse


def describe_mouse_press(button: Mouse) -> str:
    """The message printed when ``button`` is pressed."""
    return f"Mouse button {int(button)} pressed"


def main(argv=None) -> int:
    """Open an empty window to start a new program from."""
    argparse.ArgumentParser(prog="template", description="An empty window.").parse_args(argv)
    app = App(width=640, height=480, title="Template")

    def init(on: Callbacks) -> None:
        def key_pressed(key: Key, mods: KeyMods) -> None:
            if key == Key.ESCAPE:
                app.quit()

        def mouse_pressed(button: Mouse, mods: KeyMods) -> None:
            print(describe_mouse_press(button), flush=True)

        on.key_pressed = key_pressed
        on.mouse_pressed = mouse_pressed

    app.init = init
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())