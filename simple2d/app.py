"""The window, event dispatch and frame loop."""

from __future__ import annotations

import string
import sys
import time
from dataclasses import dataclass
from typing import Callable

import pygame

from simple2d.draw import Canvas
from simple2d.input import Key, KeyMods, Mod, Mouse


def _ignore(*_args) -> None:
    return None


@dataclass
class Callbacks:
    """Handlers for input events; each does nothing until replaced."""

    key_pressed: Callable[[Key, KeyMods], None] = _ignore
    key_held: Callable[[Key, KeyMods], None] = _ignore
    key_released: Callable[[Key, KeyMods], None] = _ignore
    mouse_pressed: Callable[[Mouse, KeyMods], None] = _ignore
    mouse_released: Callable[[Mouse, KeyMods], None] = _ignore
    mouse_moved: Callable[[float, float], None] = _ignore


_NAMED_KEYS = [
    (("K_SPACE",), Key.SPACE),
    (("K_QUOTE",), Key.APOSTROPHE),
    (("K_COMMA",), Key.COMMA),
    (("K_MINUS",), Key.MINUS),
    (("K_PERIOD",), Key.PERIOD),
    (("K_SLASH",), Key.SLASH),
    (("K_SEMICOLON",), Key.SEMICOLON),
    (("K_EQUALS",), Key.EQUAL),
    (("K_LEFTBRACKET",), Key.LEFT_BRACKET),
    (("K_BACKSLASH",), Key.BACKSLASH),
    (("K_RIGHTBRACKET",), Key.RIGHT_BRACKET),
    (("K_BACKQUOTE",), Key.GRAVE_ACCENT),
    (("K_ESCAPE",), Key.ESCAPE),
    (("K_RETURN",), Key.ENTER),
    (("K_TAB",), Key.TAB),
    (("K_BACKSPACE",), Key.BACKSPACE),
    (("K_INSERT",), Key.INSERT),
    (("K_DELETE",), Key.DELETE),
    (("K_RIGHT",), Key.RIGHT),
    (("K_LEFT",), Key.LEFT),
    (("K_DOWN",), Key.DOWN),
    (("K_UP",), Key.UP),
    (("K_PAGEUP",), Key.PAGE_UP),
    (("K_PAGEDOWN",), Key.PAGE_DOWN),
    (("K_HOME",), Key.HOME),
    (("K_END",), Key.END),
    (("K_CAPSLOCK",), Key.CAPS_LOCK),
    (("K_SCROLLLOCK", "K_SCROLLOCK"), Key.SCROLL_LOCK),
    (("K_NUMLOCKCLEAR", "K_NUMLOCK"), Key.NUM_LOCK),
    (("K_PRINTSCREEN", "K_PRINT"), Key.PRINT_SCREEN),
    (("K_PAUSE",), Key.PAUSE),
    (("K_KP_PERIOD",), Key.KP_DECIMAL),
    (("K_KP_DIVIDE",), Key.KP_DIVIDE),
    (("K_KP_MULTIPLY",), Key.KP_MULTIPLY),
    (("K_KP_MINUS",), Key.KP_SUBTRACT),
    (("K_KP_PLUS",), Key.KP_ADD),
    (("K_KP_ENTER",), Key.KP_ENTER),
    (("K_KP_EQUALS",), Key.KP_EQUAL),
    (("K_LSHIFT",), Key.LEFT_SHIFT),
    (("K_LCTRL",), Key.LEFT_CONTROL),
    (("K_LALT",), Key.LEFT_ALT),
    (("K_LGUI", "K_LSUPER", "K_LMETA"), Key.LEFT_SUPER),
    (("K_RSHIFT",), Key.RIGHT_SHIFT),
    (("K_RCTRL",), Key.RIGHT_CONTROL),
    (("K_RALT",), Key.RIGHT_ALT),
    (("K_RGUI", "K_RSUPER", "K_RMETA"), Key.RIGHT_SUPER),
    (("K_MENU",), Key.MENU),
]
_NAMED_KEYS += [((f"K_{c.lower()}",), Key[c]) for c in string.ascii_uppercase]
_NAMED_KEYS += [((f"K_{d}",), Key[f"NUM{d}"]) for d in range(10)]
_NAMED_KEYS += [((f"K_KP{d}", f"K_KP_{d}"), Key[f"KP_{d}"]) for d in range(10)]
_NAMED_KEYS += [((f"K_F{n}",), Key[f"F{n}"]) for n in range(1, 16)]


def _build_key_map() -> dict[int, Key]:
    mapping: dict[int, Key] = {}
    for names, key in _NAMED_KEYS:
        for name in names:
            code = getattr(pygame, name, None)
            if code is not None:
                mapping.setdefault(code, key)
                break
    return mapping


_KEY_MAP = _build_key_map()

_MOD_MAP = [
    ("KMOD_SHIFT", Mod.SHIFT),
    ("KMOD_CTRL", Mod.CONTROL),
    ("KMOD_ALT", Mod.ALT),
    ("KMOD_GUI", Mod.SUPER),
    ("KMOD_META", Mod.SUPER),
    ("KMOD_CAPS", Mod.CAPS_LOCK),
    ("KMOD_NUM", Mod.NUM_LOCK),
]


def key_from_pygame(code: int) -> Key:
    """The :class:`Key` for a pygame key code, or ``Key.UNKNOWN``."""
    return _KEY_MAP.get(code, Key.UNKNOWN)


def mods_from_pygame(mods: int) -> KeyMods:
    """Translate a pygame modifier bit set into :class:`KeyMods`."""
    result = 0
    for name, flag in _MOD_MAP:
        bits = getattr(pygame, name, 0)
        if bits and mods & bits:
            result |= flag
    return KeyMods(int(result))


def _mouse_from_pygame(button: int) -> Mouse | None:
    if button == 1:
        return Mouse.LEFT
    if button == 2:
        return Mouse.MIDDLE
    if button == 3:
        return Mouse.RIGHT
    if 6 <= button <= 10:
        return Mouse(button - 3)
    return None  # wheel or unsupported buttons


class App:
    """Opens a window, routes input to callbacks and calls ``update`` every frame."""

    def __init__(
        self,
        width: int = 640,
        height: int = 480,
        title: str = "simple-2d",
        init: Callable[[Callbacks], None] | None = None,
        update: Callable[[App], None] | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.init = init or _ignore
        self.update = update or _ignore
        self.callbacks = Callbacks()
        self.canvas: Canvas | None = None
        self.start_time = 0.0
        self.current_time = 0.0
        self.delta_time = 0.0
        self.mouse_x = 0.0
        self.mouse_y = 0.0
        self._last_time: float | None = None
        self._pressed: set[Key] = set()
        self._mods = KeyMods()
        self._running = False

    def is_pressed(self, key: Key) -> bool:
        """Whether ``key`` is currently held down."""
        return key in self._pressed

    def handle_event(self, event) -> None:
        """Dispatch one pygame event to the callbacks."""
        if event.type == pygame.QUIT:
            self.quit()
        elif event.type == pygame.KEYDOWN:
            key = key_from_pygame(event.key)
            self._mods = mods_from_pygame(event.mod)
            if key in self._pressed:
                self.callbacks.key_held(key, self._mods)
            else:
                self._pressed.add(key)
                self.callbacks.key_pressed(key, self._mods)
        elif event.type == pygame.KEYUP:
            key = key_from_pygame(event.key)
            self._mods = mods_from_pygame(event.mod)
            self._pressed.discard(key)
            self.callbacks.key_released(key, self._mods)
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            button = _mouse_from_pygame(event.button)
            if button is None:
                return
            if event.type == pygame.MOUSEBUTTONDOWN:
                self.callbacks.mouse_pressed(button, self._mods)
            else:
                self.callbacks.mouse_released(button, self._mods)
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            y = self.height - y
            self.mouse_x, self.mouse_y = x, y
            self.callbacks.mouse_moved(x, y)

    def tick(self, now: float) -> None:
        """Advance the clock to ``now`` and run one frame of ``update``."""
        if self._last_time is None:
            self._last_time = now
            self.start_time = now
        self.current_time = now
        self.delta_time = now - self._last_time
        self._last_time = now
        if self.canvas is not None:
            self.canvas.reset_matrix()
        self.update(self)

    def _sync_window_size(self) -> None:
        surface = pygame.display.get_surface()
        w, h = surface.get_size()
        if (w, h) != (self.width, self.height) or self.canvas.surface is not surface:
            self.width, self.height = w, h
            self.canvas.resize(surface)

    def run(self) -> int:
        """Open the window and loop until it is closed; returns an exit status."""
        try:
            pygame.init()
        except pygame.error:
            print("Failed to initialize pygame!", file=sys.stderr)
            return 1
        try:
            self.init(self.callbacks)
            try:
                screen = pygame.display.set_mode(
                    (self.width, self.height), pygame.RESIZABLE
                )
            except pygame.error:
                print("Failed to create window!", file=sys.stderr)
                return 1
            pygame.display.set_caption(self.title)
            pygame.key.set_repeat(500, 30)
            self.canvas = Canvas(screen)
            clock = pygame.time.Clock()
            self._running = True
            self.tick(time.perf_counter())
            while self._running:
                pygame.display.flip()
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self._running:
                    break
                clock.tick(60)
                self._sync_window_size()
                self.tick(time.perf_counter())
            print("Closing...")
            return 0
        finally:
            pygame.quit()

    def quit(self) -> None:
        """Stop the frame loop after the current frame."""
        self._running = False