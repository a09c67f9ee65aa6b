"""A one-player game of pong against a simple computer opponent."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

from simple2d.app import App, Callbacks
from simple2d.draw import Canvas
from simple2d.input import Key, KeyMods
from simple2d.shapes import Circle, Rect

PADDLE_WIDTH = 20
PADDLE_HEIGHT = 80
BALL_SIZE = 15
MOVE_SPEED = 4.25
BALL_SPEED = 5.0


@dataclass
class Pong:
    """The game state: both paddles and the ball."""

    width: int = 640
    height: int = 480
    player_y: float = field(init=False)
    ai_y: float = field(init=False)
    ball_x: float = field(init=False)
    ball_y: float = field(init=False)
    ball_xvel: float = field(init=False)
    ball_yvel: float = field(init=False)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Put the paddles and the ball back where a game starts."""
        self.player_y = self.height // 2 - PADDLE_HEIGHT // 2
        self.ai_y = self.height // 2 - PADDLE_HEIGHT // 2
        self.ball_x = self.width // 2
        self.ball_y = self.height // 2
        self.ball_xvel = BALL_SPEED
        self.ball_yvel = BALL_SPEED

    @property
    def player_rect(self) -> Rect:
        return Rect.from_lbwh(40 - PADDLE_WIDTH, self.player_y, PADDLE_WIDTH, PADDLE_HEIGHT)

    @property
    def ai_rect(self) -> Rect:
        return Rect.from_lbwh(self.width - 40, self.ai_y, PADDLE_WIDTH, PADDLE_HEIGHT)

    @property
    def ball(self) -> Circle:
        return Circle(self.ball_x, self.ball_y, BALL_SIZE)

    def _bounce_off(self, paddle_y: float) -> None:
        middle = paddle_y + PADDLE_HEIGHT // 2
        if self.ball_y > middle:
            self.ball_yvel = abs(self.ball_yvel)
        if self.ball_y < middle:
            self.ball_yvel = -abs(self.ball_yvel)

    def step(self, delta_time: float, elapsed: float, up: bool = False, down: bool = False) -> None:
        """Advance the game by one frame of ``delta_time`` seconds."""
        multiplier = delta_time * (60 + elapsed / 100)

        if up:
            self.player_y += MOVE_SPEED * multiplier
        if down:
            self.player_y -= MOVE_SPEED * multiplier
        player_rect = self.player_rect

        half = PADDLE_HEIGHT // 2
        if self.ball_y > self.ai_y + half:
            self.ai_y += MOVE_SPEED * multiplier
        if self.ball_y < self.ai_y + half:
            self.ai_y -= MOVE_SPEED * multiplier
        ai_rect = self.ai_rect

        self.ball_x += self.ball_xvel * multiplier
        self.ball_y += self.ball_yvel * multiplier
        ball = self.ball
        if self.ball_y + BALL_SIZE >= self.height:
            self.ball_yvel = -abs(self.ball_yvel)
        if self.ball_y - BALL_SIZE <= 0:
            self.ball_yvel = abs(self.ball_yvel)

        if ball.intersects(player_rect):
            self.ball_xvel = abs(self.ball_xvel)
            self._bounce_off(self.player_y)
        if ball.intersects(ai_rect):
            self.ball_xvel = -abs(self.ball_xvel)
            self._bounce_off(self.ai_y)

        if not ball.intersects(Rect.from_lbwh(0, 0, self.width, self.height)):
            self.reset()

    def draw(self, canvas: Canvas) -> None:
        """Draw the field, both paddles and the ball."""
        canvas.background(0.2, 0.2, 0.2)
        canvas.color(0, 1, 0)
        canvas.rect(self.player_rect)
        canvas.color(1, 0, 0)
        canvas.rect(self.ai_rect)
        canvas.color(1, 1, 1)
        canvas.circle(self.ball)


def main(argv=None) -> int:
    """Play pong: W/Up and S/Down move, R restarts, Escape quits."""
    argparse.ArgumentParser(prog="pong", description="Play pong.").parse_args(argv)
    pong = Pong()
    app = App(width=pong.width, height=pong.height, title="Pong")

    def init(on: Callbacks) -> None:
        def key_pressed(key: Key, mods: KeyMods) -> None:
            if key == Key.R:
                pong.reset()
            elif key == Key.ESCAPE:
                app.quit()

        on.key_pressed = key_pressed

    def update(current: App) -> None:
        pong.width, pong.height = current.width, current.height
        up = current.is_pressed(Key.W) or current.is_pressed(Key.UP)
        down = current.is_pressed(Key.S) or current.is_pressed(Key.DOWN)
        pong.step(current.delta_time, current.current_time - current.start_time, up, down)
        pong.draw(current.canvas)

    app.init = init
    app.update = update
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())