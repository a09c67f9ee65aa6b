import pygame
import pytest

from simple2d.draw import Canvas
from simple2d.examples.pong import BALL_SPEED, MOVE_SPEED, Pong

FRAME = 1 / 60


def _rgb(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def test_reset_restores_fresh_state():
    pong = Pong()
    pong.player_y = 3
    pong.ai_y = 7
    pong.ball_x = -50
    pong.ball_yvel = -1
    pong.reset()
    assert pong == Pong()


def test_starting_positions_are_centred():
    pong = Pong()
    assert pong.ball_x == pong.width // 2
    assert pong.ball_y == pong.height // 2
    assert pong.player_y == pong.ai_y
    assert pong.ball_xvel == BALL_SPEED and pong.ball_yvel == BALL_SPEED


def _near_top():
    pong = Pong()
    pong.ball_x = 320
    pong.ball_y = 470
    return pong


def test_up_moves_player_paddle():
    pong = _near_top()
    start = pong.player_y
    pong.step(FRAME, 0.0, up=True)
    assert pong.player_y == pytest.approx(start + MOVE_SPEED)


def test_down_moves_player_paddle():
    pong = _near_top()
    start = pong.player_y
    pong.step(FRAME, 0.0, down=True)
    assert pong.player_y == pytest.approx(start - MOVE_SPEED)


def test_up_and_down_cancel():
    pong = _near_top()
    start = pong.player_y
    pong.step(FRAME, 0.0, up=True, down=True)
    assert pong.player_y == pytest.approx(start)


def test_ball_bounces_off_top_and_ai_follows():
    pong = _near_top()
    start_ai = pong.ai_y
    pong.step(FRAME, 0.0)
    assert pong.ball_x == pytest.approx(320 + BALL_SPEED)
    assert pong.ball_y == pytest.approx(470 + BALL_SPEED)
    assert pong.ball_yvel == -BALL_SPEED
    assert pong.ai_y == pytest.approx(start_ai + MOVE_SPEED)


def test_elapsed_time_speeds_up_game():
    slow = _near_top()
    fast = _near_top()
    slow.step(FRAME, 0.0)
    fast.step(FRAME, 600.0)
    assert fast.ball_x - 320 > slow.ball_x - 320


def test_player_paddle_sends_ball_back():
    pong = Pong()
    pong.player_y = 400
    pong.ball_x = 25
    pong.ball_y = 465
    pong.ball_xvel = -BALL_SPEED
    pong.step(FRAME, 0.0)
    assert pong.ball_xvel == BALL_SPEED
    assert pong.ball_yvel == BALL_SPEED


def test_ball_leaving_field_resets():
    pong = Pong()
    pong.ball_x = -200
    pong.ball_y = -200
    pong.player_y = 10
    pong.step(FRAME, 0.0)
    assert pong == Pong()


def test_draw_paints_paddles_and_ball():
    surface = pygame.Surface((640, 480))
    pong = Pong()
    pong.draw(Canvas(surface))
    assert _rgb(surface, 320, 240) == (255, 255, 255)
    assert _rgb(surface, 30, 240) == (0, 255, 0)
    assert _rgb(surface, 610, 240) == (255, 0, 0)
    r, g, b = _rgb(surface, 5, 5)
    assert r == g == b and 0 < r < 255