import pygame
import pytest

from simple2d import rng
from simple2d.draw import Canvas
from simple2d.examples.constellations import STAR_RADIUS, Constellations, Star


def _rgb(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def test_press_move_release_places_star():
    sky = Constellations()
    sky.press(10, 20, 1.5)
    assert sky.current == Star(10, 20, STAR_RADIUS, 1.5)
    sky.move(30, 40)
    assert (sky.current.x, sky.current.y) == (30, 40)
    sky.release()
    assert sky.current is None
    assert sky.stars == [Star(30, 40, STAR_RADIUS, 1.5)]


def test_move_and_release_without_star_do_nothing():
    sky = Constellations()
    sky.move(5, 5)
    sky.release()
    assert sky.stars == []
    assert sky.current is None


def test_clear_removes_stars():
    sky = Constellations()
    for x in (1, 2, 3):
        sky.press(x, x, 0.0)
        sky.release()
    assert len(sky.stars) == 3
    sky.clear()
    assert sky.stars == []


def test_recolor_normalises_brightest_component():
    rng.seed(7)
    sky = Constellations()
    sky.recolor()
    assert max(sky.color) == pytest.approx(1.0)
    assert all(0.0 <= c <= 1.0 for c in sky.color)


def test_draw_paints_placed_and_dragged_stars():
    surface = pygame.Surface((100, 100))
    sky = Constellations()
    sky.press(25, 50, 0.0)
    sky.release()
    sky.press(75, 50, 0.5)
    sky.draw(Canvas(surface), 1.0)
    assert _rgb(surface, 25, 50) == (255, 255, 255)
    assert _rgb(surface, 75, 50) == (255, 255, 255)
    assert _rgb(surface, 0, 0) == (0, 0, 0)


def test_nearby_stars_are_linked():
    surface = pygame.Surface((100, 100))
    canvas = Canvas(surface)
    canvas.background(0, 0, 0)
    first = Star(20, 50, STAR_RADIUS, 0.0)
    second = Star(80, 50, STAR_RADIUS, 0.0)
    first.draw_lines(canvas, [first, second], (1.0, 1.0, 1.0))
    r, g, b = _rgb(surface, 50, 50)
    assert r > 0 and r == g == b


def test_distant_stars_are_not_linked():
    surface = pygame.Surface((400, 100))
    canvas = Canvas(surface)
    canvas.background(0, 0, 0)
    first = Star(0, 50, STAR_RADIUS, 0.0)
    second = Star(300, 50, STAR_RADIUS, 0.0)
    first.draw_lines(canvas, [first, second], (1.0, 1.0, 1.0))
    assert _rgb(surface, 150, 50) == (0, 0, 0)


def test_star_is_not_linked_to_itself():
    surface = pygame.Surface((100, 100))
    canvas = Canvas(surface)
    canvas.background(0, 0, 0)
    star = Star(50, 50, STAR_RADIUS, 0.0)
    star.draw_lines(canvas, [star], (1.0, 1.0, 1.0))
    assert _rgb(surface, 50, 50) == (0, 0, 0)


def test_draw_star_restores_matrix():
    surface = pygame.Surface((100, 100))
    canvas = Canvas(surface)
    before = canvas.matrix
    Star(50, 50, STAR_RADIUS, 0.3).draw_star(canvas, 2.0)
    assert canvas.matrix == before