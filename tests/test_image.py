import io

import pygame
import pytest

from simple2d.image import Image, ImageError, decode_image, load_image


def _png_bytes():
    surface = pygame.Surface((3, 2), pygame.SRCALPHA)
    surface.fill((10, 20, 30, 255))
    surface.set_at((2, 1), (200, 100, 50, 128))
    buffer = io.BytesIO()
    pygame.image.save(surface, buffer, "out.png")
    return buffer.getvalue()


def test_decode_round_trip():
    image = decode_image(_png_bytes())
    assert (image.width, image.height) == (3, 2)
    assert image.pixel(0, 0) == (10, 20, 30, 255)
    assert image.pixel(2, 1) == (200, 100, 50, 128)
    assert len(image.data) == 3 * 2 * 4


def test_decode_rejects_non_png():
    with pytest.raises(ImageError):
        decode_image(b"not an image")


def test_decode_rejects_truncated_png():
    with pytest.raises(ImageError):
        decode_image(_png_bytes()[:20])


def test_load_missing_file(tmp_path):
    with pytest.raises(ImageError):
        load_image(tmp_path / "missing.png")


def test_load_from_file(tmp_path):
    path = tmp_path / "pic.png"
    path.write_bytes(_png_bytes())
    assert load_image(path) == decode_image(_png_bytes())
    assert load_image(str(path)).pixel(1, 0) == (10, 20, 30, 255)


def test_pixel_out_of_range():
    image = Image(1, 1, bytes(4))
    with pytest.raises(IndexError):
        image.pixel(1, 0)


def test_data_size_checked():
    with pytest.raises(ValueError):
        Image(2, 2, bytes(4))


def test_to_surface_matches_pixels():
    image = decode_image(_png_bytes())
    surface = image.to_surface()
    assert surface.get_size() == (3, 2)
    assert tuple(surface.get_at((2, 1))) == image.pixel(2, 1)
    assert image.to_surface() is surface