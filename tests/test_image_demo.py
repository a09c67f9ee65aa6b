import math

import pytest

from simple2d.examples.image_demo import hop_offset, main


def test_offset_starts_at_zero():
    assert hop_offset(0.0, 480) == 0.0


def test_offset_peaks_at_sixteenth_of_height():
    assert hop_offset(math.pi / 10, 480) == pytest.approx(30.0)


@pytest.mark.parametrize("t", [0.05, 0.3, 1.1, 2.7, 9.4])
def test_offset_stays_in_range_and_repeats(t):
    value = hop_offset(t, 480)
    assert 0.0 <= value <= 480 // 16
    assert hop_offset(t + math.pi / 5, 480) == pytest.approx(value)


def test_missing_image_fails(tmp_path, capsys):
    status = main([str(tmp_path / "missing.png")])
    assert status == 1
    assert "Could not load image" in capsys.readouterr().err


def test_non_png_fails(tmp_path, capsys):
    bogus = tmp_path / "bogus.png"
    bogus.write_bytes(b"not an image")
    assert main([str(bogus)]) == 1
    assert "Could not load image" in capsys.readouterr().err