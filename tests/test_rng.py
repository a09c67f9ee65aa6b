import pytest

from simple2d import rng


def test_seed_makes_draws_reproducible():
    rng.seed(1234)
    first = [rng.random_unit() for _ in range(10)]
    rng.seed(1234)
    second = [rng.random_unit() for _ in range(10)]
    assert first == second


def test_random_unit_range():
    rng.seed(1)
    for _ in range(500):
        value = rng.random_unit()
        assert 0.0 <= value < 1.0


def test_random_between_range():
    rng.seed(2)
    for _ in range(500):
        value = rng.random_between(-3.5, 7.25)
        assert -3.5 <= value < 7.25


def test_random_between_degenerate_range():
    assert rng.random_between(4.0, 4.0) == 4.0


def test_random_between_rejects_reversed_range():
    with pytest.raises(ValueError):
        rng.random_between(2.0, 1.0)


def test_random_below_range():
    rng.seed(3)
    for _ in range(500):
        value = rng.random_below(10.0)
        assert 0.0 <= value < 10.0


def test_random_int_between_is_inclusive():
    rng.seed(4)
    low, high = 1, 3
    draws = {rng.random_int_between(low, high) for _ in range(300)}
    assert draws == set(range(low, high + 1))


def test_random_int_below_is_inclusive():
    rng.seed(5)
    high = 4
    draws = {rng.random_int_below(high) for _ in range(400)}
    assert draws == set(range(0, high + 1))


def test_random_int_between_rejects_reversed_range():
    with pytest.raises(ValueError):
        rng.random_int_between(5, 1)


def test_random_int_below_rejects_negative():
    with pytest.raises(ValueError):
        rng.random_int_below(-1)