# tests/test_quo_mod.py

import random

import pytest

from leapcal import LeapcalError, QuoMod, QuoModZeroDivisionError, quo_mod


def test_reconstruction_small_grid():
    for x in range(-3, 4):
        for y in range(-3, 4):
            if y == 0:
                continue
            qm = quo_mod(x, y)
            assert x == y * qm.quo + qm.mod

def test_remainder_follows_divisor_sign():
    random.seed(42)
    for _ in range(10000):
        x = random.randint(-10**9, 10**9)
        y = random.choice([-1, 1]) * random.randint(1, 10**6)
        q, r = quo_mod(x, y)
        assert x == y * q + r
        if y > 0:
            assert 0 <= r < y
        else:
            assert y < r <= 0

@pytest.mark.parametrize("x, y, expected", [
    (7, 2, QuoMod(3, 1)),
    (-7, 2, QuoMod(-4, 1)),
    (7, -2, QuoMod(-4, -1)),
    (-7, -2, QuoMod(3, -1)),
    (-1, 365, QuoMod(-1, 364)),
    (1000, 365, QuoMod(2, 270)),
    (0, 5, QuoMod(0, 0)),
])
def test_known_values(x, y, expected):
    assert quo_mod(x, y) == expected

def test_zero_divisor_raises():
    with pytest.raises(QuoModZeroDivisionError):
        quo_mod(1, 0)
    # still a ZeroDivisionError and a library error
    with pytest.raises(ZeroDivisionError):
        quo_mod(0, 0)
    with pytest.raises(LeapcalError):
        quo_mod(-5, 0)
