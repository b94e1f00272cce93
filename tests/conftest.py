"""Shared boards and oracle fixtures."""

import pytest

from zkcp import LocalOracle


SOLUTION = bytes([
    6, 1, 4, 3, 8, 9, 2, 5, 7,
    5, 8, 3, 6, 7, 2, 4, 1, 9,
    9, 7, 2, 5, 4, 1, 8, 6, 3,
    1, 3, 9, 8, 5, 4, 6, 7, 2,
    2, 5, 8, 1, 6, 7, 9, 3, 4,
    7, 4, 6, 2, 9, 3, 5, 8, 1,
    8, 2, 7, 9, 1, 5, 3, 4, 6,
    4, 9, 5, 7, 3, 6, 1, 2, 8,
    3, 6, 1, 4, 2, 8, 7, 9, 5,
])

MASK = bytes([
    1, 1, 1, 1, 1, 1, 1, 1, 0,
    1, 0, 0, 1, 0, 0, 1, 0, 0,
    0, 0, 0, 1, 0, 0, 0, 1, 1,
    1, 1, 0, 1, 0, 0, 1, 1, 0,
    1, 0, 1, 1, 1, 0, 1, 0, 1,
    0, 1, 0, 1, 0, 1, 1, 0, 1,
    0, 1, 0, 1, 0, 0, 1, 0, 0,
    1, 0, 1, 1, 0, 1, 1, 0, 0,
    1, 1, 0, 1, 1, 0, 1, 0, 1,
])

PUZZLE = bytes([
    6, 1, 4, 3, 8, 9, 2, 5, 0,
    5, 0, 0, 6, 0, 0, 4, 0, 0,
    0, 0, 0, 5, 0, 0, 0, 6, 3,
    1, 3, 0, 8, 0, 0, 6, 7, 0,
    2, 0, 8, 1, 6, 0, 9, 0, 4,
    0, 4, 0, 2, 0, 3, 5, 0, 1,
    0, 2, 0, 9, 0, 0, 3, 0, 0,
    4, 0, 5, 7, 0, 6, 1, 0, 0,
    3, 6, 0, 4, 2, 0, 7, 0, 5,
])

SECRET_KEY = bytes([3] * 32)
PREIMAGE = bytes([3] * 32)


@pytest.fixture
def oracle():
    return LocalOracle()
