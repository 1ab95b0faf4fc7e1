"""Unit tests for the trail configuration"""

import os
import sys

import numpy as np
import pytest

SRC = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from santafe import InvalidSizeError, OutOfBoundsError, TrailConfig, TrailError


def test_build_grid():
    cfg = TrailConfig(size=5, food=[[1, 1], [3, 3], [1, 1]])
    assert cfg.food == ((1, 1), (3, 3), (1, 1))
    g = cfg.build_grid()
    assert g.size == 5
    assert sorted(g.food_positions()) == [(1, 1), (3, 3)]


def test_default_is_empty_32():
    g = TrailConfig().build_grid()
    assert g.size == 32
    assert g.food_count() == 0


def test_validate_rejects_bad_size():
    with pytest.raises(InvalidSizeError):
        TrailConfig(size=0).validate()


def test_validate_rejects_off_grid_food():
    with pytest.raises(OutOfBoundsError):
        TrailConfig(size=5, food=((5, 5),)).validate()


def test_validate_rejects_malformed_pair():
    with pytest.raises(ValueError):
        TrailConfig(size=5, food=((1, 2, 3),)).validate()


def test_errors_share_a_base():
    with pytest.raises(TrailError):
        TrailConfig(size=-1).build_grid()


def test_validate_accepts_numpy_size():
    cfg = TrailConfig(size=np.int64(6), food=((np.int64(5), 0),))
    cfg.validate()
    g = cfg.build_grid()
    assert g.size == 6
    assert g.food_positions() == [(5, 0)]
