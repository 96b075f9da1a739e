"""Tests for tolerance parameters."""

import dataclasses

import pytest

from geom3d.parameters import DEFAULT_TOLERANCES, EPSILON, Tolerances


def test_default_factory_matches_constructor():
    assert Tolerances.default() == Tolerances()


def test_default_values():
    """Package-wide epsilon and hash precision."""
    assert EPSILON == 1e-10
    assert DEFAULT_TOLERANCES.epsilon == EPSILON
    assert DEFAULT_TOLERANCES.hash_decimals == 10


def test_tolerances_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_TOLERANCES.epsilon = 1.0
