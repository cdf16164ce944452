"""Tests for shape classification — simple, two portions, anomalous."""

import math

import pytest

from greensight.engine.classifier import classify, find_elbow
from greensight.engine.constants import YARDS_PER_METER
from greensight.engine.results import (
    ANOMALOUS_LABEL,
    TWO_PORTIONS_LABEL,
    AnomalousShape,
    EGDMethod,
    SimpleShape,
    TwoPortionShape,
)
from tests.conftest import hexagon, offset, tapered


def test_too_few_points():
    assert classify([offset(0, 0), offset(1, 1)]) is None


def test_convex_green_is_simple():
    result = classify(hexagon(30, 20))
    assert isinstance(result, SimpleShape)
    assert not result.is_l_shape
    assert not result.has_anomaly
    assert result.method == EGDMethod.AVERAGE.value
    assert result.egd_values == (result.basic.egd,)


def test_square_is_simple(square_green):
    assert isinstance(classify(square_green), SimpleShape)


def test_inconsistent_green_stays_simple():
    result = classify(tapered(40, 20))
    assert isinstance(result, SimpleShape)
    assert result.method == EGDMethod.INCONSISTENT.value


def test_elongated_green_splits():
    # L / W = 4 > 3.6
    result = classify(hexagon(80, 20))
    assert isinstance(result, TwoPortionShape)
    assert result.is_l_shape
    assert not result.has_anomaly
    assert result.method == TWO_PORTIONS_LABEL


def test_elongation_threshold_configurable():
    assert isinstance(classify(hexagon(80, 20), elongation_threshold=5.0), SimpleShape)


def test_concavity_threshold_configurable(l_green):
    # Midpoint outside still forces two portions
    assert classify(l_green, concavity_threshold=0.1).is_l_shape


def test_l_shape_two_portions(l_green):
    result = classify(l_green)
    assert isinstance(result, TwoPortionShape)
    assert not isinstance(result, AnomalousShape)
    assert result.is_l_shape
    assert not result.has_anomaly
    assert result.method == TWO_PORTIONS_LABEL
    # Elbow is the outer corner (0, 0), farthest from the tip-to-tip axis
    assert result.elbow_index == 3
    assert l_green[result.elbow_index] == offset(0, 0)

    arm = math.hypot(40, 10) * YARDS_PER_METER
    for portion in (result.s1, result.s2):
        assert portion is not None
        assert portion.method is EGDMethod.AVERAGE
        assert portion.length == pytest.approx(arm, rel=0.01)
    assert result.egd_values == (result.s1.egd, result.s2.egd)


def test_l_shape_basic_axis_is_tip_to_tip(l_green):
    result = classify(l_green)
    assert {result.basic.p_a, result.basic.p_b} == {offset(0, 40), offset(40, 0)}
    assert result.basic.length == pytest.approx(math.hypot(40, 40) * YARDS_PER_METER, rel=1e-4)


def test_find_elbow(l_green):
    assert find_elbow(l_green, offset(0, 40), offset(40, 0)) == 3


def test_chevron_is_anomalous(chevron_green):
    result = classify(chevron_green)
    assert isinstance(result, AnomalousShape)
    assert result.is_l_shape
    assert result.has_anomaly
    assert result.method == ANOMALOUS_LABEL
    assert result.elbow_index == 3
    # Second half is a single point
    assert result.s1 is not None
    assert result.s2 is None
    assert result.anomaly is not None
    assert result.anomaly.is_manual_required


def test_anomalous_survey_uses_whole_shape_axis(chevron_green):
    result = classify(chevron_green)
    assert result.anomaly.straight_length == pytest.approx(100 * YARDS_PER_METER, rel=1e-4)
    assert result.anomaly.spine[0].lat == pytest.approx(result.basic.p_a.lat, abs=1e-9)
    assert result.anomaly.spine[-1].lng == pytest.approx(result.basic.p_b.lng, abs=1e-9)
