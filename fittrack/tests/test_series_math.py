from __future__ import annotations

import math

import pytest

from fittrack.config import settings
from fittrack.services.samples import Sample, prepare_series
from fittrack.services.scale import Domain, Viewport, build_mapping, compute_domain
from fittrack.services.trend import Trend, classify_trend, series_trend, trend_color


def test_prepare_series_filters_and_sorts(make_entries):
    """Absent, non-numeric and non-finite values are dropped; dates come out ascending."""

    entries = make_entries(
        ("2024-01-15", 78.5),
        ("2024-01-01", 80.0),
        ("2024-01-03", None),
        ("2024-01-04", math.nan),
        ("2024-01-05", math.inf),
        ("2024-01-06", "81"),
        ("2024-01-08", 79),
    )

    series = prepare_series(entries)

    assert [s.date for s in series] == ["2024-01-01", "2024-01-08", "2024-01-15"]
    assert [s.value for s in series] == [80.0, 79.0, 78.5]


def test_prepare_series_reads_requested_field(make_entries):
    entries = make_entries(("2024-02-02", 2100), ("2024-02-01", 1800), field="calories")

    assert prepare_series(entries, "weight") == []
    assert prepare_series(entries, "calories") == [
        Sample("2024-02-01", 1800.0),
        Sample("2024-02-02", 2100.0),
    ]


def test_prepare_series_tolerates_empty_and_single():
    assert prepare_series([]) == []
    assert len(prepare_series([{"date": "2024-01-01", "weight": 70.0}])) == 1


def test_domain_substitutes_unit_range_when_flat():
    flat = compute_domain([Sample("2024-01-01", 70.0), Sample("2024-01-02", 70.0)])

    assert (flat.min, flat.max) == (70.0, 70.0)
    assert flat.range == 1.0
    assert Domain(78.5, 80.0).range == pytest.approx(1.5)


def test_viewport_scales_with_density():
    assert Viewport.for_container(300, 1.0) == Viewport(300, 170)
    assert Viewport.for_container(301, 2.0) == Viewport(602, 340)
    assert Viewport.for_container(100.7, 1.5) == Viewport(151, 255)


def test_mapping_endpoints_and_inversion():
    series = [Sample("2024-01-01", 80.0), Sample("2024-01-08", 79.0), Sample("2024-01-15", 78.5)]
    m = build_mapping(series, Viewport(300, 170), 1.0)

    assert (m.area.left, m.area.right, m.area.top, m.area.bottom) == (18, 282, 18, 142)
    assert m.x_at(0) == pytest.approx(18)
    assert m.x_at(1) == pytest.approx(150)
    assert m.x_at(2) == pytest.approx(282)
    assert m.y_at(80.0) == pytest.approx(18)
    assert m.y_at(78.5) == pytest.approx(142)
    assert m.y_at(79.0) == pytest.approx(142 - 0.5 * 124 / 1.5)


def test_mapping_padding_follows_density():
    series = [Sample("2024-01-01", 1.0), Sample("2024-01-02", 2.0)]
    m = build_mapping(series, Viewport.for_container(300, 2.0), 2.0)

    assert m.area.left == 36
    assert m.area.right == 600 - 36
    assert m.area.top == 36
    assert m.area.bottom == 340 - 56


def test_mapping_requires_two_samples():
    with pytest.raises(ValueError):
        build_mapping([Sample("2024-01-01", 1.0)], Viewport(300, 170), 1.0)


@pytest.mark.parametrize(
    "first,last,expected",
    [
        (80.0, 78.5, Trend.FALLING),
        (80.0, 80.06, Trend.RISING),
        (80.0, 80.04, Trend.FLAT),
        (80.0, 79.96, Trend.FLAT),
        (80.0, 80.05, Trend.FLAT),
        (80.0, 79.94, Trend.FALLING),
        (70.0, 70.0, Trend.FLAT),
    ],
)
def test_trend_dead_zone(first, last, expected):
    assert classify_trend(first, last) is expected


def test_trend_colors():
    assert trend_color(Trend.FALLING) == settings.TREND_COLOR_FALLING
    assert trend_color(Trend.RISING) == settings.TREND_COLOR_RISING
    assert trend_color(Trend.FLAT) == settings.TREND_COLOR_FLAT


def test_series_trend_uses_first_and_last_only():
    series = [Sample("2024-01-01", 80.0), Sample("2024-01-02", 95.0), Sample("2024-01-03", 80.0)]

    assert series_trend(series) is Trend.FLAT
    assert series_trend(series[:1]) is Trend.FLAT
