"""Tests for the mission chart helpers."""

from decimal import Decimal

import pytest

from src.adapters.interface.streamlit import mission_chart
from src.domain.models import SourceShare


@pytest.mark.parametrize(
    ("percentage", "expected"),
    [("25.00", 25.0), ("125.00", 100.0), ("0.00", 0.0)],
)
def test_progress_bar_width_is_capped(percentage, expected):
    """The bar never exceeds 100% even when the campaign does."""
    assert mission_chart.progress_bar_width(percentage) == expected


def test_chart_data_keeps_source_order():
    """Each source becomes one bar with its share label."""
    breakdown = [
        SourceShare("Ofertas", Decimal("75"), "75.00"),
        SourceShare("Cantina", Decimal("25"), "25.00"),
    ]

    data = mission_chart.build_source_chart_data(breakdown)

    assert [item["source"] for item in data] == ["Ofertas", "Cantina"]
    assert data[0]["value"] == 75.0
    assert data[1]["share_label"] == "25.00%"


def test_build_plotly_figure_has_one_bar_per_source():
    """The figure plots the raised amount per source."""
    breakdown = [
        SourceShare("Ofertas", Decimal("10"), "50.00"),
        SourceShare("Outro", Decimal("10"), "50.00"),
    ]

    fig = mission_chart.build_plotly_figure(breakdown)

    assert list(fig.data[0].x) == ["Ofertas", "Outro"]
    assert list(fig.data[0].y) == [10.0, 10.0]
