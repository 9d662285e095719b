"""Mission campaign presentation logic for the Streamlit UI.

Pure transformations from a ``CampaignOverview`` to display values and a
Plotly figure. Only this layer caps the progress at 100%; the overview
keeps the real percentage.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from src.domain.models import SourceShare

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go

SOURCE_COLORS = {
    "Ofertas": "#10b981",
    "Cantina": "#0ea5e9",
    "Bazzar": "#f59e0b",
    "Outro": "#6366f1",
}
DEFAULT_COLOR = "#94a3b8"


def progress_bar_width(percentage: str) -> float:
    """Return the progress bar fill between 0 and 100.

    Args:
        percentage: Unclamped percentage string such as ``"125.00"``.

    Returns:
        float: Width in percent, capped at 100.
    """
    value = Decimal(percentage)
    return float(min(max(value, Decimal("0")), Decimal("100")))


def build_source_chart_data(
    breakdown: list[SourceShare],
) -> list[dict[str, str | float]]:
    """Prepare one bar per mission source, keeping the fixed order."""
    return [
        {
            "source": share.source,
            "value": float(share.value),
            "share_label": f"{share.percentage}%",
            "color": SOURCE_COLORS.get(share.source, DEFAULT_COLOR),
        }
        for share in breakdown
    ]


def build_plotly_figure(breakdown: list[SourceShare]) -> "go.Figure":
    """Build a bar chart of the amount raised per source.

    Args:
        breakdown: Source shares of the active campaign.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    data = build_source_chart_data(breakdown)

    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Bar(
                x=[item["source"] for item in data],
                y=[item["value"] for item in data],
                text=[item["share_label"] for item in data],
                textposition="outside",
                marker=dict(color=[item["color"] for item in data]),
                hovertemplate="%{x}: R$ %{y:,.2f}<extra></extra>",
            )
        ]
    )
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=360,
        yaxis=dict(title="R$"),
        showlegend=False,
    )
    return fig


__all__ = [
    "progress_bar_width",
    "build_source_chart_data",
    "build_plotly_figure",
]
