from typing import Final

import plotly.graph_objects as go

from .models import SensorKind, StatusLabel, Theme
from .status import COLORS, THRESHOLDS
from .theme import PALETTE, SURFACES
from .view import SensorCard

AXIS_MAX: Final[dict[SensorKind, float]] = {
    SensorKind.SOIL: 100.0,
    SensorKind.HUMIDITY: 100.0,
    SensorKind.TEMPERATURE: 50.0,
}

GAUGE_CONFIG: Final[dict[str, object]] = {"displayModeBar": False, "staticPlot": True}


def _rgba(hex_color: str, alpha: float) -> str:
    h = hex_color.lstrip("#")
    r, g, b = (int(h[i : i + 2], 16) for i in (0, 2, 4))
    return f"rgba({r}, {g}, {b}, {alpha})"


def band_segments(kind: SensorKind, axis_max: float) -> list[tuple[float, float, StatusLabel]]:
    """Split ``[0, axis_max]`` into the Critical/Warning/Optimal regions for ``kind``."""
    t = THRESHOLDS.get(kind)
    if t is None:
        return [(0.0, axis_max, StatusLabel.OPTIMAL)]

    segments: list[tuple[float, float, StatusLabel]] = []
    lo = 0.0
    if t.critical.low is not None:
        segments.append((lo, t.critical.low, StatusLabel.CRITICAL))
        lo = t.critical.low
    if t.warning.low is not None:
        segments.append((lo, t.warning.low, StatusLabel.WARNING))
        lo = t.warning.low
    segments.append((lo, t.warning.high if t.warning.high is not None else axis_max, StatusLabel.OPTIMAL))
    if t.warning.high is not None:
        upper = t.critical.high if t.critical.high is not None else axis_max
        segments.append((t.warning.high, upper, StatusLabel.WARNING))
    if t.critical.high is not None:
        segments.append((t.critical.high, axis_max, StatusLabel.CRITICAL))

    clipped = []
    for start, end, label in segments:
        end = min(end, axis_max)
        if start < end:
            clipped.append((start, end, label))
    return clipped


def sensor_gauge(card: SensorCard, theme: Theme) -> go.Figure:
    surface = SURFACES[theme]
    axis_max = max(AXIS_MAX.get(card.kind, 100.0), card.value)
    colors = COLORS[card.kind]
    steps = [
        {"range": [start, end], "color": _rgba(PALETTE[colors.get(label, colors[StatusLabel.OPTIMAL])].start, 0.25)}
        for start, end, label in band_segments(card.kind, axis_max)
    ]
    fig = go.Figure(
        go.Indicator(
            mode="gauge",
            value=card.value,
            gauge={
                "axis": {"range": [0, axis_max], "tickcolor": surface.muted},
                "bar": {"color": PALETTE[card.status.color].start, "thickness": 0.3},
                "bgcolor": "rgba(0, 0, 0, 0)",
                "borderwidth": 0,
                "steps": steps,
            },
        )
    )
    fig.update_layout(
        height=160,
        margin=dict(l=20, r=20, t=10, b=0),
        paper_bgcolor="rgba(0, 0, 0, 0)",
        font=dict(color=surface.muted),
    )
    return fig
