"""HTML fragments rendered with ``st.markdown(..., unsafe_allow_html=True)``."""

from html import escape

from .models import ColorKey, SensorKind
from .status import THRESHOLDS
from .theme import PALETTE
from .view import DashboardView, SensorCard

_GREEN = PALETTE[ColorKey.GREEN].text
_ORANGE = PALETTE[ColorKey.ORANGE].text
_RED = PALETTE[ColorKey.RED].text
_GRAY = PALETTE[ColorKey.GRAY].text


def header_html(view: DashboardView) -> str:
    return (
        '<div class="fd-header">'
        f'<p class="fd-big">{escape(view.greeting)}</p>'
        "<p class=\"fd-muted\">Here's your farm's live status.</p>"
        "</div>"
    )


def status_bar_html(view: DashboardView) -> str:
    pump_color = _GREEN if view.pump_active else _GRAY
    return (
        '<div class="fd-card" style="display:flex;justify-content:space-between;flex-wrap:wrap;gap:1rem;">'
        "<div>"
        '<p class="fd-muted">Last Sensor Reading</p>'
        f'<p class="fd-big">{escape(view.last_updated_text)}</p>'
        "</div>"
        '<div style="text-align:right;">'
        '<p class="fd-muted">Pump System</p>'
        f'<p class="fd-big" style="color:{pump_color};">&#x23FB; {escape(view.pump_text)}</p>'
        "</div>"
        "</div>"
    )


def summary_html(view: DashboardView) -> str:
    banner_color = _GREEN if view.summary.nominal else _ORANGE
    counts = (
        (view.summary.optimal, "Optimal", _GREEN),
        (view.summary.warning, "Warnings", _ORANGE),
        (view.summary.critical, "Critical", _RED),
    )
    cells = "".join(
        f'<div style="text-align:center;"><p class="fd-big" style="color:{color};">{count}</p>'
        f'<p class="fd-muted">{label}</p></div>'
        for count, label, color in counts
    )
    return (
        '<div class="fd-card">'
        '<p class="fd-title">System Status</p>'
        '<div style="display:flex;justify-content:space-between;align-items:center;flex-wrap:wrap;gap:1.5rem;">'
        f'<p class="fd-big" style="color:{banner_color};font-size:1.5rem;">{escape(view.banner)}</p>'
        f'<div style="display:flex;gap:2rem;">{cells}</div>'
        "</div>"
        "</div>"
    )


def sensor_card_html(card: SensorCard) -> str:
    style = PALETTE[card.status.color]
    alert = f'<span style="color:{style.text};font-size:1.25rem;">&#x26A0;</span>' if card.alert else ""
    invalid = '<p class="fd-muted">No valid reading received</p>' if card.invalid else ""
    return (
        '<div class="fd-card">'
        '<div style="display:flex;justify-content:space-between;align-items:center;">'
        "<div>"
        f'<p class="fd-title">{escape(card.title)}</p>'
        f'<p style="color:{style.text};font-size:0.875rem;font-weight:500;margin:0;">{card.status.label}</p>'
        "</div>"
        f"{alert}"
        "</div>"
        '<p class="fd-value" '
        f'style="background-image:linear-gradient(to bottom right, {style.start}, {style.end});">'
        f'{card.value_text}<span class="fd-unit">{escape(card.unit)}</span></p>'
        f"{invalid}"
        "</div>"
    )


def pump_logic_html() -> str:
    """Description of the pump firmware rules, using the soil moisture thresholds."""
    soil = THRESHOLDS[SensorKind.SOIL]
    on_below = f"{soil.critical.low:g}"
    off_from = f"{soil.warning.low:g}"
    return (
        '<div class="fd-card">'
        '<p class="fd-title">Pump Automation Logic</p>'
        f'<div class="fd-card" style="border-color:{_GREEN};">'
        f'<p class="fd-title" style="color:{_GREEN};">&#x26A1; Pump Activates (ON)</p>'
        "<p>The pump turns ON automatically when <strong>Soil Moisture</strong> is "
        f'<strong style="color:{_RED};">Critical</strong> (below {on_below}%).</p>'
        "</div>"
        '<div class="fd-card">'
        f'<p class="fd-title" style="color:{_GRAY};">Pump Deactivates (OFF)</p>'
        "<p>The pump turns OFF automatically once <strong>Soil Moisture</strong> is "
        f'<strong style="color:{_GREEN};">Optimal</strong> ({off_from}% or higher).</p>'
        "</div>"
        "</div>"
    )


def footer_html(view: DashboardView) -> str:
    parts = [f"&#x1F4CD; {escape(view.location_label)}" if view.location_label else "", escape(view.clock_text)]
    if view.operator_label:
        parts.append(f"@ {escape(view.operator_label)}")
    return '<p class="fd-footer">' + " &bull; ".join(p for p in parts if p) + "</p>"
