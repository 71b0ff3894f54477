from typing import Final, NamedTuple

from .models import ColorKey, Theme


class ColorStyle(NamedTuple):
    start: str
    end: str
    text: str


class Surface(NamedTuple):
    background: str
    card: str
    border: str
    text: str
    muted: str
    heading: str


PALETTE: Final[dict[ColorKey, ColorStyle]] = {
    ColorKey.RED: ColorStyle("#ef4444", "#dc2626", "#ef4444"),
    ColorKey.ORANGE: ColorStyle("#fb923c", "#f97316", "#f97316"),
    ColorKey.GREEN: ColorStyle("#22c55e", "#10b981", "#22c55e"),
    ColorKey.BLUE: ColorStyle("#3b82f6", "#2563eb", "#3b82f6"),
    ColorKey.CYAN: ColorStyle("#22d3ee", "#0ea5e9", "#06b6d4"),
    ColorKey.GRAY: ColorStyle("#64748b", "#475569", "#64748b"),
}

SURFACES: Final[dict[Theme, Surface]] = {
    Theme.DARK: Surface(
        background="#0f172a",
        card="rgba(30, 41, 59, 0.4)",
        border="rgba(51, 65, 85, 0.5)",
        text="#e2e8f0",
        muted="#94a3b8",
        heading="#ffffff",
    ),
    Theme.LIGHT: Surface(
        background="#f1f5f9",
        card="rgba(255, 255, 255, 0.6)",
        border="rgba(203, 213, 225, 0.5)",
        text="#1e293b",
        muted="#64748b",
        heading="#1e293b",
    ),
}


def toggle_theme(theme: Theme) -> Theme:
    return Theme.LIGHT if theme == Theme.DARK else Theme.DARK


def theme_css(theme: Theme) -> str:
    """Stylesheet for the Streamlit page in the given theme."""
    s = SURFACES[theme]
    return f"""
<style>
.stApp {{ background-color: {s.background}; color: {s.text}; }}
.stApp h1, .stApp h2, .stApp h3, .stApp h4 {{ color: {s.heading}; }}
.fd-card {{
    background: {s.card};
    border: 1px solid {s.border};
    border-radius: 1.5rem;
    padding: 1.25rem 1.5rem;
    margin-bottom: 1rem;
    backdrop-filter: blur(12px);
}}
.fd-muted {{ color: {s.muted}; font-size: 0.875rem; margin: 0 0 0.5rem 0; }}
.fd-big {{ color: {s.heading}; font-size: 1.875rem; font-weight: 700; margin: 0; }}
.fd-title {{ color: {s.heading}; font-size: 1.125rem; font-weight: 700; margin: 0; }}
.fd-value {{
    font-size: 3.5rem;
    font-weight: 900;
    text-align: center;
    -webkit-background-clip: text;
    background-clip: text;
    color: transparent;
}}
.fd-unit {{ color: {s.muted}; font-size: 1.5rem; font-weight: 700; margin-left: 0.5rem; }}
.fd-footer {{ color: {s.muted}; font-size: 0.875rem; text-align: center; }}
</style>
"""
