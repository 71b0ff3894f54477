from datetime import datetime

from .models import Reading, Theme
from .theme import toggle_theme


class DashboardState:
    """Mutable state owned by one dashboard session.

    Changes go through three transitions only: ``replace_reading`` swaps the
    whole Reading, ``toggle_theme`` flips the theme and ``tick`` advances the
    display clock. Rebinding an attribute is atomic, so the poll thread can
    publish a new Reading while the UI thread reads the previous one.
    """

    def __init__(self, theme: Theme = Theme.DARK, now: datetime | None = None) -> None:
        self.reading: Reading = Reading()
        self.theme: Theme = theme
        self.now: datetime = now or datetime.now().astimezone()

    def replace_reading(self, reading: Reading) -> None:
        self.reading = reading

    def toggle_theme(self) -> Theme:
        self.theme = toggle_theme(self.theme)
        return self.theme

    def tick(self, now: datetime | None = None) -> datetime:
        self.now = now or datetime.now().astimezone()
        return self.now
