"""
Notification area for confirmations and failures.
"""
import dash_bootstrap_components as dbc
from dash import html

from .base import BaseWidget


def build_notification(message: str, success: bool = True, duration: int = 4000):
    """Dismissable alert shown after a create or remove."""
    return dbc.Alert(
        message,
        color="success" if success else "danger",
        dismissable=True,
        duration=duration,
        is_open=True,
    )


class NotificationWidget(BaseWidget):
    """Empty container the callbacks write alerts into."""

    def render(self) -> html.Div:
        return html.Div(id=self.config.id, className="notification-area")
