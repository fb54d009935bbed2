"""
Widgets for the roster page.
"""
from .base import BaseWidget, WidgetConfig, WidgetFactory
from .notification import NotificationWidget, build_notification
from .player_card import render_all_players, render_player_card, render_single_player
from .player_form import NewPlayerFormWidget, render_new_player_form

__all__ = [
    "BaseWidget",
    "WidgetConfig",
    "WidgetFactory",
    "NotificationWidget",
    "NewPlayerFormWidget",
    "build_notification",
    "render_all_players",
    "render_player_card",
    "render_single_player",
    "render_new_player_form",
]
