"""Roster callbacks.

One callback owns the content region: every user action (see details,
remove, back, submit) is routed to the controller and its `ViewUpdate`
is written back to the page.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence

import dash
from dash import ALL, Input, Output, State, ctx
from dash.exceptions import PreventUpdate

from roster.components.widgets.player_card import (
    BACK_TO_ALL,
    REMOVE_PLAYER,
    SEE_DETAILS,
)
from roster.components.widgets.player_form import FORM_ID
from roster.core.controller import RosterController, ViewUpdate
from roster.pages.roster.page import (
    CONTENT_ID,
    NOTIFICATION_ID,
    PLAYERS_STORE_ID,
    VIEW_STORE_ID,
)

logger = logging.getLogger(__name__)


def dispatch_action(
    controller: RosterController,
    trigger: Any,
    players: Optional[List[Dict[str, Any]]],
    form_values: Sequence[Optional[str]],
) -> Optional[ViewUpdate]:
    """
    Route one triggered input to the matching controller action.

    Args:
        controller: Roster controller
        trigger: `ctx.triggered_id` (a dict for card buttons, the form id on submit)
        players: Players currently held in the players store
        form_values: name, breed, team and image URL as typed

    Returns:
        ViewUpdate, or None when the trigger is not a roster action
    """
    if trigger == FORM_ID:
        return controller.submit(*form_values)

    if not isinstance(trigger, dict):
        return None

    action = trigger.get("type")
    player_id = trigger.get("index")

    if action == SEE_DETAILS:
        return controller.show_details(player_id, players)
    if action == REMOVE_PLAYER:
        return controller.remove(player_id)
    if action == BACK_TO_ALL:
        return controller.back()

    logger.warning(f"[RosterCallbacks] Unknown trigger: {trigger}")
    return None


def to_outputs(update: ViewUpdate, n_inputs: int) -> tuple:
    """Flatten a ViewUpdate into the callback's output order."""
    players = update.players if update.players is not None else dash.no_update
    notification = (
        update.notification if update.notification is not None else dash.no_update
    )
    form_values = [""] * n_inputs if update.clear_form else [dash.no_update] * n_inputs
    return (update.content, players, update.view, notification, *form_values)


def has_real_click(triggered: Sequence[Dict[str, Any]]) -> bool:
    """Freshly rendered buttons report n_clicks=0; only real clicks count."""
    return any(t.get("value") for t in triggered or [])


def run_action(
    controller: RosterController,
    triggered: Sequence[Dict[str, Any]],
    triggered_id: Any,
    players: Optional[List[Dict[str, Any]]],
    form_values: Sequence[Optional[str]],
) -> tuple:
    """
    Body of the roster callback.

    Raises:
        PreventUpdate: When nothing was really clicked or the trigger is not a roster action
    """
    if not triggered_id or not has_real_click(triggered):
        raise PreventUpdate

    logger.info(f"[RosterCallbacks] Action triggered by {triggered_id}")
    update = dispatch_action(controller, triggered_id, players, form_values)
    if update is None:
        raise PreventUpdate

    return to_outputs(update, len(form_values))


def register_callbacks(app, controller: RosterController, form_input_ids: List[str]):
    """Register the roster callback."""

    @app.callback(
        Output(CONTENT_ID, "children"),
        Output(PLAYERS_STORE_ID, "data"),
        Output(VIEW_STORE_ID, "data"),
        Output(NOTIFICATION_ID, "children"),
        *[Output(input_id, "value") for input_id in form_input_ids],
        Input({"type": SEE_DETAILS, "index": ALL}, "n_clicks"),
        Input({"type": REMOVE_PLAYER, "index": ALL}, "n_clicks"),
        Input({"type": BACK_TO_ALL, "index": ALL}, "n_clicks"),
        Input(FORM_ID, "n_submit"),
        State(PLAYERS_STORE_ID, "data"),
        *[State(input_id, "value") for input_id in form_input_ids],
        prevent_initial_call=True,
    )
    def handle_roster_action(
        details_clicks, remove_clicks, back_clicks, n_submit, players, *form_values
    ):
        return run_action(
            controller, ctx.triggered, ctx.triggered_id, players, form_values
        )

    logger.info("✅ Roster callbacks registered")
