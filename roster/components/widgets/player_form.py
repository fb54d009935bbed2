"""
New player form widget.
"""
import logging
from typing import Any, Dict, List, Optional

import dash_bootstrap_components as dbc
from dash import html

from .base import BaseWidget, WidgetConfig

# Get module logger
logger = logging.getLogger(__name__)

FORM_ID = "new-player-form"

# (field key, input id, placeholder) in submission order
DEFAULT_FIELDS = [
    {"key": "name", "id": "new-player-name", "placeholder": "Enter player name"},
    {"key": "breed", "id": "new-player-breed", "placeholder": "Enter player breed"},
    {"key": "team", "id": "new-player-team", "placeholder": "Enter player team"},
    {
        "key": "image_url",
        "id": "new-player-image",
        "placeholder": "Enter player image URL",
    },
]


def create_input(input_id: str, placeholder: str, input_type: str = "text"):
    return dbc.Input(
        id=input_id,
        type=input_type,
        placeholder=placeholder,
        value="",
        className="mb-2",
    )


def render_new_player_form(
    fields: Optional[List[Dict[str, Any]]] = None,
    submit_label: str = "Add Player",
    form_id: str = FORM_ID,
) -> dbc.Form:
    """
    Build the creation form.

    Calling this twice yields two forms; the page places it once.
    """
    fields = fields or DEFAULT_FIELDS
    inputs = [create_input(f["id"], f.get("placeholder", "")) for f in fields]

    return dbc.Form(
        inputs
        + [dbc.Button(submit_label, type="submit", color="success", n_clicks=0)],
        id=form_id,
        prevent_default_on_submit=True,
    )


class NewPlayerFormWidget(BaseWidget):
    """
    Widget holding the new player form.

    Properties read from configuration:
        fields: list of {key, id, placeholder} in name/breed/team/image order
        submit_label: text of the submit button
    """

    def __init__(self, config: WidgetConfig):
        super().__init__(config)
        self.fields = config.properties.get("fields") or DEFAULT_FIELDS
        self.submit_label = config.properties.get("submit_label", "Add Player")

        keys = [f.get("key") for f in self.fields]
        if keys != [f["key"] for f in DEFAULT_FIELDS]:
            raise ValueError(
                f"[NewPlayerFormWidget] Expected fields "
                f"{[f['key'] for f in DEFAULT_FIELDS]}, got {keys}"
            )

        logger.info(f"[NewPlayerFormWidget] Initialized '{config.id}'")

    @property
    def input_ids(self) -> List[str]:
        return [f["id"] for f in self.fields]

    def render(self) -> html.Div:
        return html.Div(
            [
                html.H3(self.config.title, className="form-title"),
                render_new_player_form(self.fields, self.submit_label),
            ],
            className="new-player-form-tile",
        )
