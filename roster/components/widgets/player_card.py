"""
Player card rendering.

Pure functions turning players into the content of the roster region.
Each call returns the whole region; the caller replaces what was there.
"""
import logging
from typing import List, Optional, Sequence

import dash_bootstrap_components as dbc
from dash import html

from roster.core.models import Player

# Get module logger
logger = logging.getLogger(__name__)

DEFAULT_EMPTY_MESSAGE = "No players on the roster yet."

# Pattern-matching id types, shared with the callbacks
SEE_DETAILS = "see-details"
REMOVE_PLAYER = "remove-player"
BACK_TO_ALL = "back-to-all"


def _player_image(player: Player) -> html.Img:
    return html.Img(src=player.image_url, alt=player.name, className="player-image")


def render_player_card(player: Player) -> html.Div:
    """Card shown in the list view."""
    return html.Div(
        [
            html.H2(player.name),
            html.P(f"ID: {player.id}"),
            _player_image(player),
            html.Div(
                [
                    dbc.Button(
                        "See details",
                        id={"type": SEE_DETAILS, "index": player.id},
                        color="primary",
                        className="me-2",
                        n_clicks=0,
                    ),
                    dbc.Button(
                        "Remove from roster",
                        id={"type": REMOVE_PLAYER, "index": player.id},
                        color="danger",
                        n_clicks=0,
                    ),
                ],
                className="player-card-actions",
            ),
        ],
        className="player-card",
    )


def render_all_players(
    players: Optional[Sequence[Player]],
    empty_message: str = DEFAULT_EMPTY_MESSAGE,
    error: Optional[str] = None,
) -> List:
    """
    Build the list view.

    Args:
        players: Players to show; None when the fetch failed
        empty_message: Text shown when there is nobody to show
        error: Failure description shown above the list

    Returns:
        List: Children for the content region
    """
    children = []
    if error:
        children.append(
            dbc.Alert(error, color="danger", className="roster-error")
        )

    if not players:
        children.append(html.P(empty_message, className="no-players"))
        return children

    children.extend(render_player_card(player) for player in players)
    logger.debug(f"[PlayerCards] Rendered {len(players)} player cards")
    return children


def render_single_player(player: Player) -> List:
    """Build the detail view for one player."""
    return [
        html.Div(
            [
                html.H2(player.name),
                html.P(f"ID: {player.id}"),
                html.P(f"Breed: {player.breed}"),
                _player_image(player),
                html.P(player.team_label, className="player-team"),
                dbc.Button(
                    "Back to all players",
                    id={"type": BACK_TO_ALL, "index": player.id},
                    color="secondary",
                    n_clicks=0,
                ),
            ],
            className="player-card player-detail",
        )
    ]
