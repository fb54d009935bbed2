"""Roster controller.

Owns the current view and turns each user action into a `ViewUpdate`:
the new content of the roster region plus the state the page keeps
between callbacks. Mutations are always followed by a full re-fetch.
"""
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from roster.components.widgets.notification import build_notification
from roster.components.widgets.player_card import (
    DEFAULT_EMPTY_MESSAGE,
    render_all_players,
    render_single_player,
)
from roster.core.models import NewPlayer, Player, players_from_store

logger = logging.getLogger(__name__)

LIST_VIEW = "list"
DETAIL_VIEW = "detail"

DEFAULT_MESSAGES = {
    "empty": DEFAULT_EMPTY_MESSAGE,
    "player_added": "Puppy successfully added to roster!",
    "player_removed": "Puppy successfully cut from the team!",
}


@dataclass
class ViewUpdate:
    """
    Result of one controller action.

    `players` is None when the held players should stay as they are;
    `notification` is None when nothing should be announced.
    """

    content: List
    view: Dict[str, Any]
    players: Optional[List[Dict[str, Any]]] = None
    notification: Any = None
    clear_form: bool = False


@dataclass
class RosterController:
    """
    Maps the roster actions onto the API client and the renderers.

    Args:
        client: `RosterApiClient` (or anything with the same methods)
        messages: Page texts overriding DEFAULT_MESSAGES
    """

    client: Any
    messages: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.messages = {**DEFAULT_MESSAGES, **(self.messages or {})}
        # One mutation+refresh at a time, so overlapping clicks cannot race
        self._mutation_lock = threading.Lock()

    def _list_view(self, **kwargs) -> ViewUpdate:
        result = self.client.fetch_all_players()
        players = result.value if result.ok else None
        content = render_all_players(
            players, empty_message=self.messages["empty"], error=result.error
        )
        held = [p.to_store() for p in players] if players else []
        return ViewUpdate(
            content=content, view={"name": LIST_VIEW}, players=held, **kwargs
        )

    def init(self) -> ViewUpdate:
        """First render on page load."""
        logger.info("🚀 [RosterController] Loading roster...")
        return self._list_view()

    def show_details(self, player_id, players: Optional[List[Dict[str, Any]]]):
        """
        Switch to the detail view using the players already held.

        Returns:
            ViewUpdate, or None when the player is not among the held ones
        """
        player = find_player(players_from_store(players), player_id)
        if player is None:
            logger.warning(f"[RosterController] Player #{player_id} is not displayed")
            return None

        logger.info(f"[RosterController] Showing details for player #{player_id}")
        return ViewUpdate(
            content=render_single_player(player),
            view={"name": DETAIL_VIEW, "player_id": player_id},
        )

    def back(self) -> ViewUpdate:
        """Return from the detail view to a freshly fetched list."""
        return self._list_view()

    def remove(self, player_id) -> ViewUpdate:
        """Remove a player, then redraw the roster."""
        with self._mutation_lock:
            result = self.client.remove_player(player_id)
            if result.ok:
                notification = build_notification(self.messages["player_removed"])
            else:
                notification = build_notification(result.error, success=False)
            return self._list_view(notification=notification)

    def submit(self, name, breed, team, image_url) -> ViewUpdate:
        """Create a player from the raw form values, then redraw the roster."""
        new_player = NewPlayer(
            name=name or "",
            breed=breed or "",
            team_id=team or "",
            image_url=image_url or "",
        )
        with self._mutation_lock:
            result = self.client.add_new_player(new_player)
            if result.ok:
                notification = build_notification(self.messages["player_added"])
            else:
                notification = build_notification(result.error, success=False)
            return self._list_view(notification=notification, clear_form=True)


def find_player(players: List[Player], player_id) -> Optional[Player]:
    return next((p for p in players if p.id == player_id), None)
