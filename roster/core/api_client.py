"""HTTP client for the players API.

`RosterApiClient` wraps the four roster operations (list, get one,
create, delete). Every call absorbs transport and decode failures, logs
them, and hands back an `ApiResult` so callers can tell an empty roster
from a failed request.
"""
import logging
from typing import Any, Dict, List, Optional

import requests

from roster.core import settings
from roster.core.models import (
    ApiResult,
    NewPlayer,
    Player,
    PlayerEnvelope,
    PlayersEnvelope,
)

logger = logging.getLogger(__name__)


class RosterApiClient:
    """
    Client for the players collection endpoint.

    Args:
        api_url: Cohort root, e.g. `https://host/api/<cohort>`
        timeout: Seconds before a request is abandoned
        legacy_single_player_path: Address single players as `players<id>`
        session: Optional `requests.Session` (injected by tests)
    """

    def __init__(
        self,
        api_url: str = settings.API_URL,
        timeout: float = settings.REQUEST_TIMEOUT,
        legacy_single_player_path: bool = settings.LEGACY_SINGLE_PLAYER_PATH,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.legacy_single_player_path = legacy_single_player_path
        self.session = session or requests.Session()

        logger.info(f"[RosterApiClient] Using collection endpoint {self.players_url}")

    @property
    def players_url(self) -> str:
        return f"{self.api_url}/players"

    def player_url(self, player_id) -> str:
        if self.legacy_single_player_path:
            return f"{self.players_url}{player_id}"
        return f"{self.players_url}/{player_id}"

    def fetch_all_players(self) -> ApiResult[List[Player]]:
        """Fetch every player on the roster."""
        try:
            response = self.session.get(self.players_url, timeout=self.timeout)
            response.raise_for_status()
            envelope = PlayersEnvelope.model_validate(response.json())
        except (requests.RequestException, ValueError) as e:
            logger.error(f"❌ [RosterApiClient] Uh oh, trouble fetching players! {e}")
            return ApiResult.failure(f"Could not fetch players: {e}")

        players = envelope.data.players
        logger.info(f"📥 [RosterApiClient] Fetched {len(players)} players")
        return ApiResult.success(players)

    def fetch_single_player(self, player_id) -> ApiResult[Player]:
        """Fetch one player by id."""
        try:
            response = self.session.get(
                self.player_url(player_id), timeout=self.timeout
            )
            response.raise_for_status()
            envelope = PlayerEnvelope.model_validate(response.json())
        except (requests.RequestException, ValueError) as e:
            logger.error(
                f"❌ [RosterApiClient] Oh no, trouble fetching player #{player_id}! {e}"
            )
            return ApiResult.failure(f"Could not fetch player #{player_id}: {e}")

        return ApiResult.success(envelope.data.player)

    def add_new_player(self, new_player: NewPlayer) -> ApiResult[Dict[str, Any]]:
        """
        Create a player.

        Returns:
            ApiResult wrapping the decoded response body as sent by the API
        """
        try:
            response = self.session.post(
                self.players_url,
                json=new_player.to_payload(),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(
                "❌ [RosterApiClient] Oops, something went wrong with adding "
                f"player '{new_player.name}'! {e}"
            )
            return ApiResult.failure(f"Could not add player '{new_player.name}': {e}")

        logger.info(f"✅ [RosterApiClient] Added player '{new_player.name}'")
        return ApiResult.success(data)

    def remove_player(self, player_id) -> ApiResult[None]:
        """Delete a player by id."""
        try:
            response = self.session.delete(
                self.player_url_for_delete(player_id), timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(
                f"❌ [RosterApiClient] Whoops, trouble removing player #{player_id} "
                f"from the roster! {e}"
            )
            return ApiResult.failure(f"Could not remove player #{player_id}: {e}")

        logger.info(f"🗑️ [RosterApiClient] Removed player #{player_id}")
        return ApiResult.success()

    def player_url_for_delete(self, player_id) -> str:
        # Deletes always used the separated path
        return f"{self.players_url}/{player_id}"


api_client = RosterApiClient()
