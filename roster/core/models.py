"""Roster data model and API result types."""
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")


class Player(BaseModel):
    """A roster member as served by the players endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    id: int  # Assigned by the remote service
    name: str = ""
    breed: str = ""
    image_url: str = Field("", alias="imageUrl")
    team_id: Optional[Union[int, str]] = Field(None, alias="teamId")  # falsy = unassigned

    @field_validator("name", "breed", "image_url", mode="before")
    @classmethod
    def _null_to_empty(cls, value):
        return "" if value is None else value

    @property
    def team_label(self) -> str:
        return f"Team: {self.team_id}" if self.team_id else "Unassigned"

    def to_store(self) -> Dict[str, Any]:
        """Serialize with the API's camelCase keys for a dcc.Store."""
        return self.model_dump(by_alias=True)


class NewPlayer(BaseModel):
    """Creation payload built from the raw form values (no coercion)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    breed: str = ""
    team_id: str = Field("", alias="teamId")
    image_url: str = Field("", alias="imageUrl")

    def to_payload(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)


class PlayersData(BaseModel):
    players: List[Player] = Field(default_factory=list)


class PlayersEnvelope(BaseModel):
    """`{"data": {"players": [...]}}`"""

    data: PlayersData


class PlayerData(BaseModel):
    player: Player


class PlayerEnvelope(BaseModel):
    """`{"data": {"player": {...}}}`"""

    data: PlayerData


@dataclass
class ApiResult(Generic[T]):
    """
    Outcome of one API call.

    Attributes:
        ok: Whether the call succeeded
        value: Decoded payload on success, None on failure
        error: Human readable failure description
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "ApiResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "ApiResult[T]":
        return cls(ok=False, error=error)


def players_from_store(data: Optional[List[Dict[str, Any]]]) -> List[Player]:
    """Rebuild players held in a dcc.Store."""
    return [Player.model_validate(item) for item in data or []]
