from unittest.mock import Mock

import pytest

from roster.core.models import ApiResult, Player


@pytest.fixture
def players():
    return [
        Player(id=7, name="Rex", breed="Lab", imageUrl="http://x/rex.png", teamId=3),
        Player(id=8, name="Bella", breed="Poodle", imageUrl="http://x/bella.png"),
        Player(id=9, name="Fido", breed="Pug", imageUrl="http://x/fido.png", teamId=""),
    ]


@pytest.fixture
def client(players):
    """Stand-in for RosterApiClient."""
    mock = Mock()
    mock.fetch_all_players.return_value = ApiResult.success(players)
    mock.remove_player.return_value = ApiResult.success()
    mock.add_new_player.return_value = ApiResult.success({"data": {"newPlayer": {}}})
    return mock
