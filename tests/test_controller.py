import threading

from roster.core.controller import DETAIL_VIEW, LIST_VIEW, RosterController
from roster.core.models import ApiResult, NewPlayer

from helpers import find_by_class, texts


def _held(players):
    return [p.to_store() for p in players]


def test_init_renders_full_roster(client, players):
    controller = RosterController(client)

    update = controller.init()

    client.fetch_all_players.assert_called_once_with()
    assert len(find_by_class(update.content, "player-card")) == 3
    assert update.view == {"name": LIST_VIEW}
    assert update.players == _held(players)
    assert update.notification is None


def test_init_with_failed_fetch_renders_empty_state(client):
    client.fetch_all_players.return_value = ApiResult.failure("Could not fetch players")
    controller = RosterController(client, messages={"empty": "No puppies"})

    update = controller.init()

    assert find_by_class(update.content, "player-card") == []
    assert "No puppies" in texts(update.content)
    assert "Could not fetch players" in texts(update.content)
    assert update.players == []


def test_show_details_uses_held_players(client, players):
    controller = RosterController(client)

    update = controller.show_details(8, _held(players))

    assert update.view == {"name": DETAIL_VIEW, "player_id": 8}
    cards = find_by_class(update.content, "player-card")
    assert len(cards) == 1
    assert "Bella" in texts(cards[0])
    assert "Rex" not in texts(cards[0])
    assert update.players is None
    # No network call
    assert client.method_calls == []


def test_show_details_unknown_player(client, players):
    assert RosterController(client).show_details(99, _held(players)) is None


def test_remove_deletes_then_refetches_once(client, players):
    remaining = [p for p in players if p.id != 7]
    client.fetch_all_players.return_value = ApiResult.success(remaining)
    controller = RosterController(client, messages={"player_removed": "Cut!"})

    update = controller.remove(7)

    client.remove_player.assert_called_once_with(7)
    client.fetch_all_players.assert_called_once_with()
    names = texts(update.content)
    assert "Rex" not in names
    assert "Bella" in names
    assert len(find_by_class(update.content, "player-card")) == 2
    assert update.notification.color == "success"
    assert update.notification.children == "Cut!"
    assert not update.clear_form


def test_remove_failure_shows_error_notification(client):
    client.remove_player.return_value = ApiResult.failure("Could not remove player #7")

    update = RosterController(client).remove(7)

    assert update.notification.color == "danger"
    assert update.notification.children == "Could not remove player #7"
    client.fetch_all_players.assert_called_once_with()


def test_submit_creates_refetches_and_clears_form(client):
    controller = RosterController(client)

    update = controller.submit("Rex", "Lab", "", "http://x/y.png")

    client.add_new_player.assert_called_once_with(
        NewPlayer(name="Rex", breed="Lab", teamId="", imageUrl="http://x/y.png")
    )
    payload = client.add_new_player.call_args.args[0].to_payload()
    assert payload == {
        "name": "Rex",
        "breed": "Lab",
        "teamId": "",
        "imageUrl": "http://x/y.png",
    }
    client.fetch_all_players.assert_called_once_with()
    assert update.view == {"name": LIST_VIEW}
    assert update.clear_form
    assert update.notification.color == "success"


def test_submit_sends_empty_strings_for_unfilled_inputs(client):
    RosterController(client).submit(None, None, None, None)

    sent = client.add_new_player.call_args.args[0]
    assert sent.to_payload() == {"name": "", "breed": "", "teamId": "", "imageUrl": ""}


def test_submit_failure_has_no_success_notification(client):
    client.add_new_player.return_value = ApiResult.failure("Could not add player 'Rex'")

    update = RosterController(client).submit("Rex", "Lab", "", "")

    assert update.notification.color == "danger"
    assert update.clear_form


def test_back_refetches_roster(client):
    update = RosterController(client).back()

    client.fetch_all_players.assert_called_once_with()
    assert update.view == {"name": LIST_VIEW}


def test_mutations_are_serialized(client, players):
    in_flight = []
    overlaps = []
    release = threading.Event()

    def slow_remove(player_id):
        in_flight.append(player_id)
        if len(in_flight) > 1:
            overlaps.append(player_id)
        release.wait(timeout=1)
        in_flight.remove(player_id)
        return ApiResult.success()

    client.remove_player.side_effect = slow_remove
    controller = RosterController(client)

    threads = [
        threading.Thread(target=controller.remove, args=(pid,)) for pid in (7, 8)
    ]
    for t in threads:
        t.start()
    release.set()
    for t in threads:
        t.join()

    assert overlaps == []
    assert client.remove_player.call_count == 2
    assert client.fetch_all_players.call_count == 2
