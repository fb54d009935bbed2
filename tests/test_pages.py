import pytest

from roster.components.widgets.base import WidgetConfig, WidgetFactory
from roster.components.widgets.player_form import (
    FORM_ID,
    NewPlayerFormWidget,
    render_new_player_form,
)
from roster.core.controller import RosterController
from roster.pages.base import PageBase
from roster.pages.roster.page import (
    CONTENT_ID,
    FORM_CONTAINER_ID,
    RosterPage,
)

from helpers import find_by_class, find_by_type, iter_components


def _ids(node):
    return [getattr(c, "id", None) for c in iter_components(node)]


def test_page_loads_messages_and_form_ids():
    page = RosterPage()

    assert page.messages["player_added"] == "Puppy successfully added to roster!"
    assert page.form_input_ids == [
        "new-player-name",
        "new-player-breed",
        "new-player-team",
        "new-player-image",
    ]


def test_build_places_mount_points_once(client):
    page = RosterPage()
    initial = RosterController(client, page.messages).init()

    layout = page.build(initial)

    ids = _ids(layout)
    assert ids.count(CONTENT_ID) == 1
    assert ids.count(FORM_CONTAINER_ID) == 1
    assert ids.count(FORM_ID) == 1
    assert len(find_by_class(layout, "player-card")) == 3


def test_form_has_four_empty_text_inputs_and_submit():
    form = render_new_player_form()

    inputs = find_by_type(form, "Input")
    assert len(inputs) == 4
    assert all(i.type == "text" and i.value == "" for i in inputs)
    assert [i.placeholder for i in inputs] == [
        "Enter player name",
        "Enter player breed",
        "Enter player team",
        "Enter player image URL",
    ]
    (submit,) = find_by_type(form, "Button")
    assert submit.type == "submit"
    assert form.prevent_default_on_submit is True


def test_form_widget_rejects_unexpected_fields():
    config = WidgetConfig(
        id="form",
        title="Form",
        widget_type="player_form",
        properties={"fields": [{"key": "name", "id": "n"}]},
    )

    with pytest.raises(ValueError):
        NewPlayerFormWidget(config)


def test_factory_rejects_unknown_type():
    with pytest.raises(ValueError):
        WidgetFactory.create(WidgetConfig(id="x", title="X", widget_type="chart"))


def test_missing_section_is_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("page:\n  title: Roster\nwidgets: []\n", encoding="utf-8")

    with pytest.raises(ValueError):
        RosterPage(config_path=str(path))


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        RosterPage(config_path=str(tmp_path / "missing.yaml"))


def test_page_base_requires_build():
    with pytest.raises(TypeError):
        PageBase(page_id="roster", title="Roster")


def test_factory_creates_configured_widget():
    config = WidgetConfig(id="roster-notification", title="N", widget_type="notification")

    widget = WidgetFactory.create(config)

    assert widget.render().id == "roster-notification"
