"""
Roster page: the content region, the form container and the stores the
callbacks share.
"""
import logging
from typing import List, Optional

from dash import dcc, html

from roster.core.controller import ViewUpdate
from roster.pages.base import PageBase

# Get module logger
logger = logging.getLogger(__name__)

CONTENT_ID = "roster-content"
FORM_CONTAINER_ID = "playerform"
PLAYERS_STORE_ID = "players-store"
VIEW_STORE_ID = "view-store"
NOTIFICATION_ID = "roster-notification"
FORM_WIDGET_ID = "new-player-form-widget"


class RosterPage(PageBase):
    """
    Single page of the roster manager.
    """

    def __init__(self, config_path: Optional[str] = None):
        super().__init__(page_id="roster", title="Roster", config_path=config_path)
        self._load_config()
        self._create_widgets_from_config()

    @property
    def form_input_ids(self) -> List[str]:
        return self.widgets[FORM_WIDGET_ID].input_ids

    def build(self, initial: ViewUpdate) -> html.Div:
        """
        Lay out the page around the first render.

        Args:
            initial: Result of RosterController.init()
        """
        return html.Div(
            [
                html.Div(
                    [html.H1(self.title, className="page-title")],
                    className="page-title-bar",
                ),
                self.render_widget(NOTIFICATION_ID),
                html.Main(initial.content, id=CONTENT_ID, className="roster-content"),
                html.Div(
                    self.render_widget(FORM_WIDGET_ID),
                    id=FORM_CONTAINER_ID,
                ),
                dcc.Store(id=PLAYERS_STORE_ID, data=initial.players or []),
                dcc.Store(id=VIEW_STORE_ID, data=initial.view),
            ],
            className="page",
        )


def create_roster_page() -> RosterPage:
    """
    Factory function to create a RosterPage instance.

    Returns:
        RosterPage: A new instance of the RosterPage class
    """
    return RosterPage()


roster_page_instance = create_roster_page()
