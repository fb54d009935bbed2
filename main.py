"""Web application layout and callbacks for the Puppy Bowl roster manager."""
import dash
import dash_bootstrap_components as dbc

from roster.callbacks import register_all_callbacks
from roster.core import settings
from roster.core.api_client import api_client
from roster.core.controller import RosterController
from roster.core.logging_config import logger
from roster.pages.roster import roster_page_instance


def initialize_application() -> RosterController:
    """Initialize the application"""

    logger.info("🚀 Initialization of application...")
    logger.info(f"🌐 Players API: {api_client.players_url}")

    controller = RosterController(
        client=api_client, messages=roster_page_instance.messages
    )

    logger.info("✅ Application initialized successfully")
    return controller


roster_controller = initialize_application()

app = dash.Dash(
    __name__,
    title=roster_page_instance.title,
    external_stylesheets=[dbc.themes.BOOTSTRAP],
    suppress_callback_exceptions=True,
)
server = app.server


def serve_layout():
    """Fetch the roster and lay out the page; runs on every page load."""
    return roster_page_instance.build(roster_controller.init())


app.layout = serve_layout

register_all_callbacks(app, roster_controller, roster_page_instance.form_input_ids)


# Run
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host="0.0.0.0",  # listen on all interfaces
        port=settings.PORT,
    )
