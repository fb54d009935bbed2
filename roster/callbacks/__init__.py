"""Registration of all callbacks."""
import logging

logger = logging.getLogger(__name__)


def register_all_callbacks(app, controller, form_input_ids):
    """Register all callbacks from different modules."""

    # Import and registration of each module
    from . import callbacks

    callbacks.register_callbacks(app, controller, form_input_ids)

    logger.info("✅ All callbacks registered successfully")
