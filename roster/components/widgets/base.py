"""
Base widget classes and configuration models.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict

from dash import html

# Get module logger
logger = logging.getLogger(__name__)


@dataclass
class WidgetConfig:
    """
    Configuration model for a page widget.

    Attributes:
        id: Unique identifier for the widget (also its Dash component id)
        title: Display title for the widget
        widget_type: Type of widget ('player_form', 'notification', ...)
        properties: Additional widget properties
    """

    id: str
    title: str
    widget_type: str
    properties: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "WidgetConfig":
        return cls(
            id=config_dict["id"],
            title=config_dict.get("title", config_dict["id"]),
            widget_type=config_dict["type"],
            properties=config_dict.get("properties") or {},
        )


class BaseWidget(ABC):
    """
    Abstract base class for all page widgets.

    A widget turns its configuration into a Dash component tree. Widgets
    never talk to the API; callbacks feed them data.
    """

    def __init__(self, config: WidgetConfig):
        """
        Initialize the widget with configuration.

        Args:
            config: Widget configuration object
        """
        self.config = config
        logger.debug(f"Initialized BaseWidget: id='{config.id}'")

    @abstractmethod
    def render(self) -> html.Div:
        """
        Render widget as Dash components.

        Returns:
            html.Div: Complete widget structure as Dash components
        """
        pass


class WidgetFactory:
    """
    Factory for creating widget instances from configuration.
    """

    @staticmethod
    def create(config: WidgetConfig) -> BaseWidget:
        """
        Create a widget instance based on its type.

        Args:
            config: Widget configuration

        Returns:
            BaseWidget: Instance of the appropriate widget class

        Raises:
            ValueError: If the widget type is not recognized
        """
        # Import here to avoid circular imports
        from .notification import NotificationWidget
        from .player_form import NewPlayerFormWidget

        widget_map = {
            "player_form": NewPlayerFormWidget,
            "notification": NotificationWidget,
        }

        widget_class = widget_map.get(config.widget_type)
        if not widget_class:
            logger.error(f"[WidgetFactory] Unknown widget type: {config.widget_type}")
            raise ValueError(
                f"[WidgetFactory] Unknown widget type: {config.widget_type}"
            )

        logger.info(
            "[WidgetFactory] "
            f"Creating widget: type='{config.widget_type}', "
            f"id='{config.id}', class='{widget_class.__name__}'"
        )

        try:
            return widget_class(config)
        except Exception as e:
            logger.error(
                f"[WidgetFactory] Error creating widget '{config.id}': {e}",
                exc_info=True,
            )
            raise
