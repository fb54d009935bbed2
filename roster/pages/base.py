"""
Base class for configuration-driven pages.

A page loads its YAML configuration, creates its widgets through the
WidgetFactory and renders them into a layout.
"""
import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import yaml
from dash import html

from roster.components.widgets.base import BaseWidget, WidgetConfig, WidgetFactory

# Get module logger
logger = logging.getLogger(__name__)


class PageBase(ABC):
    """
    Base class for configuration-driven pages.

    This class handles:
    - Loading configuration from YAML files
    - Creating widgets from configuration
    - Exposing page texts to the callbacks

    Subclasses implement `build()`.
    """

    def __init__(
        self,
        page_id: str,
        title: str,
        config_path: Optional[str] = None,
    ):
        """
        Initialize a configuration-driven page.

        Args:
            page_id: Unique identifier for the page
            title: Display title for the page
            config_path: Path to configuration file (defaults to pages/{page_id}/config.yaml)
        """
        self.page_id = page_id
        self.title = title
        self.config_path = config_path or self._get_default_config_path()
        self.widgets: Dict[str, BaseWidget] = {}
        self._config: Optional[Dict[str, Any]] = None

        logger.info(f"[PageBase:{self.page_id}] Initialized page '{title}'")

    def _get_default_config_path(self) -> str:
        current_dir = os.path.dirname(os.path.abspath(__file__))
        return os.path.join(current_dir, self.page_id, "config.yaml")

    def _load_config(self, config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load page configuration from YAML file.

        Args:
            config_path: Path to configuration file

        Returns:
            Dict[str, Any]: Page configuration dictionary

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            ValueError: If configuration is invalid
        """
        path = config_path or self.config_path

        logger.info(f"[PageBase:{self.page_id}] Loading configuration from: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)

            if not isinstance(config, dict):
                raise ValueError("Configuration must be a mapping")
            for section in ("page", "messages", "widgets"):
                if section not in config:
                    raise ValueError(f"Configuration missing '{section}' section")

            if "title" in config["page"]:
                self.title = config["page"]["title"]

            self._config = config
            logger.info(f"[PageBase:{self.page_id}] Configuration loaded successfully")

            return config

        except FileNotFoundError:
            logger.error(
                f"[PageBase:{self.page_id}] Configuration file not found: {path}"
            )
            raise
        except yaml.YAMLError as e:
            logger.error(
                f"[PageBase:{self.page_id}] Invalid YAML in configuration: {e}"
            )
            raise
        except ValueError as e:
            logger.error(f"[PageBase:{self.page_id}] Invalid configuration: {e}")
            raise

    def _create_widgets_from_config(self):
        """Create widget instances from configuration."""
        if not self._config:
            raise RuntimeError("Configuration not loaded. Call _load_config() first.")

        for widget_config in self._config["widgets"]:
            widget = WidgetFactory.create(WidgetConfig.from_dict(widget_config))
            self.widgets[widget.config.id] = widget

        logger.info(
            f"[PageBase:{self.page_id}] Created {len(self.widgets)} widgets successfully"
        )

    @property
    def messages(self) -> Dict[str, str]:
        if not self._config:
            raise RuntimeError("Configuration not loaded. Call _load_config() first.")
        return dict(self._config["messages"])

    def render_widget(self, widget_id: str) -> html.Div:
        return self.widgets[widget_id].render()

    @abstractmethod
    def build(self, *args, **kwargs) -> html.Div:
        """Lay out the page."""
        pass
