"""MCP tool definitions for app publishing."""

from app_publisher.config import Settings
from app_publisher.tools.assets import create_asset_tools
from app_publisher.tools.maestro import create_maestro_tools
from app_publisher.tools.publishing import create_publishing_tools


def create_tools(settings: Settings) -> list:
    """All tools, bound to one process-wide ``settings`` object."""
    return [
        *create_asset_tools(settings),
        *create_publishing_tools(settings),
        *create_maestro_tools(settings),
    ]


__all__ = ["create_tools"]
