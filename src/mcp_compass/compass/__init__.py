"""COMPASS recommendation API integration."""

from .client import CompassClient
from .config import COMPASS_API_BASE, CompassConfig
from .formatting import NO_RESULTS_MESSAGE, format_server, format_servers
from .models import ServerDescriptor

__all__ = [
    "COMPASS_API_BASE",
    "CompassClient",
    "CompassConfig",
    "NO_RESULTS_MESSAGE",
    "ServerDescriptor",
    "format_server",
    "format_servers",
]
