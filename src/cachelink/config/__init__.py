"""
Client configuration models.

Provides the base settings shared by every topology, the single server
configuration and the frozen snapshots built from it.
"""

from .base import BaseConfig, Codec
from .config import Config
from .single_server import SingleServerConfig
from .snapshot import BaseServerSettings, SingleServerSettings

__all__ = [
    "BaseConfig",
    "Codec",
    "Config",
    "SingleServerConfig",
    "BaseServerSettings",
    "SingleServerSettings",
]
