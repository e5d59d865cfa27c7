"""
cachelink - Connection configuration for Redis protocol clients.

Usage:
    from cachelink import Config

    config = Config()
    (
        config.use_single_server()
        .set_address("rediss://cache.example.com:6380")
        .set_database(3)
        .set_connection_pool_size(128)
    )
    settings = config.single_server_config.build(validate=True)
"""

from .address import DEFAULT_SCHEME, SSL_SCHEME, EndpointAddress, parse_address
from .config import (
    BaseConfig,
    BaseServerSettings,
    Codec,
    Config,
    SingleServerConfig,
    SingleServerSettings,
)
from .exceptions import (
    CacheLinkError,
    ConfigError,
    ConfigValidationError,
    MalformedAddressError,
)

__version__ = "0.1.0"
__all__ = [
    # Address
    "DEFAULT_SCHEME",
    "SSL_SCHEME",
    "EndpointAddress",
    "parse_address",
    # Configuration
    "BaseConfig",
    "Codec",
    "Config",
    "SingleServerConfig",
    # Snapshots
    "BaseServerSettings",
    "SingleServerSettings",
    # Exceptions
    "CacheLinkError",
    "ConfigError",
    "ConfigValidationError",
    "MalformedAddressError",
]
