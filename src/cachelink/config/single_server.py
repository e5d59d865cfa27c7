"""
Single server configuration.

Describes how a client connects to one server: its address, the sizes of the
command and subscription connection pools, the database index and whether the
address should be re-resolved periodically to follow DNS changes.

Example::

    config = (
        SingleServerConfig()
        .set_address("rediss://cache.example.com:6380")
        .set_database(3)
        .set_connection_pool_size(128)
    )
    snapshot = config.build(validate=True)
"""

from __future__ import annotations

import logging
from typing import Any, Self

from ..address import EndpointAddress, parse_address
from .base import BaseConfig
from .snapshot import SingleServerSettings, freeze_settings

logger = logging.getLogger(__name__)


class SingleServerConfig(BaseConfig):
    """
    Connection settings for a single server endpoint.

    Setters return ``self`` for chaining and apply values as given; range
    checks only happen in ``validate()`` or ``build(validate=True)``.
    The address is sticky: setting it to ``None`` or an empty string keeps
    the current value.
    """

    def __init__(self, config: SingleServerConfig | None = None):
        """
        Initialize with defaults, or clone ``config``.

        Cloning goes through the setters, so it applies the same rules as
        building a configuration by hand.

        Args:
            config: Source configuration to copy
        """
        super().__init__(config)
        self._address: EndpointAddress | None = None
        self._connection_pool_size = 64
        self._connection_minimum_idle_size = 10
        self._subscription_connection_pool_size = 50
        self._subscription_connection_minimum_idle_size = 1
        self._database = 0
        self._dns_monitoring = True
        self._dns_monitoring_interval = 5000

        if config is not None:
            self._set_address(config.address)
            self.set_connection_pool_size(config.connection_pool_size)
            self.set_subscription_connection_pool_size(config.subscription_connection_pool_size)
            self.set_dns_monitoring(config.dns_monitoring)
            self.set_dns_monitoring_interval(config.dns_monitoring_interval)
            self.set_subscription_connection_minimum_idle_size(
                config.subscription_connection_minimum_idle_size
            )
            self.set_connection_minimum_idle_size(config.connection_minimum_idle_size)
            self.set_database(config.database)
            logger.debug(f"Cloned single server config -> {self._address}")

    # ── Address ──────────────────────────────────────────────────────────

    @property
    def address(self) -> EndpointAddress | None:
        """The server address, or ``None`` if never set."""
        return self._address

    def set_address(self, address: str | None) -> Self:
        """
        Set the server address.

        Args:
            address: ``host:port`` or a ``redis://`` / ``rediss://`` URI.
                ``None`` or blank text leaves the current address unchanged.

        Raises:
            MalformedAddressError: If the text cannot be parsed. The current
                address is kept.
        """
        if address is None or not address.strip():
            logger.debug("Ignoring empty server address")
            return self

        self._address = parse_address(address)
        logger.debug(f"Server address set -> {self._address}")
        return self

    def _set_address(self, address: EndpointAddress | None) -> None:
        # Raw assignment for already parsed addresses (clone path).
        if address is not None:
            self._address = address

    # ── Command connection pool ──────────────────────────────────────────

    @property
    def connection_pool_size(self) -> int:
        return self._connection_pool_size

    def set_connection_pool_size(self, connection_pool_size: int) -> Self:
        """Maximum number of command connections. Default is ``64``."""
        self._connection_pool_size = connection_pool_size
        return self

    @property
    def connection_minimum_idle_size(self) -> int:
        return self._connection_minimum_idle_size

    def set_connection_minimum_idle_size(self, connection_minimum_idle_size: int) -> Self:
        """Command connections kept open while unused. Default is ``10``."""
        self._connection_minimum_idle_size = connection_minimum_idle_size
        return self

    # ── Subscription connection pool ─────────────────────────────────────

    @property
    def subscription_connection_pool_size(self) -> int:
        return self._subscription_connection_pool_size

    def set_subscription_connection_pool_size(self, subscription_connection_pool_size: int) -> Self:
        """Maximum number of subscription connections. Default is ``50``."""
        self._subscription_connection_pool_size = subscription_connection_pool_size
        return self

    @property
    def subscription_connection_minimum_idle_size(self) -> int:
        return self._subscription_connection_minimum_idle_size

    def set_subscription_connection_minimum_idle_size(
        self, subscription_connection_minimum_idle_size: int
    ) -> Self:
        """Subscription connections kept open while unused. Default is ``1``."""
        self._subscription_connection_minimum_idle_size = subscription_connection_minimum_idle_size
        return self

    # ── Database ─────────────────────────────────────────────────────────

    @property
    def database(self) -> int:
        return self._database

    def set_database(self, database: int) -> Self:
        """Database index selected on each connection. Default is ``0``."""
        self._database = database
        return self

    # ── DNS monitoring ───────────────────────────────────────────────────

    @property
    def dns_monitoring(self) -> bool:
        return self._dns_monitoring

    def set_dns_monitoring(self, dns_monitoring: bool) -> Self:
        """
        Re-resolve the server hostname periodically to detect address changes.

        Useful when the address is a DNS alias that moves to a new primary
        on failover. Default is ``True``.
        """
        self._dns_monitoring = dns_monitoring
        return self

    @property
    def dns_monitoring_interval(self) -> int:
        return self._dns_monitoring_interval

    def set_dns_monitoring_interval(self, dns_monitoring_interval: int) -> Self:
        """
        Milliseconds between two DNS checks when ``dns_monitoring`` is on.

        Default is ``5000``.
        """
        self._dns_monitoring_interval = dns_monitoring_interval
        return self

    # ── Snapshot & validation ────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "address": self._address,
                "connection_pool_size": self._connection_pool_size,
                "connection_minimum_idle_size": self._connection_minimum_idle_size,
                "subscription_connection_pool_size": self._subscription_connection_pool_size,
                "subscription_connection_minimum_idle_size": (
                    self._subscription_connection_minimum_idle_size
                ),
                "database": self._database,
                "dns_monitoring": self._dns_monitoring,
                "dns_monitoring_interval": self._dns_monitoring_interval,
            }
        )
        return data

    def validate(self) -> Self:
        """
        Check the configuration for values a connection pool cannot use.

        Setters never perform these checks; call this before publishing the
        configuration to opt into them.

        Raises:
            ConfigValidationError: On the first category of violated rules
        """
        freeze_settings(self.to_dict(), validate=True)
        return self

    def build(self, validate: bool = False) -> SingleServerSettings:
        """
        Freeze the current values into an immutable snapshot.

        Args:
            validate: Run the same checks as ``validate()`` first

        Returns:
            A frozen ``SingleServerSettings`` independent of this object

        Raises:
            ConfigValidationError: If ``validate`` is set and a rule is violated
        """
        settings = freeze_settings(self.to_dict(), validate=validate)
        logger.debug(f"Built single server settings -> {self._address}")
        return settings


__all__ = ["SingleServerConfig"]
