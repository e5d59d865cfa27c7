"""
Top-level client configuration.

``Config`` owns the server configuration a client is started with. Only the
single server topology is provided here.
"""

from __future__ import annotations

import logging
from typing import Self

from .single_server import SingleServerConfig

logger = logging.getLogger(__name__)


class Config:
    """
    Client configuration root.

    Usage:
        config = Config()
        config.use_single_server().set_address("127.0.0.1:6379").set_database(1)
        client_config = Config(config)  # independent copy handed to the client
    """

    def __init__(self, config: Config | None = None):
        """
        Initialize with defaults, or clone ``config``.

        Args:
            config: Source configuration; its server configuration is cloned
        """
        self._single_server_config: SingleServerConfig | None = None
        self._threads = 16
        self._lock_watchdog_timeout = 30 * 1000
        self._keep_pub_sub_order = True

        if config is not None:
            self.set_threads(config.threads)
            self.set_lock_watchdog_timeout(config.lock_watchdog_timeout)
            self.set_keep_pub_sub_order(config.keep_pub_sub_order)
            if config.single_server_config is not None:
                self._single_server_config = SingleServerConfig(config.single_server_config)

    def use_single_server(self) -> SingleServerConfig:
        """
        Return the single server configuration, creating it on first use.

        Returns:
            The configuration to populate with chained setters
        """
        if self._single_server_config is None:
            self._single_server_config = SingleServerConfig()
        else:
            logger.warning("use_single_server() called again, returning the existing configuration")
        return self._single_server_config

    @property
    def single_server_config(self) -> SingleServerConfig | None:
        return self._single_server_config

    def is_single_server_config(self) -> bool:
        return self._single_server_config is not None

    @property
    def threads(self) -> int:
        return self._threads

    def set_threads(self, threads: int) -> Self:
        """Worker threads shared by the client's services. Default is ``16``."""
        self._threads = threads
        return self

    @property
    def lock_watchdog_timeout(self) -> int:
        return self._lock_watchdog_timeout

    def set_lock_watchdog_timeout(self, lock_watchdog_timeout: int) -> Self:
        """
        Lease, in milliseconds, given to locks acquired without an explicit one.

        The lease is extended while the owner is alive. Default is ``30000``.
        """
        self._lock_watchdog_timeout = lock_watchdog_timeout
        return self

    @property
    def keep_pub_sub_order(self) -> bool:
        return self._keep_pub_sub_order

    def set_keep_pub_sub_order(self, keep_pub_sub_order: bool) -> Self:
        """Deliver pub/sub messages in arrival order. Default is ``True``."""
        self._keep_pub_sub_order = keep_pub_sub_order
        return self

    def copy(self) -> Self:
        return type(self)(self)


__all__ = ["Config"]
