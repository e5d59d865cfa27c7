"""
Base configuration shared by every server topology.

Holds timeouts, retry policy, credentials and codec selection. Topology
specific configurations (see ``SingleServerConfig``) inherit from
``BaseConfig`` and must call ``BaseConfig.__init__(self, source)`` from their
own copy constructor so inherited fields are cloned.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Self


class Codec(str, Enum):
    """Payload codec used to encode values sent to the server."""

    JSON = "json"
    STRING = "string"
    BYTES = "bytes"


class BaseConfig:
    """
    Settings common to all server topologies.

    All setters assign unconditionally and return ``self`` so calls can be
    chained. Values are read through read-only properties of the same name.
    All durations are in milliseconds.
    """

    def __init__(self, config: BaseConfig | None = None):
        """
        Initialize with defaults, or clone ``config``.

        Args:
            config: Source configuration to copy inherited fields from
        """
        self._idle_connection_timeout = 10000
        self._ping_timeout = 1000
        self._connect_timeout = 10000
        self._timeout = 3000
        self._retry_attempts = 3
        self._retry_interval = 1500
        self._reconnection_timeout = 3000
        self._failed_attempts = 3
        self._password: str | None = None
        self._subscriptions_per_connection = 5
        self._client_name: str | None = None
        self._ssl_enable_endpoint_identification = True
        self._codec = Codec.JSON

        if config is not None:
            self.set_idle_connection_timeout(config.idle_connection_timeout)
            self.set_ping_timeout(config.ping_timeout)
            self.set_connect_timeout(config.connect_timeout)
            self.set_timeout(config.timeout)
            self.set_retry_attempts(config.retry_attempts)
            self.set_retry_interval(config.retry_interval)
            self.set_reconnection_timeout(config.reconnection_timeout)
            self.set_failed_attempts(config.failed_attempts)
            self.set_password(config.password)
            self.set_subscriptions_per_connection(config.subscriptions_per_connection)
            self.set_client_name(config.client_name)
            self.set_ssl_enable_endpoint_identification(config.ssl_enable_endpoint_identification)
            self.set_codec(config.codec)

    # ── Timeouts ─────────────────────────────────────────────────────────

    @property
    def idle_connection_timeout(self) -> int:
        return self._idle_connection_timeout

    def set_idle_connection_timeout(self, idle_connection_timeout: int) -> Self:
        """
        Close a pooled connection once it has been idle this long.

        Only connections above the minimum idle size are closed. Default is ``10000``.
        """
        self._idle_connection_timeout = idle_connection_timeout
        return self

    @property
    def ping_timeout(self) -> int:
        return self._ping_timeout

    def set_ping_timeout(self, ping_timeout: int) -> Self:
        """Timeout for the PING sent when a connection is opened. Default is ``1000``."""
        self._ping_timeout = ping_timeout
        return self

    @property
    def connect_timeout(self) -> int:
        return self._connect_timeout

    def set_connect_timeout(self, connect_timeout: int) -> Self:
        """Timeout while establishing a connection. Default is ``10000``."""
        self._connect_timeout = connect_timeout
        return self

    @property
    def timeout(self) -> int:
        return self._timeout

    def set_timeout(self, timeout: int) -> Self:
        """
        Server response timeout, counted from the moment a command was sent.

        Default is ``3000``.
        """
        self._timeout = timeout
        return self

    # ── Retry policy ─────────────────────────────────────────────────────

    @property
    def retry_attempts(self) -> int:
        return self._retry_attempts

    def set_retry_attempts(self, retry_attempts: int) -> Self:
        """
        Resend a command this many times if it could not be sent.

        Once exhausted the command fails. Default is ``3``.
        """
        self._retry_attempts = retry_attempts
        return self

    @property
    def retry_interval(self) -> int:
        return self._retry_interval

    def set_retry_interval(self, retry_interval: int) -> Self:
        """Delay between two send attempts. Default is ``1500``."""
        self._retry_interval = retry_interval
        return self

    @property
    def reconnection_timeout(self) -> int:
        return self._reconnection_timeout

    def set_reconnection_timeout(self, reconnection_timeout: int) -> Self:
        """Delay before reconnecting after a connection was lost. Default is ``3000``."""
        self._reconnection_timeout = reconnection_timeout
        return self

    @property
    def failed_attempts(self) -> int:
        return self._failed_attempts

    def set_failed_attempts(self, failed_attempts: int) -> Self:
        """
        Consecutive failed commands before the server is marked as failed.

        Default is ``3``.
        """
        self._failed_attempts = failed_attempts
        return self

    # ── Connection identity ──────────────────────────────────────────────

    @property
    def password(self) -> str | None:
        return self._password

    def set_password(self, password: str | None) -> Self:
        """Password for server authentication. Default is ``None``."""
        self._password = password
        return self

    @property
    def subscriptions_per_connection(self) -> int:
        return self._subscriptions_per_connection

    def set_subscriptions_per_connection(self, subscriptions_per_connection: int) -> Self:
        """Subscriptions limit per subscription connection. Default is ``5``."""
        self._subscriptions_per_connection = subscriptions_per_connection
        return self

    @property
    def client_name(self) -> str | None:
        return self._client_name

    def set_client_name(self, client_name: str | None) -> Self:
        """Name sent with ``CLIENT SETNAME`` on each new connection. Default is ``None``."""
        self._client_name = client_name
        return self

    @property
    def ssl_enable_endpoint_identification(self) -> bool:
        return self._ssl_enable_endpoint_identification

    def set_ssl_enable_endpoint_identification(self, enabled: bool) -> Self:
        """Verify the server hostname during the TLS handshake. Default is ``True``."""
        self._ssl_enable_endpoint_identification = enabled
        return self

    @property
    def codec(self) -> Codec:
        return self._codec

    def set_codec(self, codec: Codec | str) -> Self:
        """
        Select the payload codec.

        Args:
            codec: A ``Codec`` member or its string value

        Raises:
            ValueError: If ``codec`` is not a known codec name
        """
        self._codec = Codec(codec)
        return self

    # ── Introspection ────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Return every field as a plain mapping."""
        return {
            "idle_connection_timeout": self._idle_connection_timeout,
            "ping_timeout": self._ping_timeout,
            "connect_timeout": self._connect_timeout,
            "timeout": self._timeout,
            "retry_attempts": self._retry_attempts,
            "retry_interval": self._retry_interval,
            "reconnection_timeout": self._reconnection_timeout,
            "failed_attempts": self._failed_attempts,
            "password": self._password,
            "subscriptions_per_connection": self._subscriptions_per_connection,
            "client_name": self._client_name,
            "ssl_enable_endpoint_identification": self._ssl_enable_endpoint_identification,
            "codec": self._codec,
        }

    def copy(self) -> Self:
        """Return an independent clone built through the copy constructor."""
        return type(self)(self)

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        fields = self.to_dict()
        if fields.get("password") is not None:
            fields["password"] = "***"
        body = ", ".join(f"{key}={value!r}" for key, value in fields.items())
        return f"{type(self).__name__}({body})"


__all__ = ["BaseConfig", "Codec"]
