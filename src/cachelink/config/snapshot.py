"""
Immutable configuration snapshots.

``SingleServerConfig.build()`` freezes a configuration into a
``SingleServerSettings`` model that a connection manager can share between
workers. Building is permissive unless validation is requested, in which
case the field constraints and cross-field rules below are enforced.
"""

from __future__ import annotations

import logging
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..address import EndpointAddress
from ..exceptions import ConfigValidationError
from .base import Codec

logger = logging.getLogger(__name__)


class BaseServerSettings(BaseModel):
    """Frozen counterpart of ``BaseConfig``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    idle_connection_timeout: int = Field(ge=0)
    ping_timeout: int = Field(ge=0)
    connect_timeout: int = Field(ge=0)
    timeout: int = Field(ge=0)
    retry_attempts: int = Field(ge=0)
    retry_interval: int = Field(ge=0)
    reconnection_timeout: int = Field(ge=0)
    failed_attempts: int = Field(ge=1)
    password: str | None
    subscriptions_per_connection: int = Field(ge=1)
    client_name: str | None
    ssl_enable_endpoint_identification: bool
    codec: Codec


class SingleServerSettings(BaseServerSettings):
    """Frozen counterpart of ``SingleServerConfig``."""

    address: EndpointAddress | None
    connection_pool_size: int = Field(ge=1)
    connection_minimum_idle_size: int = Field(ge=0)
    subscription_connection_pool_size: int = Field(ge=1)
    subscription_connection_minimum_idle_size: int = Field(ge=0)
    database: int = Field(ge=0)
    dns_monitoring: bool
    dns_monitoring_interval: int

    @model_validator(mode="after")
    def _check_consistency(self) -> Self:
        if self.address is None:
            raise ValueError("server address is not set")
        if self.connection_pool_size < self.connection_minimum_idle_size:
            raise ValueError(
                f"connection_pool_size ({self.connection_pool_size}) is smaller than "
                f"connection_minimum_idle_size ({self.connection_minimum_idle_size})"
            )
        if self.subscription_connection_pool_size < self.subscription_connection_minimum_idle_size:
            raise ValueError(
                f"subscription_connection_pool_size ({self.subscription_connection_pool_size}) "
                f"is smaller than subscription_connection_minimum_idle_size "
                f"({self.subscription_connection_minimum_idle_size})"
            )
        if self.dns_monitoring and self.dns_monitoring_interval <= 0:
            raise ValueError(
                f"dns_monitoring_interval must be > 0 when dns_monitoring is enabled, "
                f"got {self.dns_monitoring_interval}"
            )
        return self


def freeze_settings(data: dict[str, Any], validate: bool = False) -> SingleServerSettings:
    """
    Build a ``SingleServerSettings`` snapshot from a field mapping.

    Args:
        data: Output of ``SingleServerConfig.to_dict()``
        validate: Enforce the field constraints and consistency rules

    Returns:
        The frozen snapshot

    Raises:
        ConfigValidationError: If ``validate`` is set and a rule is violated
    """
    if not validate:
        return SingleServerSettings.model_construct(**data)

    try:
        return SingleServerSettings.model_validate(data)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        first = errors[0]
        location = ".".join(str(part) for part in first["loc"])
        message = f"{location}: {first['msg']}" if location else first["msg"]
        logger.debug(f"Configuration rejected with {len(errors)} error(s): {message}")
        raise ConfigValidationError(f"Invalid configuration: {message}", errors=errors) from e


__all__ = ["BaseServerSettings", "SingleServerSettings", "freeze_settings"]
