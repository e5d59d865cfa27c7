"""
Pytest configuration for cachelink tests.

Shared fixtures for building populated configurations.
"""

import pytest

from cachelink import Codec, SingleServerConfig

# ---------------------------------------------------------------------------
# Shared constants (import these in test files)
# ---------------------------------------------------------------------------
LOCAL_ADDRESS = "127.0.0.1:6379"
REMOTE_ADDRESS = "rediss://cache.example.com:6380"


@pytest.fixture
def populated_config() -> SingleServerConfig:
    """A configuration with every field moved away from its default."""
    return (
        SingleServerConfig()
        .set_address(REMOTE_ADDRESS)
        .set_connection_pool_size(128)
        .set_connection_minimum_idle_size(24)
        .set_subscription_connection_pool_size(25)
        .set_subscription_connection_minimum_idle_size(2)
        .set_database(3)
        .set_dns_monitoring(False)
        .set_dns_monitoring_interval(15000)
        .set_idle_connection_timeout(20000)
        .set_ping_timeout(500)
        .set_connect_timeout(2000)
        .set_timeout(4000)
        .set_retry_attempts(5)
        .set_retry_interval(250)
        .set_reconnection_timeout(1000)
        .set_failed_attempts(7)
        .set_password("s3cret")
        .set_subscriptions_per_connection(10)
        .set_client_name("worker-1")
        .set_ssl_enable_endpoint_identification(False)
        .set_codec(Codec.STRING)
    )
