"""Unit tests for BaseConfig and codec selection."""

import pytest

from cachelink.config.base import BaseConfig, Codec


class TestBaseConfigDefaults:
    def test_defaults(self) -> None:
        config = BaseConfig()
        assert config.idle_connection_timeout == 10000
        assert config.ping_timeout == 1000
        assert config.connect_timeout == 10000
        assert config.timeout == 3000
        assert config.retry_attempts == 3
        assert config.retry_interval == 1500
        assert config.reconnection_timeout == 3000
        assert config.failed_attempts == 3
        assert config.password is None
        assert config.subscriptions_per_connection == 5
        assert config.client_name is None
        assert config.ssl_enable_endpoint_identification is True
        assert config.codec is Codec.JSON


class TestBaseConfigCopy:
    def test_copy_constructor(self) -> None:
        source = BaseConfig().set_timeout(100).set_password("pw").set_codec(Codec.BYTES)
        clone = BaseConfig(source)
        assert clone == source
        assert clone.timeout == 100
        assert clone.password == "pw"
        assert clone.codec is Codec.BYTES

    def test_copy_is_independent(self) -> None:
        source = BaseConfig()
        clone = source.copy()
        clone.set_retry_attempts(10)
        assert source.retry_attempts == 3

    def test_not_equal_to_other_types(self) -> None:
        assert BaseConfig() != object()
        assert BaseConfig().__eq__("config") is NotImplemented

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(BaseConfig())


class TestCodec:
    def test_accepts_member(self) -> None:
        assert BaseConfig().set_codec(Codec.STRING).codec is Codec.STRING

    def test_accepts_value(self) -> None:
        assert BaseConfig().set_codec("bytes").codec is Codec.BYTES

    def test_unknown_name_rejected(self) -> None:
        config = BaseConfig()
        with pytest.raises(ValueError):
            config.set_codec("msgpack")
        assert config.codec is Codec.JSON

    def test_is_str_enum(self) -> None:
        assert Codec.JSON == "json"


class TestBaseConfigDict:
    def test_to_dict_keys(self) -> None:
        assert set(BaseConfig().to_dict()) == {
            "idle_connection_timeout",
            "ping_timeout",
            "connect_timeout",
            "timeout",
            "retry_attempts",
            "retry_interval",
            "reconnection_timeout",
            "failed_attempts",
            "password",
            "subscriptions_per_connection",
            "client_name",
            "ssl_enable_endpoint_identification",
            "codec",
        }

    def test_to_dict_is_a_copy(self) -> None:
        config = BaseConfig()
        data = config.to_dict()
        data["timeout"] = 1
        assert config.timeout == 3000
