"""
Server address parsing.

Turns user supplied endpoint text into an ``EndpointAddress``. Accepted forms::

    "127.0.0.1:6379"
    "cache.example.com:6380"
    "[::1]:6379"            # bracketed IPv6
    "fe80::1:6379"          # bare IPv6, the last colon separates the port
    "redis://host:6379"
    "rediss://host:6380"    # TLS

Text without a scheme is given the ``redis`` scheme. A port is always required.
"""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass

from .exceptions import MalformedAddressError

DEFAULT_SCHEME = "redis"
SSL_SCHEME = "rediss"
SUPPORTED_SCHEMES = frozenset({DEFAULT_SCHEME, SSL_SCHEME})

_SCHEME_SEPARATOR = "://"
_HOSTNAME_LABEL = r"[a-z0-9_](?:[a-z0-9_-]{0,61}[a-z0-9_])?"
_HOSTNAME_RE = re.compile(rf"^{_HOSTNAME_LABEL}(?:\.{_HOSTNAME_LABEL})*\.?$")
_IPV4_LIKE_RE = re.compile(r"^[0-9.]+$")


@dataclass(frozen=True)
class EndpointAddress:
    """
    Parsed location of a single server.

    Attributes:
        scheme: ``redis`` or ``rediss`` (TLS)
        host: Hostname or IP literal, IPv6 stored without brackets
        port: TCP port
    """

    scheme: str
    host: str
    port: int

    @classmethod
    def parse(cls, text: str) -> EndpointAddress:
        """Parse endpoint text. See ``parse_address``."""
        return parse_address(text)

    @property
    def is_ssl(self) -> bool:
        """Check if the endpoint requires TLS."""
        return self.scheme == SSL_SCHEME

    @property
    def is_ipv6(self) -> bool:
        return ":" in self.host

    @property
    def netloc(self) -> str:
        """``host:port`` with IPv6 hosts bracketed."""
        host = f"[{self.host}]" if self.is_ipv6 else self.host
        return f"{host}:{self.port}"

    def __str__(self) -> str:
        return f"{self.scheme}://{self.netloc}"


def parse_address(text: str) -> EndpointAddress:
    """
    Parse endpoint text into an ``EndpointAddress``.

    Args:
        text: ``host:port`` or a ``redis://`` / ``rediss://`` URI

    Returns:
        The normalized endpoint

    Raises:
        MalformedAddressError: If the text is not a usable endpoint
    """
    raw = text.strip()
    if not raw:
        raise MalformedAddressError("Server address is empty", address=text)

    if _SCHEME_SEPARATOR not in raw:
        raw = f"{DEFAULT_SCHEME}{_SCHEME_SEPARATOR}{raw}"
    scheme, _, rest = raw.partition(_SCHEME_SEPARATOR)
    scheme = scheme.lower()
    if scheme not in SUPPORTED_SCHEMES:
        supported = ", ".join(sorted(SUPPORTED_SCHEMES))
        raise MalformedAddressError(
            f"Unsupported scheme {scheme!r} in {text!r}, expected one of: {supported}",
            address=text,
        )

    end = len(rest)
    for sep in "/?#":
        idx = rest.find(sep)
        if idx != -1:
            end = min(end, idx)
    netloc, tail = rest[:end], rest[end:]
    if tail not in ("", "/"):
        raise MalformedAddressError(
            f"Server address {text!r} must not carry a path, query or fragment",
            address=text,
        )
    if "@" in netloc:
        raise MalformedAddressError(
            f"Server address {text!r} must not carry credentials, use set_password()",
            address=text,
        )

    host, port_text = _split_host_port(netloc, text)
    return EndpointAddress(
        scheme=scheme,
        host=_normalize_host(host, text),
        port=_parse_port(port_text, text),
    )


def _split_host_port(netloc: str, text: str) -> tuple[str, str]:
    if netloc.startswith("["):
        host, closed, remainder = netloc[1:].partition("]")
        if not closed:
            raise MalformedAddressError(f"Unterminated IPv6 literal in {text!r}", address=text)
        if not remainder.startswith(":"):
            raise MalformedAddressError(f"Missing port in {text!r}", address=text)
        return host, remainder[1:]

    host, sep, port_text = netloc.rpartition(":")
    if not sep:
        raise MalformedAddressError(f"Missing port in {text!r}", address=text)
    return host, port_text


def _normalize_host(host: str, text: str) -> str:
    if not host:
        raise MalformedAddressError(f"Missing host in {text!r}", address=text)

    try:
        if ":" in host:
            return str(ipaddress.IPv6Address(host))
        if _IPV4_LIKE_RE.match(host):
            return str(ipaddress.IPv4Address(host))
    except ValueError as e:
        raise MalformedAddressError(f"Invalid IP address {host!r} in {text!r}", address=text) from e

    lowered = host.lower()
    if len(lowered) > 253 or not _HOSTNAME_RE.match(lowered):
        raise MalformedAddressError(f"Invalid hostname {host!r} in {text!r}", address=text)
    return lowered


def _parse_port(port_text: str, text: str) -> int:
    if not (port_text.isascii() and port_text.isdigit()):
        raise MalformedAddressError(f"Invalid port {port_text!r} in {text!r}", address=text)
    port = int(port_text)
    if not 0 < port < 65536:
        raise MalformedAddressError(f"Port {port} out of range in {text!r}", address=text)
    return port


__all__ = [
    "DEFAULT_SCHEME",
    "SSL_SCHEME",
    "SUPPORTED_SCHEMES",
    "EndpointAddress",
    "parse_address",
]
