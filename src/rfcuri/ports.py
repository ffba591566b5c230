"""rfcuri.ports
Well-known port lookup used for scheme-based port normalization (RFC 3986 section 6.2.3).
"""

import logging
import socket

from typing import Mapping, Protocol, Self

logger = logging.getLogger(__name__)


class PortRegistry(Protocol):
    def lookup(self: Self, scheme: str, transport: str) -> int | None:
        """Return the well-known port of `scheme` over `transport` ("tcp" or "udp"), or None."""
        ...


class SystemPorts:
    """Registry backed by the host's services database."""

    def lookup(self: Self, scheme: str, transport: str) -> int | None:
        if len(scheme) == 0:
            return None
        try:
            return socket.getservbyname(scheme, transport)
        except OSError:
            logger.debug("no %s service registered for scheme %r", transport, scheme)
            return None


class StaticPorts:
    """Registry backed by a fixed mapping, e.g. StaticPorts({"http": {"tcp": 80, "udp": 80}})"""

    def __init__(self: Self, services: Mapping[str, Mapping[str, int]]) -> None:
        self._services: dict[str, dict[str, int]] = {
            scheme.lower(): dict(transports) for scheme, transports in services.items()
        }

    def lookup(self: Self, scheme: str, transport: str) -> int | None:
        port: int | None = self._services.get(scheme.lower(), {}).get(transport)
        if port is None:
            logger.debug("no %s service registered for scheme %r", transport, scheme)
        return port

    def __repr__(self: Self) -> str:
        return f"{self.__class__.__name__}({self._services!r})"


system_ports: PortRegistry = SystemPorts()

# Disables port elision entirely.
no_ports: PortRegistry = StaticPorts({})
