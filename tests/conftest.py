"""Shared fixtures for the rfcuri tests."""

import pytest

from rfcuri import StaticPorts


@pytest.fixture
def ports() -> StaticPorts:
    """A fixed port table so that results never depend on the host's services database."""
    return StaticPorts(
        {
            "http": {"tcp": 80, "udp": 80},
            "https": {"tcp": 443, "udp": 443},
            "ssh": {"tcp": 22},
            "split": {"tcp": 1000, "udp": 2000},
        }
    )
