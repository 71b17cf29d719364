"""Configuration containers for the lottery fund injector."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from .constants import (
    DEFAULT_NETWORK,
    DEFAULT_REQUEST_TIMEOUT,
    NETWORK_ENV,
    PRIVATE_KEY_ENV,
    REQUEST_TIMEOUT_ENV,
    ZERO_ADDRESS,
)
from .exceptions import ConfigurationError


class Network(str, Enum):
    """Networks the injector is allowed to submit transactions on."""

    TESTNET = "testnet"
    MAINNET = "mainnet"


SUPPORTED_NETWORKS = frozenset(network.value for network in Network)

# Lottery contract per network. The zero address means "not configured".
LOTTERY_ADDRESSES: Mapping[str, str] = {
    Network.TESTNET.value: ZERO_ADDRESS,
    Network.MAINNET.value: ZERO_ADDRESS,
}

# Native currency injected per run, as a decimal string.
INJECTION_AMOUNTS: Mapping[str, str] = {
    Network.TESTNET.value: "1",
    Network.MAINNET.value: "1",
}

RPC_URLS: Mapping[str, str] = {
    Network.TESTNET.value: "https://data-seed-prebsc-1-s1.binance.org:8545",
    Network.MAINNET.value: "https://bsc-dataseed.binance.org/",
}


def is_supported_network(name: str) -> bool:
    return name in SUPPORTED_NETWORKS


@dataclass(frozen=True)
class InjectorConfig:
    """Everything a single injection run needs, resolved up front."""

    network: str
    private_key: str | None = None
    lottery_address: str = ZERO_ADDRESS
    injection_amount: str = "0"
    rpc_url: str | None = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @property
    def is_supported(self) -> bool:
        return is_supported_network(self.network)


def load_config(env: Mapping[str, str] | None = None) -> InjectorConfig:
    """Build an :class:`InjectorConfig` from environment variables.

    The network is read from ``NETWORK``. Per-network values fall back to the
    module mappings and may be overridden with ``LOTTERY_ADDRESS_<NETWORK>``,
    ``INJECTION_AMOUNT_<NETWORK>`` and ``<NETWORK>_RPC_URL``. Unsupported
    networks still produce a config so the run can report them.
    """

    if env is None:
        env = os.environ

    network = (env.get(NETWORK_ENV) or DEFAULT_NETWORK).strip()
    suffix = network.upper()

    private_key = env.get(PRIVATE_KEY_ENV) or None

    lottery_address = env.get(f"LOTTERY_ADDRESS_{suffix}") or LOTTERY_ADDRESSES.get(
        network, ZERO_ADDRESS
    )
    injection_amount = env.get(f"INJECTION_AMOUNT_{suffix}") or INJECTION_AMOUNTS.get(
        network, "0"
    )
    rpc_url = env.get(f"{suffix}_RPC_URL") or RPC_URLS.get(network)

    raw_timeout = env.get(REQUEST_TIMEOUT_ENV)
    if raw_timeout:
        try:
            request_timeout = float(raw_timeout)
        except ValueError as exc:
            raise ConfigurationError(
                "Request timeout must be a number",
                field=REQUEST_TIMEOUT_ENV,
                value=raw_timeout,
            ) from exc
    else:
        request_timeout = DEFAULT_REQUEST_TIMEOUT

    return InjectorConfig(
        network=network,
        private_key=private_key,
        lottery_address=lottery_address.strip(),
        injection_amount=str(injection_amount).strip(),
        rpc_url=rpc_url,
        request_timeout=request_timeout,
    )
