"""Connection helpers for the lottery fund injector."""

from __future__ import annotations

import logging
from typing import cast

from aiohttp import ClientTimeout
from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3
from web3.contract import AsyncContract
from web3.middleware import SignAndSendRawMiddlewareBuilder

from .abi import Lottery_abi
from .config import InjectorConfig
from .constants import MISSING_PRIVATE_KEY_MESSAGE
from .exceptions import ConfigurationError, NetworkError, ValidationError

logger = logging.getLogger(__name__)


class Web3Connections:
    """Manage the async Web3 provider, signing middleware, and contract handle."""

    def __init__(self, config: InjectorConfig):
        self.config = config
        self._provider: AsyncHTTPProvider | None = None
        self._web3: AsyncWeb3 | None = None
        self._account: LocalAccount | None = None
        self._connected = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def connect(self) -> None:
        """Derive the signer and build the provider.

        No RPC request is made here; the first one happens when the caller
        awaits a read.
        """

        if not self.config.private_key:
            raise ConfigurationError(MISSING_PRIVATE_KEY_MESSAGE, field="private_key")
        if not self.config.rpc_url:
            raise ConfigurationError(
                "Missing RPC URL for network", field="rpc_url", value=self.config.network
            )

        try:
            signer = cast(LocalAccount, Account.from_key(self.config.private_key))
        except Exception as exc:
            raise ValidationError(
                "Failed to derive signer account from provided private key",
                field="private_key",
                details={"error": str(exc)},
            ) from exc

        self._account = signer
        self._provider = AsyncHTTPProvider(
            self.config.rpc_url,
            request_kwargs={"timeout": ClientTimeout(total=self.config.request_timeout)},
        )
        web3 = AsyncWeb3(self._provider)
        web3.middleware_onion.add(SignAndSendRawMiddlewareBuilder.build(signer))
        web3.eth.default_account = signer.address
        self._web3 = web3
        self._connected = True

        logger.debug(
            "Prepared %s RPC at %s for signer %s",
            self.config.network,
            self.config.rpc_url,
            signer.address,
        )

    async def disconnect(self) -> None:
        if self._provider is not None:
            await self._provider.disconnect()
        self._provider = None
        self._web3 = None
        self._connected = False

    def is_connected(self) -> bool:
        return self._connected and self._web3 is not None and self._account is not None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def account(self) -> LocalAccount:
        if self._account is None:
            raise NetworkError(
                "Signer account is not initialised; call connect() first",
                endpoint=self.config.rpc_url,
            )
        return self._account

    @property
    def web3(self) -> AsyncWeb3:
        if self._web3 is None:
            raise NetworkError("RPC provider not connected", endpoint=self.config.rpc_url)
        return self._web3

    def lottery_contract(self) -> AsyncContract:
        """Bind the configured lottery address to the lottery interface."""

        address = Web3.to_checksum_address(self.config.lottery_address)
        return self.web3.eth.contract(address=address, abi=Lottery_abi)
