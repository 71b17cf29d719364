"""Inject funds into the current round of the lottery contract."""

from __future__ import annotations

import asyncio
import logging

from .config import InjectorConfig
from .connections import Web3Connections
from .constants import (
    MISSING_ADDRESS_MESSAGE,
    MISSING_PRIVATE_KEY_MESSAGE,
    ZERO_ADDRESS,
)
from .exceptions import ConfigurationError
from .types import (
    ChainState,
    InjectionFailure,
    InjectionReceipt,
    InjectionReport,
    SubmissionResult,
)
from .utils import double_gas_price, to_base_units

logger = logging.getLogger(__name__)


class FundInjector:
    """Run one injection attempt against the configured network.

    A run yields exactly one :class:`InjectionReport`. Missing credentials or a
    missing contract address raise :class:`ConfigurationError` before any
    provider call; failures while reading state or submitting are reported,
    never retried.
    """

    def __init__(self, config: InjectorConfig, connections: Web3Connections | None = None):
        self._config = config
        self._connections = connections if connections is not None else Web3Connections(config)

    @property
    def config(self) -> InjectorConfig:
        return self._config

    @property
    def connections(self) -> Web3Connections:
        return self._connections

    def check_preconditions(self) -> bool:
        """Return ``False`` for an unsupported network, raise on missing configuration."""

        if not self._config.is_supported:
            return False

        if not self._config.private_key:
            raise ConfigurationError(MISSING_PRIVATE_KEY_MESSAGE, field="private_key")

        address = self._config.lottery_address
        try:
            is_zero = not address or int(address, 16) == int(ZERO_ADDRESS, 16)
        except ValueError as exc:
            raise ConfigurationError(
                "Lottery address is not a hex address", field="lottery_address", value=address
            ) from exc
        if is_zero:
            raise ConfigurationError(
                MISSING_ADDRESS_MESSAGE,
                field="lottery_address",
                value=address,
            )

        return True

    async def run(self) -> InjectionReport:
        network = self._config.network

        if not self.check_preconditions():
            logger.debug("Skipping injection on unsupported network %s", network)
            return InjectionReport.unsupported(network)

        # Signer resolution sits outside the handled boundary: a bad key is fatal.
        self._connections.connect()
        signer = self._connections.account.address

        try:
            result = await self.submit()
        finally:
            await self._close_connections()

        return InjectionReport.from_result(network, signer, result)

    async def _close_connections(self) -> None:
        # Cleanup errors never replace the report of a sent transaction.
        try:
            await self._connections.disconnect()
        except Exception:
            logger.debug("Failed to close %s provider", self._config.network, exc_info=True)

    async def submit(self) -> SubmissionResult:
        """Read chain state, then send ``injectFunds`` for the current round."""

        try:
            contract = self._connections.lottery_contract()
            state = await self.read_chain_state(contract)

            gas_price = double_gas_price(state.gas_price)
            amount = to_base_units(self._config.injection_amount)
            sender = self._connections.account.address

            logger.debug(
                "Injecting %s wei into lottery #%s on %s (block=%s gasPrice=%s)",
                amount,
                state.lottery_id,
                self._config.network,
                state.block_number,
                gas_price,
            )

            tx_hash = await contract.functions.injectFunds(state.lottery_id, amount).transact(
                {"gasPrice": gas_price, "from": sender}
            )
        except Exception as exc:
            logger.debug("Injection failed on %s", self._config.network, exc_info=True)
            return InjectionFailure(error=str(exc))

        tx_hex = tx_hash.to_0x_hex()
        logger.debug("Transaction sent for lottery #%s hash=%s", state.lottery_id, tx_hex)

        return InjectionReceipt(
            transaction_hash=tx_hex,
            lottery_id=state.lottery_id,
            amount=amount,
            gas_price=gas_price,
            block_number=state.block_number,
        )

    async def read_chain_state(self, contract) -> ChainState:
        """Fetch gas price, block number and current lottery id concurrently."""

        eth = self._connections.web3.eth
        gas_price, block_number, lottery_id = await asyncio.gather(
            eth.gas_price,
            eth.block_number,
            contract.functions.currentLotteryId().call(),
        )
        return ChainState(
            gas_price=int(gas_price),
            block_number=int(block_number),
            lottery_id=int(lottery_id),
        )


async def inject_funds(
    config: InjectorConfig, connections: Web3Connections | None = None
) -> InjectionReport:
    """Convenience wrapper running a single :class:`FundInjector`."""

    return await FundInjector(config, connections).run()
