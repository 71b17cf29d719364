"""Example: Read the state the injector would act on, without sending anything."""

from __future__ import annotations

import asyncio
import logging
import os

from dotenv import load_dotenv

from lottery_injector import FundInjector, load_config
from lottery_injector.utils import double_gas_price, format_gwei, to_base_units

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOGLEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

logger = logging.getLogger("read_lottery_state")


async def main() -> None:
    config = load_config()

    injector = FundInjector(config)
    if not injector.check_preconditions():
        logger.error("Network %s is not supported", config.network)
        return

    connections = injector.connections
    connections.connect()
    try:
        state = await injector.read_chain_state(connections.lottery_contract())
    finally:
        await connections.disconnect()

    logger.info("Network:          %s", config.network)
    logger.info("Block:            %s", state.block_number)
    logger.info("Current lottery:  #%s", state.lottery_id)
    logger.info("Quoted gas price: %s gwei", format_gwei(state.gas_price))
    logger.info("Submit gas price: %s gwei", format_gwei(double_gas_price(state.gas_price)))
    logger.info(
        "Injection amount: %s (%s wei)",
        config.injection_amount,
        to_base_units(config.injection_amount),
    )
    logger.info("Signer:           %s", connections.account.address)


if __name__ == "__main__":
    asyncio.run(main())
