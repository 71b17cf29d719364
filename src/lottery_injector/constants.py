"""Constants shared across the lottery fund injector."""

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Native currency uses 18 decimals; gas prices are quoted in gwei.
ETHER_UNIT = "ether"
GWEI_UNIT = "gwei"

GAS_PRICE_MULTIPLIER = 2

PRIVATE_KEY_ENV = "INJECTOR_PRIVATE_KEY"
NETWORK_ENV = "NETWORK"
LOG_FILE_ENV = "INJECTOR_LOG_FILE"
LOG_LEVEL_ENV = "LOGLEVEL"
REQUEST_TIMEOUT_ENV = "REQUEST_TIMEOUT"

DEFAULT_NETWORK = "hardhat"
DEFAULT_LOG_FILE = "logs/lottery.log"
DEFAULT_REQUEST_TIMEOUT = 10.0

UNSUPPORTED_NETWORK_MESSAGE = "Unsupported network"
MISSING_PRIVATE_KEY_MESSAGE = "Missing private key (signer)."
MISSING_ADDRESS_MESSAGE = "Missing smart contract (Lottery) address."
