"""Lottery fund injector.

Submits one ``injectFunds`` transaction for the current round of a lottery
contract and reports the outcome.
"""

from .config import SUPPORTED_NETWORKS, InjectorConfig, Network, load_config
from .connections import Web3Connections
from .exceptions import (
    ConfigurationError,
    InjectorError,
    NetworkError,
    ValidationError,
)
from .injector import FundInjector, inject_funds
from .reporting import emit_report
from .types import (
    ChainState,
    InjectionFailure,
    InjectionReceipt,
    InjectionReport,
    SubmissionResult,
)
from .utils import double_gas_price, format_gwei, from_base_units, to_base_units

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "InjectorConfig",
    "Network",
    "SUPPORTED_NETWORKS",
    "load_config",
    # Task
    "FundInjector",
    "Web3Connections",
    "inject_funds",
    "emit_report",
    # Types
    "ChainState",
    "InjectionReceipt",
    "InjectionFailure",
    "InjectionReport",
    "SubmissionResult",
    # Exceptions
    "InjectorError",
    "ConfigurationError",
    "NetworkError",
    "ValidationError",
    # Utility functions
    "to_base_units",
    "from_base_units",
    "double_gas_price",
    "format_gwei",
]
