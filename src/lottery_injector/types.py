"""Type definitions and data models for the lottery fund injector."""

from dataclasses import asdict, dataclass
from typing import Any

from .constants import UNSUPPORTED_NETWORK_MESSAGE
from .utils import format_gwei, utc_timestamp


@dataclass(frozen=True)
class ChainState:
    """On-chain values read concurrently before submission."""

    gas_price: int  # wei, as quoted by the provider
    block_number: int
    lottery_id: int


@dataclass(frozen=True)
class InjectionReceipt:
    """Successful submission: the transaction was acknowledged by the node."""

    transaction_hash: str
    lottery_id: int
    amount: int  # wei
    gas_price: int  # wei, after adjustment
    block_number: int


@dataclass(frozen=True)
class InjectionFailure:
    """Failed submission, carrying the underlying error message."""

    error: str


SubmissionResult = InjectionReceipt | InjectionFailure


@dataclass(frozen=True)
class InjectionReport:
    """Outcome record produced exactly once per run."""

    success: bool
    timestamp: str
    network: str
    message: str
    block_number: int | None = None
    transaction_hash: str | None = None
    gas_price: str | None = None  # gwei
    signer: str | None = None

    @classmethod
    def unsupported(cls, network: str) -> "InjectionReport":
        return cls(
            success=False,
            timestamp=utc_timestamp(),
            network=network,
            message=UNSUPPORTED_NETWORK_MESSAGE,
        )

    @classmethod
    def from_result(cls, network: str, signer: str, result: SubmissionResult) -> "InjectionReport":
        """Turn a submission result into the report for this run."""

        if isinstance(result, InjectionReceipt):
            return cls(
                success=True,
                timestamp=utc_timestamp(),
                network=network,
                message=f"Injected lottery #{result.lottery_id}",
                block_number=result.block_number,
                transaction_hash=result.transaction_hash,
                gas_price=format_gwei(result.gas_price),
                signer=signer,
            )

        return cls(
            success=False,
            timestamp=utc_timestamp(),
            network=network,
            message=result.error,
            signer=signer,
        )

    def format_line(self) -> str:
        line = f"[{self.timestamp}] network={self.network}"
        if self.block_number is not None:
            line += f" block={self.block_number}"
        line += f" message='{self.message}'"
        if self.transaction_hash is not None:
            line += f" hash={self.transaction_hash}"
        if self.gas_price is not None:
            line += f" gasPrice={self.gas_price}"
        if self.signer is not None:
            line += f" signer={self.signer}"
        return line

    def as_dict(self) -> dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}
