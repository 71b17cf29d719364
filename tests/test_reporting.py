"""Tests for report formatting and output channels."""

import io
import logging

import pytest

from lottery_injector.reporting import emit_report
from lottery_injector.types import InjectionFailure, InjectionReceipt, InjectionReport

SIGNER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
TX_HASH = "0x" + "ab" * 32


def _success() -> InjectionReport:
    receipt = InjectionReceipt(
        transaction_hash=TX_HASH,
        lottery_id=42,
        amount=10**18,
        gas_price=10 * 10**9,
        block_number=1234,
    )
    return InjectionReport.from_result("mainnet", SIGNER, receipt)


def test_success_line_format() -> None:
    report = _success()

    assert report.format_line() == (
        f"[{report.timestamp}] network=mainnet block=1234 message='Injected lottery #42' "
        f"hash={TX_HASH} gasPrice=10 signer={SIGNER}"
    )


def test_failure_line_format() -> None:
    report = InjectionReport.from_result("testnet", SIGNER, InjectionFailure(error="boom"))

    assert not report.success
    assert report.format_line() == (
        f"[{report.timestamp}] network=testnet message='boom' signer={SIGNER}"
    )


def test_unsupported_line_format() -> None:
    report = InjectionReport.unsupported("hardhat")

    assert report.format_line() == (
        f"[{report.timestamp}] network=hardhat message='Unsupported network'"
    )
    assert report.as_dict() == {
        "success": False,
        "timestamp": report.timestamp,
        "network": "hardhat",
        "message": "Unsupported network",
    }


def test_success_goes_to_stdout_and_info_log(caplog: pytest.LogCaptureFixture) -> None:
    out, err = io.StringIO(), io.StringIO()
    report = _success()

    with caplog.at_level(logging.INFO, logger="lottery_injector"):
        line = emit_report(report, stdout=out, stderr=err)

    assert out.getvalue() == line + "\n"
    assert err.getvalue() == ""
    [record] = [r for r in caplog.records if r.name == "lottery_injector.reporting"]
    assert record.levelno == logging.INFO
    assert record.getMessage() == line
    assert record.report["transaction_hash"] == TX_HASH


def test_failure_goes_to_stderr_and_error_log(caplog: pytest.LogCaptureFixture) -> None:
    out, err = io.StringIO(), io.StringIO()
    report = InjectionReport.from_result("testnet", SIGNER, InjectionFailure(error="reverted"))

    with caplog.at_level(logging.INFO, logger="lottery_injector"):
        line = emit_report(report, stdout=out, stderr=err)

    assert out.getvalue() == ""
    assert err.getvalue() == line + "\n"
    [record] = [r for r in caplog.records if r.name == "lottery_injector.reporting"]
    assert record.levelno == logging.ERROR
    assert record.report["signer"] == SIGNER
