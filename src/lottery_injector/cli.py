"""Command line entry point: inject funds into the current lottery round once."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .config import InjectorConfig, load_config
from .constants import DEFAULT_LOG_FILE, LOG_FILE_ENV, LOG_LEVEL_ENV
from .injector import FundInjector
from .reporting import emit_report

logger = logging.getLogger("lottery_injector")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class AuditFormatter(logging.Formatter):
    """Append the report fields carried by a record as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        report = getattr(record, "report", None)
        if report is not None:
            line += " report=" + json.dumps(report, sort_keys=True)
        return line


def configure_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Send package logs to the audit log file.

    Console output is the report line itself, so no stream handler is added.
    """
    level = (level or os.getenv(LOG_LEVEL_ENV, "INFO")).upper()
    log_path = Path(log_file or os.getenv(LOG_FILE_ENV, DEFAULT_LOG_FILE))
    log_path.parent.mkdir(parents=True, exist_ok=True)

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(AuditFormatter(LOG_FORMAT))

    logger.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False


async def run(config: InjectorConfig) -> None:
    report = await FundInjector(config).run()
    emit_report(report)


def main() -> int:
    """Run one injection; 0 once a report is produced, 1 on an unhandled error."""
    load_dotenv(find_dotenv(usecwd=True))
    configure_logging()

    try:
        config = load_config()
        asyncio.run(run(config))
    except Exception as exc:
        logger.exception("Injection run aborted")
        print(exc, file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
