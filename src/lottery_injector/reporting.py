"""Console and audit-log output for injection outcomes."""

import logging
import sys
from typing import TextIO

from .types import InjectionReport

logger = logging.getLogger(__name__)


def emit_report(
    report: InjectionReport,
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> str:
    """Write the report line to the console and record it in the log.

    Successful injections go to stdout at INFO; failures and unsupported
    networks go to stderr at ERROR.
    """
    line = report.format_line()
    extra = {"report": report.as_dict()}

    if report.success:
        print(line, file=stdout or sys.stdout)
        logger.info(line, extra=extra)
    else:
        print(line, file=stderr or sys.stderr)
        logger.error(line, extra=extra)

    return line
