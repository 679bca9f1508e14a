from __future__ import annotations

import logging

import click

from dcos_checks.checks.base import DCOSChecker
from dcos_checks.checks.results import CheckError, CheckResult, Status
from dcos_checks.formatting import format_result
from dcos_checks.models import CLIConfigFlags

logger = logging.getLogger(__name__)


def execute(checker: DCOSChecker, cfg: CLIConfigFlags) -> CheckResult:
    try:
        return checker.run(cfg)
    except Exception as exc:
        logger.exception("check %s raised", checker.id())
        return CheckResult("", Status.UNKNOWN, CheckError("check crashed", cause=exc))


def run_check(checker: DCOSChecker, cfg: CLIConfigFlags, as_json: bool = False) -> int:
    """Run one checker, print its result and return the process exit code."""
    result = execute(checker, cfg)
    if result.error is not None:
        logger.debug("Error executing %s: %s", checker.id(), result.error)

    click.echo(format_result(checker.id(), result, as_json=as_json))
    return int(result.status)
