from __future__ import annotations

from typing import Protocol, runtime_checkable

from dcos_checks.checks.results import CheckResult
from dcos_checks.models import CLIConfigFlags


@runtime_checkable
class DCOSChecker(Protocol):
    def id(self) -> str:
        ...

    def run(self, cfg: CLIConfigFlags) -> CheckResult:
        ...
