from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Sequence

from dcos_checks.checks.results import (
    CheckResult,
    InputError,
    ResolutionError,
    ServerError,
    Status,
    TransportError,
    UnknownOutcome,
)
from dcos_checks.http_client import URLFields, http_request
from dcos_checks.models import ADMINROUTER_MASTER_HTTPS_PORT, CLIConfigFlags
from dcos_checks.resolver import lookup_host

logger = logging.getLogger(__name__)

LEADER_HOST = "leader.mesos"
MARATHON_LEADER_PATH = "/service/marathon/v2/leader"
METRONOME_JOBS_PATH = "/service/metronome/v1/jobs"


class LeaderCheck(str, Enum):
    MESOS = "mesos-leader"
    MARATHON = "marathon-leader"
    METRONOME = "metronome-leader"

    @classmethod
    def parse(cls, arg: str) -> LeaderCheck | None:
        try:
            return cls(arg)
        except ValueError:
            return None


VALID_ARGS: tuple[str, ...] = tuple(c.value for c in LeaderCheck)


def _valid_args_text() -> str:
    return "[" + " ".join(VALID_ARGS) + "]"


class ClusterLeaderCheck:
    """
    Verifies the leader-elected DC/OS services are reachable.

    Only the first recognised name in ``args`` is run; unrecognised names
    are skipped.
    """

    def __init__(self, name: str, args: Sequence[str]) -> None:
        self._name = name
        self._args = tuple(args)

    def id(self) -> str:
        return self._name

    def run(self, cfg: CLIConfigFlags) -> CheckResult:
        if not self._args:
            return CheckResult(
                "",
                Status.FAILURE,
                InputError(f"No args provided, valid args {_valid_args_text()}"),
            )

        probes: dict[LeaderCheck, Callable[[CLIConfigFlags], CheckResult]] = {
            LeaderCheck.MESOS: lambda _cfg: self.mesos_leader(LEADER_HOST),
            LeaderCheck.MARATHON: self._run_marathon,
            LeaderCheck.METRONOME: self._run_metronome,
        }
        for arg in self._args:
            check = LeaderCheck.parse(arg)
            if check is None:
                continue
            return probes[check](cfg)

        return CheckResult(
            "",
            Status.FAILURE,
            InputError(f"Option not supported, valid args {_valid_args_text()}"),
        )

    def _run_marathon(self, cfg: CLIConfigFlags) -> CheckResult:
        port = ADMINROUTER_MASTER_HTTPS_PORT if cfg.force_tls else 0
        return self.marathon_leader(
            cfg, URLFields(host=LEADER_HOST, path=MARATHON_LEADER_PATH, port=port)
        )

    def _run_metronome(self, cfg: CLIConfigFlags) -> CheckResult:
        return self.metronome_leader(
            cfg, URLFields(host=LEADER_HOST, path=METRONOME_JOBS_PATH)
        )

    def mesos_leader(self, hostname: str) -> CheckResult:
        logger.debug("resolving %s", hostname)
        try:
            addrs = lookup_host(hostname)
        except OSError as exc:
            return CheckResult(
                "", Status.FAILURE, ResolutionError("LookupHost failed", cause=exc)
            )
        if not addrs:
            return CheckResult(
                "",
                Status.FAILURE,
                ResolutionError("LookupHost did not return any address"),
            )
        return CheckResult("", Status.OK)

    def marathon_leader(self, cfg: CLIConfigFlags, url: URLFields) -> CheckResult:
        return _classify_leader_response(cfg, url)

    def metronome_leader(self, cfg: CLIConfigFlags, url: URLFields) -> CheckResult:
        return _classify_leader_response(cfg, url)


def _classify_leader_response(cfg: CLIConfigFlags, url: URLFields) -> CheckResult:
    try:
        status_code, _ = http_request(cfg, url)
    except TransportError as exc:
        return CheckResult(
            "", Status.FAILURE, TransportError("HTTP request error", cause=exc)
        )

    if status_code == 200:
        return CheckResult("", Status.OK)
    if status_code == 500:
        return CheckResult("", Status.FAILURE, ServerError("status 500"))
    logger.debug("%s returned unexpected HTTP %s", url.path, status_code)
    return CheckResult("", Status.UNKNOWN, UnknownOutcome("Unable to run the check"))
