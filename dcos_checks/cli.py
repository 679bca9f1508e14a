from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from dcos_checks.checks.cluster_leader import ClusterLeaderCheck
from dcos_checks.config import settings
from dcos_checks.config_file import build_config
from dcos_checks.runner import run_check

CLUSTER_CHECK_NAME = "DC/OS cluster system checks"


def _resolve_log_level(verbose: bool) -> int:
    name = settings.DCOS_CHECKS_LOG_LEVEL or ("DEBUG" if verbose else "WARNING")
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level {name!r}")
    return level


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.group(help="DC/OS node and cluster diagnostics.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML file with default flag values.",
)
@click.option("--force-tls/--no-force-tls", default=None, help="Use HTTPS and the secure admin router port.")
@click.option("--verbose/--quiet", default=None, help="Log probe details to stderr.")
@click.option("--role", type=click.Choice(["master", "agent"]), default=None)
@click.option("--ca-cert", type=click.Path(dir_okay=False), default=None)
@click.option("--timeout", "timeout_s", type=float, default=None, help="HTTP timeout in seconds.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_context
def cli(ctx, config_path, force_tls, verbose, role, ca_cert, timeout_s, as_json):
    flags = {
        "force_tls": force_tls,
        "verbose": verbose,
        "role": role,
        "ca_cert": ca_cert,
        "timeout_s": timeout_s,
    }
    try:
        cfg = build_config(flags, config_path=config_path)
        log_level = _resolve_log_level(cfg.verbose)
    except (OSError, ValueError) as exc:
        raise click.UsageError(f"invalid configuration: {exc}") from exc

    _configure_logging(log_level)
    ctx.obj = {"cfg": cfg, "as_json": as_json}


@cli.command(
    name="cluster",
    short_help="Cluster health checks",
    help=(
        "List of checks to verify cluster is healthy/up\n\n"
        "\b\nUsage:\ncluster mesos-leader\ncluster marathon-leader\ncluster metronome-leader"
    ),
)
@click.argument("names", nargs=-1)
@click.pass_obj
def cluster(obj, names):
    checker = ClusterLeaderCheck(CLUSTER_CHECK_NAME, list(names))
    sys.exit(run_check(checker, obj["cfg"], as_json=obj["as_json"]))


def main() -> None:
    cli(prog_name="dcos-checks")
