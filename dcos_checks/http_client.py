from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from dcos_checks.checks.results import TransportError
from dcos_checks.models import CLIConfigFlags

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class URLFields:
    host: str
    path: str
    port: int = 0


_SCHEME_PORTS = {"http": 80, "https": 443}


def build_url(cfg: CLIConfigFlags, url: URLFields) -> str:
    scheme = "https" if cfg.force_tls else "http"
    port = url.port or cfg.default_port()
    # the scheme's own port is left implicit
    if url.port or port != _SCHEME_PORTS[scheme]:
        netloc = f"{url.host}:{port}"
    else:
        netloc = url.host
    return f"{scheme}://{netloc}/{url.path.lstrip('/')}"


def http_request(cfg: CLIConfigFlags, url: URLFields) -> tuple[int, bytes]:
    target = build_url(cfg, url)
    verify: bool | str = cfg.ca_cert or True
    logger.debug("GET %s (timeout=%ss)", target, cfg.timeout_s)
    try:
        resp = requests.get(target, timeout=cfg.timeout_s, verify=verify)
    except requests.RequestException as exc:
        raise TransportError(
            f"GET {target} failed: {exc.__class__.__name__}", cause=exc
        ) from exc
    return resp.status_code, resp.content
