from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["master", "agent"]

ADMINROUTER_MASTER_HTTP_PORT = 80
ADMINROUTER_MASTER_HTTPS_PORT = 443
ADMINROUTER_AGENT_HTTP_PORT = 61001
ADMINROUTER_AGENT_HTTPS_PORT = 61002


class CLIConfigFlags(BaseModel):
    model_config = ConfigDict(frozen=True)

    force_tls: bool = False
    verbose: bool = False
    role: Role = "master"
    ca_cert: Optional[str] = None
    timeout_s: float = Field(default=5.0, gt=0)

    def default_port(self) -> int:
        if self.role == "agent":
            if self.force_tls:
                return ADMINROUTER_AGENT_HTTPS_PORT
            return ADMINROUTER_AGENT_HTTP_PORT
        if self.force_tls:
            return ADMINROUTER_MASTER_HTTPS_PORT
        return ADMINROUTER_MASTER_HTTP_PORT


class ConfigFile(BaseModel):
    """Optional on-disk defaults; every key mirrors a CLI flag."""

    model_config = ConfigDict(extra="forbid")

    force_tls: Optional[bool] = None
    verbose: Optional[bool] = None
    role: Optional[Role] = None
    ca_cert: Optional[str] = None
    timeout_s: Optional[float] = Field(default=None, gt=0)
