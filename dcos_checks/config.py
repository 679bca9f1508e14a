import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    DCOS_CHECKS_CONFIG: str | None = os.getenv("DCOS_CHECKS_CONFIG")
    DCOS_CHECKS_FORCE_TLS: bool | None = _env_flag("DCOS_CHECKS_FORCE_TLS")
    DCOS_CHECKS_VERBOSE: bool | None = _env_flag("DCOS_CHECKS_VERBOSE")
    DCOS_CHECKS_ROLE: str | None = os.getenv("DCOS_CHECKS_ROLE")
    DCOS_CHECKS_CA_CERT: str | None = os.getenv("DCOS_CHECKS_CA_CERT")
    DCOS_CHECKS_TIMEOUT_SECONDS: str | None = os.getenv("DCOS_CHECKS_TIMEOUT_SECONDS") or None
    DCOS_CHECKS_LOG_LEVEL: str | None = os.getenv("DCOS_CHECKS_LOG_LEVEL")

    def overrides(self) -> dict:
        """Environment values that are set, keyed by CLIConfigFlags field."""
        values = {
            "force_tls": self.DCOS_CHECKS_FORCE_TLS,
            "verbose": self.DCOS_CHECKS_VERBOSE,
            "role": self.DCOS_CHECKS_ROLE,
            "ca_cert": self.DCOS_CHECKS_CA_CERT,
            "timeout_s": self.DCOS_CHECKS_TIMEOUT_SECONDS,
        }
        return {k: v for k, v in values.items() if v is not None}


settings = Settings()
