# config.py
import os
from dataclasses import dataclass
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# Client configuration
#
# The client never looks at the environment by itself. Build a Config
# explicitly, or use Config.from_env() in scripts.
#
# Env var names (with the default "ZABBIX_" prefix):
#   ZABBIX_URL
#   ZABBIX_USER
#   ZABBIX_PASSWORD
#   ZABBIX_TOKEN
#   ZABBIX_VERIFY_SSL
#   ZABBIX_TIMEOUT        "60" or "10,60" (connect,read)
#   ZABBIX_AUTH_HEADER
# -----------------------------------------------------------------------------

DEFAULT_URL = "http://localhost/api_jsonrpc.php"
DEFAULT_TIMEOUT: Tuple[float, float] = (10, 60)


def _env(name: str, default: str) -> str:
    """
    Return environment variable value if set and non-empty, otherwise default.
    """
    v = os.getenv(name)
    return v.strip() if v is not None and v.strip() else default


def _env_bool(name: str, default: bool) -> bool:
    return _env(name, "true" if default else "false").lower() in ("1", "true", "yes", "on")


def _parse_timeout(value: str) -> Tuple[float, float]:
    parts = [p.strip() for p in value.split(",") if p.strip()]
    try:
        if len(parts) == 1:
            t = float(parts[0])
            return (t, t)
        if len(parts) == 2:
            return (float(parts[0]), float(parts[1]))
    except ValueError:
        pass
    return DEFAULT_TIMEOUT


@dataclass
class Config:
    url: str = DEFAULT_URL
    user: Optional[str] = None
    password: Optional[str] = None
    # API token; when set no login is needed
    token: Optional[str] = None
    verify_ssl: bool = True
    timeout: Tuple[float, float] = DEFAULT_TIMEOUT
    # Send the token as "Authorization: Bearer" instead of the "auth" field
    auth_header: bool = False

    @classmethod
    def from_env(cls, prefix: str = "ZABBIX_") -> "Config":
        return cls(
            url=_env(f"{prefix}URL", DEFAULT_URL),
            user=_env(f"{prefix}USER", "") or None,
            password=_env(f"{prefix}PASSWORD", "") or None,
            token=_env(f"{prefix}TOKEN", "") or None,
            verify_ssl=_env_bool(f"{prefix}VERIFY_SSL", True),
            timeout=_parse_timeout(_env(f"{prefix}TIMEOUT", "")),
            auth_header=_env_bool(f"{prefix}AUTH_HEADER", False),
        )
