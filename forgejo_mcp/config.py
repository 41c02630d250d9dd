"""Configuration loading for the Forgejo MCP server.

All configuration comes from (highest priority first):
1. Command line arguments
2. Environment variables (FORGEJO_BASE_URL, FORGEJO_TOKEN, FORGEJO_TIMEOUT)
3. An optional YAML file with a ``forgejo:`` section

NO secrets are stored in code.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

ENV_BASE_URL = "FORGEJO_BASE_URL"
ENV_TOKEN = "FORGEJO_TOKEN"
ENV_TIMEOUT = "FORGEJO_TIMEOUT"
ENV_CONFIG_FILE = "FORGEJO_CONFIG"


@dataclass(frozen=True)
class ForgejoConfig:
    """Process-wide settings, built once at startup and passed by reference."""

    base_url: str = ""
    token: str = ""
    # None means no client-side deadline
    timeout: float | None = None

    def __repr__(self) -> str:
        token = "***" if self.token else ""
        return f"ForgejoConfig(base_url={self.base_url!r}, token={token!r}, timeout={self.timeout!r})"


def get_os_env(key: str, default: str = "") -> str:
    """Get a stripped value from an OS environment variable."""
    return os.getenv(key, default).strip()


def load_config_file(path: str | Path | None) -> dict[str, Any]:
    """Load the ``forgejo`` section of a YAML config file.

    Returns an empty dict when no path is given or the file does not exist.
    """
    if not path:
        return {}

    config_path = Path(path).expanduser()
    if not config_path.exists():
        logger.warning(f"Config file not found: {config_path}")
        return {}

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    section = data.get("forgejo", {}) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'forgejo' section must be a mapping: {config_path}")
    return section


def _parse_timeout(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return float(value)


def load_config(
    config_file: str | Path | None = None,
    base_url: str | None = None,
    token: str | None = None,
    timeout: float | None = None,
) -> ForgejoConfig:
    """Resolve the server configuration.

    Args:
        config_file: Optional YAML file path (falls back to FORGEJO_CONFIG)
        base_url: Explicit base URL, e.g. from --base-url
        token: Explicit API token, e.g. from --token
        timeout: Explicit HTTP timeout in seconds

    Returns:
        Immutable ForgejoConfig. Missing values are only warned about;
        they surface later as malformed requests or auth failures.
    """
    file_cfg = load_config_file(config_file or get_os_env(ENV_CONFIG_FILE))

    resolved_url = base_url or get_os_env(ENV_BASE_URL) or str(file_cfg.get("base_url", "") or "")
    resolved_token = token or get_os_env(ENV_TOKEN) or str(file_cfg.get("token", "") or "")

    if timeout is not None:
        resolved_timeout = timeout
    else:
        resolved_timeout = _parse_timeout(get_os_env(ENV_TIMEOUT) or file_cfg.get("timeout"))

    if not resolved_url:
        logger.warning(f"No Forgejo base URL configured (set {ENV_BASE_URL})")
    if not resolved_token:
        logger.warning(f"No Forgejo token configured (set {ENV_TOKEN})")

    return ForgejoConfig(
        base_url=resolved_url.strip(),
        token=resolved_token.strip(),
        timeout=resolved_timeout,
    )
