"""
Startup configuration: the Figma access token and the response size limit.

The token comes from a JSON config file (``--config``, the same file MCP hosts
use to launch servers) or from ``FIGMA_ACCESS_TOKEN``. The server refuses to
start without one.
"""

import json
import logging
import os
from typing import Mapping, Optional

logger = logging.getLogger("figma_mcp.config")

TOKEN_ENV_VAR = "FIGMA_ACCESS_TOKEN"
MAX_RESPONSE_BYTES_ENV_VAR = "FIGMA_MAX_RESPONSE_BYTES"


class ConfigError(RuntimeError):
    pass


def mask_token(token: str) -> str:
    return token[:8] + "..."


def _token_from_config_file(config_path: str) -> Optional[str]:
    """Read ``mcpServers.figma.env.FIGMA_ACCESS_TOKEN`` from an MCP host config."""
    logger.debug("Loading config from: %s", config_path)
    try:
        with open(config_path, "r", encoding="utf-8") as fh:
            config = json.load(fh)
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load config %s: %s", config_path, exc)
        return None

    try:
        token = config["mcpServers"]["figma"]["env"][TOKEN_ENV_VAR]
    except (KeyError, TypeError):
        logger.warning("Config %s has no mcpServers.figma.env.%s", config_path, TOKEN_ENV_VAR)
        return None

    if not isinstance(token, str) or not token.strip():
        return None
    logger.debug("Config loaded successfully")
    return token.strip()


def load_access_token(
    config_path: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Resolve the access token, preferring the config file over the environment.

    Raises ``ConfigError`` when neither source provides one.
    """
    if environ is None:
        environ = os.environ

    if config_path:
        token = _token_from_config_file(config_path)
        if token:
            return token

    token = (environ.get(TOKEN_ENV_VAR) or "").strip()
    if not token:
        raise ConfigError(
            f"{TOKEN_ENV_VAR} is required. Provide it via environment variable or config file."
        )
    logger.debug("Using %s from environment", TOKEN_ENV_VAR)
    return token


def load_max_response_bytes(
    value: Optional[int],
    default: int,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Pick the response size limit: explicit *value*, then the environment, then *default*."""
    if environ is None:
        environ = os.environ

    if value is None:
        raw = (environ.get(MAX_RESPONSE_BYTES_ENV_VAR) or "").strip()
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigError(f"{MAX_RESPONSE_BYTES_ENV_VAR} must be an integer, got {raw!r}")

    if value <= 0:
        raise ConfigError(f"Response size limit must be positive, got {value}")
    return value
