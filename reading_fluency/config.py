"""Runtime configuration for the fluency core and its HTTP layer."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MAX_TOKENS = 2000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class FluencyConfig:
    """
    Tunables shared by the engine and the API.

    Notes:
    - max_tokens bounds each side of a comparison before the cost table is built;
      None disables the check
    - port follows the PORT variable so the service drops into the same hosting setup
    """

    max_tokens: Optional[int] = DEFAULT_MAX_TOKENS
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    debug: bool = False


def _int_from_env(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_config(environ: Optional[Mapping[str, str]] = None) -> FluencyConfig:
    """Build a FluencyConfig from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        FluencyConfig with every unset variable at its default
    """
    env = os.environ if environ is None else environ

    max_tokens: Optional[int] = _int_from_env(env, "FLUENCY_MAX_TOKENS", DEFAULT_MAX_TOKENS)
    if max_tokens is not None and max_tokens <= 0:
        max_tokens = None

    return FluencyConfig(
        max_tokens=max_tokens,
        host=env.get("FLUENCY_HOST", DEFAULT_HOST),
        port=_int_from_env(env, "PORT", DEFAULT_PORT),
        debug=env.get("FLUENCY_DEBUG", "").strip().lower() in _TRUTHY,
    )
