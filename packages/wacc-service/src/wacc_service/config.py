"""
Environment-driven settings for the service and the remote client.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from wacc_engine import DEFAULT_UNIT_SCALE

DEFAULT_API_URL = "https://wacc-backend.vercel.app"
DEFAULT_TIMEOUT_SECONDS = 7.0


@dataclass(frozen=True)
class ServiceConfig:
    cors_origins: Tuple[str, ...] = ("*",)
    unit_scale: float = float(DEFAULT_UNIT_SCALE)
    log_level: str = "INFO"


def get_service_config() -> ServiceConfig:
    origins = os.getenv("WACC_CORS_ORIGINS", "*")
    return ServiceConfig(
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
        unit_scale=float(os.getenv("WACC_UNIT_SCALE", str(DEFAULT_UNIT_SCALE))),
        log_level=os.getenv("WACC_LOG_LEVEL", "INFO").upper(),
    )


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS


def get_client_config() -> ClientConfig:
    return ClientConfig(
        base_url=os.getenv("WACC_API_URL", DEFAULT_API_URL).rstrip("/"),
        timeout=float(os.getenv("WACC_API_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))),
    )
