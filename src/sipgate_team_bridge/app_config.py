from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from sipgate_team_bridge.contact_mapper import SIPGATE_TEAM_CONTACTS_URL
from sipgate_team_bridge.sipgate.client import DEFAULT_BASE_URL


@dataclass
class AppConfig:
    api_base_url: str
    contacts_url: str
    timeout_seconds: float
    page_size: int
    log_level: str
    log_consumers: list | None


def load_json_config() -> dict:
    config_path = Path.cwd() / "config.json"
    if config_path.exists():
        with open(config_path) as f:
            return json.load(f)
    return {}


def parse_app_config(config: dict) -> AppConfig:
    return AppConfig(
        api_base_url=str(config.get("ApiBaseUrl", DEFAULT_BASE_URL)).strip() or DEFAULT_BASE_URL,
        contacts_url=config.get("ContactsUrl", SIPGATE_TEAM_CONTACTS_URL),
        timeout_seconds=float(config.get("TimeoutSeconds", 30)),
        page_size=int(config.get("PageSize", 5000)),
        log_level=config.get("LogLevel", "INFO"),
        log_consumers=config.get("LogConsumers"),
    )


def resolve_api_key() -> str:
    return os.environ.get("SIPGATE_API_KEY", "").strip()
