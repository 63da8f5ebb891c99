"""Server settings loaded from a JSON config file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "configs/server_config.json"


class ServerConfig:
    """Container for server and search settings."""

    def __init__(self, payload: Optional[Dict[str, object]] = None) -> None:
        payload = payload or {}
        self.host = str(payload.get("host", "127.0.0.1"))
        self.port = int(payload.get("port", 3030))
        self.log_level = str(payload.get("log_level", "INFO"))

        search = payload.get("search") or {}
        self.use_transposition = bool(search.get("use_transposition", True))
        self.warn_empty_cells = int(search.get("warn_empty_cells", 10))

    @classmethod
    def from_json(cls, path: str | Path) -> "ServerConfig":
        config_path = Path(path)
        with config_path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
        LOGGER.debug("Loaded server config from %s", config_path)
        return cls(payload)

    def to_dict(self) -> Dict[str, object]:
        return {
            "host": self.host,
            "port": self.port,
            "log_level": self.log_level,
            "search": {
                "use_transposition": self.use_transposition,
                "warn_empty_cells": self.warn_empty_cells,
            },
        }
