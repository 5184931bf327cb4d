from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    return float(raw) if raw else default


@dataclass
class ClientSettings:
    # Where `wiki-cli serve` listens by default
    base_url: str = field(default_factory=lambda: os.getenv("WIKI_API_URL", "http://localhost:3000").rstrip("/"))
    timeout: float = field(default_factory=lambda: _env_float("WIKI_API_TIMEOUT", 10.0))


settings = ClientSettings()
