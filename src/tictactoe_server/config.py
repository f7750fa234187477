"""Application configuration."""
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List


@dataclass
class Settings:
    host: str = "0.0.0.0"
    http_port: int = 1919
    events_port: int = 1920
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])
    static_dir: str = ""
    log_level: str = "INFO"


@lru_cache
def get_config() -> Settings:
    return Settings(
        host=os.environ.get("TTT_HOST", "0.0.0.0"),
        http_port=int(os.environ.get("TTT_HTTP_PORT", "1919")),
        events_port=int(os.environ.get("TTT_EVENTS_PORT", "1920")),
        allowed_origins=os.environ.get("TTT_ALLOWED_ORIGINS", "*").split(","),
        static_dir=os.environ.get("TTT_STATIC_DIR", ""),
        log_level=os.environ.get("TTT_LOG_LEVEL", "INFO").upper(),
    )
