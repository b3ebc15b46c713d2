"""Runtime settings for the Framer plugin MCP server."""

import os
import shlex
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


class Settings(BaseModel):
    log_level: str = Field(default_factory=lambda: os.getenv("FRAMER_PLUGIN_LOG_LEVEL", "INFO"))
    build_command: List[str] = Field(
        default_factory=lambda: shlex.split(os.getenv("FRAMER_PLUGIN_BUILD_COMMAND", "npm run build"))
    )
    # Seconds; None waits for the build forever
    build_timeout: Optional[float] = Field(
        default_factory=lambda: _optional_float(os.getenv("FRAMER_PLUGIN_BUILD_TIMEOUT"))
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
