"""Settings loaded from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Cyclegraph settings, read from ``CYCLEGRAPH_*`` variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="CYCLEGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Sort nodes and successors before building a graph so the reported
    # cycles do not depend on the order of entries in the edge file.
    sort_nodes: bool = False

    # 0 means no limit
    max_cycles_shown: int = Field(default=0, ge=0)
