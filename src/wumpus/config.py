"""Configuration for Hunt the Wumpus."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """Game configuration."""

    log_level: str = "WARNING"
    log_file: Path | None = None
    json_logs: bool = False
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        log_file = os.getenv("WUMPUS_LOG_FILE")
        seed = os.getenv("WUMPUS_SEED")

        return cls(
            log_level=os.getenv("WUMPUS_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=os.getenv("WUMPUS_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
            seed=_parse_seed(seed),
        )


def _parse_seed(raw: str | None) -> int | None:
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"WUMPUS_SEED must be an integer, got {raw!r}") from None
