"""
Registry CLI configuration and settings.

Centralizes configuration for the registry CLI: logging and output
defaults, overridable through environment variables.
"""
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

OUTPUT_FORMATS = ["table", "json"]


@dataclass(frozen=True)
class RegistryConfig:
    """Configuration for registry CLI operations."""

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None  # No file logging when unset
    json_logs: bool = False

    # Output
    output_format: str = "table"

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}, got {self.output_format!r}"
            )

    @classmethod
    def from_env(cls) -> "RegistryConfig":
        """Create config from environment variables."""
        return cls(
            log_level=os.getenv("REGISTRY_LOG_LEVEL", "INFO").upper(),
            log_dir=os.getenv("REGISTRY_LOG_DIR") or None,
            json_logs=os.getenv("REGISTRY_JSON_LOGS", "false").lower() == "true",
            output_format=os.getenv("REGISTRY_OUTPUT_FORMAT", "table").lower(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for display."""
        return {
            "log_level": self.log_level,
            "log_dir": self.log_dir,
            "json_logs": self.json_logs,
            "output_format": self.output_format,
        }
