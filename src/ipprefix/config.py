"""
Configuration management for ipprefix.

Loads error-reporting and logging settings from environment variables or
a .env file.
"""

import os
from pathlib import Path
from dataclasses import dataclass

# Try to load from .env file if python-dotenv is available
try:
    from dotenv import load_dotenv
    # Check common locations for .env
    env_locations = [
        Path.home() / ".ipprefix" / ".env",
        Path.home() / ".config" / "ipprefix" / ".env",
        Path.cwd() / ".env",
    ]
    for env_path in env_locations:
        if env_path.exists():
            load_dotenv(env_path)
            break
except ImportError:
    pass


_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass
class PrefixConfig:
    """Runtime settings shared by the library and the CLI."""

    # Suppressed mode: report only the error kind, no message payload
    skip_error_details: bool = False

    # Logging
    log_level: str = "INFO"
    log_to_file: bool = False
    log_dir: str | None = None

    @property
    def detailed_errors(self) -> bool:
        return not self.skip_error_details

    @classmethod
    def from_env(cls) -> "PrefixConfig":
        """Load configuration from environment variables."""
        return cls(
            skip_error_details=_env_flag("IPPREFIX_SKIP_ERROR_DETAILS"),
            log_level=os.getenv("IPPREFIX_LOG_LEVEL", "INFO"),
            log_to_file=_env_flag("IPPREFIX_LOG_TO_FILE"),
            log_dir=os.getenv("IPPREFIX_LOG_DIR") or None,
        )


# Global config instance
_config: PrefixConfig | None = None


def get_config() -> PrefixConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = PrefixConfig.from_env()
    return _config


def set_config(config: PrefixConfig | None) -> None:
    """Set the global configuration instance (None reloads from the environment)."""
    global _config
    _config = config
