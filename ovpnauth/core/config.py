"""
Configuration module for ovpnauth.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict

from ..types.errors import ConfigurationError
from ..util.config import (
    get_bool_config, get_config_value, load_config_file, merge_configs, parse_bool_value
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Settings shared by the challenge codec and the profile resolver"""
    strict_challenge_flags: bool = False
    skip_blank_host_lines: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables"""
        return cls(
            strict_challenge_flags=get_bool_config("STRICT_CHALLENGE_FLAGS", False),
            skip_blank_host_lines=get_bool_config("SKIP_BLANK_HOST_LINES", True),
            log_level=get_config_value("LOG_LEVEL", "INFO").upper(),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create configuration from a mapping, rejecting unknown keys"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {', '.join(unknown)}",
                config_key=unknown[0],
            )
        values = dict(data)
        for f in fields(cls):
            if f.name not in values:
                continue
            value = values[f.name]
            try:
                if f.type is bool:
                    values[f.name] = parse_bool_value(value)
                elif not isinstance(value, str):
                    raise ValueError(f"expected a string, got {value!r}")
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid value for {f.name}: {e}",
                    config_key=f.name,
                    config_value=value,
                ) from e

        config = cls(**values)
        config.validate()
        return config

    @classmethod
    def from_file(cls, path: str, **overrides: Any) -> "Config":
        """Load configuration from a JSON or YAML file"""
        return cls.from_dict(merge_configs(load_config_file(path), overrides))

    def validate(self) -> bool:
        """Validate the configuration"""
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {self.log_level}",
                config_key="log_level",
                config_value=self.log_level,
            )
        return True


def configure_logging(config: Config) -> None:
    """Apply the configured log level to the package logger."""
    config.validate()
    logging.basicConfig(format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logging.getLogger("ovpnauth").setLevel(config.log_level.upper())
