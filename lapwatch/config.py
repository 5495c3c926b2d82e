"""Configuration loading for stopwatch logs."""

import logging
from pathlib import Path
from dataclasses import dataclass, field
from typing import Any
import yaml

from .logs import Log, get_log


logger = logging.getLogger(__name__)


@dataclass
class LogConfig:
    """Configuration for a single log."""
    type: str
    enable: str = "true"  # only the exact string "false" disables
    options: dict[str, Any] = field(default_factory=dict)
    
    @classmethod
    def from_dict(cls, data: Any) -> "LogConfig":
        if not isinstance(data, dict):
            raise ValueError(f"Log entry must be a mapping, got: {data!r}")
        if "type" not in data:
            raise ValueError(f"Log entry is missing 'type': {data!r}")
        
        options = data.get("options") or {}
        if not isinstance(options, dict):
            raise ValueError(f"Log options must be a mapping, got: {options!r}")
        
        return cls(
            type=str(data["type"]),
            enable=_enable_string(data.get("enable", "true")),
            options=dict(options),
        )


@dataclass
class FactoryConfig:
    """Configuration for a stopwatch factory."""
    logs: list[LogConfig] = field(default_factory=lambda: [LogConfig(type="console")])
    
    @classmethod
    def load(cls, path: str | Path) -> "FactoryConfig":
        """Load from YAML. A missing file gives the defaults."""
        config_file = Path(path)
        
        if not config_file.exists():
            logger.debug("No config at %s, using defaults", config_file)
            return cls()
        
        with open(config_file) as f:
            data = yaml.safe_load(f) or {}
        
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping: {config_file}")
        
        entries = data.get("logs")
        if entries is None:
            return cls()
        if not isinstance(entries, list):
            raise ValueError(f"'logs' must be a list: {config_file}")
        
        logger.debug("Loaded %d log entries from %s", len(entries), config_file)
        return cls(logs=[LogConfig.from_dict(entry) for entry in entries])


def _enable_string(value: Any) -> str:
    """YAML turns `enable: false` into a bool; map it back to the flag string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_logs(config: FactoryConfig) -> list[Log]:
    """Create the configured logs, applying each enable flag."""
    logs = []
    for entry in config.logs:
        try:
            log = get_log(entry.type, **entry.options)
        except TypeError as e:
            raise ValueError(f"Bad options for log '{entry.type}': {entry.options!r} ({e})") from e
        log.set_enable(entry.enable)
        logs.append(log)
    return logs
