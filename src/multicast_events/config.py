"""
Event system configuration.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml


class ErrorPolicy(str, Enum):
    """How a dispatch pass reacts to a listener raising."""

    PROPAGATE = "propagate"  # Abort the pass, re-raise immediately
    COLLECT = "collect"  # Run every listener, raise DispatchError at the end


@dataclass
class EventsConfig:
    """
    Settings shared by every event registered on a host.

    Loaded from a YAML file or built directly:

        events:
          error_policy: collect
          warn_on_duplicate_listener: true
    """

    error_policy: ErrorPolicy = ErrorPolicy.PROPAGATE
    warn_on_duplicate_listener: bool = False

    @classmethod
    def from_file(cls, path: Path) -> "EventsConfig":
        """Load configuration from YAML file."""
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data.get("events", data))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EventsConfig":
        """Create config from dictionary."""
        config = cls()

        if "error_policy" in data:
            config.error_policy = ErrorPolicy(data["error_policy"])

        if "warn_on_duplicate_listener" in data:
            value = data["warn_on_duplicate_listener"]
            if not isinstance(value, bool):
                raise ValueError(
                    f"warn_on_duplicate_listener must be a boolean, got {value!r}"
                )
            config.warn_on_duplicate_listener = value

        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "error_policy": self.error_policy.value,
            "warn_on_duplicate_listener": self.warn_on_duplicate_listener,
        }

    def save(self, path: Path) -> None:
        """Save configuration to YAML file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.dump({"events": self.to_dict()}, f, default_flow_style=False)
