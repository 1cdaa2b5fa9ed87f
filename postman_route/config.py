"""Configuration for the route solver."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

import yaml

from postman_route.errors import ConfigError
from postman_route.types import PairingStrategy


@dataclass
class SolverConfig:
    """Tunable settings for a solver run."""

    # How odd-degree intersections are paired
    pairing: PairingStrategy = PairingStrategy.SEQUENTIAL

    # Text encoding of the street list and the route file
    encoding: str = "utf-8"

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> SolverConfig:
        """Build a config from a plain mapping, validating keys and values.

        Args:
            data: Mapping of field name to value. ``None`` yields defaults.

        Returns:
            A new SolverConfig.

        Raises:
            ConfigError: On unknown keys or invalid values.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in data if k not in known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        kwargs: Dict[str, Any] = {}
        if "pairing" in data:
            value = data["pairing"]
            if isinstance(value, PairingStrategy):
                kwargs["pairing"] = value
            elif isinstance(value, str):
                try:
                    kwargs["pairing"] = PairingStrategy.from_string(value)
                except ValueError as exc:
                    raise ConfigError(str(exc)) from None
            else:
                raise ConfigError(f"'pairing' must be a string, got {value!r}")
        if "encoding" in data:
            value = data["encoding"]
            if not isinstance(value, str) or not value:
                raise ConfigError(f"'encoding' must be a non-empty string, got {value!r}")
            kwargs["encoding"] = value
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> SolverConfig:
        """Build a config from a YAML document.

        An empty document yields the defaults.
        """
        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML configuration: {exc}") from exc
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return {"pairing": self.pairing.name.lower(), "encoding": self.encoding}


# Default configuration instance
DEFAULT_CONFIG = SolverConfig()
