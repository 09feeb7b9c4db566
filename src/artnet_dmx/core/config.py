"""
Configuration Management for artnet-dmx.

Uses Pydantic Settings for type-safe configuration with environment
variable support and YAML file loading.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from artnet_dmx.core.exceptions import ConfigError
from artnet_dmx.dmx.address import NodeAddress
from artnet_dmx.dmx.packet import ARTNET_PORT


class ArtNetConfig(BaseModel):
    """Art-Net node and output configuration."""
    host: str = "255.255.255.255"  # Limited broadcast reaches any node on the LAN
    port: int = Field(default=ARTNET_PORT, ge=0, le=0xFFFF)
    universe: int = Field(default=0, ge=0, le=0xFFFF)

    def node_address(self) -> NodeAddress:
        return NodeAddress(host=self.host, port=self.port)


class Settings(BaseSettings):
    """
    Main application settings.

    Can be configured via:
    - Environment variables (prefixed with ARTNET_DMX_)
    - YAML config file
    - Direct instantiation
    """

    artnet: ArtNetConfig = Field(default_factory=ArtNetConfig)

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="ARTNET_DMX_",
        env_nested_delimiter="__",
    )

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(str(path), str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(str(path), "top-level YAML document must be a mapping")
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(str(path), str(e)) from e

    def to_yaml(self, path: Path) -> None:
        """Save settings to a YAML file."""
        with open(path, "w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False)
