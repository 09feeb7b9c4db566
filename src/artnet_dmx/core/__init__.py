"""Core system components for artnet-dmx."""

from artnet_dmx.core.exceptions import (
    ArtNetError,
    TransportError,
    ConstructionError,
    SendError,
    AddressError,
    ConfigError,
)
from artnet_dmx.core.logging import configure_logging

__all__ = [
    "ArtNetError",
    "TransportError",
    "ConstructionError",
    "SendError",
    "AddressError",
    "ConfigError",
    "configure_logging",
]
