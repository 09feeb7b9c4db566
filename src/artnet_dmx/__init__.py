"""
artnet-dmx: Art-Net DMX512 output over UDP.

Builds full-length ArtDMX frames and sends them, sequence-stamped, to a
single Art-Net node.
"""

__version__ = "0.1.0"

from artnet_dmx.core.config import Settings
from artnet_dmx.core.exceptions import ConstructionError, SendError, TransportError
from artnet_dmx.dmx.address import NodeAddress
from artnet_dmx.dmx.controller import ArtNetController
from artnet_dmx.dmx.packet import ArtDmxPacket

__all__ = [
    "ArtDmxPacket",
    "ArtNetController",
    "NodeAddress",
    "Settings",
    "TransportError",
    "ConstructionError",
    "SendError",
    "__version__",
]
