"""Art-Net DMX packets and transport."""

from artnet_dmx.dmx.packet import (
    ARTDMX_PACKET_SIZE,
    ARTNET_OPCODE_DMX,
    ARTNET_PORT,
    ARTNET_PROTOCOL_VERSION,
    ArtDmxPacket,
    build_artdmx_packet,
)
from artnet_dmx.dmx.address import NodeAddress
from artnet_dmx.dmx.controller import ArtNetController
from artnet_dmx.dmx.universe import (
    DMX_CHANNEL_COUNT,
    DMX_CHANNEL_MAX,
    DMX_CHANNEL_MIN,
    is_valid_dmx_channel,
)

__all__ = [
    "ArtDmxPacket",
    "ArtNetController",
    "NodeAddress",
    "build_artdmx_packet",
    "ARTDMX_PACKET_SIZE",
    "ARTNET_OPCODE_DMX",
    "ARTNET_PORT",
    "ARTNET_PROTOCOL_VERSION",
    "DMX_CHANNEL_COUNT",
    "DMX_CHANNEL_MIN",
    "DMX_CHANNEL_MAX",
    "is_valid_dmx_channel",
]
