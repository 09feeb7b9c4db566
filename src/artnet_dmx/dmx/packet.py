"""ArtDMX packet model and wire encoder."""

from __future__ import annotations

import struct
from typing import Iterable

from artnet_dmx.dmx.universe import (
    DMX_CHANNEL_COUNT,
    clamp_dmx_value,
    create_channel_buffer,
    is_valid_dmx_channel,
    writable_span,
)

ARTNET_PORT = 6454
ARTNET_HEADER = b"Art-Net\x00"
ARTNET_OPCODE_DMX = 0x5000
ARTNET_PROTOCOL_VERSION = 14
ARTDMX_HEADER_SIZE = 18
ARTDMX_PACKET_SIZE = ARTDMX_HEADER_SIZE + DMX_CHANNEL_COUNT

# Opcode and universe are little-endian; version and length are big-endian.
_ARTDMX_HEADER = struct.Struct("<8sH")
_ARTDMX_FIELDS = struct.Struct(">HBB")
_ARTDMX_ADDRESS = struct.Struct("<H")
_ARTDMX_LENGTH = struct.Struct(">H")


def build_artdmx_packet(
    universe: int,
    dmx_data: bytes,
    sequence: int = 0,
    physical: int = 0,
) -> bytes:
    """
    Build an ArtDMX packet.

    Expects exactly 512 channels of slot data without DMX start code.
    """
    if len(dmx_data) != DMX_CHANNEL_COUNT:
        raise ValueError(f"ArtDMX payload must be {DMX_CHANNEL_COUNT} bytes, got {len(dmx_data)}")

    packet = bytearray()
    packet.extend(_ARTDMX_HEADER.pack(ARTNET_HEADER, ARTNET_OPCODE_DMX))
    packet.extend(_ARTDMX_FIELDS.pack(ARTNET_PROTOCOL_VERSION, sequence & 0xFF, physical & 0xFF))
    packet.extend(_ARTDMX_ADDRESS.pack(universe & 0xFFFF))
    packet.extend(_ARTDMX_LENGTH.pack(len(dmx_data)))
    packet.extend(dmx_data)
    return bytes(packet)


class ArtDmxPacket:
    """
    One full-length DMX universe frame.

    Channels are addressed 1-512 by callers and start blacked out. Writes
    outside that range are dropped without error so that callers can push
    fixture maps blindly. The sequence number belongs to the controller and
    is stamped just before the frame goes out.
    """

    def __init__(self, universe: int = 0):
        self._universe = universe & 0xFFFF
        self._sequence = 0
        self._physical = 0
        self._data = create_channel_buffer()

    @property
    def header(self) -> bytes:
        return ARTNET_HEADER

    @property
    def opcode(self) -> int:
        return ARTNET_OPCODE_DMX

    @property
    def protocol_version(self) -> int:
        return ARTNET_PROTOCOL_VERSION

    @property
    def sequence(self) -> int:
        return self._sequence

    @property
    def physical(self) -> int:
        return self._physical

    @property
    def universe(self) -> int:
        return self._universe

    @property
    def length(self) -> int:
        return DMX_CHANNEL_COUNT

    @property
    def channels(self) -> bytes:
        """Snapshot of the 512 channel slots, index 0 = channel 1."""
        return bytes(self._data)

    def set_channel(self, channel: int, value: int) -> None:
        """Set a 1-based DMX channel. Out-of-range channels are ignored."""
        if not is_valid_dmx_channel(channel):
            return
        self._data[channel - 1] = clamp_dmx_value(value)

    def set_channels(self, start_channel: int, values: Iterable[int]) -> None:
        """
        Write consecutive channels starting at ``start_channel``.

        Values that would run past channel 512 are dropped, and an
        out-of-range start channel makes this a no-op.
        """
        values = list(values)
        count = writable_span(start_channel, len(values))
        if count == 0:
            return
        offset = start_channel - 1
        self._data[offset:offset + count] = bytes(clamp_dmx_value(v) for v in values[:count])

    def get_channel(self, channel: int) -> int:
        """Read a 1-based DMX channel; out-of-range channels read as 0."""
        if not is_valid_dmx_channel(channel):
            return 0
        return self._data[channel - 1]

    def clear(self) -> None:
        """Blackout: reset every channel to zero."""
        self._data = create_channel_buffer()

    def set_sequence(self, seq: int) -> None:
        # Called by ArtNetController right before transmission.
        self._sequence = seq & 0xFF

    def to_bytes(self) -> bytes:
        return build_artdmx_packet(
            universe=self._universe,
            dmx_data=bytes(self._data),
            sequence=self._sequence,
            physical=self._physical,
        )

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __len__(self) -> int:
        return ARTDMX_PACKET_SIZE

    def __repr__(self) -> str:
        active = sum(1 for v in self._data if v)
        return (
            f"ArtDmxPacket(universe={self._universe}, sequence={self._sequence}, "
            f"active_channels={active})"
        )
