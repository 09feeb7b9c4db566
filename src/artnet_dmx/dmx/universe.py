"""Canonical DMX universe sizing and indexing helpers."""

from __future__ import annotations

DMX_CHANNEL_COUNT = 512
DMX_CHANNEL_MIN = 1
DMX_CHANNEL_MAX = DMX_CHANNEL_COUNT
DMX_VALUE_MIN = 0
DMX_VALUE_MAX = 255


def create_channel_buffer() -> bytearray:
    """Create a blacked-out buffer of 512 channel slots (no start code)."""
    return bytearray(DMX_CHANNEL_COUNT)


def is_valid_dmx_channel(channel: int) -> bool:
    """Return True when a channel index is a valid 1-based DMX slot."""
    return DMX_CHANNEL_MIN <= channel <= DMX_CHANNEL_MAX


def clamp_dmx_value(value: int) -> int:
    """Clamp an integer into the 0-255 DMX slot range."""
    return max(DMX_VALUE_MIN, min(DMX_VALUE_MAX, int(value)))


def writable_span(start_channel: int, count: int) -> int:
    """Number of values that fit when writing ``count`` slots from ``start_channel``."""
    if not is_valid_dmx_channel(start_channel):
        return 0
    return min(count, DMX_CHANNEL_MAX - start_channel + 1)
