from __future__ import annotations

from artnet_dmx.dmx.universe import (
    DMX_CHANNEL_COUNT,
    clamp_dmx_value,
    create_channel_buffer,
    is_valid_dmx_channel,
    writable_span,
)


def test_create_channel_buffer_contract() -> None:
    buffer = create_channel_buffer()
    assert len(buffer) == DMX_CHANNEL_COUNT
    assert not any(buffer)


def test_valid_channels_are_one_based() -> None:
    assert not is_valid_dmx_channel(0)
    assert is_valid_dmx_channel(1)
    assert is_valid_dmx_channel(512)
    assert not is_valid_dmx_channel(513)


def test_clamp_dmx_value() -> None:
    assert clamp_dmx_value(-1) == 0
    assert clamp_dmx_value(128) == 128
    assert clamp_dmx_value(256) == 255


def test_writable_span() -> None:
    assert writable_span(1, 4) == 4
    assert writable_span(510, 5) == 3
    assert writable_span(512, 1) == 1
    assert writable_span(0, 4) == 0
    assert writable_span(513, 4) == 0
