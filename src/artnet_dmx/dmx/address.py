"""Art-Net node addressing."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from artnet_dmx.core.exceptions import AddressError
from artnet_dmx.dmx.packet import ARTNET_PORT


class NodeAddress(BaseModel):
    """
    Destination host and UDP port of an Art-Net node.

    Hosts are IPv4 addresses or names; the transport is AF_INET only.
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1)
    port: int = Field(default=ARTNET_PORT, ge=0, le=0xFFFF)

    @field_validator("host")
    @classmethod
    def _reject_ipv6(cls, host: str) -> str:
        if ":" in host:
            raise ValueError("IPv6 hosts are not supported")
        return host

    @classmethod
    def parse(cls, value: str) -> "NodeAddress":
        """
        Parse ``"host:port"`` or a bare ``"host"``.

        A missing port falls back to the Art-Net default of 6454.
        """
        text = value.strip()
        if not text:
            raise AddressError(value, "empty address")

        host, sep, port_text = text.rpartition(":")
        if not sep:
            return cls(host=text)
        if not host:
            raise AddressError(value, "missing host")
        if ":" in host:
            raise AddressError(value, "IPv6 hosts are not supported")

        try:
            port = int(port_text)
        except ValueError:
            raise AddressError(value, f"port '{port_text}' is not a number") from None
        if not 0 <= port <= 0xFFFF:
            raise AddressError(value, f"port {port} out of range")
        return cls(host=host, port=port)

    @classmethod
    def coerce(cls, value: "NodeAddress | str | tuple[str, int]") -> "NodeAddress":
        if isinstance(value, NodeAddress):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if len(value) != 2:
            raise AddressError(str(value), "expected a (host, port) pair")
        host, port = value
        try:
            return cls(host=host, port=port)
        except ValidationError as e:
            raise AddressError(f"{host}:{port}", str(e)) from e

    def as_tuple(self) -> tuple[str, int]:
        return (self.host, self.port)

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"
