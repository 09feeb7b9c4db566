"""
Art-Net Controller: sequenced ArtDMX transmission to a single node.

Owns one broadcast-capable UDP socket bound to an ephemeral local port.
Every send is a single fire-and-forget datagram; there is no retry and no
acknowledgement. The controller is not thread-safe: wrap it in a lock if
several threads share it.
"""

from __future__ import annotations

import socket
from typing import TYPE_CHECKING, Optional, Union

import structlog

from artnet_dmx.core.exceptions import ConstructionError, SendError
from artnet_dmx.core.logging import configure_logging
from artnet_dmx.dmx.address import NodeAddress
from artnet_dmx.dmx.packet import ArtDmxPacket

if TYPE_CHECKING:
    from artnet_dmx.core.config import Settings

logger = structlog.get_logger()

LOCAL_BIND_ADDRESS = ("0.0.0.0", 0)


class ArtNetController:
    """UDP sender that stamps and transmits ArtDMX packets."""

    def __init__(
        self,
        node_address: Union[NodeAddress, str, tuple[str, int]],
        universe: int = 0,
    ):
        self._node_address = NodeAddress.coerce(node_address)
        self._universe = universe & 0xFFFF
        self._sequence = 0

        # Stats
        self._frames_sent = 0
        self._errors = 0

        self._socket: Optional[socket.socket] = self._open_socket()
        logger.info(
            "Art-Net controller opened",
            node=str(self._node_address),
            local_port=self._socket.getsockname()[1],
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ArtNetController":
        configure_logging(settings.log_level)
        return cls(settings.artnet.node_address(), universe=settings.artnet.universe)

    def _open_socket(self) -> socket.socket:
        sock = None
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            sock.bind(LOCAL_BIND_ADDRESS)
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        except OSError as e:
            if sock is not None:
                sock.close()
            logger.error(
                "Art-Net controller open failed",
                node=str(self._node_address),
                error=str(e),
            )
            raise ConstructionError(str(self._node_address), str(e)) from e
        return sock

    @property
    def node_address(self) -> NodeAddress:
        return self._node_address

    @property
    def universe(self) -> int:
        """Universe used by blackout() when none is given."""
        return self._universe

    @property
    def sequence(self) -> int:
        """Sequence number the next packet will be stamped with."""
        return self._sequence

    @property
    def frames_sent(self) -> int:
        return self._frames_sent

    @property
    def errors(self) -> int:
        return self._errors

    @property
    def closed(self) -> bool:
        return self._socket is None

    def send_dmx(self, packet: ArtDmxPacket) -> None:
        """
        Stamp ``packet`` with the next sequence number and send it.

        The counter wraps 255 -> 0 and advances even when the send fails.
        A closed controller raises before stamping anything.
        Success only means the datagram reached the OS network stack.
        """
        if self._socket is None:
            raise SendError(str(self._node_address), "controller is closed")

        packet.set_sequence(self._sequence)
        self._sequence = (self._sequence + 1) & 0xFF

        data = packet.to_bytes()
        try:
            self._socket.sendto(data, self._node_address.as_tuple())
        except OSError as e:
            self._errors += 1
            if self._errors % 100 == 1:
                logger.error(
                    "Art-Net send failed",
                    node=str(self._node_address),
                    universe=packet.universe,
                    error=str(e),
                )
            raise SendError(str(self._node_address), str(e)) from e

        self._frames_sent += 1
        logger.debug(
            "ArtDMX frame sent",
            universe=packet.universe,
            sequence=packet.sequence,
            size=len(data),
        )

    def blackout(self, universe: Optional[int] = None) -> None:
        """Send an all-zero frame to ``universe`` (default: the controller's universe)."""
        self.send_dmx(ArtDmxPacket(self._universe if universe is None else universe))

    def close(self) -> None:
        if self._socket is None:
            return
        self._socket.close()
        self._socket = None
        logger.info(
            "Art-Net controller closed",
            node=str(self._node_address),
            frames_sent=self._frames_sent,
            errors=self._errors,
        )

    def get_stats(self) -> dict:
        """Get transmission statistics."""
        return {
            "node": str(self._node_address),
            "open": self._socket is not None,
            "sequence": self._sequence,
            "frames_sent": self._frames_sent,
            "errors": self._errors,
            "error_rate": self._errors / max(1, self._frames_sent),
        }

    def __enter__(self) -> "ArtNetController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
