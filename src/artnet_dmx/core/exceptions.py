"""
Custom Exceptions for artnet-dmx.

Transport failures are split by when they happen: while the controller is
being built, or while a single frame is being sent.
"""

from __future__ import annotations


class ArtNetError(Exception):
    """Base exception for all artnet-dmx errors."""

    def __init__(self, message: str, recoverable: bool = True):
        super().__init__(message)
        self.message = message
        self.recoverable = recoverable


# =============================================================================
# Transport Errors
# =============================================================================


class TransportError(ArtNetError):
    """Base exception for UDP transport errors."""
    pass


class ConstructionError(TransportError):
    """The UDP socket could not be created, bound or switched to broadcast."""

    def __init__(self, address: str, reason: str):
        super().__init__(
            f"Failed to open Art-Net transport for '{address}': {reason}",
            recoverable=False
        )
        self.address = address
        self.reason = reason


class SendError(TransportError):
    """A single ArtDMX datagram could not be handed to the network stack."""

    def __init__(self, address: str, reason: str):
        super().__init__(f"Art-Net send to '{address}' failed: {reason}", recoverable=True)
        self.address = address
        self.reason = reason


# =============================================================================
# Address Errors
# =============================================================================


class AddressError(ArtNetError):
    """Invalid node address."""

    def __init__(self, address: str, reason: str):
        super().__init__(f"Invalid node address '{address}': {reason}", recoverable=False)
        self.address = address


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(ArtNetError):
    """Missing or malformed configuration."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Configuration error in '{source}': {reason}", recoverable=False)
        self.source = source
