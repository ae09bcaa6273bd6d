"""Contratos (Protocols) entre clients e transporte."""

from .transport import AsyncTransportProtocol, TransportProtocol

__all__ = [
    "AsyncTransportProtocol",
    "TransportProtocol",
]
