"""
OSC SDK Python - Open Sound Control packet codec.

This package converts between raw OSC packet bytes and OSC messages and
bundles, and dispatches every message in a received packet to a callback.

Main classes:
    - OscPacket: Packet buffer, encoding and recursive message dispatch
    - OscMessage: Address pattern with typed arguments
    - OscBundle: Time-tagged collection of messages and nested bundles
    - OscTimeTag: 64-bit NTP time tag

Example usage:
    from osc_sdk_python import OscBundle, OscError, OscMessage, OscPacket

    # Build a packet for sending
    bundle = OscBundle(elements=[OscMessage("/example", [1, 2.5, "text"])])
    packet = OscPacket()
    error = packet.initialise_from_contents(bundle)
    data = bytes(packet.contents)

    # Process a received packet
    def process_message(time_tag, message):
        print(time_tag, message.address, message.arguments)

    packet = OscPacket()
    error = packet.initialise_from_bytes(data)
    if error == OscError.NONE:
        packet.process_message = process_message
        error = packet.process_messages()
    if error != OscError.NONE:
        print(error.message)
"""

from .bundle import OscBundle, OscBundleCursor, OscBundleElement
from .common import (
    IMMEDIATE,
    IMPULSE,
    MAX_NESTING_DEPTH,
    MAX_OSC_PACKET_SIZE,
    OscError,
    OscException,
    OscMidi,
    OscRgba,
    OscTimeTag,
    contents_is_bundle,
    contents_is_message,
)
from .message import OscMessage, OscReader, OscWriter
from .packet import OscPacket

__version__ = "0.1.0"
__all__ = [
    "IMMEDIATE",
    "IMPULSE",
    "MAX_NESTING_DEPTH",
    "MAX_OSC_PACKET_SIZE",
    "OscBundle",
    "OscBundleCursor",
    "OscBundleElement",
    "OscError",
    "OscException",
    "OscMessage",
    "OscMidi",
    "OscPacket",
    "OscReader",
    "OscRgba",
    "OscTimeTag",
    "OscWriter",
    "contents_is_bundle",
    "contents_is_message",
]
