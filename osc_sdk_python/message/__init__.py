"""
OSC message encoding and decoding.

Example usage:
    from osc_sdk_python.message import OscMessage

    message = OscMessage("/example", [42, 0.5, "text"])
    data = message.to_bytes()

    decoded = OscMessage.from_bytes(data)
    print(decoded.address, decoded.type_tags, decoded.arguments)
"""

from .osc_message import MIN_OSC_MESSAGE_SIZE, OscMessage
from .osc_reader import OscReader
from .osc_writer import OscWriter

__all__ = ["MIN_OSC_MESSAGE_SIZE", "OscMessage", "OscReader", "OscWriter"]
