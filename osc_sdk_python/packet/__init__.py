"""
OSC packet construction and message dispatch.

Example usage:
    from osc_sdk_python.packet import OscPacket

    packet = OscPacket()
    packet.initialise_from_bytes(data)
    packet.process_message = lambda time_tag, message: print(message.address)
    error = packet.process_messages()
"""

from .osc_packet import OscPacket, ProcessMessage

__all__ = ["OscPacket", "ProcessMessage"]
