"""
OscPacket - Fixed-capacity OSC packet and message dispatch.

A packet holds the raw bytes exchanged with a transport. Received packets
are deconstructed recursively: every message found, at any bundle depth,
is passed to the packet's process_message callback together with the
time tag of the nearest enclosing bundle.
"""

from typing import Callable, Optional

from ..bundle.osc_bundle import OscBundleCursor
from ..common.contents import (
    MAX_NESTING_DEPTH,
    MAX_OSC_PACKET_SIZE,
    contents_is_bundle,
    contents_is_message,
)
from ..common.errors import OscError, OscException
from ..common.time_tag import OscTimeTag
from ..message.osc_message import OscMessage

ProcessMessage = Callable[[Optional[OscTimeTag], OscMessage], None]


class OscPacket:
    """
    OSC packet: up to MAX_OSC_PACKET_SIZE bytes plus a message callback.

    Every operation returns an OscError; OscError.NONE means success.
    Data errors are never raised. Exceptions raised by process_message
    itself are not caught, except OscException, whose code is returned.

    Example usage (receive):
        def process_message(time_tag, message):
            print(time_tag, message.address, message.arguments)

        packet = OscPacket()
        error = packet.initialise_from_bytes(data)
        if error == OscError.NONE:
            packet.process_message = process_message
            error = packet.process_messages()

    Example usage (send):
        packet = OscPacket()
        error = packet.initialise_from_contents(OscMessage("/example", [1]))
        if error == OscError.NONE:
            sock.sendto(packet.contents, address)
    """

    def __init__(self, max_nesting_depth: int = MAX_NESTING_DEPTH):
        """
        Initialize an empty packet.

        Args:
            max_nesting_depth: Deepest bundle nesting accepted by
                process_messages (default: MAX_NESTING_DEPTH)
        """
        self.max_nesting_depth = max_nesting_depth
        self._buffer = bytearray()
        self.process_message: Optional[ProcessMessage] = None

    @property
    def size(self) -> int:
        """Number of bytes held by the packet."""
        return len(self._buffer)

    @property
    def contents(self) -> memoryview:
        """Read-only view of the packet bytes."""
        return memoryview(self._buffer).toreadonly()

    def initialise(self):
        """Empty the packet and clear the callback."""
        self._buffer = bytearray()
        self.process_message = None

    def initialise_from_contents(self, contents) -> OscError:
        """
        Encode an OscMessage or OscBundle into the packet for sending.

        The callback is cleared. On failure the packet is left empty.

        Args:
            contents: OscMessage or OscBundle

        Returns:
            OscError.NONE, OscError.INVALID_CONTENTS if contents is neither a
            message nor a bundle, OscError.PACKET_SIZE_TOO_LARGE if it encodes
            to more than MAX_OSC_PACKET_SIZE bytes, or the encoder's error
        """
        self.initialise()
        if not (contents_is_message(contents) or contents_is_bundle(contents)):
            return OscError.INVALID_CONTENTS
        try:
            data = contents.to_bytes(max_size=MAX_OSC_PACKET_SIZE)
        except OscException as e:
            return e.error
        self._buffer = bytearray(data)
        return OscError.NONE

    def initialise_from_bytes(self, source) -> OscError:
        """
        Copy received bytes into the packet. The bytes are not interpreted.

        The callback is cleared. On failure the packet is left empty.

        Args:
            source: bytes, bytearray or memoryview

        Returns:
            OscError.NONE, or OscError.PACKET_SIZE_TOO_LARGE if source is
            longer than MAX_OSC_PACKET_SIZE
        """
        self.initialise()
        if len(source) > MAX_OSC_PACKET_SIZE:
            return OscError.PACKET_SIZE_TOO_LARGE
        self._buffer = bytearray(source)
        return OscError.NONE

    def process_messages(self) -> OscError:
        """
        Pass every message in the packet to process_message.

        Messages are delivered depth-first in element order. Processing
        stops at the first error; messages after it are not delivered.

        Returns:
            OscError.NONE if every message was delivered,
            OscError.CALLBACK_UNDEFINED if process_message is not set,
            otherwise the first error found
        """
        if self.process_message is None:
            return OscError.CALLBACK_UNDEFINED
        try:
            self._deconstruct(None, self.contents, 0)
        except OscException as e:
            return e.error
        return OscError.NONE

    def _deconstruct(self, time_tag, contents, depth):
        if len(contents) == 0:
            raise OscException(OscError.CONTENTS_EMPTY)

        if contents_is_message(contents):
            message = OscMessage.from_bytes(contents)
            self.process_message(time_tag, message)
            return

        if contents_is_bundle(contents):
            if depth >= self.max_nesting_depth:
                raise OscException(OscError.NESTING_TOO_DEEP, f"depth {depth}")
            cursor = OscBundleCursor(contents)
            while cursor.has_next():
                element = cursor.next_element()
                # nearest enclosing bundle's time tag replaces the outer one
                self._deconstruct(cursor.time_tag, element.contents, depth + 1)
            return

        raise OscException(OscError.INVALID_CONTENTS)
