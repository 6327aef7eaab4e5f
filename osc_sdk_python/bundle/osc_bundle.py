"""
OscBundle - A time-tagged collection of OSC messages and nested bundles.

Wire format:
    "#bundle\\0"       8-byte identifier
    time tag          64-bit NTP timestamp
    elements          int32 size followed by that many bytes of contents,
                      repeated until the end of the bundle
"""

import struct
from dataclasses import dataclass, field
from typing import Any, List

from ..common.contents import (
    MAX_NESTING_DEPTH,
    MAX_OSC_PACKET_SIZE,
    contents_is_bundle,
    contents_is_message,
)
from ..common.errors import OscError, OscException
from ..common.time_tag import IMMEDIATE, OscTimeTag
from ..message.osc_message import OscMessage
from ..message.osc_writer import OscWriter

BUNDLE_IDENTIFIER = b"#bundle\x00"

# Identifier plus time tag
BUNDLE_HEADER_SIZE = 16


@dataclass
class OscBundleElement:
    """
    One element of a bundle being iterated.

    Attributes:
        size: Size of the element contents in bytes
        contents: memoryview into the bundle; only valid while the bundle
            bytes are alive
    """

    size: int
    contents: memoryview


class OscBundleCursor:
    """
    Walks the elements of an encoded bundle without copying them.

    Example usage:
        cursor = OscBundleCursor(data)
        print(cursor.time_tag)
        while cursor.has_next():
            element = cursor.next_element()
            handle(element.contents)
    """

    def __init__(self, data):
        """
        Validate the bundle header and position the cursor on the first element.

        Args:
            data: bytes, bytearray or memoryview holding exactly one bundle

        Raises:
            OscException: If the header is malformed
        """
        size = len(data)
        if size < BUNDLE_HEADER_SIZE:
            raise OscException(OscError.BUNDLE_SIZE_TOO_SMALL, f"{size} bytes")
        if size % 4 != 0:
            raise OscException(OscError.SIZE_NOT_MULTIPLE_OF_FOUR, f"{size} bytes")
        self.data = memoryview(data)
        if self.data[:8].tobytes() != BUNDLE_IDENTIFIER:
            raise OscException(OscError.INVALID_BUNDLE_IDENTIFIER)
        self.time_tag = OscTimeTag.from_bytes(self.data[8:BUNDLE_HEADER_SIZE])
        self.index = BUNDLE_HEADER_SIZE

    def __iter__(self):
        while self.has_next():
            yield self.next_element()

    def has_next(self):
        """True if any bytes remain after the current element."""
        return self.index < len(self.data)

    def next_element(self):
        """
        Read the next element and advance past it.

        Returns:
            OscBundleElement for the element

        Raises:
            OscException: If no element remains or its size field is invalid
        """
        if not self.has_next():
            raise OscException(OscError.BUNDLE_ELEMENT_NOT_AVAILABLE)
        start = self.index + 4
        if start > len(self.data):
            raise OscException(OscError.UNEXPECTED_END_OF_SOURCE, "bundle element size truncated")
        size = struct.unpack(">i", self.data[self.index:start])[0]
        if size < 0:
            raise OscException(OscError.NEGATIVE_BUNDLE_ELEMENT_SIZE, str(size))
        if size % 4 != 0:
            raise OscException(OscError.SIZE_NOT_MULTIPLE_OF_FOUR, f"bundle element of {size} bytes")
        end = start + size
        if end > len(self.data):
            raise OscException(
                OscError.BUNDLE_ELEMENT_SIZE_TOO_LARGE,
                f"{size} > {len(self.data) - start} bytes",
            )
        self.index = end
        return OscBundleElement(size, self.data[start:end])


@dataclass
class OscBundle:
    """
    A bundle of OSC contents sharing one time tag.

    Elements are OscMessage or OscBundle values.

    Example usage:
        bundle = OscBundle(OscTimeTag.from_value(0x83AA7E8000000000))
        bundle.add(OscMessage("/a", [1]))
        bundle.add(OscBundle(elements=[OscMessage("/b")]))
        data = bundle.to_bytes()
    """

    time_tag: OscTimeTag = IMMEDIATE
    elements: List[Any] = field(default_factory=list)

    def __post_init__(self):
        self.elements = [] if self.elements is None else list(self.elements)

    @property
    def leading_byte(self):
        return BUNDLE_IDENTIFIER[:1]

    def add(self, contents):
        """Append an OscMessage or OscBundle."""
        self.elements.append(contents)

    def to_bytes(self, max_size=MAX_OSC_PACKET_SIZE) -> bytes:
        """
        Encode the bundle and all nested contents.

        Args:
            max_size: Largest accepted encoded size, None for no limit

        Returns:
            Encoded bundle bytes

        Raises:
            OscException: If an element cannot be encoded or the result
                exceeds max_size
        """
        writer = OscWriter()
        writer.write_bytes(BUNDLE_IDENTIFIER)
        writer.write_time_tag(self.time_tag)
        for element in self.elements:
            if not (contents_is_message(element) or contents_is_bundle(element)):
                raise OscException(OscError.INVALID_CONTENTS, repr(element))
            data = element.to_bytes(max_size=None)
            writer.write_int32(len(data))
            writer.write_bytes(data)
        if max_size is not None and len(writer) > max_size:
            raise OscException(
                OscError.PACKET_SIZE_TOO_LARGE, f"{len(writer)} > {max_size} bytes"
            )
        return writer.get_bytes()

    @classmethod
    def from_bytes(cls, data, max_nesting_depth=MAX_NESTING_DEPTH) -> "OscBundle":
        """
        Decode a bundle and everything nested inside it.

        Args:
            data: bytes, bytearray or memoryview holding exactly one bundle
            max_nesting_depth: Deepest accepted bundle nesting

        Returns:
            Decoded OscBundle

        Raises:
            OscException: If the bundle or any element is malformed
        """
        return cls._decode(memoryview(data), 0, max_nesting_depth)

    @classmethod
    def _decode(cls, data, depth, max_nesting_depth):
        if depth >= max_nesting_depth:
            raise OscException(OscError.NESTING_TOO_DEEP, f"depth {depth}")
        cursor = OscBundleCursor(data)
        bundle = cls(cursor.time_tag)
        for element in cursor:
            if element.size == 0:
                raise OscException(OscError.CONTENTS_EMPTY)
            if contents_is_message(element.contents):
                bundle.add(OscMessage.from_bytes(element.contents))
            elif contents_is_bundle(element.contents):
                bundle.add(cls._decode(element.contents, depth + 1, max_nesting_depth))
            else:
                raise OscException(OscError.INVALID_CONTENTS)
        return bundle
