"""
OscMessage - An OSC address pattern with typed arguments.

Wire format:
    address pattern   padded string starting with '/'
    type tag string   padded string starting with ','
    arguments         one field per type tag ('[' and ']' delimit arrays)
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..common.contents import MAX_OSC_PACKET_SIZE
from ..common.errors import OscError, OscException
from ..utils.arg_utils import infer_type_tag, infer_type_tags, to_float32
from .osc_reader import OscReader
from .osc_writer import OscWriter

# "/\0\0\0" + ",\0\0\0"
MIN_OSC_MESSAGE_SIZE = 8


@dataclass
class OscMessage:
    """
    A single OSC message.

    Type tags are stored without the leading ','. They are inferred from
    the arguments when not given, so OscMessage("/a", [1, 2.5]) has type
    tags "if". Array arguments are nested Python lists.

    Example usage:
        message = OscMessage("/mixer/fader", [0, "main", 1.5])
        data = message.to_bytes()
        decoded = OscMessage.from_bytes(data)
        # decoded.address = "/mixer/fader"
        # decoded.arguments = [0, "main", 1.5]
    """

    address: str
    arguments: List[Any] = field(default_factory=list)
    type_tags: Optional[str] = None

    def __post_init__(self):
        self.arguments = [] if self.arguments is None else list(self.arguments)
        if self.type_tags is None:
            self.type_tags = infer_type_tags(self.arguments)
        # 'f' arguments hold what decoding will return
        self.arguments = _narrow_floats(iter(self.type_tags), self.arguments)

    @property
    def leading_byte(self):
        return self.address.encode("utf-8")[:1]

    def add(self, value, type_tag=None):
        """
        Append an argument.

        Args:
            value: Argument value
            type_tag: Explicit type tag, inferred from value when None
        """
        if type_tag is None:
            type_tag = infer_type_tag(value)
        self.type_tags += type_tag
        self.arguments.extend(_narrow_floats(iter(type_tag), [value]))

    def to_bytes(self, max_size=MAX_OSC_PACKET_SIZE) -> bytes:
        """
        Encode the message.

        Args:
            max_size: Largest accepted encoded size, None for no limit

        Returns:
            Encoded message bytes

        Raises:
            OscException: If the address or an argument cannot be encoded,
                or the result exceeds max_size
        """
        if not self.address.startswith("/"):
            raise OscException(OscError.NO_SLASH_AT_START_OF_MESSAGE, repr(self.address))
        writer = OscWriter()
        writer.write_padded_string(self.address)
        writer.write_padded_string("," + self.type_tags)
        tags = iter(self.type_tags)
        _write_values(writer, tags, self.arguments)
        if next(tags, None) is not None:
            raise OscException(OscError.TYPE_TAG_MISMATCH, "more type tags than arguments")
        if max_size is not None and len(writer) > max_size:
            raise OscException(
                OscError.PACKET_SIZE_TOO_LARGE, f"{len(writer)} > {max_size} bytes"
            )
        return writer.get_bytes()

    @classmethod
    def from_bytes(cls, data) -> "OscMessage":
        """
        Decode a message from a byte span.

        Args:
            data: bytes, bytearray or memoryview holding exactly one message

        Returns:
            Decoded OscMessage

        Raises:
            OscException: If the message is malformed
        """
        size = len(data)
        if size % 4 != 0:
            raise OscException(OscError.SIZE_NOT_MULTIPLE_OF_FOUR, f"{size} bytes")
        if size < MIN_OSC_MESSAGE_SIZE:
            raise OscException(OscError.MESSAGE_SIZE_TOO_SMALL, f"{size} bytes")
        reader = OscReader(data)
        if reader.data[0] != ord("/"):
            raise OscException(OscError.NO_SLASH_AT_START_OF_MESSAGE)
        address = reader.read_padded_string(OscError.ADDRESS_PATTERN_NOT_TERMINATED)
        if reader.remaining == 0:
            raise OscException(OscError.TYPE_TAG_STRING_MISSING)
        if reader.data[reader.i] != ord(","):
            raise OscException(OscError.NO_COMMA_IN_TYPE_TAG_STRING)
        type_tags = reader.read_padded_string(OscError.TYPE_TAG_STRING_NOT_TERMINATED)[1:]
        arguments = _read_values(reader, type_tags)
        if reader.remaining != 0:
            raise OscException(OscError.UNEXPECTED_TRAILING_DATA, f"{reader.remaining} bytes")
        return cls(address, arguments, type_tags)


def _narrow_floats(tags, values):
    narrowed = []
    for value in values:
        tag = next(tags, None)
        if tag == "[" and isinstance(value, list):
            value = _narrow_floats(tags, value)
            next(tags, None)
        elif tag == "f":
            value = to_float32(value)
        narrowed.append(value)
    return narrowed


def _write_values(writer, tags, values):
    for value in values:
        tag = next(tags, None)
        if tag is None:
            raise OscException(OscError.TYPE_TAG_MISMATCH, "more arguments than type tags")
        if tag == "[":
            if not isinstance(value, list):
                raise OscException(OscError.TYPE_TAG_MISMATCH, f"'[' does not match {value!r}")
            _write_values(writer, tags, value)
            if next(tags, None) != "]":
                raise OscException(OscError.UNBALANCED_ARRAY)
        elif tag == "]":
            raise OscException(OscError.UNBALANCED_ARRAY)
        else:
            writer.write_argument(tag, value)


def _read_values(reader, type_tags):
    stack = [[]]
    for tag in type_tags:
        if tag == "[":
            array = []
            stack[-1].append(array)
            stack.append(array)
        elif tag == "]":
            if len(stack) == 1:
                raise OscException(OscError.UNBALANCED_ARRAY)
            stack.pop()
        else:
            stack[-1].append(reader.read_argument(tag))
    if len(stack) != 1:
        raise OscException(OscError.UNBALANCED_ARRAY)
    return stack[0]
