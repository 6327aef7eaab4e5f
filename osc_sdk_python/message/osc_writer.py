"""
OscWriter - Builds OSC fields into a growing byte buffer.
"""

import struct

from ..common.arguments import IMPULSE, OscMidi, OscRgba
from ..common.errors import OscError, OscException
from ..common.time_tag import OscTimeTag
from ..utils.arg_utils import to_python

# Type tags that carry no argument data, with the value each stands for
_NO_PAYLOAD = {"T": True, "F": False, "N": None, "I": IMPULSE}


class OscWriter:
    """
    Writes big-endian, 4-byte aligned OSC fields.

    Example usage:
        writer = OscWriter()
        writer.write_padded_string("/example")
        writer.write_padded_string(",i")
        writer.write_argument("i", 42)
        data = writer.get_bytes()
    """

    def __init__(self):
        self._buffer = bytearray()
        self._writers = {
            "i": self.write_int32,
            "f": self.write_float32,
            "s": self.write_padded_string,
            "S": self.write_padded_string,
            "b": self.write_blob,
            "h": self.write_int64,
            "d": self.write_float64,
            "t": self.write_time_tag,
            "c": self.write_char,
            "r": self.write_rgba,
            "m": self.write_midi,
        }

    def __len__(self):
        return len(self._buffer)

    def get_bytes(self) -> bytes:
        return bytes(self._buffer)

    def _pack(self, fmt, value, what):
        try:
            self._buffer += struct.pack(fmt, value)
        except (struct.error, OverflowError, TypeError) as e:
            raise OscException(OscError.INVALID_ARGUMENT, f"bad {what} {value!r}: {e}") from e

    def write_bytes(self, data):
        """Write raw bytes with no size prefix or padding."""
        self._buffer += data

    def write_padded_string(self, text):
        """Write a null-terminated string padded to 4 bytes."""
        if not isinstance(text, str):
            raise OscException(OscError.INVALID_ARGUMENT, f"expected str, got {text!r}")
        raw = text.encode("utf-8")
        if b"\x00" in raw:
            raise OscException(OscError.INVALID_ARGUMENT, "OSC string contains a null byte")
        self._buffer += raw + b"\x00" * (4 - len(raw) % 4)

    def write_int32(self, value):
        self._pack(">i", value, "int32")

    def write_int64(self, value):
        self._pack(">q", value, "int64")

    def write_float32(self, value):
        self._pack(">f", value, "float32")

    def write_float64(self, value):
        self._pack(">d", value, "float64")

    def write_char(self, value):
        if not isinstance(value, str) or len(value) != 1 or ord(value) > 0xFF:
            raise OscException(OscError.INVALID_ARGUMENT, f"bad char {value!r}")
        self._pack(">I", ord(value), "char")

    def write_rgba(self, value):
        self._pack_four(OscRgba, value, "rgba")

    def write_midi(self, value):
        self._pack_four(OscMidi, value, "midi")

    def _pack_four(self, kind, value, what):
        try:
            self._buffer += struct.pack(">4B", *kind(*value))
        except (struct.error, TypeError) as e:
            raise OscException(OscError.INVALID_ARGUMENT, f"bad {what} {value!r}: {e}") from e

    def write_time_tag(self, value):
        if not isinstance(value, OscTimeTag):
            raise OscException(OscError.INVALID_ARGUMENT, f"expected OscTimeTag, got {value!r}")
        self._buffer += value.to_bytes()

    def write_blob(self, value):
        """Write an int32 size, the bytes, then zero padding to 4 bytes."""
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise OscException(OscError.INVALID_ARGUMENT, f"expected bytes, got {value!r}")
        value = bytes(value)
        self.write_int32(len(value))
        self._buffer += value + b"\x00" * ((4 - len(value) % 4) % 4)

    def write_argument(self, type_tag, value):
        """
        Write one argument for the given type tag.

        Tags with no payload (T, F, N, I) are checked against the value
        but write nothing.

        Raises:
            OscException: If the tag is unsupported or the value does not fit it
        """
        value = to_python(value)
        if type_tag in _NO_PAYLOAD:
            expected = _NO_PAYLOAD[type_tag]
            if type(value) is not type(expected) or value != expected:
                raise OscException(
                    OscError.TYPE_TAG_MISMATCH, f"'{type_tag}' does not match {value!r}"
                )
            return
        writer = self._writers.get(type_tag)
        if writer is None:
            raise OscException(
                OscError.UNSUPPORTED_ARGUMENT_TYPE, f"unsupported OSC arg type: {type_tag}"
            )
        writer(value)
