"""
OscReader - Cursor for reading OSC fields from a byte span.

All multi-byte fields are big-endian and every field is padded to a
four-byte boundary, per the OSC 1.0 specification.
"""

import struct

from ..common.arguments import IMPULSE, OscMidi, OscRgba
from ..common.errors import OscError, OscException
from ..common.time_tag import OscTimeTag


class OscReader:
    """
    Reads OSC strings, numbers and blobs from a byte span.

    The span is never copied; reads past its end raise OscException
    instead of returning partial data.

    Example usage:
        reader = OscReader(data)
        address = reader.read_padded_string()
        tags = reader.read_padded_string()
        value = reader.read_argument("i")
    """

    def __init__(self, data):
        """
        Initialize the reader.

        Args:
            data: bytes, bytearray or memoryview holding OSC fields
        """
        self.data = memoryview(data)
        self.i = 0
        self.n = len(self.data)
        self._readers = {
            "i": self.read_int32,
            "f": self.read_float32,
            "s": self.read_padded_string,
            "S": self.read_padded_string,
            "b": self.read_blob,
            "h": self.read_int64,
            "d": self.read_float64,
            "t": self.read_time_tag,
            "c": self.read_char,
            "r": self.read_rgba,
            "m": self.read_midi,
            "T": lambda: True,
            "F": lambda: False,
            "N": lambda: None,
            "I": lambda: IMPULSE,
        }

    @property
    def remaining(self):
        return self.n - self.i

    def _take(self, size, what):
        if self.i + size > self.n:
            raise OscException(OscError.UNEXPECTED_END_OF_SOURCE, f"OSC {what} truncated")
        chunk = self.data[self.i:self.i + size]
        self.i += size
        return chunk

    def _unpack(self, fmt, size, what):
        return struct.unpack(fmt, self._take(size, what))[0]

    def read_padded_string(self, error=OscError.UNEXPECTED_END_OF_SOURCE):
        """
        Read a null-terminated, 4-byte padded string.

        Args:
            error: OscError raised if the terminator or padding is missing

        Returns:
            Decoded string without the terminator
        """
        start = self.i
        end = start
        while end < self.n and self.data[end] != 0:
            end += 1
        if end >= self.n:
            raise OscException(error, "OSC string not null-terminated")
        s = self.data[start:end].tobytes().decode("utf-8", errors="replace")
        padded = (end + 4) & ~0x03
        if padded > self.n:
            raise OscException(error, "OSC string padding overflow")
        self.i = padded
        return s

    def read_int32(self):
        """Read a big-endian 32-bit integer."""
        return self._unpack(">i", 4, "int32")

    def read_int64(self):
        """Read a big-endian 64-bit integer."""
        return self._unpack(">q", 8, "int64")

    def read_float32(self):
        """Read a big-endian 32-bit float."""
        return self._unpack(">f", 4, "float32")

    def read_float64(self):
        """Read a big-endian 64-bit float."""
        return self._unpack(">d", 8, "float64")

    def read_char(self):
        """Read an ASCII character stored in 32 bits."""
        return chr(self._unpack(">I", 4, "char") & 0xFF)

    def read_rgba(self):
        return OscRgba(*self._take(4, "rgba").tobytes())

    def read_midi(self):
        return OscMidi(*self._take(4, "midi").tobytes())

    def read_time_tag(self):
        return OscTimeTag.from_bytes(self._take(8, "time tag"))

    def read_blob(self):
        """
        Read an int32 size followed by that many bytes, padded to 4 bytes.

        Returns:
            Blob contents as bytes (copied out of the span)
        """
        size = self.read_int32()
        if size < 0:
            raise OscException(OscError.UNEXPECTED_END_OF_SOURCE, "OSC blob size negative")
        blob = self._take(size, "blob").tobytes()
        self._take((4 - size % 4) % 4, "blob padding")
        return blob

    def read_argument(self, type_tag):
        """
        Read one argument for the given type tag.

        Args:
            type_tag: Single OSC type tag character

        Returns:
            Python value for the argument

        Raises:
            OscException: If the type tag is unsupported or data is truncated
        """
        reader = self._readers.get(type_tag)
        if reader is None:
            raise OscException(
                OscError.UNSUPPORTED_ARGUMENT_TYPE, f"unsupported OSC arg type: {type_tag}"
            )
        return reader()
