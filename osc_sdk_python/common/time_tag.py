"""
OSC time tag: a 64-bit NTP timestamp split into seconds and fraction.
"""

import struct
from dataclasses import dataclass

from .errors import OscError, OscException

_UINT32_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class OscTimeTag:
    """
    64-bit OSC time tag.

    Attributes:
        seconds: Seconds since 1900-01-01 (upper 32 bits)
        fraction: Fractional part of a second in 1/2^32 units (lower 32 bits)
    """

    seconds: int = 0
    fraction: int = 0

    def __post_init__(self):
        for name in ("seconds", "fraction"):
            half = getattr(self, name)
            if not isinstance(half, int) or not 0 <= half <= _UINT32_MAX:
                raise OscException(
                    OscError.INVALID_ARGUMENT, f"time tag {name} out of range: {half!r}"
                )

    @property
    def value(self) -> int:
        """The full 64-bit value."""
        return (self.seconds << 32) | self.fraction

    @classmethod
    def from_value(cls, value: int) -> "OscTimeTag":
        if not 0 <= value <= 0xFFFFFFFFFFFFFFFF:
            raise OscException(OscError.INVALID_ARGUMENT, f"time tag out of range: {value!r}")
        return cls(value >> 32, value & _UINT32_MAX)

    def to_bytes(self) -> bytes:
        return struct.pack(">II", self.seconds, self.fraction)

    @classmethod
    def from_bytes(cls, data) -> "OscTimeTag":
        """
        Decode a big-endian time tag from the first 8 bytes of data.

        Raises:
            OscException: If fewer than 8 bytes are available
        """
        if len(data) < 8:
            raise OscException(OscError.UNEXPECTED_END_OF_SOURCE, "time tag truncated")
        seconds, fraction = struct.unpack(">II", bytes(data[:8]))
        return cls(seconds, fraction)

    def is_immediate(self) -> bool:
        return self.value == 1


# Special value meaning "process immediately"
IMMEDIATE = OscTimeTag(0, 1)
