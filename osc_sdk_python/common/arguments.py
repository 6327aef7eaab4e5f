"""
Python value types for OSC arguments that have no built-in equivalent.
"""

from collections import namedtuple


# 'r' argument: 32-bit RGBA colour, one byte per channel
OscRgba = namedtuple("OscRgba", ["red", "green", "blue", "alpha"])

# 'm' argument: 4-byte MIDI message
OscMidi = namedtuple("OscMidi", ["port", "status", "data1", "data2"])


class OscImpulse:
    """'I' argument (impulse / bang). Carries no data; all instances are equal."""

    def __eq__(self, other):
        return isinstance(other, OscImpulse)

    def __hash__(self):
        return hash(OscImpulse)

    def __repr__(self):
        return "IMPULSE"


IMPULSE = OscImpulse()
