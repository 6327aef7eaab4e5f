"""
Definitions shared throughout osc_sdk_python.

This module provides:
    - arguments: OscRgba, OscMidi and IMPULSE argument values
    - contents: message/bundle classification and size limits
    - errors: OscError codes and OscException
    - time_tag: OscTimeTag
"""

from .arguments import IMPULSE, OscImpulse, OscMidi, OscRgba
from .contents import (
    MAX_NESTING_DEPTH,
    MAX_OSC_PACKET_SIZE,
    contents_is_bundle,
    contents_is_message,
)
from .errors import OscError, OscException
from .time_tag import IMMEDIATE, OscTimeTag

__all__ = [
    "IMPULSE",
    "OscImpulse",
    "OscMidi",
    "OscRgba",
    "MAX_NESTING_DEPTH",
    "MAX_OSC_PACKET_SIZE",
    "contents_is_bundle",
    "contents_is_message",
    "OscError",
    "OscException",
    "IMMEDIATE",
    "OscTimeTag",
]
