"""
Error codes shared by the packet engine and the message/bundle codecs.

Packet operations return an OscError (OscError.NONE on success). The
codecs raise OscException, which carries the same code, and the packet
engine hands that code back to its caller unchanged.
"""

from enum import IntEnum


class OscError(IntEnum):
    """Closed set of OSC error codes."""

    NONE = 0

    # Packet
    INVALID_CONTENTS = 1
    PACKET_SIZE_TOO_LARGE = 2
    CONTENTS_EMPTY = 3
    CALLBACK_UNDEFINED = 4
    NESTING_TOO_DEEP = 5

    # Message decoding
    SIZE_NOT_MULTIPLE_OF_FOUR = 10
    MESSAGE_SIZE_TOO_SMALL = 11
    NO_SLASH_AT_START_OF_MESSAGE = 12
    ADDRESS_PATTERN_NOT_TERMINATED = 13
    TYPE_TAG_STRING_MISSING = 14
    NO_COMMA_IN_TYPE_TAG_STRING = 15
    TYPE_TAG_STRING_NOT_TERMINATED = 16
    UNSUPPORTED_ARGUMENT_TYPE = 17
    UNEXPECTED_END_OF_SOURCE = 18
    UNBALANCED_ARRAY = 19
    UNEXPECTED_TRAILING_DATA = 20

    # Message encoding
    INVALID_ARGUMENT = 30
    TYPE_TAG_MISMATCH = 31

    # Bundle decoding
    BUNDLE_SIZE_TOO_SMALL = 40
    INVALID_BUNDLE_IDENTIFIER = 41
    NEGATIVE_BUNDLE_ELEMENT_SIZE = 42
    BUNDLE_ELEMENT_SIZE_TOO_LARGE = 43
    BUNDLE_ELEMENT_NOT_AVAILABLE = 44

    @property
    def message(self):
        """Human-readable description of the error code."""
        return _MESSAGES[self]


_MESSAGES = {
    OscError.NONE: "No error",
    OscError.INVALID_CONTENTS: "Invalid or uninitialised OSC contents",
    OscError.PACKET_SIZE_TOO_LARGE: "OSC packet size exceeds maximum packet size",
    OscError.CONTENTS_EMPTY: "OSC contents empty",
    OscError.CALLBACK_UNDEFINED: "Process message callback undefined",
    OscError.NESTING_TOO_DEEP: "OSC bundles nested too deeply",
    OscError.SIZE_NOT_MULTIPLE_OF_FOUR: "Size is not a multiple of four",
    OscError.MESSAGE_SIZE_TOO_SMALL: "OSC message size too small",
    OscError.NO_SLASH_AT_START_OF_MESSAGE: "No '/' at start of OSC message",
    OscError.ADDRESS_PATTERN_NOT_TERMINATED: "Source ends before end of OSC address pattern",
    OscError.TYPE_TAG_STRING_MISSING: "Source ends before start of OSC type tag string",
    OscError.NO_COMMA_IN_TYPE_TAG_STRING: "No ',' at start of OSC type tag string",
    OscError.TYPE_TAG_STRING_NOT_TERMINATED: "Source ends before end of OSC type tag string",
    OscError.UNSUPPORTED_ARGUMENT_TYPE: "Unsupported OSC argument type",
    OscError.UNEXPECTED_END_OF_SOURCE: "Unexpected end of source",
    OscError.UNBALANCED_ARRAY: "Unbalanced OSC array type tags",
    OscError.UNEXPECTED_TRAILING_DATA: "Data follows the last OSC argument",
    OscError.INVALID_ARGUMENT: "Argument value cannot be encoded",
    OscError.TYPE_TAG_MISMATCH: "Type tags do not match arguments",
    OscError.BUNDLE_SIZE_TOO_SMALL: "OSC bundle size too small",
    OscError.INVALID_BUNDLE_IDENTIFIER: "OSC bundle does not start with '#bundle'",
    OscError.NEGATIVE_BUNDLE_ELEMENT_SIZE: "Negative OSC bundle element size",
    OscError.BUNDLE_ELEMENT_SIZE_TOO_LARGE: "OSC bundle element size exceeds remaining bundle size",
    OscError.BUNDLE_ELEMENT_NOT_AVAILABLE: "No OSC bundle element available",
}


class OscException(ValueError):
    """
    Raised by the OSC codecs when contents cannot be encoded or decoded.

    Attributes:
        error: The OscError code describing the failure
    """

    def __init__(self, error, detail=None):
        self.error = OscError(error)
        text = self.error.message
        if detail:
            text = f"{text}: {detail}"
        super().__init__(text)
