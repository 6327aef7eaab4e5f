"""
Contents classification and shared size limits.

OSC contents are either a message (first byte '/') or a bundle
(first byte '#'). Any other leading byte means the contents are invalid.
"""

# Largest UDP payload that fits a 1500-byte Ethernet MTU
MAX_OSC_PACKET_SIZE = 1472

# Deepest bundle nesting accepted when deconstructing contents
MAX_NESTING_DEPTH = 32

MESSAGE_LEADING_BYTE = b"/"
BUNDLE_LEADING_BYTE = b"#"


def _leading_byte(contents):
    if isinstance(contents, (bytes, bytearray)):
        return bytes(contents[:1])
    if isinstance(contents, memoryview):
        return contents[:1].tobytes()
    # OscMessage / OscBundle values
    return getattr(contents, "leading_byte", b"")


def contents_is_message(contents):
    """
    Check whether contents are an OSC message.

    Args:
        contents: Bytes-like span or an OscMessage/OscBundle value

    Returns:
        True if the first byte is '/'
    """
    return _leading_byte(contents) == MESSAGE_LEADING_BYTE


def contents_is_bundle(contents):
    """
    Check whether contents are an OSC bundle.

    Args:
        contents: Bytes-like span or an OscMessage/OscBundle value

    Returns:
        True if the first byte is '#'
    """
    return _leading_byte(contents) == BUNDLE_LEADING_BYTE
