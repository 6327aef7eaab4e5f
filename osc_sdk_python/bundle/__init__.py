"""
OSC bundle encoding, decoding and element iteration.

Example usage:
    from osc_sdk_python.bundle import OscBundle, OscBundleCursor

    data = OscBundle(elements=[OscMessage("/a", [1])]).to_bytes()

    cursor = OscBundleCursor(data)
    for element in cursor:
        print(cursor.time_tag, element.size)
"""

from .osc_bundle import (
    BUNDLE_HEADER_SIZE,
    BUNDLE_IDENTIFIER,
    OscBundle,
    OscBundleCursor,
    OscBundleElement,
)

__all__ = [
    "BUNDLE_HEADER_SIZE",
    "BUNDLE_IDENTIFIER",
    "OscBundle",
    "OscBundleCursor",
    "OscBundleElement",
]
