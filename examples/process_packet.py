#!/usr/bin/env python3
"""
Example: Deconstruct an OSC packet and print every message it contains.

This script demonstrates how to use the OscPacket class to dispatch each
message of a packet (including messages nested inside bundles) to a
callback along with the time tag of its enclosing bundle.

Usage:
    python process_packet.py
    python process_packet.py --hex 2f6578616d706c65000000002c000000
    python process_packet.py --hex 2f6578616d706c65000000002c000000 --verbose
"""

import argparse
import os
import sys

# Allow running without installing the package (add project root to path)
_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _root not in sys.path:
    sys.path.insert(0, _root)

from osc_sdk_python import OscBundle, OscError, OscMessage, OscPacket, OscTimeTag


def build_demo_packet():
    """Encode a bundle holding a message and a nested bundle."""
    inner = OscBundle(OscTimeTag(3_900_000_001, 0))
    inner.add(OscMessage("/demo/inner", [True, [1, 2, 3]]))

    outer = OscBundle(OscTimeTag(3_900_000_000, 0))
    outer.add(OscMessage("/demo/outer", [42, 0.5, "text"]))
    outer.add(inner)
    return outer.to_bytes()


def main():
    parser = argparse.ArgumentParser(description="Print the messages in an OSC packet")

    parser.add_argument(
        "--hex",
        type=str,
        default=None,
        help="Packet bytes as a hex string (default: built-in demo bundle)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Print type tags and raw packet size",
    )

    args = parser.parse_args()

    if args.hex:
        try:
            data = bytes.fromhex(args.hex)
        except ValueError as e:
            print(f"[Main] Invalid hex input: {e}")
            return 1
    else:
        data = build_demo_packet()

    packet = OscPacket()
    error = packet.initialise_from_bytes(data)
    if error != OscError.NONE:
        print(f"[Main] Cannot load packet: {error.message}")
        return 1

    if args.verbose:
        print(f"[Main] Packet size: {packet.size} bytes")

    count = 0

    def process_message(time_tag, message):
        nonlocal count
        count += 1
        when = "none" if time_tag is None else f"0x{time_tag.value:016X}"
        print(f"[Message {count}] {message.address} time_tag={when} args={message.arguments}")
        if args.verbose:
            print(f"  type tags: ,{message.type_tags}")

    packet.process_message = process_message
    error = packet.process_messages()
    if error != OscError.NONE:
        print(f"[Main] Processing stopped after {count} message(s): {error.message}")
        return 1

    print(f"[Main] Done, {count} message(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
