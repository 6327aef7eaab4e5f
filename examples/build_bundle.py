#!/usr/bin/env python3
"""
Example: Build an OSC bundle from numpy data and print a hex dump.

Usage:
    python build_bundle.py
    python build_bundle.py --joints 8
"""

import argparse
import os
import sys

import numpy as np

# Allow running without installing the package (add project root to path)
_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _root not in sys.path:
    sys.path.insert(0, _root)

from osc_sdk_python import IMMEDIATE, OscBundle, OscError, OscMessage, OscPacket


def format_datagram(data):
    """Hex dump with 16 bytes per line and an ASCII column."""
    lines = [f"size {len(data)}"]
    for offset in range(0, len(data), 16):
        chunk = data[offset:offset + 16]
        hex_str = " ".join(f"{b:02x}" for b in chunk)
        ascii_str = "".join(chr(b) if 32 <= b <= 126 else "." for b in chunk)
        lines.append(f"{offset:>4}   {hex_str:<48}  |{ascii_str}|")
    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(description="Build and dump an OSC bundle")

    parser.add_argument(
        "--joints",
        type=int,
        default=4,
        help="Number of joint angles to send (default: 4)",
    )

    args = parser.parse_args()

    angles = np.linspace(0.0, 1.0, args.joints, dtype=np.float32)

    bundle = OscBundle(IMMEDIATE)
    bundle.add(OscMessage("/robot/joints", [np.int32(args.joints)] + list(angles)))
    bundle.add(OscMessage("/robot/raw", [angles]))

    packet = OscPacket()
    error = packet.initialise_from_contents(bundle)
    if error != OscError.NONE:
        print(f"[Main] Cannot build packet: {error.message}")
        return 1

    print(format_datagram(bytes(packet.contents)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
