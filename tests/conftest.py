"""
Shared fixtures for the OSC codec tests.
"""

import struct

import pytest

from osc_sdk_python import OscTimeTag

# "/example" with an empty type tag string
EXAMPLE_MESSAGE = b"/example\x00\x00\x00\x00,\x00\x00\x00"


class MessageRecorder:
    """process_message callback that records every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, time_tag, message):
        self.calls.append((time_tag, message))

    @property
    def addresses(self):
        return [message.address for _, message in self.calls]


@pytest.fixture
def recorder() -> MessageRecorder:
    return MessageRecorder()


@pytest.fixture
def example_message() -> bytes:
    return EXAMPLE_MESSAGE


@pytest.fixture
def make_bundle():
    """Build raw bundle bytes from a time tag value and raw element bytes."""

    def _make_bundle(time_tag_value, *elements):
        data = b"#bundle\x00" + OscTimeTag.from_value(time_tag_value).to_bytes()
        for element in elements:
            data += struct.pack(">i", len(element)) + element
        return data

    return _make_bundle
