import struct

import pytest

from osc_sdk_python import (
    IMMEDIATE,
    OscBundle,
    OscBundleCursor,
    OscError,
    OscException,
    OscMessage,
    OscTimeTag,
)

HEADER = b"#bundle\x00" + IMMEDIATE.to_bytes()


class TestEncode:
    def test_empty_bundle(self):
        assert OscBundle().to_bytes() == HEADER

    def test_elements_are_size_prefixed(self, example_message: bytes):
        bundle = OscBundle(OscTimeTag(1, 0), [OscMessage("/example")])
        assert bundle.to_bytes() == (
            b"#bundle\x00\x00\x00\x00\x01\x00\x00\x00\x00"
            + b"\x00\x00\x00\x10"
            + example_message
        )

    def test_invalid_element(self):
        with pytest.raises(OscException) as excinfo:
            OscBundle(elements=["/not/contents"]).to_bytes()
        assert excinfo.value.error == OscError.INVALID_CONTENTS

    def test_max_size(self):
        bundle = OscBundle(elements=[OscMessage("/a", [b"x" * 100])])
        with pytest.raises(OscException) as excinfo:
            bundle.to_bytes(max_size=64)
        assert excinfo.value.error == OscError.PACKET_SIZE_TOO_LARGE


class TestCursor:
    def test_iterates_elements_without_copy(self, make_bundle, example_message: bytes):
        data = make_bundle(5, example_message, b"/a\x00\x00,\x00\x00\x00")
        cursor = OscBundleCursor(data)
        assert cursor.time_tag == OscTimeTag.from_value(5)

        elements = list(cursor)
        assert [element.size for element in elements] == [16, 8]
        assert isinstance(elements[0].contents, memoryview)
        assert bytes(elements[0].contents) == example_message
        assert not cursor.has_next()

    def test_zero_elements(self, make_bundle):
        cursor = OscBundleCursor(make_bundle(1))
        assert not cursor.has_next()
        with pytest.raises(OscException) as excinfo:
            cursor.next_element()
        assert excinfo.value.error == OscError.BUNDLE_ELEMENT_NOT_AVAILABLE

    def test_zero_size_element_is_returned(self, make_bundle):
        element = OscBundleCursor(make_bundle(1, b"")).next_element()
        assert element.size == 0

    @pytest.mark.parametrize(
        "data, error",
        [
            (b"#bundle\x00", OscError.BUNDLE_SIZE_TOO_SMALL),
            (HEADER + b"\x00\x00", OscError.SIZE_NOT_MULTIPLE_OF_FOUR),
            (b"#bundlx\x00" + IMMEDIATE.to_bytes(), OscError.INVALID_BUNDLE_IDENTIFIER),
        ],
    )
    def test_malformed_header(self, data, error):
        with pytest.raises(OscException) as excinfo:
            OscBundleCursor(data)
        assert excinfo.value.error == error

    @pytest.mark.parametrize(
        "element, error",
        [
            (struct.pack(">i", -4), OscError.NEGATIVE_BUNDLE_ELEMENT_SIZE),
            (struct.pack(">i", 8) + b"/a\x00\x00", OscError.BUNDLE_ELEMENT_SIZE_TOO_LARGE),
            (struct.pack(">i", 2) + b"/a\x00\x00", OscError.SIZE_NOT_MULTIPLE_OF_FOUR),
        ],
    )
    def test_malformed_element(self, element, error):
        cursor = OscBundleCursor(HEADER + element)
        with pytest.raises(OscException) as excinfo:
            cursor.next_element()
        assert excinfo.value.error == error


class TestDecode:
    def test_round_trip_nested(self):
        inner = OscBundle(OscTimeTag(2, 0), [OscMessage("/inner", [1.5])])
        outer = OscBundle(
            OscTimeTag(1, 0),
            [OscMessage("/first", [1, "a"]), inner, OscMessage("/last")],
        )
        assert OscBundle.from_bytes(outer.to_bytes()) == outer

    def test_round_trip_float32(self):
        inner = OscBundle(elements=[OscMessage("/b", [[0.3]])])
        bundle = OscBundle(OscTimeTag(1, 0), [OscMessage("/a", [0.1]), inner])
        assert OscBundle.from_bytes(bundle.to_bytes()) == bundle

    def test_trailing_data_in_element(self, make_bundle):
        with pytest.raises(OscException) as excinfo:
            OscBundle.from_bytes(make_bundle(1, b"/a\x00\x00,\x00\x00\x00JUNK"))
        assert excinfo.value.error == OscError.UNEXPECTED_TRAILING_DATA

    def test_empty_element(self, make_bundle):
        with pytest.raises(OscException) as excinfo:
            OscBundle.from_bytes(make_bundle(1, b""))
        assert excinfo.value.error == OscError.CONTENTS_EMPTY

    def test_invalid_element_contents(self, make_bundle):
        with pytest.raises(OscException) as excinfo:
            OscBundle.from_bytes(make_bundle(1, b"xyz\x00"))
        assert excinfo.value.error == OscError.INVALID_CONTENTS

    def test_nesting_limit(self):
        bundle = OscBundle(elements=[OscMessage("/deep")])
        for _ in range(3):
            bundle = OscBundle(elements=[bundle])
        data = bundle.to_bytes()

        assert OscBundle.from_bytes(data, max_nesting_depth=4) == bundle
        with pytest.raises(OscException) as excinfo:
            OscBundle.from_bytes(data, max_nesting_depth=3)
        assert excinfo.value.error == OscError.NESTING_TOO_DEEP
