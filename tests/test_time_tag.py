import pytest

from osc_sdk_python import IMMEDIATE, OscError, OscException, OscTimeTag


class TestOscTimeTag:
    def test_value_combines_halves(self):
        time_tag = OscTimeTag(0x83AA7E80, 0x80000000)
        assert time_tag.value == 0x83AA7E8080000000

    def test_from_value(self):
        assert OscTimeTag.from_value(0x0000000100000002) == OscTimeTag(1, 2)

    def test_to_bytes_is_big_endian(self):
        assert OscTimeTag(1, 2).to_bytes() == b"\x00\x00\x00\x01\x00\x00\x00\x02"

    def test_from_bytes(self):
        assert OscTimeTag.from_bytes(b"\x00\x00\x00\x01\x00\x00\x00\x02") == OscTimeTag(1, 2)

    def test_from_bytes_truncated(self):
        with pytest.raises(OscException) as excinfo:
            OscTimeTag.from_bytes(b"\x00\x00\x00\x01")
        assert excinfo.value.error == OscError.UNEXPECTED_END_OF_SOURCE

    def test_immediate(self):
        assert IMMEDIATE.value == 1
        assert IMMEDIATE.is_immediate()
        assert not OscTimeTag(1, 0).is_immediate()

    def test_defaults_are_zero(self):
        assert OscTimeTag() == OscTimeTag(0, 0)
        assert OscTimeTag(5) == OscTimeTag(5, 0)
        assert not OscTimeTag().is_immediate()
        assert IMMEDIATE == OscTimeTag(0, 1)

    @pytest.mark.parametrize("seconds, fraction", [(-1, 0), (0, 1 << 32)])
    def test_out_of_range_halves(self, seconds, fraction):
        with pytest.raises(OscException) as excinfo:
            OscTimeTag(seconds, fraction)
        assert excinfo.value.error == OscError.INVALID_ARGUMENT

    def test_from_value_out_of_range(self):
        with pytest.raises(OscException):
            OscTimeTag.from_value(1 << 64)
